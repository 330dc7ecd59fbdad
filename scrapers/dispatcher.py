# scrapers/dispatcher.py
"""
Entry point of the scrapers: URL -> Recipe.

Validates the URL, works out which supported site it belongs to (before any
network call), fetches the page once and hands the markup to that site's
scraper. Failures come out as ScraperError subclasses; nothing is retried.
"""
import logging
from concurrent.futures import ThreadPoolExecutor, TimeoutError as FutureTimeoutError
from enum import Enum
from urllib.parse import urlparse

import requests

from config import (
    USER_AGENT, ACCEPT_HEADER, ACCEPT_LANGUAGE, REQUEST_TIMEOUT, CHUNK_SIZE,
    RECIPE_WEBSITES
)
from scrapers.cuisineaz_scraper import CuisineAZScraper
from scrapers.marmiton_scraper import MarmitonScraper
from scrapers.sevenfiftyg_scraper import SevenFiftyGScraper
from scrapers.scraper_error import (
    ScraperError, InvalidUrlError, UnsupportedSiteError, NetworkError, ParseError
)

logger = logging.getLogger(__name__)


class Site(Enum):
    CUISINEAZ = 'CUISINEAZ'
    SEPT_CENT_CINQUANTE_G = 'SEPT_CENT_CINQUANTE_G'
    MARMITON = 'MARMITON'


SITE_HOSTS = {Site[website['site']]: tuple(website['hosts']) for website in RECIPE_WEBSITES}

# Stateless, shared by every call
SCRAPERS = {
    Site.CUISINEAZ: CuisineAZScraper(),
    Site.SEPT_CENT_CINQUANTE_G: SevenFiftyGScraper(),
    Site.MARMITON: MarmitonScraper(),
}

HEADERS = {
    'User-Agent': USER_AGENT,
    'Accept': ACCEPT_HEADER,
    'Accept-Language': ACCEPT_LANGUAGE,
}


def is_valid_url(url):
    """True for an absolute http(s) URL with a host"""
    if not isinstance(url, str) or not url or any(c.isspace() for c in url):
        return False

    try:
        parsed = urlparse(url)
        # Raises ValueError on a malformed port
        parsed.port
    except ValueError:
        return False

    return parsed.scheme in ('http', 'https') and bool(parsed.hostname)


def classify_site(url):
    """
    Match the URL's hostname against the supported sites

    Args:
        url (str): Valid absolute URL

    Returns:
        Site: Matching site, or None
    """
    hostname = (urlparse(url).hostname or '').rstrip('.')

    for site, hosts in SITE_HOSTS.items():
        for host in hosts:
            if hostname == host or hostname == f"www.{host}":
                return site

    return None


def _response_encoding(response):
    content_type = response.headers.get('content-type', '').lower()
    if 'charset' in content_type and response.encoding:
        return response.encoding
    return 'utf-8'


def _download(url, holder):
    """Request and read the whole body; runs on a worker thread"""
    try:
        response = requests.get(
            url,
            headers=HEADERS,
            timeout=REQUEST_TIMEOUT,
            allow_redirects=True,
            stream=True
        )
    except requests.exceptions.Timeout as e:
        raise NetworkError(f"Erreur réseau: délai de {REQUEST_TIMEOUT} s dépassé") from e
    except requests.exceptions.RequestException as e:
        raise NetworkError(f"Erreur réseau: {e}") from e

    holder['response'] = response
    try:
        if not 200 <= response.status_code < 300:
            raise NetworkError(f"Erreur HTTP {response.status_code}", status_code=response.status_code)

        chunks = []
        for chunk in response.iter_content(chunk_size=CHUNK_SIZE):
            if holder.get('expired'):
                break
            chunks.append(chunk)
    except requests.exceptions.RequestException as e:
        raise NetworkError(f"Erreur réseau: {e}") from e
    finally:
        response.close()

    return b''.join(chunks), _response_encoding(response)


def fetch_html(url):
    """
    Download a page with a hard wall-clock deadline

    The request and the body read run on a worker thread. When REQUEST_TIMEOUT
    elapses first, the response is closed and NetworkError is raised right away;
    a slow-drip body cannot hold the caller past the deadline.

    Args:
        url (str): Page URL

    Returns:
        str: Decoded page markup

    Raises:
        NetworkError: Request failed, timed out or returned a non-2xx status
        ParseError: Body could not be decoded
    """
    logger.info(f"Fetching {url}")

    holder = {}
    executor = ThreadPoolExecutor(max_workers=1)
    try:
        future = executor.submit(_download, url, holder)
        try:
            content, encoding = future.result(timeout=REQUEST_TIMEOUT)
        except FutureTimeoutError as e:
            holder['expired'] = True
            response = holder.get('response')
            if response is not None:
                response.close()
            logger.warning(f"Gave up on {url} after {REQUEST_TIMEOUT} s")
            raise NetworkError(f"Erreur réseau: délai de {REQUEST_TIMEOUT} s dépassé") from e
    finally:
        executor.shutdown(wait=False)

    try:
        return content.decode(encoding, errors='replace')
    except LookupError as e:
        raise ParseError(f"Impossible d'analyser la recette: encodage inconnu {encoding}") from e


def scrape_recipe(url):
    """
    Scrape one recipe page

    Args:
        url (str): Recipe page URL; returned unchanged as Recipe.source_url

    Returns:
        Recipe: Extracted recipe

    Raises:
        InvalidUrlError: Not an absolute http(s) URL
        UnsupportedSiteError: Host is not one of the supported sites
        NetworkError: Fetch failed
        NoRecipeFoundError: Page had no recipe content
        ParseError: Page could not be processed
    """
    try:
        if not is_valid_url(url):
            raise InvalidUrlError()

        site = classify_site(url)
        if site is None:
            raise UnsupportedSiteError()

        scraper = SCRAPERS[site]
        logger.info(f"Using {scraper.site_name} scraper ({scraper.strategy}) for {url}")

        html_content = fetch_html(url)

        try:
            return scraper.extract_recipe(url, html_content)
        except ScraperError:
            raise
        except Exception as e:
            logger.error(f"Error extracting recipe info from {url}: {str(e)}", exc_info=True)
            raise ParseError(f"Impossible d'analyser la recette: {e}") from e

    except ScraperError as e:
        logger.error(f"Scraping failed for {url!r}: {e.kind.value} - {e.message}")
        raise
