# scrapers/sevenfiftyg_scraper.py
import logging

from processors.durations import format_iso_duration
from processors.html_utils import make_soup, decode_html_entities
from processors.json_ld import extract_structured_recipe
from processors.recipe_normalizer import normalize_fields, has_recipe_content, build_recipe
from scrapers.scraper_error import NoRecipeFoundError

logger = logging.getLogger(__name__)


class SevenFiftyGScraper:
    """
    Scraper for 750g.com, structured data only

    750g prints literal newlines inside its JSON-LD strings, so blocks go
    through the newline repair before parsing. Its text fields also carry
    HTML entities (d&#039;avocat) that JSON parsing leaves in place.
    """

    site_name = '750g'
    strategy = 'structured'

    def extract_recipe(self, url, html_content):
        """
        Extract a recipe from a 750g page

        Args:
            url (str): URL of the recipe
            html_content (str): HTML content of the recipe page

        Returns:
            Recipe: Extracted recipe

        Raises:
            NoRecipeFoundError: No usable JSON-LD Recipe on the page
        """
        soup = make_soup(html_content)

        recipe_data = extract_structured_recipe(soup, sanitize=True)
        if recipe_data is None:
            logger.warning(f"No JSON-LD recipe data found in {url}")
            raise NoRecipeFoundError()

        fields = normalize_fields(recipe_data, url)
        fields['title'] = decode_html_entities(fields['title'])
        fields['ingredients'] = [decode_html_entities(i) for i in fields['ingredients']]
        fields['instructions'] = [decode_html_entities(s) for s in fields['instructions']]

        if not has_recipe_content(fields):
            logger.warning(f"JSON-LD recipe data in {url} has no title, ingredients or instructions")
            raise NoRecipeFoundError()

        for key in ('prep_time', 'cook_time', 'total_time'):
            fields[key] = self._format_time(fields[key])

        logger.info(f"Extracted recipe from JSON-LD: {fields['title']}")
        return build_recipe(fields, url)

    def _format_time(self, iso_duration):
        """750g times come out as "1h 30 min"; unparseable values are kept as is"""
        if not iso_duration:
            return None
        return format_iso_duration(iso_duration) or iso_duration
