# processors/html_utils.py
import html
import re
from bs4 import BeautifulSoup

WHITESPACE_PATTERN = re.compile(r'\s+')

# Values some sites print in place of an empty field
PLACEHOLDER_VALUES = {'-', '–', '—'}


def make_soup(html_content):
    """Parse page markup; lxml copes with the broken HTML we get in the wild"""
    if isinstance(html_content, BeautifulSoup):
        return html_content
    return BeautifulSoup(html_content or '', 'lxml')


def decode_html_entities(text):
    """
    Decode numeric (&#233; &#xE9;) and named (&eacute; &amp; ...) entities

    Non-breaking spaces come back as plain spaces.
    """
    if not text:
        return text
    return html.unescape(text).replace('\xa0', ' ')


def clean_text(text):
    """Collapse runs of whitespace and trim; returns None for blank text"""
    if text is None:
        return None
    text = WHITESPACE_PATTERN.sub(' ', text.replace('\xa0', ' ')).strip()
    return text or None


def node_text(node):
    """Readable text of a tag (entities already decoded by the parser)"""
    if node is None:
        return None
    return clean_text(node.get_text())


def none_if_placeholder(value):
    """Map a "no data" marker such as a lone dash to None"""
    if value is None:
        return None
    value = value.strip()
    if not value or value in PLACEHOLDER_VALUES:
        return None
    return value


def attr_value(tag, attr):
    """Trimmed attribute value, or None when missing or blank"""
    if tag is None:
        return None
    value = tag.get(attr)
    if isinstance(value, list):
        value = ' '.join(value)
    if value is None:
        return None
    return value.strip() or None


def first_srcset_url(srcset):
    """First URL of a srcset attribute ("a.jpg 1x, b.jpg 2x" -> "a.jpg")"""
    if not srcset:
        return None
    candidates = [part for part in re.split(r'[\s,]+', srcset.strip()) if part]
    return candidates[0] if candidates else None


def extract_meta_content(soup, property_name):
    """Content of an Open Graph style <meta property=... content=...> tag"""
    meta = soup.select_one(f'meta[property="{property_name}"]') or soup.select_one(f'meta[name="{property_name}"]')
    return attr_value(meta, 'content')
