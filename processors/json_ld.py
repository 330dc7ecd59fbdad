# processors/json_ld.py
"""
Structured recipe data (schema.org JSON-LD) discovery.

Pages often carry several ``application/ld+json`` blocks (breadcrumbs,
organisation, the recipe itself), sometimes bundled in an ``@graph`` and
sometimes malformed. Every block is tried in page order and the first
Recipe-typed record wins. A block that fails to parse is skipped.
"""
import json
import logging
import re

from processors.html_utils import make_soup

logger = logging.getLogger(__name__)

JSON_LD_TYPE = re.compile(r'^\s*application/ld\+json\s*$', re.IGNORECASE)

# A JSON string literal, escapes included
JSON_STRING_PATTERN = re.compile(r'"((?:[^"\\]|\\.)*)"', re.DOTALL)

# Keys under which a record bundles further typed records
CONTAINER_KEYS = ('@graph', 'mainEntity')

RECIPE_TYPE = 'Recipe'


def sanitize_json_ld(raw_json):
    """
    Escape literal newlines / carriage returns inside JSON string values

    Text outside string literals is left untouched.
    """
    def escape_newlines(match):
        inner = match.group(1).replace('\r', '\\r').replace('\n', '\\n')
        return f'"{inner}"'

    return JSON_STRING_PATTERN.sub(escape_newlines, raw_json)


def iter_json_ld_scripts(soup):
    """Yield the raw text of every JSON-LD script tag, in page order"""
    for script in soup.find_all('script', attrs={'type': JSON_LD_TYPE}):
        raw = script.string if script.string is not None else script.get_text()
        if raw and raw.strip():
            yield raw


def parse_json_ld_blocks(markup, sanitize=False):
    """
    Parse all JSON-LD blocks of a page

    Args:
        markup (str | BeautifulSoup): Page markup
        sanitize (bool): Escape literal newlines inside strings before parsing

    Returns:
        list: Parsed blocks, malformed ones left out
    """
    soup = make_soup(markup)
    blocks = []

    for index, raw in enumerate(iter_json_ld_scripts(soup)):
        if sanitize:
            raw = sanitize_json_ld(raw)
        try:
            blocks.append(json.loads(raw))
        except (ValueError, RecursionError) as e:
            logger.debug(f"Skipping malformed JSON-LD block #{index}: {e}")

    return blocks


def is_recipe_type(type_value):
    if isinstance(type_value, str):
        return type_value == RECIPE_TYPE
    if isinstance(type_value, list):
        return RECIPE_TYPE in type_value
    return False


def find_recipe_node(data):
    """Depth-first search for a Recipe-typed record in a parsed block"""
    if isinstance(data, list):
        for item in data:
            found = find_recipe_node(item)
            if found is not None:
                return found
        return None

    if not isinstance(data, dict):
        return None

    if is_recipe_type(data.get('@type')):
        return data

    for key in CONTAINER_KEYS:
        child = data.get(key)
        if isinstance(child, (list, dict)):
            found = find_recipe_node(child)
            if found is not None:
                return found

    return None


def extract_structured_recipe(markup, sanitize=False):
    """
    Find the first Recipe record across all JSON-LD blocks of a page

    Args:
        markup (str | BeautifulSoup): Page markup
        sanitize (bool): Apply the literal-newline repair before parsing

    Returns:
        dict: The raw Recipe record, or None
    """
    for index, block in enumerate(parse_json_ld_blocks(markup, sanitize=sanitize)):
        try:
            recipe_data = find_recipe_node(block)
        except RecursionError:
            logger.debug(f"Skipping JSON-LD block #{index}: nested too deeply")
            continue
        if recipe_data is not None:
            return recipe_data

    logger.debug("No Recipe record found in JSON-LD")
    return None
