# processors/recipe_normalizer.py
"""
Turn a raw schema.org Recipe record into the normalized Recipe shape.

Schema.org data in the wild is loose: a field may be a string, a list, a
nested object or a list of objects. Nothing here raises; anything we can't
make sense of degrades to None or an empty list. Durations are passed
through untouched (raw ISO 8601).
"""
import logging
import re
from urllib.parse import urljoin

from scrapers.recipe import Recipe

logger = logging.getLogger(__name__)

# Instruction blobs separate steps with one or more blank lines
PARAGRAPH_BREAK = re.compile(r'\n\s*\n')

IMAGE_URL_KEYS = ('url', 'contentUrl', '@id')


def _first_text(value):
    """First non-empty string of a string or a list of candidates"""
    if isinstance(value, str):
        return value.strip() or None
    if isinstance(value, list):
        for candidate in value:
            if isinstance(candidate, str) and candidate.strip():
                return candidate.strip()
    return None


def _first_scalar(value):
    """First string or number, as a string"""
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, str):
        return value.strip() or None
    if isinstance(value, list):
        for candidate in value:
            result = _first_scalar(candidate)
            if result:
                return result
    return None


def _image_from_object(value):
    if isinstance(value, str):
        return value.strip() or None
    if isinstance(value, dict):
        for key in IMAGE_URL_KEYS:
            url = value.get(key)
            if isinstance(url, str) and url.strip():
                return url.strip()
    return None


def resolve_url(url, base_url):
    """Absolute form of a possibly relative URL"""
    if url and base_url and not url.startswith(('http://', 'https://')):
        return urljoin(base_url, url)
    return url


def extract_image(value, source_url=None):
    """Image from a URL string, a list of URLs/objects, or an ImageObject"""
    if isinstance(value, list):
        image_url = _image_from_object(value[0]) if value else None
    else:
        image_url = _image_from_object(value)

    return resolve_url(image_url, source_url)


def extract_ingredients(value):
    """List of ingredient lines, or a newline-delimited string"""
    if isinstance(value, str):
        candidates = value.splitlines()
    elif isinstance(value, list):
        candidates = value
    else:
        return []

    ingredients = []
    for item in candidates:
        if isinstance(item, (int, float)) and not isinstance(item, bool):
            item = str(item)
        if isinstance(item, str) and item.strip():
            ingredients.append(item.strip())
    return ingredients


def _collect_steps(item, steps):
    """Flatten HowToStep / HowToSection nesting into plain step strings"""
    if isinstance(item, str):
        if item.strip():
            steps.append(item.strip())
    elif isinstance(item, list):
        for child in item:
            _collect_steps(child, steps)
    elif isinstance(item, dict):
        if 'itemListElement' in item:
            # HowToSection: its name is a heading, not a step
            _collect_steps(item['itemListElement'], steps)
        else:
            text = item.get('text')
            if not isinstance(text, str) or not text.strip():
                text = item.get('name')
            if isinstance(text, str):
                _collect_steps(text, steps)


def extract_instructions(value):
    """Instructions from a text blob, a list of strings, or HowTo objects"""
    if isinstance(value, str):
        return [step.strip() for step in PARAGRAPH_BREAK.split(value) if step.strip()]

    steps = []
    if isinstance(value, (list, dict)):
        _collect_steps(value, steps)
    return steps


def _duration(value):
    if isinstance(value, str):
        return value.strip() or None
    return None


def normalize_fields(raw, source_url=None):
    """
    Normalize a raw Recipe record into keyword arguments for Recipe

    The title is left as None when the record has none, so callers can tell
    a real title from the placeholder.
    """
    if not isinstance(raw, dict):
        logger.warning(f"Expected a JSON object for the recipe, got {type(raw).__name__}")
        raw = {}

    ingredients = raw.get('recipeIngredient')
    if ingredients is None:
        # Older schema.org vocabulary
        ingredients = raw.get('ingredients')

    return {
        'title': _first_text(raw.get('name')),
        'image_url': extract_image(raw.get('image'), source_url),
        'ingredients': extract_ingredients(ingredients),
        'instructions': extract_instructions(raw.get('recipeInstructions')),
        'prep_time': _duration(raw.get('prepTime')),
        'cook_time': _duration(raw.get('cookTime')),
        'total_time': _duration(raw.get('totalTime')),
        'servings': _first_scalar(raw.get('recipeYield')),
    }


def has_recipe_content(fields):
    """True when a page gave us a title, ingredients or instructions"""
    return bool(fields.get('title') or fields.get('ingredients') or fields.get('instructions'))


def build_recipe(fields, source_url):
    """Recipe from extracted fields; relative image URLs are resolved against the page"""
    fields = dict(fields, image_url=resolve_url(fields.get('image_url'), source_url))
    return Recipe(source_url=source_url, **fields)


def normalize(raw, source_url):
    """
    Normalize a raw schema.org Recipe record

    Args:
        raw (dict): Raw Recipe record from JSON-LD
        source_url (str): URL the record came from

    Returns:
        Recipe: Normalized recipe, never raises
    """
    return build_recipe(normalize_fields(raw, source_url), source_url)
