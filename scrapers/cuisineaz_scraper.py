# scrapers/cuisineaz_scraper.py
import logging

from processors.html_utils import (
    make_soup, node_text, none_if_placeholder, attr_value,
    first_srcset_url, extract_meta_content
)
from processors.json_ld import extract_structured_recipe
from processors.recipe_normalizer import normalize_fields, has_recipe_content, build_recipe
from scrapers.scraper_error import NoRecipeFoundError

logger = logging.getLogger(__name__)


class CuisineAZScraper:
    """
    Scraper for CuisineAZ

    JSON-LD first (CuisineAZ wraps it in an @graph); when that is missing or
    empty, fall back to the recipe page markup, and as a last resort to the
    Open Graph tags.
    """

    site_name = 'CuisineAZ'
    strategy = 'hybrid'

    TIME_LABELS = {
        'prep_time': 'Préparation',
        'cook_time': 'Cuisson',
        'total_time': 'Temps total',
    }

    def extract_recipe(self, url, html_content):
        """
        Extract a recipe from a CuisineAZ page

        Args:
            url (str): URL of the recipe
            html_content (str): HTML content of the recipe page

        Returns:
            Recipe: Extracted recipe

        Raises:
            NoRecipeFoundError: Nothing recipe-like on the page
        """
        soup = make_soup(html_content)

        recipe_data = extract_structured_recipe(soup)
        if recipe_data is not None:
            fields = normalize_fields(recipe_data, url)
            if has_recipe_content(fields):
                logger.info(f"Extracted recipe from JSON-LD: {fields['title']}")
                return build_recipe(fields, url)
            logger.info(f"JSON-LD recipe for {url} is empty, falling back to HTML parsing")

        fields = self._extract_from_html(soup)
        if has_recipe_content(fields):
            logger.info(f"Extracted recipe from HTML: {fields['title']}")
            return build_recipe(fields, url)

        fields = self._extract_from_meta_tags(soup)
        if fields['title']:
            logger.warning(f"Only Open Graph data available for {url}")
            return build_recipe(fields, url)

        logger.warning(f"No recipe found in {url}")
        raise NoRecipeFoundError()

    def _extract_from_html(self, soup):
        return {
            'title': self._extract_title(soup),
            'image_url': self._extract_image(soup),
            'ingredients': self._extract_ingredients(soup),
            'instructions': self._extract_instructions(soup),
            'prep_time': self._extract_time(soup, self.TIME_LABELS['prep_time']),
            'cook_time': self._extract_time(soup, self.TIME_LABELS['cook_time']),
            'total_time': self._extract_time(soup, self.TIME_LABELS['total_time']),
            'servings': self._extract_servings(soup),
        }

    def _extract_from_meta_tags(self, soup):
        return {
            'title': extract_meta_content(soup, 'og:title'),
            'image_url': extract_meta_content(soup, 'og:image'),
            'ingredients': [],
            'instructions': [],
        }

    def _extract_title(self, soup):
        return node_text(soup.select_one('h1[class*="recipe-title"]'))

    def _extract_image(self, soup):
        """Recipe picture, preferring the desktop <source> of the <picture>"""
        section = soup.select_one('section#recipe_image')
        if section is None:
            return None

        for source in section.select('source[media*="min-width"]'):
            url = first_srcset_url(attr_value(source, 'srcset'))
            if url:
                return url

        for img in section.select('img[src]'):
            src = attr_value(img, 'src')
            # Lazy-load placeholders are inline data: URIs
            if src and not src.startswith('data:'):
                return src

        return None

    def _extract_ingredients(self, soup):
        """Ingredient lines as "<quantity> <label>" """
        ingredients = []

        for item in soup.select('.ingredient_list li[class*="ingredient_item"]'):
            label = node_text(item.select_one('[class*="ingredient_label"]'))
            quantity = node_text(item.select_one('[class*="ingredient_qte"]'))

            if not label:
                continue
            ingredients.append(f"{quantity} {label}" if quantity else label)

        return ingredients

    def _extract_instructions(self, soup):
        instructions = []

        for step in soup.select('.preparation_steps li[class*="preparation_step"]'):
            text = node_text(step.find('p'))
            if text:
                instructions.append(text)

        return instructions

    def _extract_time(self, soup, label):
        """Value printed under a time caption ("Préparation", "Cuisson", ...)"""
        for caption in soup.select('p.recipe_time_information_title'):
            if node_text(caption) != label:
                continue
            value = caption.find_next(class_='recipe_time_information')
            return none_if_placeholder(node_text(value))
        return None

    def _extract_servings(self, soup):
        return none_if_placeholder(node_text(soup.select_one('[class*="recipe_utils_information"]')))
