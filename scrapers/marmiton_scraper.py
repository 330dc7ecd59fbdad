# scrapers/marmiton_scraper.py
import logging

from processors.html_utils import make_soup, node_text, none_if_placeholder, attr_value
from processors.recipe_normalizer import has_recipe_content, build_recipe
from scrapers.scraper_error import NoRecipeFoundError

logger = logging.getLogger(__name__)


class MarmitonScraper:
    """
    Scraper for Marmiton, markup only

    Marmiton's JSON-LD is not used. Ingredients are rebuilt from the data
    attributes of each ingredient card, servings from the counter widget.
    lxml lowercases attribute names, hence data-ingredientquantity and not
    data-ingredientQuantity.
    """

    site_name = 'Marmiton'
    strategy = 'markup'

    # Joins quantity/unit to the ingredient name: "200 g de farine"
    INGREDIENT_JOIN_WORD = 'de'

    def extract_recipe(self, url, html_content):
        """
        Extract a recipe from a Marmiton page

        Args:
            url (str): URL of the recipe
            html_content (str): HTML content of the recipe page

        Returns:
            Recipe: Extracted recipe

        Raises:
            NoRecipeFoundError: No title, ingredients or instructions found
        """
        soup = make_soup(html_content)

        fields = {
            'title': self._extract_title(soup),
            'image_url': self._extract_image(soup),
            'ingredients': self._extract_ingredients(soup),
            'instructions': self._extract_instructions(soup),
            'prep_time': self._extract_time(soup, 'Préparation'),
            'cook_time': self._extract_time(soup, 'Cuisson'),
            'total_time': self._extract_total_time(soup),
            'servings': self._extract_servings(soup),
        }

        if not has_recipe_content(fields):
            logger.warning(f"No recipe found in {url}")
            raise NoRecipeFoundError()

        logger.info(f"Extracted recipe from HTML: {fields['title']}")
        return build_recipe(fields, url)

    def _extract_title(self, soup):
        title_elem = soup.select_one('div[class*="main-title"] h1') or soup.find('h1')
        return node_text(title_elem)

    def _extract_image(self, soup):
        # Lazy-loaded: the real URL sits in data-src
        img = soup.select_one('img#recipe-picture-print')
        return attr_value(img, 'data-src') or attr_value(img, 'src')

    def _extract_servings(self, soup):
        """ "15 crêpes" from data-servingsnb / data-servingsunit"""
        counter = soup.select_one('div.mrtn-recette_ingredients-counter')
        number = attr_value(counter, 'data-servingsnb')
        if not number:
            return None
        unit = attr_value(counter, 'data-servingsunit')
        return f"{number} {unit}" if unit else number

    def _card_attr(self, card, attr):
        """Attribute from the card itself or the first descendant carrying it"""
        if card.has_attr(attr):
            return attr_value(card, attr)
        return attr_value(card.find(attrs={attr: True}), attr)

    def _extract_ingredients(self, soup):
        ingredients = []

        items = soup.select_one('.mrtn-recette_ingredients-items')
        if items is None:
            return ingredients

        for card in items.select('.card-ingredient'):
            quantity_elem = card.select_one('.card-ingredient-quantity')
            quantity = self._card_attr(quantity_elem, 'data-ingredientquantity') if quantity_elem else None
            unit = self._card_attr(card, 'data-unitsingular')
            name = self._card_attr(card, 'data-ingredientnamesingular')
            complement = self._card_attr(card, 'data-ingredientcomplementsingular')

            if not name:
                continue

            parts = []
            if quantity:
                parts.append(quantity)
            if unit:
                parts.append(unit)
            if quantity or unit:
                parts.append(self.INGREDIENT_JOIN_WORD)
            parts.append(name)
            if complement:
                parts.append(complement)

            ingredients.append(' '.join(parts))

        return ingredients

    def _extract_instructions(self, soup):
        instructions = []

        for step in soup.select('div.recipe-step-list__container'):
            text = node_text(step.find('p'))
            if text:
                instructions.append(text)

        return instructions

    def _extract_time(self, soup, label):
        """<span>Préparation :</span><div>10 min</div>"""
        for caption in soup.find_all('span'):
            text = node_text(caption)
            if not text or not text.startswith(label):
                continue
            value = caption.find_next_sibling()
            if value is not None and value.name == 'div':
                return none_if_placeholder(node_text(value))
        return None

    def _extract_total_time(self, soup):
        block = soup.select_one('div[class*="time__total"]')
        if block is None:
            return None
        return none_if_placeholder(node_text(block.find('div')))
