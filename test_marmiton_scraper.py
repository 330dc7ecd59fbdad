import pytest

from config import UNTITLED
from scrapers.marmiton_scraper import MarmitonScraper
from scrapers.scraper_error import NoRecipeFoundError

URL = "https://www.marmiton.org/recettes/recette_pate-a-crepes_12372.aspx"

PAGE = """
<html><head>
<script type="application/ld+json">{"@type": "Recipe", "name": "Ignored"}</script>
</head><body>
<div class="main-title show-more">
  <h1>Pâte à crêpes</h1>
</div>
<img
    data-src="https://assets.afcdn.com/recipe/crepes.webp"
    src="data:image/gif;base64,R0lGODlhAQABAAAAACw="
    alt="Pâte à crêpes"
    id="recipe-picture-print"
>
<div class="recipe-primary">
  <div class="recipe-primary__item"><span>Préparation :</span><div>10 min</div></div>
  <div class="recipe-primary__item"><span>Repos :</span><div>1 h</div></div>
  <div class="recipe-primary__item"><span>Cuisson&nbsp;:</span><div>-</div></div>
</div>
<div class="time__total"><span>Temps total</span><div>1 h 10 min</div></div>
<div
    class="mrtn-recette_ingredients-counter"
    data-servingsNb="15"
    data-servingsUnit="crêpes"
></div>
<div class="mrtn-recette_ingredients-items">
  <div class="card-ingredient">
    <span class="card-ingredient-quantity" data-ingredientQuantity="300">300</span>
    <span class="unit" data-unitSingular="g" data-unitPlural="g"></span>
    <span class="ingredient-name" data-ingredientNameSingular="farine" data-ingredientNamePlural="farine"></span>
    <span class="ingredient-complement" data-ingredientComplementSingular="" ></span>
  </div>
  <div class="card-ingredient">
    <span class="card-ingredient-quantity" data-ingredientQuantity="3">3</span>
    <span class="unit" data-unitSingular=""></span>
    <span class="ingredient-name" data-ingredientNameSingular="oeuf"></span>
  </div>
  <div class="card-ingredient">
    <span class="card-ingredient-quantity"></span>
    <span class="ingredient-name" data-ingredientNameSingular="sel"></span>
    <span class="ingredient-complement" data-ingredientComplementSingular="(une pincée)"></span>
  </div>
  <div class="card-ingredient">
    <span class="card-ingredient-quantity" data-ingredientQuantity="60"></span>
    <span class="unit" data-unitSingular="cl"></span>
    <span class="ingredient-name" data-ingredientNameSingular="lait"></span>
    <span class="ingredient-complement" data-ingredientComplementSingular="entier"></span>
  </div>
  <div class="card-ingredient">
    <span class="card-ingredient-quantity" data-ingredientQuantity="1"></span>
  </div>
</div>
<div class="recipe-step-list">
  <div class="recipe-step-list__container"><span>Étape 1</span><p>Mettre la farine dans une terrine.</p></div>
  <div class="recipe-step-list__container"><span>Étape 2</span><p>Ajouter les &#339;ufs   puis le lait.</p></div>
  <div class="recipe-step-list__container"><span>Étape 3</span></div>
</div>
</body></html>
"""


@pytest.fixture
def scraper():
    return MarmitonScraper()


def test_extracts_every_field_from_markup(scraper):
    recipe = scraper.extract_recipe(URL, PAGE)

    assert recipe.title == "Pâte à crêpes"
    assert recipe.image_url == "https://assets.afcdn.com/recipe/crepes.webp"
    assert recipe.servings == "15 crêpes"
    assert recipe.prep_time == "10 min"
    assert recipe.total_time == "1 h 10 min"
    assert recipe.instructions == (
        "Mettre la farine dans une terrine.",
        "Ajouter les œufs puis le lait.",
    )
    assert recipe.source_url == URL


def test_ingredient_cards_are_joined_with_de(scraper):
    recipe = scraper.extract_recipe(URL, PAGE)

    assert recipe.ingredients == (
        "300 g de farine",
        "3 de oeuf",
        "sel (une pincée)",
        "60 cl de lait entier",
    )


def test_dash_means_no_cook_time(scraper):
    assert scraper.extract_recipe(URL, PAGE).cook_time is None


def test_title_falls_back_to_first_h1(scraper):
    html = "<html><body><h1>Gratin</h1></body></html>"
    recipe = scraper.extract_recipe(URL, html)

    assert recipe.title == "Gratin"
    assert recipe.ingredients == ()
    assert recipe.servings is None
    assert recipe.image_url is None


def test_servings_without_unit(scraper):
    html = '<h1>Gratin</h1><div class="mrtn-recette_ingredients-counter" data-servingsNb="4"></div>'
    assert scraper.extract_recipe(URL, html).servings == "4"


def test_ingredients_only_page_gets_placeholder_title(scraper):
    html = """
    <div class="mrtn-recette_ingredients-items">
      <div class="card-ingredient"><span data-ingredientNameSingular="beurre"></span></div>
    </div>
    """
    recipe = scraper.extract_recipe(URL, html)
    assert recipe.title == UNTITLED
    assert recipe.ingredients == ("beurre",)


def test_page_without_anchors_raises(scraper):
    html = "<html><body><p>Aucune recette ici</p></body></html>"
    with pytest.raises(NoRecipeFoundError):
        scraper.extract_recipe(URL, html)


@pytest.mark.parametrize("img", [
    '<img id="recipe-picture-print" src="/img/crepes.jpg">',
    '<img id="recipe-picture-print" data-src="/img/crepes.jpg" src="data:image/gif;base64,R0lGOD">',
])
def test_relative_picture_is_made_absolute(scraper, img):
    html = "<h1>Crêpes</h1>" + img
    assert scraper.extract_recipe(URL, html).image_url == "https://www.marmiton.org/img/crepes.jpg"
