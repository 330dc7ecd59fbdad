import pytest

from scrapers.cuisineaz_scraper import CuisineAZScraper
from scrapers.scraper_error import NoRecipeFoundError

URL = "https://www.cuisineaz.com/recettes/quiche-lorraine-1234.aspx"

JSON_LD_PAGE = """
<html><head>
<script type="application/ld+json">
{"@context": "https://schema.org", "@graph": [
    {"@type": "BreadcrumbList", "itemListElement": []},
    {"@type": "Recipe",
     "name": "Quiche lorraine",
     "image": ["https://img.cuisineaz.com/quiche.jpg"],
     "recipeIngredient": ["200 g de lardons", "3 oeufs"],
     "recipeInstructions": [
        {"@type": "HowToStep", "text": "Faire revenir les lardons."},
        {"@type": "HowToStep", "text": "Battre les oeufs."}
     ],
     "prepTime": "PT20M",
     "cookTime": "PT35M",
     "totalTime": "PT55M",
     "recipeYield": 6}
]}
</script>
</head><body><h1 class="recipe-title">Autre titre</h1></body></html>
"""

HTML_PAGE = """
<html><head>
<script type="application/ld+json">{"@type": "Recipe", "name": "", "recipeIngredient": []}</script>
</head><body>
<h1 class="recipe-title fs-3">Tarte &agrave; la tomate</h1>
<section id="recipe_image">
  <picture>
    <source media="(max-width: 639px)" srcset="https://img.cuisineaz.com/mobile.jpg">
    <source media="(min-width: 640px)" srcset="https://img.cuisineaz.com/desktop.jpg 1x, https://img.cuisineaz.com/desktop@2x.jpg 2x">
    <img src="https://img.cuisineaz.com/fallback.jpg" alt="">
  </picture>
</section>
<div class="recipe_time">
  <div><p class="recipe_time_information_title">Préparation</p><p class="recipe_time_information">15 min</p></div>
  <div><p class="recipe_time_information_title">Cuisson</p><p class="recipe_time_information">-</p></div>
  <div><p class="recipe_time_information_title">Temps total</p><p class="recipe_time_information">45 min</p></div>
</div>
<p class="recipe_utils_information bold">4 personnes</p>
<ul class="ingredient_list">
  <li class="ingredient_item"><span class="ingredient_qte">1</span> <span class="ingredient_label">pâte feuilletée</span></li>
  <li class="ingredient_item"><span class="ingredient_qte">3</span> <span class="ingredient_label">tomates</span></li>
  <li class="ingredient_item"><span class="ingredient_label">moutarde</span></li>
  <li class="ingredient_item"><span class="ingredient_qte">2</span></li>
</ul>
<ul class="preparation_steps">
  <li class="preparation_step"><span>1</span><p>Étaler la pâte.</p></li>
  <li class="preparation_step"><span>2</span><p>Badigeonner de <b>moutarde</b>.</p></li>
  <li class="preparation_step"><span>3</span></li>
</ul>
</body></html>
"""


@pytest.fixture
def scraper():
    return CuisineAZScraper()


def test_structured_data_comes_first(scraper):
    recipe = scraper.extract_recipe(URL, JSON_LD_PAGE)

    assert recipe.title == "Quiche lorraine"
    assert recipe.image_url == "https://img.cuisineaz.com/quiche.jpg"
    assert recipe.ingredients == ("200 g de lardons", "3 oeufs")
    assert recipe.instructions == ("Faire revenir les lardons.", "Battre les oeufs.")
    assert recipe.prep_time == "PT20M"
    assert recipe.cook_time == "PT35M"
    assert recipe.total_time == "PT55M"
    assert recipe.servings == "6"
    assert recipe.source_url == URL


def test_empty_structured_data_falls_back_to_markup(scraper):
    recipe = scraper.extract_recipe(URL, HTML_PAGE)

    assert recipe.title == "Tarte à la tomate"
    assert recipe.image_url == "https://img.cuisineaz.com/desktop.jpg"
    assert recipe.ingredients == ("1 pâte feuilletée", "3 tomates", "moutarde")
    assert recipe.instructions == ("Étaler la pâte.", "Badigeonner de moutarde.")
    assert recipe.prep_time == "15 min"
    assert recipe.cook_time is None
    assert recipe.total_time == "45 min"
    assert recipe.servings == "4 personnes"


def test_image_falls_back_to_img_src(scraper):
    html = """
    <h1 class="recipe-title">Soupe</h1>
    <section id="recipe_image"><img src="data:image/gif;base64,R0lGOD"><img src="https://img.cuisineaz.com/soupe.jpg"></section>
    """
    assert scraper.extract_recipe(URL, html).image_url == "https://img.cuisineaz.com/soupe.jpg"


@pytest.mark.parametrize("picture", [
    '<picture><source media="(min-width: 768px)" srcset="/img/soupe.jpg 1x, /img/soupe@2x.jpg 2x"></picture>',
    '<img src="/img/soupe.jpg">',
])
def test_relative_markup_image_is_made_absolute(scraper, picture):
    html = '<h1 class="recipe-title">Soupe</h1><section id="recipe_image">' + picture + "</section>"
    assert scraper.extract_recipe(URL, html).image_url == "https://www.cuisineaz.com/img/soupe.jpg"


def test_relative_open_graph_image_is_made_absolute(scraper):
    html = """
    <html><head>
    <meta property="og:title" content="Gâteau au yaourt">
    <meta property="og:image" content="/img/gateau.jpg">
    </head><body></body></html>
    """
    assert scraper.extract_recipe(URL, html).image_url == "https://www.cuisineaz.com/img/gateau.jpg"


def test_open_graph_fallback_returns_title_only(scraper):
    html = """
    <html><head>
    <meta property="og:title" content="Gâteau au yaourt">
    <meta property="og:image" content="https://img.cuisineaz.com/gateau.jpg">
    </head><body><p>Contenu réservé aux abonnés</p></body></html>
    """
    recipe = scraper.extract_recipe(URL, html)

    assert recipe.title == "Gâteau au yaourt"
    assert recipe.image_url == "https://img.cuisineaz.com/gateau.jpg"
    assert recipe.ingredients == ()
    assert recipe.instructions == ()


def test_page_without_anything_raises(scraper):
    html = "<html><head><title>Erreur</title></head><body><p>Page introuvable</p></body></html>"
    with pytest.raises(NoRecipeFoundError):
        scraper.extract_recipe(URL, html)
