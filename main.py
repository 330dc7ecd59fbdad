# main.py
import argparse
import json
import logging
import sys

from logging_setup import setup_logging
from scrapers.dispatcher import scrape_recipe
from scrapers.scraper_error import ScraperError

logger = logging.getLogger(__name__)


def print_recipe(recipe):
    """Human-readable dump of a scraped recipe"""
    print(f"Recipe title: {recipe.title}")
    print(f"Source URL: {recipe.source_url}")
    print(f"Image URL: {recipe.image_url or 'None'}")
    print(f"Prep time: {recipe.prep_time or '-'}")
    print(f"Cook time: {recipe.cook_time or '-'}")
    print(f"Total time: {recipe.total_time or '-'}")
    print(f"Servings: {recipe.servings or '-'}")

    print(f"\nIngredients ({len(recipe.ingredients)}):")
    for i, ingredient in enumerate(recipe.ingredients, 1):
        print(f"  {i}. {ingredient}")

    print(f"\nInstructions ({len(recipe.instructions)}):")
    for i, instruction in enumerate(recipe.instructions, 1):
        print(f"  {i}. {instruction}")


def main(argv=None):
    parser = argparse.ArgumentParser(description="Import a recipe from a supported cooking website")
    parser.add_argument('url', help='Recipe page URL (CuisineAZ, 750g or Marmiton)')
    parser.add_argument('--json', action='store_true',
                        help='Print the recipe as JSON')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Debug logging')
    parser.add_argument('--log-dir',
                        help='Also write a log file to this directory')

    args = parser.parse_args(argv)

    setup_logging(verbose=args.verbose, log_dir=args.log_dir)

    try:
        recipe = scrape_recipe(args.url)
    except ScraperError as e:
        print(f"{e.kind.value}: {e.message}", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps(recipe.to_dict(), indent=2, ensure_ascii=False))
    else:
        print_recipe(recipe)

    return 0


if __name__ == "__main__":
    sys.exit(main())
