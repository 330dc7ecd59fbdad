# config.py
import os
from dotenv import load_dotenv

# Load a local .env file if there is one
load_dotenv()

# Fetch settings
USER_AGENT = 'Mozilla/5.0 (iPhone; CPU iPhone OS 17_0 like Mac OS X) AppleWebKit/605.1.15 (KHTML, like Gecko) Version/17.0 Mobile/15E148 Safari/604.1'
ACCEPT_HEADER = 'text/html,application/xhtml+xml'
ACCEPT_LANGUAGE = 'fr-FR,fr;q=0.9'
REQUEST_TIMEOUT = 15  # seconds, covers the whole download
CHUNK_SIZE = 8192

# Placeholder title when a page gives us nothing usable
UNTITLED = 'Sans titre'

# Supported recipe websites
RECIPE_WEBSITES = [
    {'site': 'CUISINEAZ', 'name': 'CuisineAZ', 'hosts': ['cuisineaz.com']},
    {'site': 'SEPT_CENT_CINQUANTE_G', 'name': '750g', 'hosts': ['750g.com']},
    {'site': 'MARMITON', 'name': 'Marmiton', 'hosts': ['marmiton.org']},
]

# Logging
LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
LOG_FILE = 'recipe_scraper.log'
# Unset: console only
LOG_DIR = os.getenv('LOG_DIR')
