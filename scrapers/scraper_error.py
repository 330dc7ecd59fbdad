# scrapers/scraper_error.py
"""
Typed failures raised by the recipe scrapers.

Every failure carries a machine-readable ``kind`` and a French, user-facing
``message``. Nothing here is retried; the caller decides what to do.
"""
from enum import Enum


class ErrorKind(Enum):
    INVALID_URL = 'INVALID_URL'
    UNSUPPORTED_SITE = 'UNSUPPORTED_SITE'
    NETWORK_ERROR = 'NETWORK_ERROR'
    NO_RECIPE_FOUND = 'NO_RECIPE_FOUND'
    PARSE_ERROR = 'PARSE_ERROR'


class ScraperError(Exception):
    """Base class for all scraper failures"""

    kind = None
    default_message = 'Erreur inconnue'

    def __init__(self, message=None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def __repr__(self):
        return f"{type(self).__name__}(kind={self.kind.value}, message={self.message!r})"


class InvalidUrlError(ScraperError):
    kind = ErrorKind.INVALID_URL
    default_message = 'URL invalide'


class UnsupportedSiteError(ScraperError):
    kind = ErrorKind.UNSUPPORTED_SITE
    default_message = "Ce site n'est pas pris en charge"


class NetworkError(ScraperError):
    """Request failed, timed out or came back with a non-2xx status"""

    kind = ErrorKind.NETWORK_ERROR
    default_message = 'Erreur réseau'

    def __init__(self, message=None, status_code=None):
        self.status_code = status_code
        super().__init__(message)


class NoRecipeFoundError(ScraperError):
    kind = ErrorKind.NO_RECIPE_FOUND
    default_message = 'Aucune recette trouvée sur cette page'


class ParseError(ScraperError):
    kind = ErrorKind.PARSE_ERROR
    default_message = "Impossible d'analyser la recette"
