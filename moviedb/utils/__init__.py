"""
Utilitaires et constantes pour moviedb.

Ce module contient les constantes et fonctions utilitaires partagees.
"""

from moviedb.utils.constants import (
    DEFAULT_API_BASE_URL,
    DEFAULT_IMAGE_BASE_URL,
    DEFAULT_IMAGE_CACHE_SIZE,
)
from moviedb.utils.dates import DEFAULT_DATE_FORMATS, parse_date

__all__ = [
    "DEFAULT_API_BASE_URL",
    "DEFAULT_IMAGE_BASE_URL",
    "DEFAULT_IMAGE_CACHE_SIZE",
    "DEFAULT_DATE_FORMATS",
    "parse_date",
]
