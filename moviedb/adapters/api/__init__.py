"""
Adaptateurs pour l'API TMDB.

Ce module fournit:
- EndpointBuilder: Construction des descripteurs de requete
- Decoder / DecoderConfig: Decodage des reponses JSON en entites
- HttpxTransport: Transport HTTP par defaut (httpx)
- ImageCache: Cache LRU memoire des images
- TMDBClient: Client catalogue, implemente ICatalogClient
"""

from moviedb.adapters.api.cache import ImageCache
from moviedb.adapters.api.decoding import Decoder, DecoderConfig, snake_case
from moviedb.adapters.api.endpoints import EndpointBuilder
from moviedb.adapters.api.images import load_image
from moviedb.adapters.api.tmdb_client import TMDBClient
from moviedb.adapters.api.transport import HttpxTransport

__all__ = [
    "Decoder",
    "DecoderConfig",
    "EndpointBuilder",
    "HttpxTransport",
    "ImageCache",
    "TMDBClient",
    "load_image",
    "snake_case",
]
