"""
Cache memoire des images telechargees.

Le cache est borne (LRU via cachetools) et partage par toutes les
operations du client pendant la vie du processus. La cle est le
Descriptor d'image complet: un meme chemin a deux paliers de taille
occupe deux entrees distinctes.

Pas de coalescence des requetes: deux miss concurrents sur la meme cle
declenchent deux telechargements, le dernier store() l'emporte.
"""

import threading
from typing import Any, Optional

from cachetools import LRUCache
from loguru import logger

from moviedb.core.ports.image_cache import IImageCache
from moviedb.core.value_objects import Descriptor
from moviedb.utils.constants import DEFAULT_IMAGE_CACHE_SIZE


class ImageCache(IImageCache):
    """
    Cache LRU thread-safe pour les images.

    Attributes:
        maxsize: Nombre maximum d'images conservees avant eviction

    Example:
        cache = ImageCache(maxsize=128)
        cache.store(descriptor, image)
        cache.lookup(descriptor)  # -> image
    """

    def __init__(self, maxsize: int = DEFAULT_IMAGE_CACHE_SIZE) -> None:
        """
        Initialise le cache.

        Args:
            maxsize: Capacite en nombre d'images (>= 1)
        """
        if maxsize < 1:
            raise ValueError("maxsize doit etre >= 1")
        self.maxsize = maxsize
        self._cache: LRUCache = LRUCache(maxsize=maxsize)
        self._lock = threading.Lock()

    def lookup(self, key: Descriptor) -> Optional[Any]:
        """
        Recupere une image du cache.

        Args:
            key: Descriptor de l'image

        Returns:
            L'image stockee, ou None si absente ou evincee
        """
        with self._lock:
            image = self._cache.get(key)
        logger.debug("Image cache {}", "hit" if image is not None else "miss", key=str(key))
        return image

    def store(self, key: Descriptor, image: Any) -> None:
        """
        Stocke une image, en remplacant toute valeur precedente.

        Args:
            key: Descriptor de l'image
            image: Image decodee
        """
        with self._lock:
            self._cache[key] = image

    def clear(self) -> None:
        """Supprime toutes les entrees du cache."""
        with self._lock:
            self._cache.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._cache)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._cache
