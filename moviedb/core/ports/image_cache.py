"""
Interface port pour le cache d'images.

Associe un Descriptor d'image a l'image deja telechargee.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional

from moviedb.core.value_objects import Descriptor


class IImageCache(ABC):
    """
    Contrat du cache d'images.

    lookup() et store() ne lèvent jamais d'exception: un cache miss
    n'est pas une erreur. Une valeur stockée est retournée par lookup()
    jusqu'à son éviction ou son remplacement.
    """

    @abstractmethod
    def lookup(self, key: Descriptor) -> Optional[Any]:
        """Retourne l'image stockée pour la clé, ou None."""
        ...

    @abstractmethod
    def store(self, key: Descriptor, image: Any) -> None:
        """Associe l'image à la clé, en remplaçant toute valeur précédente."""
        ...
