"""
Ports (interfaces abstraites) définissant les contrats pour les adaptateurs.

Les ports sont les frontières de l'architecture hexagonale. Ils définissent
ce dont le domaine a besoin du monde extérieur sans spécifier
comment ces besoins sont satisfaits.

- ICatalogClient : Surface publique du client catalogue
- ITransport : Exécution réseau d'un Descriptor
- IImageCache : Cache clé/valeur des images téléchargées
"""

from moviedb.core.ports.api_clients import ICatalogClient
from moviedb.core.ports.image_cache import IImageCache
from moviedb.core.ports.transport import ITransport

__all__ = [
    "ICatalogClient",
    "IImageCache",
    "ITransport",
]
