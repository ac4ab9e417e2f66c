"""
Container d'injection de dependances via dependency-injector.

Assemble le client TMDB a partir des Settings: un cache d'images unique
pour la vie du processus, un transport httpx et un decodeur configure.
"""

from dependency_injector import containers, providers

from .adapters.api.cache import ImageCache
from .adapters.api.decoding import Decoder, DecoderConfig
from .adapters.api.endpoints import EndpointBuilder
from .adapters.api.tmdb_client import TMDBClient
from .adapters.api.transport import HttpxTransport
from .config import Settings
from .logging_config import init_logging


class Container(containers.DeclarativeContainer):
    """Container DI de la bibliotheque.

    Utilisation :
        container = Container()
        container.init_resources()
        client = container.tmdb_client()
        page = await client.search_movies("Alien")
        await client.close()
        container.shutdown_resources()

    Pour les tests, surcharger les providers :
        container.config.override(providers.Object(Settings(api_key="test")))
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # Logging - handlers installes par init_resources(), retires par shutdown_resources()
    logging = providers.Resource(init_logging, settings=config)

    # Cache d'images partage - duree de vie = processus
    image_cache = providers.Singleton(
        ImageCache,
        maxsize=config.provided.image_cache_size,
    )

    # Adapters
    transport = providers.Factory(
        HttpxTransport,
        timeout=config.provided.request_timeout,
    )
    decoder = providers.Singleton(Decoder, config=providers.Singleton(DecoderConfig))
    endpoints = providers.Factory(
        EndpointBuilder,
        api_key=config.provided.api_key,
        api_base_url=config.provided.api_base_url,
        image_base_url=config.provided.image_base_url,
    )

    # Client - nouvelle instance (et nouveau transport) a chaque appel
    tmdb_client = providers.Factory(
        TMDBClient,
        api_key=config.provided.api_key,
        transport=transport,
        image_cache=image_cache,
        decoder=decoder,
        endpoints=endpoints,
    )
