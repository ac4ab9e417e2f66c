"""
Client TMDB pour le catalogue films et series TV.

Implemente l'interface ICatalogClient. Chaque operation enchaine:
EndpointBuilder -> transport -> Decoder (ou -> ImageCache pour les images).

Usage:
    client = TMDBClient(api_key="your_key", transport=HttpxTransport(), image_cache=ImageCache())
    page = await client.search_movies("Avatar", year=2009)
    movie = await client.fetch_movie_detail(page.results[0].id)
    poster = await client.fetch_image(ImageSize.W500, movie.poster_path)
    await client.close()
"""

from typing import Any, Callable, Optional, TypeVar

from loguru import logger

from moviedb.adapters.api.cache import ImageCache
from moviedb.adapters.api.decoding import Decoder
from moviedb.adapters.api.endpoints import EndpointBuilder
from moviedb.adapters.api.images import load_image
from moviedb.adapters.api.transport import HttpxTransport
from moviedb.core.entities import (
    Credit,
    GenreList,
    Movie,
    Page,
    TVShow,
    WatchProviderResult,
)
from moviedb.core.exceptions import DecodingFailed
from moviedb.core.ports.api_clients import ICatalogClient
from moviedb.core.ports.image_cache import IImageCache
from moviedb.core.ports.transport import ITransport
from moviedb.core.value_objects import Descriptor, ImageSize, TimeWindow
from moviedb.utils.constants import FIRST_PAGE

T = TypeVar("T")


class TMDBClient(ICatalogClient):
    """
    Client API TMDB (The Movie Database).

    Implemente ICatalogClient avec:
    - Recherche de films et de series (paginee, filtre adulte exclu par defaut)
    - Details, credits, titres similaires, tendances, genres, disponibilite
    - Images servies depuis le cache si deja telechargees

    Les erreurs du transport sont propagees telles quelles. Aucune
    operation n'est relancee.

    Example:
        async with TMDBClient(api_key="xxx") as client:
            trending = await client.fetch_trending_movies(TimeWindow.WEEK)
            for movie in trending.results:
                print(f"{movie.title} ({movie.release_date})")
    """

    def __init__(
        self,
        api_key: str,
        transport: Optional[ITransport] = None,
        image_cache: Optional[IImageCache] = None,
        decoder: Optional[Decoder] = None,
        endpoints: Optional[EndpointBuilder] = None,
    ) -> None:
        """
        Initialise le client TMDB.

        Args:
            api_key: Cle API TMDB v3, ajoutee a chaque requete
            transport: Transport reseau (HttpxTransport par defaut)
            image_cache: Cache d'images (ImageCache dedie par defaut)
            decoder: Decodeur configure (configuration par defaut sinon)
            endpoints: Fabrique de descripteurs (hotes TMDB par defaut)
        """
        self._transport = transport if transport is not None else HttpxTransport()
        self._image_cache = image_cache if image_cache is not None else ImageCache()
        self._decoder = decoder or Decoder()
        self._endpoints = endpoints or EndpointBuilder(api_key)

    @property
    def source(self) -> str:
        """Retourne l'identifiant de la source API."""
        return "tmdb"

    async def _fetch(self, descriptor: Descriptor, decode: Callable[[bytes], T]) -> T:
        """
        Execute le descripteur puis decode le corps.

        Les erreurs du transport (y compris l'annulation) remontent sans
        modification. Toute erreur de decodage devient DecodingFailed.
        """
        body = await self._transport.execute(descriptor)
        try:
            return decode(body)
        except DecodingFailed as e:
            logger.warning("Decodage impossible pour {}: {}", descriptor.path, e)
            raise
        except (ValueError, TypeError, KeyError) as e:
            logger.warning("Decodage impossible pour {}: {}", descriptor.path, e)
            raise DecodingFailed(f"Reponse inattendue pour {descriptor.path}: {e}") from e

    def _movie_page(self, body: bytes) -> Page[Movie]:
        return self._decoder.decode_page(body, self._decoder.decode_movie)

    def _tv_show_page(self, body: bytes) -> Page[TVShow]:
        return self._decoder.decode_page(body, self._decoder.decode_tv_show)

    # ------------------------------------------------------------------
    # Recherche
    # ------------------------------------------------------------------

    async def search_movies(
        self,
        query: str,
        language: Optional[str] = None,
        page: Optional[int] = None,
        include_adult: Optional[bool] = None,
        region: Optional[str] = None,
        year: Optional[int] = None,
        primary_release_year: Optional[int] = None,
    ) -> Page[Movie]:
        """
        Recherche des films par titre.

        Args:
            query: Titre a rechercher (non vide)
            language: Code langue (ex: "fr-FR")
            page: Page demandee (1 par defaut)
            include_adult: Inclure le contenu adulte (False par defaut)
            region: Code pays ISO 3166-1 pour les dates de sortie
            year: Annee de sortie (toutes regions)
            primary_release_year: Annee de sortie principale

        Returns:
            Page de Movie dans l'ordre du serveur
        """
        descriptor = self._endpoints.search_movies(
            query,
            language=language,
            page=page if page is not None else FIRST_PAGE,
            include_adult=include_adult if include_adult is not None else False,
            region=region,
            year=year,
            primary_release_year=primary_release_year,
        )
        return await self._fetch(descriptor, self._movie_page)

    async def search_tv_shows(
        self,
        query: str,
        language: Optional[str] = None,
        page: Optional[int] = None,
        include_adult: Optional[bool] = None,
        first_air_date_year: Optional[int] = None,
    ) -> Page[TVShow]:
        """
        Recherche des series TV par nom.

        Args:
            query: Nom a rechercher (non vide)
            language: Code langue
            page: Page demandee (1 par defaut)
            include_adult: Inclure le contenu adulte (False par defaut)
            first_air_date_year: Annee de premiere diffusion

        Returns:
            Page de TVShow dans l'ordre du serveur
        """
        descriptor = self._endpoints.search_tv_shows(
            query,
            language=language,
            page=page if page is not None else FIRST_PAGE,
            include_adult=include_adult if include_adult is not None else False,
            first_air_date_year=first_air_date_year,
        )
        return await self._fetch(descriptor, self._tv_show_page)

    # ------------------------------------------------------------------
    # Disponibilite et genres
    # ------------------------------------------------------------------

    async def fetch_movie_watch_providers(self, movie_id: int) -> WatchProviderResult:
        descriptor = self._endpoints.movie_watch_providers(movie_id)
        return await self._fetch(descriptor, self._decoder.decode_watch_providers)

    async def fetch_tv_show_watch_providers(self, tv_show_id: int) -> WatchProviderResult:
        descriptor = self._endpoints.tv_watch_providers(tv_show_id)
        return await self._fetch(descriptor, self._decoder.decode_watch_providers)

    async def fetch_movie_genres(self, language: Optional[str] = None) -> GenreList:
        descriptor = self._endpoints.movie_genre_list(language=language)
        return await self._fetch(descriptor, self._decoder.decode_genre_list)

    async def fetch_tv_show_genres(self, language: Optional[str] = None) -> GenreList:
        descriptor = self._endpoints.tv_genre_list(language=language)
        return await self._fetch(descriptor, self._decoder.decode_genre_list)

    # ------------------------------------------------------------------
    # Images
    # ------------------------------------------------------------------

    async def fetch_image(self, image_size: ImageSize, image_path: str) -> Optional[Any]:
        """
        Recupere une image depuis le CDN.

        Utilise le pattern cache-first: un hit retourne l'image sans aucun
        appel reseau. Sur un miss, l'image n'est stockee que si les octets
        recus sont lisibles.

        Args:
            image_size: Palier de taille
            image_path: Chemin relatif (ex: "/jRXYjXNq0Cs2TcJjLkki24MLp7u.jpg")

        Returns:
            Image Pillow, ou None si les octets ne forment pas une image
        """
        descriptor = self._endpoints.image(image_size, image_path)

        # CACHE-FIRST: Check cache before network call
        cached = self._image_cache.lookup(descriptor)
        if cached is not None:
            return cached

        data = await self._transport.execute(descriptor)
        image = load_image(data)
        if image is None:
            return None

        self._image_cache.store(descriptor, image)
        return image

    # ------------------------------------------------------------------
    # Tendances
    # ------------------------------------------------------------------

    async def fetch_trending_movies(
        self, time_window: TimeWindow, language: Optional[str] = None
    ) -> Page[Movie]:
        descriptor = self._endpoints.trending_movies(time_window, language=language)
        return await self._fetch(descriptor, self._movie_page)

    async def fetch_trending_tv_shows(
        self, time_window: TimeWindow, language: Optional[str] = None
    ) -> Page[TVShow]:
        descriptor = self._endpoints.trending_tv_shows(time_window, language=language)
        return await self._fetch(descriptor, self._tv_show_page)

    # ------------------------------------------------------------------
    # Credits
    # ------------------------------------------------------------------

    async def fetch_movie_credits(
        self, movie_id: int, language: Optional[str] = None
    ) -> list[Credit]:
        """
        Recupere la distribution d'un film.

        Le payload complet (cast + crew) est decode et valide, mais seule
        la distribution (cast) est retournee.
        """
        descriptor = self._endpoints.movie_credits(movie_id, language=language)
        credits = await self._fetch(descriptor, self._decoder.decode_credits)
        return list(credits.cast)

    async def fetch_tv_show_credits(
        self, tv_show_id: int, language: Optional[str] = None
    ) -> list[Credit]:
        """Recupere la distribution d'une serie (cast uniquement)."""
        descriptor = self._endpoints.tv_credits(tv_show_id, language=language)
        credits = await self._fetch(descriptor, self._decoder.decode_credits)
        return list(credits.cast)

    # ------------------------------------------------------------------
    # Similaires et details
    # ------------------------------------------------------------------

    async def fetch_similar_movies(
        self, movie_id: int, language: Optional[str] = None, page: Optional[int] = None
    ) -> Page[Movie]:
        descriptor = self._endpoints.similar_movies(
            movie_id,
            language=language,
            page=page if page is not None else FIRST_PAGE,
        )
        return await self._fetch(descriptor, self._movie_page)

    async def fetch_similar_tv_shows(
        self, tv_show_id: int, language: Optional[str] = None, page: Optional[int] = None
    ) -> Page[TVShow]:
        descriptor = self._endpoints.similar_tv_shows(
            tv_show_id,
            language=language,
            page=page if page is not None else FIRST_PAGE,
        )
        return await self._fetch(descriptor, self._tv_show_page)

    async def fetch_movie_detail(self, movie_id: int, language: Optional[str] = None) -> Movie:
        descriptor = self._endpoints.movie_detail(movie_id, language=language)
        return await self._fetch(descriptor, self._decoder.decode_movie)

    async def fetch_tv_show_detail(
        self, tv_show_id: int, language: Optional[str] = None
    ) -> TVShow:
        descriptor = self._endpoints.tv_detail(tv_show_id, language=language)
        return await self._fetch(descriptor, self._decoder.decode_tv_show)

    # ------------------------------------------------------------------
    # Cycle de vie
    # ------------------------------------------------------------------

    async def close(self) -> None:
        """
        Ferme le transport s'il detient des ressources reseau.

        Le cache d'images n'est pas vide: il peut etre partage.
        """
        close = getattr(self._transport, "close", None)
        if close is not None:
            await close()

    async def __aenter__(self) -> "TMDBClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()
