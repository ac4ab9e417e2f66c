"""
Interface port pour le client catalogue.

Définit la surface publique: 15 opérations asynchrones retournant des
entités typées ou levant MalformedRequest, TransportFailure (ou l'erreur
propre au transport) ou DecodingFailed.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional

from moviedb.core.entities import (
    Credit,
    GenreList,
    Movie,
    Page,
    TVShow,
    WatchProviderResult,
)
from moviedb.core.value_objects import ImageSize, TimeWindow


class ICatalogClient(ABC):
    """
    Interface du client catalogue films / séries TV.

    Les paramètres optionnels absents ne sont jamais envoyés, sauf la
    pagination (première page par défaut) et le filtre adulte (exclu
    par défaut).
    """

    @property
    @abstractmethod
    def source(self) -> str:
        """Retourne l'identifiant de la source API (ex: 'tmdb')."""
        ...

    @abstractmethod
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
        """Recherche des films par titre."""
        ...

    @abstractmethod
    async def search_tv_shows(
        self,
        query: str,
        language: Optional[str] = None,
        page: Optional[int] = None,
        include_adult: Optional[bool] = None,
        first_air_date_year: Optional[int] = None,
    ) -> Page[TVShow]:
        """Recherche des séries TV par nom."""
        ...

    @abstractmethod
    async def fetch_movie_watch_providers(self, movie_id: int) -> WatchProviderResult:
        ...

    @abstractmethod
    async def fetch_tv_show_watch_providers(self, tv_show_id: int) -> WatchProviderResult:
        ...

    @abstractmethod
    async def fetch_movie_genres(self, language: Optional[str] = None) -> GenreList:
        ...

    @abstractmethod
    async def fetch_tv_show_genres(self, language: Optional[str] = None) -> GenreList:
        ...

    @abstractmethod
    async def fetch_image(self, image_size: ImageSize, image_path: str) -> Optional[Any]:
        """
        Récupère une image, via le cache si possible.

        Retourne :
            L'image, ou None si les octets reçus ne sont pas une image
        """
        ...

    @abstractmethod
    async def fetch_trending_movies(
        self, time_window: TimeWindow, language: Optional[str] = None
    ) -> Page[Movie]:
        ...

    @abstractmethod
    async def fetch_trending_tv_shows(
        self, time_window: TimeWindow, language: Optional[str] = None
    ) -> Page[TVShow]:
        ...

    @abstractmethod
    async def fetch_movie_credits(
        self, movie_id: int, language: Optional[str] = None
    ) -> list[Credit]:
        """Retourne la distribution (cast) d'un film."""
        ...

    @abstractmethod
    async def fetch_tv_show_credits(
        self, tv_show_id: int, language: Optional[str] = None
    ) -> list[Credit]:
        """Retourne la distribution (cast) d'une série."""
        ...

    @abstractmethod
    async def fetch_similar_movies(
        self, movie_id: int, language: Optional[str] = None, page: Optional[int] = None
    ) -> Page[Movie]:
        ...

    @abstractmethod
    async def fetch_similar_tv_shows(
        self, tv_show_id: int, language: Optional[str] = None, page: Optional[int] = None
    ) -> Page[TVShow]:
        ...

    @abstractmethod
    async def fetch_movie_detail(self, movie_id: int, language: Optional[str] = None) -> Movie:
        ...

    @abstractmethod
    async def fetch_tv_show_detail(
        self, tv_show_id: int, language: Optional[str] = None
    ) -> TVShow:
        ...
