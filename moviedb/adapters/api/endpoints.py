"""
Construction des descripteurs de requete pour l'API TMDB v3.

Chaque operation du catalogue a sa methode: elle valide les parametres
obligatoires, omet les optionnels absents et ajoute la cle API en dernier.
Toute entree invalide leve MalformedRequest avant qu'aucun appel reseau
ne soit fait.

Usage:
    endpoints = EndpointBuilder(api_key="xxx")
    descriptor = endpoints.search_movies("Inception", page=1, include_adult=False)
    descriptor.url
    # https://api.themoviedb.org/3/search/movie?query=Inception&page=1&include_adult=false&api_key=xxx
"""

from enum import Enum
from typing import Any, Optional, TypeVar, Union

from moviedb.core.exceptions import MalformedRequest
from moviedb.core.value_objects import Descriptor, ImageSize, TimeWindow
from moviedb.utils.constants import (
    API_KEY_PARAM,
    DEFAULT_API_BASE_URL,
    DEFAULT_IMAGE_BASE_URL,
)

E = TypeVar("E", bound=Enum)


def _check_encodable(name: str, value: str) -> str:
    """Verifie que la valeur peut etre encodee en UTF-8 (donc en pourcentage)."""
    try:
        value.encode("utf-8")
    except UnicodeEncodeError as e:
        raise MalformedRequest(
            f"Parametre '{name}' impossible a encoder", parameter=name
        ) from e
    return value


def _require_text(name: str, value: Any) -> str:
    if not isinstance(value, str) or not value.strip():
        raise MalformedRequest(f"Parametre '{name}' obligatoire et non vide", parameter=name)
    return _check_encodable(name, value)


def _require_id(name: str, value: Any) -> int:
    # bool est un int en Python: on le refuse explicitement
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise MalformedRequest(
            f"Parametre '{name}' doit etre un entier positif (recu: {value!r})",
            parameter=name,
        )
    return value


def _require_enum(name: str, enum_cls: type[E], value: Union[E, str]) -> E:
    try:
        return enum_cls(value)
    except ValueError as e:
        raise MalformedRequest(
            f"Parametre '{name}' invalide: {value!r}", parameter=name
        ) from e


def _encode_optional(name: str, value: Any) -> str:
    """Encode un parametre optionnel present en texte de query."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        if value < 1:
            raise MalformedRequest(
                f"Parametre '{name}' doit etre >= 1 (recu: {value})", parameter=name
            )
        return str(value)
    if isinstance(value, str):
        if not value.strip():
            raise MalformedRequest(f"Parametre '{name}' vide", parameter=name)
        return _check_encodable(name, value)
    raise MalformedRequest(
        f"Parametre '{name}' de type non supporte: {type(value).__name__}",
        parameter=name,
    )


class EndpointBuilder:
    """
    Fabrique de Descriptor pour chaque operation TMDB.

    La cle API n'est jamais validee ici: une cle invalide ne se manifeste
    que par un echec du transport.

    Attributes:
        api_base_url: Hote + version de l'API JSON
        image_base_url: Hote + prefixe du CDN d'images
    """

    def __init__(
        self,
        api_key: str,
        api_base_url: str = DEFAULT_API_BASE_URL,
        image_base_url: str = DEFAULT_IMAGE_BASE_URL,
    ) -> None:
        self._api_key = api_key
        self.api_base_url = api_base_url.rstrip("/")
        self.image_base_url = image_base_url.rstrip("/")

    def _build(
        self,
        path: str,
        base_url: Optional[str] = None,
        **optional: Any,
    ) -> Descriptor:
        """Assemble le descripteur: optionnels presents puis credential."""
        query = [
            (name, _encode_optional(name, value))
            for name, value in optional.items()
            if value is not None
        ]
        query.append((API_KEY_PARAM, self._api_key))
        return Descriptor(
            base_url=base_url or self.api_base_url,
            path=path,
            query=tuple(query),
        )

    # ------------------------------------------------------------------
    # Recherche
    # ------------------------------------------------------------------

    def search_movies(
        self,
        query: str,
        language: Optional[str] = None,
        page: Optional[int] = None,
        include_adult: Optional[bool] = None,
        region: Optional[str] = None,
        year: Optional[int] = None,
        primary_release_year: Optional[int] = None,
    ) -> Descriptor:
        return self._build(
            "/search/movie",
            query=_require_text("query", query),
            language=language,
            page=page,
            include_adult=include_adult,
            region=region,
            year=year,
            primary_release_year=primary_release_year,
        )

    def search_tv_shows(
        self,
        query: str,
        language: Optional[str] = None,
        page: Optional[int] = None,
        include_adult: Optional[bool] = None,
        first_air_date_year: Optional[int] = None,
    ) -> Descriptor:
        return self._build(
            "/search/tv",
            query=_require_text("query", query),
            language=language,
            page=page,
            include_adult=include_adult,
            first_air_date_year=first_air_date_year,
        )

    # ------------------------------------------------------------------
    # Disponibilite et genres
    # ------------------------------------------------------------------

    def movie_watch_providers(self, movie_id: int) -> Descriptor:
        movie_id = _require_id("movie_id", movie_id)
        return self._build(f"/movie/{movie_id}/watch/providers")

    def tv_watch_providers(self, tv_show_id: int) -> Descriptor:
        tv_show_id = _require_id("tv_show_id", tv_show_id)
        return self._build(f"/tv/{tv_show_id}/watch/providers")

    def movie_genre_list(self, language: Optional[str] = None) -> Descriptor:
        return self._build("/genre/movie/list", language=language)

    def tv_genre_list(self, language: Optional[str] = None) -> Descriptor:
        return self._build("/genre/tv/list", language=language)

    # ------------------------------------------------------------------
    # Images
    # ------------------------------------------------------------------

    def image(self, image_size: Union[ImageSize, str], image_path: str) -> Descriptor:
        """
        Descripteur d'image: /<palier>/<chemin> sur le CDN.

        Le meme chemin a deux paliers differents donne deux descripteurs
        differents, donc deux entrees de cache distinctes.
        """
        size = _require_enum("image_size", ImageSize, image_size)
        image_path = _require_text("image_path", image_path).strip().lstrip("/")
        if not image_path:
            raise MalformedRequest("Parametre 'image_path' vide", parameter="image_path")
        return self._build(
            f"/{size.value}/{image_path}", base_url=self.image_base_url
        )

    # ------------------------------------------------------------------
    # Tendances
    # ------------------------------------------------------------------

    def trending_movies(
        self, time_window: Union[TimeWindow, str], language: Optional[str] = None
    ) -> Descriptor:
        window = _require_enum("time_window", TimeWindow, time_window)
        return self._build(f"/trending/movie/{window.value}", language=language)

    def trending_tv_shows(
        self, time_window: Union[TimeWindow, str], language: Optional[str] = None
    ) -> Descriptor:
        window = _require_enum("time_window", TimeWindow, time_window)
        return self._build(f"/trending/tv/{window.value}", language=language)

    # ------------------------------------------------------------------
    # Credits, similaires, details
    # ------------------------------------------------------------------

    def movie_credits(self, movie_id: int, language: Optional[str] = None) -> Descriptor:
        movie_id = _require_id("movie_id", movie_id)
        return self._build(f"/movie/{movie_id}/credits", language=language)

    def tv_credits(self, tv_show_id: int, language: Optional[str] = None) -> Descriptor:
        tv_show_id = _require_id("tv_show_id", tv_show_id)
        return self._build(f"/tv/{tv_show_id}/credits", language=language)

    def similar_movies(
        self,
        movie_id: int,
        language: Optional[str] = None,
        page: Optional[int] = None,
    ) -> Descriptor:
        movie_id = _require_id("movie_id", movie_id)
        return self._build(f"/movie/{movie_id}/similar", language=language, page=page)

    def similar_tv_shows(
        self,
        tv_show_id: int,
        language: Optional[str] = None,
        page: Optional[int] = None,
    ) -> Descriptor:
        tv_show_id = _require_id("tv_show_id", tv_show_id)
        return self._build(f"/tv/{tv_show_id}/similar", language=language, page=page)

    def movie_detail(self, movie_id: int, language: Optional[str] = None) -> Descriptor:
        movie_id = _require_id("movie_id", movie_id)
        return self._build(f"/movie/{movie_id}", language=language)

    def tv_detail(self, tv_show_id: int, language: Optional[str] = None) -> Descriptor:
        tv_show_id = _require_id("tv_show_id", tv_show_id)
        return self._build(f"/tv/{tv_show_id}", language=language)
