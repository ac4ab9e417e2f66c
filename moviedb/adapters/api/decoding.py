"""
Pipeline de decodage des reponses JSON TMDB en entites du domaine.

Deux conventions s'appliquent uniformement, portees par un DecoderConfig
construit explicitement (pas d'etat global):
- les cles distantes sont normalisees vers les noms de champs du modele
- les dates textuelles sont parsees avec une liste de formats ordonnee

Toute erreur (JSON invalide, champ obligatoire absent, type incorrect)
leve DecodingFailed. Aucune entite partiellement construite n'est jamais
retournee.

Usage:
    decoder = Decoder()
    page = decoder.decode_page(body, decoder.decode_movie)
"""

import json
import re
from dataclasses import dataclass, field
from typing import Any, Callable, Mapping, Optional, TypeVar, Union

from moviedb.core.entities import (
    Credit,
    Credits,
    Genre,
    GenreList,
    Movie,
    Page,
    RegionAvailability,
    TVShow,
    WatchProvider,
    WatchProviderResult,
)
from moviedb.core.exceptions import DecodingFailed
from moviedb.utils.dates import DEFAULT_DATE_FORMATS

T = TypeVar("T")

Payload = Union[bytes, bytearray, str, Mapping[str, Any]]

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")
_SEPARATORS = re.compile(r"[\s\-]+")

_MISSING = object()


def snake_case(key: str) -> str:
    """
    Normalise une cle distante en snake_case.

    "release_date" -> "release_date", "releaseDate" -> "release_date",
    "Vote-Count" -> "vote_count"
    """
    key = _CAMEL_BOUNDARY.sub("_", key.strip())
    return _SEPARATORS.sub("_", key).lower()


@dataclass(frozen=True)
class DecoderConfig:
    """
    Configuration immuable du decodage.

    Attributes:
        key_strategy: Fonction cle distante -> nom de champ du modele
        date_formats: Formats strptime par ordre de priorite
    """

    key_strategy: Callable[[str], str] = snake_case
    date_formats: tuple[str, ...] = field(default=DEFAULT_DATE_FORMATS)


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _type_name(value: Any) -> str:
    return "null" if value is None else type(value).__name__


class _Fields:
    """
    Acces type aux champs d'un objet JSON normalise.

    Le contexte (ex: "movie") sert uniquement aux messages d'erreur.
    """

    def __init__(self, raw: Any, config: DecoderConfig, context: str) -> None:
        if not isinstance(raw, Mapping):
            raise DecodingFailed(f"{context}: objet attendu, recu {_type_name(raw)}")
        self._data = {config.key_strategy(str(k)): v for k, v in raw.items()}
        self._context = context

    def raw(self, name: str) -> Any:
        return self._data.get(name)

    def _fail(self, name: str, expected: str, value: Any) -> DecodingFailed:
        return DecodingFailed(
            f"{self._context}.{name}: {expected} attendu, recu {_type_name(value)}"
        )

    def _get(self, name: str, required: bool) -> Any:
        value = self._data.get(name, _MISSING)
        if value is _MISSING or value is None:
            if required:
                raise DecodingFailed(f"{self._context}: champ obligatoire '{name}' absent")
            return None
        return value

    def get_int(self, name: str, required: bool = False) -> Optional[int]:
        value = self._get(name, required)
        if value is not None and not _is_int(value):
            raise self._fail(name, "entier", value)
        return value

    def get_float(self, name: str, required: bool = False) -> Optional[float]:
        value = self._get(name, required)
        if value is None:
            return None
        if isinstance(value, float) or _is_int(value):
            return float(value)
        raise self._fail(name, "nombre", value)

    def get_str(self, name: str, required: bool = False) -> Optional[str]:
        value = self._get(name, required)
        if value is not None and not isinstance(value, str):
            raise self._fail(name, "texte", value)
        return value

    def get_bool(self, name: str, required: bool = False) -> Optional[bool]:
        value = self._get(name, required)
        if value is not None and not isinstance(value, bool):
            raise self._fail(name, "booleen", value)
        return value

    def get_list(self, name: str, required: bool = False) -> Optional[list]:
        value = self._get(name, required)
        if value is not None and not isinstance(value, list):
            raise self._fail(name, "liste", value)
        return value

    def get_mapping(self, name: str, required: bool = False) -> Optional[Mapping]:
        value = self._get(name, required)
        if value is not None and not isinstance(value, Mapping):
            raise self._fail(name, "objet", value)
        return value



class Decoder:
    """
    Decodeur des payloads TMDB.

    Chaque methode decode_* accepte des octets, du texte JSON ou un objet
    deja charge. Seul le corps de premier niveau est parse: les elements
    imbriques doivent etre des objets JSON, sinon DecodingFailed.
    """

    def __init__(self, config: Optional[DecoderConfig] = None) -> None:
        self.config = config or DecoderConfig()

    # ------------------------------------------------------------------
    # Primitives
    # ------------------------------------------------------------------

    def load(self, body: Payload) -> Any:
        """Charge le JSON brut. Les mappings sont retournes tels quels."""
        if isinstance(body, Mapping):
            return body
        try:
            return json.loads(body)
        except (ValueError, TypeError) as e:
            raise DecodingFailed(f"JSON invalide: {e}") from e

    def _fields(self, raw: Any, context: str) -> _Fields:
        return _Fields(raw, self.config, context)

    def _try_int_list(self, value: Any) -> Optional[tuple[int, ...]]:
        if not isinstance(value, list) or not all(_is_int(v) for v in value):
            return None
        return tuple(value)

    def _try_genre_ids(self, value: Any) -> Optional[tuple[int, ...]]:
        if not isinstance(value, list):
            return None
        ids = []
        for item in value:
            if not isinstance(item, Mapping):
                return None
            genre = self._fields(item, "genre")
            genre_id = genre.raw("id")
            if not _is_int(genre_id) or not isinstance(genre.raw("name"), str):
                return None
            ids.append(genre_id)
        return tuple(ids)

    def resolve_genre_ids(self, fields: _Fields) -> Optional[tuple[int, ...]]:
        """
        Resout les identifiants de genre d'un media.

        1. "genre_ids" en liste d'entiers (listes et recherches)
        2. sinon "genres" en liste d'objets {id, name} (details)
        3. sinon absent, sans erreur
        """
        genre_ids = self._try_int_list(fields.raw("genre_ids"))
        if genre_ids is not None:
            return genre_ids
        genre_ids = self._try_genre_ids(fields.raw("genres"))
        if genre_ids is not None:
            return genre_ids
        return None

    # ------------------------------------------------------------------
    # Medias
    # ------------------------------------------------------------------

    def decode_movie(self, body: Payload) -> Movie:
        return self._movie_from(self.load(body))

    def decode_tv_show(self, body: Payload) -> TVShow:
        return self._tv_show_from(self.load(body))

    def _movie_from(self, raw: Any) -> Movie:
        f = self._fields(raw, "movie")
        return Movie(
            id=f.get_int("id", required=True),
            title=f.get_str("title"),
            original_title=f.get_str("original_title"),
            overview=f.get_str("overview"),
            poster_path=f.get_str("poster_path"),
            backdrop_path=f.get_str("backdrop_path"),
            release_date_text=f.get_str("release_date"),
            adult=f.get_bool("adult"),
            video=f.get_bool("video"),
            popularity=f.get_float("popularity"),
            vote_average=f.get_float("vote_average"),
            vote_count=f.get_int("vote_count"),
            original_language=f.get_str("original_language"),
            genre_ids=self.resolve_genre_ids(f),
            date_formats=self.config.date_formats,
        )

    def _tv_show_from(self, raw: Any) -> TVShow:
        f = self._fields(raw, "tv_show")
        origin_country = f.get_list("origin_country")
        if origin_country is not None and not all(isinstance(c, str) for c in origin_country):
            raise DecodingFailed("tv_show.origin_country: liste de textes attendue")
        return TVShow(
            id=f.get_int("id", required=True),
            name=f.get_str("name"),
            original_name=f.get_str("original_name"),
            overview=f.get_str("overview"),
            poster_path=f.get_str("poster_path"),
            backdrop_path=f.get_str("backdrop_path"),
            first_air_date_text=f.get_str("first_air_date"),
            adult=f.get_bool("adult"),
            origin_country=tuple(origin_country) if origin_country is not None else None,
            popularity=f.get_float("popularity"),
            vote_average=f.get_float("vote_average"),
            vote_count=f.get_int("vote_count"),
            original_language=f.get_str("original_language"),
            genre_ids=self.resolve_genre_ids(f),
            date_formats=self.config.date_formats,
        )

    # ------------------------------------------------------------------
    # Enveloppes et catalogues
    # ------------------------------------------------------------------

    def decode_page(self, body: Payload, item_decoder: Callable[[Any], T]) -> Page[T]:
        """
        Decode une page {page, total_pages, total_results, results}.

        L'ordre des resultats est celui du serveur. Un seul element invalide
        fait echouer toute la page. item_decoder ne recoit que des objets:
        un element d'un autre type (y compris du texte JSON) est refuse.
        """
        f = self._fields(self.load(body), "page")
        items = f.get_list("results", required=True)
        for index, item in enumerate(items):
            if not isinstance(item, Mapping):
                raise DecodingFailed(
                    f"page.results[{index}]: objet attendu, recu {_type_name(item)}"
                )
        return Page(
            page=f.get_int("page", required=True),
            total_pages=f.get_int("total_pages", required=True),
            total_results=f.get_int("total_results", required=True),
            results=tuple(item_decoder(item) for item in items),
        )

    def decode_genre(self, body: Payload) -> Genre:
        return self._genre_from(self.load(body))

    def _genre_from(self, raw: Any) -> Genre:
        f = self._fields(raw, "genre")
        return Genre(id=f.get_int("id", required=True), name=f.get_str("name", required=True))

    def decode_genre_list(self, body: Payload) -> GenreList:
        f = self._fields(self.load(body), "genre_list")
        return GenreList(
            genres=tuple(self._genre_from(g) for g in f.get_list("genres", required=True))
        )

    def decode_credit(self, body: Payload) -> Credit:
        return self._credit_from(self.load(body))

    def _credit_from(self, raw: Any) -> Credit:
        f = self._fields(raw, "credit")
        return Credit(
            id=f.get_int("id", required=True),
            name=f.get_str("name", required=True),
            character=f.get_str("character"),
            job=f.get_str("job"),
            department=f.get_str("department"),
            known_for_department=f.get_str("known_for_department"),
            profile_path=f.get_str("profile_path"),
            order=f.get_int("order"),
        )

    def decode_credits(self, body: Payload) -> Credits:
        f = self._fields(self.load(body), "credits")
        return Credits(
            id=f.get_int("id"),
            cast=tuple(self._credit_from(c) for c in f.get_list("cast", required=True)),
            crew=tuple(self._credit_from(c) for c in f.get_list("crew") or ()),
        )

    def decode_watch_provider(self, body: Payload) -> WatchProvider:
        return self._watch_provider_from(self.load(body))

    def _watch_provider_from(self, raw: Any) -> WatchProvider:
        f = self._fields(raw, "watch_provider")
        return WatchProvider(
            provider_id=f.get_int("provider_id", required=True),
            provider_name=f.get_str("provider_name", required=True),
            logo_path=f.get_str("logo_path"),
            display_priority=f.get_int("display_priority"),
        )

    def _region_from(self, raw: Any, code: str) -> RegionAvailability:
        f = self._fields(raw, f"watch_providers.results.{code}")

        def bucket(name: str) -> tuple[WatchProvider, ...]:
            return tuple(self._watch_provider_from(p) for p in f.get_list(name) or ())

        return RegionAvailability(
            link=f.get_str("link"),
            flatrate=bucket("flatrate"),
            rent=bucket("rent"),
            buy=bucket("buy"),
            ads=bucket("ads"),
            free=bucket("free"),
        )

    def decode_watch_providers(self, body: Payload) -> WatchProviderResult:
        f = self._fields(self.load(body), "watch_providers")
        regions = f.get_mapping("results", required=True)
        return WatchProviderResult(
            id=f.get_int("id"),
            # Les codes region sont des valeurs, pas des noms de champs
            results={
                str(code).upper(): self._region_from(availability, str(code))
                for code, availability in regions.items()
            },
        )
