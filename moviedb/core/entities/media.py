"""
Media entities.

Movies and TV shows as returned by the TMDB catalog. Both variants share a
read-only capability set (id, title, date, media kind, overview, artwork,
ratings, genre identifiers) and form the closed union ``MediaItem``.
"""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from functools import cached_property
from typing import Optional, Union

from moviedb.utils.dates import DEFAULT_DATE_FORMATS, parse_date


class MediaKind(str, Enum):
    """Fixed discriminator of a MediaItem variant."""

    MOVIE = "movie"
    TV_SHOW = "tv"


@dataclass(frozen=True)
class Movie:
    """
    Movie snapshot from TMDB.

    Attributes:
        id: TMDB movie ID
        title: Localized title
        original_title: Title in the original language
        overview: Plot summary
        poster_path: Server-relative poster path (e.g. "/abc.jpg")
        backdrop_path: Server-relative backdrop path
        release_date_text: Raw release date as sent by the server
        adult: Adult content flag
        video: Whether the entry is a video rather than a feature
        popularity: TMDB popularity score
        vote_average: Average rating (0-10)
        vote_count: Number of votes
        original_language: ISO 639-1 code
        genre_ids: Resolved genre identifiers, None when the payload had none
    """

    id: int
    title: Optional[str] = None
    original_title: Optional[str] = None
    overview: Optional[str] = None
    poster_path: Optional[str] = None
    backdrop_path: Optional[str] = None
    release_date_text: Optional[str] = None
    adult: Optional[bool] = None
    video: Optional[bool] = None
    popularity: Optional[float] = None
    vote_average: Optional[float] = None
    vote_count: Optional[int] = None
    original_language: Optional[str] = None
    genre_ids: Optional[tuple[int, ...]] = None
    date_formats: tuple[str, ...] = field(
        default=DEFAULT_DATE_FORMATS, repr=False, compare=False
    )

    @cached_property
    def release_date(self) -> Optional[date]:
        """Release date, None if absent or unparsable."""
        return parse_date(self.release_date_text, self.date_formats)

    @property
    def date(self) -> Optional[date]:
        return self.release_date

    @property
    def media_kind(self) -> MediaKind:
        return MediaKind.MOVIE


@dataclass(frozen=True)
class TVShow:
    """
    TV show snapshot from TMDB.

    ``title`` is an alias for ``name`` so that both variants can be handled
    through the same surface.

    Attributes:
        id: TMDB TV show ID
        name: Localized name
        original_name: Name in the original language
        overview: Series description
        poster_path: Server-relative poster path
        backdrop_path: Server-relative backdrop path
        first_air_date_text: Raw first air date as sent by the server
        adult: Adult content flag
        origin_country: ISO 3166-1 codes of the origin countries
        popularity: TMDB popularity score
        vote_average: Average rating (0-10)
        vote_count: Number of votes
        original_language: ISO 639-1 code
        genre_ids: Resolved genre identifiers, None when the payload had none
    """

    id: int
    name: Optional[str] = None
    original_name: Optional[str] = None
    overview: Optional[str] = None
    poster_path: Optional[str] = None
    backdrop_path: Optional[str] = None
    first_air_date_text: Optional[str] = None
    adult: Optional[bool] = None
    origin_country: Optional[tuple[str, ...]] = None
    popularity: Optional[float] = None
    vote_average: Optional[float] = None
    vote_count: Optional[int] = None
    original_language: Optional[str] = None
    genre_ids: Optional[tuple[int, ...]] = None
    date_formats: tuple[str, ...] = field(
        default=DEFAULT_DATE_FORMATS, repr=False, compare=False
    )

    @cached_property
    def first_air_date(self) -> Optional[date]:
        """First air date, None if absent or unparsable."""
        return parse_date(self.first_air_date_text, self.date_formats)

    @property
    def title(self) -> Optional[str]:
        return self.name

    @property
    def date(self) -> Optional[date]:
        return self.first_air_date

    @property
    def media_kind(self) -> MediaKind:
        return MediaKind.TV_SHOW


MediaItem = Union[Movie, TVShow]
