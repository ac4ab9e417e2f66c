"""
Catalog entities.

Genres, credits, watch providers and the generic paginated envelope.
Relations to movies or shows are implicit through caller-supplied IDs.
"""

from dataclasses import dataclass, field
from typing import Generic, Mapping, Optional, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Genre:
    """A TMDB genre (e.g. 28 -> "Action")."""

    id: int
    name: str


@dataclass(frozen=True)
class GenreList:
    """Ordered genre list as returned by /genre/{movie,tv}/list."""

    genres: tuple[Genre, ...] = ()


@dataclass(frozen=True)
class Page(Generic[T]):
    """
    One page of a paginated TMDB listing.

    Attributes:
        page: 1-based page number
        total_pages: Number of pages available server-side
        total_results: Number of results across all pages
        results: Items of this page, in server order
    """

    page: int
    total_pages: int
    total_results: int
    results: tuple[T, ...] = ()

    def __len__(self) -> int:
        return len(self.results)

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages


@dataclass(frozen=True)
class Credit:
    """
    Cast or crew member.

    Cast entries carry ``character``; crew entries carry ``job`` and
    ``department``.
    """

    id: int
    name: str
    character: Optional[str] = None
    job: Optional[str] = None
    department: Optional[str] = None
    known_for_department: Optional[str] = None
    profile_path: Optional[str] = None
    order: Optional[int] = None

    @property
    def role(self) -> Optional[str]:
        """Character played, or job held for crew members."""
        return self.character or self.job


@dataclass(frozen=True)
class Credits:
    """Full credits payload: cast and crew, both in server order."""

    id: Optional[int] = None
    cast: tuple[Credit, ...] = ()
    crew: tuple[Credit, ...] = ()


@dataclass(frozen=True)
class WatchProvider:
    """A streaming/rental service."""

    provider_id: int
    provider_name: str
    logo_path: Optional[str] = None
    display_priority: Optional[int] = None


@dataclass(frozen=True)
class RegionAvailability:
    """Availability buckets of a title in one region."""

    link: Optional[str] = None
    flatrate: tuple[WatchProvider, ...] = ()
    rent: tuple[WatchProvider, ...] = ()
    buy: tuple[WatchProvider, ...] = ()
    ads: tuple[WatchProvider, ...] = ()
    free: tuple[WatchProvider, ...] = ()


@dataclass(frozen=True)
class WatchProviderResult:
    """
    Watch providers of a movie or show, keyed by ISO 3166-1 region code.
    """

    id: Optional[int] = None
    results: Mapping[str, RegionAvailability] = field(default_factory=dict)

    def for_region(self, region: str) -> Optional[RegionAvailability]:
        return self.results.get(region.upper())

    @property
    def regions(self) -> tuple[str, ...]:
        return tuple(self.results)
