"""
Catalog entities representing core domain concepts.

Entities are immutable value snapshots of one decoded response. None of them
reference each other: a credit list belongs to a movie only through the ID
the caller used to fetch it.

Exports:
- MediaKind, Movie, TVShow, MediaItem: polymorphic media entries
- Genre, GenreList: genre catalog
- Page: generic paginated envelope
- Credit, Credits: cast and crew
- WatchProvider, RegionAvailability, WatchProviderResult: availability
"""

from moviedb.core.entities.catalog import (
    Credit,
    Credits,
    Genre,
    GenreList,
    Page,
    RegionAvailability,
    WatchProvider,
    WatchProviderResult,
)
from moviedb.core.entities.media import MediaItem, MediaKind, Movie, TVShow

__all__ = [
    "MediaKind",
    "Movie",
    "TVShow",
    "MediaItem",
    "Genre",
    "GenreList",
    "Page",
    "Credit",
    "Credits",
    "WatchProvider",
    "RegionAvailability",
    "WatchProviderResult",
]
