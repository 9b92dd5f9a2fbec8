"""
Metadata service access: TMDB client and payload models.
"""
from .tmdb_client import TMDBClient, is_eligible
from .payloads import (
    CastMember,
    Genre,
    MovieDetails,
    MoviePage,
    MovieResult,
    Video,
    WatchProvider,
)

__all__ = [
    "TMDBClient",
    "is_eligible",
    "CastMember",
    "Genre",
    "MovieDetails",
    "MoviePage",
    "MovieResult",
    "Video",
    "WatchProvider",
]
