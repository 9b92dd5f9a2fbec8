from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .metadata import CastMember, MovieDetails, MovieResult, WatchProvider
from .models import VerifiedMovie


@dataclass
class SearchResponse:
    matches: List[VerifiedMovie]
    strategy: str
    candidates_considered: int
    message: Optional[str] = None
    latency_ms: Optional[int] = None

    @property
    def is_empty(self) -> bool:
        return not self.matches


@dataclass
class MovieDetailsResponse:
    movie: MovieDetails
    trailer_url: Optional[str] = None
    streaming_services: List[WatchProvider] = field(default_factory=list)
    cast: List[CastMember] = field(default_factory=list)


@dataclass(frozen=True)
class Mood:
    id: int
    name: str
    genre_ids: Tuple[int, ...]
    description: str


@dataclass
class MoodResultsPage:
    mood: Mood
    movies: List[MovieResult]
    page: int
    total_pages: int

    @property
    def has_more(self) -> bool:
        return self.page < self.total_pages
