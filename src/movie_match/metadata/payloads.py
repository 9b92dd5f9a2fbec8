"""
Pydantic models for the metadata service's JSON payloads.

Only the fields the service uses are declared; everything else is ignored.
Nullable fields the service sometimes omits get safe defaults.
"""
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class _Payload(BaseModel):
    model_config = ConfigDict(extra="ignore")


class MovieResult(_Payload):
    """A movie as returned by search, discover, popular and similar lists."""
    id: int
    title: str = ""
    release_date: Optional[str] = None
    poster_path: Optional[str] = None
    popularity: float = 0.0
    adult: bool = False
    overview: str = ""

    @field_validator("title", "overview", mode="before")
    @classmethod
    def _none_to_empty(cls, value):
        return value or ""

    @field_validator("popularity", mode="before")
    @classmethod
    def _none_to_zero(cls, value):
        return value or 0.0

    @property
    def release_year(self) -> Optional[int]:
        if self.release_date and len(self.release_date) >= 4 and self.release_date[:4].isdigit():
            return int(self.release_date[:4])
        return None


class MoviePage(_Payload):
    page: int = 1
    total_pages: int = 1
    total_results: int = 0
    results: List[MovieResult] = Field(default_factory=list)


class Genre(_Payload):
    id: int
    name: str


class MovieDetails(_Payload):
    id: int
    title: str = ""
    overview: str = ""
    tagline: Optional[str] = None
    release_date: Optional[str] = None
    runtime: Optional[int] = None
    vote_average: Optional[float] = None
    popularity: float = 0.0
    poster_path: Optional[str] = None
    backdrop_path: Optional[str] = None
    adult: bool = False
    genres: List[Genre] = Field(default_factory=list)

    @field_validator("title", "overview", mode="before")
    @classmethod
    def _none_to_empty(cls, value):
        return value or ""


class CastMember(_Payload):
    id: int
    name: str
    character: Optional[str] = None
    profile_path: Optional[str] = None
    order: Optional[int] = None


class Video(_Payload):
    key: str
    site: str = ""
    type: str = ""
    name: str = ""


class WatchProvider(_Payload):
    provider_id: int
    provider_name: str
    logo_path: Optional[str] = None
