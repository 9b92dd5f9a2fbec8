"""
Client for the movie metadata service (TMDB v3).

The client is an explicit value: API key, base URL, timeout and HTTP session
are passed in by the caller. Nothing is created at module scope.
"""
import logging
from typing import Any, Dict, Iterable, List, Optional, Type, TypeVar

import requests
from pydantic import BaseModel, ValidationError

from ..exceptions import TransportError
from ..transport import request_json
from .payloads import (
    CastMember,
    MovieDetails,
    MoviePage,
    MovieResult,
    Video,
    WatchProvider,
)

logger = logging.getLogger(__name__)

PayloadT = TypeVar("PayloadT", bound=BaseModel)


class TMDBClient:
    """
    Thin typed wrapper over the TMDB endpoints the service needs.

    Usage:
        client = TMDBClient(api_key=config.tmdb_api_key)
        results = client.search_movies("Inception")
    """

    SERVICE_NAME = "TMDB"

    def __init__(
        self,
        api_key: str,
        base_url: str = "https://api.themoviedb.org/3",
        timeout: float = 10.0,
        session: Optional[requests.Session] = None,
        language: str = "en-US",
    ):
        """
        :param api_key: TMDB v3 API key
        :param base_url: API root, without trailing slash
        :param timeout: Per-request timeout in seconds
        :param session: Optional shared requests session (created if omitted)
        :param language: Response language
        """
        if not api_key:
            raise ValueError("TMDB api_key is required")
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._session = session or requests.Session()
        self._language = language

    def _get(self, path: str, **params: Any) -> Dict[str, Any]:
        query = {"api_key": self._api_key, "language": self._language}
        query.update({k: v for k, v in params.items() if v is not None})
        return request_json(
            self._session,
            "GET",
            f"{self._base_url}{path}",
            params=query,
            timeout=self._timeout,
            service=self.SERVICE_NAME,
        )

    def _parse(self, model: Type[PayloadT], data: Any) -> PayloadT:
        """Validate one payload, mapping schema mismatches to TransportError."""
        try:
            return model.model_validate(data)
        except ValidationError as e:
            logger.warning(
                f"{self.SERVICE_NAME} returned a malformed {model.__name__}: {e.error_count()} errors"
            )
            raise TransportError(f"{self.SERVICE_NAME} returned an unexpected payload") from e

    def _parse_list(self, model: Type[PayloadT], items: Any) -> List[PayloadT]:
        return [self._parse(model, item) for item in items or []]

    # ----------------------------
    # Lists
    # ----------------------------
    def search_movies(self, query: str, page: int = 1) -> List[MovieResult]:
        """Title search. Returns the ranked result list (may be empty)."""
        data = self._get("/search/movie", query=query, page=page, include_adult="false")
        results = self._parse(MoviePage, data).results
        logger.debug(f"TMDB search '{query}' returned {len(results)} results")
        return results

    def get_similar(self, movie_id: int, page: int = 1) -> List[MovieResult]:
        data = self._get(f"/movie/{int(movie_id)}/similar", page=page)
        return self._parse(MoviePage, data).results

    def get_popular(self, page: int = 1) -> MoviePage:
        data = self._get("/movie/popular", page=page)
        return self._parse(MoviePage, data)

    def discover_by_genre(
        self,
        genre_ids: Iterable[int],
        page: int = 1,
        sort_by: str = "popularity.desc",
    ) -> MoviePage:
        """Discover movies having all of the given genres, one page at a time."""
        data = self._get(
            "/discover/movie",
            with_genres=",".join(str(g) for g in genre_ids),
            sort_by=sort_by,
            page=page,
            include_adult="false",
        )
        return self._parse(MoviePage, data)

    # ----------------------------
    # Single movie
    # ----------------------------
    def get_movie(self, movie_id: int) -> MovieDetails:
        data = self._get(f"/movie/{int(movie_id)}")
        return self._parse(MovieDetails, data)

    def get_credits(self, movie_id: int) -> List[CastMember]:
        data = self._get(f"/movie/{int(movie_id)}/credits")
        return self._parse_list(CastMember, data.get("cast"))

    def get_videos(self, movie_id: int) -> List[Video]:
        data = self._get(f"/movie/{int(movie_id)}/videos")
        return self._parse_list(Video, data.get("results"))

    def get_watch_providers(self, movie_id: int, region: str = "US") -> List[WatchProvider]:
        """Flat-rate (subscription) providers for one region."""
        data = self._get(f"/movie/{int(movie_id)}/watch/providers")
        region_data = (data.get("results") or {}).get(region) or {}
        return self._parse_list(WatchProvider, region_data.get("flatrate"))


def is_eligible(movie: MovieResult, min_popularity: Optional[float] = None) -> bool:
    """
    Eligibility filter applied wherever a movie is shown to the user.

    Adult-flagged and posterless movies are never eligible. When
    min_popularity is given, popularity must be strictly above it.
    """
    if movie.adult or not movie.poster_path:
        return False
    if min_popularity is not None and movie.popularity <= min_popularity:
        return False
    return True
