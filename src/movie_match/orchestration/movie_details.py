"""
Movie details page: detail record plus trailer, streaming services and cast.
"""
import logging
from typing import List, Optional

from ..exceptions import NoMatchError, TransportError
from ..metadata import CastMember, MovieResult, TMDBClient, Video, WatchProvider, is_eligible
from ..schemas import MovieDetailsResponse

logger = logging.getLogger(__name__)

YOUTUBE_WATCH_URL = "https://www.youtube.com/watch?v={key}"


def pick_trailer(videos: List[Video]) -> Optional[str]:
    """URL of the first YouTube trailer, if any."""
    for video in videos:
        if video.type == "Trailer" and video.site == "YouTube":
            return YOUTUBE_WATCH_URL.format(key=video.key)
    return None


class MovieDetailsService:
    """
    Assembles everything shown for one movie.

    The detail record is mandatory; trailer, streaming services and cast
    are best-effort and left empty when their lookup fails.
    """

    def __init__(self, client: TMDBClient, region: str = "US", cast_limit: int = 5):
        self._client = client
        self.region = region
        self.cast_limit = cast_limit

    def get(self, movie_id: int) -> MovieDetailsResponse:
        """
        :raises NoMatchError: Movie is adult-flagged
        :raises TransportError: Detail lookup failed
        """
        movie = self._client.get_movie(movie_id)
        if movie.adult:
            logger.info(f"Movie {movie_id} filtered: adult content")
            raise NoMatchError("This movie is not available.")

        trailer_url = None
        try:
            trailer_url = pick_trailer(self._client.get_videos(movie_id))
        except TransportError as e:
            logger.warning(f"Videos lookup failed for movie {movie_id}: {e}")
        if trailer_url is None:
            logger.debug(f"No trailer found for movie {movie_id}")

        streaming: List[WatchProvider] = []
        try:
            streaming = self._client.get_watch_providers(movie_id, region=self.region)
        except TransportError as e:
            logger.warning(f"Watch provider lookup failed for movie {movie_id}: {e}")

        cast: List[CastMember] = []
        try:
            cast = self._client.get_credits(movie_id)[: self.cast_limit]
        except TransportError as e:
            logger.warning(f"Credits lookup failed for movie {movie_id}: {e}")

        return MovieDetailsResponse(
            movie=movie,
            trailer_url=trailer_url,
            streaming_services=streaming,
            cast=cast,
        )

    def similar(self, movie_id: int) -> List[MovieResult]:
        """Eligible movies similar to the given one."""
        return [m for m in self._client.get_similar(movie_id) if is_eligible(m)]
