"""
Random movie draw from the popular list.
"""
import logging
import random
from typing import Optional

from ..exceptions import NoMatchError, TransportError
from ..metadata import MovieResult, TMDBClient, is_eligible

logger = logging.getLogger(__name__)

RANDOM_MOVIE_FAILURE = "We couldn't find a movie to recommend right now. Please try again."


class RandomMovieService:
    """
    Draws a random eligible movie with a bounded number of attempts.

    Each attempt picks a random page of the popular list and a random
    eligible movie on it. Attempts that fail or find nothing eligible
    are counted; after max_attempts a NoMatchError is raised.
    """

    def __init__(
        self,
        client: TMDBClient,
        max_attempts: int = 3,
        max_page: int = 50,
        rng: Optional[random.Random] = None,
    ):
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        self._client = client
        self.max_attempts = max_attempts
        self.max_page = max(1, max_page)
        self._rng = rng or random.Random()

    def draw(self) -> MovieResult:
        """
        :raises NoMatchError: After max_attempts attempts without an eligible movie
        """
        for attempt in range(1, self.max_attempts + 1):
            page = self._rng.randint(1, self.max_page)
            try:
                movie_page = self._client.get_popular(page=page)
            except TransportError as e:
                logger.warning(f"Random draw attempt {attempt}/{self.max_attempts} failed: {e}")
                continue

            eligible = [m for m in movie_page.results if is_eligible(m)]
            if eligible:
                movie = self._rng.choice(eligible)
                logger.info(f"Random draw picked '{movie.title}' on attempt {attempt} (page {page})")
                return movie

            logger.info(
                f"Random draw attempt {attempt}/{self.max_attempts}: "
                f"no eligible movies on page {page}"
            )

        raise NoMatchError(RANDOM_MOVIE_FAILURE)
