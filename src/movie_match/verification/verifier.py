"""
Confirms reconciled matches against the metadata service.
"""
import logging
import re
from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional, Sequence

from rapidfuzz import fuzz

from ..exceptions import NoMatchError, TransportError
from ..metadata import MovieResult, TMDBClient, is_eligible
from ..models import ReconciledMatch, VerifiedMovie

logger = logging.getLogger(__name__)


def normalize_title(title: str) -> str:
    """Lowercase, drop punctuation and collapse whitespace for comparison."""
    return " ".join(re.sub(r"[^\w\s]", " ", title.lower()).split())


class MetadataVerifier:
    """
    Looks each match up by title and attaches canonical identity fields.

    Selection policy:
    1. Drop adult-flagged, posterless and unpopular results
       (popularity must be above min_popularity)
    2. Prefer the first remaining result whose title matches and, when
       the match has a year, whose release year matches
    3. Otherwise take the first remaining result

    Usage:
        verifier = MetadataVerifier(client, min_popularity=1.0)
        movies = verifier.verify(matches)
    """

    def __init__(
        self,
        client: TMDBClient,
        min_popularity: float = 1.0,
        title_match_threshold: float = 0.9,
        max_workers: int = 4,
    ):
        """
        :param client: Metadata service client
        :param min_popularity: Results must be strictly more popular than this
        :param title_match_threshold: rapidfuzz ratio (0.0-1.0) counted as a title match
        :param max_workers: Concurrent lookups per batch
        """
        if not 0.0 <= title_match_threshold <= 1.0:
            raise ValueError(
                f"title_match_threshold must be between 0.0 and 1.0, got {title_match_threshold}"
            )
        self._client = client
        self.min_popularity = min_popularity
        self.title_match_threshold = title_match_threshold
        self._max_workers = max(1, max_workers)

    def titles_match(self, candidate: str, result_title: str) -> bool:
        a, b = normalize_title(candidate), normalize_title(result_title)
        if not a or not b:
            return False
        if a == b:
            return True
        return fuzz.ratio(a, b) >= self.title_match_threshold * 100

    def select(self, match: ReconciledMatch, results: Sequence[MovieResult]) -> Optional[MovieResult]:
        """Apply the selection policy to one result list."""
        eligible = [r for r in results if is_eligible(r, self.min_popularity)]
        if not eligible:
            return None

        for result in eligible:
            if not self.titles_match(match.title, result.title):
                continue
            if match.year is not None and result.release_year != match.year:
                continue
            return result

        return eligible[0]

    def verify_one(self, match: ReconciledMatch) -> VerifiedMovie:
        """
        Verify a single match.

        :raises TransportError: If the metadata lookup fails
        :raises NoMatchError: If no acceptable result exists
        """
        results = self._client.search_movies(match.title)
        chosen = self.select(match, results)
        if chosen is None:
            raise NoMatchError(
                f"No acceptable metadata match for '{match.title}' "
                f"({len(results)} results before filtering)"
            )

        return VerifiedMovie(
            match=match,
            movie_id=chosen.id,
            title=chosen.title,
            poster_path=chosen.poster_path,
            release_date=chosen.release_date,
            overview=chosen.overview,
            popularity=chosen.popularity,
            adult=chosen.adult,
        )

    def _verify_or_drop(self, match: ReconciledMatch) -> Optional[VerifiedMovie]:
        try:
            return self.verify_one(match)
        except NoMatchError as e:
            logger.info(f"Dropping candidate: {e}")
        except TransportError as e:
            logger.warning(f"Dropping candidate '{match.title}' after transport failure: {e}")
        return None

    def verify(self, matches: Sequence[ReconciledMatch]) -> List[VerifiedMovie]:
        """
        Verify a batch concurrently.

        Candidates that fail (transport error or no match) are dropped
        without affecting the others. Input order is preserved.
        """
        if not matches:
            return []

        workers = min(self._max_workers, len(matches))
        with ThreadPoolExecutor(max_workers=workers) as executor:
            outcomes = list(executor.map(self._verify_or_drop, matches))

        verified = [movie for movie in outcomes if movie is not None]
        logger.info(f"Verified {len(verified)} of {len(matches)} candidates")
        return verified
