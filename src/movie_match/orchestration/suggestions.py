"""
Live title suggestions while the user types.
"""
import logging
import threading
from typing import Callable, List, Optional

from ..exceptions import TransportError
from ..metadata import MovieResult, TMDBClient, is_eligible

logger = logging.getLogger(__name__)


class SuggestionService:
    """
    Fetches a short list of eligible titles for a partial query.

    Queries shorter than min_chars never reach the metadata service.
    """

    def __init__(
        self,
        client: TMDBClient,
        min_chars: int = 3,
        limit: int = 5,
        min_popularity: float = 1.0,
    ):
        self._client = client
        self.min_chars = min_chars
        self.limit = limit
        self.min_popularity = min_popularity

    def fetch(self, query: Optional[str]) -> List[MovieResult]:
        query = (query or "").strip()
        if len(query) < self.min_chars:
            return []

        try:
            results = self._client.search_movies(query)
        except TransportError as e:
            logger.warning(f"Suggestions for '{query}' failed: {e}")
            return []

        return [r for r in results if is_eligible(r, self.min_popularity)][: self.limit]


class DebouncedSuggester:
    """
    Coalesces rapid query updates into one fetch after a quiet period.

    Each update cancels the pending timer and starts a new one, so only
    the last query of a burst is fetched. A result whose query was
    superseded while its fetch was in flight is dropped.

    Usage:
        suggester = DebouncedSuggester(service.fetch, show, delay=0.3)
        suggester.update("In")
        suggester.update("Inception")   # only this one is fetched
    """

    def __init__(
        self,
        fetch: Callable[[str], List[MovieResult]],
        on_results: Callable[[str, List[MovieResult]], None],
        delay: float = 0.3,
        timer_factory: Callable[..., threading.Timer] = threading.Timer,
    ):
        """
        :param fetch: Suggestion fetcher, e.g. SuggestionService.fetch
        :param on_results: Called with (query, results) for the latest query only.
            Runs while updates are blocked, so keep it short
        :param delay: Quiet period in seconds
        :param timer_factory: Builds a started-on-demand timer (threading.Timer signature)
        """
        self._fetch = fetch
        self._on_results = on_results
        self.delay = delay
        self._timer_factory = timer_factory
        self._lock = threading.RLock()
        self._timer = None
        self._generation = 0

    def update(self, query: str) -> None:
        """Record a new query, restarting the quiet period."""
        with self._lock:
            self._generation += 1
            generation = self._generation
            if self._timer is not None:
                self._timer.cancel()
            self._timer = self._timer_factory(self.delay, self._run, args=(query, generation))
            self._timer.daemon = True
            self._timer.start()

    def cancel(self) -> None:
        """Drop any pending fetch and any in-flight result."""
        with self._lock:
            self._generation += 1
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None

    def _run(self, query: str, generation: int) -> None:
        with self._lock:
            if generation != self._generation:
                return
        results = self._fetch(query)
        # delivered under the lock so no update() can land between check and delivery
        with self._lock:
            if generation != self._generation:
                logger.debug(f"Discarding stale suggestions for '{query}'")
                return
            self._on_results(query, results)
