"""
Frequency voting over reverse image search results.
"""
import logging
from collections import Counter
from typing import Iterable, List, Optional

from ..extraction import TitleExtractor, clean_title
from ..models import Candidate, ReconciledMatch, ReverseImageItem
from .base import MatchStrategy, ReconciliationStrategy

logger = logging.getLogger(__name__)


def most_common_title(titles: Iterable[str]) -> Optional[str]:
    """
    Return the most frequent title; ties go to the one seen first.

    Counter preserves insertion order and max() keeps the first maximum.
    """
    counts = Counter(titles)
    if not counts:
        return None
    return max(counts, key=counts.__getitem__)


class VoteReconciler(ReconciliationStrategy):
    """
    Extracts a candidate from every title, snippet and link of every result
    item and returns the title with the most votes.

    Confidence is the winner's share of all votes.
    """

    strategy = MatchStrategy.VOTE

    def __init__(self, extractor: Optional[TitleExtractor] = None):
        self._extractor = extractor or TitleExtractor()

    def collect_candidates(self, items: Optional[Iterable[ReverseImageItem]]) -> List[Candidate]:
        candidates = []
        for item in items or []:
            for text in item.texts():
                candidate = self._extractor.extract_candidate(text)
                if candidate is not None:
                    candidates.append(candidate)
        return candidates

    def reconcile(self, signal: Optional[Iterable[ReverseImageItem]]) -> List[ReconciledMatch]:
        candidates = self.collect_candidates(signal)
        winner = most_common_title(c.title for c in candidates)
        if winner is None:
            logger.info("Vote reconciliation: no candidates extracted")
            return []

        title = clean_title(winner)
        if title is None:
            logger.info(f"Vote reconciliation: winner {winner!r} is empty after cleaning")
            return []

        backing = [c for c in candidates if c.title == winner]
        year = next((c.year for c in backing if c.year is not None), None)
        confidence = round(100 * len(backing) / len(candidates))

        logger.info(
            f"Vote reconciliation: '{title}' won with {len(backing)}/{len(candidates)} votes"
        )
        return [
            ReconciledMatch(
                title=title,
                year=year,
                confidence=confidence,
                source_candidate_count=len(backing),
                strategy=self.strategy.value,
            )
        ]
