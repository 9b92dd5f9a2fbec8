"""
Best-guess selection over vision labels.
"""
import logging
import re
from typing import List, Optional

from ..extraction import clean_title, extract_year
from ..models import ReconciledMatch, VisionAnnotations
from .base import MatchStrategy, ReconciliationStrategy

logger = logging.getLogger(__name__)

MOVIE_ENTITY_PATTERN = re.compile(r"movie|film", re.IGNORECASE)
CAPITALIZED_SEQUENCE = re.compile(r"([A-Z][a-z]+)(?:\s+[A-Z][a-z]+)*")


def title_shape_score(text: str) -> int:
    """1 if the text contains a capitalized word sequence, else 0."""
    return 1 if CAPITALIZED_SEQUENCE.search(text) else 0


class BestGuessReconciler(ReconciliationStrategy):
    """
    Collects candidates from best-guess labels, movie/film web entities and
    raw text annotations (in that priority order) and keeps the first one
    with the highest title-shape score. A score of zero is no match.
    """

    strategy = MatchStrategy.BEST_GUESS

    def __init__(self, default_confidence: int = 50):
        self._default_confidence = default_confidence

    @staticmethod
    def collect_candidates(annotations: Optional[VisionAnnotations]) -> List[str]:
        if annotations is None:
            return []
        entities = [e for e in annotations.web_entities if e and MOVIE_ENTITY_PATTERN.search(e)]
        candidates = []
        for text in [*annotations.best_guess_labels, *entities, *annotations.text_annotations]:
            if not text or not text.strip():
                continue
            # OCR text comes back as one multi-line block; the first line is the headline
            candidates.append(text.strip().splitlines()[0].strip())
        return candidates

    def reconcile(self, signal: Optional[VisionAnnotations]) -> List[ReconciledMatch]:
        candidates = self.collect_candidates(signal)

        best, best_score = None, 0
        for text in candidates:
            score = title_shape_score(text)
            if score > best_score:
                best, best_score = text, score

        title = clean_title(best)
        if title is None:
            logger.info(f"Best-guess reconciliation: none of {len(candidates)} candidates looks like a title")
            return []

        logger.info(f"Best-guess reconciliation picked '{title}' from {len(candidates)} candidates")
        return [
            ReconciledMatch(
                title=title,
                year=extract_year(best),
                confidence=self._default_confidence,
                source_candidate_count=len(candidates),
                strategy=self.strategy.value,
            )
        ]
