"""
Structured parse of the generative-text recommendation list.
"""
import logging
from typing import List, Optional

from ..extraction import StructuredLineParser
from ..models import ReconciledMatch
from .base import MatchStrategy, ReconciliationStrategy

logger = logging.getLogger(__name__)


class StrictParseReconciler(ReconciliationStrategy):
    """
    Every line matching the list grammar becomes one match, in the model's
    own ranking order. Confidence and explanation are taken verbatim.
    """

    strategy = MatchStrategy.STRICT_PARSE

    def __init__(self, parser: Optional[StructuredLineParser] = None):
        self._parser = parser or StructuredLineParser()

    def reconcile(self, signal: Optional[str]) -> List[ReconciledMatch]:
        matches = [
            ReconciledMatch(
                title=candidate.title,
                year=candidate.year,
                confidence=candidate.confidence_hint,
                explanation=candidate.explanation,
                source_candidate_count=1,
                strategy=self.strategy.value,
            )
            for candidate in self._parser.parse(signal)
        ]
        logger.info(f"Strict parse reconciliation produced {len(matches)} matches")
        return matches
