"""
Core abstraction for reconciliation strategies.
"""
from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, List

from ..models import ReconciledMatch


class MatchStrategy(str, Enum):
    """Named reconciliation policies, one per signal producer."""
    VOTE = "vote"
    STRICT_PARSE = "strict-parse"
    BEST_GUESS = "best-guess"


class ReconciliationStrategy(ABC):
    """
    Turns one producer's raw signal into ranked ReconciledMatch records.

    Implementations never raise on unusable input; they return an empty
    list, which callers treat as "no recommendation".
    """

    strategy: MatchStrategy

    @abstractmethod
    def reconcile(self, signal: Any) -> List[ReconciledMatch]:
        """
        :param signal: Raw producer output
        :return: Matches in ranked order (possibly empty)
        """
        pass
