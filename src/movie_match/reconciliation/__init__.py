"""
Reconciliation strategies: raw producer output to ranked matches.

- VoteReconciler ("vote"): reverse image search results
- StrictParseReconciler ("strict-parse"): generative-text lists
- BestGuessReconciler ("best-guess"): vision labels
"""
from .base import MatchStrategy, ReconciliationStrategy
from .vote import VoteReconciler, most_common_title
from .strict_parse import StrictParseReconciler
from .best_guess import BestGuessReconciler, title_shape_score

__all__ = [
    "MatchStrategy",
    "ReconciliationStrategy",
    "VoteReconciler",
    "most_common_title",
    "StrictParseReconciler",
    "BestGuessReconciler",
    "title_shape_score",
]
