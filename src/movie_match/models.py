"""
Domain records for the title matching pipeline.

All records are created and discarded within a single search.
"""
from dataclasses import dataclass, field
from typing import List, Optional


@dataclass(frozen=True)
class Candidate:
    """
    An unverified title extracted from one raw signal fragment.

    Attributes:
        raw_text: The fragment the title was extracted from
        title: Extracted title, trimmed
        year: Release year hint, if the fragment carried one
        confidence_hint: Producer supplied confidence (0-100)
        explanation: Producer supplied reasoning
    """
    raw_text: str
    title: str
    year: Optional[int] = None
    confidence_hint: Optional[int] = None
    explanation: Optional[str] = None


@dataclass(frozen=True)
class ReconciledMatch:
    """
    A candidate after reconciliation, always carrying a confidence score.

    Attributes:
        title: Clean, non-empty title
        confidence: Confidence between 0 and 100
        year: Release year hint
        explanation: Why this title was suggested
        source_candidate_count: Number of candidates that backed this match
        strategy: Reconciliation strategy that produced it
    """
    title: str
    confidence: int
    year: Optional[int] = None
    explanation: Optional[str] = None
    source_candidate_count: int = 1
    strategy: str = "vote"

    def __post_init__(self):
        if not self.title or self.title != self.title.strip():
            raise ValueError(f"Title must be non-empty and trimmed, got {self.title!r}")
        if not 0 <= self.confidence <= 100:
            raise ValueError(f"Confidence must be between 0 and 100, got {self.confidence}")


@dataclass(frozen=True)
class VerifiedMovie:
    """A reconciled match confirmed against the metadata service."""
    match: ReconciledMatch
    movie_id: int
    title: str
    poster_path: str
    release_date: Optional[str] = None
    overview: str = ""
    popularity: float = 0.0
    adult: bool = False

    @property
    def confidence(self) -> int:
        return self.match.confidence

    @property
    def release_year(self) -> Optional[int]:
        if self.release_date and len(self.release_date) >= 4 and self.release_date[:4].isdigit():
            return int(self.release_date[:4])
        return None


@dataclass(frozen=True)
class ReverseImageItem:
    """One result item from the reverse image search service."""
    title: Optional[str] = None
    snippet: Optional[str] = None
    link: Optional[str] = None

    def texts(self) -> List[Optional[str]]:
        return [self.title, self.snippet, self.link]


@dataclass(frozen=True)
class VisionAnnotations:
    """Labels returned by the vision service for one image."""
    best_guess_labels: List[str] = field(default_factory=list)
    web_entities: List[str] = field(default_factory=list)
    text_annotations: List[str] = field(default_factory=list)
