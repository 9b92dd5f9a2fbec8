"""
Title extraction from noisy search-result and label text.

Reverse image search results look like:
    '"Inception" screenshot - Movie Stills'
    'Screenshot from Inception (2010) | Film Grab'
    'Inception movie clip - dream collapse'
    'The Dark Knight (2008) - IMDb'
Each format has a pattern rule; the first rule that matches wins.
"""
import re
from typing import List, Optional, Pattern

from ..models import Candidate

# Priority order matters: the generic rule at the end also matches the
# formats handled by the more specific rules above it.
TITLE_PATTERNS: List[Pattern] = [
    re.compile(r'"([^"]+)" screenshot', re.IGNORECASE),
    re.compile(r"screenshot from (.+?) \(\d{4}\)", re.IGNORECASE),
    re.compile(r"(.+?) (?:movie|film) (?:clip|scene)", re.IGNORECASE),
    re.compile(r"^(.*?)(?:\s*\(\d{4}\)|\s*-?\s*scene|screenshot)", re.IGNORECASE),
]

# Bullet, pipe, em/en dash, middle dot, or a hyphen with spaces around it.
# A bare hyphen is not a separator so "Spider-Man" survives.
SEPARATOR_PATTERN = re.compile(r"[•|—–·]|\s-\s")

YEAR_PATTERN = re.compile(r"\((\d{4})(?:\s+(?:film|movie))?\)", re.IGNORECASE)
TRAILING_YEAR_PATTERN = re.compile(r"\s*\((?:\d{4}\s*)?(?:film|movie)?\s*\)$", re.IGNORECASE)
MIN_YEAR = 1870
MAX_YEAR = 2100

_QUOTE_AND_MARKUP = "\"'`*_“”‘’«»"
_EDGE_PUNCTUATION = _QUOTE_AND_MARKUP + ".,;:-–—•·|#"


def clean_title(text: Optional[str]) -> Optional[str]:
    """
    Trim whitespace, quoting and punctuation artifacts from a title.

    Internal punctuation is kept ("Spider-Man: No Way Home").
    Returns None when nothing is left.
    """
    if not text:
        return None
    cleaned = " ".join(text.split())
    cleaned = cleaned.strip(_EDGE_PUNCTUATION + " ")
    # a trailing "(2010)" or "(2010 film)" is a hint, not part of the title
    cleaned = TRAILING_YEAR_PATTERN.sub("", cleaned).strip(_EDGE_PUNCTUATION + " ")
    return cleaned or None


def extract_year(text: Optional[str]) -> Optional[int]:
    """Return the first plausible "(YYYY)" year in the text."""
    if not text:
        return None
    for match in YEAR_PATTERN.finditer(text):
        year = int(match.group(1))
        if MIN_YEAR <= year <= MAX_YEAR:
            return year
    return None


class TitleExtractor:
    """
    Turns one raw text fragment into zero or one candidate title.

    Never raises: missing input, unmatched input and empty captures all
    yield None.

    Usage:
        extractor = TitleExtractor()
        extractor.extract_title('"Inception" screenshot')   # "Inception"
        extractor.extract_title("Inception • Wikipedia")    # "Inception"
    """

    def __init__(self, patterns: Optional[List[Pattern]] = None):
        self._patterns = patterns if patterns is not None else TITLE_PATTERNS

    def extract_title(self, text: Optional[str]) -> Optional[str]:
        """
        Apply the pattern rules in order, falling back to the first
        separator-delimited segment.

        :param text: Raw title, snippet, link or label (may be None)
        :return: Trimmed title or None
        """
        if not text or not isinstance(text, str):
            return None

        for pattern in self._patterns:
            match = pattern.search(text)
            if match:
                return match.group(1).strip() or None

        first_segment = SEPARATOR_PATTERN.split(text, maxsplit=1)[0]
        return first_segment.strip() or None

    def extract_candidate(self, text: Optional[str]) -> Optional[Candidate]:
        """Like extract_title, but keeps the raw text and any year hint."""
        title = self.extract_title(text)
        if title is None:
            return None
        return Candidate(raw_text=text, title=title, year=extract_year(text))
