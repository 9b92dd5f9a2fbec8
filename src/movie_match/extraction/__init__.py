"""
Title extraction from raw producer output.

Key components:
- TitleExtractor: ordered pattern rules with a separator fallback
- StructuredLineParser: strict grammar for generative-text lists
- clean_title / extract_year: shared normalization helpers
"""
from .title_extractor import (
    TitleExtractor,
    TITLE_PATTERNS,
    clean_title,
    extract_year,
)
from .structured_parser import StructuredLineParser, LINE_PATTERN

__all__ = [
    "TitleExtractor",
    "TITLE_PATTERNS",
    "clean_title",
    "extract_year",
    "StructuredLineParser",
    "LINE_PATTERN",
]
