"""
Strict parser for the generative-text recommendation list.

The prompt asks for one movie per line in the form:
    1. Inception (2010) - 92% - A thief who steals secrets through dreams
Lines that do not follow this grammar are discarded.
"""
import logging
import re
from typing import List, Optional

from ..models import Candidate
from .title_extractor import clean_title

logger = logging.getLogger(__name__)

LINE_PATTERN = re.compile(
    r"^\s*\d+\.\s*(.+?)\s*\((\d{4})\)\s*[-–—]\s*(\d{1,3})\s*%\s*[-–—]\s*(.+?)\s*$"
)


class StructuredLineParser:
    """
    Parses "<rank>. <title> (<year>) - <confidence>% - <explanation>" lines.
    """

    def parse_line(self, line: Optional[str]) -> Optional[Candidate]:
        """
        Parse one line.

        :return: Candidate with title, year, confidence and explanation,
                 or None if the line does not follow the grammar
        """
        if not line:
            return None

        match = LINE_PATTERN.match(line)
        if not match:
            return None

        raw_title, year, confidence, explanation = match.groups()
        title = clean_title(raw_title)
        confidence = int(confidence)
        if title is None or confidence > 100:
            return None

        return Candidate(
            raw_text=line,
            title=title,
            year=int(year),
            confidence_hint=confidence,
            explanation=explanation,
        )

    def parse(self, text: Optional[str]) -> List[Candidate]:
        """
        Parse every line of a response, keeping the model's order.

        :param text: Full generative-text response
        :return: Parsed candidates (possibly empty)
        """
        if not text:
            return []

        candidates = []
        discarded = 0
        for line in text.splitlines():
            if not line.strip():
                continue
            candidate = self.parse_line(line)
            if candidate is None:
                discarded += 1
                logger.debug(f"Discarded line not matching the list grammar: {line[:200]!r}")
                continue
            candidates.append(candidate)

        if discarded:
            logger.info(f"Structured parse kept {len(candidates)} lines, discarded {discarded}")
        return candidates
