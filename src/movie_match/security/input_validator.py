"""
Validation for free-text user input.

Descriptions are embedded in the generative-text prompt, so obvious
prompt-injection phrases are rejected along with empty or oversized input.
"""

import re
from typing import Optional

from .exceptions import ValidationError


class InputValidator:
    """
    Validates user queries before they reach any collaborator.
    """

    MAX_QUERY_LENGTH = 500

    INJECTION_PATTERNS = [
        r"ignore\s+(all\s+)?(previous|above|all)\s+instructions?",
        r"(system|assistant|prompt)\s*:",
        r"forget\s+everything",
        r"disregard\s+(the\s+)?(above|previous)",
        r"override\s+(previous|above|all)",
        r"pretend\s+to\s+be",
    ]

    @staticmethod
    def validate_query(
        query: Optional[str],
        field_name: str = "Query",
        max_length: int = MAX_QUERY_LENGTH,
    ) -> str:
        """
        Validate a title or description query.

        :param query: Raw user input
        :param field_name: Name used in error messages
        :param max_length: Maximum allowed length
        :return: The query with null bytes removed and whitespace trimmed
        :raises ValidationError: If the query is empty, too long or malicious
        """
        if not query or not isinstance(query, str):
            raise ValidationError(f"{field_name} must be a non-empty string")

        cleaned = query.replace("\x00", "").strip()

        if not cleaned:
            raise ValidationError(f"{field_name} cannot be empty")

        if len(cleaned) > max_length:
            raise ValidationError(
                f"{field_name} exceeds maximum length of {max_length} characters"
            )

        for pattern in InputValidator.INJECTION_PATTERNS:
            if re.search(pattern, cleaned, re.IGNORECASE):
                raise ValidationError(
                    f"{field_name} contains potentially malicious content. Please rephrase it."
                )

        return cleaned
