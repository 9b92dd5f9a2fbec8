"""
Security-related exceptions.
"""
from ..exceptions import MovieMatchError


class SecurityError(MovieMatchError):
    """Base exception for rejected caller input."""

    pass


class ValidationError(SecurityError):
    """Raised when input validation fails, before any collaborator call."""

    pass


class FileValidationError(ValidationError):
    """Raised when an uploaded image is rejected."""

    pass
