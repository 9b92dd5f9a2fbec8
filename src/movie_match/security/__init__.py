"""
Input and upload validation.

Everything here runs before any collaborator call; rejected input raises
ValidationError (or its FileValidationError subclass).
"""

from .exceptions import SecurityError, ValidationError, FileValidationError
from .input_validator import InputValidator
from .file_validator import FileValidator, guess_mime_type

__all__ = [
    "SecurityError",
    "ValidationError",
    "FileValidationError",
    "InputValidator",
    "FileValidator",
    "guess_mime_type",
]
