"""
Movie Match Service.

Identifies movies from a title, a natural-language description or an image
and confirms them against the movie metadata service.
"""
from .app import MovieMatchApp
from .config import MovieMatchConfig
from .config_loader import load_config_from_env
from .exceptions import (
    MovieMatchError,
    ConfigurationError,
    ServiceNotInitializedError,
    TransportError,
    NoCandidateError,
    NoMatchError,
)
from .models import Candidate, ReconciledMatch, VerifiedMovie
from .reconciliation import MatchStrategy
from .security import ValidationError, FileValidationError

__version__ = "0.1.0"

__all__ = [
    "MovieMatchApp",
    "MovieMatchConfig",
    "load_config_from_env",
    "MovieMatchError",
    "ConfigurationError",
    "ServiceNotInitializedError",
    "TransportError",
    "NoCandidateError",
    "NoMatchError",
    "ValidationError",
    "FileValidationError",
    "Candidate",
    "ReconciledMatch",
    "VerifiedMovie",
    "MatchStrategy",
]
