class MovieMatchError(Exception):
    """Base exception for movie match service."""


class ConfigurationError(MovieMatchError):
    """Raised when required configuration is missing or invalid."""


class ServiceNotInitializedError(MovieMatchError):
    """Raised when a service or producer is used before it was configured."""


class TransportError(MovieMatchError):
    """Raised when a collaborator call fails (network, HTTP status, bad payload)."""

    def __init__(self, message: str, status_code: int = None):
        super().__init__(message)
        self.status_code = status_code


class NoCandidateError(MovieMatchError):
    """Raised when a search produced no usable title after reconciliation."""


class NoMatchError(MovieMatchError):
    """Raised when the metadata service has no acceptable result for a title."""
