"""
Environment validation helpers used when building MovieMatchConfig.

Credentials come from the environment (or a .env file) and are checked
for presence and obvious placeholder values before any client is created.
"""
import os
import warnings
from typing import Optional

from .exceptions import ConfigurationError

PLACEHOLDER_MARKERS = (
    "your_",
    "your-",
    "placeholder",
    "changeme",
    "xxx",
    "replace",
    "todo",
)


def get_required_env(key: str, description: Optional[str] = None) -> str:
    """
    Read a required environment variable.

    :param key: Environment variable name
    :param description: Human-readable description for the error message
    :return: The value
    :raises ConfigurationError: If the variable is unset, empty or a placeholder
    """
    value = os.getenv(key)

    if not value:
        desc = description or key
        raise ConfigurationError(
            f"{key} is required but not set.\n"
            f"Set it as an environment variable (export {key}=...) "
            f"or add {key}=... to a .env file in the project root.\n\n"
            f"Description: {desc}"
        )

    if is_placeholder(value):
        raise ConfigurationError(
            f"{key} appears to be a placeholder value ({mask_secret(value)}). "
            f"Please set a real value."
        )

    return value


def get_optional_env(key: str, default: Optional[str] = None) -> Optional[str]:
    """
    Read an optional environment variable, ignoring placeholder values.

    :param key: Environment variable name
    :param default: Value returned when unset or a placeholder
    """
    value = os.getenv(key, default)

    if value and is_placeholder(value):
        warnings.warn(
            f"{key} appears to be a placeholder. Using default instead.",
            UserWarning,
        )
        return default

    return value


def get_float_env(key: str, default: float) -> float:
    """Read a float environment variable, raising ConfigurationError on junk."""
    raw = get_optional_env(key)
    if raw is None or raw == "":
        return default
    try:
        return float(raw)
    except ValueError:
        raise ConfigurationError(f"{key} must be a number, got {raw!r}")


def validate_api_key(key: Optional[str], key_name: str, min_length: int = 16) -> str:
    """
    Validate the rough shape of an API key.

    :raises ConfigurationError: If the key is missing, a placeholder or too short
    """
    if not key:
        raise ConfigurationError(f"{key_name} is required.")

    if is_placeholder(key):
        raise ConfigurationError(f"{key_name} appears to be a placeholder.")

    if len(key) < min_length:
        raise ConfigurationError(
            f"{key_name} appears to be invalid (too short: {len(key)} chars). "
            f"Expected at least {min_length} characters."
        )

    return key


def is_placeholder(value: str) -> bool:
    if not value:
        return False
    value_lower = value.lower()
    return any(marker in value_lower for marker in PLACEHOLDER_MARKERS)


def mask_secret(secret: str, show_chars: int = 4) -> str:
    """Mask a secret for display, keeping a few characters at each end."""
    if not secret or len(secret) <= show_chars * 2:
        return "***"
    return f"{secret[:show_chars]}...{secret[-show_chars:]}"
