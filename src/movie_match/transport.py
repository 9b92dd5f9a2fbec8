"""
JSON-over-HTTP helper shared by every collaborator client.

Converts transport failures, error statuses and undecodable bodies into
TransportError so callers only deal with one error type per collaborator.
"""
import logging
import re
from typing import Any, Dict, Optional

import requests

from .exceptions import TransportError

logger = logging.getLogger(__name__)

MAX_LOGGED_CHARS = 200
_CREDENTIAL_PARAMS = re.compile(r"((?:api_key|key)=)[^&\s'\"]+")


def truncate(text: Any, limit: int = MAX_LOGGED_CHARS) -> str:
    """Shorten a payload for logging."""
    text = str(text)
    if len(text) <= limit:
        return text
    return f"{text[:limit]}... ({len(text)} chars)"


def redact_url(url: str) -> str:
    """Strip credential query parameters from a URL before logging it."""
    return _CREDENTIAL_PARAMS.sub(r"\1***", url)


def request_json(
    session: requests.Session,
    method: str,
    url: str,
    *,
    params: Optional[Dict[str, Any]] = None,
    json: Optional[Dict[str, Any]] = None,
    timeout: float = 10.0,
    service: str = "collaborator",
) -> Dict[str, Any]:
    """
    Perform an HTTP request and decode a JSON object response.

    :param session: requests session (injected, never module-global)
    :param method: HTTP method
    :param url: Absolute URL without credentials
    :param params: Query string parameters (may include credentials)
    :param json: JSON body for POST requests
    :param timeout: Seconds before giving up
    :param service: Collaborator name used in log and error messages
    :return: Decoded JSON object
    :raises TransportError: On network failure, status >= 400 or bad JSON
    """
    try:
        response = session.request(method, url, params=params, json=json, timeout=timeout)
    except requests.RequestException as e:
        # requests puts the full URL, query string included, into its messages
        logger.warning(f"{service} request failed: {method} {redact_url(url)}: {redact_url(str(e))}")
        raise TransportError(f"{service} request failed ({type(e).__name__})") from e

    if response.status_code >= 400:
        logger.warning(
            f"{service} returned HTTP {response.status_code} for {method} {redact_url(url)}: "
            f"{truncate(response.text)}"
        )
        raise TransportError(
            f"{service} returned HTTP {response.status_code}",
            status_code=response.status_code,
        )

    try:
        data = response.json()
    except ValueError as e:
        logger.warning(f"{service} returned a non-JSON body: {truncate(response.text)}")
        raise TransportError(f"{service} returned an invalid JSON body") from e

    if not isinstance(data, dict):
        logger.warning(f"{service} returned unexpected JSON ({type(data).__name__}): {truncate(data)}")
        raise TransportError(f"{service} returned an unexpected payload")

    return data
