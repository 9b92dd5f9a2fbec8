"""
Vision label producer (Google Cloud Vision web + text detection).
"""
import logging
from typing import List, Optional, Protocol

import requests

from ..encoding import EncodedImage
from ..exceptions import TransportError
from ..models import VisionAnnotations
from ..transport import request_json, truncate

logger = logging.getLogger(__name__)


def _field_values(items, field: str) -> List[str]:
    """Non-empty string values of one field across a list of annotation dicts."""
    values = []
    for item in items or []:
        if isinstance(item, dict) and isinstance(item.get(field), str) and item[field]:
            values.append(item[field])
    return values


class VisionLabelTool(Protocol):
    """Protocol for a producer returning labels for an image."""
    def annotate(self, image: EncodedImage) -> VisionAnnotations:
        ...


class GoogleVisionLabelTool:
    """
    Requests WEB_DETECTION and TEXT_DETECTION for one image and flattens
    the response into VisionAnnotations.
    """

    SERVICE_NAME = "Vision"
    ENDPOINT = "https://vision.googleapis.com/v1/images:annotate"

    def __init__(
        self,
        api_key: str,
        session: Optional[requests.Session] = None,
        timeout: float = 10.0,
        max_web_results: int = 5,
        endpoint: str = ENDPOINT,
    ):
        if not api_key:
            raise ValueError("Vision api_key is required")
        self._api_key = api_key
        self._session = session or requests.Session()
        self._timeout = timeout
        self._max_web_results = max_web_results
        self._endpoint = endpoint

    def annotate(self, image: EncodedImage) -> VisionAnnotations:
        """
        :raises TransportError: If the service call fails
        """
        logger.info(f"Vision annotate: type={image.mime_type}, size={image.size_bytes}")
        data = request_json(
            self._session,
            "POST",
            self._endpoint,
            params={"key": self._api_key},
            json={
                "requests": [
                    {
                        "image": {"content": image.content},
                        "features": [
                            {"type": "WEB_DETECTION", "maxResults": self._max_web_results},
                            {"type": "TEXT_DETECTION"},
                        ],
                    }
                ]
            },
            timeout=self._timeout,
            service=self.SERVICE_NAME,
        )

        responses = data.get("responses")
        first = responses[0] if isinstance(responses, list) and responses else {}
        if not isinstance(first, dict):
            first = {}
        error = first.get("error")
        if error:
            # per-image failures arrive with HTTP 200
            logger.warning(f"Vision reported an error: {truncate(error)}")
            message = error.get("message") if isinstance(error, dict) else error
            raise TransportError(f"Vision reported an error: {message}")

        web = first.get("webDetection")
        if not isinstance(web, dict):
            web = {}
        annotations = VisionAnnotations(
            best_guess_labels=_field_values(web.get("bestGuessLabels"), "label"),
            web_entities=_field_values(web.get("webEntities"), "description"),
            text_annotations=_field_values(first.get("textAnnotations"), "description"),
        )
        logger.info(
            f"Vision returned {len(annotations.best_guess_labels)} labels, "
            f"{len(annotations.web_entities)} entities, {len(annotations.text_annotations)} text blocks"
        )
        return annotations
