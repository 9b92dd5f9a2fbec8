"""
Reverse image search producer (Google Custom Search).
"""
import logging
from typing import List, Optional, Protocol

import requests

from ..encoding import EncodedImage
from ..models import ReverseImageItem
from ..transport import request_json

logger = logging.getLogger(__name__)


class ReverseImageSearchTool(Protocol):
    """Protocol for a producer returning result items for an image."""
    def search(self, image: EncodedImage) -> List[ReverseImageItem]:
        ...


class GoogleReverseImageSearchTool:
    """
    Posts the base64 image to the Custom Search API in image mode and
    returns the heterogeneous result items untouched.
    """

    SERVICE_NAME = "Reverse image search"
    ENDPOINT = "https://www.googleapis.com/customsearch/v1"

    def __init__(
        self,
        api_key: str,
        cx: str,
        session: Optional[requests.Session] = None,
        timeout: float = 10.0,
        endpoint: str = ENDPOINT,
    ):
        if not api_key or not cx:
            raise ValueError("Reverse image search needs both api_key and cx")
        self._api_key = api_key
        self._cx = cx
        self._session = session or requests.Session()
        self._timeout = timeout
        self._endpoint = endpoint

    def search(self, image: EncodedImage) -> List[ReverseImageItem]:
        """
        :raises TransportError: If the service call fails
        """
        logger.info(f"Reverse image search: type={image.mime_type}, size={image.size_bytes}")
        data = request_json(
            self._session,
            "POST",
            self._endpoint,
            params={"key": self._api_key, "cx": self._cx, "searchType": "image"},
            json={"image": {"image": image.content}},
            timeout=self._timeout,
            service=self.SERVICE_NAME,
        )
        items = [
            ReverseImageItem(
                title=item.get("title"),
                snippet=item.get("snippet"),
                link=item.get("link"),
            )
            for item in data.get("items") or []
            if isinstance(item, dict)
        ]
        logger.info(f"Reverse image search returned {len(items)} items")
        return items
