"""
modules/tool_usage/image_tool.py
----------------------------------
Fetches image bytes for destination hero images and activity links.

Every load ends in one of three observable states:
    PENDING  → request issued, no answer yet (async path only)
    SUCCESS  → bytes available
    FAILURE  → network / HTTP error; callers show a neutral placeholder

Errors never propagate out of this tool.
"""

from __future__ import annotations
import asyncio
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional
import requests
import config

logger = logging.getLogger(__name__)


class ImageLoadState(str, Enum):
    PENDING = "PENDING"
    SUCCESS = "SUCCESS"
    FAILURE = "FAILURE"


@dataclass
class ImageLoadResult:
    url: str
    state: ImageLoadState
    data: Optional[bytes] = None
    error: str = ""


class ImageTool:
    """Wraps HTTP image retrieval and remembers the latest result per URL."""

    def __init__(
        self,
        timeout: float = config.IMAGE_FETCH_TIMEOUT_SECONDS,
        session: Optional[requests.Session] = None,
    ):
        self.timeout = timeout
        self._session = session
        self._results: dict[str, ImageLoadResult] = {}

    def fetch(self, url: str) -> ImageLoadResult:
        """
        Blocking GET of `url`.

        Returns:
            ImageLoadResult in state SUCCESS with the body, or FAILURE with
            the error text.
        """
        getter = self._session.get if self._session is not None else requests.get
        try:
            response = getter(url, timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as exc:
            logger.warning("Image fetch failed for %s: %s", url, exc)
            result = ImageLoadResult(url=url, state=ImageLoadState.FAILURE, error=str(exc))
        else:
            result = ImageLoadResult(url=url, state=ImageLoadState.SUCCESS, data=response.content)
        self._results[url] = result
        return result

    async def load(self, url: str) -> ImageLoadResult:
        """Async form of fetch(); result_for(url) reports PENDING until it finishes."""
        self._results[url] = ImageLoadResult(url=url, state=ImageLoadState.PENDING)
        return await asyncio.to_thread(self.fetch, url)

    def result_for(self, url: str) -> Optional[ImageLoadResult]:
        return self._results.get(url)
