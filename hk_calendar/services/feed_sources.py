"""
Holiday feed sources - load a raw feed document from the network or a local cache
"""
import json
import logging
from pathlib import Path
from typing import Any, Tuple, Union

import httpx

from hk_calendar.core.config import Settings
from hk_calendar.core.errors import FeedFormatError, FeedUnavailableError
from hk_calendar.schemas.holiday import HolidayFeed

logger = logging.getLogger(__name__)


class HttpFeedSource:
    """Feed served over HTTP(S), e.g. https://www.1823.gov.hk/common/ical/en.json"""

    def __init__(self, url: str, timeout: float = 30.0, transport: httpx.AsyncBaseTransport = None):
        self.url = url
        self.timeout = timeout
        self._transport = transport

    def __repr__(self) -> str:
        return f"HttpFeedSource({self.url!r})"

    async def load(self) -> Any:
        """
        Fetch and decode the feed

        Raises:
            FeedUnavailableError: On transport errors, non-success status or invalid JSON
        """
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.get(self.url)
                response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise FeedUnavailableError(self.url, f"HTTP {e.response.status_code}") from e
        except httpx.HTTPError as e:
            raise FeedUnavailableError(self.url, f"{type(e).__name__}: {e}") from e

        try:
            return response.json()
        except ValueError as e:
            raise FeedUnavailableError(self.url, f"invalid JSON: {e}") from e


class FileFeedSource:
    """Feed cached on local disk (see scripts/refresh_holiday_cache.py)"""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def __repr__(self) -> str:
        return f"FileFeedSource({str(self.path)!r})"

    async def load(self) -> Any:
        try:
            with self.path.open("r", encoding="utf-8") as f:
                return json.load(f)
        except OSError as e:
            raise FeedUnavailableError(str(self.path), f"cannot read file: {e}") from e
        except ValueError as e:
            raise FeedUnavailableError(str(self.path), f"invalid JSON: {e}") from e


def parse_feed(source_name: str, document: Any) -> HolidayFeed:
    """
    Validate a decoded feed document

    Raises:
        FeedFormatError: If the document is not a JSON object
    """
    if not isinstance(document, dict):
        raise FeedFormatError(source_name, f"expected a JSON object, got {type(document).__name__}")
    return HolidayFeed.model_validate(document)


def build_feed_sources(settings: Settings) -> Tuple[Any, Any]:
    """
    Build the (english, local) source pair from settings

    Returns:
        Tuple of feed sources: English feed first, Traditional Chinese feed second
    """
    if settings.HOLIDAY_SOURCE == "remote":
        logger.debug("Using remote holiday feeds")
        return (
            HttpFeedSource(settings.HOLIDAY_FEED_EN_URL, timeout=settings.HOLIDAY_FETCH_TIMEOUT),
            HttpFeedSource(settings.HOLIDAY_FEED_ZH_URL, timeout=settings.HOLIDAY_FETCH_TIMEOUT),
        )
    logger.debug("Using cached holiday feeds")
    return (
        FileFeedSource(settings.HOLIDAY_CACHE_EN_PATH),
        FileFeedSource(settings.HOLIDAY_CACHE_ZH_PATH),
    )
