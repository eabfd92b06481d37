"""
Tests for holiday feed sources (HTTP and local cache)
"""
import json

import httpx
import pytest

from hk_calendar.core.config import Settings
from hk_calendar.core.errors import FeedFormatError, FeedUnavailableError
from hk_calendar.services.feed_sources import (
    FileFeedSource,
    HttpFeedSource,
    build_feed_sources,
    parse_feed,
)
from conftest import make_feed

FEED_URL = "https://feeds.test/common/ical/en.json"


def http_source(handler):
    return HttpFeedSource(FEED_URL, timeout=5, transport=httpx.MockTransport(handler))


@pytest.mark.asyncio
async def test_http_source_returns_decoded_document():
    document = make_feed(("20250101", "The first day of January"))

    def handler(request):
        assert str(request.url) == FEED_URL
        return httpx.Response(200, json=document)

    assert await http_source(handler).load() == document


@pytest.mark.asyncio
async def test_http_source_non_success_status():
    source = http_source(lambda request: httpx.Response(404, text="not found"))

    with pytest.raises(FeedUnavailableError, match="HTTP 404"):
        await source.load()


@pytest.mark.asyncio
async def test_http_source_transport_error():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(FeedUnavailableError, match="ConnectError"):
        await http_source(handler).load()


@pytest.mark.asyncio
async def test_http_source_invalid_json():
    source = http_source(lambda request: httpx.Response(200, text="<html>maintenance</html>"))

    with pytest.raises(FeedUnavailableError, match="invalid JSON"):
        await source.load()


@pytest.mark.asyncio
async def test_file_source_reads_cached_feed(tmp_path):
    document = make_feed(("20250201", "春節"))
    path = tmp_path / "holidays-zh.json"
    path.write_text(json.dumps(document, ensure_ascii=False), encoding="utf-8")

    assert await FileFeedSource(path).load() == document


@pytest.mark.asyncio
async def test_file_source_missing_file(tmp_path):
    with pytest.raises(FeedUnavailableError, match="cannot read file"):
        await FileFeedSource(tmp_path / "missing.json").load()


@pytest.mark.asyncio
async def test_file_source_invalid_json(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{\"vcalendar\": [", encoding="utf-8")

    with pytest.raises(FeedUnavailableError, match="invalid JSON"):
        await FileFeedSource(path).load()


def test_parse_feed_rejects_non_object():
    with pytest.raises(FeedFormatError):
        parse_feed("en", [1, 2, 3])
    with pytest.raises(FeedFormatError):
        parse_feed("en", None)


def test_parse_feed_ignores_extra_fields():
    feed = parse_feed("en", make_feed(("20250101", "The first day of January")))
    assert len(feed.events) == 1
    assert feed.events[0].summary == "The first day of January"


def test_build_feed_sources_local():
    english, local = build_feed_sources(Settings(HOLIDAY_SOURCE="local"))
    assert isinstance(english, FileFeedSource)
    assert isinstance(local, FileFeedSource)
    assert english.path.name == "holidays-en.json"
    assert local.path.name == "holidays-zh.json"


def test_build_feed_sources_remote():
    english, local = build_feed_sources(Settings(
        HOLIDAY_SOURCE="remote",
        HOLIDAY_FETCH_TIMEOUT=12,
    ))
    assert isinstance(english, HttpFeedSource)
    assert english.url.endswith("/en.json")
    assert local.url.endswith("/tc.json")
    assert local.timeout == 12
