"""
Pytest configuration and fixtures
"""
import pytest
from fastapi.testclient import TestClient

from hk_calendar.core.deps import get_holiday_store
from hk_calendar.core.errors import FeedUnavailableError
from hk_calendar.main import app
from hk_calendar.services.holiday_store import HolidayStore


class FakeFeedSource:
    """In-memory feed source; raises FeedUnavailableError when built with an error"""

    def __init__(self, document=None, error=None, name="fake"):
        self.document = document
        self.error = error
        self.name = name
        self.calls = 0

    def __repr__(self):
        return f"FakeFeedSource({self.name!r})"

    async def load(self):
        self.calls += 1
        if self.error is not None:
            raise FeedUnavailableError(self.name, self.error)
        return self.document


def make_event(token, summary):
    return {
        "dtstart": [token, {"value": "DATE"}],
        "transp": "TRANSPARENT",
        "summary": summary,
    }


def make_feed(*events):
    """Build a feed document shaped like the 1823 iCal-JSON files"""
    return {
        "vcalendar": [{
            "prodid": "-//1823 Call Centre//Hong Kong Public Holidays//EN",
            "version": "2.0",
            "vevent": [make_event(token, summary) for token, summary in events],
        }]
    }


@pytest.fixture
def english_feed():
    return make_feed(
        ("20250101", "The first day of January"),
        ("20250129", "Lunar New Year's Day"),
        ("20250201", "Spring Festival"),
        ("20250404", "Ching Ming Festival"),
        ("20251225", "Christmas Day"),
        ("20260101", "The first day of January"),
    )


@pytest.fixture
def local_feed():
    return make_feed(
        ("20250129", "農曆年初一"),
        ("20250201", "春節"),
        ("20250404", "清明節"),
        ("20251225", "聖誕節"),
        ("20260101", "一月一日"),
        # Only in the local feed, never reaches the table
        ("20250315", "只有中文"),
    )


@pytest.fixture
def empty_store():
    return HolidayStore(FakeFeedSource(name="en"), FakeFeedSource(name="zh"))


@pytest.fixture
def store(english_feed, local_feed):
    """Store populated from the sample feeds"""
    holiday_store = HolidayStore(
        FakeFeedSource(english_feed, name="en"),
        FakeFeedSource(local_feed, name="zh"),
    )
    result = holiday_store.load_documents(english_feed, local_feed)
    assert result.success
    return holiday_store


@pytest.fixture
def client(store):
    """Test client fixture with the holiday store overridden"""
    app.dependency_overrides[get_holiday_store] = lambda: store
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def empty_client(empty_store):
    app.dependency_overrides[get_holiday_store] = lambda: empty_store
    yield TestClient(app)
    app.dependency_overrides.clear()
