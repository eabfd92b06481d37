"""
Holiday store - ingest the bilingual 1823 feeds and serve date lookups
"""
import asyncio
import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from hk_calendar.core.errors import FeedUnavailableError
from hk_calendar.schemas.holiday import HolidayFeed, HolidayRecord, IngestResult, StoreState
from hk_calendar.services.feed_sources import parse_feed
from hk_calendar.utils.datetime_utils import date_key, day_from_key, extract_date_key, month_prefix

logger = logging.getLogger(__name__)


def build_local_names(feed: HolidayFeed) -> Dict[str, str]:
    """Map date key -> summary for every parseable event of the local-language feed"""
    names: Dict[str, str] = {}
    for event in feed.events:
        key = extract_date_key(event.dtstart)
        if key is None:
            logger.debug("Skipping local event with unparseable dtstart: %r", event.dtstart)
            continue
        if event.summary:
            names[key] = event.summary
    return names


def merge_feeds(english: HolidayFeed, local: HolidayFeed) -> Dict[str, HolidayRecord]:
    """
    Merge the two feeds into a holiday table

    The English feed drives the set of keys: dates present only in the local
    feed are dropped. The local name falls back to the English name when the
    local feed has no entry for a date.

    Args:
        english: Parsed English feed
        local: Parsed Traditional Chinese feed

    Returns:
        Dict of date key -> HolidayRecord
    """
    local_names = build_local_names(local)
    table: Dict[str, HolidayRecord] = {}

    for event in english.events:
        key = extract_date_key(event.dtstart)
        if key is None:
            logger.debug("Skipping event with unparseable dtstart: %r", event.dtstart)
            continue
        if not event.summary:
            logger.debug("Skipping event on %s without summary", key)
            continue
        table[key] = HolidayRecord(
            date=key,
            name_english=event.summary,
            name_local=local_names.get(key) or event.summary,
        )

    return table


class HolidayStore:
    """
    In-memory holiday table built from an English and a local-language feed

    The table starts empty and is only ever replaced wholesale by a
    successful ingest; a failed ingest leaves it untouched.
    """

    def __init__(self, english_source: Any, local_source: Any):
        self.english_source = english_source
        self.local_source = local_source
        self._table: Dict[str, HolidayRecord] = {}
        self._state = StoreState.EMPTY
        self.last_result: Optional[IngestResult] = None

    def __len__(self) -> int:
        return len(self._table)

    @property
    def state(self) -> StoreState:
        return self._state

    @property
    def is_populated(self) -> bool:
        return self._state == StoreState.POPULATED

    async def ingest(self) -> IngestResult:
        """
        Load both feeds concurrently and rebuild the table

        Never raises: any failure is logged and reported in the returned
        IngestResult, and the current table is kept.
        """
        logger.debug("Ingesting holidays from %r and %r", self.english_source, self.local_source)
        try:
            english_doc, local_doc = await asyncio.gather(
                self.english_source.load(),
                self.local_source.load(),
            )
        except FeedUnavailableError as e:
            return self._fail(str(e))
        except Exception as e:
            logger.exception("Unexpected error while loading holiday feeds")
            return self._fail(f"{type(e).__name__}: {e}")
        return self.load_documents(english_doc, local_doc)

    def load_documents(self, english_doc: Any, local_doc: Any) -> IngestResult:
        """
        Validate and merge two decoded feed documents, then swap in the new table

        Never raises; see ingest().
        """
        try:
            english = parse_feed(repr(self.english_source), english_doc)
            local = parse_feed(repr(self.local_source), local_doc)
            table = merge_feeds(english, local)
        except FeedUnavailableError as e:
            return self._fail(str(e))
        except Exception as e:
            logger.exception("Unexpected error while merging holiday feeds")
            return self._fail(f"{type(e).__name__}: {e}")

        self._table = table
        self._state = StoreState.POPULATED
        self.last_result = IngestResult(
            success=True,
            record_count=len(table),
            state=self._state,
            completed_at=datetime.now(timezone.utc),
        )
        logger.info("Holiday table loaded: %d records", len(table))
        return self.last_result

    def _fail(self, error: str) -> IngestResult:
        logger.warning("Holiday ingest failed, keeping %d existing records: %s", len(self._table), error)
        self.last_result = IngestResult(
            success=False,
            record_count=len(self._table),
            error=error,
            state=self._state,
            completed_at=datetime.now(timezone.utc),
        )
        return self.last_result

    def lookup(self, year: int, month: int, day: int) -> Optional[HolidayRecord]:
        """
        Get the holiday on a date

        Args:
            year: The year
            month: The month (0-indexed, 0 = January)
            day: The day of the month

        Returns:
            HolidayRecord or None if the date is not a holiday
        """
        return self._table.get(date_key(year, month + 1, day))

    def lookup_month(self, year: int, month: int) -> Dict[int, HolidayRecord]:
        """
        Get all holidays of a month

        Args:
            year: The year
            month: The month (0-indexed, 0 = January)

        Returns:
            Dict of day of month -> HolidayRecord
        """
        prefix = month_prefix(year, month + 1) + "-"
        return {
            day_from_key(key): record
            for key, record in self._table.items()
            if key.startswith(prefix)
        }

    def list_records(self, year: Optional[int] = None) -> List[HolidayRecord]:
        """List holidays ordered by date, optionally limited to one year"""
        keys = sorted(self._table)
        if year is not None:
            keys = [k for k in keys if k.startswith(f"{year}-")]
        return [self._table[k] for k in keys]
