"""
Date key helpers for the holiday table.
- Keys are "YYYY-MM-DD" strings with a 1-based month.
- Feed tokens are 8-digit "YYYYMMDD" strings; anything else is unparseable.
- Dates are local wall-clock dates; no timezone conversion happens here.
"""
from datetime import date
from typing import Any, Optional, Sequence

FEED_DATE_LENGTH = 8


def date_key(year: int, month: int, day: int) -> str:
    """Build the table key for a 1-based month, e.g. (2025, 2, 1) -> "2025-02-01"."""
    return f"{year}-{month:02d}-{day:02d}"


def month_prefix(year: int, month: int) -> str:
    """Key prefix shared by every day of a 1-based month, e.g. "2025-02"."""
    return f"{year}-{month:02d}"


def day_from_key(key: str) -> int:
    return int(key.split("-")[2])


def feed_token_to_key(token: Any) -> Optional[str]:
    """Convert an ASCII "YYYYMMDD" token to a key. Returns None for any other shape."""
    if not isinstance(token, str) or len(token) != FEED_DATE_LENGTH:
        return None
    # str.isdigit also accepts fullwidth and other Unicode digits
    if not (token.isascii() and token.isdigit()):
        return None
    return f"{token[0:4]}-{token[4:6]}-{token[6:8]}"


def extract_date_key(dtstart: Optional[Sequence[Any]]) -> Optional[str]:
    """
    Extract the date key from an event's dtstart list

    The 1823 feeds encode dtstart as ["20250101", {"value": "DATE"}]; only the
    first element carries the date.
    """
    if not dtstart or not isinstance(dtstart, (list, tuple)):
        return None
    return feed_token_to_key(dtstart[0])


def today_local() -> date:
    """Current local wall-clock date."""
    return date.today()

