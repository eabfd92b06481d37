"""
Dependencies for FastAPI endpoints
"""
from typing import Optional
from fastapi import Header, Query, Request

from hk_calendar.core.i18n import resolve_locale
from hk_calendar.services.holiday_store import HolidayStore


def get_holiday_store(request: Request) -> HolidayStore:
    """Dependency for the application's holiday store"""
    return request.app.state.holiday_store


def get_locale(
    lang: Optional[str] = Query(None, description="Force the display language: zh or en"),
    accept_language: Optional[str] = Header(None),
) -> str:
    """Dependency resolving the display locale from ?lang= or the Accept-Language header"""
    return resolve_locale(accept_language, override=lang)
