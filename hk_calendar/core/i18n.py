"""
Fixed text bundles for the calendar page (Traditional Chinese / English)
"""
from typing import Dict, Optional

from hk_calendar.core.config import settings
from hk_calendar.core.constants import LOCALE_EN, LOCALE_ZH
from hk_calendar.schemas.holiday import HolidayRecord


TRANSLATIONS: Dict[str, dict] = {
    LOCALE_ZH: {
        "page_title": "香港公眾假期月曆",
        "prev": "< 上個月",
        "next": "下個月 >",
        "print": "🖨️ 列印 / 存為PDF",
        "week_headers": ["日(7)", "一(1)", "二(2)", "三(3)", "四(4)", "五(5)", "六(6)"],
    },
    LOCALE_EN: {
        "page_title": "Hong Kong Public Holiday Calendar",
        "prev": "< Prev",
        "next": "Next >",
        "print": "🖨️ Print / Save PDF",
        "week_headers": ["Sun(7)", "Mon(1)", "Tue(2)", "Wed(3)", "Thu(4)", "Fri(5)", "Sat(6)"],
    },
}


def resolve_locale(accept_language: Optional[str], override: Optional[str] = None) -> str:
    """
    Pick the text bundle for a request

    An explicit override ("zh" or "en") wins; otherwise any Accept-Language
    value starting with "zh" selects Chinese, and everything else falls back
    to settings.DEFAULT_LOCALE.
    """
    if override:
        override = override.strip().lower()
        if override in TRANSLATIONS:
            return override
    if accept_language and accept_language.strip().lower().startswith(LOCALE_ZH):
        return LOCALE_ZH
    return settings.DEFAULT_LOCALE


def get_bundle(locale: str) -> dict:
    return TRANSLATIONS.get(locale, TRANSLATIONS[LOCALE_EN])


def holiday_label(record: HolidayRecord, locale: str) -> str:
    """Holiday name shown on screen for the given locale"""
    return record.name_local if locale == LOCALE_ZH else record.name_english
