"""
Calendar service - month grid model for the calendar page
"""
import calendar
from datetime import date
from typing import List, Optional, Tuple

from hk_calendar.core.constants import DAYS_PER_WEEK, MAX_YEAR, MIN_YEAR, REST_DAY_INDEX
from hk_calendar.schemas.calendar import CalendarCell, MonthGrid
from hk_calendar.services.holiday_store import HolidayStore
from hk_calendar.utils.datetime_utils import today_local


def sunday_based_weekday(d: date) -> int:
    """Weekday index with Sunday = 0 ... Saturday = 6"""
    return (d.weekday() + 1) % DAYS_PER_WEEK


def month_title(year: int, month: int) -> str:
    """Display title for a 0-indexed month, e.g. "02 - 2025" """
    return f"{month + 1:02d} - {year}"


def change_month(year: int, month: int, delta: int) -> Tuple[int, int]:
    """
    Navigate from a 0-indexed month by delta months

    Returns:
        (year, month) with the year wrapped on overflow/underflow
    """
    years, month = divmod(month + delta, 12)
    return year + years, month


def neighbour_month(year: int, month: int, delta: int) -> Optional[Tuple[int, int]]:
    """change_month, or None when the target falls outside MIN_YEAR..MAX_YEAR"""
    target = change_month(year, month, delta)
    if not MIN_YEAR <= target[0] <= MAX_YEAR:
        return None
    return target


def build_month_grid(
    store: HolidayStore,
    year: int,
    month: int,
    today: Optional[date] = None
) -> MonthGrid:
    """
    Build the day grid of a month

    Args:
        store: Holiday store used for labels
        year: Calendar year
        month: Month (0-indexed)
        today: Date highlighted as today (defaults to the local wall-clock date)

    Returns:
        MonthGrid with leading/trailing padding so the cell count is a multiple of 7
    """
    if today is None:
        today = today_local()

    first_day_index = sunday_based_weekday(date(year, month + 1, 1))
    days_in_month = calendar.monthrange(year, month + 1)[1]
    month_holidays = store.lookup_month(year, month)

    cells: List[CalendarCell] = [CalendarCell(is_padding=True) for _ in range(first_day_index)]

    for day in range(1, days_in_month + 1):
        weekday = (first_day_index + day - 1) % DAYS_PER_WEEK
        cells.append(CalendarCell(
            day=day,
            weekday=weekday,
            holiday=month_holidays.get(day),
            is_today=(today.year, today.month - 1, today.day) == (year, month, day),
            is_rest_day=weekday == REST_DAY_INDEX,
        ))

    remaining = (DAYS_PER_WEEK - len(cells) % DAYS_PER_WEEK) % DAYS_PER_WEEK
    cells.extend(CalendarCell(is_padding=True) for _ in range(remaining))

    return MonthGrid(year=year, month=month, title=month_title(year, month), cells=cells)
