"""
Calendar grid endpoint (JSON form of the calendar page)
"""
from typing import Optional, Tuple
from fastapi import APIRouter, Depends, Path

from hk_calendar.core.constants import MAX_YEAR, MIN_YEAR
from hk_calendar.core.deps import get_holiday_store, get_locale
from hk_calendar.core.i18n import get_bundle
from hk_calendar.schemas.calendar import CalendarOut, MonthRef
from hk_calendar.services.calendar_service import build_month_grid, neighbour_month
from hk_calendar.services.holiday_store import HolidayStore

router = APIRouter()


def month_ref(target: Optional[Tuple[int, int]]) -> Optional[MonthRef]:
    if target is None:
        return None
    year, month0 = target
    return MonthRef(year=year, month=month0 + 1)


@router.get("/{year}/{month}", response_model=CalendarOut)
async def get_calendar_month(
    year: int = Path(..., ge=MIN_YEAR, le=MAX_YEAR),
    month: int = Path(..., ge=1, le=12, description="Month, 1-12"),
    locale: str = Depends(get_locale),
    store: HolidayStore = Depends(get_holiday_store)
):
    """Get the day grid of a month with holiday labels and navigation targets"""
    grid = build_month_grid(store, year, month - 1)
    prev_target = neighbour_month(year, month - 1, -1)
    next_target = neighbour_month(year, month - 1, 1)
    return CalendarOut(
        locale=locale,
        labels=get_bundle(locale),
        grid=grid,
        prev=month_ref(prev_target),
        next=month_ref(next_target)
    )
