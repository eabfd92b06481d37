"""
Calendar page (HTML)
"""
from typing import Optional
from fastapi import APIRouter, Depends, Query
from fastapi.responses import HTMLResponse

from hk_calendar.core.constants import MAX_YEAR, MIN_YEAR
from hk_calendar.core.deps import get_holiday_store, get_locale
from hk_calendar.services.calendar_service import build_month_grid, neighbour_month
from hk_calendar.services.holiday_store import HolidayStore
from hk_calendar.utils.datetime_utils import today_local
from hk_calendar.views.calendar_page import render_calendar_page

router = APIRouter()


@router.get("/", response_class=HTMLResponse, include_in_schema=False)
async def calendar_page(
    year: Optional[int] = Query(None, ge=MIN_YEAR, le=MAX_YEAR, description="Year, defaults to the current year"),
    month: Optional[int] = Query(None, ge=1, le=12, description="Month 1-12, defaults to the current month"),
    locale: str = Depends(get_locale),
    store: HolidayStore = Depends(get_holiday_store)
):
    """
    Render the monthly calendar

    Holiday labels appear once the background ingest has loaded the feeds;
    before that (or after a failed ingest) the plain grid is rendered.
    """
    today = today_local()
    year = year if year is not None else today.year
    month0 = month - 1 if month is not None else today.month - 1

    grid = build_month_grid(store, year, month0, today=today)
    return render_calendar_page(
        grid,
        locale,
        prev_month=neighbour_month(year, month0, -1),
        next_month=neighbour_month(year, month0, 1),
    )
