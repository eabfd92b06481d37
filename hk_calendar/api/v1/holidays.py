"""
Holiday lookup endpoints
"""
from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, Path, Query, status

from hk_calendar.core.constants import MAX_YEAR, MIN_YEAR
from hk_calendar.core.deps import get_holiday_store
from hk_calendar.schemas.holiday import HolidayRecord, IngestResult, MonthHolidaysOut, StoreStatusOut
from hk_calendar.services.holiday_store import HolidayStore

router = APIRouter()


@router.get("", response_model=List[HolidayRecord])
async def list_holidays_endpoint(
    year: Optional[int] = Query(None, description="Filter by year"),
    store: HolidayStore = Depends(get_holiday_store)
):
    """List loaded holidays ordered by date"""
    return store.list_records(year=year)


@router.get("/status", response_model=StoreStatusOut)
async def holiday_store_status(store: HolidayStore = Depends(get_holiday_store)):
    """Report whether holiday data has been loaded and the outcome of the last ingest"""
    return StoreStatusOut(
        state=store.state,
        record_count=len(store),
        last_result=store.last_result
    )


@router.post("/refresh", response_model=IngestResult)
async def refresh_holidays(store: HolidayStore = Depends(get_holiday_store)):
    """
    Reload both holiday feeds

    Always returns 200: a failed refresh is reported in the body and the
    previously loaded holidays stay in place.
    """
    return await store.ingest()


@router.get("/{year}/{month}", response_model=MonthHolidaysOut)
async def get_month_holidays(
    year: int = Path(..., ge=MIN_YEAR, le=MAX_YEAR),
    month: int = Path(..., ge=1, le=12, description="Month, 1-12"),
    store: HolidayStore = Depends(get_holiday_store)
):
    """Get the holidays of one month keyed by day of month"""
    return MonthHolidaysOut(
        year=year,
        month=month,
        holidays=store.lookup_month(year, month - 1)
    )


@router.get("/{year}/{month}/{day}", response_model=HolidayRecord)
async def get_holiday_on_date(
    year: int = Path(..., ge=MIN_YEAR, le=MAX_YEAR),
    month: int = Path(..., ge=1, le=12, description="Month, 1-12"),
    day: int = Path(..., ge=1, le=31),
    store: HolidayStore = Depends(get_holiday_store)
):
    """Get the holiday on one date"""
    holiday = store.lookup(year, month - 1, day)
    if holiday is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"No holiday on {year}-{month:02d}-{day:02d}"
        )
    return holiday
