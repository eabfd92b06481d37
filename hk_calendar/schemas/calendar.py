"""
Calendar grid schemas
"""
from typing import List, Optional
from pydantic import BaseModel, Field

from hk_calendar.schemas.holiday import HolidayRecord


class CalendarCell(BaseModel):
    """One cell of the month grid. Padding cells have no day."""
    day: Optional[int] = None
    weekday: Optional[int] = Field(None, description="0 = Sunday")
    holiday: Optional[HolidayRecord] = None
    is_today: bool = False
    is_rest_day: bool = False
    is_padding: bool = False


class MonthGrid(BaseModel):
    year: int
    month: int = Field(..., description="Month, 0-11")
    title: str = Field(..., description='Display title, "MM - YYYY"')
    cells: List[CalendarCell]


class MonthRef(BaseModel):
    year: int
    month: int = Field(..., description="Month, 1-12")


class CalendarOut(BaseModel):
    """Schema for the JSON calendar endpoint"""
    locale: str
    labels: dict
    grid: MonthGrid
    prev: Optional[MonthRef] = Field(None, description="None at the first supported year")
    next: Optional[MonthRef] = Field(None, description="None at the last supported year")
