"""
Holiday feed and holiday table schemas
"""
import enum
from datetime import datetime
from typing import Any, Dict, List, Optional
from pydantic import AliasChoices, BaseModel, Field, ConfigDict, field_validator


def _objects_only(v: Any) -> list:
    """Keep the JSON objects of a list; any other shape becomes an empty list."""
    if not isinstance(v, list):
        return []
    return [item for item in v if isinstance(item, dict)]


class FeedEvent(BaseModel):
    """One vevent entry of a 1823 iCal-JSON feed"""
    dtstart: List[Any] = Field(
        default_factory=list,
        validation_alias=AliasChoices("dtstart", "startDate"),
        description='e.g. ["20250101", {"value": "DATE"}]'
    )
    summary: Optional[str] = Field(None, description="Holiday name in the feed's language")

    model_config = ConfigDict(extra="ignore")

    @field_validator("dtstart", mode="before")
    @classmethod
    def _coerce_dtstart(cls, v: Any) -> list:
        return v if isinstance(v, list) else []

    @field_validator("summary", mode="before")
    @classmethod
    def _coerce_summary(cls, v: Any) -> Optional[str]:
        return v if isinstance(v, str) else None


class FeedCalendar(BaseModel):
    """One vcalendar entry; only the event list is used"""
    vevent: List[FeedEvent] = Field(
        default_factory=list,
        validation_alias=AliasChoices("vevent", "eventList")
    )

    model_config = ConfigDict(extra="ignore")

    @field_validator("vevent", mode="before")
    @classmethod
    def _coerce_vevent(cls, v: Any) -> list:
        return _objects_only(v)


class HolidayFeed(BaseModel):
    """
    Top-level feed document

    Missing or wrongly typed nesting levels become empty lists, so a
    malformed feed contributes zero events instead of failing validation.
    Only a document that is not a JSON object is rejected.

    Field names follow the 1823 feeds (vcalendar / vevent / dtstart); the
    generic names calendarContainer / eventList / startDate are accepted too.
    """
    vcalendar: List[FeedCalendar] = Field(
        default_factory=list,
        validation_alias=AliasChoices("vcalendar", "calendarContainer")
    )

    model_config = ConfigDict(extra="ignore")

    @field_validator("vcalendar", mode="before")
    @classmethod
    def _coerce_vcalendar(cls, v: Any) -> list:
        return _objects_only(v)

    @property
    def events(self) -> List[FeedEvent]:
        # Only the first calendar carries events in the 1823 feeds
        if not self.vcalendar:
            return []
        return self.vcalendar[0].vevent


class HolidayRecord(BaseModel):
    """Holiday metadata for one calendar date"""
    date: str = Field(..., description="Date key, YYYY-MM-DD")
    name_local: str = Field(..., description="Traditional Chinese name")
    name_english: str = Field(..., description="English name")

    model_config = ConfigDict(frozen=True)


class StoreState(str, enum.Enum):
    EMPTY = "EMPTY"
    POPULATED = "POPULATED"


class IngestResult(BaseModel):
    """Outcome of one ingest attempt"""
    success: bool
    record_count: int = 0
    error: Optional[str] = None
    state: StoreState
    completed_at: datetime


class StoreStatusOut(BaseModel):
    """Schema for holiday store status output"""
    state: StoreState
    record_count: int
    last_result: Optional[IngestResult] = None


class MonthHolidaysOut(BaseModel):
    """Schema for the holidays of one month, keyed by day of month"""
    year: int
    month: int = Field(..., description="Month, 1-12")
    holidays: Dict[int, HolidayRecord]
