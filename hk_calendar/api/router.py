"""
Main API router
"""
from fastapi import APIRouter

from hk_calendar.api.v1 import (
    health,
    version,
    holidays,
    calendar,
)

api_router = APIRouter()

api_router.include_router(health.router, tags=["health"])
api_router.include_router(version.router, tags=["version"])
api_router.include_router(holidays.router, prefix="/holidays", tags=["holidays"])
api_router.include_router(calendar.router, prefix="/calendar", tags=["calendar"])
