"""
Health check endpoint
"""
from fastapi import APIRouter
from hk_calendar.core.constants import SERVICE_NAME

router = APIRouter()


@router.get("/health")
async def health_check():
    """
    Health check endpoint

    Returns service status. Holiday data availability is reported
    separately by /holidays/status; the calendar renders without it.
    """
    return {
        "status": "ok",
        "service": SERVICE_NAME
    }
