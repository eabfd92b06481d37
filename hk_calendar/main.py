"""
HK Holiday Calendar - Main Application Entry Point
"""
import asyncio
import logging
from pathlib import Path

from fastapi import FastAPI, HTTPException
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from hk_calendar.api.pages import router as pages_router
from hk_calendar.api.router import api_router
from hk_calendar.core.config import settings
from hk_calendar.core.errors import (
    http_exception_handler,
    validation_exception_handler,
    generic_exception_handler
)
from hk_calendar.core.logging import setup_logging
from hk_calendar.services.feed_sources import build_feed_sources
from hk_calendar.services.holiday_store import HolidayStore

# Setup logging first
setup_logging()
logger = logging.getLogger(__name__)

STATIC_DIR = Path(__file__).resolve().parent / "static"


# Create FastAPI app
app = FastAPI(
    title="HK Holiday Calendar",
    description="Monthly calendar with Hong Kong public holidays (1823 feeds), in Chinese and English",
    version=settings.VERSION or "1.0.0"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_allowed_origins_list(),
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)

# Register exception handlers
app.add_exception_handler(HTTPException, http_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(Exception, generic_exception_handler)

app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")

# JSON API under /api/v1, calendar page at /
app.include_router(api_router, prefix="/api/v1")
app.include_router(pages_router)

# One store per application; endpoints reach it through get_holiday_store
app.state.holiday_store = HolidayStore(*build_feed_sources(settings))
app.state.ingest_task = None


@app.on_event("startup")
async def schedule_holiday_ingest() -> None:
    """
    Start loading the holiday feeds without blocking startup.

    Pages served before the ingest completes render without holiday labels.
    """
    if not settings.INGEST_ON_STARTUP:
        logger.info("INGEST_ON_STARTUP disabled, holiday table stays empty until /api/v1/holidays/refresh")
        return
    store: HolidayStore = app.state.holiday_store
    app.state.ingest_task = asyncio.create_task(store.ingest())
    logger.info("Holiday ingest scheduled (source=%s)", settings.HOLIDAY_SOURCE)
