"""FastAPI application entry point for FunnelBox."""

import logging

from fastapi import FastAPI
from fastapi.responses import JSONResponse

from funnelbox import __version__
from funnelbox.config import settings
from funnelbox.routers import import_router

logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.app_name,
    description="Import CRM report exports into bookings, catalogs and sales-funnel data",
    version=__version__,
)


@app.get("/health", tags=["Health"])
async def health_check() -> JSONResponse:
    """Health check endpoint."""
    return JSONResponse(
        content={
            "status": "healthy",
            "version": __version__,
            "app_name": settings.app_name,
        }
    )


app.include_router(import_router.router, prefix="/api/import", tags=["Import"])
