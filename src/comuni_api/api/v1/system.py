"""Health and info endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends

from comuni_api import __version__
from comuni_api.core.config import Settings, get_settings

system_router = APIRouter(tags=["system"])


@system_router.get("/health", status_code=200)
async def health_check() -> dict:
    """Health check endpoint."""
    return {"status": "healthy"}


@system_router.get("/info", status_code=200)
async def info(
    settings: Annotated[Settings, Depends(get_settings)],
) -> dict:
    """Return application version and environment."""
    return {
        "version": __version__,
        "environment": settings.environment,
    }
