"""Root API router with /api/v1 prefix and middleware registration."""

from fastapi import APIRouter, FastAPI

from comuni_api.api.middleware import RequestLoggingMiddleware, setup_cors
from comuni_api.core.config import Settings


def create_router(settings: Settings) -> APIRouter:
    """Create the root API router with all sub-routers included.

    Args:
        settings: Application settings.

    Returns:
        Configured API router.
    """
    from comuni_api.api.v1.comuni import comuni_router
    from comuni_api.api.v1.province import cap_router, province_router
    from comuni_api.api.v1.system import system_router

    root_router = APIRouter(prefix=settings.api_v1_prefix)
    root_router.include_router(system_router)
    root_router.include_router(comuni_router)
    root_router.include_router(province_router)
    root_router.include_router(cap_router)

    return root_router


def setup_middleware(app: FastAPI, settings: Settings) -> None:
    """Register all middleware on the FastAPI app.

    Args:
        app: The FastAPI application.
        settings: Application settings.
    """
    setup_cors(app, settings)
    app.add_middleware(RequestLoggingMiddleware)
