"""FastAPI dependency injection for database sessions and services."""

from collections.abc import AsyncGenerator
from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from comuni_api.core.database import get_session_factory
from comuni_api.services.comuni_service import ComuniService


async def get_async_session() -> AsyncGenerator[AsyncSession]:
    """Yield an async database session with per-request lifecycle."""
    factory = get_session_factory()
    async with factory() as session:
        yield session


def get_comuni_service(session: Annotated[AsyncSession, Depends(get_async_session)]) -> ComuniService:
    """Build a ComuniService bound to the request's session."""
    return ComuniService(session)
