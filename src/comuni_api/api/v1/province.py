"""Province and postal-code lookup endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from loguru import logger

from comuni_api.core.dependencies import get_comuni_service
from comuni_api.schemas.comune import StringListResponse
from comuni_api.services.comuni_service import ComuniService

province_router = APIRouter(prefix="/province", tags=["province"])
cap_router = APIRouter(prefix="/cap", tags=["cap"])


@province_router.get("")
async def list_province(
    service: Annotated[ComuniService, Depends(get_comuni_service)],
) -> StringListResponse:
    """List distinct province abbreviations in ascending order."""
    try:
        items = await service.list_province()
    except Exception as e:
        logger.error(f"Unexpected error listing province: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error listing province.",
        ) from e
    return StringListResponse(items=items)


@province_router.get("/{provincia}/comuni")
async def list_comuni_in_provincia(
    provincia: str,
    service: Annotated[ComuniService, Depends(get_comuni_service)],
) -> StringListResponse:
    """List the comuni of a province in ascending order."""
    try:
        items = await service.list_comuni_by_provincia(provincia)
    except Exception as e:
        logger.error(f"Unexpected error listing comuni for provincia {provincia!r}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error listing comuni.",
        ) from e
    return StringListResponse(items=items)


@province_router.get("/{provincia}/cap")
async def list_cap_in_provincia(
    provincia: str,
    service: Annotated[ComuniService, Depends(get_comuni_service)],
) -> StringListResponse:
    """List the postal codes of a province in ascending order."""
    try:
        items = await service.list_cap_by_provincia(provincia)
    except Exception as e:
        logger.error(f"Unexpected error listing CAP for provincia {provincia!r}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error listing CAP.",
        ) from e
    return StringListResponse(items=items)


@cap_router.get("/{cap}/province")
async def list_province_for_cap(
    cap: str,
    service: Annotated[ComuniService, Depends(get_comuni_service)],
) -> StringListResponse:
    """List the provinces served by a postal code."""
    try:
        items = await service.list_province_by_cap(cap)
    except Exception as e:
        logger.error(f"Unexpected error listing province for CAP {cap!r}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error listing province.",
        ) from e
    return StringListResponse(items=items)
