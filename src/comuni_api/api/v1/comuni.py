"""Comuni lookup endpoints: names, provinces and postal codes per comune, ISTAT code resolution."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status
from loguru import logger

from comuni_api.core.dependencies import get_comuni_service
from comuni_api.schemas.comune import CodiceIstatResponse, StringListResponse
from comuni_api.services.comuni_service import ComuniService

comuni_router = APIRouter(tags=["comuni"])


@comuni_router.get("/comuni")
async def list_comuni(
    service: Annotated[ComuniService, Depends(get_comuni_service)],
    provincia: str | None = Query(None, description="Restrict to one province abbreviation (e.g. RM)"),
) -> StringListResponse:
    """List distinct comune names in ascending order, optionally within one province."""
    try:
        if provincia is None:
            items = await service.list_comuni()
        else:
            items = await service.list_comuni_by_provincia(provincia)
    except Exception as e:
        logger.error(f"Unexpected error listing comuni: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error listing comuni.",
        ) from e
    return StringListResponse(items=items)


@comuni_router.get("/comuni/{comune}/province")
async def list_province_for_comune(
    comune: str,
    service: Annotated[ComuniService, Depends(get_comuni_service)],
) -> StringListResponse:
    """List the provinces of a comune, identified by ISTAT code or Italian name."""
    try:
        items = await service.list_province_by_comune(comune)
    except Exception as e:
        logger.error(f"Unexpected error listing province for comune {comune!r}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error listing province.",
        ) from e
    return StringListResponse(items=items)


@comuni_router.get("/comuni/{comune}/cap")
async def list_cap_for_comune(
    comune: str,
    service: Annotated[ComuniService, Depends(get_comuni_service)],
) -> StringListResponse:
    """List the postal codes of a comune, identified by ISTAT code or Italian name."""
    try:
        items = await service.list_cap_by_comune(comune)
    except Exception as e:
        logger.error(f"Unexpected error listing CAP for comune {comune!r}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error listing CAP.",
        ) from e
    return StringListResponse(items=items)


@comuni_router.get(
    "/codice-istat",
    responses={404: {"description": "No comune matches"}},
)
async def resolve_codice_istat(
    service: Annotated[ComuniService, Depends(get_comuni_service)],
    comune: str | None = Query(None, description="Exact Italian name of the comune"),
    cap: str | None = Query(None, description="Postal code"),
) -> CodiceIstatResponse:
    """Resolve an ISTAT code from a comune name, a postal code, or both.

    When several comuni match, the lowest ISTAT code is returned.
    """
    if comune is None and cap is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="At least one of 'comune' or 'cap' is required.",
        )
    try:
        if comune is not None and cap is not None:
            codice_istat = await service.get_codice_istat(comune, cap)
        elif comune is not None:
            codice_istat = await service.get_codice_istat_by_comune(comune)
        else:
            codice_istat = await service.get_codice_istat_by_cap(cap)  # type: ignore[arg-type]
    except Exception as e:
        logger.error(f"Unexpected error resolving codice ISTAT: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error resolving codice ISTAT.",
        ) from e
    if codice_istat is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Comune not found")
    return CodiceIstatResponse(codice_istat=codice_istat)
