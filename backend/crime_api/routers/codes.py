"""API routes for crime classification codes."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from crime_api.schemas.filters import CodeFilters
from crime_api.schemas.incident import CodeOut
from crime_api.services.gateway import DataGateway, get_gateway
from crime_api.services.queries import codes_query

router = APIRouter(prefix="/codes", tags=["codes"])


@router.get("", response_model=list[CodeOut])
async def list_codes(
    gateway: Annotated[DataGateway, Depends(get_gateway)],
    code: list[str] | None = Query(None, description="Comma-separated codes, e.g. 110,700"),
) -> list[dict]:
    """List classification codes, ascending, optionally restricted to the given codes."""
    filters = CodeFilters.from_query(code)
    return await gateway.query(codes_query(filters))
