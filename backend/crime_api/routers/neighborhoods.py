"""API routes for neighborhood reference data."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from crime_api.schemas.filters import NeighborhoodFilters
from crime_api.schemas.incident import NeighborhoodOut
from crime_api.services.gateway import DataGateway, get_gateway
from crime_api.services.queries import neighborhoods_query

router = APIRouter(prefix="/neighborhoods", tags=["neighborhoods"])


@router.get("", response_model=list[NeighborhoodOut])
async def list_neighborhoods(
    gateway: Annotated[DataGateway, Depends(get_gateway)],
    id: list[str] | None = Query(None, description="Comma-separated neighborhood numbers"),
) -> list[dict]:
    """List neighborhoods, ascending by number, optionally restricted to the given ids."""
    filters = NeighborhoodFilters.from_query(id)
    return await gateway.query(neighborhoods_query(filters))
