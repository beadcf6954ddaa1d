"""API routes for listing, creating and removing incidents."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import PlainTextResponse

from crime_api.config import get_settings
from crime_api.rate_limit import limiter, write_limit
from crime_api.schemas.filters import IncidentFilters
from crime_api.schemas.incident import IncidentCreate, IncidentDelete, IncidentOut
from crime_api.services.gateway import DataGateway, get_gateway
from crime_api.services.incidents import IncidentService, MutationOutcome, MutationResult
from crime_api.services.queries import incident_by_case_query, incidents_query

settings = get_settings()
router = APIRouter(tags=["incidents"])

# Conflict and not-found stay 500 to match existing clients
OUTCOME_STATUS = {
    MutationOutcome.OK: 200,
    MutationOutcome.INVALID: 400,
    MutationOutcome.CONFLICT: 500,
    MutationOutcome.NOT_FOUND: 500,
    MutationOutcome.FAILED: 500,
}


def outcome_response(result: MutationResult) -> PlainTextResponse:
    """Map a mutation result to its plain-text HTTP response."""
    return PlainTextResponse(result.message, status_code=OUTCOME_STATUS[result.outcome])


def get_incident_service(
    gateway: Annotated[DataGateway, Depends(get_gateway)],
) -> IncidentService:
    return IncidentService(gateway)


@router.get("/incidents", response_model=list[IncidentOut])
async def list_incidents(
    gateway: Annotated[DataGateway, Depends(get_gateway)],
    start_date: str | None = Query(None, description="Inclusive start date (YYYY-MM-DD)"),
    end_date: str | None = Query(None, description="Inclusive end date (YYYY-MM-DD)"),
    code: list[str] | None = Query(None, description="Comma-separated codes"),
    grid: list[str] | None = Query(None, description="Comma-separated police grids"),
    neighborhood: list[str] | None = Query(None, description="Comma-separated neighborhood numbers"),
    limit: str | None = Query(None, description="Maximum rows (default 1000)"),
) -> list[dict]:
    """
    List incidents, newest first.

    All filters are optional and combined with AND. Values that cannot be
    parsed are ignored rather than rejected, and an invalid or non-positive
    limit falls back to the default.
    """
    filters = IncidentFilters.from_query(
        start_date=start_date,
        end_date=end_date,
        code=code,
        grid=grid,
        neighborhood=neighborhood,
        limit=limit,
        default_limit=settings.default_incident_limit,
        max_limit=settings.max_incident_limit,
    )
    return await gateway.query(incidents_query(filters))


@router.get("/incidents/{case_number}", response_model=IncidentOut)
async def get_incident(
    case_number: str,
    gateway: Annotated[DataGateway, Depends(get_gateway)],
):
    """Get a single incident by case number."""
    rows = await gateway.query(incident_by_case_query(case_number))
    if not rows:
        return PlainTextResponse("Case number does not exist", status_code=404)
    return rows[0]


@router.put("/new-incident", response_class=PlainTextResponse)
@limiter.limit(write_limit)
async def create_incident(
    request: Request,
    service: Annotated[IncidentService, Depends(get_incident_service)],
    payload: IncidentCreate | None = None,
) -> PlainTextResponse:
    """Record a new incident. `case_number`, `date` and `time` are required."""
    result = await service.create_incident(payload or IncidentCreate())
    return outcome_response(result)


@router.delete("/remove-incident", response_class=PlainTextResponse)
@limiter.limit(write_limit)
async def remove_incident(
    request: Request,
    service: Annotated[IncidentService, Depends(get_incident_service)],
    payload: IncidentDelete | None = None,
) -> PlainTextResponse:
    """Delete an incident by case number."""
    result = await service.remove_incident((payload or IncidentDelete()).case_number)
    return outcome_response(result)
