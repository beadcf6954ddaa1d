"""Health and readiness endpoints."""

from datetime import UTC, datetime
from typing import Annotated

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from crime_api.database import REQUIRED_TABLES
from crime_api.services.gateway import DataGateway, get_gateway
from crime_api.services.queries import ParameterizedQuery

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    timestamp: datetime
    record_counts: dict[str, int]


@router.get("/health", response_model=HealthResponse)
async def health_check(
    gateway: Annotated[DataGateway, Depends(get_gateway)],
) -> HealthResponse:
    """
    Health check endpoint with table row counts.

    A store failure surfaces as the usual 500 "Database error".
    """
    counts = {}
    for table in REQUIRED_TABLES:
        # Table names come from a fixed tuple, never from the request
        rows = await gateway.query(ParameterizedQuery(f"SELECT COUNT(*) AS n FROM {table}"))
        counts[table] = rows[0]["n"]

    return HealthResponse(
        status="healthy",
        timestamp=datetime.now(UTC),
        record_counts=counts,
    )


@router.get("/ready")
async def readiness_check() -> dict:
    """Simple readiness probe for container orchestration."""
    return {"status": "ready"}


@router.get("/live")
async def liveness_check() -> dict:
    """Simple liveness probe for container orchestration."""
    return {"status": "alive"}
