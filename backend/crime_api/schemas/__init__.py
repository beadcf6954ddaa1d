"""Pydantic schemas for API request/response validation."""

from crime_api.schemas.filters import CodeFilters, IncidentFilters, NeighborhoodFilters
from crime_api.schemas.incident import (
    CodeOut,
    IncidentCreate,
    IncidentDelete,
    IncidentOut,
    NeighborhoodOut,
)

__all__ = [
    "CodeFilters",
    "CodeOut",
    "IncidentCreate",
    "IncidentDelete",
    "IncidentFilters",
    "IncidentOut",
    "NeighborhoodFilters",
    "NeighborhoodOut",
]
