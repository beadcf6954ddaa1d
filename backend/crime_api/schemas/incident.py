"""Pydantic schemas for incidents and reference data."""

from pydantic import BaseModel, ConfigDict

# Case numbers and zone identifiers arrive as JSON strings or numbers and are
# stored as given.
Token = int | str


class CodeOut(BaseModel):
    """Classification code response schema."""

    code: int
    type: str | None = None


class NeighborhoodOut(BaseModel):
    """Neighborhood response schema."""

    id: int
    name: str | None = None


class IncidentOut(BaseModel):
    """Incident row with the stored date_time split into date and time."""

    model_config = ConfigDict(from_attributes=True)

    case_number: Token
    date: str | None = None
    time: str | None = None
    code: Token | None = None
    incident: str | None = None
    police_grid: Token | None = None
    neighborhood_number: Token | None = None
    block: str | None = None


class IncidentCreate(BaseModel):
    """Body of PUT /new-incident. Required fields are checked by IncidentService."""

    case_number: Token | None = None
    date: str | None = None
    time: str | None = None
    code: Token | None = None
    incident: str | None = None
    police_grid: Token | None = None
    neighborhood_number: Token | None = None
    block: str | None = None


class IncidentDelete(BaseModel):
    """Body of DELETE /remove-incident."""

    case_number: Token | None = None
