"""Typed filter models built from raw query-string parameters."""

from pydantic import BaseModel

from crime_api.services.params import (
    Number,
    RawParam,
    parse_comma_list,
    parse_limit,
    parse_text,
)


class CodeFilters(BaseModel):
    """Filters for the codes listing."""

    codes: list[Number] | None = None

    @classmethod
    def from_query(cls, code: RawParam = None) -> "CodeFilters":
        return cls(codes=parse_comma_list(code, as_number=True))


class NeighborhoodFilters(BaseModel):
    """Filters for the neighborhoods listing."""

    ids: list[Number] | None = None

    @classmethod
    def from_query(cls, id: RawParam = None) -> "NeighborhoodFilters":
        return cls(ids=parse_comma_list(id, as_number=True))


class IncidentFilters(BaseModel):
    """
    Filters for the incidents listing.

    Dates are kept as the caller's text; the store's date() function
    interprets them, so an unparseable date simply matches nothing.
    """

    start_date: str | None = None
    end_date: str | None = None
    codes: list[Number] | None = None
    grids: list[Number] | None = None
    neighborhoods: list[Number] | None = None
    limit: int = 1000

    @classmethod
    def from_query(
        cls,
        start_date: RawParam = None,
        end_date: RawParam = None,
        code: RawParam = None,
        grid: RawParam = None,
        neighborhood: RawParam = None,
        limit: RawParam = None,
        default_limit: int = 1000,
        max_limit: int | None = None,
    ) -> "IncidentFilters":
        return cls(
            start_date=parse_text(start_date),
            end_date=parse_text(end_date),
            codes=parse_comma_list(code, as_number=True),
            grids=parse_comma_list(grid, as_number=True),
            neighborhoods=parse_comma_list(neighborhood, as_number=True),
            limit=parse_limit(limit, default_limit, max_limit),
        )
