"""SQL statements for each resource, assembled from bound predicates."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from crime_api.schemas.filters import CodeFilters, IncidentFilters, NeighborhoodFilters
from crime_api.services.predicates import (
    all_of,
    date_on_or_after,
    date_on_or_before,
    in_clause,
    where_clause,
)

INCIDENT_COLUMNS = (
    "case_number",
    "date_time",
    "code",
    "incident",
    "police_grid",
    "neighborhood_number",
    "block",
)


@dataclass(frozen=True)
class ParameterizedQuery:
    """SQL text with named placeholders and the values bound to them."""

    sql: str
    params: Mapping[str, Any] = field(default_factory=dict)


def codes_query(filters: CodeFilters) -> ParameterizedQuery:
    where = in_clause("code", filters.codes)
    sql = f"""
        SELECT code, incident_type AS type
        FROM Codes
        {where_clause(where)}
        ORDER BY code ASC
    """
    return ParameterizedQuery(sql, dict(where.params))


def neighborhoods_query(filters: NeighborhoodFilters) -> ParameterizedQuery:
    where = in_clause("neighborhood_number", filters.ids)
    sql = f"""
        SELECT neighborhood_number AS id,
               neighborhood_name AS name
        FROM Neighborhoods
        {where_clause(where)}
        ORDER BY neighborhood_number ASC
    """
    return ParameterizedQuery(sql, dict(where.params))


_INCIDENT_SELECT = """
        SELECT case_number,
               date(date_time) AS date,
               time(date_time) AS time,
               code,
               incident,
               police_grid,
               neighborhood_number,
               block
        FROM Incidents
"""


def incidents_query(filters: IncidentFilters) -> ParameterizedQuery:
    """
    Newest-first incident listing.

    Filters are appended in a fixed order (start date, end date, code, grid,
    neighborhood) and ``limit`` is always the last bound value.
    """
    where = all_of(
        date_on_or_after("date_time", filters.start_date),
        date_on_or_before("date_time", filters.end_date),
        in_clause("code", filters.codes),
        in_clause("police_grid", filters.grids),
        in_clause("neighborhood_number", filters.neighborhoods),
    )
    sql = f"""{_INCIDENT_SELECT}
        {where_clause(where)}
        ORDER BY datetime(date_time) DESC
        LIMIT :limit
    """
    return ParameterizedQuery(sql, {**where.params, "limit": filters.limit})


def incident_by_case_query(case_number: Any) -> ParameterizedQuery:
    sql = f"""{_INCIDENT_SELECT}
        WHERE case_number = :case_number
    """
    return ParameterizedQuery(sql, {"case_number": case_number})


def case_lookup_query(case_number: Any) -> ParameterizedQuery:
    """Existence check used before inserting or deleting."""
    return ParameterizedQuery(
        "SELECT case_number FROM Incidents WHERE case_number = :case_number",
        {"case_number": case_number},
    )


def insert_incident_statement(values: Mapping[str, Any]) -> ParameterizedQuery:
    """INSERT of one incident; columns missing from ``values`` are bound as NULL."""
    columns = ", ".join(INCIDENT_COLUMNS)
    placeholders = ", ".join(f":{name}" for name in INCIDENT_COLUMNS)
    sql = f"INSERT INTO Incidents ({columns}) VALUES ({placeholders})"
    return ParameterizedQuery(sql, {name: values.get(name) for name in INCIDENT_COLUMNS})


def delete_incident_statement(case_number: Any) -> ParameterizedQuery:
    return ParameterizedQuery(
        "DELETE FROM Incidents WHERE case_number = :case_number",
        {"case_number": case_number},
    )
