"""Tests for SQL assembly."""

from crime_api.schemas.filters import CodeFilters, IncidentFilters, NeighborhoodFilters
from crime_api.services.queries import (
    codes_query,
    delete_incident_statement,
    incidents_query,
    insert_incident_statement,
    neighborhoods_query,
)


def _normalized(sql: str) -> str:
    return " ".join(sql.split())


class TestReferenceQueries:
    """Tests for codes and neighborhoods listings."""

    def test_codes_without_filter(self):
        query = codes_query(CodeFilters())

        assert _normalized(query.sql) == (
            "SELECT code, incident_type AS type FROM Codes ORDER BY code ASC"
        )
        assert query.params == {}

    def test_codes_with_filter(self):
        query = codes_query(CodeFilters.from_query("700,110"))

        assert "WHERE code IN (:code_0, :code_1)" in _normalized(query.sql)
        assert query.params == {"code_0": 700, "code_1": 110}

    def test_neighborhoods_with_filter(self):
        query = neighborhoods_query(NeighborhoodFilters.from_query("4"))

        sql = _normalized(query.sql)
        assert "neighborhood_number AS id" in sql
        assert "WHERE neighborhood_number IN (:neighborhood_number_0)" in sql
        assert sql.endswith("ORDER BY neighborhood_number ASC")
        assert query.params == {"neighborhood_number_0": 4}


class TestIncidentsQuery:
    """Tests for the incidents listing."""

    def test_no_filters(self):
        query = incidents_query(IncidentFilters())

        sql = _normalized(query.sql)
        assert "WHERE" not in sql
        assert sql.endswith("FROM Incidents ORDER BY datetime(date_time) DESC LIMIT :limit")
        assert query.params == {"limit": 1000}

    def test_all_filters_in_order_with_limit_last(self):
        filters = IncidentFilters.from_query(
            start_date="2023-01-01",
            end_date="2023-01-31",
            code="110,700",
            grid="87",
            neighborhood="1,2",
            limit="10",
        )
        query = incidents_query(filters)

        assert (
            "WHERE date(date_time) >= date(:start_date) "
            "AND date(date_time) <= date(:end_date) "
            "AND code IN (:code_0, :code_1) "
            "AND police_grid IN (:police_grid_0) "
            "AND neighborhood_number IN (:neighborhood_number_0, :neighborhood_number_1)"
        ) in _normalized(query.sql)
        assert list(query.params.items()) == [
            ("start_date", "2023-01-01"),
            ("end_date", "2023-01-31"),
            ("code_0", 110),
            ("code_1", 700),
            ("police_grid_0", 87),
            ("neighborhood_number_0", 1),
            ("neighborhood_number_1", 2),
            ("limit", 10),
        ]

    def test_user_text_never_in_sql(self):
        filters = IncidentFilters.from_query(start_date="2023-01-01' OR '1'='1")
        query = incidents_query(filters)

        assert "OR '1'='1" not in query.sql
        assert query.params["start_date"] == "2023-01-01' OR '1'='1"


class TestMutationStatements:
    """Tests for insert/delete statements."""

    def test_insert_binds_missing_columns_as_null(self):
        stmt = insert_incident_statement({"case_number": "1", "date_time": "2023-01-01 10:00"})

        assert _normalized(stmt.sql).startswith("INSERT INTO Incidents (case_number, date_time,")
        assert stmt.params["case_number"] == "1"
        assert stmt.params["block"] is None
        assert stmt.params["code"] is None

    def test_delete(self):
        stmt = delete_incident_statement("23000001")

        assert stmt.sql == "DELETE FROM Incidents WHERE case_number = :case_number"
        assert stmt.params == {"case_number": "23000001"}
