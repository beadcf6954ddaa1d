"""Thin bind-and-run layer between request handlers and the store."""

import logging
from dataclasses import dataclass
from typing import Annotated, Any

from fastapi import Depends
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from crime_api.database import get_db
from crime_api.services.queries import ParameterizedQuery

logger = logging.getLogger(__name__)


class DataAccessError(Exception):
    """Any failure reported by the store, on read or write."""


@dataclass(frozen=True)
class ExecuteResult:
    """Metadata of a completed write."""

    rows_affected: int
    inserted_id: int | None = None


class DataGateway:
    """
    Executes parameterized statements against the store.

    Only ``ParameterizedQuery`` objects are accepted, so every request value
    reaches the database as a bound parameter. No business rules live here.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def query(self, stmt: ParameterizedQuery) -> list[dict[str, Any]]:
        """Run a read-only query and return its rows as dicts."""
        try:
            result = await self.session.execute(text(stmt.sql), dict(stmt.params))
            return [dict(row) for row in result.mappings().all()]
        except (SQLAlchemyError, OverflowError) as e:
            logger.error(f"Query failed: {e}")
            await self.session.rollback()
            raise DataAccessError(str(e)) from e

    async def execute(self, stmt: ParameterizedQuery) -> ExecuteResult:
        """Run a write statement and commit it."""
        try:
            result = await self.session.execute(text(stmt.sql), dict(stmt.params))
            await self.session.commit()
        except (SQLAlchemyError, OverflowError) as e:
            logger.error(f"Write failed: {e}")
            await self.session.rollback()
            raise DataAccessError(str(e)) from e

        return ExecuteResult(
            rows_affected=result.rowcount,
            inserted_id=getattr(result, "lastrowid", None),
        )


def get_gateway(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> DataGateway:
    """Dependency providing a gateway bound to the request's session."""
    return DataGateway(db)
