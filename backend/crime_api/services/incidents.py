"""Business rules for creating and removing incidents."""

import logging
from dataclasses import dataclass
from enum import Enum

from crime_api.schemas.incident import IncidentCreate
from crime_api.services.gateway import DataAccessError, DataGateway
from crime_api.services.queries import (
    case_lookup_query,
    delete_incident_statement,
    insert_incident_statement,
)

logger = logging.getLogger(__name__)


class MutationOutcome(str, Enum):
    """Result kinds of an incident mutation."""

    OK = "ok"
    INVALID = "invalid"
    CONFLICT = "conflict"
    NOT_FOUND = "not_found"
    FAILED = "failed"


@dataclass(frozen=True)
class MutationResult:
    outcome: MutationOutcome
    message: str

    @property
    def ok(self) -> bool:
        return self.outcome is MutationOutcome.OK


OK = MutationResult(MutationOutcome.OK, "OK")


class IncidentService:
    """
    Create/delete rules layered over the gateway.

    The existence check before each write is advisory: two concurrent creates
    for the same case number can both pass it, and the primary key on
    Incidents then rejects the second insert (reported as FAILED).
    """

    def __init__(self, gateway: DataGateway):
        self.gateway = gateway

    async def _case_exists(self, case_number) -> bool:
        rows = await self.gateway.query(case_lookup_query(case_number))
        return len(rows) > 0

    async def create_incident(self, payload: IncidentCreate) -> MutationResult:
        """Insert a new incident unless its case number is already recorded."""
        if not payload.case_number or not payload.date or not payload.time:
            return MutationResult(MutationOutcome.INVALID, "Missing required fields")

        try:
            if await self._case_exists(payload.case_number):
                logger.info(f"Rejected duplicate case number {payload.case_number}")
                return MutationResult(MutationOutcome.CONFLICT, "Case number already exists")

            values = payload.model_dump(exclude={"date", "time"})
            values["date_time"] = f"{payload.date} {payload.time}"
            await self.gateway.execute(insert_incident_statement(values))
        except DataAccessError as e:
            logger.error(f"Insert of case {payload.case_number} failed: {e}")
            return MutationResult(MutationOutcome.FAILED, "Insert failed")

        logger.info(f"Created incident {payload.case_number}")
        return OK

    async def remove_incident(self, case_number) -> MutationResult:
        """Delete the incident with ``case_number`` if it exists."""
        if not case_number:
            return MutationResult(MutationOutcome.INVALID, "Missing case_number")

        try:
            if not await self._case_exists(case_number):
                logger.info(f"Delete of unknown case number {case_number}")
                return MutationResult(MutationOutcome.NOT_FOUND, "Case number does not exist")

            await self.gateway.execute(delete_incident_statement(case_number))
        except DataAccessError as e:
            logger.error(f"Delete of case {case_number} failed: {e}")
            return MutationResult(MutationOutcome.FAILED, "Delete failed")

        logger.info(f"Removed incident {case_number}")
        return OK
