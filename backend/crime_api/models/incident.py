"""Incident model for recorded crime events."""

from sqlalchemy import Index, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from crime_api.database import Base


class Incident(Base):
    """
    A single recorded crime event.

    `case_number` is supplied by the caller and is the only identity.
    `date_time` holds the "YYYY-MM-DD HH:MM[:SS]" text written at creation;
    SQLite's date()/time()/datetime() functions split and order it.
    """

    __tablename__ = "Incidents"

    case_number: Mapped[str] = mapped_column(Text, primary_key=True)
    date_time: Mapped[str | None] = mapped_column(Text)

    # Classification
    code: Mapped[int | None] = mapped_column(Integer)
    incident: Mapped[str | None] = mapped_column(Text)

    # Location
    police_grid: Mapped[int | None] = mapped_column(Integer)
    neighborhood_number: Mapped[int | None] = mapped_column(Integer)
    block: Mapped[str | None] = mapped_column(Text)

    __table_args__ = (Index("idx_incidents_date_time", date_time.desc()),)

    def __repr__(self) -> str:
        return f"<Incident {self.case_number}: {self.incident}>"
