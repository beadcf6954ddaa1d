"""Neighborhood model for district reference data."""

from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from crime_api.database import Base


class Neighborhood(Base):
    """Named geographic zone identified by its district number."""

    __tablename__ = "Neighborhoods"

    neighborhood_number: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=False
    )
    neighborhood_name: Mapped[str | None] = mapped_column(Text)

    def __repr__(self) -> str:
        return f"<Neighborhood {self.neighborhood_number}: {self.neighborhood_name}>"
