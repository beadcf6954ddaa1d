"""Code model for crime classification codes."""

from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from crime_api.database import Base


class Code(Base):
    """Classification code mapped to an incident type label. Reference data."""

    __tablename__ = "Codes"

    code: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    incident_type: Mapped[str | None] = mapped_column(Text)

    def __repr__(self) -> str:
        return f"<Code {self.code}: {self.incident_type}>"
