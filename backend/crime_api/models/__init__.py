"""Database models."""

from crime_api.models.code import Code
from crime_api.models.incident import Incident
from crime_api.models.neighborhood import Neighborhood

__all__ = ["Code", "Incident", "Neighborhood"]
