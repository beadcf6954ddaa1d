"""API routers."""

from crime_api.routers.codes import router as codes_router
from crime_api.routers.health import router as health_router
from crime_api.routers.incidents import router as incidents_router
from crime_api.routers.neighborhoods import router as neighborhoods_router

__all__ = ["codes_router", "health_router", "incidents_router", "neighborhoods_router"]
