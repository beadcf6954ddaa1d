"""FastAPI application for the St. Paul crime API."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from crime_api.config import get_settings
from crime_api.database import check_db_ready, dispose_db
from crime_api.rate_limit import limiter
from crime_api.routers import codes_router, health_router, incidents_router, neighborhoods_router
from crime_api.services.gateway import DataAccessError

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan management."""
    logger.info("Starting crime API...")

    # Verify database is ready
    try:
        await check_db_ready()
        logger.info(f"Now connected to {settings.database_url}")
    except Exception as e:
        logger.error(f"Database not ready: {e}")
        raise

    yield

    # Shutdown
    await dispose_db()
    logger.info("Crime API shut down")


# Create FastAPI app
app = FastAPI(
    title="St. Paul Crime API",
    description="Crime incidents, classification codes and neighborhoods for St. Paul",
    version="0.1.0",
    lifespan=lifespan,
)

# Add rate limiter
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(DataAccessError)
async def data_access_exception_handler(request: Request, exc: DataAccessError):
    """Report store failures on read routes as plain text."""
    logger.error(f"Database error on {request.method} {request.url.path}: {exc}")
    return PlainTextResponse("Database error", status_code=500)


# Global exception handler
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Handle unhandled exceptions."""
    logger.error(f"Unhandled exception: {exc}", exc_info=True)
    return PlainTextResponse("Internal server error", status_code=500)


# Include routers
app.include_router(health_router)
app.include_router(codes_router)
app.include_router(neighborhoods_router)
app.include_router(incidents_router)


@app.get("/")
async def root():
    """Root endpoint with API info."""
    return {
        "name": "St. Paul Crime API",
        "version": "0.1.0",
        "docs": "/docs",
        "health": "/health",
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "crime_api.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.debug,
    )
