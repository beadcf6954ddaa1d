"""Database setup with SQLAlchemy async over SQLite."""

from collections.abc import AsyncGenerator

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase

from crime_api.config import get_settings

settings = get_settings()

REQUIRED_TABLES = ("Codes", "Neighborhoods", "Incidents")

engine = create_async_engine(
    settings.database_url,
    echo=settings.debug,
)

async_session_maker = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy models."""

    pass


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Dependency to get database session."""
    async with async_session_maker() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


async def init_db() -> None:
    """Create any missing tables (fresh installs and tests)."""
    # Register models on Base.metadata
    import crime_api.models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def check_db_ready() -> None:
    """
    Verify database connectivity and expected schema.

    Checks that the Codes, Neighborhoods and Incidents tables exist.
    """
    async with engine.connect() as conn:
        await conn.execute(text("SELECT 1"))

        result = await conn.execute(
            text("SELECT name FROM sqlite_master WHERE type = 'table'")
        )
        existing = {row[0] for row in result}
        missing = [name for name in REQUIRED_TABLES if name not in existing]

        if missing:
            raise RuntimeError(
                f"Database schema is missing tables: {', '.join(missing)} "
                "(check the database file location)."
            )


async def dispose_db() -> None:
    """Release pooled connections on shutdown."""
    await engine.dispose()
