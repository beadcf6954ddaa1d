"""Pytest fixtures for crime API tests."""

from collections.abc import AsyncGenerator
from typing import Any

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

import crime_api.models  # noqa: F401  (registers tables on Base.metadata)
from crime_api.database import Base, get_db
from crime_api.main import app
from crime_api.rate_limit import limiter
from crime_api.services.gateway import DataGateway

# In-memory SQLite; StaticPool keeps every session on the same connection
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

SAMPLE_CODES = [
    (110, "Murder, Non Negligent Manslaughter"),
    (210, "Rape, By Force"),
    (700, "Auto Theft"),
    (1400, "Vandalism"),
]

SAMPLE_NEIGHBORHOODS = [
    (1, "Conway/Battlecreek/Highwood"),
    (2, "Greater East Side"),
    (3, "West Side"),
    (4, "Dayton's Bluff"),
]

SAMPLE_INCIDENTS = [
    ("22009999", "2022-12-31 22:00:00", 700, "Auto Theft", 87, 4, "98X PAYNE AVE"),
    ("23000001", "2023-01-05 14:30:00", 700, "Auto Theft", 87, 1, "12XX MAIN ST"),
    ("23000002", "2023-01-20 09:15:00", 110, "Murder", 88, 2, "45X OAK AVE"),
    ("23000003", "2023-01-31 23:59:00", 700, "Auto Theft", 87, 1, "3XX ROBERT ST"),
    ("23000004", "2023-02-01 00:10:00", 210, "Rape", 90, 3, "7X WABASHA ST"),
]


@pytest_asyncio.fixture
async def async_engine():
    """Create async engine for testing."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(async_engine) -> AsyncGenerator[AsyncSession, None]:
    """Create test database session seeded with reference data and incidents."""
    session_maker = async_sessionmaker(
        async_engine, class_=AsyncSession, expire_on_commit=False
    )

    async with session_maker() as session:
        for code, incident_type in SAMPLE_CODES:
            await session.execute(
                text("INSERT INTO Codes (code, incident_type) VALUES (:code, :type)"),
                {"code": code, "type": incident_type},
            )
        for number, name in SAMPLE_NEIGHBORHOODS:
            await session.execute(
                text(
                    "INSERT INTO Neighborhoods (neighborhood_number, neighborhood_name) "
                    "VALUES (:number, :name)"
                ),
                {"number": number, "name": name},
            )
        for row in SAMPLE_INCIDENTS:
            await session.execute(
                text("""
                    INSERT INTO Incidents (
                        case_number, date_time, code, incident,
                        police_grid, neighborhood_number, block
                    ) VALUES (
                        :case_number, :date_time, :code, :incident,
                        :police_grid, :neighborhood_number, :block
                    )
                """),
                dict(
                    zip(
                        (
                            "case_number",
                            "date_time",
                            "code",
                            "incident",
                            "police_grid",
                            "neighborhood_number",
                            "block",
                        ),
                        row,
                    )
                ),
            )
        await session.commit()

        yield session
        await session.rollback()


@pytest.fixture
def gateway(db_session: AsyncSession) -> DataGateway:
    """Gateway bound to the seeded test session."""
    return DataGateway(db_session)


@pytest_asyncio.fixture
async def client(db_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """Create test HTTP client with database override."""

    async def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    limiter.reset()

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as client:
        yield client

    app.dependency_overrides.clear()


@pytest.fixture
def incident_count(db_session: AsyncSession):
    """Async callable returning the current number of stored incidents."""

    async def count() -> int:
        result = await db_session.execute(text("SELECT COUNT(*) FROM Incidents"))
        return result.scalar_one()

    return count


@pytest.fixture
def new_incident() -> dict[str, Any]:
    """Valid body for PUT /new-incident."""
    return {
        "case_number": "23001234",
        "date": "2023-03-14",
        "time": "18:45:00",
        "code": 1400,
        "incident": "Vandalism",
        "police_grid": 91,
        "neighborhood_number": 3,
        "block": "1XX CESAR CHAVEZ ST",
    }
