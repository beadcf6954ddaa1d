#!/usr/bin/env python3
"""
Create the Codes, Neighborhoods and Incidents tables in the configured database.

Existing tables are left untouched; reference data is loaded separately.
"""

import asyncio
from pathlib import Path

from sqlalchemy.engine import make_url

from crime_api.config import get_settings
from crime_api.database import check_db_ready, dispose_db, init_db


def log(msg):
    """Print with flush for immediate output."""
    print(msg, flush=True)


async def main() -> None:
    settings = get_settings()
    log(f"Initializing {settings.database_url}")

    database = make_url(settings.database_url).database
    if database and database != ":memory:":
        Path(database).parent.mkdir(parents=True, exist_ok=True)

    try:
        await init_db()
        await check_db_ready()
    finally:
        await dispose_db()
    log("Database ready")


if __name__ == "__main__":
    asyncio.run(main())
