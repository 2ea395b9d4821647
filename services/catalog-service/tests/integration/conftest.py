"""
Integration test fixtures.

Provides a PostgreSQL-backed movie repository. Tests are skipped unless
CATALOG_TEST_DATABASE_URL points at a disposable database.
"""

import os

import pytest
import pytest_asyncio

from catalog.database import Database
from catalog.repositories.postgres_repository import PostgresMovieRepository

TEST_DATABASE_URL = os.getenv("CATALOG_TEST_DATABASE_URL")


def pytest_collection_modifyitems(config, items):
    """Mark integration tests and skip them when no database is configured."""
    skip = pytest.mark.skip(reason="CATALOG_TEST_DATABASE_URL not set")
    for item in items:
        if "integration" in item.nodeid:
            item.add_marker(pytest.mark.integration)
            if not TEST_DATABASE_URL:
                item.add_marker(skip)


@pytest_asyncio.fixture
async def database():
    """Database with a fresh movies table."""
    db = Database(TEST_DATABASE_URL)
    await db.connect()
    async with db.connection() as conn:
        await conn.execute("DROP TABLE IF EXISTS movies")
    await db.init_db()
    try:
        yield db
    finally:
        async with db.connection() as conn:
            await conn.execute("DROP TABLE IF EXISTS movies")
        await db.disconnect()


@pytest_asyncio.fixture
async def movies(database):
    """Movie repository against the test database."""
    return PostgresMovieRepository(database.pool, query_timeout=3)
