"""
Test configuration and fixtures
"""

from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock

import asyncpg
import pytest

from catalog.domain.entities import Movie
from catalog.repositories.postgres_repository import PostgresMovieRepository

CREATED_AT = datetime(2024, 3, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def mock_conn():
    """Create mock asyncpg connection."""
    return AsyncMock(spec=asyncpg.Connection)


@pytest.fixture
def mock_pool(mock_conn):
    """Create mock asyncpg pool whose acquire() yields mock_conn."""
    pool = MagicMock()
    acquire_ctx = pool.acquire.return_value
    acquire_ctx.__aenter__ = AsyncMock(return_value=mock_conn)
    acquire_ctx.__aexit__ = AsyncMock(return_value=False)
    return pool


@pytest.fixture
def movie_repo(mock_pool):
    """Create movie repository with mock pool."""
    return PostgresMovieRepository(mock_pool, query_timeout=0.5)


@pytest.fixture
def sample_movie():
    """Valid, not yet stored movie."""
    return Movie(
        title="Inception",
        year=2010,
        runtime=148,
        genres=["action", "sci-fi"],
    )


@pytest.fixture
def sample_row():
    """Database row for a stored movie."""
    return {
        "id": 7,
        "created_at": CREATED_AT,
        "title": "Inception",
        "year": 2010,
        "runtime": 148,
        "genres": ["action", "sci-fi"],
        "version": 1,
    }
