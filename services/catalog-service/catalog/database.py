"""Database connection management."""

from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

import asyncpg
import structlog

from .config import settings

logger = structlog.get_logger(__name__)

SCHEMA_STATEMENTS = (
    """
    CREATE TABLE IF NOT EXISTS movies (
        id bigserial PRIMARY KEY,
        created_at timestamp(0) with time zone NOT NULL DEFAULT NOW(),
        title text NOT NULL,
        year integer NOT NULL,
        runtime integer NOT NULL,
        genres text[] NOT NULL,
        version integer NOT NULL DEFAULT 1
    )
    """,
    """
    DO $$
    BEGIN
        ALTER TABLE movies ADD CONSTRAINT movies_runtime_check CHECK (runtime >= 0);
        ALTER TABLE movies ADD CONSTRAINT movies_year_check
            CHECK (year BETWEEN 1888 AND date_part('year', now()));
        ALTER TABLE movies ADD CONSTRAINT genres_length_check
            CHECK (array_length(genres, 1) BETWEEN 1 AND 5);
    EXCEPTION
        WHEN duplicate_object THEN NULL;
    END
    $$
    """,
    "CREATE INDEX IF NOT EXISTS movies_title_idx "
    "ON movies USING GIN (to_tsvector('simple', title))",
    "CREATE INDEX IF NOT EXISTS movies_genres_idx ON movies USING GIN (genres)",
)


class Database:
    """Database connection pool manager."""

    def __init__(self, dsn: Optional[str] = None):
        self.dsn = dsn or settings.DATABASE_URL
        self.pool: Optional[asyncpg.Pool] = None

    async def connect(self) -> asyncpg.Pool:
        """Create database connection pool."""
        if self.pool is None:
            try:
                self.pool = await asyncpg.create_pool(
                    dsn=self.dsn,
                    min_size=settings.DATABASE_POOL_MIN_SIZE,
                    max_size=settings.DATABASE_POOL_SIZE,
                    command_timeout=settings.DATABASE_COMMAND_TIMEOUT,
                )
                logger.info("Database connection pool created")
            except Exception as e:
                logger.error("Failed to create database pool", error=str(e))
                raise
        return self.pool

    async def disconnect(self):
        """Close database connection pool."""
        if self.pool is not None:
            await self.pool.close()
            self.pool = None
            logger.info("Database connection pool closed")

    @asynccontextmanager
    async def connection(self) -> AsyncGenerator[asyncpg.Connection, None]:
        """
        Get database connection from pool.

        Yields:
            asyncpg.Connection: Database connection

        Example:
            async with db.connection() as conn:
                await conn.fetchval("SELECT 1")
        """
        pool = await self.connect()
        async with pool.acquire() as conn:
            yield conn

    async def init_db(self) -> None:
        """
        Create the movies table, its constraints and search indexes.

        Safe to run repeatedly.
        """
        logger.info("Initializing database schema")
        async with self.connection() as conn:
            async with conn.transaction():
                for statement in SCHEMA_STATEMENTS:
                    await conn.execute(statement)
        logger.info("Database schema ready")


db = Database()
