"""
Catalog Service - component wiring.

Sets up logging, the connection pool and the schema, and hands the
movie repository to the hosting application.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

import structlog

from .config import settings
from .database import Database, db
from .logging_config import configure_logging
from .repositories.postgres_repository import PostgresMovieRepository

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(
    database: Optional[Database] = None, init_schema: bool = True
) -> AsyncGenerator[PostgresMovieRepository, None]:
    """
    Component lifespan manager.

    Example:
        async with lifespan() as movies:
            movie = await movies.get(1)
    """
    database = database or db
    configure_logging(settings.LOG_LEVEL)

    # Startup
    logger.info(
        "Starting Catalog Service",
        service=settings.SERVICE_NAME,
        database=settings.safe_database_url,
    )
    pool = await database.connect()
    if init_schema:
        await database.init_db()
    logger.info("Catalog Service started")

    try:
        yield PostgresMovieRepository(pool, query_timeout=settings.QUERY_TIMEOUT_SECONDS)
    finally:
        # Shutdown
        logger.info("Shutting down Catalog Service")
        await database.disconnect()
        logger.info("Catalog Service stopped")
