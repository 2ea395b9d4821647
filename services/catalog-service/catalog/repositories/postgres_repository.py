"""
PostgreSQL implementation of the movie repository.

Each operation is a single SQL statement run under a per-operation
deadline. Updates use optimistic concurrency: the UPDATE matches on both
id and version and bumps the version in the same statement.
"""

import asyncio
import time
from typing import Awaitable, Callable, List, Optional, TypeVar

import asyncpg
import structlog

from ..config import settings
from ..domain.entities import Filters, Movie
from ..domain.exceptions import (
    CatalogServiceException,
    EditConflictException,
    RecordNotFoundException,
    StoreException,
    ValidationException,
)
from ..metrics import track_db_operation, track_movies_returned
from ..validators import Validator, validate_movie
from .movie_repository import IMovieRepository

logger = structlog.get_logger(__name__)

T = TypeVar("T")

INSERT_MOVIE = """
    INSERT INTO movies (title, year, runtime, genres)
    VALUES ($1, $2, $3, $4)
    RETURNING id, created_at, version
"""

SELECT_MOVIE = """
    SELECT id, created_at, title, year, runtime, genres, version
    FROM movies
    WHERE id = $1
"""

UPDATE_MOVIE = """
    UPDATE movies
    SET title = $1, year = $2, runtime = $3, genres = $4, version = version + 1
    WHERE id = $5 AND version = $6
    RETURNING version
"""

DELETE_MOVIE = """
    DELETE FROM movies
    WHERE id = $1
"""

# Empty arguments turn their clause into "match all"
SELECT_MOVIES = """
    SELECT id, created_at, title, year, runtime, genres, version
    FROM movies
    WHERE (to_tsvector('simple', title) @@ plainto_tsquery('simple', $1) OR $1 = '')
    AND (genres @> $2::text[] OR $2::text[] = '{}')
    ORDER BY id
"""


def rows_affected(status: str) -> int:
    """
    Parse the row count from a command status tag.

    Args:
        status: Tag returned by ``Connection.execute`` (e.g. "DELETE 1")

    Returns:
        Number of rows the command touched
    """
    try:
        return int(status.rsplit(" ", 1)[-1])
    except (AttributeError, ValueError):
        return 0


class PostgresMovieRepository(IMovieRepository):
    """PostgreSQL implementation for movie persistence."""

    def __init__(self, pool: asyncpg.Pool, query_timeout: Optional[float] = None):
        """
        Initialize repository.

        Args:
            pool: asyncpg connection pool
            query_timeout: Deadline in seconds for each operation,
                defaults to settings.QUERY_TIMEOUT_SECONDS
        """
        self.pool = pool
        self.query_timeout = (
            query_timeout if query_timeout is not None else settings.QUERY_TIMEOUT_SECONDS
        )

    async def insert(self, movie: Movie) -> None:
        """Insert a movie and write back id, created_at and version."""
        self._ensure_valid("insert", movie)

        async def statement() -> None:
            async with self.pool.acquire() as conn:
                row = await conn.fetchrow(
                    INSERT_MOVIE,
                    movie.title,
                    movie.year,
                    movie.runtime,
                    list(movie.genres),
                )
            movie.id = row["id"]
            movie.created_at = row["created_at"]
            movie.version = row["version"]

        await self._run("insert", statement)
        logger.info("Movie inserted", movie_id=movie.id, version=movie.version)

    async def get(self, movie_id: int) -> Movie:
        """Fetch a movie by id."""

        async def statement() -> Movie:
            if movie_id < 1:
                raise RecordNotFoundException(movie_id)

            async with self.pool.acquire() as conn:
                row = await conn.fetchrow(SELECT_MOVIE, movie_id)

            if row is None:
                raise RecordNotFoundException(movie_id)
            return Movie.from_record(row)

        return await self._run("get", statement)

    async def update(self, movie: Movie) -> None:
        """Apply new field values when the supplied version is current."""
        self._ensure_valid("update", movie)

        async def statement() -> None:
            async with self.pool.acquire() as conn:
                new_version = await conn.fetchval(
                    UPDATE_MOVIE,
                    movie.title,
                    movie.year,
                    movie.runtime,
                    list(movie.genres),
                    movie.id,
                    movie.version,
                )

            # No row: either the id is gone or the version moved on
            if new_version is None:
                raise EditConflictException(movie.id, movie.version)
            movie.version = new_version

        await self._run("update", statement)
        logger.info("Movie updated", movie_id=movie.id, version=movie.version)

    async def delete(self, movie_id: int) -> None:
        """Delete a movie by id."""

        async def statement() -> None:
            if movie_id < 1:
                raise RecordNotFoundException(movie_id)

            async with self.pool.acquire() as conn:
                status = await conn.execute(DELETE_MOVIE, movie_id)

            if rows_affected(status) == 0:
                raise RecordNotFoundException(movie_id)

        await self._run("delete", statement)
        logger.info("Movie deleted", movie_id=movie_id)

    async def get_all(
        self, title: str, genres: List[str], filters: Filters
    ) -> List[Movie]:
        """List movies by title search and genre containment, ordered by id."""
        genres = list(genres or [])

        async def statement() -> List[Movie]:
            async with self.pool.acquire() as conn:
                rows = await conn.fetch(SELECT_MOVIES, title or "", genres)
            return [Movie.from_record(row) for row in rows]

        movies = await self._run("get_all", statement)

        track_movies_returned(len(movies))
        logger.debug(
            "Movies listed",
            title=title,
            genres=genres,
            page=filters.page,
            page_size=filters.page_size,
            sort=filters.sort,
            rows_returned=len(movies),
        )
        return movies

    def _ensure_valid(self, operation: str, movie: Movie) -> None:
        """Raise ValidationException before any store access."""
        v = Validator()
        validate_movie(v, movie)
        if not v.valid():
            track_db_operation(operation, "invalid", 0.0)
            logger.info("Movie failed validation", operation=operation, errors=v.errors)
            raise ValidationException(v.errors)

    async def _run(self, operation: str, statement: Callable[[], Awaitable[T]]) -> T:
        """
        Run one store statement under the operation deadline.

        Domain outcomes propagate unchanged; any other failure is wrapped
        in StoreException with the original exception chained.
        """
        start = time.perf_counter()
        status = "success"
        try:
            return await asyncio.wait_for(statement(), timeout=self.query_timeout)
        except RecordNotFoundException as e:
            status = "not_found"
            logger.warning("Movie not found", operation=operation, **e.details)
            raise
        except EditConflictException as e:
            status = "edit_conflict"
            logger.warning("Movie edit conflict", operation=operation, **e.details)
            raise
        except CatalogServiceException:
            status = "failure"
            raise
        except Exception as e:
            status = "failure"
            logger.error(
                "Movie store operation failed",
                operation=operation,
                error=str(e) or type(e).__name__,
                error_type=type(e).__name__,
            )
            raise StoreException(operation, e) from e
        finally:
            track_db_operation(operation, status, time.perf_counter() - start)
