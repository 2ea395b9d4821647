"""
Movie repository interface (Abstract Base Class).

Defines the contract for movie persistence and retrieval
independent of the underlying storage mechanism.
"""

from abc import ABC, abstractmethod
from typing import List

from ..domain.entities import Filters, Movie


class IMovieRepository(ABC):
    """
    Abstract repository interface for movie operations.

    Every operation is bounded by a deadline and raises a domain
    exception from ``catalog.domain.exceptions`` on failure.
    """

    @abstractmethod
    async def insert(self, movie: Movie) -> None:
        """
        Store a new movie.

        The store-assigned id, created_at and version are written back
        into ``movie``.

        Raises:
            ValidationException: If the record is invalid
            StoreException: If the store rejects or cannot take the write
        """
        pass

    @abstractmethod
    async def get(self, movie_id: int) -> Movie:
        """
        Fetch a movie by identity.

        Raises:
            RecordNotFoundException: If no movie has this identity
            StoreException: On store failure
        """
        pass

    @abstractmethod
    async def update(self, movie: Movie) -> None:
        """
        Write new field values if ``movie.version`` is still current.

        On success ``movie.version`` holds the new version.

        Raises:
            ValidationException: If the record is invalid
            EditConflictException: If no row matches both id and version
            StoreException: On store failure
        """
        pass

    @abstractmethod
    async def delete(self, movie_id: int) -> None:
        """
        Remove a movie by identity.

        Raises:
            RecordNotFoundException: If nothing was removed
            StoreException: On store failure
        """
        pass

    @abstractmethod
    async def get_all(
        self, title: str, genres: List[str], filters: Filters
    ) -> List[Movie]:
        """
        List movies matching a title search and a required genre set.

        Args:
            title: Full-text title search, empty for no constraint
            genres: Genres every result must contain, empty for no constraint
            filters: Pagination and sort parameters

        Returns:
            Matching movies ordered by ascending id (possibly empty)
        """
        pass
