"""
Repository layer - Data access abstractions.

This layer provides interfaces for movie persistence and retrieval,
hiding storage details from callers.
"""

from .movie_repository import IMovieRepository
from .postgres_repository import PostgresMovieRepository

__all__ = ["IMovieRepository", "PostgresMovieRepository"]
