"""
Domain entities for the movie catalog.

Movie records and the parameter object used for filtered listing.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional, Tuple

DEFAULT_SORT_SAFELIST: Tuple[str, ...] = (
    "id",
    "title",
    "year",
    "runtime",
    "-id",
    "-title",
    "-year",
    "-runtime",
)


@dataclass
class Movie:
    """
    A catalog movie record.

    Mutable so that store-assigned values (id, created_at, version) can be
    written back into the caller's instance after Insert and Update.

    Attributes:
        id: Store-assigned identity, 0 until the record is stored
        title: Movie title
        year: Release year, 0 when not provided
        runtime: Runtime in minutes, 0 when not provided
        genres: Ordered genre labels, None when not provided
        version: Concurrency token, 1 on creation and +1 per update
        created_at: Store-assigned creation timestamp
    """

    title: str = ""
    year: int = 0
    runtime: int = 0
    genres: Optional[List[str]] = None
    id: int = 0
    version: int = 0
    created_at: Optional[datetime] = None

    @classmethod
    def from_record(cls, record: Any) -> "Movie":
        """Build a Movie from a database row (mapping-like)."""
        return cls(
            id=record["id"],
            created_at=record["created_at"],
            title=record["title"],
            year=record["year"],
            runtime=record["runtime"],
            genres=list(record["genres"]) if record["genres"] is not None else None,
            version=record["version"],
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for logging and API responses."""
        return {
            "id": self.id,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "title": self.title,
            "year": self.year,
            "runtime": self.runtime,
            "genres": list(self.genres) if self.genres is not None else None,
            "version": self.version,
        }


@dataclass
class Filters:
    """
    Pagination and sort parameters for movie listings.

    Passed through the repository unchanged; see validators.validate_filters.
    """

    page: int = 1
    page_size: int = 20
    sort: str = "id"
    sort_safelist: Tuple[str, ...] = field(default=DEFAULT_SORT_SAFELIST)
