"""
Input validation for catalog records.

This module provides a field-error accumulator and the rule sets for
movie records and listing filters. Every rule is evaluated so a caller
sees all violations at once.
"""

from datetime import datetime, timezone
from typing import Dict, Hashable, Iterable, Optional

from .domain.entities import Filters, Movie

# Movie constraints
MAX_TITLE_LENGTH = 500
EARLIEST_RELEASE_YEAR = 1888
MIN_GENRES = 2
MAX_GENRES = 4

# Filter constraints
MAX_PAGE = 10_000_000
MAX_PAGE_SIZE = 100


class Validator:
    """
    Accumulates field-level violations.

    Create one per validation call; the first message recorded for a field
    is kept.

    Attributes:
        errors: Mapping of field name to violation message
    """

    def __init__(self):
        self.errors: Dict[str, str] = {}

    def valid(self) -> bool:
        """Return True when no violation has been recorded."""
        return not self.errors

    def add_error(self, key: str, message: str) -> None:
        """Record a violation unless the field already has one."""
        self.errors.setdefault(key, message)

    def check(self, ok: bool, key: str, message: str) -> None:
        """Record a violation for ``key`` when ``ok`` is false."""
        if not ok:
            self.add_error(key, message)


def unique(values: Iterable[Hashable]) -> bool:
    """Return True when all values are pairwise distinct."""
    values = list(values)
    return len(set(values)) == len(values)


def permitted_value(value: Hashable, *permitted: Hashable) -> bool:
    """Return True when value is one of the permitted values."""
    return value in permitted


def validate_movie(
    v: Validator, movie: Movie, now: Optional[datetime] = None
) -> None:
    """
    Apply movie record rules to ``v``.

    Args:
        v: Validator collecting violations
        movie: Candidate record
        now: Clock used for the release year upper bound (defaults to UTC now)
    """
    current_year = (now or datetime.now(timezone.utc)).year

    v.check(movie.title != "", "title", "must be provided")
    v.check(
        len(movie.title) <= MAX_TITLE_LENGTH,
        "title",
        f"must not be more than {MAX_TITLE_LENGTH} characters long",
    )

    v.check(movie.year != 0, "year", "must be provided")
    v.check(
        EARLIEST_RELEASE_YEAR < movie.year < current_year,
        "year",
        f"must be between {EARLIEST_RELEASE_YEAR} and the current year",
    )

    v.check(movie.runtime != 0, "runtime", "must be provided")
    v.check(movie.runtime > 0, "runtime", "must be a positive integer")

    genres = movie.genres or []
    v.check(movie.genres is not None, "genres", "must be provided")
    v.check(
        MIN_GENRES - 1 < len(genres) < MAX_GENRES + 1,
        "genres",
        f"must contain between {MIN_GENRES} and {MAX_GENRES} genres",
    )
    v.check(unique(genres), "genres", "must not contain duplicate values")


def validate_filters(v: Validator, filters: Filters) -> None:
    """Apply pagination and sort rules to ``v``."""
    v.check(filters.page > 0, "page", "must be greater than zero")
    v.check(filters.page <= MAX_PAGE, "page", "must be a maximum of 10 million")

    v.check(filters.page_size > 0, "page_size", "must be greater than zero")
    v.check(
        filters.page_size <= MAX_PAGE_SIZE,
        "page_size",
        f"must be a maximum of {MAX_PAGE_SIZE}",
    )

    v.check(
        permitted_value(filters.sort, *filters.sort_safelist),
        "sort",
        "invalid sort value",
    )
