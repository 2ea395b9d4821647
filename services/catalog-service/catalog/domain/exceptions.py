"""
Custom exceptions for the catalog service domain.

These exceptions represent domain-level outcomes and are independent
of infrastructure concerns (HTTP, database driver, etc.).
"""

from typing import Dict, Optional


class CatalogServiceException(Exception):
    """Base exception for all catalog service errors."""

    def __init__(self, message: str, details: Optional[dict] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class RecordNotFoundException(CatalogServiceException):
    """Raised when a movie identity does not exist or is below 1."""

    def __init__(self, movie_id: int):
        super().__init__(
            message=f"Movie not found: {movie_id}", details={"id": movie_id}
        )


class EditConflictException(CatalogServiceException):
    """
    Raised when an update matched no row for the given id and version.

    The row may have been deleted or its version moved on; callers should
    re-fetch and retry, or report that the record was changed elsewhere.
    """

    def __init__(self, movie_id: int, version: int):
        super().__init__(
            message=(
                f"Unable to update movie {movie_id} at version {version} "
                "due to an edit conflict"
            ),
            details={"id": movie_id, "version": version},
        )


class ValidationException(CatalogServiceException):
    """Raised when a record fails validation; carries every field violation."""

    def __init__(self, errors: Dict[str, str]):
        self.errors = dict(errors)
        fields = ", ".join(sorted(self.errors))
        super().__init__(
            message=f"Validation failed for {fields}", details={"errors": self.errors}
        )


class StoreException(CatalogServiceException):
    """
    Raised when the underlying store fails (connectivity, timeout, constraint).

    The original exception is kept on ``cause`` and chained as ``__cause__``.
    """

    def __init__(self, operation: str, cause: BaseException):
        self.operation = operation
        self.cause = cause
        reason = str(cause) or type(cause).__name__
        super().__init__(
            message=f"Store {operation} failed: {reason}",
            details={"operation": operation, "reason": reason},
        )
