"""
Prometheus metrics for Catalog Service.

Tracks movie store operations, their outcomes and listing sizes.
"""

from prometheus_client import Counter, Histogram

# Database metrics
catalog_db_operations_total = Counter(
    "catalog_db_operations_total",
    "Total database operations",
    ["operation", "status"],
)

catalog_db_operation_duration_seconds = Histogram(
    "catalog_db_operation_duration_seconds",
    "Database operation duration in seconds",
    ["operation"],
    buckets=(0.001, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0),
)

catalog_movies_returned = Histogram(
    "catalog_movies_returned",
    "Number of movies returned per listing",
    buckets=(0, 1, 5, 10, 25, 50, 100, 250, 500),
)


def track_db_operation(operation: str, status: str, duration: float):
    """Track database operation metrics."""
    catalog_db_operations_total.labels(operation=operation, status=status).inc()
    catalog_db_operation_duration_seconds.labels(operation=operation).observe(duration)


def track_movies_returned(count: int):
    """Track listing size distribution."""
    catalog_movies_returned.observe(count)
