"""
Catalog Service - movie persistence.

Validation, storage and filtered listing of movie records with
optimistic concurrency control on updates.
"""

__version__ = "1.0.0"
