"""
Domain layer - Core catalog entities and domain errors.

This layer contains the movie record, listing filters and the error
kinds surfaced to callers, independent of the storage backend.
"""
