"""Service layer for resvn."""

from resvn.services.batch import BatchService

__all__ = ["BatchService"]
