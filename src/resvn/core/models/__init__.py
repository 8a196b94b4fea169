"""Domain models for resvn."""

from resvn.core.models.command import ExecutionResult, PlaceholderContext
from resvn.core.models.config import Credentials, RunConfig
from resvn.core.models.repository import (
    InventoryRepository,
    InventoryResponse,
    MatchMode,
    PatternSet,
)

__all__ = [
    "Credentials",
    "ExecutionResult",
    "InventoryRepository",
    "InventoryResponse",
    "MatchMode",
    "PatternSet",
    "PlaceholderContext",
    "RunConfig",
]
