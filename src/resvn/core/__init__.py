"""Core domain models and exceptions for resvn."""

from resvn.core.exceptions import (
    CacheIOError,
    ConfigurationError,
    CredentialsError,
    ExecutionFailureError,
    InvalidPatternError,
    NoMatchError,
    ResvnError,
    SourceUnavailableError,
)
from resvn.core.models import (
    Credentials,
    ExecutionResult,
    MatchMode,
    PatternSet,
    PlaceholderContext,
    RunConfig,
)

__all__ = [
    # Models
    "Credentials",
    "ExecutionResult",
    "MatchMode",
    "PatternSet",
    "PlaceholderContext",
    "RunConfig",
    # Exceptions
    "ResvnError",
    "ConfigurationError",
    "CredentialsError",
    "CacheIOError",
    "SourceUnavailableError",
    "InvalidPatternError",
    "NoMatchError",
    "ExecutionFailureError",
]
