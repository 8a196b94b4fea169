"""Exception hierarchy for resvn."""

from typing import Any


class ResvnError(Exception):
    """Base exception for all resvn errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigurationError(ResvnError):
    """Required configuration (server URL, API URL) is missing or invalid."""


class CredentialsError(ResvnError):
    """Credentials could not be parsed or discovered."""


class CacheIOError(ResvnError):
    """The repository cache file could not be created, read or replaced."""


class SourceUnavailableError(ResvnError):
    """The repository inventory could not be fetched."""


class InvalidPatternError(ResvnError):
    """A repository pattern is not a valid regular expression."""

    def __init__(self, pattern: str, reason: str = "") -> None:
        message = f"invalid expression: {pattern!r}"
        if reason:
            message += f" ({reason})"
        super().__init__(message, details={"pattern": pattern})
        self.pattern = pattern


class NoMatchError(ResvnError):
    """A non-empty pattern set matched no repository."""

    def __init__(self, patterns: list[str]) -> None:
        super().__init__(
            "no repository found matching expression(s): [ "
            + ", ".join(patterns)
            + " ]",
            details={"patterns": list(patterns)},
        )
        self.patterns = list(patterns)


class ExecutionFailureError(ResvnError):
    """An svn command failed; carries its captured standard error."""

    def __init__(self, argv: list[str], stderr: str, returncode: int | None = None) -> None:
        super().__init__(
            stderr.strip() or f"command failed: {' '.join(argv)}",
            details={"argv": list(argv), "returncode": returncode},
        )
        self.argv = list(argv)
        self.stderr = stderr
        self.returncode = returncode
