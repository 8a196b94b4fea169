"""Command expansion and execution models."""

from pydantic import BaseModel


class PlaceholderContext(BaseModel):
    """Per-repository, per-token values available to placeholders."""

    url: str
    base_name: str
    preceding: str = ""

    class Config:
        frozen = True


class ExecutionResult(BaseModel):
    """Outcome of one external command execution."""

    stdout: str = ""
    stderr: str = ""
    success: bool
    returncode: int | None = None

    class Config:
        frozen = True
