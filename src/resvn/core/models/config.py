"""Run configuration and credential models."""

from pydantic import BaseModel, Field, field_validator

from resvn.core.models.repository import MatchMode

SVN_URL_ROOT = "svn"
WEB_URL_ROOT = "viewvc"
DEFAULT_GLOBAL_ARGS = ["--force-interactive"]


class Credentials(BaseModel):
    """Username and password for the REST API."""

    username: str = ""
    password: str = ""
    # Password is held by an OS credential agent; basic auth is not sent.
    agent_cached: bool = False

    class Config:
        frozen = True

    @property
    def is_empty(self) -> bool:
        return not self.username and not self.password


class RunConfig(BaseModel):
    """Immutable settings for one batch invocation."""

    base_url: str
    url_root: str = SVN_URL_ROOT
    global_args: list[str] = Field(default_factory=lambda: list(DEFAULT_GLOBAL_ARGS))
    match_mode: MatchMode = MatchMode.ALL
    dry_run: bool = False

    class Config:
        frozen = True

    @field_validator("base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.strip().rstrip("/")

    def repository_url(self, name: str) -> str:
        """Build the fully qualified URL of a repository."""
        return f"{self.base_url}/{self.url_root}/{name}"
