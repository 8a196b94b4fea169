"""Application settings using Pydantic Settings."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

CACHE_FILE_NAME = ".svnrepo"
AUTH_FILE_NAME = ".svnauth"


class Settings(BaseSettings):
    """Defaults loaded from RESVN_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="RESVN_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Server URL prefix used to construct repository URLs
    url: str = ""

    # REST API URL prefix, only needed to refresh the repository cache
    api: str = ""

    # Global svn options, whitespace separated; None keeps the built-in default
    arg: str | None = None

    log_level: str = "INFO"

    @property
    def global_args(self) -> list[str] | None:
        if self.arg is None:
            return None
        return self.arg.split()


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
