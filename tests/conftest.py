"""Pytest configuration and fixtures."""

from pathlib import Path

import pytest
import structlog
from fakes import FakeExecutor

from resvn.config.settings import get_settings
from resvn.core.models.config import RunConfig

REPOSITORIES = [
    "DAPA_Project",
    "DAPA_Components",
    "DAPA_Calc",
    "DAPA_Utilities",
    "dios_DAPA",
    "Firmware",
    "",
    "tools",
]


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch: pytest.MonkeyPatch):
    """Keep RESVN_* variables and logging configuration out of each test."""
    for var in ("RESVN_URL", "RESVN_API", "RESVN_ARG", "RESVN_LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    structlog.reset_defaults()


@pytest.fixture
def repositories() -> list[str]:
    """Sample cache contents, including a blank line."""
    return list(REPOSITORIES)


@pytest.fixture
def cache_file(tmp_path: Path) -> Path:
    """A repository cache file holding the sample repositories."""
    path = tmp_path / ".svnrepo"
    path.write_text("\n".join(REPOSITORIES) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def run_config() -> RunConfig:
    return RunConfig(base_url="http://h", global_args=[])


@pytest.fixture
def fake_executor() -> FakeExecutor:
    return FakeExecutor()
