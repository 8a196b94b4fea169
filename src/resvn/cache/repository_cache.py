"""On-disk cache of known repository names."""

import os
import sys
import tempfile
from pathlib import Path

import structlog

from resvn.cache.inventory import InventorySource
from resvn.core.exceptions import CacheIOError, ConfigurationError
from resvn.core.models.config import Credentials

logger = structlog.get_logger(__name__)


def locate_file(name: str, default_dir: str | None = None) -> Path | None:
    """Find an existing file by name in the usual places.

    Searches the user's home directory, $HOME, the directory of the running
    executable and the working directory, in that order. Falls back to
    ``default_dir/name`` when given, otherwise None.
    """
    candidates: list[Path] = []
    try:
        candidates.append(Path.home() / name)
    except RuntimeError:
        pass
    if "HOME" in os.environ:
        candidates.append(Path(os.environ["HOME"]) / name)
    candidates.append(Path(sys.argv[0]).resolve().parent / name)
    candidates.append(Path.cwd() / name)

    for path in candidates:
        if path.exists():
            return path
    if default_dir:
        return Path(default_dir) / name
    return None


class RepositoryCache:
    """Plain-text list of repository names, one per line.

    The list is loaded once per run; a refresh always happens before the
    file is read, never afterwards.
    """

    def __init__(self, source: InventorySource | None = None) -> None:
        self._source = source
        self._path: Path | None = None
        self._names: list[str] = []

    @property
    def path(self) -> Path | None:
        return self._path

    @property
    def names(self) -> list[str]:
        return list(self._names)

    def sync(
        self,
        path: str | Path,
        refresh: bool = False,
        credentials: Credentials | None = None,
    ) -> list[str]:
        """Optionally refresh the cache file, then load it.

        Blank lines are kept as empty names; only line terminators are
        stripped.
        """
        self._path = Path(path)
        self._names = []

        if refresh:
            self._refresh(credentials)

        try:
            with open(self._path, encoding="utf-8", newline="") as handle:
                content = handle.read()
        except (OSError, UnicodeDecodeError) as e:
            raise CacheIOError(
                f"cannot read repository cache: {e}",
                details={"path": str(self._path)},
            ) from e

        # Lines end at "\n" only; a lone "\r" is part of the name
        lines = content.split("\n")
        if lines[-1] == "":
            lines.pop()
        names = [line.removesuffix("\r") for line in lines]

        self._names = names
        logger.debug("loaded repository cache", path=str(self._path), count=len(names))
        return list(names)

    def _refresh(self, credentials: Credentials | None) -> None:
        if self._source is None:
            raise ConfigurationError("undefined REST API URL: try help (-h)")

        names = self._source.fetch(credentials)

        target = self._path
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            # Same directory as the target so the rename stays on one filesystem
            fd, tmp_name = tempfile.mkstemp(prefix=f"{target.name}.", dir=target.parent)
        except OSError as e:
            raise CacheIOError(
                f"cannot create repository cache: {e}",
                details={"path": str(target)},
            ) from e

        try:
            with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as handle:
                for name in names:
                    handle.write(f"{name}\n")
                handle.flush()
                os.fsync(handle.fileno())
            os.replace(tmp_name, target)
        except OSError as e:
            try:
                os.unlink(tmp_name)
            except FileNotFoundError:
                pass
            raise CacheIOError(
                f"cannot write repository cache: {e}",
                details={"path": str(target)},
            ) from e

        logger.info("updated repository cache", path=str(target), count=len(names))
