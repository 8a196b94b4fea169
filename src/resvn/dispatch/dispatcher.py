"""Per-repository expansion and fail-fast execution of svn commands."""

import click
import structlog

from resvn.core.exceptions import ExecutionFailureError
from resvn.core.models.config import RunConfig
from resvn.dispatch.executor import SVN_EXECUTABLE, Executor
from resvn.expansion.expander import expand_command

logger = structlog.get_logger(__name__)

SHELL_SPECIAL = " \t\n$&|<>;`~#{}[]*?!"


def render_command(argv: list[str]) -> str:
    """Render argv for display, single-quoting shell-significant tokens."""
    parts = []
    for arg in argv:
        if any(char in SHELL_SPECIAL for char in arg):
            parts.append(f"'{arg}'")
        else:
            parts.append(arg)
    return " ".join(parts)


class Dispatcher:
    """Runs one command template against each matched repository in turn.

    Every command is traced before it runs. The first failing command
    aborts the batch; repositories after it are never attempted.
    """

    def __init__(self, config: RunConfig, executor: Executor) -> None:
        self._config = config
        self._executor = executor

    def build_command(self, name: str, template: list[str]) -> list[str]:
        """Global svn arguments followed by the expanded template."""
        url = self._config.repository_url(name)
        return [*self._config.global_args, *expand_command(template, url, name)]

    def run(self, names: list[str], template: list[str]) -> None:
        for name in names:
            argv = self.build_command(name, template)
            logger.info(f"» {SVN_EXECUTABLE} {render_command(argv)}")

            if self._config.dry_run:
                continue

            result = self._executor.execute(argv)
            if not result.success:
                raise ExecutionFailureError(argv, result.stderr, result.returncode)

    def list_repositories(self, names: list[str]) -> None:
        """Print the URL of each repository."""
        for name in names:
            click.echo(self._config.repository_url(name))
