"""Execution of generated svn commands."""

import subprocess
import sys
from abc import ABC, abstractmethod
from typing import TextIO

import structlog

from resvn.core.models.command import ExecutionResult

logger = structlog.get_logger(__name__)

SVN_EXECUTABLE = "svn"


def non_empty(args: list[str]) -> list[str]:
    """Drop blank arguments, keeping the others untrimmed."""
    return [arg for arg in args if arg.strip()]


class Executor(ABC):
    """Runs one argument vector of the external tool."""

    @abstractmethod
    def execute(self, argv: list[str]) -> ExecutionResult:
        ...


class SubprocessExecutor(Executor):
    """Runs svn as a child process.

    Standard output is inherited; standard error is echoed to the terminal
    as it arrives and captured for error reporting.
    """

    def __init__(self, executable: str = SVN_EXECUTABLE, stderr: TextIO | None = None) -> None:
        self._executable = executable
        self._stderr = stderr

    def execute(self, argv: list[str]) -> ExecutionResult:
        command = [self._executable, *non_empty(argv)]
        echo = self._stderr or sys.stderr
        try:
            process = subprocess.Popen(
                command, stderr=subprocess.PIPE, text=True, errors="replace"
            )
        except OSError as e:
            logger.debug("failed to launch command", command=command, error=str(e))
            return ExecutionResult(stderr=str(e), success=False)

        captured = []
        with process:
            for line in process.stderr:
                echo.write(line)
                captured.append(line)
        stderr = "".join(captured)

        return ExecutionResult(
            stderr=stderr,
            success=process.returncode == 0,
            returncode=process.returncode,
        )
