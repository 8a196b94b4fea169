"""Dispatch of expanded commands."""

from resvn.dispatch.dispatcher import Dispatcher, render_command
from resvn.dispatch.executor import Executor, SubprocessExecutor

__all__ = ["Dispatcher", "Executor", "SubprocessExecutor", "render_command"]
