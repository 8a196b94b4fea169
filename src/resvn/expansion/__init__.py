"""Command template expansion."""

from resvn.expansion.expander import expand, expand_command

__all__ = ["expand", "expand_command"]
