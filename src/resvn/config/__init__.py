"""Configuration for resvn."""

from resvn.config.settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
