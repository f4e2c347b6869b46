"""
Configuration module for recordutils.

Uses pydantic-settings for environment variable loading.
"""

from recordutils.config.settings import (
    Settings,
    get_settings,
    reload_settings,
    resolve_separator,
)

__all__ = ["Settings", "get_settings", "reload_settings", "resolve_separator"]
