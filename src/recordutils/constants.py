"""
Shared constants for recordutils.

Single source of truth for defaults used across modules.
"""

DEFAULT_PATH_SEPARATOR = "."
"""Separator joining nested keys into a path ("a.b.c")."""

ENV_PREFIX = "RECORDUTILS_"
"""Prefix for environment variables read by Settings."""
