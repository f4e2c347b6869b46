"""
Shared pytest fixtures for recordutils tests.

This file is automatically loaded by pytest. Fixtures defined here are
available to all test files without explicit imports.
"""

import os as _os
import typing as _typing

import pytest as _pytest

import recordutils.config as config

# =============================================================================
# Environment Isolation
# =============================================================================


@_pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: _pytest.MonkeyPatch) -> _typing.Iterator[None]:
    """Clear RECORDUTILS_* variables and the cached Settings around each test."""
    for key in list(_os.environ):
        if key.startswith("RECORDUTILS_"):
            monkeypatch.delenv(key)
    config.reload_settings()
    yield
    config.reload_settings()


# =============================================================================
# Sample Records
# =============================================================================


@_pytest.fixture
def sample_record() -> dict[str, _typing.Any]:
    """A small nested record used across test modules."""
    return {"a": 1, "b": 2, "c": {"d": 3}}
