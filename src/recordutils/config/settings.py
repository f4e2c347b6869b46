"""
Settings configuration using pydantic-settings.

Loads configuration from:
1. Constructor arguments (highest precedence)
2. Environment variables with RECORDUTILS_ prefix
3. Field defaults

Example:
    RECORDUTILS_PATH_SEPARATOR=/ makes flatten() join keys with "/".
    RECORDUTILS_STRICT_PATHS=true makes flatten() reject keys that
    already contain the separator.
"""

import pydantic as _pydantic
import pydantic_settings as _pydantic_settings

import recordutils.constants as constants


class Settings(_pydantic_settings.BaseSettings):
    """
    recordutils configuration settings.

    All settings can be overridden via environment variables with the
    RECORDUTILS_ prefix. Explicit keyword arguments on individual functions
    (e.g. ``separator=``) always win over these values.
    """

    model_config = _pydantic_settings.SettingsConfigDict(
        env_prefix=constants.ENV_PREFIX,
        extra="ignore",
    )

    path_separator: str = _pydantic.Field(
        default=constants.DEFAULT_PATH_SEPARATOR,
        description="Separator used to join nested keys into paths",
    )

    strict_paths: bool = _pydantic.Field(
        default=False,
        description="Raise PathError when a key already contains the separator",
    )

    @_pydantic.field_validator("path_separator")
    @classmethod
    def validate_path_separator(cls, value: str) -> str:
        if not value:
            raise ValueError("path_separator must not be empty")
        return value


_current: Settings | None = None


def get_settings() -> Settings:
    """Return the process-wide Settings, reading the environment on first use."""
    global _current
    if _current is None:
        _current = Settings()
    return _current


def reload_settings() -> Settings:
    """Drop the cached Settings and re-read the environment."""
    global _current
    _current = None
    return get_settings()


def resolve_separator(separator: str | None) -> str:
    """Return ``separator`` if given, else the configured path separator."""
    if separator is not None:
        if not separator:
            raise ValueError("separator must not be empty")
        return separator
    return get_settings().path_separator
