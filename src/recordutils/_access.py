"""
Property access: reading, picking and dropping keys.

Every function returns a new Record and leaves its input untouched. The
path helpers (get_path, has_path, set_path) walk nested records using a
separator-joined path such as "a.b.c".
"""

from __future__ import annotations

import collections.abc as _abc
import typing as _typing

import recordutils._frozen as _frozen
import recordutils._types as _types
import recordutils.config as config
import recordutils.errors as errors

# Marks "no value here" while walking, distinct from a stored None
_MISSING = object()


def remove_property(record: _types.RecordLike, key: _typing.Any) -> _frozen.Record:
    """Return a copy of record without key. A missing key is not an error."""
    return _frozen.Record((k, v) for k, v in record.items() if k != key)


def has_property(record: _types.RecordLike, key: _typing.Any) -> bool:
    """Check whether key is one of record's own keys (even if its value is None)."""
    return key in record


def get_property(
    record: _types.RecordLike,
    key: _typing.Any,
    default: _typing.Any = None,
) -> _typing.Any:
    """
    Get record[key], falling back to default.

    A key that stores None is treated the same as a missing key.

    Example:
        >>> get_property({"a": None}, "a", 0)
        0
    """
    value = record.get(key)
    return default if value is None else value


def pick(record: _types.RecordLike, keys: _abc.Iterable[_typing.Any]) -> _frozen.Record:
    """Return a Record with only the listed keys, in list order. Unknown keys are skipped."""
    return _frozen.Record((key, record[key]) for key in keys if key in record)


def omit(record: _types.RecordLike, keys: _abc.Iterable[_typing.Any]) -> _frozen.Record:
    """Return a Record without the listed keys. Unknown keys are ignored."""
    dropped = list(keys)
    return _frozen.Record((k, v) for k, v in record.items() if k not in dropped)


def _walk(record: _types.RecordLike, parts: list[str]) -> _typing.Any:
    current: _typing.Any = record
    for part in parts:
        if not isinstance(current, _abc.Mapping) or part not in current:
            return _MISSING
        current = current[part]
    return current


def get_path(
    record: _types.RecordLike,
    path: _types.Path,
    default: _typing.Any = None,
    *,
    separator: str | None = None,
) -> _typing.Any:
    """
    Get the value at a nested path.

    Args:
        record: The record to read from.
        path: Separator-joined keys, e.g. "server.tls.port".
        default: Returned when any segment is missing or a non-mapping
            is reached before the end of the path.
        separator: Overrides the configured path separator.

    Example:
        >>> get_path({"a": {"b": 1}}, "a.b")
        1
        >>> get_path({"a": {"b": 1}}, "a.c", "n/a")
        'n/a'
    """
    value = _walk(record, path.split(config.resolve_separator(separator)))
    return default if value is _MISSING else value


def has_path(
    record: _types.RecordLike,
    path: _types.Path,
    *,
    separator: str | None = None,
) -> bool:
    """Check whether a nested path leads to a stored value."""
    return _walk(record, path.split(config.resolve_separator(separator))) is not _MISSING


def set_path(
    record: _types.RecordLike,
    path: _types.Path,
    value: _typing.Any,
    *,
    separator: str | None = None,
) -> _frozen.Record:
    """
    Return a copy of record with value stored at a nested path.

    Only the mappings along the path are copied; everything else is shared
    with the input. Missing intermediate records are created.

    Raises:
        PathError: If the path runs through a value that is not a mapping.

    Example:
        >>> set_path({"a": {"b": 1}}, "a.c", 2)
        Record({'a': Record({'b': 1, 'c': 2})})
    """
    sep = config.resolve_separator(separator)
    parts = path.split(sep)
    result = _frozen.Record(record)
    current = result
    for depth, part in enumerate(parts[:-1]):
        child = current.get(part, _MISSING)
        if child is _MISSING:
            child = _frozen.Record()
        elif isinstance(child, _abc.Mapping):
            child = _frozen.Record(child)
        else:
            walked = sep.join(parts[: depth + 1])
            raise errors.PathError(path, f"cannot descend through non-mapping at {walked!r}")
        current[part] = child
        current = child
    current[parts[-1]] = value
    return result
