"""
Structural transformations of records.

- map_properties / transform: replace leaf values, keep shape
- filter_properties: keep top-level keys matching a predicate
- map_keys: rename top-level keys
- flatten / unflatten: convert between nested records and path-keyed ones

Example:
    >>> flatten({"a": 1, "b": {"c": 2, "d": {"e": 3}}})
    Record({'a': 1, 'b.c': 2, 'b.d.e': 3})
    >>> unflatten({"a": 1, "b.c": 2, "b.d.e": 3})
    Record({'a': 1, 'b': Record({'c': 2, 'd': Record({'e': 3})})})
"""

from __future__ import annotations

import collections.abc as _abc
import logging as _logging

import recordutils._frozen as _frozen
import recordutils._types as _types
import recordutils.config as config
import recordutils.errors as errors

_logger = _logging.getLogger(__name__)


def map_properties(record: _types.RecordLike, fn: _types.Mapper) -> _frozen.Record:
    """
    Replace every leaf value with fn(value, key).

    Nested mappings are recursed into rather than passed to fn, so the
    result has exactly the shape of the input. Lists are leaves.

    Example:
        >>> map_properties({"a": 1, "b": {"c": 2}}, lambda value, key: value * 10)
        Record({'a': 10, 'b': Record({'c': 20})})
    """
    result = _frozen.Record()
    for key, value in record.items():
        if isinstance(value, _abc.Mapping):
            result[key] = map_properties(value, fn)
        else:
            result[key] = fn(value, key)
    return result


def transform(record: _types.RecordLike, fn: _types.Mapper) -> _frozen.Record:
    """Alias of map_properties()."""
    return map_properties(record, fn)


def filter_properties(record: _types.RecordLike, predicate: _types.Predicate) -> _frozen.Record:
    """
    Keep the top-level keys for which predicate(value, key) is true.

    Filtering is shallow: a nested record is kept or dropped as a whole,
    based on the predicate applied to the nested record itself.
    """
    return _frozen.Record((k, v) for k, v in record.items() if predicate(v, k))


def map_keys(record: _types.RecordLike, fn: _types.KeyMapper) -> _frozen.Record:
    """
    Rename every top-level key to fn(key).

    Values, including nested records, are carried over unchanged. If two
    keys map to the same new key, the later one wins.
    """
    return _frozen.Record((fn(k), v) for k, v in record.items())


def flatten(
    record: _types.RecordLike,
    prefix: str = "",
    *,
    separator: str | None = None,
) -> _frozen.Record:
    """
    Flatten nested records into a single level keyed by path.

    Lists and scalars are stored as-is under their full path. Empty nested
    records are kept as leaves so that unflatten() can restore them.

    Args:
        record: The record to flatten.
        prefix: Path prepended to every key (used in recursion).
        separator: Overrides the configured path separator.

    Returns:
        New Record mapping path to leaf value.

    Raises:
        PathError: If a key contains the separator and strict_paths is on.
    """
    sep = config.resolve_separator(separator)
    strict = config.get_settings().strict_paths
    result = _frozen.Record()
    _flatten_into(result, record, prefix or None, sep, strict)
    return result


def _flatten_into(
    result: _frozen.Record,
    record: _types.RecordLike,
    prefix: str | None,
    sep: str,
    strict: bool,
) -> None:
    # prefix is None only at the root; "" is the path of an empty-string key
    for key, value in record.items():
        key = str(key)
        path = key if prefix is None else f"{prefix}{sep}{key}"
        if sep in key:
            if strict:
                raise errors.PathError(path, f"key {key!r} contains separator {sep!r}")
            _logger.warning(
                "Key %r contains separator %r; unflatten() will not restore it", key, sep
            )
        if isinstance(value, _abc.Mapping) and value:
            _flatten_into(result, value, path, sep, strict)
        else:
            result[path] = value


def unflatten(
    flat: _types.RecordLike,
    *,
    separator: str | None = None,
) -> _frozen.Record:
    """
    Rebuild nested records from path keys.

    Inverse of flatten(): each key is split on the separator and
    intermediate records are created as needed.

    Raises:
        PathError: If one path runs through a leaf stored by another path,
            e.g. {"a": 1, "a.b": 2}.
    """
    sep = config.resolve_separator(separator)
    result = _frozen.Record()
    # Records built here; anything else found along a path is a leaf
    built: set[int] = {id(result)}

    for path, value in flat.items():
        parts = str(path).split(sep)
        current = result
        for part in parts[:-1]:
            child = current.get(part)
            if child is None and part not in current:
                child = _frozen.Record()
                built.add(id(child))
                current[part] = child
            elif id(child) not in built:
                raise errors.PathError(str(path), f"path collides with leaf at {part!r}")
            current = child
        leaf = parts[-1]
        if leaf in current:
            raise errors.PathError(str(path), "path collides with an existing branch")
        current[leaf] = value
    return result
