"""
Inspecting and comparing records.

Two notions of equality are offered:

- deep_equal() compares canonical JSON serializations. It is strict about
  key order: {"a": 1, "b": 2} and {"b": 2, "a": 1} are NOT deep_equal.
- is_equal() walks both values and compares key sets, ignoring order.
"""

from __future__ import annotations

import collections.abc as _abc
import datetime as _datetime
import json as _json
import typing as _typing

import recordutils._types as _types


def is_empty(record: _types.RecordLike) -> bool:
    """Check whether record has no keys."""
    return len(record) == 0


def keys(record: _types.RecordLike) -> list[_typing.Any]:
    """Return record's keys as a new list, in iteration order."""
    return list(record.keys())


def values(record: _types.RecordLike) -> list[_typing.Any]:
    """Return record's values as a new list, in iteration order."""
    return list(record.values())


def entries(record: _types.RecordLike) -> list[tuple[_typing.Any, _typing.Any]]:
    """Return record's (key, value) pairs as a new list, in iteration order."""
    return list(record.items())


def _encode_default(value: _typing.Any) -> _typing.Any:
    """JSON fallback for values json cannot encode natively."""
    if isinstance(value, (_datetime.date, _datetime.time)):
        return value.isoformat()
    if isinstance(value, _datetime.timedelta):
        return value.total_seconds()
    if isinstance(value, (set, frozenset)):
        return list(value)
    if callable(value):
        return None
    if hasattr(value, "__dict__"):
        return vars(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def _without_callables(value: _typing.Any, active: set[int]) -> _typing.Any:
    """Copy mappings and sequences, leaving out callable-valued keys.

    Callables inside sequences stay in place and encode as null.
    """
    is_mapping = isinstance(value, _abc.Mapping)
    if not is_mapping and not isinstance(value, (list, tuple)):
        return value
    if id(value) in active:
        raise ValueError("Circular reference detected")
    active.add(id(value))
    if is_mapping:
        result: _typing.Any = {
            key: _without_callables(item, active)
            for key, item in value.items()
            if not callable(item)
        }
    else:
        result = [_without_callables(item, active) for item in value]
    active.discard(id(value))
    return result


def _canonical(value: _typing.Any) -> str:
    return _json.dumps(
        _without_callables(value, set()),
        default=_encode_default,
        separators=(",", ":"),
    )


def deep_equal(a: _typing.Any, b: _typing.Any) -> bool:
    """
    Compare two values by their canonical JSON form.

    Key order matters: records holding the same items in a different
    insertion order compare unequal. Use is_equal() for an order-insensitive
    comparison.

    Dates are compared by ISO string and tuples serialize like lists.
    Keys holding a callable are left out of records, so {"f": fn} equals
    {} but not {"f": None}. Callables inside lists serialize as null.

    Raises:
        ValueError: If either value contains a reference cycle.
        TypeError: If a value cannot be serialized.

    Example:
        >>> deep_equal({"a": 1, "b": {"c": 2}}, {"a": 1, "b": {"c": 2}})
        True
        >>> deep_equal({"a": 1, "b": 2}, {"b": 2, "a": 1})
        False
    """
    return _canonical(a) == _canonical(b)


def _kind(value: _typing.Any) -> str | None:
    """Classify a value as a comparable container, or None for scalars."""
    if isinstance(value, _abc.Mapping):
        return "mapping"
    if isinstance(value, _abc.Sequence) and not isinstance(value, (str, bytes, bytearray)):
        return "sequence"
    if hasattr(value, "__dict__") and not callable(value):
        return "object"
    return None


def is_equal(a: _typing.Any, b: _typing.Any) -> bool:
    """
    Structural equality that ignores key order.

    - same object: equal
    - scalars: compared with ==
    - mappings: same key set, values recursively equal
    - sequences: same length, items recursively equal in order
    - plain objects: same type, attributes recursively equal

    A container is never equal to a scalar or to a different kind of
    container.

    Example:
        >>> is_equal({"a": {"b": 1}, "c": 2}, {"c": 2, "a": {"b": 1}})
        True
        >>> is_equal({"a": 1, "b": 2}, {"a": 1, "b": {"c": 2}})
        False
    """
    if a is b:
        return True

    kind_a, kind_b = _kind(a), _kind(b)
    if kind_a is None and kind_b is None:
        return bool(a == b)
    if kind_a != kind_b:
        return False

    if kind_a == "sequence":
        return len(a) == len(b) and all(is_equal(x, y) for x, y in zip(a, b))

    if kind_a == "object":
        if type(a) is not type(b):
            return False
        a, b = vars(a), vars(b)

    if len(a) != len(b) or a.keys() != b.keys():
        return False
    return all(is_equal(a[key], b[key]) for key in a)
