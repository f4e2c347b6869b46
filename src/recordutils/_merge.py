"""
Merging records.

merge() is shallow, merge_deep() recurses into mappings present on both
sides, merge_with() lets the caller resolve keys present on both sides.
None of them modify their arguments: values are stored by reference in a
new Record.
"""

from __future__ import annotations

import collections.abc as _abc

import recordutils._frozen as _frozen
import recordutils._types as _types


def merge(target: _types.RecordLike, source: _types.RecordLike) -> _frozen.Record:
    """
    Shallow merge: keys in source overwrite the same keys in target.

    Example:
        >>> merge({"a": 1, "b": 2}, {"b": 3, "c": 4})
        Record({'a': 1, 'b': 3, 'c': 4})
    """
    result = _frozen.Record(target)
    result.update(source)
    return result


def merge_deep(target: _types.RecordLike, source: _types.RecordLike) -> _frozen.Record:
    """
    Deep merge two records, with source taking priority.

    For each key in source:
    - both sides are mappings: merged recursively into a new Record
    - anything else (scalar, list, type mismatch): source value replaces

    Lists are never merged element-wise. Keys only in target are kept.

    Args:
        target: The base record.
        source: The record to merge in (takes priority).

    Returns:
        New merged Record.

    Example:
        >>> merge_deep({"a": {"b": 1, "c": [1, 2]}}, {"a": {"c": [3]}, "d": 5})
        Record({'a': Record({'b': 1, 'c': [3]}), 'd': 5})
    """
    result = _frozen.Record(target)
    for key, value in source.items():
        if (
            key in result
            and isinstance(result[key], _abc.Mapping)
            and isinstance(value, _abc.Mapping)
        ):
            result[key] = merge_deep(result[key], value)
        else:
            result[key] = value
    return result


def merge_with(
    target: _types.RecordLike,
    source: _types.RecordLike,
    combine: _types.Combine,
) -> _frozen.Record:
    """
    Merge source into target, resolving shared keys with combine.

    combine(target_value, source_value) is called only for keys present in
    both records; keys new in source are copied as-is.

    Example:
        >>> merge_with({"a": 1, "b": 2}, {"b": 3, "c": 4}, lambda t, s: t + s)
        Record({'a': 1, 'b': 5, 'c': 4})
    """
    result = _frozen.Record(target)
    for key, value in source.items():
        if key in target:
            result[key] = combine(target[key], value)
        else:
            result[key] = value
    return result
