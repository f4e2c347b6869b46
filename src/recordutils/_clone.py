"""
Deep cloning with cycle support.

deep_clone() walks a value and rebuilds every container it finds. A memo
keyed by id(original) is filled before recursing into children, so shared
and cyclic references are reproduced in the clone instead of looping.
"""

from __future__ import annotations

import copy as _copy
import datetime as _datetime
import functools as _functools
import logging as _logging
import types as _types
import typing as _typing

import recordutils._frozen as _frozen

_logger = _logging.getLogger(__name__)

# Immutable values: returned as-is
_ATOMIC_TYPES: tuple[type, ...] = (
    type(None),
    bool,
    int,
    float,
    complex,
    str,
    bytes,
    frozenset,
    range,
    type,
    _types.ModuleType,
    _types.BuiltinFunctionType,
)

_TEMPORAL_TYPES: tuple[type, ...] = (
    _datetime.date,
    _datetime.time,
    _datetime.timedelta,
)


def deep_clone(value: _typing.Any) -> _typing.Any:
    """
    Return a structurally independent copy of value.

    - None and immutable scalars: returned as-is
    - dates, times, timedeltas: new object with the same value
    - tuples (namedtuples included): new tuple of the same type, items cloned
    - list, set, dict, Record, RecordList: new container of the same
      type, items cloned; clones of frozen records are not frozen
    - functions and bound methods: new callable forwarding to the original
    - other objects with a __dict__ and no copy or pickle hooks: new
      instance, attributes cloned
    - anything else, including container subclasses such as OrderedDict
      and defaultdict: copy.deepcopy() sharing the same memo

    Example:
        >>> x = {"name": "loop"}
        >>> x["self"] = x
        >>> clone = deep_clone(x)
        >>> clone["self"] is clone, clone is x
        (True, False)
    """
    return _clone(value, {})


def _clone(value: _typing.Any, memo: dict[int, _typing.Any]) -> _typing.Any:
    if isinstance(value, _ATOMIC_TYPES):
        return value

    existing = memo.get(id(value), memo)
    if existing is not memo:
        return existing

    if isinstance(value, _TEMPORAL_TYPES):
        clone = _copy.copy(value)
        memo[id(value)] = clone
        return clone

    cls = type(value)

    if cls is list or cls is _frozen.RecordList:
        items: list[_typing.Any] = cls.__new__(cls)
        memo[id(value)] = items
        for item in value:
            list.append(items, _clone(item, memo))
        return items

    if isinstance(value, tuple):
        return _clone_tuple(value, memo)

    if cls is set:
        members: set[_typing.Any] = set()
        memo[id(value)] = members
        for member in value:
            set.add(members, _clone(member, memo))
        return members

    if isinstance(value, (_types.FunctionType, _types.MethodType)):
        forward = _forwarding_clone(value)
        memo[id(value)] = forward
        return forward

    # Subclasses such as OrderedDict or defaultdict keep state outside the
    # dict storage and are left to copy.deepcopy below
    if cls is dict or cls is _frozen.Record:
        mapping: dict[_typing.Any, _typing.Any] = cls.__new__(cls)
        memo[id(value)] = mapping
        for key, item in value.items():
            dict.__setitem__(mapping, key, _clone(item, memo))
        return mapping

    if _is_plain_object(value, cls):
        instance = cls.__new__(cls)
        memo[id(value)] = instance
        for name, attribute in vars(value).items():
            instance.__dict__[name] = _clone(attribute, memo)
        return instance

    _logger.debug("Falling back to copy.deepcopy for %s", type(value).__name__)
    return _copy.deepcopy(value, memo)


def _is_plain_object(value: _typing.Any, cls: type) -> bool:
    """True for instances that keep their state in __dict__ and define no copy hooks."""
    return (
        hasattr(value, "__dict__")
        and not hasattr(value, "__deepcopy__")
        and not hasattr(value, "__setstate__")
        and getattr(cls, "__getstate__", None) is getattr(object, "__getstate__", None)
        and cls.__reduce__ is object.__reduce__
        and cls.__reduce_ex__ is object.__reduce_ex__
    )


def _clone_tuple(value: tuple[_typing.Any, ...], memo: dict[int, _typing.Any]) -> _typing.Any:
    items = [_clone(item, memo) for item in value]
    # A cycle through a mutable child may have cloned this tuple already
    existing = memo.get(id(value), memo)
    if existing is not memo:
        return existing
    if hasattr(value, "_make"):
        clone = type(value)._make(items)
    else:
        clone = type(value)(items)
    memo[id(value)] = clone
    return clone


def _forwarding_clone(func: _typing.Callable[..., _typing.Any]) -> _typing.Callable[..., _typing.Any]:
    """Build a new callable that forwards to func and carries its metadata."""

    @_functools.wraps(func)
    def forward(*args: _typing.Any, **kwargs: _typing.Any) -> _typing.Any:
        return func(*args, **kwargs)

    return forward
