"""
Freezable containers and deep_freeze.

Python dicts and lists cannot be sealed in place, so records carry their
own immutability flag instead. Record wraps dict, RecordList wraps list;
both behave exactly like their base type until frozen, after which every
write path raises FrozenRecordError.

deep_freeze() seals a container and everything below it, then returns
the same object.
"""

from __future__ import annotations

import collections.abc as _abc
import logging as _logging
import typing as _typing

import recordutils.errors as errors

_logger = _logging.getLogger(__name__)


class Record(dict[_typing.Any, _typing.Any]):
    """
    A dict that can be frozen in place.

    Example:
        >>> record = Record(a=1, b={"c": 2})
        >>> deep_freeze(record) is record
        True
        >>> record["a"] = 2  # FrozenRecordError: frozen
        >>> record["b"]["c"] = 3  # FrozenRecordError: nested too
    """

    # Instances created via __new__ alone (deep_clone does this) start thawed
    _frozen = False

    def __init__(self, *args: _typing.Any, **kwargs: _typing.Any) -> None:
        self._check_writable("reinitialize")
        super().__init__(*args, **kwargs)

    def _check_writable(self, operation: str) -> None:
        if self._frozen:
            raise errors.FrozenRecordError(self, operation)

    def __setitem__(self, key: _typing.Any, value: _typing.Any) -> None:
        self._check_writable(f"set key {key!r}")
        super().__setitem__(key, value)

    def __delitem__(self, key: _typing.Any) -> None:
        self._check_writable(f"delete key {key!r}")
        super().__delitem__(key)

    def __ior__(self, other: _typing.Any) -> Record:  # type: ignore[override,misc]
        self._check_writable("update")
        return super().__ior__(other)

    def clear(self) -> None:
        self._check_writable("clear")
        super().clear()

    def pop(self, *args: _typing.Any) -> _typing.Any:
        self._check_writable("pop")
        return super().pop(*args)

    def popitem(self) -> tuple[_typing.Any, _typing.Any]:
        self._check_writable("popitem")
        return super().popitem()

    def setdefault(self, key: _typing.Any, default: _typing.Any = None) -> _typing.Any:
        self._check_writable(f"setdefault key {key!r}")
        return super().setdefault(key, default)

    def update(self, *args: _typing.Any, **kwargs: _typing.Any) -> None:
        self._check_writable("update")
        super().update(*args, **kwargs)

    def __setattr__(self, name: str, value: _typing.Any) -> None:
        self._check_writable(f"set attribute {name!r}")
        super().__setattr__(name, value)

    def __reduce__(self) -> tuple[_typing.Any, ...]:
        """Copies and pickles come back thawed.

        Items are refilled after the empty copy exists, so copy and pickle
        can memoize it before reaching a reference back to this record.
        """
        return (type(self), (), None, None, iter(dict.items(self)))

    def __repr__(self) -> str:
        return f"Record({dict.__repr__(self)})"


class RecordList(list[_typing.Any]):
    """
    A list that can be frozen in place.

    Frozen lists reject item assignment, deletion and every in-place
    method (append, sort, +=, ...). Reads and slicing still work.
    """

    _frozen = False

    def __init__(self, *args: _typing.Any) -> None:
        self._check_writable("reinitialize")
        super().__init__(*args)

    def _check_writable(self, operation: str) -> None:
        if self._frozen:
            raise errors.FrozenRecordError(self, operation)

    def __setitem__(self, index: _typing.Any, value: _typing.Any) -> None:
        self._check_writable("set item")
        super().__setitem__(index, value)

    def __delitem__(self, index: _typing.Any) -> None:
        self._check_writable("delete item")
        super().__delitem__(index)

    def __iadd__(self, other: _typing.Iterable[_typing.Any]) -> RecordList:  # type: ignore[override,misc]
        self._check_writable("extend")
        return super().__iadd__(other)

    def __imul__(self, count: _typing.SupportsIndex) -> RecordList:  # type: ignore[override,misc]
        self._check_writable("repeat")
        return super().__imul__(count)

    def append(self, value: _typing.Any) -> None:
        self._check_writable("append")
        super().append(value)

    def extend(self, values: _typing.Iterable[_typing.Any]) -> None:
        self._check_writable("extend")
        super().extend(values)

    def insert(self, index: _typing.SupportsIndex, value: _typing.Any) -> None:
        self._check_writable("insert")
        super().insert(index, value)

    def pop(self, index: _typing.SupportsIndex = -1) -> _typing.Any:
        self._check_writable("pop")
        return super().pop(index)

    def remove(self, value: _typing.Any) -> None:
        self._check_writable("remove")
        super().remove(value)

    def clear(self) -> None:
        self._check_writable("clear")
        super().clear()

    def sort(self, *args: _typing.Any, **kwargs: _typing.Any) -> None:
        self._check_writable("sort")
        super().sort(*args, **kwargs)

    def reverse(self) -> None:
        self._check_writable("reverse")
        super().reverse()

    def __setattr__(self, name: str, value: _typing.Any) -> None:
        self._check_writable(f"set attribute {name!r}")
        super().__setattr__(name, value)

    def __reduce__(self) -> tuple[_typing.Any, ...]:
        """Copies and pickles come back thawed, items appended after creation."""
        return (type(self), (), None, iter(list.__iter__(self)))

    def __repr__(self) -> str:
        return f"RecordList({list.__repr__(self)})"


def is_frozen(value: _typing.Any) -> bool:
    """
    Check whether a value is a frozen container.

    Only Record and RecordList carry a freeze flag. Tuples, frozensets and
    scalars are not reported as frozen even though they are immutable.
    """
    if isinstance(value, (Record, RecordList)):
        return value._frozen
    return False


def deep_freeze(value: _typing.Any) -> _typing.Any:
    """
    Freeze a record and everything nested inside it, in place.

    - Record / RecordList: sealed, children frozen first
    - nested dict / list: replaced by a frozen Record / RecordList copy
    - nested set: replaced by a frozenset
    - nested tuple: rebuilt with frozen items
    - anything else: left untouched

    Already-frozen containers are skipped, so freezing twice is a no-op and
    cyclic records terminate.

    Args:
        value: The Record or RecordList to freeze. Scalars pass through.

    Returns:
        The same object that was passed in.

    Raises:
        TypeError: If value is a plain dict or list. Builtin containers
            cannot be sealed in place; wrap them in Record/RecordList first.

    Example:
        >>> record = deep_freeze(Record(a=1, b={"c": [1, 2]}))
        >>> record["b"]["c"].append(3)  # FrozenRecordError
    """
    if isinstance(value, (dict, list)) and not isinstance(value, (Record, RecordList)):
        kind = "Record" if isinstance(value, dict) else "RecordList"
        raise TypeError(
            f"cannot freeze a plain {type(value).__name__} in place; "
            f"wrap it in {kind}(...) first"
        )
    _freeze_container(value, {})
    return value


def _freeze_container(value: _typing.Any, memo: dict[int, _typing.Any]) -> None:
    if not isinstance(value, (Record, RecordList)):
        return
    if value._frozen or id(value) in memo:
        return
    memo[id(value)] = value

    # Write through the base class: the container is not sealed yet, and
    # subclasses may override __setitem__.
    if isinstance(value, Record):
        for key, child in dict.items(value):
            frozen_child = _freeze_child(child, memo)
            if frozen_child is not child:
                dict.__setitem__(value, key, frozen_child)
    else:
        for index, child in enumerate(list.__iter__(value)):
            frozen_child = _freeze_child(child, memo)
            if frozen_child is not child:
                list.__setitem__(value, index, frozen_child)

    object.__setattr__(value, "_frozen", True)


def _freeze_child(child: _typing.Any, memo: dict[int, _typing.Any]) -> _typing.Any:
    """Return a frozen version of child, converting builtin containers.

    memo maps id(original) to its frozen replacement so a plain dict that
    appears twice (or refers to itself) is converted exactly once.
    """
    if isinstance(child, (Record, RecordList)):
        _freeze_container(child, memo)
        return child
    if id(child) in memo:
        return memo[id(child)]
    if isinstance(child, dict):
        _logger.debug("Converting nested %s to Record for freezing", type(child).__name__)
        converted: Record | RecordList = Record(child)
    elif isinstance(child, list):
        _logger.debug("Converting nested list to RecordList for freezing")
        converted = RecordList(child)
    elif isinstance(child, _abc.MutableSet):
        return frozenset(_freeze_child(item, memo) for item in child)
    elif isinstance(child, tuple):
        items = [_freeze_child(item, memo) for item in child]
        if all(new is old for new, old in zip(items, child)):
            return child
        if hasattr(child, "_make"):
            return type(child)._make(items)
        return tuple(items)
    else:
        return child
    memo[id(child)] = converted
    _freeze_container(converted, memo)
    return converted
