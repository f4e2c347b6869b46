"""
Type aliases for recordutils.

- Path: separator-joined string naming a nested location ("a.b.c")
- Combine: callback used by merge_with to resolve keys present on both sides
- Mapper / Predicate: per-value callbacks, called as fn(value, key)
- KeyMapper: callback used by map_keys
"""

from __future__ import annotations

import collections.abc as _abc
import typing as _typing

# Example: "config.model.name" represents record["config"]["model"]["name"]
Path: _typing.TypeAlias = str

# Any readable record; operations that build new records return Record
RecordLike: _typing.TypeAlias = _abc.Mapping[_typing.Any, _typing.Any]

Combine: _typing.TypeAlias = _abc.Callable[[_typing.Any, _typing.Any], _typing.Any]
Mapper: _typing.TypeAlias = _abc.Callable[[_typing.Any, _typing.Any], _typing.Any]
Predicate: _typing.TypeAlias = _abc.Callable[[_typing.Any, _typing.Any], bool]
KeyMapper: _typing.TypeAlias = _abc.Callable[[_typing.Any], _typing.Any]
