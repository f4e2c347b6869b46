"""
recordutils - helpers for in-memory records.

A record is a string-keyed mapping whose values may be scalars, nested
records, lists, dates or callables. Every helper here is a plain function:
nothing keeps state between calls.

Example:
    >>> import recordutils
    >>> recordutils.merge_deep({"a": {"b": 1}}, {"a": {"c": 2}, "d": 3})
    Record({'a': Record({'b': 1, 'c': 2}), 'd': 3})
    >>> recordutils.flatten({"a": 1, "b": {"c": 2}})
    Record({'a': 1, 'b.c': 2})
"""

import importlib.metadata as _metadata

# Version is defined in pyproject.toml - read it and parse into tuple (primary representation)
_raw_version = _metadata.version("recordutils")
__version_info__: tuple[int, int, int] = tuple(int(x) for x in _raw_version.split(".")[:3])  # type: ignore[assignment]
__version__: str = ".".join(str(x) for x in __version_info__)

from recordutils._access import (  # noqa: E402
    get_path,
    get_property,
    has_path,
    has_property,
    omit,
    pick,
    remove_property,
    set_path,
)
from recordutils._clone import deep_clone  # noqa: E402
from recordutils._frozen import Record, RecordList, deep_freeze, is_frozen  # noqa: E402
from recordutils._inspection import (  # noqa: E402
    deep_equal,
    entries,
    is_empty,
    is_equal,
    keys,
    values,
)
from recordutils._merge import merge, merge_deep, merge_with  # noqa: E402
from recordutils._transform import (  # noqa: E402
    filter_properties,
    flatten,
    map_keys,
    map_properties,
    transform,
    unflatten,
)
from recordutils.errors import FrozenRecordError, PathError, RecordError  # noqa: E402

__all__ = [
    "__version__",
    "__version_info__",
    # Containers
    "Record",
    "RecordList",
    # Errors
    "RecordError",
    "FrozenRecordError",
    "PathError",
    # Property access
    "remove_property",
    "has_property",
    "get_property",
    "pick",
    "omit",
    "get_path",
    "has_path",
    "set_path",
    # Merging
    "merge",
    "merge_deep",
    "merge_with",
    # Cloning and freezing
    "deep_clone",
    "deep_freeze",
    "is_frozen",
    # Inspection
    "is_empty",
    "keys",
    "values",
    "entries",
    "deep_equal",
    "is_equal",
    # Transformation
    "map_properties",
    "transform",
    "filter_properties",
    "map_keys",
    "flatten",
    "unflatten",
]
