"""
Exceptions raised by recordutils.

Each error also derives from the builtin it specializes, so callers that
already catch TypeError or ValueError keep working.
"""


class RecordError(Exception):
    """Base class for all recordutils errors."""

    pass


class FrozenRecordError(RecordError, TypeError):
    """Raised when a frozen Record or RecordList is written to."""

    def __init__(self, container: object, operation: str) -> None:
        self.container = container
        self.operation = operation
        super().__init__(
            f"cannot {operation}: {type(container).__name__} is frozen"
        )


class PathError(RecordError, ValueError):
    """Raised when a path is ambiguous or collides with an existing value."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"{reason}: {path!r}")
