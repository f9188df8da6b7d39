from typing import Any


class GroupingError(Exception):
    """base class for every error raised by the grouping package"""
    pass


class ValidationError(GroupingError, ValueError):
    """a parameter failed validation; no value was constructed"""

    def __init__(self, field: str, value: Any, message: str):
        super().__init__(message)
        self.field = field
        self.value = value

    def __repr__(self) -> str:
        return f"ValidationError(field={self.field!r}, value={self.value!r}, message={str(self)!r})"


class ExhaustedError(GroupingError, StopIteration):
    """
    raised when an iterator is asked for a value past its end.
    it is a StopIteration, so for loops and list() stop on it quietly.
    """
    pass


class ShortfallError(GroupingError):
    """take() ran out of source elements before producing the requested count"""

    def __init__(self, requested: int, produced: int):
        super().__init__(f"take({requested}) source ran dry after {produced} elements")
        self.requested = requested
        self.produced = produced


class EmptyJoinError(GroupingError, ValueError):
    """join attempted on a sequence with no elements"""
    pass
