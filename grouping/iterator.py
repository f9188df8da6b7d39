from __future__ import annotations

import numbers
from abc import ABC, abstractmethod
from .types import *
from .errors import ExhaustedError, ShortfallError

# --- chainable operations ---
from .extensions.core import _CoreOperations

# --- accessors ---
from .extensions.terminal import TerminalAccessor

# --- abstract base class ---

class IIterator(ABC, Generic[T]):
    @abstractmethod
    def _advance(self) -> T:
        """produce the next element, raising ExhaustedError when there is none"""
        pass

# --- base iterator implementation ---

class _BaseIterator(IIterator[T]):
    def __init__(self):
        """single-pass: once exhausted, stays exhausted"""
        self._is_exhausted = False

    def __iter__(self) -> Iterator[T]:
        return self

    def __next__(self) -> T:
        if self._is_exhausted:
            raise ExhaustedError(f"{type(self).__name__} is exhausted")
        try:
            return self._advance()
        except ExhaustedError:
            self._is_exhausted = True
            raise

# --- main iterator class ---

class LazyIterator(
    _BaseIterator[T],
    _CoreOperations[T]
):
    """a pull-based, single-pass iterator with chainable and draining operations."""
    def __init__(self):
        super().__init__()
        # --- initialize accessors ---
        self.to = TerminalAccessor(self)

# --- concrete iterators ---

class BufferIterator(LazyIterator[T]):
    """replays an owned buffer exactly once."""

    def __init__(self, data: Iterable[T]):
        super().__init__()
        self._buffer: List[T] = list(data)
        self._index = 0

    def _advance(self) -> T:
        if self._index >= len(self._buffer):
            raise ExhaustedError(f"all {len(self._buffer)} elements already returned")
        item = self._buffer[self._index]
        self._index += 1
        return item

    @property
    def remaining(self) -> int:
        return len(self._buffer) - self._index


class TakeIterator(LazyIterator[T]):
    """
    yields exactly the next 'count' elements of the wrapped iterator.
    a source that runs dry early is reported as ShortfallError, never as a short chunk.
    """

    def __init__(self, source: Iterable[T], count: int):
        super().__init__()
        if not isinstance(count, numbers.Integral) or isinstance(count, bool):
            raise TypeError(f"take count must be an integer, but {count!r}")
        count = int(count)
        if count < 0:
            raise ValueError(f"take count must not be negative, but {count}")
        self._source = iter(source)
        self._count = count
        self._produced = 0

    def _advance(self) -> T:
        if self._produced >= self._count:
            raise ExhaustedError(f"take({self._count}) already produced {self._count} elements")
        try:
            item = next(self._source)
        except StopIteration as e:
            raise ShortfallError(self._count, self._produced) from e
        self._produced += 1
        return item
