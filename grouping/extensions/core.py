from __future__ import annotations
import typing
from ..types import *

if typing.TYPE_CHECKING:
    from ..iterator import LazyIterator, BufferIterator, TakeIterator

class _CoreOperations(Generic[T]):
    def take(self: 'LazyIterator[T]', count: int) -> 'TakeIterator[T]':
        """take the next 'count' elements; advances this iterator as they are pulled"""
        from ..iterator import TakeIterator
        return TakeIterator(self, count)

    def sorted(self: 'LazyIterator[T]') -> 'BufferIterator[T]':
        """
        drain this iterator now and replay its elements in ascending order.
        this iterator is fully consumed by the call.
        """
        from ..iterator import BufferIterator
        # python's sort is stable, irrelevant here since callers feed unique values
        return BufferIterator(sorted(self))
