from __future__ import annotations
import typing
import numpy as np
from ..types import *
from ..errors import EmptyJoinError

if typing.TYPE_CHECKING:
    from ..iterator import LazyIterator

class TerminalAccessor(Generic[T]):
    def __init__(self, iterator_instance: 'LazyIterator[T]'):
        self._iterator = iterator_instance

    def list(self) -> List[T]:
        """drain into a list"""
        return list(self._iterator)

    def array(self) -> np.ndarray:
        """drain into a numpy array"""
        return np.array(self.list())

    def count(self) -> int:
        """drain and count elements"""
        return sum(1 for _ in self._iterator)

    def join(self, delimiter: str) -> str:
        """
        drain and render each element with str(), separated by delimiter.
        no leading or trailing delimiter is produced.
        """
        items = self.list()
        if not items:
            raise EmptyJoinError("cannot join a sequence with no elements")
        return delimiter.join(str(item) for item in items)
