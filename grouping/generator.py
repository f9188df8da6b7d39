from __future__ import annotations

import logging

import numpy as np
from .types import *
from .errors import ValidationError
from .iterator import BufferIterator
from .parameter import _require_int

logger = logging.getLogger(__name__)


def _resolve_rng(rng: Optional[RandomSource], seed: Seed) -> RandomSource:
    """use the injected generator, or build one from seed (fresh entropy when seed is None)"""
    if rng is not None and seed is not None:
        raise ValueError("pass either rng or seed, not both")
    if rng is not None:
        return rng
    return np.random.default_rng(seed)


class SequenceGenerator(BufferIterator[int]):
    """
    yields every integer in [0, n) exactly once, in uniformly random order.

    the permutation is fixed at construction: 0..n-1 is laid out in order and
    shuffled in place (fisher-yates) by the numpy generator. iteration then
    walks the shuffled buffer and raises ExhaustedError past its end.
    """

    def __init__(self, n: int, rng: Optional[RandomSource] = None, seed: Seed = None):
        n = _require_int('n', n)
        if n < 0:
            raise ValidationError('n', n, f"n must not be negative, but {n}")

        generator = _resolve_rng(rng, seed)
        seq = np.arange(n)
        generator.shuffle(seq)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(f"shuffled sequence of {n}: {seq.tolist()}")

        # tolist() hands back native python ints, not numpy scalars
        super().__init__(seq.tolist())
        self._size = n

    @property
    def size(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"SequenceGenerator(size={self._size}, remaining={self.remaining})"
