from __future__ import annotations

import logging

from .types import *
from .errors import ExhaustedError
from .iterator import LazyIterator
from .generator import SequenceGenerator
from .parameter import Parameter

logger = logging.getLogger(__name__)


class GroupIterator(LazyIterator[GroupLine]):
    """
    splits one random permutation of [0, max_number) into group_count strings.

    call i pulls parameter.group_size(i) elements from the owned sequence
    generator, sorts them ascending and joins them with parameter.delimiter.
    the first overflow_group_count groups carry one extra element, so sizes
    differ by at most one and add up to max_number. after group_count calls
    the iterator is done for good.
    """

    def __init__(self, parameter: Parameter, rng: Optional[RandomSource] = None, seed: Seed = None):
        super().__init__()
        self._parameter = parameter
        self._sequence = SequenceGenerator(parameter.max_number, rng=rng, seed=seed)
        self._emitted = 0

    @property
    def parameter(self) -> Parameter:
        return self._parameter

    @property
    def emitted(self) -> int:
        """how many groups have been returned so far"""
        return self._emitted

    def _advance(self) -> GroupLine:
        p = self._parameter
        if self._emitted >= p.group_count:
            raise ExhaustedError(f"all {p.group_count} groups already emitted")

        group_size = p.group_size(self._emitted)
        line = self._sequence.take(group_size).sorted().to.join(p.delimiter)
        logger.debug(f"group {self._emitted} ({group_size} elements): {line!r}")

        self._emitted += 1
        return line

    def __repr__(self) -> str:
        return f"GroupIterator(groups={self._parameter.group_count}, emitted={self._emitted})"
