from __future__ import annotations

import logging
import numbers
import re
from dataclasses import dataclass, field, asdict

from .types import *
from .errors import ValidationError

logger = logging.getLogger(__name__)

# an optional sign followed by ascii digits, leading zeros included
_INTEGER_LITERAL = re.compile(r'[+-]?[0-9]+')


def _require_int(name: str, value: Any) -> int:
    """accept any integral value (numpy integers included) and hand back a plain int"""
    # bool is an int subclass but never a sensible count
    if not isinstance(value, numbers.Integral) or isinstance(value, (bool, np.bool_)):
        raise ValidationError(name, value, f"{name} must be an integer, but {value!r}")
    return int(value)


@dataclass(frozen=True)
class Parameter:
    """
    everything needed to produce one grouped random sequence.

    max_number: exclusive upper bound, the sequence covers [0, max_number)
    group_count: number of groups to emit
    delimiter: separator placed between numbers of a group
    min_group_size: derived, max_number // group_count
    overflow_group_count: derived, how many leading groups get one extra element
    """
    max_number: int
    group_count: int
    delimiter: str
    min_group_size: int = field(init=False)
    overflow_group_count: int = field(init=False)

    def __post_init__(self):
        n, g, delimiter = self.max_number, self.group_count, self.delimiter

        n = _require_int('n', n)
        if n <= 0:
            raise ValidationError('n', n, f"n must be positive, but {n}")
        g = _require_int('g', g)
        if g <= 0:
            raise ValidationError('g', g, f"g must be positive, but {g}")
        if n < g:
            raise ValidationError('g', g, f"n must be greater than or equal to g, but n: {n}, g: {g}")
        if not isinstance(delimiter, str):
            raise ValidationError('delimiter', delimiter, f"delimiter must be a string, but {delimiter!r}")
        if delimiter == "":
            raise ValidationError('delimiter', delimiter, "delimiter must not be empty")
        # a numeric delimiter would make the joined output ambiguous to split
        if _INTEGER_LITERAL.fullmatch(delimiter):
            raise ValidationError('delimiter', delimiter, f"delimiter must not be numeric string, but {delimiter!r}")

        # frozen dataclass, so normalized and derived fields are set once through object.__setattr__
        object.__setattr__(self, 'max_number', n)
        object.__setattr__(self, 'group_count', g)
        object.__setattr__(self, 'min_group_size', n // g)
        object.__setattr__(self, 'overflow_group_count', n % g)

    def group_size(self, index: int) -> int:
        """number of elements in the group at 0-based position index"""
        if not 0 <= index < self.group_count:
            raise IndexError(f"group index {index} out of range for {self.group_count} groups")
        if index < self.overflow_group_count:
            return self.min_group_size + 1
        return self.min_group_size

    def group_sizes(self) -> GroupSizes:
        """sizes of all groups in emission order; they sum to max_number"""
        return [self.group_size(i) for i in range(self.group_count)]


def new_parameter(n: int, g: int, delimiter: str) -> Parameter:
    """
    the one place callers build a Parameter from raw input.

    :param n: exclusive upper bound of the generated numbers
    :param g: number of groups
    :param delimiter: separator between numbers in a group
    :raises ValidationError: when any argument breaks its constraint
    """
    p = Parameter(n, g, delimiter)
    logger.debug(f"parameter: {asdict(p)}")
    return p
