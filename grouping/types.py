from typing import (
    TypeVar, Generic, Iterator, Iterable, Any, Optional, List
)

import numpy as np

T = TypeVar('T')

# a numpy generator handle injected wherever shuffling happens
RandomSource = np.random.Generator
Seed = Optional[int]

# one rendered group, e.g. "1,4,7"
GroupLine = str
GroupSizes = List[int]
