r"""
'  ________                         .__
' /  _____/______  ____  __ ________ |__| ____    ____
'/   \  __\_  __ \/  _ \|  |  \____ \|  |/    \  / ___\
'\    \_\  \  | \(  <_> )  |  /  |_> >  |   |  \/ /_/  >
' \______  /__|   \____/|____/|   __/|__|___|  /\___  /
'        \/                   |__|           \//_____/
"""

# expose the main classes
from .iterator import LazyIterator, BufferIterator, TakeIterator
from .generator import SequenceGenerator
from .partitioner import GroupIterator
from .parameter import Parameter, new_parameter

# expose the factory functions
from .factories import (
    from_iterable,
    random_sequence,
    grouped_random_sequence,
    generate_groups,
    P
)

# expose the error taxonomy
from .errors import (
    GroupingError,
    ValidationError,
    ExhaustedError,
    ShortfallError,
    EmptyJoinError
)

# expose report helpers
from .report import split_group, summarize, is_balanced

# define what `import *` does
__all__ = [
    "LazyIterator",
    "BufferIterator",
    "TakeIterator",
    "SequenceGenerator",
    "GroupIterator",
    "Parameter",
    "new_parameter",
    "from_iterable",
    "random_sequence",
    "grouped_random_sequence",
    "generate_groups",
    "P",
    "GroupingError",
    "ValidationError",
    "ExhaustedError",
    "ShortfallError",
    "EmptyJoinError",
    "split_group",
    "summarize",
    "is_balanced"
]
