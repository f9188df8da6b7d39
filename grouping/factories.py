import typing
from .types import *
from .parameter import new_parameter

if typing.TYPE_CHECKING:
    from .iterator import BufferIterator
    from .generator import SequenceGenerator
    from .partitioner import GroupIterator
    from .parameter import Parameter

def from_iterable(data: Iterable[T]) -> 'BufferIterator[T]':
    """create a single-pass iterator over a snapshot of data"""
    from .iterator import BufferIterator
    return BufferIterator(data)

def random_sequence(n: int, seed: Seed = None, rng: Optional[RandomSource] = None) -> 'SequenceGenerator':
    """create a random permutation of [0, n), shuffled by rng or a generator seeded with seed"""
    from .generator import SequenceGenerator
    return SequenceGenerator(n, rng=rng, seed=seed)

def grouped_random_sequence(parameter: 'Parameter', seed: Seed = None,
                            rng: Optional[RandomSource] = None) -> 'GroupIterator':
    """create the group iterator for an already validated parameter"""
    from .partitioner import GroupIterator
    return GroupIterator(parameter, rng=rng, seed=seed)

def generate_groups(n: int, g: int, delimiter: str, seed: Seed = None,
                    rng: Optional[RandomSource] = None) -> 'GroupIterator':
    """validate raw input and compose it straight into a group iterator"""
    return grouped_random_sequence(new_parameter(n, g, delimiter), seed=seed, rng=rng)

# --- aliases ---
P = from_iterable
