import pandas as pd
from .types import *


def split_group(line: GroupLine, delimiter: str) -> List[int]:
    """
    the inverse of joining a group: split on delimiter and parse each token.
    raises ValueError for a token that is not an integer.
    """
    if not delimiter:
        raise ValueError("delimiter must not be empty")
    return [int(token) for token in line.split(delimiter)]


def summarize(lines: Iterable[GroupLine], delimiter: str) -> pd.DataFrame:
    """one row per emitted group: position, size, smallest and largest member, members"""
    rows = []
    for index, line in enumerate(lines):
        members = split_group(line, delimiter)
        rows.append({
            'group': index,
            'size': len(members),
            'first': members[0],
            'last': members[-1],
            'members': members
        })
    return pd.DataFrame(rows, columns=['group', 'size', 'first', 'last', 'members'])


def is_balanced(frame: pd.DataFrame) -> bool:
    """group sizes differ by at most one"""
    if frame.empty:
        return True
    return int(frame['size'].max() - frame['size'].min()) <= 1
