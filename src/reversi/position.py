"""
Board coordinates and scan directions.
"""
import operator
from collections import namedtuple
from typing import Iterator, Sequence, Tuple

SIZE = 8

# Step vectors (d_row, d_col), fixed order
DIRECTIONS: Tuple[Tuple[int, int], ...] = (
    (0, 1), (1, 1), (1, 0),
    (1, -1), (0, -1), (-1, -1),
    (-1, 0), (-1, 1),
)


class Position(namedtuple('Position', 'row col')):
    """Immutable (row, col) coordinate, 0-based."""
    __slots__ = ()

    @classmethod
    def of(cls, pos: Sequence[int]) -> 'Position':
        if isinstance(pos, cls):
            return pos
        row, col = pos
        return cls(operator.index(row), operator.index(col))


def is_valid_pos(pos: Sequence[int]) -> bool:
    """True iff both coordinates are integers lying on the board."""
    row, col = pos
    try:
        row, col = operator.index(row), operator.index(col)
    except TypeError:
        return False
    return 0 <= row < SIZE and 0 <= col < SIZE


def step(pos: Sequence[int], direction: Tuple[int, int]) -> Position:
    d_row, d_col = direction
    return Position(pos[0] + d_row, pos[1] + d_col)


def all_positions() -> Iterator[Position]:
    """Every square in row-major order."""
    for row in range(SIZE):
        for col in range(SIZE):
            yield Position(row, col)
