"""
Board module for Reversi.
Owns the 8x8 grid, decides move legality and performs captures.
The board has no notion of whose turn it is.
"""
import logging
from typing import Iterable, List, Optional, Sequence, Tuple, Union

import numpy as np

from .errors import InvalidMove, OffBoardMove, OutOfBounds
from .piece import Color, Piece
from .position import DIRECTIONS, SIZE, Position, all_positions, is_valid_pos, step
from .render import TextRenderer

logger = logging.getLogger(__name__)

ColorLike = Union[Color, str]


def positions_to_flip(board: 'Board', pos: Sequence[int], color: ColorLike,
                      direction: Tuple[int, int]) -> Optional[List[Position]]:
    """
    Follow a direction away from pos, collecting opponent pieces until a
    piece of the given color is reached.

    Args:
        board: Board to scan
        pos: Starting square (its own contents are never read)
        color: Color of the piece placed, or about to be placed, at pos
        direction: One of DIRECTIONS

    Returns:
        The captured positions in walking order, or None when the ray
        captures nothing. Never an empty list.
    """
    color = Color.coerce(color)
    captured: List[Position] = []
    current = step(pos, direction)

    while is_valid_pos(current):
        piece = board.get_piece(current)
        if piece is None:
            return None
        if piece.color is color:
            return captured or None
        captured.append(current)
        current = step(current, direction)

    return None


class Board:
    """
    The Reversi board: a fixed 8x8 grid of optional pieces.
    Mutated only through place_piece.
    """

    SIZE = SIZE

    # Codes used by snapshot()
    EMPTY = 0
    BLACK = 1
    WHITE = 2

    def __init__(self):
        """Initialize a board with the standard starting position."""
        self._grid: List[List[Optional[Piece]]] = [[None] * SIZE for _ in range(SIZE)]
        self._grid[4][3] = Piece(Color.BLACK)
        self._grid[3][4] = Piece(Color.BLACK)
        self._grid[3][3] = Piece(Color.WHITE)
        self._grid[4][4] = Piece(Color.WHITE)

    @classmethod
    def from_rows(cls, rows: Iterable[str]) -> 'Board':
        """
        Build a board from 8 strings of 8 characters each.

        Args:
            rows: Rows top to bottom, using 'B', 'W' and '.' for empty

        Returns:
            A new Board holding exactly the given pieces
        """
        rows = list(rows)
        if len(rows) != SIZE or any(len(row) != SIZE for row in rows):
            raise ValueError(f"Expected {SIZE} rows of {SIZE} characters")

        symbols = {'B': Color.BLACK, 'W': Color.WHITE}
        board = cls()
        for i, row in enumerate(rows):
            for j, char in enumerate(row):
                if char == '.':
                    board._grid[i][j] = None
                elif char in symbols:
                    board._grid[i][j] = Piece(symbols[char])
                else:
                    raise ValueError(f"Unknown square {char!r} at {(i, j)}")
        return board

    def copy(self) -> 'Board':
        """Create a deep copy of the board."""
        new_board = type(self).__new__(type(self))
        new_board._grid = [[piece.copy() if piece is not None else None for piece in row]
                           for row in self._grid]
        return new_board

    def _check_pos(self, pos: Sequence[int]) -> Position:
        if not self.is_valid_pos(pos):
            raise OutOfBounds(pos)
        return Position.of(pos)

    def get_piece(self, pos: Sequence[int]) -> Optional[Piece]:
        """Return the piece at pos, or None if the square is empty."""
        row, col = self._check_pos(pos)
        return self._grid[row][col]

    @staticmethod
    def is_valid_pos(pos: Sequence[int]) -> bool:
        return is_valid_pos(pos)

    def is_occupied(self, pos: Sequence[int]) -> bool:
        return self.get_piece(pos) is not None

    def is_mine(self, pos: Sequence[int], color: ColorLike) -> bool:
        color = Color.coerce(color)
        piece = self.get_piece(pos)
        return piece is not None and piece.color is color

    def has_move(self, color: ColorLike) -> bool:
        """Check if there are any valid moves for the given color."""
        return len(self.valid_moves(color)) > 0

    def is_over(self) -> bool:
        """True when neither color can move, whoever is nominally on turn."""
        return not self.has_move(Color.BLACK) and not self.has_move(Color.WHITE)

    def valid_move(self, pos: Sequence[int], color: ColorLike) -> bool:
        """
        Check that pos is on the board, empty, and that placing color there
        would capture at least one opponent piece.
        """
        color = Color.coerce(color)
        if not self.is_valid_pos(pos):
            return False
        if self.is_occupied(pos):
            return False

        for direction in DIRECTIONS:
            if positions_to_flip(self, pos, color, direction):
                return True
        return False

    def valid_moves(self, color: ColorLike) -> List[Position]:
        """All legal squares for color, in row-major order."""
        color = Color.coerce(color)
        return [pos for pos in all_positions() if self.valid_move(pos, color)]

    def flips_for(self, pos: Sequence[int], color: ColorLike) -> List[Position]:
        """Positions that placing color at pos would flip; empty if illegal."""
        if not self.valid_move(pos, color):
            return []
        flipped: List[Position] = []
        for direction in DIRECTIONS:
            flipped.extend(positions_to_flip(self, pos, color, direction) or [])
        return flipped

    def place_piece(self, pos: Sequence[int], color: ColorLike) -> List[Position]:
        """
        Place a new piece of color at pos and flip every captured piece.

        Args:
            pos: Target square
            color: Color of the new piece

        Returns:
            The flipped positions, grouped by direction

        Raises:
            OffBoardMove: pos is outside the board (an OutOfBounds and an InvalidMove)
            InvalidMove: pos is occupied or captures nothing
        """
        color = Color.coerce(color)
        if not self.is_valid_pos(pos):
            logger.debug("Rejected %s move at %s: off the board", color.value, tuple(pos))
            raise OffBoardMove(pos, color)

        pos = Position.of(pos)
        if not self.valid_move(pos, color):
            reason = "square is occupied" if self.is_occupied(pos) else "no pieces to flip"
            logger.debug("Rejected %s move at %s: %s", color.value, tuple(pos), reason)
            raise InvalidMove(pos, color, reason)

        self._grid[pos.row][pos.col] = Piece(color)

        flipped: List[Position] = []
        for direction in DIRECTIONS:
            flipped.extend(positions_to_flip(self, pos, color, direction) or [])
        for row, col in flipped:
            self._grid[row][col].flip()

        logger.debug("Placed %s at %s, flipped %d", color.value, tuple(pos), len(flipped))
        return flipped

    def count(self, color: ColorLike) -> int:
        code = self.BLACK if Color.coerce(color) is Color.BLACK else self.WHITE
        return int(np.count_nonzero(self.snapshot() == code))

    def score(self) -> Tuple[int, int]:
        """
        Get the current score (black, white).

        Returns:
            Tuple of (black_count, white_count)
        """
        state = self.snapshot()
        return int(np.count_nonzero(state == self.BLACK)), int(np.count_nonzero(state == self.WHITE))

    def occupied_count(self) -> int:
        return int(np.count_nonzero(self.snapshot()))

    def snapshot(self) -> np.ndarray:
        """
        Get the board state as a numpy array.

        Returns:
            (8, 8) int8 array of EMPTY, BLACK and WHITE codes. A copy.
        """
        state = np.full((SIZE, SIZE), self.EMPTY, dtype=np.int8)
        for i, row in enumerate(self._grid):
            for j, piece in enumerate(row):
                if piece is not None:
                    state[i, j] = self.BLACK if piece.color is Color.BLACK else self.WHITE
        return state

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._grid == other._grid

    __hash__ = None

    def __str__(self) -> str:
        return TextRenderer().render(self)
