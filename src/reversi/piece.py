"""
Piece module for Reversi.
A piece is a single colored token; capturing it only changes its color.
"""
import enum
from typing import Union


class Color(enum.Enum):
    """The two sides of the game."""
    BLACK = "black"
    WHITE = "white"

    @property
    def opponent(self) -> 'Color':
        return Color.WHITE if self is Color.BLACK else Color.BLACK

    @property
    def symbol(self) -> str:
        return 'B' if self is Color.BLACK else 'W'

    @classmethod
    def coerce(cls, value: Union['Color', str]) -> 'Color':
        """Accept a Color or its string value ("black" / "white")."""
        if isinstance(value, cls):
            return value
        return cls(value)


class Piece:
    """A token on the board. Never removed once placed."""

    __slots__ = ('_color',)

    def __init__(self, color: Union[Color, str]):
        self._color = Color.coerce(color)

    @property
    def color(self) -> Color:
        return self._color

    def flip(self) -> None:
        """Switch this piece to the opposite color."""
        self._color = self._color.opponent

    def copy(self) -> 'Piece':
        return Piece(self._color)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Piece):
            return NotImplemented
        return self._color is other._color

    # Mutable through flip
    __hash__ = None

    def __repr__(self) -> str:
        return f"Piece({self._color.value!r})"

    def __str__(self) -> str:
        return self._color.symbol
