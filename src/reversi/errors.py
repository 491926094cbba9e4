"""
Exceptions raised by the Reversi engine and game driver.
"""
from typing import Optional, Sequence


class ReversiError(Exception):
    """Base class for all Reversi errors."""


class OutOfBounds(ReversiError, IndexError):
    """A position has a coordinate outside the board."""

    def __init__(self, position: Sequence[int]):
        self.position = tuple(position)
        super().__init__(f"Position outside of board: {self.position}")


class InvalidMove(ReversiError, ValueError):
    """A placement that is occupied or captures nothing."""

    def __init__(self, position: Sequence[int], color, reason: Optional[str] = None):
        self.position = tuple(position)
        self.color = color
        self.reason = reason
        message = f"Invalid move for {getattr(color, 'value', color)} at {self.position}"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class OffBoardMove(OutOfBounds, InvalidMove):
    """A placement outside the board; catchable as either parent."""

    def __init__(self, position: Sequence[int], color):
        self.position = tuple(position)
        self.color = color
        self.reason = "off the board"
        Exception.__init__(self, f"Position outside of board: {self.position}")


class GameOver(ReversiError):
    """A move was attempted after neither color can move."""


class GameNotOver(ReversiError):
    """The result was requested while the game is still running."""
