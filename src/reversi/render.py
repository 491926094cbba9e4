"""
Renderers turn a board into a view. They read the board only through
get_piece and hold no game logic.
"""
from abc import ABC, abstractmethod

from .position import SIZE, Position


class Renderer(ABC):
    """Interface for board views."""

    @abstractmethod
    def render(self, board) -> str:
        """Return a textual view of the board."""


class TextRenderer(Renderer):
    """
    Plain text view: a column header followed by one line per row.

          01234567
        0|........
        3|...WB...
    """

    def __init__(self, empty: str = '.'):
        self.empty = empty

    def render(self, board) -> str:
        lines = ['  ' + ''.join(str(i) for i in range(SIZE))]
        for i in range(SIZE):
            cells = []
            for j in range(SIZE):
                piece = board.get_piece(Position(i, j))
                cells.append(str(piece) if piece is not None else self.empty)
            lines.append(f"{i}|{''.join(cells)}")
        return '\n'.join(lines)


RENDERERS = {
    'text': TextRenderer,
}


def get_renderer(name: str) -> Renderer:
    """Look up a renderer by its config name."""
    try:
        return RENDERERS[name]()
    except KeyError:
        raise ValueError(f"Unknown renderer: {name!r}. Choose from {sorted(RENDERERS)}") from None
