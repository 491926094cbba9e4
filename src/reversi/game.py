"""
Reversi game module.
Drives turns on top of a Board: who moves next, passing and game end.
Moves come from the caller; nothing here chooses a move.
"""
import logging
from typing import List, NamedTuple, Optional, Sequence, Tuple

from .board import Board
from .config import GameConfig
from .errors import GameNotOver, GameOver
from .piece import Color
from .position import Position
from .render import get_renderer

logger = logging.getLogger(__name__)


class MoveRecord(NamedTuple):
    color: Color
    position: Position
    flipped: Tuple[Position, ...]


class ReversiGame:
    """
    Game flow for two colors sharing one Board.

    Turn rule: after a move the opponent plays next if it has a legal move;
    otherwise it passes and the same color moves again; if neither color
    can move, the game is over whoever was nominally on turn.
    """

    def __init__(self, board: Optional[Board] = None, config: Optional[GameConfig] = None):
        """
        Initialize a new game.

        Args:
            board: Starting position (default: the standard opening)
            config: Game driver configuration
        """
        self.board = board if board is not None else Board()
        self.config = config or GameConfig()
        self.renderer = get_renderer(self.config.renderer)
        self.current_player = Color.BLACK  # Black moves first
        self.move_history: List[MoveRecord] = []
        self.passes: List[Color] = []
        self._skip_if_stuck()

    def _log(self, msg: str, *args) -> None:
        if self.config.log_moves:
            logger.info(msg, *args)

    def _skip_if_stuck(self) -> None:
        """Pass the turn while the player to move has no move but the game goes on."""
        if self.is_game_over():
            self._log("Game over: Black %d, White %d", *self.get_score())
            return
        if not self.board.has_move(self.current_player):
            self._log("%s has no valid move, passing", self.current_player.value)
            self.passes.append(self.current_player)
            self.current_player = self.current_player.opponent

    def make_move(self, pos: Sequence[int]) -> List[Position]:
        """
        Play pos for the current player and advance the turn.

        Args:
            pos: Square to play

        Returns:
            The positions flipped by the move

        Raises:
            GameOver: neither color can move
            InvalidMove, OutOfBounds: from the board; the game state is unchanged
        """
        if self.is_game_over():
            raise GameOver("The game is over")

        color = self.current_player
        flipped = self.board.place_piece(pos, color)
        position = Position.of(pos)
        self.move_history.append(MoveRecord(color, position, tuple(flipped)))
        self._log("%s plays %s, flipping %d", color.value, tuple(position), len(flipped))

        self.current_player = color.opponent
        self._skip_if_stuck()
        return flipped

    def get_valid_moves(self) -> List[Position]:
        """Valid moves for the current player (empty once the game is over)."""
        return self.board.valid_moves(self.current_player)

    def is_game_over(self) -> bool:
        return self.board.is_over()

    def get_current_player(self) -> Color:
        return self.current_player

    def get_score(self) -> Tuple[int, int]:
        """
        Get the current score (black, white).

        Returns:
            Tuple of (black_score, white_score)
        """
        return self.board.score()

    def get_winner(self) -> Optional[Color]:
        """
        Get the winner of a finished game.

        Returns:
            The Color with more pieces, or None for a draw
        """
        if not self.is_game_over():
            raise GameNotOver("The game is still in progress")
        black, white = self.get_score()
        if black > white:
            return Color.BLACK
        if white > black:
            return Color.WHITE
        return None

    def __str__(self) -> str:
        """String representation of the game state."""
        black, white = self.get_score()
        lines = [self.renderer.render(self.board)]
        if self.is_game_over():
            winner = self.get_winner()
            lines.append(f"Score - Black: {black}, White: {white}")
            lines.append("Game over! It's a draw!" if winner is None
                         else f"Game over! {winner.value.capitalize()} wins!")
        else:
            lines.append(f"Current player: {self.current_player.value.capitalize()}")
            lines.append(f"Score - Black: {black}, White: {white}")
        return '\n'.join(lines)
