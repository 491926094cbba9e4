"""
Reversi game module.
This package contains the core board engine for Reversi and a thin game driver.
"""

from .board import Board, positions_to_flip
from .errors import GameNotOver, GameOver, InvalidMove, OffBoardMove, OutOfBounds, ReversiError
from .game import MoveRecord, ReversiGame
from .piece import Color, Piece
from .position import DIRECTIONS, Position

__all__ = [
    'Board', 'positions_to_flip',
    'Color', 'Piece', 'Position', 'DIRECTIONS',
    'ReversiGame', 'MoveRecord',
    'ReversiError', 'OutOfBounds', 'InvalidMove', 'OffBoardMove', 'GameOver', 'GameNotOver',
]
