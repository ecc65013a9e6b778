"""
Reversi game module.
This package contains the core game logic for Reversi.
"""

from .board import (
    DIRECTIONS,
    Board,
    Coordinate,
    MoveError,
    MoveResult,
    Player,
    in_bounds,
    opponent,
)
from .game import apply_move, is_finished, legal_moves, new_game, score
from .render import render

__all__ = [
    'Board', 'Coordinate', 'DIRECTIONS', 'MoveError', 'MoveResult', 'Player',
    'apply_move', 'in_bounds', 'is_finished', 'legal_moves', 'new_game',
    'opponent', 'render', 'score',
]
