"""
Reversi game module.
Entry points used by whatever drives a game (the interactive loop, tests).
"""
from typing import Optional, Set, Tuple

from .board import Board, Coordinate, MoveResult, Player


def new_game() -> Board:
    """Start a game from the standard opening position."""
    return Board()


def apply_move(state: Board, x: int, y: int) -> MoveResult:
    """
    Play at (x, y) for the player to move.

    Args:
        state: The game to move in
        x: Column (0-based)
        y: Row (0-based)

    Returns:
        MoveResult; on success its player is the one now to move
    """
    return state.apply_move(x, y)


def legal_moves(state: Board, player: Optional[Player] = None) -> Set[Coordinate]:
    """Cells where player (default: the player to move) may play."""
    return state.legal_moves(player)


def is_finished(state: Board) -> bool:
    return state.is_finished()


def score(state: Board) -> Tuple[int, int]:
    """Piece counts as (first, second)."""
    return state.score()
