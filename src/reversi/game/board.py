"""
Board module for Reversi.
Handles the game board state, move validation and piece flipping.
Cells are stored in a numpy array indexed as [x, y].
"""
import logging
from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Iterable, List, Optional, Set, Tuple

import numpy as np

logger = logging.getLogger(__name__)

Coordinate = Tuple[int, int]

SIZE = 8
EMPTY = 0

# N, S, E, W, NE, NW, SE, SW as (dx, dy)
DIRECTIONS: Tuple[Coordinate, ...] = (
    (0, -1), (0, 1), (1, 0), (-1, 0),
    (1, -1), (-1, -1), (1, 1), (-1, 1),
)


class Player(IntEnum):
    """The two sides. Values double as the cell codes in the grid."""
    FIRST = 1
    SECOND = 2

    @property
    def opponent(self) -> 'Player':
        return Player.SECOND if self is Player.FIRST else Player.FIRST


def opponent(player: Player) -> Player:
    """Return the other player."""
    return Player(player).opponent


class MoveError(Enum):
    """Reasons a move can be rejected."""
    NON_EMPTY_POSITION = "non-empty position"
    INVALID_POSITION = "invalid position"


@dataclass(frozen=True)
class MoveResult:
    """
    Outcome of checking or applying a move.

    A failed result carries an error and is falsy. A successful check carries the
    cells to flip; a successful apply also carries the player now to move.
    """
    error: Optional[MoveError] = None
    flips: Tuple[Coordinate, ...] = field(default_factory=tuple)
    player: Optional[Player] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def __bool__(self) -> bool:
        return self.ok


def in_bounds(x: int, y: int) -> bool:
    """Check that (x, y) lies on the board."""
    return 0 <= x < SIZE and 0 <= y < SIZE


class Board:
    """
    Represents the Reversi game state: the 8x8 grid plus the player to move.
    """

    def __init__(self, size: int = 8):
        """Initialize a new board with the four centre pieces."""
        if size != 8:
            raise ValueError("Only 8x8 board is supported")

        self.size = size
        self._board = np.zeros((size, size), dtype=np.int8)
        self._board[3, 4] = Player.FIRST
        self._board[4, 4] = Player.SECOND
        self._board[3, 3] = Player.SECOND
        self._board[4, 3] = Player.FIRST
        self.current_player = Player.FIRST

    @classmethod
    def from_rows(cls, rows: Iterable[str], current_player: Player = Player.FIRST) -> 'Board':
        """
        Build a board from 8 strings, one per y row, read left to right as x.
        'X' marks a FIRST piece, 'O' a SECOND piece, anything else an empty cell.
        """
        rows = list(rows)
        if len(rows) != SIZE or any(len(row) != SIZE for row in rows):
            raise ValueError("Expected 8 rows of 8 cells")

        board = cls()
        codes = {'X': Player.FIRST, 'O': Player.SECOND}
        for y, row in enumerate(rows):
            for x, char in enumerate(row):
                board._board[x, y] = codes.get(char, EMPTY)
        board.current_player = Player(current_player)
        return board

    def copy(self) -> 'Board':
        """Create a deep copy of the board."""
        new_board = Board(self.size)
        new_board._board = self._board.copy()
        new_board.current_player = self.current_player
        return new_board

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return (self.current_player == other.current_player
                and np.array_equal(self._board, other._board))

    def position(self, x: int, y: int) -> Optional[Player]:
        """Return the owner of (x, y), or None if it is empty."""
        if not in_bounds(x, y):
            raise IndexError(f"({x}, {y}) is off the board")
        code = self._board[x, y]
        return Player(int(code)) if code != EMPTY else None

    def _walk(self, x: int, y: int, dx: int, dy: int, player: Player) -> List[Coordinate]:
        """Collect the opponent run bracketed from (x, y) along (dx, dy), if any."""
        run = []
        other = player.opponent
        cx, cy = x + dx, y + dy
        while in_bounds(cx, cy):
            code = self._board[cx, cy]
            if code == other:
                run.append((cx, cy))
            elif code == player:
                return run
            else:
                break
            cx += dx
            cy += dy
        return []

    def is_legal_move(self, x: int, y: int, player: Optional[Player] = None) -> MoveResult:
        """
        Check whether player may play at (x, y).

        Args:
            x: Column (0-based)
            y: Row (0-based)
            player: The player to check for. If None, uses current_player.

        Returns:
            MoveResult with the cells that would be flipped, or the reason the
            move is rejected. The board is never modified.
        """
        if player is None:
            player = self.current_player
        player = Player(player)

        if not in_bounds(x, y):
            return MoveResult(error=MoveError.INVALID_POSITION)
        if self._board[x, y] != EMPTY:
            return MoveResult(error=MoveError.NON_EMPTY_POSITION)

        flips: List[Coordinate] = []
        for dx, dy in DIRECTIONS:
            flips.extend(self._walk(x, y, dx, dy, player))

        if not flips:
            return MoveResult(error=MoveError.INVALID_POSITION)
        return MoveResult(flips=tuple(flips))

    def apply_move(self, x: int, y: int) -> MoveResult:
        """
        Play at (x, y) for the current player.

        On success the target and all bracketed cells go to the mover and the turn
        passes to the opponent; the result's player is the new current player.
        A rejected move leaves the board untouched.
        """
        mover = self.current_player
        result = self.is_legal_move(x, y, mover)
        if not result:
            logger.debug("Rejected move (%s, %s) for %s: %s", x, y, mover.name, result.error.value)
            return result

        self._board[x, y] = mover
        for fx, fy in result.flips:
            self._board[fx, fy] = mover
        self.current_player = mover.opponent

        logger.debug("%s played (%s, %s), flipped %d", mover.name, x, y, len(result.flips))
        return MoveResult(flips=result.flips, player=self.current_player)

    def legal_moves(self, player: Optional[Player] = None) -> Set[Coordinate]:
        """Return every cell where player has a legal move."""
        if player is None:
            player = self.current_player
        return {
            (x, y)
            for x in range(SIZE)
            for y in range(SIZE)
            if self.is_legal_move(x, y, player)
        }

    def is_finished(self) -> bool:
        """The game is over once neither player has a legal move."""
        return not self.legal_moves(Player.FIRST) and not self.legal_moves(Player.SECOND)

    def score(self) -> Tuple[int, int]:
        """
        Get the current piece counts.

        Returns:
            Tuple of (first_count, second_count)
        """
        first = int(np.count_nonzero(self._board == Player.FIRST))
        second = int(np.count_nonzero(self._board == Player.SECOND))
        return (first, second)

    def winner(self) -> Optional[Player]:
        """Return the player with more pieces, or None for a draw."""
        first, second = self.score()
        if first > second:
            return Player.FIRST
        if second > first:
            return Player.SECOND
        return None

    def get_board_state(self) -> np.ndarray:
        """
        Get the current board state as a numpy array.

        Returns:
            2D numpy array indexed [x, y] holding 0, 1 or 2
        """
        return self._board.copy()

    def __str__(self) -> str:
        from .render import render
        return render(self)
