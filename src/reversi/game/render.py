"""
Text rendering of a Reversi board.
"""
from typing import Optional, Tuple

from .board import SIZE, Board, Player

DEFAULT_GLYPHS = ('X', 'O')
CELL_WIDTH = 5


def render(board: Board, glyphs: Optional[Tuple[str, str]] = None, show_hints: bool = True) -> str:
    """
    Draw the board as text, one line per y row.

    Occupied cells show the owner's glyph. Empty cells show their 1-based
    "x,y" coordinate so the player knows what to type, or stay blank when
    show_hints is False.
    """
    first_glyph, second_glyph = glyphs or DEFAULT_GLYPHS
    symbols = {Player.FIRST: first_glyph, Player.SECOND: second_glyph}

    border = '+' + '+'.join(['-' * CELL_WIDTH] * SIZE) + '+'
    lines = [border]
    for y in range(SIZE):
        cells = []
        for x in range(SIZE):
            owner = board.position(x, y)
            if owner is not None:
                text = symbols[owner]
            elif show_hints:
                text = f"{x + 1},{y + 1}"
            else:
                text = ''
            cells.append(text.center(CELL_WIDTH))
        lines.append('|' + '|'.join(cells) + '|')
        lines.append(border)
    return '\n'.join(lines)
