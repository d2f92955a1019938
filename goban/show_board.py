"""Utility functions to render a Go board in a human readable form."""
from __future__ import annotations

from .board import Board
from .coords import column_label
from .location import Location
from .stone import Stone

SYMBOLS = {None: '.', Stone.BLACK: 'X', Stone.WHITE: 'O'}


def board_to_string(board: Board) -> str:
    """Return a labelled diagram of ``board`` with the highest row on top."""
    size = board.size
    lines = []
    header = '   ' + ' '.join(column_label(col) for col in range(size))
    lines.append(header)
    for row in reversed(range(size)):
        cells = [SYMBOLS[board.get(Location(col, row))] for col in range(size)]
        lines.append(f"{row+1:2d} " + ' '.join(cells))
    return '\n'.join(lines)


def render_board(board: Board) -> None:
    """Print the board to stdout."""
    print(board_to_string(board))
