"""Human readable coordinate labels such as ``D4``.

Columns are lettered from the left skipping ``I`` and rows are numbered from
1 at the bottom, the convention used by GTP and most Go software.  The engine
itself works with zero-based :class:`~goban.location.Location` values; these
helpers only translate at the display/input boundary.
"""
from __future__ import annotations

from typing import Optional

from sgfmill import common

from .location import Location

MAX_LABELLED_SIZE = len(common.column_letters)


def column_label(col: int) -> str:
    """Return the letter used for column ``col``."""
    if not 0 <= col < MAX_LABELLED_SIZE:
        raise ValueError(f"column {col} has no label")
    return common.column_letters[col]


def format_location(loc: Optional[Location]) -> str:
    """Return the label of ``loc``; ``None`` is formatted as ``pass``."""
    if loc is None:
        return common.format_vertex(None)
    return common.format_vertex((loc.row, loc.col))


def parse_location(label: str, size: int) -> Optional[Location]:
    """Parse a label like ``D4`` for a ``size`` board.

    Returns ``None`` for ``pass``.  Raises :class:`ValueError` if the label is
    malformed or lies off the board.
    """
    vertex = common.move_from_vertex(label.strip(), size)
    if vertex is None:
        return None
    row, col = vertex
    return Location(col, row)


__all__ = ["MAX_LABELLED_SIZE", "column_label", "format_location", "parse_location"]
