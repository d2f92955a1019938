"""Board coordinates and neighbour generation."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List


@dataclass(frozen=True)
class Location:
    """Zero-based ``(col, row)`` coordinate of an intersection.

    Row 0 is the bottom line of the board.  Locations know nothing about the
    board they are used on: :meth:`neighbours` suppresses candidates below
    zero but never clamps at the far edge, the board discards those itself.
    """

    col: int
    row: int

    def __post_init__(self) -> None:
        if self.col < 0 or self.row < 0:
            raise ValueError(f"negative coordinate: ({self.col}, {self.row})")

    def neighbours(self) -> List["Location"]:
        """Return the neighbour candidates in left, right, up, down order."""
        col, row = self.col, self.row
        result = []
        if col > 0:
            result.append(Location(col - 1, row))
        result.append(Location(col + 1, row))
        if row > 0:
            result.append(Location(col, row - 1))
        result.append(Location(col, row + 1))
        return result

    def __str__(self) -> str:
        return f"({self.col}, {self.row})"


def all_locations(size: int) -> Iterator[Location]:
    """Yield every location of a ``size`` x ``size`` board.

    Locations are produced column by column, rows ascending within a column.
    """
    for col in range(size):
        for row in range(size):
            yield Location(col, row)


__all__ = ["Location", "all_locations"]
