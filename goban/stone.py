"""Stone colours used by the board engine."""
from __future__ import annotations

import enum


class Stone(enum.Enum):
    """Colour of a stone on the board.

    The values match the colour letters produced by the SGF parser so a parser
    colour converts directly with ``Stone("b")``.
    """

    BLACK = "b"
    WHITE = "w"

    @property
    def opposite(self) -> "Stone":
        """Return the other colour."""
        return Stone.WHITE if self is Stone.BLACK else Stone.BLACK

    def __invert__(self) -> "Stone":
        return self.opposite

    @property
    def symbol(self) -> str:
        """Symbol used for this colour in the fixture text form."""
        return "#" if self is Stone.BLACK else "O"

    def __str__(self) -> str:
        return self.name.capitalize()


__all__ = ["Stone"]
