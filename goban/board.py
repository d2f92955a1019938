"""Go board: stone placement, liberties and capture resolution."""
from __future__ import annotations

import logging
from typing import Dict, Iterator, List, NamedTuple, Optional, Set, Tuple

from .group import Group, expand, partition
from .location import Location, all_locations
from .stone import Stone

logger = logging.getLogger(__name__)

DEFAULT_SIZE = 19

EMPTY_SYMBOL = "."

# Characters understood by ``Board.from_text``; anything else is ignored.
TEXT_SYMBOLS: Dict[str, Optional[Stone]] = {
    ".": None,
    "#": Stone.BLACK,
    "X": Stone.BLACK,
    "⚈": Stone.BLACK,
    "⚉": Stone.BLACK,
    "O": Stone.WHITE,
    "o": Stone.WHITE,
    "⚆": Stone.WHITE,
    "⚇": Stone.WHITE,
}


class Point(NamedTuple):
    """An intersection together with its current occupant."""

    location: Location
    stone: Optional[Stone]


class Board:
    """Square board holding the position as a map of location to colour.

    Empty points are simply absent from the map.  :meth:`play` applies the
    capture rules; :meth:`add` and :meth:`remove` edit the position directly
    and are meant for setting up positions before moves are replayed.
    """

    def __init__(self, size: int = DEFAULT_SIZE) -> None:
        """Create an empty ``size`` x ``size`` board."""
        if size <= 0:
            raise ValueError(f"board size must be positive, got {size}")
        self._size = size
        self._points: Dict[Location, Stone] = {}

    @property
    def size(self) -> int:
        return self._size

    def valid_location(self, loc: Location) -> bool:
        """Return ``True`` if ``loc`` lies on the board."""
        return loc.col < self._size and loc.row < self._size

    # ------------------------------------------------------------------
    # Direct access
    # ------------------------------------------------------------------
    def get(self, loc: Location) -> Optional[Stone]:
        """Return the stone at ``loc`` or ``None`` if it is empty or off board."""
        return self._points.get(loc)

    def point(self, loc: Location) -> Point:
        return Point(loc, self.get(loc))

    def add(self, loc: Location, stone: Stone) -> Optional[Stone]:
        """Place ``stone`` at ``loc`` without applying any capture rule.

        Returns the stone previously at ``loc``, if any.  ``loc`` must be on
        the board.
        """
        assert self.valid_location(loc), f"{loc} is off a {self._size}x{self._size} board"
        previous = self._points.get(loc)
        self._points[loc] = stone
        return previous

    def remove(self, loc: Location) -> Optional[Stone]:
        """Clear ``loc`` and return the stone that was there, if any."""
        return self._points.pop(loc, None)

    def stones(self) -> List[Tuple[Location, Stone]]:
        """Return a snapshot of every occupied point."""
        return list(self._points.items())

    def locations(self) -> Iterator[Location]:
        """Iterate over every location of the board, column by column."""
        return all_locations(self._size)

    def copy(self) -> "Board":
        other = Board(self._size)
        other._points = dict(self._points)
        return other

    # ------------------------------------------------------------------
    # Groups and liberties
    # ------------------------------------------------------------------
    def groups(self, colour: Stone) -> List[Group]:
        """Return all groups of ``colour`` in unspecified order."""
        return partition(self._points, colour)

    def group_at(self, loc: Location) -> Optional[Group]:
        """Return the group containing the stone at ``loc``, if there is one."""
        stone = self._points.get(loc)
        if stone is None:
            return None
        same = {other for other, s in self._points.items() if s is stone}
        return Group(stone, expand(loc, same))

    def liberties(self, group: Group) -> Set[Location]:
        """Return the empty on-board points bordering ``group``.

        ``group`` must have been derived from the current position.
        """
        return {
            loc
            for loc in group.neighbours()
            if self.valid_location(loc) and loc not in self._points
        }

    # ------------------------------------------------------------------
    # Moves
    # ------------------------------------------------------------------
    def play(self, loc: Location, stone: Stone) -> bool:
        """Play ``stone`` at ``loc`` and resolve captures.

        The move is refused (``False``, board untouched) when ``loc`` is off
        the board or already occupied.  Otherwise the stone is placed, every
        opposing group left without liberties is removed and then, if the
        group of the new stone has no liberties either, that group is removed.
        """
        if not self.valid_location(loc):
            logger.debug("Rejected %s at %s: off board", stone, loc)
            return False
        if loc in self._points:
            logger.debug("Rejected %s at %s: occupied", stone, loc)
            return False

        self._points[loc] = stone

        own: Optional[Group] = None
        opposing: List[Group] = []
        for group in partition(self._points):
            if group.colour is stone:
                if group.contains(loc):
                    own = group
            else:
                opposing.append(group)
        assert own is not None

        for group in opposing:
            if not self.liberties(group):
                logger.debug("%s at %s captures %d stone(s)", stone, loc, len(group))
                self._remove_group(group)

        if not self.liberties(own):
            logger.debug("%s at %s removes its own %d stone(s)", stone, loc, len(own))
            self._remove_group(own)

        return True

    def _remove_group(self, group: Group) -> None:
        for member in group:
            removed = self._points.pop(member)
            assert removed is group.colour

    # ------------------------------------------------------------------
    # Text form
    # ------------------------------------------------------------------
    def to_text(self) -> str:
        """Return the board as text, highest row first.

        Every point is written as its symbol followed by a space: ``.`` for
        empty, ``#`` for black and ``O`` for white.
        """
        lines = []
        for row in reversed(range(self._size)):
            cells = []
            for col in range(self._size):
                stone = self._points.get(Location(col, row))
                cells.append((stone.symbol if stone else EMPTY_SYMBOL) + " ")
            lines.append("".join(cells) + "\n")
        return "".join(lines)

    @classmethod
    def from_text(cls, text: str) -> "Board":
        """Build a board from its text form.

        Each line is a row, the first line being the highest row.  ``.`` is
        empty, ``#`` or ``X`` black, ``O`` or ``o`` white; other characters
        are ignored.  The board is square with a size of the longest row or
        the number of rows, whichever is larger, anchored at the upper left.
        """
        layout = [
            [TEXT_SYMBOLS[ch] for ch in line if ch in TEXT_SYMBOLS]
            for line in text.splitlines()
        ]
        if not layout:
            raise ValueError("board text has no rows")
        size = max(max(len(row) for row in layout), len(layout))

        board = cls(size)
        for rnum, row in enumerate(layout):
            for col, stone in enumerate(row):
                if stone is not None:
                    board.add(Location(col, size - 1 - rnum), stone)
        return board

    # ------------------------------------------------------------------
    # Python protocol helpers
    # ------------------------------------------------------------------
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._size == other._size and self._points == other._points

    def __str__(self) -> str:
        return self.to_text()

    def __repr__(self) -> str:
        return f"Board(size={self._size}, stones={len(self._points)})"


__all__ = ["Board", "Point", "DEFAULT_SIZE", "TEXT_SYMBOLS"]
