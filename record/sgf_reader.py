"""Turn SGF game records into board events using ``sgfmill``.

Only the main line of the game tree is read.  Each node contributes setup
events (``AB``/``AW``/``AE``) followed by its move (``B``/``W``), in that
order, so the events can be applied to a :class:`goban.board.Board` one after
the other.
"""
from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from sgfmill import sgf

from goban.location import Location
from goban.stone import Stone
from record.properties import PropertyType, describe

logger = logging.getLogger(__name__)


class EventKind(enum.Enum):
    SETUP = "setup"  # place a stone, no capture checking
    CLEAR = "clear"  # make a point empty
    MOVE = "move"  # play a stone with capture resolution


@dataclass(frozen=True)
class GameEvent:
    """A single change to apply to the board."""

    kind: EventKind
    colour: Optional[Stone]
    location: Optional[Location]
    node_number: int

    @property
    def is_pass(self) -> bool:
        return self.kind is EventKind.MOVE and self.location is None


@dataclass
class GameRecord:
    """Board size, game information and the ordered events of a game."""

    size: int
    info: Dict[str, Any] = field(default_factory=dict)
    events: List[GameEvent] = field(default_factory=list)
    properties: List[str] = field(default_factory=list)

    @property
    def moves(self) -> List[GameEvent]:
        return [e for e in self.events if e.kind is EventKind.MOVE]


# ---------------------------------------------------------------------------
# Utility helpers
# ---------------------------------------------------------------------------

def _to_location(point) -> Location:
    """Convert an ``sgfmill`` ``(row, col)`` point to a :class:`Location`."""
    row, col = point
    return Location(col, row)


def _game_info(root: sgf.Tree_node) -> Dict[str, Any]:
    """Return the game-info properties of ``root`` with interpreted values."""
    info: Dict[str, Any] = {}
    for ident in root.properties():
        meta = describe(ident)
        if meta is None or meta.type is not PropertyType.GAME_INFO:
            continue
        try:
            info[ident] = root.get(ident)
        except ValueError as exc:
            logger.warning("Bad value for %s (%s): %s", ident, meta.description, exc)
            info[ident] = root.get_raw(ident).decode("utf-8", "replace")
    return info


def _node_events(node: sgf.Tree_node, number: int) -> List[GameEvent]:
    """Return the setup and move events of a single node."""
    events: List[GameEvent] = []
    try:
        black, white, empty = node.get_setup_stones()
    except ValueError as exc:
        logger.warning("Node %d: ignoring malformed setup stones: %s", number, exc)
        black, white, empty = set(), set(), set()

    for points, colour in ((black, Stone.BLACK), (white, Stone.WHITE)):
        for point in sorted(points):
            events.append(GameEvent(EventKind.SETUP, colour, _to_location(point), number))
    for point in sorted(empty):
        events.append(GameEvent(EventKind.CLEAR, None, _to_location(point), number))

    try:
        colour, move = node.get_move()
    except ValueError as exc:
        logger.warning("Node %d: ignoring malformed move: %s", number, exc)
        return events
    if colour is not None:
        location = _to_location(move) if move is not None else None
        events.append(GameEvent(EventKind.MOVE, Stone(colour), location, number))
    return events


# ---------------------------------------------------------------------------
# Core SGF reading logic
# ---------------------------------------------------------------------------

def record_from_game(game: sgf.Sgf_game) -> GameRecord:
    """Build a :class:`GameRecord` from a parsed ``sgfmill`` game."""
    root = game.get_root()
    record = GameRecord(size=game.get_size(), info=_game_info(root))

    seen: Dict[str, None] = {}
    for number, node in enumerate(game.get_main_sequence()):
        for ident in node.properties():
            seen.setdefault(ident, None)
        record.events.extend(_node_events(node, number))
    record.properties = list(seen)

    logger.debug(
        "Read %dx%d game with %d events", record.size, record.size, len(record.events)
    )
    return record


def parse_sgf_bytes(data: bytes) -> GameRecord:
    """Parse SGF ``data``; raises :class:`ValueError` if it is not valid SGF."""
    return record_from_game(sgf.Sgf_game.from_bytes(data))


def parse_sgf_string(text: str) -> GameRecord:
    """Parse SGF ``text``; raises :class:`ValueError` if it is not valid SGF."""
    # Sgf_game.from_string would add a CA property to the root.
    return parse_sgf_bytes(text.encode("utf-8"))


def read_sgf(path: str) -> GameRecord:
    """Read and parse the SGF file at ``path``."""
    with open(path, "rb") as f:
        sgf_bytes = f.read()
    return parse_sgf_bytes(sgf_bytes)


__all__ = [
    "EventKind",
    "GameEvent",
    "GameRecord",
    "parse_sgf_bytes",
    "parse_sgf_string",
    "read_sgf",
    "record_from_game",
]
