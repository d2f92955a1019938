"""Replay the events of a game record on a board."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from goban.board import Board
from goban.coords import MAX_LABELLED_SIZE, format_location
from record.sgf_reader import EventKind, GameEvent, GameRecord

logger = logging.getLogger(__name__)


@dataclass
class ReplayResult:
    """Outcome of :func:`replay`."""

    board: Board
    moves_played: int = 0
    rejected: List[Tuple[GameEvent, str]] = field(default_factory=list)


def _label(event: GameEvent, size: int) -> str:
    if event.location is None or size <= MAX_LABELLED_SIZE:
        return format_location(event.location)
    return str(event.location)


def replay(
    record: GameRecord,
    limit: Optional[int] = None,
    board: Optional[Board] = None,
) -> ReplayResult:
    """Apply ``record``'s events to ``board`` (a new board by default).

    Parameters
    ----------
    record:
        Parsed game record.
    limit:
        Stop after this many moves (passes included).  ``None`` replays the
        whole main line.
    board:
        Board to play on.  Must have the record's size.
    """
    if board is None:
        board = Board(record.size)
    result = ReplayResult(board)

    for event in record.events:
        if event.kind is EventKind.MOVE:
            if limit is not None and result.moves_played >= limit:
                break
            result.moves_played += 1
            if event.location is None:
                logger.debug("Move %d: %s passes", result.moves_played, event.colour)
                continue
            if not board.play(event.location, event.colour):
                label = _label(event, board.size)
                logger.warning(
                    "Move %d (node %d): %s at %s rejected",
                    result.moves_played,
                    event.node_number,
                    event.colour,
                    label,
                )
                result.rejected.append((event, label))
        elif event.kind is EventKind.SETUP:
            if not board.valid_location(event.location):
                logger.warning("Node %d: setup point %s is off board", event.node_number, event.location)
                continue
            board.add(event.location, event.colour)
        else:
            board.remove(event.location)

    return result


__all__ = ["ReplayResult", "replay"]
