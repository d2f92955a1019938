"""Entry point for the goban command line interface.

The tool reads an SGF game record, replays its main line on a board and
prints the result.  It supports four modes:

``show``        - print the final (or ``--moves N``) position.
``info``        - print board size and game information as JSON.
``groups``      - list every group on the board with its liberty count.
``properties``  - list the SGF properties used on the main line.
"""

from __future__ import annotations

import argparse
import json
import logging
from typing import Any, Dict, List, Optional

import yaml

from goban.board import Board
from goban.coords import MAX_LABELLED_SIZE, format_location
from goban.show_board import board_to_string
from goban.stone import Stone
from record.properties import describe
from record.replay import ReplayResult, replay
from record.sgf_reader import GameRecord, read_sgf


def _load_config(path: str | None) -> Dict[str, Any]:
    """Load optional YAML/JSON configuration file."""

    if not path:
        return {}
    try:
        with open(path, "r", encoding="utf-8") as fh:
            if path.endswith(".json"):
                data = json.load(fh)
            else:
                data = yaml.safe_load(fh) or {}
    except FileNotFoundError:
        logging.warning("Config file %s not found", path)
        return {}
    except (ValueError, yaml.YAMLError) as exc:
        logging.warning("Failed to load config %s: %s", path, exc)
        return {}
    if not isinstance(data, dict):
        logging.warning("Ignoring config %s: expected a mapping", path)
        return {}
    return data


def _label(board: Board, loc) -> str:
    if board.size <= MAX_LABELLED_SIZE:
        return format_location(loc)
    return str(loc)


def _run_show(result: ReplayResult, raw: bool) -> List[str]:
    """Return the output lines for ``show`` mode."""
    board = result.board
    if raw or board.size > MAX_LABELLED_SIZE:
        lines = board.to_text().splitlines()
    else:
        lines = board_to_string(board).splitlines()
    lines.append(f"moves: {result.moves_played}")
    for event, label in result.rejected:
        lines.append(f"rejected: {event.colour} {label} (node {event.node_number})")
    return lines


def _run_groups(board: Board) -> List[str]:
    """Return one line per group: colour, members and liberty count."""
    lines = []
    for colour in (Stone.BLACK, Stone.WHITE):
        groups = sorted(
            board.groups(colour),
            key=lambda g: min((loc.col, loc.row) for loc in g),
        )
        for group in groups:
            members = sorted(group, key=lambda loc: (loc.col, loc.row))
            stones = " ".join(_label(board, loc) for loc in members)
            lines.append(f"{colour}: {stones} liberties={len(board.liberties(group))}")
    return lines


def _run_properties(record: GameRecord) -> List[str]:
    lines = []
    for ident in record.properties:
        meta = describe(ident)
        if meta is None:
            lines.append(f"{ident}: unknown property")
        else:
            lines.append(f"{ident}: {meta.description} ({meta.type.value})")
    return lines


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``goban-replay`` command line tool."""
    parser = argparse.ArgumentParser(description="Replay SGF game records on a Go board")
    parser.add_argument("--mode", choices=["show", "info", "groups", "properties"], required=True)
    parser.add_argument("--data", required=True, help="SGF file to read")
    parser.add_argument("--moves", type=int, help="Stop after this many moves")
    parser.add_argument("--raw", action="store_true", help="Print the plain text board form")
    parser.add_argument("--config", help="Optional configuration YAML/JSON")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")

    args = parser.parse_args(argv)

    config = _load_config(args.config)
    level = "DEBUG" if args.verbose else str(config.get("log_level", "INFO")).upper()
    logging.basicConfig(level=getattr(logging, level, logging.INFO), format="%(levelname)s: %(message)s")
    logging.debug("Loaded config: %s", config)

    moves = args.moves if args.moves is not None else config.get("moves")
    if moves is not None:
        try:
            moves = int(moves)
        except (TypeError, ValueError):
            parser.error(f"moves must be an integer, got {moves!r}")
    if moves is not None and moves < 0:
        parser.error("--moves must not be negative")
    raw = args.raw or bool(config.get("raw", False))

    try:
        record = read_sgf(args.data)
    except (OSError, ValueError) as exc:
        parser.error(f"cannot read {args.data}: {exc}")

    if args.mode == "info":
        print(json.dumps({"size": record.size, "info": record.info}, indent=2, default=str))
        return
    if args.mode == "properties":
        print("\n".join(_run_properties(record)))
        return

    result = replay(record, limit=moves)
    logging.info(
        "Replayed %d moves, %d rejected", result.moves_played, len(result.rejected)
    )
    if args.mode == "show":
        print("\n".join(_run_show(result, raw)))
    else:
        print("\n".join(_run_groups(result.board)))


if __name__ == "__main__":  # pragma: no cover - manual execution
    main()
