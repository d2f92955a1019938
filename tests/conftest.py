"""Root-level pytest configuration and shared fixtures.

This module provides:
- Automatic sys.path configuration for all tests
- Shared board and SGF fixtures available to all test modules
"""
from __future__ import annotations

import sys
from pathlib import Path
from typing import Callable, List, Tuple

import pytest

# ---------------------------------------------------------------------------
# Path Configuration (automatically applied to all tests)
# ---------------------------------------------------------------------------

# Add project root to sys.path so imports work from any test directory
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from goban.board import Board  # noqa: E402
from goban.location import Location  # noqa: E402
from goban.stone import Stone  # noqa: E402


# ---------------------------------------------------------------------------
# Board Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def make_board() -> Callable[[int, List[Tuple[int, int, Stone]]], Board]:
    """Factory fixture to create boards with stones at specified positions.

    Usage:
        board = make_board(5, [(2, 2, Stone.BLACK), (0, 0, Stone.WHITE)])

    Args:
        size: Board size (e.g., 5, 9, 19)
        stones: List of (col, row, colour) tuples placed without capture rules

    Returns:
        Board holding the requested stones
    """
    def _make_board(size: int, stones: List[Tuple[int, int, Stone]] = None) -> Board:
        board = Board(size)
        for col, row, colour in stones or []:
            board.add(Location(col, row), colour)
        return board
    return _make_board


@pytest.fixture
def empty_board_5x5() -> Board:
    """Return a 5x5 empty board."""
    return Board(5)


# ---------------------------------------------------------------------------
# SGF Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def simple_sgf_content() -> str:
    """Return a simple 9x9 SGF game string."""
    return "(;GM[1]FF[4]SZ[9]KM[7.5]RU[Chinese]PB[Alice]PW[Bob];B[ee];W[gc];B[cg])"


@pytest.fixture
def sgf_with_handicap() -> str:
    """Return an SGF with handicap stones."""
    return "(;GM[1]FF[4]SZ[9]HA[2]KM[0.5]AB[gc][cg];W[ee])"


@pytest.fixture
def capture_sgf_content() -> str:
    """Return a 5x5 game where White captures the black stone on A1.

    SGF rows count from the top, so ``ae`` is A1, ``be`` B1 and ``ad`` A2.
    """
    return "(;GM[1]FF[4]SZ[5];B[ae];W[be];B[ee];W[ad])"


@pytest.fixture
def sgf_file(tmp_path: Path) -> Callable[[str], str]:
    """Factory fixture writing SGF text to a temporary file and returning its path."""
    def _write(content: str, name: str = "game.sgf") -> str:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return str(path)
    return _write
