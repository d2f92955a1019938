"""Shared fixtures for engine component tests.

Common fixtures like make_board and SGF content are inherited from
tests/conftest.py.
"""
from __future__ import annotations

import pytest

from goban.board import Board


# ---------------------------------------------------------------------------
# Board Pattern Fixtures (specific to component tests)
# ---------------------------------------------------------------------------

@pytest.fixture
def board_with_capture_scenario() -> Board:
    """Return a 3x3 board where the white stone has one liberty left, at (2, 1)."""
    return Board.from_text(
        ". # .\n"
        "# O .\n"
        ". # .\n"
    )


@pytest.fixture
def board_with_suicide_point() -> Board:
    """Return a 3x3 board whose centre is an empty point enclosed by white."""
    return Board.from_text(
        ". O .\n"
        "O . O\n"
        ". O .\n"
    )


@pytest.fixture
def board_with_mixed_groups() -> Board:
    """Return a 4x4 board with two black groups and one white group."""
    return Board.from_text(
        "# # . .\n"
        "# O O .\n"
        ". # . .\n"
        ". . . .\n"
    )
