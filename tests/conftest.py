"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import pytest

from quoridie.core.board import Board
from quoridie.core.enums import Axis


@pytest.fixture
def board() -> Board:
    """Fresh board in the starting layout."""
    return Board()


@pytest.fixture
def facing_board() -> Board:
    """White on e6 facing Black on e5 with open space behind Black."""
    return Board.custom(white=(4, 5), black=(4, 4))


@pytest.fixture
def blocked_jump_board() -> Board:
    """Same facing pawns, but a horizontal wall sits right behind Black."""
    return Board.custom(
        white=(4, 5),
        black=(4, 4),
        walls={(4, 3): Axis.HORIZONTAL},
    )


@pytest.fixture
def cornered_board() -> Board:
    """White in the bottom-left corner with a wall above a9 and b9.

    One more vertical wall on cell b8 would close White in.
    """
    return Board.custom(
        white=(0, 8),
        black=(4, 0),
        walls={(0, 7): Axis.HORIZONTAL},
    )
