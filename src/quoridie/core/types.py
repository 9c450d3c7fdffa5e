"""Coordinate aliases, board constants and naming helpers.

Board layout: squares are ``(x, y)`` pairs, ``x`` the column (a-i) and
``y`` the row (1-9), both zero-based.  Row 0 is the top edge.  Walls live
on the coarser ``(x, y)`` cell grid (a-h, 1-8); cell ``(x, y)`` sits at
the corner shared by squares ``(x, y)``, ``(x + 1, y)``, ``(x, y + 1)``
and ``(x + 1, y + 1)``.
"""

from __future__ import annotations

from typing import TypeAlias

from quoridie.core.enums import Color

Square: TypeAlias = tuple[int, int]
Cell: TypeAlias = tuple[int, int]

BOARD_SIZE = 9
WALL_GRID_SIZE = BOARD_SIZE - 1
WALLS_PER_PLAYER = 10

_START_SQUARES: dict[Color, Square] = {
    Color.WHITE: (BOARD_SIZE // 2, BOARD_SIZE - 1),
    Color.BLACK: (BOARD_SIZE // 2, 0),
}
_GOAL_ROWS: dict[Color, int] = {
    Color.WHITE: 0,
    Color.BLACK: BOARD_SIZE - 1,
}

_FILES = "abcdefghi"


def start_square(color: Color) -> Square:
    """Square the pawn of *color* starts on."""
    return _START_SQUARES[color]


def goal_row(color: Color) -> int:
    """Row the pawn of *color* has to reach to win."""
    return _GOAL_ROWS[color]


def is_valid_square(square: Square) -> bool:
    x, y = square
    return 0 <= x < BOARD_SIZE and 0 <= y < BOARD_SIZE


def is_valid_cell(cell: Cell) -> bool:
    x, y = cell
    return 0 <= x < WALL_GRID_SIZE and 0 <= y < WALL_GRID_SIZE


def square_name(square: Square) -> str:
    """Human-readable name, e.g. (4, 8) -> 'e9'."""
    x, y = square
    return f"{_FILES[x]}{y + 1}"


def cell_name(cell: Cell) -> str:
    """Human-readable wall cell name, e.g. (0, 0) -> 'a1'."""
    x, y = cell
    return f"{_FILES[x]}{y + 1}"


def _parse_pair(name: str, limit: int, kind: str) -> tuple[int, int]:
    if len(name) != 2:
        raise ValueError(f"Invalid {kind} name: {name!r}")
    x = _FILES.find(name[0].lower())
    y = ord(name[1]) - ord("1")
    if not (0 <= x < limit and 0 <= y < limit):
        raise ValueError(f"Invalid {kind} name: {name!r}")
    return (x, y)


def parse_square(name: str) -> Square:
    """Parse square name, e.g. 'e9' -> (4, 8)."""
    return _parse_pair(name, BOARD_SIZE, "square")


def parse_cell(name: str) -> Cell:
    """Parse wall cell name, e.g. 'h8' -> (7, 7)."""
    return _parse_pair(name, WALL_GRID_SIZE, "cell")
