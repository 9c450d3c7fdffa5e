"""Core enumerations for the wall-placement board game domain."""

from __future__ import annotations

from enum import IntEnum


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    def __str__(self) -> str:
        return self.name.lower()


class Axis(IntEnum):
    """Orientation of a placed wall."""

    HORIZONTAL = 0
    VERTICAL = 1

    @property
    def other(self) -> Axis:
        return Axis(1 - self.value)

    def __str__(self) -> str:
        return self.name.lower()


class Direction(IntEnum):
    """Unit step on the pawn grid.  ``UP`` decreases the row index."""

    LEFT = 0
    RIGHT = 1
    UP = 2
    DOWN = 3

    @property
    def dx(self) -> int:
        return _DELTAS[self][0]

    @property
    def dy(self) -> int:
        return _DELTAS[self][1]

    def offset(self, square: tuple[int, int]) -> tuple[int, int]:
        """Square one step away from *square* (may fall off the board)."""
        dx, dy = _DELTAS[self]
        return (square[0] + dx, square[1] + dy)

    @property
    def is_horizontal(self) -> bool:
        return self in (Direction.LEFT, Direction.RIGHT)

    def are_parallel(self, other: Direction) -> bool:
        """Whether both directions travel along the same line."""
        return self.is_horizontal == other.is_horizontal

    @property
    def perpendiculars(self) -> tuple[Direction, Direction]:
        if self.is_horizontal:
            return (Direction.DOWN, Direction.UP)
        return (Direction.LEFT, Direction.RIGHT)

    @property
    def opposite(self) -> Direction:
        return _OPPOSITES[self]


_DELTAS: dict[Direction, tuple[int, int]] = {
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
}

_OPPOSITES: dict[Direction, Direction] = {
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
}


class WallLegality(IntEnum):
    """Per-cell memo of which wall axes may still be placed there."""

    ANY = 0
    HORIZONTAL_ONLY = 1
    VERTICAL_ONLY = 2
    NONE = 3

    def allows(self, axis: Axis) -> bool:
        if self == WallLegality.ANY:
            return True
        if self == WallLegality.HORIZONTAL_ONLY:
            return axis == Axis.HORIZONTAL
        if self == WallLegality.VERTICAL_ONLY:
            return axis == Axis.VERTICAL
        return False

    def restrict(self, axis: Axis) -> WallLegality:
        """Exclude *axis*; only its perpendicular can survive."""
        other = axis.other
        if self.allows(other):
            return WallLegality.only(other)
        return WallLegality.NONE

    @staticmethod
    def only(axis: Axis) -> WallLegality:
        if axis == Axis.HORIZONTAL:
            return WallLegality.HORIZONTAL_ONLY
        return WallLegality.VERTICAL_ONLY


class PawnMoveFail(IntEnum):
    """Why a pawn move could not be resolved."""

    PATH_OBSTRUCTED = 1
    NO_SECONDARY = 2
    INVALID_SECONDARY = 3


class WallMoveFail(IntEnum):
    """Why a wall placement was rejected."""

    NO_WALLS_REMAINING = 1
    COLLIDES = 2
    NO_PATH_REMAINING = 3


class MoveParseFail(IntEnum):
    """Why a move string could not be parsed."""

    UNRECOGNIZED_CHAR = 1
    UNEXPECTED_END_OF_STRING = 2


class GameResult(IntEnum):
    """Outcome of a game."""

    IN_PROGRESS = 0
    WHITE_WINS = 1
    BLACK_WINS = 2
