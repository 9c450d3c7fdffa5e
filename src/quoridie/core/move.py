"""Move value objects.

``MovePawn`` / ``PlaceWall`` are raw, unvalidated requests.  ``LegalMove``
is what validation hands back; only :class:`~quoridie.core.move_generator.MoveGenerator`
creates one, and only :meth:`Board.commit` / :meth:`Board.rollback`
consume it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

from quoridie.core.enums import Axis, Direction
from quoridie.core.types import Cell, Square, cell_name, is_valid_cell, square_name


@dataclass(frozen=True, slots=True)
class MovePawn:
    """Step the pawn in *direction*; *secondary* picks the side of a diagonal jump."""

    direction: Direction
    secondary: Direction | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.direction, Direction):
            raise ValueError(f"Invalid direction: {self.direction!r}")
        if self.secondary is not None and not isinstance(self.secondary, Direction):
            raise ValueError(f"Invalid secondary direction: {self.secondary!r}")


@dataclass(frozen=True, slots=True)
class PlaceWall:
    """Place a wall of *axis* on wall *cell*."""

    axis: Axis
    cell: Cell

    def __post_init__(self) -> None:
        if not isinstance(self.axis, Axis):
            raise ValueError(f"Invalid axis: {self.axis!r}")
        try:
            cell = tuple(self.cell)
        except TypeError:
            raise ValueError(f"Wall cell must be a pair of ints: {self.cell!r}") from None
        if len(cell) != 2 or not all(type(c) is int for c in cell):
            raise ValueError(f"Wall cell must be a pair of ints: {self.cell!r}")
        if not is_valid_cell(cell):
            raise ValueError(f"Wall cell out of range: {self.cell!r}")
        object.__setattr__(self, "cell", cell)


Move: TypeAlias = MovePawn | PlaceWall


class LegalMove:
    """Opaque validated move.  Never construct directly."""

    __slots__ = ()

    @property
    def is_pawn_move(self) -> bool:
        return isinstance(self, _PawnRelocation)

    @property
    def is_wall_move(self) -> bool:
        return isinstance(self, _WallPlacement)


@dataclass(frozen=True, slots=True)
class _PawnRelocation(LegalMove):
    origin: Square
    destination: Square

    def __str__(self) -> str:
        return f"{square_name(self.origin)}{square_name(self.destination)}"


@dataclass(frozen=True, slots=True)
class _WallPlacement(LegalMove):
    axis: Axis
    cell: Cell

    def __str__(self) -> str:
        prefix = "h" if self.axis == Axis.HORIZONTAL else "v"
        return f"{prefix}{cell_name(self.cell)}"
