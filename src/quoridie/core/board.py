"""Board - pawns, walls and the wall-legality cache on a 9x9 grid."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from contextlib import contextmanager

from quoridie.core.enums import Axis, Color, Direction, WallLegality
from quoridie.core.move import LegalMove, _PawnRelocation, _WallPlacement
from quoridie.core.types import (
    BOARD_SIZE,
    WALL_GRID_SIZE,
    WALLS_PER_PLAYER,
    Cell,
    Square,
    is_valid_cell,
    is_valid_square,
    start_square,
)

_SQUARE_COUNT = BOARD_SIZE * BOARD_SIZE
_CELL_COUNT = WALL_GRID_SIZE * WALL_GRID_SIZE


def _sq_index(square: Square) -> int:
    return square[1] * BOARD_SIZE + square[0]


def _cell_index(cell: Cell) -> int:
    return cell[1] * WALL_GRID_SIZE + cell[0]


def _check_square(square: Square) -> None:
    if not is_valid_square(square):
        raise ValueError(f"Square out of range: {square!r}")


def _check_cell(cell: Cell) -> None:
    if not is_valid_cell(cell):
        raise ValueError(f"Wall cell out of range: {cell!r}")


def _collinear_neighbours(axis: Axis, cell: Cell) -> Iterator[Cell]:
    """Cells directly before and after *cell* along a wall of *axis*."""
    x, y = cell
    if axis == Axis.HORIZONTAL:
        candidates = ((x - 1, y), (x + 1, y))
    else:
        candidates = ((x, y - 1), (x, y + 1))
    for neighbour in candidates:
        if is_valid_cell(neighbour):
            yield neighbour


class Board:
    """Mutable game board: the single aggregate the rules engine works on.

    Besides the occupancy and wall grids the board keeps a per-cell
    :class:`WallLegality` cache.  Committing a wall narrows the cache
    incrementally; rolling one back recomputes the affected cells from
    the wall grid.
    """

    __slots__ = (
        "_squares",
        "_walls",
        "_legality",
        "_pawns",
        "_walls_left",
    )

    def __init__(self, walls_per_player: int = WALLS_PER_PLAYER) -> None:
        if walls_per_player < 0:
            raise ValueError("walls_per_player must be >= 0")
        self._squares: list[Color | None] = [None] * _SQUARE_COUNT
        self._walls: list[Axis | None] = [None] * _CELL_COUNT
        self._legality: list[WallLegality] = [WallLegality.ANY] * _CELL_COUNT
        # [color] -> pawn square / walls in hand.
        self._pawns: list[Square] = [start_square(Color.WHITE), start_square(Color.BLACK)]
        self._walls_left: list[int] = [walls_per_player, walls_per_player]
        for color in Color:
            self._squares[_sq_index(self._pawns[color])] = color

    # -- Factory ------------------------------------------------------------

    @classmethod
    def custom(
        cls,
        white: Square,
        black: Square,
        walls: Mapping[Cell, Axis] | None = None,
        white_walls_left: int = WALLS_PER_PLAYER,
        black_walls_left: int = WALLS_PER_PLAYER,
    ) -> Board:
        """Build an arbitrary layout, e.g. for analysis or tests.

        Walls are checked against each other but not against the
        reachability rule, so a position reached by play is not implied.
        """
        if not (is_valid_square(white) and is_valid_square(black)):
            raise ValueError("Pawn square out of range")
        if white == black:
            raise ValueError("Pawns cannot share a square")
        if white_walls_left < 0 or black_walls_left < 0:
            raise ValueError("Wall counters cannot be negative")

        b = cls()
        b._squares = [None] * _SQUARE_COUNT
        b._pawns = [white, black]
        b._squares[_sq_index(white)] = Color.WHITE
        b._squares[_sq_index(black)] = Color.BLACK
        b._walls_left = [white_walls_left, black_walls_left]
        for cell, axis in (walls or {}).items():
            if not is_valid_cell(cell):
                raise ValueError(f"Wall cell out of range: {cell!r}")
            if not b.legality_at(cell).allows(axis):
                raise ValueError(f"Wall at {cell!r} collides with another wall")
            b._place_wall(axis, cell)
        return b

    # -- Element access -----------------------------------------------------

    def __getitem__(self, square: Square) -> Color | None:
        _check_square(square)
        return self._squares[_sq_index(square)]

    def is_empty(self, square: Square) -> bool:
        _check_square(square)
        return self._squares[_sq_index(square)] is None

    def wall_at(self, cell: Cell) -> Axis | None:
        _check_cell(cell)
        return self._walls[_cell_index(cell)]

    def legality_at(self, cell: Cell) -> WallLegality:
        _check_cell(cell)
        return self._legality[_cell_index(cell)]

    def pawn_square(self, color: Color) -> Square:
        return self._pawns[color]

    def walls_left(self, color: Color) -> int:
        return self._walls_left[color]

    def placed_walls(self) -> dict[Cell, Axis]:
        """All walls on the board keyed by cell."""
        walls: dict[Cell, Axis] = {}
        for idx, axis in enumerate(self._walls):
            if axis is not None:
                walls[(idx % WALL_GRID_SIZE, idx // WALL_GRID_SIZE)] = axis
        return walls

    # -- Read-only snapshots for renderers ----------------------------------

    def occupancy_rows(self) -> tuple[tuple[Color | None, ...], ...]:
        return tuple(
            tuple(self._squares[y * BOARD_SIZE : (y + 1) * BOARD_SIZE])
            for y in range(BOARD_SIZE)
        )

    def wall_rows(self) -> tuple[tuple[Axis | None, ...], ...]:
        return tuple(
            tuple(self._walls[y * WALL_GRID_SIZE : (y + 1) * WALL_GRID_SIZE])
            for y in range(WALL_GRID_SIZE)
        )

    # -- Obstruction --------------------------------------------------------

    def is_obstructed(self, square: Square, direction: Direction) -> bool:
        """Whether stepping from *square* in *direction* leaves the board or hits a wall."""
        _check_square(square)
        x, y = square
        tx, ty = direction.offset(square)
        if not (0 <= tx < BOARD_SIZE and 0 <= ty < BOARD_SIZE):
            return True

        if direction.is_horizontal:
            # Crossing the line between columns c and c + 1.
            c = min(x, tx)
            return self._has_wall(c, y, Axis.VERTICAL) or self._has_wall(
                c, y - 1, Axis.VERTICAL
            )
        r = min(y, ty)
        return self._has_wall(x, r, Axis.HORIZONTAL) or self._has_wall(
            x - 1, r, Axis.HORIZONTAL
        )

    def _has_wall(self, x: int, y: int, axis: Axis) -> bool:
        if not (0 <= x < WALL_GRID_SIZE and 0 <= y < WALL_GRID_SIZE):
            return False
        return self._walls[y * WALL_GRID_SIZE + x] == axis

    # -- Commit / rollback --------------------------------------------------

    def commit(self, move: LegalMove, color: Color) -> None:
        """Apply a move validated against the current state."""
        if isinstance(move, _PawnRelocation):
            self._relocate_pawn(color, move.origin, move.destination)
        elif isinstance(move, _WallPlacement):
            if self._walls_left[color] == 0:
                raise ValueError(f"{color.name} has no walls left")
            self._place_wall(move.axis, move.cell)
            self._walls_left[color] -= 1
        else:
            raise TypeError(f"Not a legal move: {move!r}")

    def rollback(self, move: LegalMove, color: Color) -> None:
        """Exactly undo the last :meth:`commit` of *move* by *color*."""
        if isinstance(move, _PawnRelocation):
            self._relocate_pawn(color, move.destination, move.origin)
        elif isinstance(move, _WallPlacement):
            self._remove_wall(move.axis, move.cell)
            self._walls_left[color] += 1
        else:
            raise TypeError(f"Not a legal move: {move!r}")

    def _relocate_pawn(self, color: Color, origin: Square, destination: Square) -> None:
        if self._pawns[color] != origin or self[origin] != color:
            raise ValueError(f"No {color.name} pawn on {origin}")
        if not self.is_empty(destination):
            raise ValueError(f"Square {destination} is occupied")
        self._squares[_sq_index(origin)] = None
        self._squares[_sq_index(destination)] = color
        self._pawns[color] = destination

    # -- Wall grid + legality cache -----------------------------------------

    def _place_wall(self, axis: Axis, cell: Cell) -> None:
        idx = _cell_index(cell)
        if self._walls[idx] is not None:
            raise ValueError(f"Wall cell {cell} is already taken")
        self._walls[idx] = axis
        self._legality[idx] = WallLegality.NONE
        for neighbour in _collinear_neighbours(axis, cell):
            n_idx = _cell_index(neighbour)
            self._legality[n_idx] = self._legality[n_idx].restrict(axis)

    def _remove_wall(self, axis: Axis, cell: Cell) -> None:
        idx = _cell_index(cell)
        if self._walls[idx] != axis:
            raise ValueError(f"No {axis.name} wall on cell {cell}")
        self._walls[idx] = None
        # The forward update is lossy, so rebuild from the wall grid.
        x, y = cell
        for affected in (cell, (x - 1, y), (x + 1, y), (x, y - 1), (x, y + 1)):
            if is_valid_cell(affected):
                self._legality[_cell_index(affected)] = self._compute_legality(affected)

    def _compute_legality(self, cell: Cell) -> WallLegality:
        """Legality of *cell* derived from the wall grid alone."""
        if self.wall_at(cell) is not None:
            return WallLegality.NONE
        x, y = cell
        legality = WallLegality.ANY
        for axis, neighbours in (
            (Axis.HORIZONTAL, ((x - 1, y), (x + 1, y))),
            (Axis.VERTICAL, ((x, y - 1), (x, y + 1))),
        ):
            for neighbour in neighbours:
                if is_valid_cell(neighbour) and self.wall_at(neighbour) == axis:
                    legality = legality.restrict(axis)
        return legality

    @contextmanager
    def tentative_wall(self, axis: Axis, cell: Cell) -> Iterator[None]:
        """Temporarily drop a wall into the grid; always removed on exit.

        Only the wall grid is touched, so the legality cache and counters
        stay as they were.
        """
        _check_cell(cell)
        idx = _cell_index(cell)
        if self._walls[idx] is not None:
            raise ValueError(f"Wall cell {cell} is already taken")
        self._walls[idx] = axis
        try:
            yield
        finally:
            self._walls[idx] = None

    # -- Copying ------------------------------------------------------------

    def copy(self) -> Board:
        b = Board.__new__(Board)
        b._squares = self._squares.copy()
        b._walls = self._walls.copy()
        b._legality = self._legality.copy()
        b._pawns = self._pawns.copy()
        b._walls_left = self._walls_left.copy()
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return (
            self._squares == other._squares
            and self._walls == other._walls
            and self._legality == other._legality
            and self._pawns == other._pawns
            and self._walls_left == other._walls_left
        )

    def __repr__(self) -> str:
        rows: list[str] = []
        for y in range(BOARD_SIZE):
            row = []
            for x in range(BOARD_SIZE):
                color = self[(x, y)]
                if color is None:
                    row.append(".")
                else:
                    row.append("W" if color == Color.WHITE else "B")
            rows.append(f"{y + 1} {' '.join(row)}")
        rows.append("  a b c d e f g h i")
        rows.append(
            f"walls: white={self._walls_left[Color.WHITE]} "
            f"black={self._walls_left[Color.BLACK]} placed={len(self.placed_walls())}"
        )
        return "\n".join(rows)
