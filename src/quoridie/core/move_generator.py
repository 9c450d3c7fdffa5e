"""Move validation and legal-move generation."""

from __future__ import annotations

from typing import TYPE_CHECKING

from quoridie.core.enums import Axis, Color, Direction, PawnMoveFail, WallMoveFail
from quoridie.core.errors import IllegalMoveError
from quoridie.core.move import (
    LegalMove,
    Move,
    MovePawn,
    PlaceWall,
    _PawnRelocation,
    _WallPlacement,
)
from quoridie.core.rules import Rules
from quoridie.core.types import WALL_GRID_SIZE, Cell, Square, is_valid_cell

if TYPE_CHECKING:
    from quoridie.core.board import Board


_WALL_CELLS: tuple[Cell, ...] = tuple(
    (x, y) for y in range(WALL_GRID_SIZE) for x in range(WALL_GRID_SIZE)
)
_AXES: tuple[Axis, ...] = (Axis.HORIZONTAL, Axis.VERTICAL)


class MoveGenerator:
    """Validates moves and enumerates legal ones for a given :class:`Board`.

    Wall checks drop a tentative wall into the board and take it out
    again before returning, so the board is unchanged afterwards.
    """

    __slots__ = ("_board",)

    def __init__(self, board: Board) -> None:
        self._board = board

    # -- Public API ---------------------------------------------------------

    def validate(self, move: Move, color: Color) -> LegalMove:
        """Turn a raw move into a :class:`LegalMove` or raise :class:`IllegalMoveError`."""
        if isinstance(move, MovePawn):
            destination = self.resolve_destination(color, move.direction, move.secondary)
            return _PawnRelocation(self._board.pawn_square(color), destination)
        if isinstance(move, PlaceWall):
            self.validate_wall(color, move.axis, move.cell)
            return _WallPlacement(move.axis, move.cell)
        raise TypeError(f"Unsupported move type: {type(move).__name__}")

    def is_legal(self, move: Move, color: Color) -> bool:
        try:
            self.validate(move, color)
        except IllegalMoveError:
            return False
        return True

    def resolve_destination(
        self,
        color: Color,
        direction: Direction,
        secondary: Direction | None = None,
    ) -> Square:
        """Where the pawn of *color* lands when moving in *direction*."""
        result = self._resolve(color, direction, secondary)
        if isinstance(result, PawnMoveFail):
            raise IllegalMoveError(result)
        return result

    def validate_wall(self, color: Color, axis: Axis, cell: Cell) -> None:
        """Raise :class:`IllegalMoveError` unless *color* may place this wall."""
        if not is_valid_cell(cell):
            raise ValueError(f"Wall cell out of range: {cell!r}")
        failure = self._check_wall(color, axis, cell)
        if failure is not None:
            raise IllegalMoveError(failure)

    def generate_legal_moves(self, color: Color) -> list[LegalMove]:
        """All legal moves for *color*, pawn steps first."""
        moves = self.generate_pawn_moves(color)
        moves.extend(self.generate_wall_moves(color))
        return moves

    def generate_pawn_moves(self, color: Color) -> list[LegalMove]:
        origin = self._board.pawn_square(color)
        moves: list[LegalMove] = []
        for direction in Direction:
            result = self._resolve(color, direction, None)
            if result == PawnMoveFail.NO_SECONDARY:
                for side in direction.perpendiculars:
                    side_result = self._resolve(color, direction, side)
                    if not isinstance(side_result, PawnMoveFail):
                        moves.append(_PawnRelocation(origin, side_result))
            elif not isinstance(result, PawnMoveFail):
                moves.append(_PawnRelocation(origin, result))
        return moves

    def generate_wall_moves(self, color: Color) -> list[LegalMove]:
        board = self._board
        moves: list[LegalMove] = []
        if board.walls_left(color) == 0:
            return moves
        for cell in _WALL_CELLS:
            legality = board.legality_at(cell)
            for axis in _AXES:
                if not legality.allows(axis):
                    continue
                if self._check_wall(color, axis, cell) is None:
                    moves.append(_WallPlacement(axis, cell))
        return moves

    # -- Internal checks ----------------------------------------------------

    def _resolve(
        self,
        color: Color,
        direction: Direction,
        secondary: Direction | None,
    ) -> Square | PawnMoveFail:
        board = self._board
        square = board.pawn_square(color)
        if board.is_obstructed(square, direction):
            return PawnMoveFail.PATH_OBSTRUCTED

        mid = direction.offset(square)
        if board.is_empty(mid):
            return mid

        # Opponent on mid: jump straight over if nothing is behind it.
        if not board.is_obstructed(mid, direction):
            return direction.offset(mid)

        if secondary is None:
            return PawnMoveFail.NO_SECONDARY
        if direction.are_parallel(secondary):
            return PawnMoveFail.INVALID_SECONDARY
        if board.is_obstructed(mid, secondary):
            return PawnMoveFail.PATH_OBSTRUCTED
        return secondary.offset(mid)

    def _check_wall(self, color: Color, axis: Axis, cell: Cell) -> WallMoveFail | None:
        board = self._board
        if board.walls_left(color) == 0:
            return WallMoveFail.NO_WALLS_REMAINING
        if not board.legality_at(cell).allows(axis):
            return WallMoveFail.COLLIDES
        with board.tentative_wall(axis, cell):
            reachable = Rules.both_goals_reachable(board)
        if not reachable:
            return WallMoveFail.NO_PATH_REMAINING
        return None
