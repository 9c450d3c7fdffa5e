"""Core domain layer - pure rules engine with zero external dependencies.

Quick start::

    from quoridie.core import Board, Color, MoveGenerator, parse_move

    board = Board()
    gen = MoveGenerator(board)
    legal = gen.validate(parse_move("w"), Color.WHITE)
    board.commit(legal, Color.WHITE)
"""

from quoridie.core.board import Board
from quoridie.core.enums import (
    Axis,
    Color,
    Direction,
    GameResult,
    MoveParseFail,
    PawnMoveFail,
    WallLegality,
    WallMoveFail,
)
from quoridie.core.errors import IllegalMoveError, MoveParseError
from quoridie.core.move import LegalMove, Move, MovePawn, PlaceWall
from quoridie.core.move_generator import MoveGenerator
from quoridie.core.notation import (
    legal_move_to_text,
    move_to_text,
    parse_move,
    render_board,
)
from quoridie.core.rules import Rules
from quoridie.core.types import (
    BOARD_SIZE,
    WALL_GRID_SIZE,
    WALLS_PER_PLAYER,
    Cell,
    Square,
    cell_name,
    goal_row,
    parse_cell,
    parse_square,
    square_name,
    start_square,
)

__all__ = [
    # Enums
    "Axis",
    "Color",
    "Direction",
    "GameResult",
    "MoveParseFail",
    "PawnMoveFail",
    "WallLegality",
    "WallMoveFail",
    # Types / helpers
    "BOARD_SIZE",
    "WALL_GRID_SIZE",
    "WALLS_PER_PLAYER",
    "Cell",
    "Square",
    "cell_name",
    "goal_row",
    "parse_cell",
    "parse_square",
    "square_name",
    "start_square",
    # Errors
    "IllegalMoveError",
    "MoveParseError",
    # Domain objects
    "Board",
    "LegalMove",
    "Move",
    "MoveGenerator",
    "MovePawn",
    "PlaceWall",
    "Rules",
    # Notation
    "legal_move_to_text",
    "move_to_text",
    "parse_move",
    "render_board",
]
