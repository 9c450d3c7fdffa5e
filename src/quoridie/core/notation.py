"""Move strings and text rendering of the board.

Move string grammar (case-insensitive)::

    pawn move   <dir>[<dir>]        w=up a=left s=down d=right, e.g. "w", "wa"
    wall        <axis><file><rank>  h or - = horizontal, v or | = vertical,
                                    file a-h, rank 1-8, e.g. "he3", "|a1"
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from quoridie.core.enums import Axis, Color, Direction, MoveParseFail
from quoridie.core.errors import MoveParseError
from quoridie.core.move import LegalMove, Move, MovePawn, PlaceWall
from quoridie.core.types import BOARD_SIZE, WALL_GRID_SIZE, cell_name

if TYPE_CHECKING:
    from quoridie.core.board import Board

_DIRECTION_CHARS: dict[str, Direction] = {
    "w": Direction.UP,
    "a": Direction.LEFT,
    "s": Direction.DOWN,
    "d": Direction.RIGHT,
}
_DIRECTION_TO_CHAR: dict[Direction, str] = {v: k for k, v in _DIRECTION_CHARS.items()}

_AXIS_CHARS: dict[str, Axis] = {
    "h": Axis.HORIZONTAL,
    "-": Axis.HORIZONTAL,
    "v": Axis.VERTICAL,
    "|": Axis.VERTICAL,
}

_FILES = "abcdefghi"


# ── Parsing ──────────────────────────────────────────────────────────────────


def parse_move(text: str) -> Move:
    """Parse a move string such as ``"w"``, ``"wa"`` or ``"he3"``."""
    chars = text.strip().lower()
    if not chars:
        raise MoveParseError(MoveParseFail.UNEXPECTED_END_OF_STRING, text)

    first, rest = chars[0], chars[1:]

    if first in _DIRECTION_CHARS:
        if len(rest) > 1:
            raise MoveParseError(MoveParseFail.UNRECOGNIZED_CHAR, text)
        secondary = None
        if rest:
            secondary = _DIRECTION_CHARS.get(rest)
            if secondary is None:
                raise MoveParseError(MoveParseFail.UNRECOGNIZED_CHAR, text)
        return MovePawn(_DIRECTION_CHARS[first], secondary)

    if first in _AXIS_CHARS:
        if len(rest) < 2:
            raise MoveParseError(MoveParseFail.UNEXPECTED_END_OF_STRING, text)
        if len(rest) > 2:
            raise MoveParseError(MoveParseFail.UNRECOGNIZED_CHAR, text)
        x = _FILES.find(rest[0])
        y = ord(rest[1]) - ord("1")
        if not (0 <= x < WALL_GRID_SIZE and 0 <= y < WALL_GRID_SIZE):
            raise MoveParseError(MoveParseFail.UNRECOGNIZED_CHAR, text)
        return PlaceWall(_AXIS_CHARS[first], (x, y))

    raise MoveParseError(MoveParseFail.UNRECOGNIZED_CHAR, text)


# ── Formatting ───────────────────────────────────────────────────────────────


def move_to_text(move: Move) -> str:
    """Inverse of :func:`parse_move` using the letter forms."""
    if isinstance(move, MovePawn):
        text = _DIRECTION_TO_CHAR[move.direction]
        if move.secondary is not None:
            text += _DIRECTION_TO_CHAR[move.secondary]
        return text
    prefix = "h" if move.axis == Axis.HORIZONTAL else "v"
    return f"{prefix}{cell_name(move.cell)}"


def legal_move_to_text(move: LegalMove) -> str:
    """Origin/destination squares for pawn moves (``e9e8``), axis+cell for walls (``he3``)."""
    return str(move)


def render_board(board: Board) -> str:
    """Box-drawing picture of the board.

    ``‖`` marks a vertical wall between two squares, ``═══`` a horizontal
    one under a square.
    """
    size = BOARD_SIZE
    border = "   +" + "---+" * size
    lines = [border]

    for y in range(size):
        row = [f"{y + 1:>2} |"]
        for x in range(size):
            color = board[(x, y)]
            if color is None:
                row.append("   ")
            else:
                row.append(" W " if color == Color.WHITE else " B ")
            if x == size - 1:
                row.append("|")
            elif board.is_obstructed((x, y), Direction.RIGHT):
                row.append("‖")
            else:
                row.append("|")
        lines.append("".join(row))

        if y == size - 1:
            break
        sep = ["   +"]
        for x in range(size):
            blocked = board.is_obstructed((x, y), Direction.DOWN)
            sep.append("═══" if blocked else "---")
            if x == size - 1:
                sep.append("+")
                continue
            wall = board.wall_at((x, y))
            if wall == Axis.HORIZONTAL:
                sep.append("═")
            elif wall == Axis.VERTICAL:
                sep.append("‖")
            else:
                sep.append("+")
        lines.append("".join(sep))

    lines.append(border)
    lines.append("     " + "   ".join(_FILES[:size].upper()))
    lines.append("")
    lines.append(
        f"   White - {board.walls_left(Color.WHITE):>2} walls | "
        f"Black - {board.walls_left(Color.BLACK):>2} walls"
    )
    return "\n".join(lines)
