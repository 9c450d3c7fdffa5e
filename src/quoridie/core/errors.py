"""Exceptions raised by the rules engine and the move-string parser."""

from __future__ import annotations

from quoridie.core.enums import MoveParseFail, PawnMoveFail, WallMoveFail

# The reason enums share values, so each gets its own table.
_PAWN_TEXT: dict[PawnMoveFail, str] = {
    PawnMoveFail.PATH_OBSTRUCTED: "the chosen path is obstructed",
    PawnMoveFail.NO_SECONDARY: "a secondary direction is required but was not given",
    PawnMoveFail.INVALID_SECONDARY: "the secondary direction must be perpendicular",
}
_WALL_TEXT: dict[WallMoveFail, str] = {
    WallMoveFail.NO_WALLS_REMAINING: "no walls remaining",
    WallMoveFail.COLLIDES: "the wall collides with another wall",
    WallMoveFail.NO_PATH_REMAINING: "the wall would leave a pawn without a path",
}
_PARSE_TEXT: dict[MoveParseFail, str] = {
    MoveParseFail.UNRECOGNIZED_CHAR: "unrecognized character",
    MoveParseFail.UNEXPECTED_END_OF_STRING: "unexpected end of move string",
}


class IllegalMoveError(ValueError):
    """A move was rejected by validation.  ``reason`` tells why."""

    def __init__(self, reason: PawnMoveFail | WallMoveFail) -> None:
        text = _PAWN_TEXT[reason] if isinstance(reason, PawnMoveFail) else _WALL_TEXT[reason]
        super().__init__(text)
        self.reason = reason

    @property
    def is_pawn_failure(self) -> bool:
        return isinstance(self.reason, PawnMoveFail)


class MoveParseError(ValueError):
    """A move string could not be parsed."""

    def __init__(self, reason: MoveParseFail, text: str) -> None:
        super().__init__(f"{_PARSE_TEXT[reason]} in {text!r}")
        self.reason = reason
        self.text = text
