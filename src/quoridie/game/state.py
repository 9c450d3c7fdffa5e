"""Game state machine - tracks phase transitions and move history."""

from __future__ import annotations

from dataclasses import dataclass, field

from quoridie.core.board import Board
from quoridie.core.enums import Color, GameResult
from quoridie.core.move import LegalMove
from quoridie.core.move_generator import MoveGenerator
from quoridie.core.notation import legal_move_to_text
from quoridie.core.rules import Rules
from quoridie.core.types import WALLS_PER_PLAYER
from quoridie.game.interfaces import GamePhase


@dataclass
class MoveRecord:
    """A single entry in the move history."""

    move: LegalMove
    color: Color
    text: str


@dataclass
class GameState:
    """Manages game lifecycle: phase, result, side to move, move history.

    This is a pure data/logic class - no I/O.
    """

    board: Board = field(init=False)
    side_to_move: Color = field(default=Color.WHITE, init=False)
    phase: GamePhase = field(default=GamePhase.NOT_STARTED, init=False)
    result: GameResult = field(default=GameResult.IN_PROGRESS, init=False)
    move_history: list[MoveRecord] = field(default_factory=list, init=False)

    # ── Initialisation ───────────────────────────────────────────────────

    def setup(
        self,
        board: Board | None = None,
        side_to_move: Color = Color.WHITE,
        walls_per_player: int = WALLS_PER_PLAYER,
    ) -> None:
        """Initialise (or reset) the game."""
        self.board = board if board is not None else Board(walls_per_player)
        self.side_to_move = side_to_move
        self.phase = GamePhase.AWAITING_MOVE
        self.result = GameResult.IN_PROGRESS
        self.move_history.clear()
        self._check_game_over()

    # ── Move application ─────────────────────────────────────────────────

    def apply_move(self, move: LegalMove) -> MoveRecord:
        """Commit a validated move for the side to move.

        Caller is responsible for legality check.
        """
        color = self.side_to_move
        self.board.commit(move, color)
        record = MoveRecord(move=move, color=color, text=legal_move_to_text(move))
        self.move_history.append(record)
        self.side_to_move = color.opposite
        self._check_game_over()
        return record

    def undo_last_move(self) -> LegalMove | None:
        """Undo the last move. Returns the undone move, or None if empty."""
        if not self.move_history:
            return None

        record = self.move_history.pop()
        self.board.rollback(record.move, record.color)
        self.side_to_move = record.color

        # Reset result if we un-did a game-ending move
        if self.result != GameResult.IN_PROGRESS:
            self.result = GameResult.IN_PROGRESS
            self.phase = GamePhase.AWAITING_MOVE

        return record.move

    # ── Resignation ──────────────────────────────────────────────────────

    def resign(self, color: Color) -> None:
        self.result = (
            GameResult.BLACK_WINS if color == Color.WHITE else GameResult.WHITE_WINS
        )
        self.phase = GamePhase.GAME_OVER

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def is_game_over(self) -> bool:
        return self.phase == GamePhase.GAME_OVER

    @property
    def ply_count(self) -> int:
        """Number of moves played."""
        return len(self.move_history)

    def legal_moves(self) -> list[LegalMove]:
        """Legal moves for the side to move."""
        return MoveGenerator(self.board).generate_legal_moves(self.side_to_move)

    # ── Internal ─────────────────────────────────────────────────────────

    def _check_game_over(self) -> None:
        result = Rules.game_result(self.board)
        if result != GameResult.IN_PROGRESS:
            self.result = result
            self.phase = GamePhase.GAME_OVER
