"""GameController - the central orchestrator of a game.

Coordinates: Players, GameState, MoveGenerator.
Emits events via simple callbacks so front ends / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from quoridie.core.board import Board
from quoridie.core.enums import Color, GameResult
from quoridie.core.errors import IllegalMoveError
from quoridie.core.move import LegalMove, Move
from quoridie.core.move_generator import MoveGenerator
from quoridie.core.types import WALLS_PER_PLAYER
from quoridie.game.interfaces import GamePhase, IGameController, IPlayer
from quoridie.game.state import GameState, MoveRecord

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[MoveRecord, "GameState"], None]
GameOverCallback = Callable[[GameResult], None]
PhaseCallback = Callable[[GamePhase], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)
    on_phase_changed: list[PhaseCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController(IGameController):
    """Orchestrates a full game: validates moves, switches turns,
    notifies listeners.

    Single-threaded: every method is expected to run on the caller's
    thread, one at a time.
    """

    __slots__ = ("_state", "_players", "_walls_per_player", "events")

    def __init__(self, walls_per_player: int = WALLS_PER_PLAYER) -> None:
        self._state = GameState()
        self._players: dict[Color, IPlayer] = {}
        self._walls_per_player = walls_per_player
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def current_player(self) -> IPlayer | None:
        return self._players.get(self._state.side_to_move)

    def player(self, color: Color) -> IPlayer | None:
        return self._players.get(color)

    # ── IGameController impl ─────────────────────────────────────────────

    def new_game(
        self,
        white: IPlayer,
        black: IPlayer,
        board: Board | None = None,
    ) -> None:
        self._players = {Color.WHITE: white, Color.BLACK: black}
        self._state = GameState()
        self._state.setup(board, walls_per_player=self._walls_per_player)
        _LOGGER.info("New game: %s vs %s", white.name, black.name)

        if self._state.is_game_over:
            self._emit_game_over(self._state.result)
            return
        self._emit_phase(GamePhase.AWAITING_MOVE)
        self._prompt_current_player()

    def submit_move(self, move: Move) -> bool:
        if not self._accepting_moves():
            return False
        color = self._state.side_to_move
        try:
            legal = MoveGenerator(self._state.board).validate(move, color)
        except IllegalMoveError as exc:
            _LOGGER.info("Rejected %s move %s: %s", color, move, exc)
            raise
        self._apply(legal)
        return True

    def submit_legal_move(self, move: LegalMove) -> bool:
        if not self._accepting_moves():
            return False
        if move not in self._state.legal_moves():
            _LOGGER.info("Rejected stale move %s", move)
            return False
        self._apply(move)
        return True

    def resign(self, color: Color) -> None:
        if self._state.is_game_over:
            return
        self._state.resign(color)
        _LOGGER.info("%s resigned", color)
        self._emit_game_over(self._state.result)

    def undo_move(self) -> bool:
        if self._state.is_game_over or not self._state.move_history:
            return False

        # Drop a pending engine request
        cp = self.current_player
        if cp and not cp.is_human:
            cp.cancel()

        undone = self._state.undo_last_move()
        _LOGGER.debug("Undid %s", undone)
        self._emit_phase(GamePhase.AWAITING_MOVE)
        self._prompt_current_player()
        return True

    # ── Internal helpers ─────────────────────────────────────────────────

    def _accepting_moves(self) -> bool:
        if self._state.is_game_over:
            _LOGGER.info("Move submitted after game over")
            return False
        return self._state.phase in (GamePhase.AWAITING_MOVE, GamePhase.THINKING)

    def _apply(self, move: LegalMove) -> None:
        record = self._state.apply_move(move)
        _LOGGER.debug("%s played %s", record.color, record.text)
        self._emit_move(record)

        if self._state.is_game_over:
            self._emit_game_over(self._state.result)
            return
        self._prompt_current_player()

    def _prompt_current_player(self) -> None:
        """Ask the current player to move."""
        cp = self.current_player
        if cp is None:
            return

        if cp.is_human:
            self._state.phase = GamePhase.AWAITING_MOVE
            self._emit_phase(GamePhase.AWAITING_MOVE)
        else:
            self._state.phase = GamePhase.THINKING
            self._emit_phase(GamePhase.THINKING)
            cp.request_move(self._state.board)

    def _emit_move(self, record: MoveRecord) -> None:
        for cb in self.events.on_move:
            cb(record, self._state)

    def _emit_game_over(self, result: GameResult) -> None:
        _LOGGER.info("Game over: %s", result.name)
        self._emit_phase(GamePhase.GAME_OVER)
        for cb in self.events.on_game_over:
            cb(result)

    def _emit_phase(self, phase: GamePhase) -> None:
        for cb in self.events.on_phase_changed:
            cb(phase)
