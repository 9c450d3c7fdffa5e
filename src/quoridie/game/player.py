"""Players: typed-in moves or an engine working off a pending request."""

from __future__ import annotations

from typing import TYPE_CHECKING

from quoridie.core.enums import Color
from quoridie.game.interfaces import IPlayer

if TYPE_CHECKING:
    from quoridie.core.board import Board
    from quoridie.engine.search import IEngine, SearchResult


class HumanPlayer(IPlayer):
    """Moves arrive through ``controller.submit_move()``; prompts need no work."""

    __slots__ = ("_color",)

    def __init__(self, color: Color) -> None:
        self._color = color

    @property
    def color(self) -> Color:
        return self._color

    @property
    def name(self) -> str:
        return f"{self._color} (human)"

    @property
    def is_human(self) -> bool:
        return True

    def request_move(self, board: Board) -> None:
        pass

    def cancel(self) -> None:
        pass


class EnginePlayer(IPlayer):
    """Player backed by an :class:`IEngine`.

    Being prompted only remembers the board.  The front end calls
    :meth:`think` once the controller has returned, so an engine-vs-engine
    game never recurses through the controller.  ``cancel`` (sent on undo)
    drops the pending request.
    """

    __slots__ = ("_color", "_engine", "_pending")

    def __init__(self, color: Color, engine: IEngine) -> None:
        self._color = color
        self._engine = engine
        self._pending: Board | None = None

    @property
    def color(self) -> Color:
        return self._color

    @property
    def name(self) -> str:
        return f"{self._color} ({type(self._engine).__name__})"

    @property
    def is_human(self) -> bool:
        return False

    @property
    def is_thinking(self) -> bool:
        """Whether a move was requested and not yet produced or cancelled."""
        return self._pending is not None

    def request_move(self, board: Board) -> None:
        self._pending = board

    def cancel(self) -> None:
        self._pending = None

    def think(self) -> SearchResult:
        """Run the engine on the pending board and clear the request."""
        if self._pending is None:
            raise RuntimeError(f"No move was requested from {self.name}")
        board, self._pending = self._pending, None
        return self._engine.search(board, self._color)
