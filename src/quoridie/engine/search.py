"""Shared engine models and protocol."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from quoridie.core.board import Board
    from quoridie.core.enums import Color
    from quoridie.core.move import LegalMove


@dataclass(slots=True, frozen=True)
class SearchResult:
    """Result produced by an engine."""

    best_move: LegalMove | None
    candidates: int


class IEngine(Protocol):
    """Protocol for move choosers used by the game layer."""

    def search(self, board: Board, color: Color) -> SearchResult: ...
