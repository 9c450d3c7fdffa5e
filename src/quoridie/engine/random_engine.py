"""Baseline engine: a uniformly random legal move."""

from __future__ import annotations

import logging
import random
from typing import TYPE_CHECKING

from quoridie.core.move_generator import MoveGenerator
from quoridie.engine.search import IEngine, SearchResult

if TYPE_CHECKING:
    from quoridie.core.board import Board
    from quoridie.core.enums import Color

_LOGGER = logging.getLogger(__name__)


class RandomEngine(IEngine):
    """Picks any legal move with equal probability.

    Stand-in for a real evaluation; pass *seed* for reproducible games.
    """

    __slots__ = ("_rng",)

    def __init__(self, seed: int | None = None) -> None:
        self._rng = random.Random(seed)

    def search(self, board: Board, color: Color) -> SearchResult:
        moves = MoveGenerator(board).generate_legal_moves(color)
        if not moves:
            _LOGGER.warning("No legal move for %s", color)
            return SearchResult(None, 0)
        move = self._rng.choice(moves)
        _LOGGER.debug("%s picked %s out of %d moves", color, move, len(moves))
        return SearchResult(move, len(moves))
