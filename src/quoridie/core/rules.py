"""High-level rules: goal reachability and win detection."""

from __future__ import annotations

from typing import TYPE_CHECKING

from quoridie.core.enums import Color, Direction, GameResult
from quoridie.core.types import BOARD_SIZE, goal_row

if TYPE_CHECKING:
    from quoridie.core.board import Board


_SEARCH_ORDER: dict[Color, tuple[Direction, ...]] = {
    # Try the step toward the goal last so it is popped first.
    Color.WHITE: (Direction.DOWN, Direction.LEFT, Direction.RIGHT, Direction.UP),
    Color.BLACK: (Direction.UP, Direction.LEFT, Direction.RIGHT, Direction.DOWN),
}


class Rules:
    """Static rule-checker that operates on a :class:`Board`."""

    @staticmethod
    def has_path_to_goal(board: Board, color: Color) -> bool:
        """Depth-first search from *color*'s pawn to its goal row.

        Pawns are not obstacles here; only walls and the board edge are.
        """
        target = goal_row(color)
        start = board.pawn_square(color)
        directions = _SEARCH_ORDER[color]
        visited = [[False] * BOARD_SIZE for _ in range(BOARD_SIZE)]
        visited[start[1]][start[0]] = True
        stack = [start]

        while stack:
            square = stack.pop()
            if square[1] == target:
                return True
            for direction in directions:
                if board.is_obstructed(square, direction):
                    continue
                nx, ny = direction.offset(square)
                if visited[ny][nx]:
                    continue
                visited[ny][nx] = True
                stack.append((nx, ny))
        return False

    @staticmethod
    def both_goals_reachable(board: Board) -> bool:
        return Rules.has_path_to_goal(board, Color.WHITE) and Rules.has_path_to_goal(
            board, Color.BLACK
        )

    @staticmethod
    def winner(board: Board) -> Color | None:
        """The side whose pawn stands on its goal row, if any."""
        for color in Color:
            if board.pawn_square(color)[1] == goal_row(color):
                return color
        return None

    @staticmethod
    def game_result(board: Board) -> GameResult:
        winner = Rules.winner(board)
        if winner is None:
            return GameResult.IN_PROGRESS
        if winner == Color.WHITE:
            return GameResult.WHITE_WINS
        return GameResult.BLACK_WINS
