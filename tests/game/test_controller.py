"""Tests for GameController - the orchestrator."""

import pytest

from quoridie.core.board import Board
from quoridie.core.enums import Axis, Color, Direction, GameResult, WallMoveFail
from quoridie.core.errors import IllegalMoveError
from quoridie.core.move import MovePawn, PlaceWall
from quoridie.core.move_generator import MoveGenerator
from quoridie.game.controller import GameController
from quoridie.game.interfaces import GamePhase
from quoridie.engine.random_engine import RandomEngine
from quoridie.game.player import EnginePlayer, HumanPlayer


def _make_hh_controller(board: Board | None = None) -> GameController:
    """Helper: human vs human game."""
    ctrl = GameController()
    ctrl.new_game(
        HumanPlayer(Color.WHITE),
        HumanPlayer(Color.BLACK),
        board=board,
    )
    return ctrl


class TestNewGame:
    def test_phase_awaiting(self) -> None:
        ctrl = _make_hh_controller()
        assert ctrl.state.phase == GamePhase.AWAITING_MOVE

    def test_players_assigned(self) -> None:
        ctrl = _make_hh_controller()
        assert ctrl.player(Color.WHITE) is not None
        assert ctrl.player(Color.BLACK) is not None

    def test_current_player_is_white(self) -> None:
        ctrl = _make_hh_controller()
        cp = ctrl.current_player
        assert cp is not None and cp.color == Color.WHITE

    def test_walls_per_player(self) -> None:
        ctrl = GameController(walls_per_player=5)
        ctrl.new_game(HumanPlayer(Color.WHITE), HumanPlayer(Color.BLACK))
        assert ctrl.state.board.walls_left(Color.BLACK) == 5

    def test_custom_board(self) -> None:
        ctrl = _make_hh_controller(Board.custom(white=(0, 4), black=(8, 4)))
        assert ctrl.state.board.pawn_square(Color.WHITE) == (0, 4)

    def test_engine_to_move_is_asked(self) -> None:
        phases: list[GamePhase] = []
        engine_player = EnginePlayer(Color.WHITE, RandomEngine(seed=0))
        ctrl = GameController()
        ctrl.events.on_phase_changed.append(phases.append)
        ctrl.new_game(engine_player, HumanPlayer(Color.BLACK))
        assert engine_player.is_thinking
        assert ctrl.state.phase == GamePhase.THINKING
        assert phases[-1] == GamePhase.THINKING

    def test_engine_reply_via_submit_legal_move(self) -> None:
        engine_player = EnginePlayer(Color.BLACK, RandomEngine(seed=0))
        ctrl = GameController()
        ctrl.new_game(HumanPlayer(Color.WHITE), engine_player)
        ctrl.submit_move(MovePawn(Direction.UP))
        assert engine_player.is_thinking
        result = engine_player.think()
        assert ctrl.submit_legal_move(result.best_move)
        assert ctrl.state.side_to_move == Color.WHITE
        assert ctrl.state.phase == GamePhase.AWAITING_MOVE


class TestSubmitMove:
    def test_legal_move_accepted(self) -> None:
        ctrl = _make_hh_controller()
        ok = ctrl.submit_move(MovePawn(Direction.UP))
        assert ok
        assert ctrl.state.side_to_move == Color.BLACK

    def test_illegal_move_raises(self) -> None:
        ctrl = _make_hh_controller()
        with pytest.raises(IllegalMoveError):
            ctrl.submit_move(MovePawn(Direction.DOWN))
        assert ctrl.state.side_to_move == Color.WHITE
        assert ctrl.state.ply_count == 0

    def test_colliding_wall_reason(self) -> None:
        ctrl = _make_hh_controller()
        ctrl.submit_move(PlaceWall(Axis.HORIZONTAL, (3, 3)))
        with pytest.raises(IllegalMoveError) as info:
            ctrl.submit_move(PlaceWall(Axis.HORIZONTAL, (4, 3)))
        assert info.value.reason == WallMoveFail.COLLIDES

    def test_move_event_fires(self) -> None:
        ctrl = _make_hh_controller()
        texts: list[str] = []
        ctrl.events.on_move.append(lambda record, state: texts.append(record.text))
        ctrl.submit_move(MovePawn(Direction.UP))
        ctrl.submit_move(PlaceWall(Axis.HORIZONTAL, (4, 2)))
        assert texts == ["e9e8", "he3"]

    def test_game_over_event_on_goal(self) -> None:
        ctrl = _make_hh_controller(Board.custom(white=(4, 1), black=(0, 4)))
        results: list[GameResult] = []
        ctrl.events.on_game_over.append(results.append)
        ctrl.submit_move(MovePawn(Direction.UP))
        assert results == [GameResult.WHITE_WINS]
        assert ctrl.state.phase == GamePhase.GAME_OVER

    def test_submit_legal_move(self) -> None:
        ctrl = _make_hh_controller()
        legal = ctrl.state.legal_moves()[0]
        assert ctrl.submit_legal_move(legal)
        assert ctrl.state.ply_count == 1

    def test_stale_legal_move_rejected(self) -> None:
        ctrl = _make_hh_controller()
        stale = MoveGenerator(ctrl.state.board).validate(MovePawn(Direction.UP), Color.WHITE)
        ctrl.submit_move(MovePawn(Direction.LEFT))
        assert not ctrl.submit_legal_move(stale)
        assert ctrl.state.ply_count == 1


class TestResign:
    def test_resign(self) -> None:
        ctrl = _make_hh_controller()
        ctrl.resign(Color.WHITE)
        assert ctrl.state.result == GameResult.BLACK_WINS
        assert ctrl.state.is_game_over

    def test_resign_twice_keeps_first_result(self) -> None:
        ctrl = _make_hh_controller()
        ctrl.resign(Color.BLACK)
        ctrl.resign(Color.WHITE)
        assert ctrl.state.result == GameResult.WHITE_WINS

    def test_cannot_submit_after_game_over(self) -> None:
        ctrl = _make_hh_controller()
        ctrl.resign(Color.WHITE)
        assert not ctrl.submit_move(MovePawn(Direction.UP))


class TestUndo:
    def test_undo(self) -> None:
        ctrl = _make_hh_controller()
        ctrl.submit_move(PlaceWall(Axis.VERTICAL, (5, 5)))
        assert ctrl.undo_move()
        assert ctrl.state.side_to_move == Color.WHITE
        assert ctrl.state.board == Board()

    def test_undo_empty(self) -> None:
        ctrl = _make_hh_controller()
        assert not ctrl.undo_move()

    def test_undo_after_game_over_refused(self) -> None:
        ctrl = _make_hh_controller()
        ctrl.submit_move(MovePawn(Direction.UP))
        ctrl.resign(Color.BLACK)
        assert not ctrl.undo_move()

    def test_undo_cancels_engine_request(self) -> None:
        engine_player = EnginePlayer(Color.BLACK, RandomEngine(seed=0))
        ctrl = GameController()
        ctrl.new_game(HumanPlayer(Color.WHITE), engine_player)
        ctrl.submit_move(MovePawn(Direction.UP))
        assert engine_player.is_thinking
        assert ctrl.undo_move()
        assert not engine_player.is_thinking
        assert ctrl.state.phase == GamePhase.AWAITING_MOVE

    def test_undo_back_to_engine_reprompts_it(self) -> None:
        engine_player = EnginePlayer(Color.BLACK, RandomEngine(seed=0))
        ctrl = GameController()
        ctrl.new_game(HumanPlayer(Color.WHITE), engine_player)
        ctrl.submit_move(MovePawn(Direction.UP))
        ctrl.submit_legal_move(engine_player.think().best_move)
        assert ctrl.undo_move()
        assert ctrl.state.side_to_move == Color.BLACK
        assert engine_player.is_thinking
        assert ctrl.state.phase == GamePhase.THINKING
