"""Application entry point: an interactive text game."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Callable
from dataclasses import replace

from quoridie.config import LOG_LEVELS, PLAYER_KINDS, AppSettings
from quoridie.core.enums import Color, GameResult
from quoridie.core.errors import IllegalMoveError, MoveParseError
from quoridie.core.notation import legal_move_to_text, parse_move, render_board
from quoridie.engine.random_engine import RandomEngine
from quoridie.game.controller import GameController
from quoridie.game.interfaces import IPlayer
from quoridie.game.player import EnginePlayer, HumanPlayer

_LOGGER = logging.getLogger(__name__)

HELP_TEXT = """\
Moves:
  w a s d       step up / left / down / right
  wa, wd, ...   jump over the opponent diagonally when the straight jump is blocked
  h<cell>       horizontal wall, e.g. he3 (cells a1-h8)
  v<cell>       vertical wall, e.g. va1
Commands: moves, undo, resign, help, quit"""

ReadLine = Callable[[str], str]
WriteLine = Callable[[str], None]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="quoridie",
        description="Play the 9x9 wall-placement race game in the terminal.",
    )
    parser.add_argument("--white", choices=PLAYER_KINDS, help="who plays white")
    parser.add_argument("--black", choices=PLAYER_KINDS, help="who plays black")
    parser.add_argument("--seed", type=int, help="seed for the random engine")
    parser.add_argument("--walls", type=int, help="walls per player")
    parser.add_argument("--log-level", choices=LOG_LEVELS, help="logging level")
    return parser


def settings_from_args(args: argparse.Namespace, base: AppSettings) -> AppSettings:
    """Command-line flags take precedence over *base*."""
    overrides = {
        "white_player": args.white,
        "black_player": args.black,
        "engine_seed": args.seed,
        "walls_per_player": args.walls,
        "log_level": args.log_level,
    }
    return replace(base, **{k: v for k, v in overrides.items() if v is not None})


def run_game(
    settings: AppSettings,
    read_line: ReadLine = input,
    write: WriteLine = print,
) -> GameResult:
    """Play one game until somebody wins, resigns or quits."""
    controller = GameController(settings.walls_per_player)
    engine = RandomEngine(settings.engine_seed)

    def make_player(color: Color, kind: str) -> IPlayer:
        if kind == "human":
            return HumanPlayer(color)
        return EnginePlayer(color, engine)

    controller.events.on_move.append(
        lambda record, _state: write(f"{record.color} played {record.text}")
    )
    controller.new_game(
        make_player(Color.WHITE, settings.white_player),
        make_player(Color.BLACK, settings.black_player),
    )
    state = controller.state

    while not state.is_game_over:
        player = controller.current_player
        if isinstance(player, EnginePlayer) and player.is_thinking:
            result = player.think()
            if result.best_move is None:
                write(f"{player.color} has no legal move and resigns")
                controller.resign(player.color)
                break
            controller.submit_legal_move(result.best_move)
            continue

        write(render_board(state.board))
        side = state.side_to_move
        try:
            line = read_line(f"Type in {side} player's move: ")
        except EOFError:
            write("")
            return state.result
        command = line.strip().lower()

        if command in ("quit", "exit"):
            return state.result
        if command == "help":
            write(HELP_TEXT)
        elif command == "moves":
            write(", ".join(legal_move_to_text(m) for m in state.legal_moves()))
        elif command == "undo":
            _undo_to_human(controller, write)
        elif command == "resign":
            controller.resign(side)
        else:
            _play_typed_move(controller, line, write)

    write(render_board(state.board))
    if state.result == GameResult.WHITE_WINS:
        write("White wins!")
    elif state.result == GameResult.BLACK_WINS:
        write("Black wins!")
    return state.result


def _play_typed_move(controller: GameController, line: str, write: WriteLine) -> None:
    try:
        move = parse_move(line)
    except MoveParseError as exc:
        write(f"You didn't type a valid move string: {exc}")
        return
    try:
        controller.submit_move(move)
    except IllegalMoveError as exc:
        write(f"Couldn't make the move, because {exc}")


def _undo_to_human(controller: GameController, write: WriteLine) -> None:
    """Undo moves until a human is to move again."""
    if not controller.undo_move():
        write("Nothing to undo")
        return
    while True:
        cp = controller.current_player
        if cp is None or cp.is_human or not controller.undo_move():
            break


def main(argv: list[str] | None = None) -> int:
    """Launch the terminal game."""
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        settings = settings_from_args(args, AppSettings.from_env())
    except ValueError as exc:
        parser.error(str(exc))

    logging.basicConfig(
        level=settings.log_level_value,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    _LOGGER.debug("Settings: %s", settings)

    try:
        run_game(settings)
    except KeyboardInterrupt:
        print()
    return 0


if __name__ == "__main__":
    sys.exit(main())
