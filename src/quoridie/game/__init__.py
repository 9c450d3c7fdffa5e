"""Game management layer - controller, players, state machine.

Quick start::

    from quoridie.game import GameController, HumanPlayer

    ctrl = GameController()
    ctrl.new_game(
        white=HumanPlayer(Color.WHITE),
        black=HumanPlayer(Color.BLACK),
    )
"""

from quoridie.game.controller import GameController, GameEvents
from quoridie.game.interfaces import GamePhase, IGameController, IPlayer
from quoridie.game.player import EnginePlayer, HumanPlayer
from quoridie.game.state import GameState, MoveRecord

__all__ = [
    # Interfaces
    "GamePhase",
    "IGameController",
    "IPlayer",
    # Concrete
    "EnginePlayer",
    "GameController",
    "GameEvents",
    "GameState",
    "HumanPlayer",
    "MoveRecord",
]
