"""Exceptions raised by the game registry."""

from securegame.game_server.models import GameState


class GameServiceError(Exception):
    """Base class for game service failures."""


class GameNotFoundError(GameServiceError, LookupError):
    """No game is registered under the requested identity."""

    def __init__(self, game_id: int):
        self.game_id = game_id
        super().__init__(f"Game {game_id} not found")


class InvalidTransitionError(GameServiceError, ValueError):
    """A lifecycle operation is not allowed in the game's current state."""

    def __init__(self, game_id: int, operation: str, state: GameState):
        self.game_id = game_id
        self.operation = operation
        self.state = state
        super().__init__(f"Cannot {operation} game {game_id} while it is {state.value}")
