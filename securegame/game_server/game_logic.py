"""Game session state and lifecycle transitions."""

import logging
from dataclasses import dataclass
from datetime import UTC, datetime

from securegame.game_server.errors import InvalidTransitionError
from securegame.game_server.models import GameState

logger = logging.getLogger(__name__)

# Allowed transitions per operation: current state -> resulting state.
# A state missing from an operation's table rejects that operation.
TRANSITIONS: dict[str, dict[GameState, GameState]] = {
    "start": {
        GameState.NOT_STARTED: GameState.IN_PROGRESS,
        GameState.IN_PROGRESS: GameState.IN_PROGRESS,
    },
    "finish": {
        GameState.IN_PROGRESS: GameState.FINISHED,
        GameState.FINISHED: GameState.FINISHED,
    },
    "add_player": {
        GameState.NOT_STARTED: GameState.NOT_STARTED,
    },
}


@dataclass
class Player:
    """A player in a game. The credential is opaque and never inspected."""

    player_id: int
    username: str
    credential: str


@dataclass(frozen=True)
class GameSnapshot:
    """Point-in-time copy of a game's state and roster."""

    game_id: int
    state: GameState
    created_at: datetime
    players: tuple[Player, ...]


class Game:
    """Represents one game session with its roster and lifecycle state."""

    def __init__(self, game_id: int):
        self.game_id = game_id
        self.created_at = datetime.now(UTC)
        self.state = GameState.NOT_STARTED
        self.players: list[Player] = []

    @property
    def num_players(self) -> int:
        return len(self.players)

    def snapshot(self) -> GameSnapshot:
        return GameSnapshot(
            game_id=self.game_id,
            state=self.state,
            created_at=self.created_at,
            players=tuple(self.players),
        )

    def _transition(self, operation: str) -> GameState:
        """
        Move the game along the transition table.

        Args:
            operation: Key into TRANSITIONS

        Returns:
            The new state

        Raises:
            InvalidTransitionError: If the operation is not allowed in the current state
        """
        allowed = TRANSITIONS[operation]
        if self.state not in allowed:
            logger.warning("Rejected %s on game %d in state %s", operation, self.game_id, self.state.value)
            raise InvalidTransitionError(self.game_id, operation, self.state)
        previous = self.state
        self.state = allowed[previous]
        if previous != self.state:
            logger.info("Game %d: %s -> %s", self.game_id, previous.value, self.state.value)
        return self.state

    def add_player(self, player: Player) -> None:
        """
        Append a player to the roster.

        Raises:
            InvalidTransitionError: If the game has already started or finished
        """
        self._transition("add_player")
        self.players.append(player)
        logger.info("Game %d: player %d (%s) joined", self.game_id, player.player_id, player.username)

    def start(self) -> None:
        """Start the game. Starting a game already in progress is a no-op."""
        self._transition("start")

    def finish(self) -> None:
        """Finish a game in progress. Finishing twice is a no-op."""
        self._transition("finish")

    def get_player_by_id(self, player_id: int) -> Player | None:
        """Get player by ID."""
        for player in self.players:
            if player.player_id == player_id:
                return player
        return None
