"""In-memory game registry with thread-safe operations."""

import logging
from threading import Lock

from securegame.game_server.errors import GameNotFoundError
from securegame.game_server.game_logic import Game, GameSnapshot, Player
from securegame.security.data_store import SecureDataStore

logger = logging.getLogger(__name__)


class GameRegistry:
    """
    Owns every game and the secure data store they share.

    Game identities are assigned as the number of games that exist at
    creation time, so they run 0, 1, 2, ... in creation order.
    """

    def __init__(self, data_store: SecureDataStore | None = None):
        self._games: dict[int, Game] = {}
        self._lock = Lock()
        self.data_store = data_store if data_store is not None else SecureDataStore()

    def create_game(self) -> Game:
        """
        Create a new game.

        Returns:
            The created game, in NOT_STARTED state with an empty roster
        """
        with self._lock:
            game = Game(len(self._games))
            self._games[game.game_id] = game
        logger.info("Created game %d", game.game_id)
        return game

    def get_game(self, game_id: int) -> Game:
        """
        Get a game by ID.

        Raises:
            GameNotFoundError: If no game has this ID
        """
        with self._lock:
            game = self._games.get(game_id)
        if game is None:
            logger.warning("Game %s not found", game_id)
            raise GameNotFoundError(game_id)
        return game

    def list_games(self) -> list[int]:
        """List all game IDs in creation order."""
        with self._lock:
            return list(self._games.keys())

    def describe_game(self, game_id: int) -> GameSnapshot:
        """Snapshot a game's state and roster, raising GameNotFoundError if absent."""
        game = self.get_game(game_id)
        with self._lock:
            return game.snapshot()

    def add_player_to_game(self, game_id: int, player: Player) -> GameSnapshot:
        """Append a player; returns the game as it stood right after the join."""
        game = self.get_game(game_id)
        with self._lock:
            game.add_player(player)
            return game.snapshot()

    def start_game(self, game_id: int) -> GameSnapshot:
        """Start a game; returns the game as it stood right after the transition."""
        game = self.get_game(game_id)
        with self._lock:
            game.start()
            return game.snapshot()

    def finish_game(self, game_id: int) -> GameSnapshot:
        """Finish a game; returns the game as it stood right after the transition."""
        game = self.get_game(game_id)
        with self._lock:
            game.finish()
            return game.snapshot()

    def store_secure_data(self, key: str, value: str) -> None:
        self.data_store.store(key, value)

    def retrieve_secure_data(self, key: str) -> str | None:
        return self.data_store.retrieve(key)
