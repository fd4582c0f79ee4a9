"""ChessService: registry of concurrent chess games keyed by id."""

from __future__ import annotations

import logging
import threading
import uuid

from chessgame.config import GameConfig
from chessgame.game.chess_game import ChessGame
from chessgame.game.interfaces import IChessService

_LOGGER = logging.getLogger(__name__)


class ChessService(IChessService):
    """Owns a mapping of game id to :class:`ChessGame`.

    The mapping itself is guarded by a lock, so games may be created and
    looked up from several threads. Access *within* one game is not
    synchronised; each game must be driven from one thread at a time.
    """

    __slots__ = ("_games", "_lock", "_config")

    def __init__(self, config: GameConfig | None = None) -> None:
        self._games: dict[str, ChessGame] = {}
        self._lock = threading.Lock()
        self._config = config if config is not None else GameConfig()

    def create_game(self, game_id: str | None = None) -> ChessGame | None:
        """Register a new game under *game_id* (a random UUID if omitted).

        Returns ``None`` when *game_id* is already in use.
        """
        with self._lock:
            if game_id is None:
                game_id = str(uuid.uuid4())
                while game_id in self._games:
                    game_id = str(uuid.uuid4())
            elif game_id in self._games:
                _LOGGER.debug("Game id %s already exists", game_id)
                return None
            game = ChessGame(game_id, self._config)
            self._games[game_id] = game
        _LOGGER.info("Created game %s", game_id)
        return game

    def get_game(self, game_id: str) -> ChessGame | None:
        with self._lock:
            return self._games.get(game_id)

    def delete_game(self, game_id: str) -> bool:
        with self._lock:
            removed = self._games.pop(game_id, None)
        if removed is None:
            return False
        _LOGGER.info("Deleted game %s", game_id)
        return True

    def get_all_game_ids(self) -> list[str]:
        with self._lock:
            return list(self._games)

    def clear_all_games(self) -> None:
        with self._lock:
            count = len(self._games)
            self._games.clear()
        _LOGGER.info("Cleared %d games", count)
