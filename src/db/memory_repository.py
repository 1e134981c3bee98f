"""Implementation of (Game)Repository keeping every game in memory: one GameModel per session id"""

import logging
from uuid import UUID, uuid4

from src.core.models import GameModel

logger = logging.getLogger(__name__)


class InMemoryGameRepository:
    """Games live as long as the process does. Nothing is shared between sessions."""

    def __init__(self) -> None:
        self._games: dict[UUID, GameModel] = {}

    def get_game(self, game_id: UUID) -> GameModel | None:
        """Get game by ID, if record exists."""
        return self._games.get(game_id)

    def create_game(self, game: GameModel) -> tuple[GameModel, UUID]:
        """Store new game and return the stored data + newly created game ID."""
        new_id = uuid4()
        self._games[new_id] = game
        logger.debug("stored new game %s", new_id)
        return game, new_id

    def update_game(self, game_id: UUID, game: GameModel) -> GameModel | None:
        """Add new info to existing record."""
        if game_id not in self._games:
            return None
        self._games[game_id] = game
        return game

    def delete_game(self, game_id: UUID) -> GameModel | None:
        """Remove a game's record."""
        return self._games.pop(game_id, None)
