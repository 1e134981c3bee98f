"""
Storage contract for game sessions.

The service only depends on this Protocol. Every session is identified by a UUID handed out on creation,
and a stored game is always the full GameModel snapshot (no partial updates).
"""

from typing import Protocol
from uuid import UUID

from src.core.models import GameModel


class GameRepository(Protocol):
    def get_game(self, game_id: UUID) -> GameModel | None:
        """Latest snapshot of the session, None for an unknown id."""
        ...

    def create_game(self, game: GameModel) -> tuple[GameModel, UUID]:
        """Open a new session for `game`. Returns the stored snapshot with its new id."""
        ...

    def update_game(self, game_id: UUID, game: GameModel) -> GameModel | None:
        """Replace the snapshot of an existing session. None (and nothing stored) for an unknown id."""
        ...

    def delete_game(self, game_id: UUID) -> GameModel | None:
        """Close the session. Returns the last snapshot, None if there was no such session."""
        ...
