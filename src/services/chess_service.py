"""Orchestration of communication from API router to business logic and persistence layers (and the reverse direction)."""

import logging
from typing import Optional
from uuid import UUID

from src.api.models import (
    CreateGameRequest,
    DeleteGameRequest,
    GameResponse,
    GetGameRequest,
    LegalMovesRequest,
    LegalMovesResponse,
    MoveRequest,
    UndoRequest,
)
from src.chess.game import Game, legal_moves
from src.chess.pieces import Color as PieceColor
from src.core.config import Settings, get_settings
from src.core.exceptions import RepositoryError
from src.core.models import GameModel
from src.core.shared_types import Color, Status
from src.db.repository import GameRepository

logger = logging.getLogger(__name__)


class ChessService:
    """Orchestration of layers for chess game."""

    def __init__(
        self, repository: GameRepository, settings: Optional[Settings] = None
    ) -> None:
        self.repo = repository
        self.settings = settings or get_settings()

    # -- API routes logic ---
    def create_new_game(self, request: CreateGameRequest) -> GameResponse:
        """Start a new game, from the requested position or the configured starting position."""

        # Use info in CreateGameRequest to create a new Game, and convert into GameModel
        new_game = Game.new_game(
            self.settings.starting_fen
            if request.starting_fen is None
            else request.starting_fen
        )
        created_game_data = new_game.to_model()

        # Store the GameModel in the repository
        stored_game, game_id = self.repo.create_game(created_game_data)
        logger.info("created game %s", game_id)

        # Return a GameResponse
        return self._create_game_response(game_id, stored_game)

    def get_game_state(self, request: GetGameRequest) -> GameResponse:
        """Retrieve current game state."""
        game_model = self._fetch_game(request.game_id)
        return self._create_game_response(request.game_id, game_model)

    def legal_moves(self, request: LegalMovesRequest) -> LegalMovesResponse:
        """Squares the piece on the requested square can move to (for highlighting)."""
        game = Game.from_model(self._fetch_game(request.game_id))
        return LegalMovesResponse(
            game_id=request.game_id,
            square=request.square,
            legal_moves=sorted(legal_moves(game.board, request.square)),
        )

    def make_move(self, request: MoveRequest) -> GameResponse:
        """
        Make a move attempt.

        A rejected move is not an error: the game gets stored with status 'invalid' and the reason as message.
        """
        game = Game.from_model(self._fetch_game(request.game_id))

        # Attempt the move
        after_move = game.make_move(request.to_move())
        if after_move.status == Status.INVALID:
            logger.info(
                "game %s: move %s rejected (%s)",
                request.game_id,
                request.to_move(),
                after_move.message,
            )

        return self._store(request.game_id, after_move)

    def undo_move(self, request: UndoRequest) -> GameResponse:
        """Take back the last move made in the game."""
        game = Game.from_model(self._fetch_game(request.game_id))
        return self._store(request.game_id, game.undo_move())

    def delete_game(self, request: DeleteGameRequest) -> None:
        """Handle a request to delete a Game record."""
        if self.repo.delete_game(request.game_id) is None:
            raise RepositoryError(f"Game with game_id={request.game_id} not found.")
        logger.info("deleted game %s", request.game_id)

    # -- Internal helpers --
    def _store(self, game_id: UUID, game: Game) -> GameResponse:
        """Capture updated state in GameModel, store it, and answer with the new state."""
        model = game.to_model()
        if self.repo.update_game(game_id, model) is None:
            raise RepositoryError(f"Game with {game_id=} not found.")
        return self._create_game_response(game_id, model)

    def _create_game_response(self, game_id: UUID, model: GameModel) -> GameResponse:
        """Convert info in GameModel to a GameResponse (for game with given ID.)"""
        game = Game.from_model(model)
        return GameResponse(
            game_id=game_id,
            fen=model.fen,
            turn=Color.WHITE if game.turn == PieceColor.WHITE else Color.BLACK,
            move_history=model.moves,
            captured=model.captured,
            checks=model.checks,
            message=model.message,
            status=Status(model.status),
        )

    def _fetch_game(self, game_id: UUID) -> GameModel:
        """Attempt to find the game in the repository and raise error if it fails."""
        game_model = self.repo.get_game(game_id)
        if game_model is None:
            raise RepositoryError(f"Game with {game_id=} not found.")
        return game_model
