"""Unit tests for src/db/memory_repository.py"""

from uuid import uuid4

import pytest

from src.core.models import GameModel
from src.db.memory_repository import InMemoryGameRepository

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq -"


@pytest.fixture
def repository() -> InMemoryGameRepository:
    return InMemoryGameRepository()


def test_create_and_get_game(repository: InMemoryGameRepository) -> None:
    model = GameModel(fen=STARTING_FEN)
    stored, game_id = repository.create_game(model)
    assert stored == model
    assert repository.get_game(game_id) == model


def test_every_game_gets_its_own_id(repository: InMemoryGameRepository) -> None:
    _, first = repository.create_game(GameModel(fen=STARTING_FEN))
    _, second = repository.create_game(GameModel(fen=STARTING_FEN))
    assert first != second
    assert repository.get_game(first) is not None
    assert repository.get_game(second) is not None


def test_get_unknown_game(repository: InMemoryGameRepository) -> None:
    assert repository.get_game(uuid4()) is None


def test_update_game(repository: InMemoryGameRepository) -> None:
    _, game_id = repository.create_game(GameModel(fen=STARTING_FEN))
    updated = GameModel(fen=STARTING_FEN, moves=["e2-e4"], message="e2-e4")
    assert repository.update_game(game_id, updated) == updated
    assert repository.get_game(game_id) == updated


def test_update_unknown_game(repository: InMemoryGameRepository) -> None:
    """Updating never creates a record"""
    unknown_id = uuid4()
    assert repository.update_game(unknown_id, GameModel(fen=STARTING_FEN)) is None
    assert repository.get_game(unknown_id) is None


def test_delete_game(repository: InMemoryGameRepository) -> None:
    model = GameModel(fen=STARTING_FEN)
    _, game_id = repository.create_game(model)
    assert repository.delete_game(game_id) == model
    assert repository.get_game(game_id) is None
    assert repository.delete_game(game_id) is None
