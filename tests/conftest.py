"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures/variables required for testing multiple layers.
"""

from typing import Callable

import pytest

from src.chess.game import Game


@pytest.fixture
def new_game() -> Game:
    """A game in the standard starting position"""
    return Game.new_game()


@pytest.fixture
def play() -> Callable[..., Game]:
    """Call the inner function with a starting game and any number of moves (all of them must be accepted)"""

    def _play(game: Game, *moves: str) -> Game:
        for move in moves:
            game = game.make_move(move)
            assert game.status.value != "invalid", f"{move}: {game.message}"
        return game

    return _play
