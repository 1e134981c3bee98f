from uuid import UUID, uuid4

import pytest

from src.api.models import (
    CreateGameRequest,
    GameResponse,
    LegalMovesRequest,
    MoveRequest,
)
from src.core.exceptions import InvalidRequestError
from src.core.shared_types import Color, Status


@pytest.fixture
def mock_id() -> UUID:
    return uuid4()


# -- Validation - CreateGameRequest --
@pytest.mark.parametrize(
    "valid_fen",
    [
        "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq -",
        "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1",
        "8/8/8/8/8/3p1p2/4P3/8 - - -",
    ],
)
def test_valid_fen(valid_fen: str) -> None:
    """Test that CreateGameRequest accepts a FEN string with (at least) 4 fields."""
    request = CreateGameRequest(starting_fen=valid_fen)
    assert request.starting_fen == valid_fen


def test_starting_fen_is_optional() -> None:
    """Should be able to not supply a starting FEN, and validator just returns None."""
    assert CreateGameRequest().starting_fen is None
    assert CreateGameRequest(starting_fen=None).starting_fen is None


@pytest.mark.parametrize(
    "invalid_fen",
    [
        "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq",  # only 3 space-separated values
        "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR",
        "",
    ],
)
def test_invalid_fen(invalid_fen: str) -> None:
    """Structurally invalid FEN: less than 4 space-separated fields."""
    with pytest.raises(InvalidRequestError):
        _ = CreateGameRequest(starting_fen=invalid_fen)


# -- Validation - MoveRequest --
def test_valid_square_names(mock_id: UUID) -> None:
    """Test that MoveRequest accepts correctly written squares in algebraic notation."""
    request = MoveRequest(game_id=mock_id, from_square="e2", to_square="e4")
    assert request.from_square == "e2"
    assert request.to_square == "e4"
    assert request.to_move() == "e2e4"


def test_squares_off_the_board_are_left_to_the_game(mock_id: UUID) -> None:
    """'k3' has the shape of a square name. Whether it exists on the board is decided by the Game."""
    request = MoveRequest(game_id=mock_id, from_square="k3", to_square="f7")
    assert request.to_move() == "k3f7"


@pytest.mark.parametrize("square", ["e", "e22", "2e", "ee", ""])
def test_invalid_square_names(mock_id: UUID, square: str) -> None:
    with pytest.raises(InvalidRequestError):
        MoveRequest(game_id=mock_id, from_square=square, to_square="e4")
    with pytest.raises(InvalidRequestError):
        MoveRequest(game_id=mock_id, from_square="e2", to_square=square)
    with pytest.raises(InvalidRequestError):
        LegalMovesRequest(game_id=mock_id, square=square)


# -- Responses --
def test_game_response_serializes_enums(mock_id: UUID) -> None:
    response = GameResponse(
        game_id=mock_id,
        fen="rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq -",
        turn=Color.WHITE,
        move_history=[],
        captured=[],
        checks=[],
        message="",
        status=Status.RUNNING,
    )
    dumped = response.model_dump(mode="json")
    assert dumped["turn"] == "white"
    assert dumped["status"] == "running"
    assert dumped["game_id"] == str(mock_id)
