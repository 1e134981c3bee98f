"""Unit tests for /src/chess/square.py"""

from string import ascii_lowercase

import pytest

from src.chess.square import ALL_SQUARES, BOARD_DIMENSIONS, Square, parse_square


@pytest.mark.parametrize(
    "file, rank, notation",
    [
        (file, rank, f"{ascii_lowercase[file - 1]}{rank}")
        for file in range(1, 9)
        for rank in range(1, 9)
    ],
)
def test_creating_from_algebraic(file: int, rank: int, notation: str) -> None:
    """Simply checks if the notation for 'a1' indeed maps to file 1, rank 1, etc."""
    square = Square.from_algebraic(notation)
    assert square.file == file
    assert square.rank == rank
    assert square.to_algebraic() == notation


def test_square_within_bounds() -> None:
    """happy case: pieces within the dimensions of the board"""
    for file in range(1, BOARD_DIMENSIONS[0] + 1):
        for rank in range(1, BOARD_DIMENSIONS[1] + 1):
            square = Square(file, rank)
            assert square.is_within_bounds()


def test_square_out_of_bounds() -> None:
    square = Square(BOARD_DIMENSIONS[0] + 1, BOARD_DIMENSIONS[1] + 1)
    assert not square.is_within_bounds()

    square = Square(-1, -1)
    assert not square.is_within_bounds()


def test_offset_can_leave_the_board() -> None:
    assert Square.from_algebraic("e4").offset(1, 2) == Square.from_algebraic("f6")
    assert not Square.from_algebraic("h8").offset(1, 0).is_within_bounds()


@pytest.mark.parametrize("name", ["a1", "e4", "h8"])
def test_parse_valid_square(name: str) -> None:
    square = parse_square(name)
    assert square is not None
    assert square.to_algebraic() == name


@pytest.mark.parametrize("name", ["k3", "f9", "f0", "e", "", "e44", "E4", "4e"])
def test_parse_invalid_square_gives_none(name: str) -> None:
    """No exceptions for names that are not on the board, just None"""
    assert parse_square(name) is None


def test_all_squares_in_fen_reading_order() -> None:
    assert len(ALL_SQUARES) == 64
    assert len(set(ALL_SQUARES)) == 64
    assert ALL_SQUARES[0].to_algebraic() == "a8"
    assert ALL_SQUARES[7].to_algebraic() == "h8"
    assert ALL_SQUARES[-1].to_algebraic() == "h1"
