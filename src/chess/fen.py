"""
Position loader: the part of a game that can be encoded in a FEN string.
"""

from dataclasses import dataclass
from typing import Self

from src.chess.board import Board
from src.chess.pieces import Color
from src.core.exceptions import InvalidFENError

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq -"
MINIMUM_FEN_FIELDS = 4


def color_from_fen(color: str) -> Color:
    """Only "w" means white. Anything else (also "-", as used by some test positions) hands the move to black."""
    return Color.WHITE if color == "w" else Color.BLACK


def color_to_fen(color: Color) -> str:
    return "w" if color == Color.WHITE else "b"


@dataclass(frozen=True)
class FENState:
    """
    Data that can be constructed from a FEN string.
    ----

    FEN, or Forsyth-Edwards Notation, is a standard notation for describing a particular board position of a chess game.

    <board position string> <active color> <castling rights> <en passant square> [<# half move clock> <number turns played>]

    * The string to describe the board position is described in the Board class
    * The active color is "w" for white, any other value for black
    * Castling rights (ex. "KQkq", "-") and the en passant square (ex. "e3", "-") are kept as they are.
      Neither castling nor en passant captures are played by this engine, the fields only survive the round-trip.
    * The move counters are optional and ignored.

    ex) The standard starting position has a FEN
    rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq -
    """

    board: Board
    color_to_move: Color
    castling: str
    en_passant: str

    @classmethod
    def from_fen(cls, fen: str) -> Self:
        """Parse the FEN into data. Any malformed part raises InvalidFENError, nothing gets partially built."""

        # extract the different components. FEN is whitespace separated
        fields = fen.split()
        if len(fields) < MINIMUM_FEN_FIELDS:
            raise InvalidFENError(
                f"Cannot interpret supplied string as FEN (need at least {MINIMUM_FEN_FIELDS} fields): {fen!r}"
            )
        position, active_color, castling, en_passant = fields[:MINIMUM_FEN_FIELDS]

        board = Board.from_fen(position)
        for color in (Color.WHITE, Color.BLACK):
            if len(board.kings(color)) > 1:
                raise InvalidFENError(
                    f"Invalid piece placement {position!r}: more than one {color.name.lower()} king"
                )

        return cls(board, color_from_fen(active_color), castling, en_passant)

    def to_fen(self) -> str:
        """reverse operation: write a FEN from the given data"""
        return f"{self.board.to_fen()} {color_to_fen(self.color_to_move)} {self.castling} {self.en_passant}"

    @classmethod
    def starting_position(cls) -> Self:
        return cls.from_fen(STARTING_FEN)

