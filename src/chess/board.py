"""The Game board implements all rules that effect the `position` (in chess: the configuration of pieces on the board)"""

from dataclasses import dataclass
from typing import Optional, Self

from src.chess.moves import Move, squares_attacking
from src.chess.pieces import EMPTY_SQUARE, FEN_TO_PIECE, Color, Piece, PieceType
from src.chess.square import ALL_SQUARES, BOARD_DIMENSIONS, Square
from src.core.exceptions import InvalidFENError


@dataclass
class Board:
    position: dict[Square, Piece]

    @classmethod
    def from_fen(cls, fen_str: str) -> Self:
        """Construct a board using the piece placement part of a FEN string.

        ex. standard starting position:
        rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR
        means:
        * black pieces are on the 8th rank, starting with rook on a8, knight on b8, etc.
        * pawns cover 7th rank entirely
        * ranks 6 through 3 have 8 consecutive empty squares
        * rank 2 are the white pawns (capital letters)
        * 1st rank are the white pieces. Again, left-to-right reads a1-h1.

        Every rank has to add up to exactly 8 squares, the whole board to exactly 64. Anything else raises InvalidFENError.
        """
        num_files, num_ranks = BOARD_DIMENSIONS
        fen_by_ranks = fen_str.split("/")
        if len(fen_by_ranks) != num_ranks:
            raise InvalidFENError(
                f"Invalid piece placement {fen_str!r}: expected {num_ranks} ranks, found {len(fen_by_ranks)}"
            )

        position: dict[Square, Piece] = {}
        for rank_idx, fen_one_rank in enumerate(fen_by_ranks):
            # FEN string is read from top rank (8th) to bottom rank (1st)
            rank = num_ranks - rank_idx
            # ... but the first character is the a-file, so reads in normal direction
            file = 1
            for character in fen_one_rank:
                if character.lower() in FEN_TO_PIECE:
                    # simple case: a letter directly denotes the piece that should be created
                    if file <= num_files:
                        position[Square(file, rank)] = Piece.from_fen(character)
                    file += 1
                elif character in "12345678":
                    # A number denotes the amount of empty squares after each other
                    for _ in range(int(character)):
                        if file <= num_files:
                            position[Square(file, rank)] = EMPTY_SQUARE
                        file += 1
                else:
                    raise InvalidFENError(
                        f"Invalid piece placement {fen_str!r}: unexpected character {character!r} in rank {rank}"
                    )

            if file - 1 != num_files:
                raise InvalidFENError(
                    f"Invalid piece placement {fen_str!r}: rank {rank} covers {file - 1} squares instead of {num_files}"
                )

        return cls(position)

    def to_fen(self) -> str:
        """Ranks are separated by slashes in FEN string."""
        return "/".join(
            self._rank_to_fen(rank) for rank in range(BOARD_DIMENSIONS[1], 0, -1)
        )

    def _rank_to_fen(self, rank: int) -> str:
        """FEN string of a single rank"""
        fen_characters: list[str] = []
        empty_count = 0
        for file in range(1, BOARD_DIMENSIONS[0] + 1):
            piece = self.piece(Square(file, rank))

            if not piece.is_empty:
                if empty_count > 0:
                    fen_characters.append(str(empty_count))
                    empty_count = 0
                fen_characters.append(piece.to_fen())
            else:
                empty_count += 1

        # if the entire rank is empty, then we still place this number in the string
        if empty_count > 0:
            fen_characters.append(str(empty_count))
        return "".join(fen_characters)

    def copy(self) -> Self:
        """Pieces are immutable, so a new mapping is all a copy needs"""
        return type(self)(dict(self.position))

    def piece(self, square: Square) -> Piece:
        return self.position[square]

    def locate_color(self, color: Color) -> list[Square]:
        return [
            square for square, piece in self.position.items() if piece.color == color
        ]

    def kings(self, color: Color) -> list[Square]:
        king = Piece(PieceType.KING, color)
        return [square for square in ALL_SQUARES if self.position[square] == king]

    def king_square(self, color: Color) -> Optional[Square]:
        """Where the king of `color` stands. None for a position without one (only test fixtures have those)."""
        kings = self.kings(color)
        return kings[0] if kings else None

    def checking_squares(self, color: Color) -> set[Square]:
        """Squares of the opponent's pieces that attack the king of `color`"""
        king_square = self.king_square(color)
        if king_square is None:
            return set()
        return squares_attacking(self, king_square, color.opponent)

    def is_check(self, color: Color) -> bool:
        return bool(self.checking_squares(color))

    def move_piece(self, move: Move, landing_piece: Optional[Piece] = None) -> None:
        """Update the position on the board. `landing_piece` replaces the moving piece on arrival (promotion)."""
        piece_that_moved = self.piece(move.from_square)
        self.position[move.from_square] = EMPTY_SQUARE
        self.position[move.to_square] = landing_piece or piece_that_moved

    def place_piece(self, piece: Piece, square: Square) -> None:
        self.position[square] = piece

    def remove_piece(self, square: Square) -> None:
        self.position[square] = EMPTY_SQUARE
