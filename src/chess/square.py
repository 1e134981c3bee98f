"""
A square on the board

(placed in its own module as multiple other modules need to import it)
"""

from __future__ import annotations

from dataclasses import dataclass
from string import ascii_lowercase
from typing import Optional

# Chess board is always 8x8. Just in case we want to try some funky stuff, make it adjustable
BOARD_DIMENSIONS = (8, 8)


@dataclass(frozen=True)
class Square:
    file: int
    rank: int

    @classmethod
    def from_algebraic(cls, sq: str) -> Square:
        """Algebraic notation: 'a1' - 'h8' get converted to (1,1) - (8,8)"""
        file = ord(sq[0]) - ord("a") + 1
        rank = int(sq[1])
        return cls(file, rank)

    def to_algebraic(self) -> str:
        return f"{chr(self.file + ord('a') - 1)}{self.rank}"

    def is_within_bounds(self) -> bool:
        return (1 <= self.file <= BOARD_DIMENSIONS[0]) and (
            1 <= self.rank <= BOARD_DIMENSIONS[1]
        )

    def offset(self, df: int, dr: int) -> Square:
        """The square `df` files and `dr` ranks away. Might lie off the board."""
        return Square(self.file + df, self.rank + dr)


def parse_square(name: str) -> Optional[Square]:
    """
    Lookup boundary for user supplied square names.

    Returns None instead of raising when the name is not a square on the board ('k3', 'f9', 'e', ...)
    """
    num_files, num_ranks = BOARD_DIMENSIONS
    if len(name) != 2:
        return None

    file_char, rank_char = name[0], name[1]
    if file_char not in ascii_lowercase[:num_files]:
        return None
    if rank_char not in "123456789"[:num_ranks]:
        return None
    return Square.from_algebraic(name)


# FEN reading order: 8th rank first, a-file first
ALL_SQUARES: tuple[Square, ...] = tuple(
    Square(file, rank)
    for rank in range(BOARD_DIMENSIONS[1], 0, -1)
    for file in range(1, BOARD_DIMENSIONS[0] + 1)
)
