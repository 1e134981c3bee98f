"""
Geometry/Base movement and capturing/attacking rules

Key idea: Use strategy pattern to define pseudo-legal move sets for each piece type.
Attacks are not a separate set of rules: a square is attacked when it shows up in the attacker's pseudo-legal moves.

Legality (not leaving your own king in check) is checked later by Game
"""

from dataclasses import dataclass
from typing import Callable, Optional, Protocol, Self

from src.chess.pieces import EMPTY_SQUARE, FEN_TO_PIECE, Color, Piece, PieceType
from src.chess.square import BOARD_DIMENSIONS, Square


class Board(Protocol):
    """Just the parts the movement strategies need"""

    def piece(self, square: Square) -> Piece: ...
    def locate_color(self, color: Color) -> list[Square]: ...


Vector = tuple[int, int]


@dataclass(frozen=True)
class Move:
    """basic definition of a move to be made"""

    from_square: Square
    to_square: Square

    @classmethod
    def from_uci(cls, uci: str) -> Self:
        """
        The 4 character move requests: <from_square><to_square>

        examples:
        * "e2e4": move the piece that was on e2 to e4
        * "c7d8": the pawn on c7 takes on d8 (and promotes, that is decided when the move is applied)
        """
        from_sq = Square.from_algebraic(uci[:2])
        to_sq = Square.from_algebraic(uci[2:4])
        return cls(from_sq, to_sq)


# --- MOVEMENT RULES ---
def raycasting_move(
    square: Square, board: Board, directions: list[Vector]
) -> list[Move]:
    """
    Raycasting algorithm
    -----

    ---
    The main trick we use to check the 'line of sight of a piece'.
    We define move directions and move along them until we hit another piece or
    the edge of the board. Every ray is resolved on its own.
    """

    player_color = board.piece(square).color
    opponent_color = player_color.opponent

    moves: list[Move] = []
    for df, dr in directions:
        target_square = square
        while True:
            target_square = target_square.offset(df, dr)
            if not target_square.is_within_bounds():
                break

            piece_found = board.piece(target_square)
            if not piece_found.is_empty:
                # only need to add the first occupied square found if it is the opponent's: then it can be captured.
                if piece_found.color == opponent_color:
                    moves.append(Move(from_square=square, to_square=target_square))
                break

            moves.append(Move(from_square=square, to_square=target_square))
    return moves


def single_step_move(square: Square, board: Board, deltas: list[Vector]) -> list[Move]:
    """Raycasting is for sliding pieces. This is the equivalent for kings and knights that just jump a single step along a direction"""
    player_color = board.piece(square).color
    moves: list[Move] = []
    for df, dr in deltas:
        target_square = square.offset(df, dr)
        if not target_square.is_within_bounds():
            continue

        square_available = board.piece(target_square).color != player_color
        if square_available:
            moves.append(Move(from_square=square, to_square=target_square))

    return moves


# White moves UP the board, Black moves DOWN the board
PAWN_DIRECTION: dict[Color, int] = {Color.WHITE: 1, Color.BLACK: -1}
PAWN_STARTING_RANK: dict[Color, int] = {Color.WHITE: 2, Color.BLACK: BOARD_DIMENSIONS[1] - 1}
PROMOTION_RANK: dict[Color, int] = {Color.WHITE: BOARD_DIMENSIONS[1], Color.BLACK: 1}


def candidate_pawn_moves(square: Square, board: Board) -> list[Move]:
    """
    A pawn:
    - moves by a single square forward, only onto an empty square.
    - It can move by two in their first move (so when on their starting rank), if both squares ahead are empty
    - takes diagonally, only when an opponent's piece stands there

    NOTE: En passant is not generated. Promotion is applied by the Game when the pawn lands on the last rank.
    """
    player_color = board.piece(square).color
    direction = PAWN_DIRECTION[player_color]
    moves: list[Move] = []

    # Pawn pushes
    one_step = square.offset(0, direction)
    if one_step.is_within_bounds() and board.piece(one_step).is_empty:
        moves.append(Move(from_square=square, to_square=one_step))

        two_steps = square.offset(0, 2 * direction)
        on_starting_rank = square.rank == PAWN_STARTING_RANK[player_color]
        if on_starting_rank and board.piece(two_steps).is_empty:
            moves.append(Move(from_square=square, to_square=two_steps))

    # pawns take diagonally:
    for df in (1, -1):
        target_square = square.offset(df, direction)
        if not target_square.is_within_bounds():
            continue
        if board.piece(target_square).color == player_color.opponent:
            moves.append(Move(from_square=square, to_square=target_square))
    return moves


KNIGHT_DELTAS: list[Vector] = [
    (2, 1),
    (2, -1),
    (-2, 1),
    (-2, -1),
    (1, 2),
    (1, -2),
    (-1, 2),
    (-1, -2),
]
KING_DELTAS: list[Vector] = [
    (0, 1),
    (0, -1),
    (1, 0),
    (-1, 0),
    (1, 1),
    (1, -1),
    (-1, 1),
    (-1, -1),
]
STRAIGHTS: list[Vector] = [(1, 0), (-1, 0), (0, 1), (0, -1)]
DIAGONALS: list[Vector] = [(1, 1), (-1, 1), (1, -1), (-1, -1)]


def candidate_knight_moves(square: Square, board: Board) -> list[Move]:
    """Knights always move such that |delta_rank| + |delta_file| = 3"""
    return single_step_move(square, board, KNIGHT_DELTAS)


def candidate_bishop_moves(square: Square, board: Board) -> list[Move]:
    """Bishops move diagonally: |delta_rank| = |delta_file|"""
    return raycasting_move(square, board, DIAGONALS)


def candidate_rook_moves(square: Square, board: Board) -> list[Move]:
    """Rooks move either horizontally or vertically"""
    return raycasting_move(square, board, STRAIGHTS)


def candidate_queen_moves(square: Square, board: Board) -> list[Move]:
    """
    The Queen combines the rook moves (horizontal + vertical movements) and bishop moves (diagonal movement)
    """
    diagonal_moves = candidate_bishop_moves(square, board)
    horizontal_and_vertical_moves = candidate_rook_moves(square, board)
    return diagonal_moves + horizontal_and_vertical_moves


def candidate_king_moves(square: Square, board: Board) -> list[Move]:
    """
    The king can move by a single square at the time.

    NOTE: no check filtering here (attack detection relies on this), and no castling.
    """
    return single_step_move(square, board, KING_DELTAS)


# -- STRATEGY PATTERN: MOVEMENT RULES ---
CandidateMovesFn = Callable[[Square, Board], list[Move]]
MOVEMENT_RULES: dict[PieceType, CandidateMovesFn] = {
    PieceType.PAWN: candidate_pawn_moves,
    PieceType.KNIGHT: candidate_knight_moves,
    PieceType.BISHOP: candidate_bishop_moves,
    PieceType.ROOK: candidate_rook_moves,
    PieceType.QUEEN: candidate_queen_moves,
    PieceType.KING: candidate_king_moves,
}


def pseudo_legal_moves(board: Board, from_square: Square) -> set[Square]:
    """
    All destination squares of the piece on `from_square`, ignoring whether the move leaves its own king in check.

    An empty or off-board square simply has no moves.
    """
    if not from_square.is_within_bounds():
        return set()

    piece = board.piece(from_square)
    if piece.is_empty:
        return set()

    movement_rule = MOVEMENT_RULES[piece.type]
    return {move.to_square for move in movement_rule(from_square, board)}


# --- CAPTURING RULES / ATTACKING RULES ---
def squares_attacking(board: Board, target: Square, by_color: Color) -> set[Square]:
    """
    The squares holding a piece of `by_color` that could move onto `target`.

    NOTE: Pawn pushes never reach an occupied square, so for a king (always occupied) only the diagonal takes count.
    """
    return {
        square
        for square in board.locate_color(by_color)
        if target in pseudo_legal_moves(board, square)
    }


# -- PAWN PROMOTION --
PROMOTION_PIECE = PieceType.QUEEN


def is_pawn_move_to_promotion_square(moving_piece: Piece, to_square: Square) -> bool:
    """check if a pawn reaches the last rank (as seen from its own side of the board)"""
    if moving_piece.type != PieceType.PAWN:
        return False
    return to_square.rank == PROMOTION_RANK[moving_piece.color]


# -- NOTATION OF THE MOVE HISTORY --
CAPTURE_SEPARATOR = "x"
QUIET_SEPARATOR = "-"
PIECE_TO_LETTER: dict[PieceType, str] = {
    piece_type: letter.upper() for letter, piece_type in FEN_TO_PIECE.items()
}


@dataclass(frozen=True)
class NotatedMove:
    """
    A move the way it is written into the move history
    ----

    <from_square><separator><to_square>[promotion letter]

    examples:
    * "e2-e4": quiet move
    * "e4xd5": capture
    * "c7xd8Q": capture that promoted the pawn into a queen

    The entry carries everything needed to take the move back (the captured piece itself sits on the captured pieces stack).
    """

    move: Move
    is_capture: bool
    promote_to: Optional[PieceType] = None

    def to_notation(self) -> str:
        separator = CAPTURE_SEPARATOR if self.is_capture else QUIET_SEPARATOR
        promotion = PIECE_TO_LETTER[self.promote_to] if self.promote_to else ""
        return f"{self.move.from_square.to_algebraic()}{separator}{self.move.to_square.to_algebraic()}{promotion}"

    @classmethod
    def from_notation(cls, notation: str) -> Self:
        is_capture = CAPTURE_SEPARATOR in notation
        separator = CAPTURE_SEPARATOR if is_capture else QUIET_SEPARATOR
        from_name, to_part = notation.split(separator)

        # a trailing (uppercase) letter is the piece the pawn promoted into
        promote_to: Optional[PieceType] = None
        if to_part[-1].isalpha():
            promote_to = FEN_TO_PIECE[to_part[-1].lower()]
            to_part = to_part[:-1]

        move = Move(Square.from_algebraic(from_name), Square.from_algebraic(to_part))
        return cls(move, is_capture, promote_to)


@dataclass(frozen=True)
class AcceptedMove:
    """Snapshot of the moving pieces before the board gets updated."""

    move: Move
    moving_piece: Piece
    captured_piece: Piece

    @classmethod
    def from_move_and_board(cls, move: Move, board: Board) -> Self:
        return cls(
            move=move,
            moving_piece=board.piece(move.from_square),
            captured_piece=board.piece(move.to_square),
        )

    @property
    def is_capture(self) -> bool:
        return self.captured_piece != EMPTY_SQUARE

    @property
    def promote_to(self) -> Optional[PieceType]:
        if is_pawn_move_to_promotion_square(self.moving_piece, self.move.to_square):
            return PROMOTION_PIECE
        return None

    @property
    def landing_piece(self) -> Piece:
        """The piece that ends up on the target square (a queen, when a pawn promotes)"""
        if self.promote_to is not None:
            return self.moving_piece.promoted_to(self.promote_to)
        return self.moving_piece

    def notated(self) -> NotatedMove:
        return NotatedMove(self.move, self.is_capture, self.promote_to)
