"""
The Game is the entrypoint into the domain layer for the service layer.
It is responsible for orchestrating all the business logic required to play (or take back) a turn of the board game.

A Game is a value: every transition (accepted move, rejected move, undo) hands back a new Game and leaves the old one untouched.
"""

import logging
from dataclasses import dataclass, replace
from typing import Optional, Self

from src.chess.board import Board
from src.chess.fen import FENState
from src.chess.moves import AcceptedMove, Move, NotatedMove, pseudo_legal_moves
from src.chess.pieces import Color, Piece, PieceType
from src.chess.square import Square, parse_square
from src.core.exceptions import GameStateError
from src.core.models import GameModel
from src.core.shared_types import Status

logger = logging.getLogger(__name__)

# --- Messages / rejection reasons. Users (and tests) rely on the exact wording.
CHECKMATE_MESSAGES: dict[Color, str] = {
    Color.WHITE: "Checkmate! White wins.",
    Color.BLACK: "Checkmate! Black wins.",
}
STALEMATE_MESSAGE = "Stalemate! It's a draw."
NOTHING_TO_UNDO_MESSAGE = "no more moves to undo"
NOT_YOUR_TURN_REASON = "it's not your turn"
OBSERVE_CHECK_REASON = "observe check"

TERMINAL_STATUSES = (Status.CHECKMATE, Status.DRAW)


@dataclass(frozen=True)
class Accepted:
    """The move request passed every check"""

    move: str


@dataclass(frozen=True)
class Rejected:
    """The move request failed one of the checks. `reason` is shown to the user."""

    reason: str


MoveCheck = Accepted | Rejected


def legal_moves(board: Board, from_square: str) -> set[str]:
    """
    Squares the piece on `from_square` can move to, for highlighting in a UI.

    NOTE: pseudo-legal only, moves that leave your own king in check are still part of the set.
    """
    square = parse_square(from_square)
    if square is None:
        return set()
    return {target.to_algebraic() for target in pseudo_legal_moves(board, square)}


def _sorted_squares(squares: frozenset[Square]) -> list[str]:
    return sorted(square.to_algebraic() for square in squares)


@dataclass(frozen=True)
class Game:
    # --- DOMAIN LAYER API CALLED BY SERVICE---

    board: Board
    turn: Color
    castling: str
    en_passant: str
    moves: tuple[str, ...] = ()  # notated moves, most recent first
    captured: tuple[Piece, ...] = ()  # most recent first
    checks: frozenset[Square] = frozenset()
    message: str = ""
    status: Status = Status.RUNNING

    @classmethod
    def new_game(cls, fen: Optional[str] = None) -> Self:
        """Start from the given position (standard starting position by default). A malformed FEN raises InvalidFENError."""
        state = FENState.starting_position() if fen is None else FENState.from_fen(fen)
        logger.debug("new game from %r", state.to_fen())
        return cls(
            board=state.board,
            turn=state.color_to_move,
            castling=state.castling,
            en_passant=state.en_passant,
            checks=frozenset(state.board.checking_squares(state.color_to_move)),
        )

    @classmethod
    def from_model(cls, model: GameModel) -> Self:
        """Define how to construct a Game from the information the Service layer actually has"""
        if model.status not in [status.value for status in Status]:
            raise GameStateError(
                f"Invalid status code: {model.status!r}. \nPick one from {','.join(status.value for status in Status)}"
            )

        state = FENState.from_fen(model.fen)
        return cls(
            board=state.board,
            turn=state.color_to_move,
            castling=state.castling,
            en_passant=state.en_passant,
            moves=tuple(model.moves),
            captured=tuple(Piece.from_fen(letter) for letter in model.captured),
            checks=frozenset(Square.from_algebraic(name) for name in model.checks),
            message=model.message,
            status=Status(model.status),
        )

    def to_model(self) -> GameModel:
        """Encode back into a format the Service layer uses"""
        return GameModel(
            fen=self.to_fen(),
            moves=list(self.moves),
            captured=[piece.to_fen() for piece in self.captured],
            checks=_sorted_squares(self.checks),
            message=self.message,
            status=self.status.value,
        )

    def to_fen(self) -> str:
        return FENState(self.board, self.turn, self.castling, self.en_passant).to_fen()

    @property
    def is_over(self) -> bool:
        return self.status in TERMINAL_STATUSES

    @property
    def winner(self) -> Optional[Color]:
        """
        Only defined for checkmate.
        The side that is to move just got mated, so the opponent must be the winner
        """
        if self.status != Status.CHECKMATE:
            return None
        return self.turn.opponent

    def check_move(self, move: str) -> MoveCheck:
        """
        Validate a move request like "e2e4" without changing anything
        -----

        1. both squares must exist
        2. there must be a piece to move
        3. it must be your piece
        4. the piece must be able to move there
        5. you cannot leave your own king in check
        """
        from_name, to_name = move[:2], move[2:]
        from_square = parse_square(from_name)
        to_square = parse_square(to_name)
        if from_square is None or to_square is None:
            return Rejected(f"invalid coordinates: <{from_name}{to_name}>")

        piece = self.board.piece(from_square)
        if piece.is_empty:
            return Rejected(f"no piece at square <{from_name}>")

        if piece.color != self.turn:
            return Rejected(NOT_YOUR_TURN_REASON)

        if to_square not in pseudo_legal_moves(self.board, from_square):
            return Rejected(f"illegal move {move}")

        if self._is_putting_yourself_in_check(Move(from_square, to_square)):
            return Rejected(OBSERVE_CHECK_REASON)

        return Accepted(move)

    def make_move(self, move: str) -> Self:
        """
        Attempt to make a move
        -----

        A finished game (checkmate / draw) ignores every request.
        A rejected move only marks the game invalid and explains why.
        """
        if self.is_over:
            return self
        return self.accept_move(self.check_move(move))

    def accept_move(self, result: MoveCheck) -> Self:
        """
        Apply the outcome of `check_move`
        -----

        1. update the board (a pawn reaching the last rank becomes a queen)
        2. register the captured piece (if any)
        3. update the (history of) moves
        4. hand the turn to the opponent and find out if they are in check
        5. update game status (if needed)
        """
        if isinstance(result, Rejected):
            logger.debug("rejected move: %s", result.reason)
            return replace(self, status=Status.INVALID, message=result.reason)

        # Store move info before update
        accepted_move = AcceptedMove.from_move_and_board(
            Move.from_uci(result.move), self.board
        )
        notation = accepted_move.notated().to_notation()

        board = self.board.copy()
        board.move_piece(accepted_move.move, accepted_move.landing_piece)

        captured = (
            (accepted_move.captured_piece, *self.captured)
            if accepted_move.is_capture
            else self.captured
        )
        next_turn = self.turn.opponent
        after_move = replace(
            self,
            board=board,
            turn=next_turn,
            moves=(notation, *self.moves),
            captured=captured,
            checks=frozenset(board.checking_squares(next_turn)),
            message=notation,
            status=Status.RUNNING,
        )
        logger.debug("accepted move %s", notation)
        return after_move._with_updated_status()

    def undo_move(self) -> Self:
        """
        Take back the last move
        -----

        The move history tells which squares were involved, whether something got captured (the 'x')
        and whether a pawn got promoted (the trailing letter). The captured piece comes off the captured pieces stack.

        NOTE: the position we return to had a move accepted from it, so it cannot have been checkmate or stalemate: status is running again.
        Status and checks of the undone position are never carried over: checks get recomputed for the side to move.
        """
        if not self.moves:
            return replace(
                self, status=Status.INVALID, message=NOTHING_TO_UNDO_MESSAGE
            )

        last_notation, *earlier_moves = self.moves
        last_move = NotatedMove.from_notation(last_notation)
        from_square = last_move.move.from_square
        to_square = last_move.move.to_square

        board = self.board.copy()
        moved_piece = board.piece(to_square)
        if last_move.promote_to is not None:
            moved_piece = Piece(PieceType.PAWN, moved_piece.color)
        board.place_piece(moved_piece, from_square)

        captured = self.captured
        if last_move.is_capture:
            captured_piece, *earlier_captures = self.captured
            board.place_piece(captured_piece, to_square)
            captured = tuple(earlier_captures)
        else:
            board.remove_piece(to_square)

        previous_turn = self.turn.opponent
        logger.debug("undid move %s", last_notation)
        return replace(
            self,
            board=board,
            turn=previous_turn,
            moves=tuple(earlier_moves),
            captured=captured,
            checks=frozenset(board.checking_squares(previous_turn)),
            message=f"undid move {last_notation}",
            status=Status.RUNNING,
        )

    # -- PRIVATE HELPERS ---
    def _with_updated_status(self) -> Self:
        """Performs checks to see if game has ended and changes status accordingly.

        NOTE the turn has already been handed over. At this point the turn player is the opponent of the player that just moved.
        """
        if self._has_legal_move(self.turn):
            return self

        if self.checks:
            winner = self.turn.opponent
            logger.info("checkmate, %s wins", winner.name.lower())
            return replace(
                self, status=Status.CHECKMATE, message=CHECKMATE_MESSAGES[winner]
            )

        logger.info("stalemate")
        return replace(self, status=Status.DRAW, message=STALEMATE_MESSAGE)

    def _is_putting_yourself_in_check(self, move: Move) -> bool:
        """Return True if the move leaves the mover's king in check

        plan:
        1. Copy the board
        2. make the candidate move (including a promotion)
        3. determine if king is in check on the new board
        """
        board = self.board.copy()
        player_color = board.piece(move.from_square).color
        accepted_move = AcceptedMove.from_move_and_board(move, board)
        board.move_piece(move, accepted_move.landing_piece)
        return board.is_check(player_color)

    def _has_legal_move(self, color: Color) -> bool:
        """
        Try every pseudo-legal move of every piece and see if any of them keeps the king safe.
        Stops at the first one found.
        """
        for from_square in self.board.locate_color(color):
            for to_square in pseudo_legal_moves(self.board, from_square):
                if not self._is_putting_yourself_in_check(Move(from_square, to_square)):
                    return True
        return False
