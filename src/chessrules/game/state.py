"""Game state machine — turn, board, legal moves and check queries."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass

from chessrules.core.board import Board
from chessrules.core.enums import Color, GameResult
from chessrules.core.fen import parse_fen, to_fen
from chessrules.core.move import Move
from chessrules.core.move_generator import PieceMoveGenerator
from chessrules.core.piece import Piece
from chessrules.core.types import Square
from chessrules.game.errors import InvalidMove, MoveRejection

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class MoveResult:
    """Outcome of :meth:`Game.apply_move`.

    Exactly one of the two shapes occurs: ``error`` is ``None`` and the move
    was played, or ``error`` holds the :class:`InvalidMove` and nothing
    changed.
    """

    move: Move
    captured: Piece | None = None
    error: InvalidMove | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def raise_if_invalid(self) -> MoveResult:
        if self.error is not None:
            raise self.error
        return self


class Game:
    """Single chess game: the side to move plus an exclusively owned board.

    Callers never receive the live board: :attr:`board` hands out a copy and
    :meth:`set_board` stores one. Hypothetical moves are played on the private
    board and always undone before control returns.

    Precondition for every check-related query: the board holds exactly one
    king of each color being examined. A missing or duplicated king raises
    ``ValueError``.

    Not thread-safe; a host running many games must serialise calls per
    instance.
    """

    __slots__ = ("_board", "_turn", "_generator")

    def __init__(self, board: Board | None = None, turn: Color = Color.WHITE) -> None:
        self._board = board.copy() if board is not None else Board.initial()
        self._turn = turn
        self._generator = PieceMoveGenerator(self._board)

    @classmethod
    def from_fen(cls, fen: str) -> Game:
        """Build a game from FEN placement and side to move."""
        board, side = parse_fen(fen)
        return cls(board, side)

    # ── Accessors ────────────────────────────────────────────────────────

    @property
    def turn(self) -> Color:
        return self._turn

    @turn.setter
    def turn(self, color: Color) -> None:
        self._turn = color

    @property
    def board(self) -> Board:
        """Snapshot of the current board; changes to it do not affect the game."""
        return self._board.copy()

    def set_board(self, board: Board) -> None:
        """Replace the board wholesale. No invariants are checked."""
        self._board = board.copy()
        self._generator = PieceMoveGenerator(self._board)
        _LOGGER.debug("Board replaced:\n%r", self._board)

    def to_fen(self) -> str:
        return to_fen(self._board, self._turn)

    # ── Move queries ─────────────────────────────────────────────────────

    def legal_moves(self, square: Square) -> list[Move] | None:
        """Legal moves of the piece on *square*, or ``None`` if it is empty.

        Every candidate is tried on the board and dropped if it leaves the
        mover's own king in check. The board is unchanged afterwards.
        """
        piece = self._board[square]
        if piece is None:
            return None

        legal: list[Move] = []
        for move in self._generator.moves_from(square):
            with self._simulated(move):
                if not self.is_in_check(piece.color):
                    legal.append(move)
        return legal

    def all_legal_moves(self, color: Color | None = None) -> list[Move]:
        """Every legal move for *color* (default: side to move)."""
        side = self._turn if color is None else color
        moves: list[Move] = []
        for sq in self._board.pieces(side):
            moves.extend(self.legal_moves(sq) or ())
        return moves

    # ── Check / mate / stalemate ─────────────────────────────────────────

    def is_in_check(self, color: Color) -> bool:
        """Is *color*'s king attacked by any opposing pseudo-legal move?"""
        king_sq = self._board.king_square(color)
        for sq in self._board.pieces(color.opposite):
            for move in self._generator.moves_from(sq):
                if move.end == king_sq:
                    return True
        return False

    def is_in_checkmate(self, color: Color) -> bool:
        return self.is_in_check(color) and not self._has_legal_move(color)

    def is_in_stalemate(self, color: Color) -> bool:
        return not self.is_in_check(color) and not self._has_legal_move(color)

    @property
    def result(self) -> GameResult:
        """Outcome for the side to move.

        Only checkmate and stalemate end the game here; no other draw rules
        are applied.
        """
        side = self._turn
        if self._has_legal_move(side):
            return GameResult.IN_PROGRESS
        if not self.is_in_check(side):
            return GameResult.DRAW
        return GameResult.BLACK_WINS if side == Color.WHITE else GameResult.WHITE_WINS

    # ── Move application ─────────────────────────────────────────────────

    def apply_move(self, move: Move) -> MoveResult:
        """Validate and play *move*.

        Returns a :class:`MoveResult`; on rejection it carries the
        :class:`InvalidMove` and neither board nor turn has changed.
        """
        piece = self._board[move.start]
        if piece is None:
            return self._reject(move, MoveRejection.EMPTY_SQUARE)
        if piece.color != self._turn:
            return self._reject(move, MoveRejection.WRONG_TURN)
        if move not in (self.legal_moves(move.start) or ()):
            return self._reject(move, MoveRejection.ILLEGAL)

        captured = self._board[move.end]
        self._board[move.end] = _placed_piece(piece, move)
        self._board[move.start] = None
        self._turn = self._turn.opposite

        _LOGGER.debug("Applied %s; %s to move", move, self._turn)
        return MoveResult(move, captured=captured)

    def make_move(self, move: Move) -> MoveResult:
        """Like :meth:`apply_move` but raises :class:`InvalidMove` on rejection."""
        return self.apply_move(move).raise_if_invalid()

    # ── Internal ─────────────────────────────────────────────────────────

    def _has_legal_move(self, color: Color) -> bool:
        for sq in self._board.pieces(color):
            if self.legal_moves(sq):
                return True
        return False

    @contextmanager
    def _simulated(self, move: Move) -> Iterator[None]:
        """Play *move* on the private board for the duration of the block."""
        board = self._board
        moving = board[move.start]
        captured = board[move.end]
        assert moving is not None
        board[move.end] = _placed_piece(moving, move)
        board[move.start] = None
        try:
            yield
        finally:
            board[move.start] = moving
            board[move.end] = captured

    def _reject(self, move: Move, reason: MoveRejection) -> MoveResult:
        _LOGGER.debug("Rejected %s (%s)", move, reason.name)
        return MoveResult(move, error=InvalidMove(move, reason))

    def __repr__(self) -> str:
        return f"Game(turn={self._turn.name}, fen={self.to_fen()!r})"


def _placed_piece(piece: Piece, move: Move) -> Piece:
    if move.promotion is None:
        return piece
    return Piece(piece.color, move.promotion)
