"""Pseudo-legal move geometry for single pieces.

Nothing here knows about check: a move is produced if the piece could make it
on an otherwise rule-free board. King safety is layered on top by
:class:`chessrules.game.state.Game`.
"""

from __future__ import annotations

from chessrules.core.board import Board
from chessrules.core.enums import Color, PieceType
from chessrules.core.move import Move
from chessrules.core.types import ALL_SQUARES, Square

# (drow, dcol) pairs
KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = BISHOP_DIRS + ROOK_DIRS

PROMOTION_TYPES: tuple[PieceType, ...] = (
    PieceType.QUEEN,
    PieceType.ROOK,
    PieceType.BISHOP,
    PieceType.KNIGHT,
)


# -- Precomputed lookup tables ---------------------------------------------


def _build_targets(
    offsets: tuple[tuple[int, int], ...],
) -> tuple[tuple[Square, ...], ...]:
    targets: list[tuple[Square, ...]] = []
    for sq in ALL_SQUARES:
        reachable = (sq.offset(dr, dc) for dr, dc in offsets)
        targets.append(tuple(to_sq for to_sq in reachable if to_sq is not None))
    return tuple(targets)


def _build_rays(
    directions: tuple[tuple[int, int], ...],
) -> tuple[tuple[tuple[Square, ...], ...], ...]:
    rays_per_square: list[tuple[tuple[Square, ...], ...]] = []
    for sq in ALL_SQUARES:
        square_rays: list[tuple[Square, ...]] = []
        for dr, dc in directions:
            ray: list[Square] = []
            to_sq = sq.offset(dr, dc)
            while to_sq is not None:
                ray.append(to_sq)
                to_sq = to_sq.offset(dr, dc)
            square_rays.append(tuple(ray))
        rays_per_square.append(tuple(square_rays))
    return tuple(rays_per_square)


_KNIGHT_TARGETS = _build_targets(KNIGHT_OFFSETS)
_KING_TARGETS = _build_targets(KING_OFFSETS)

_BISHOP_RAYS = _build_rays(BISHOP_DIRS)
_ROOK_RAYS = _build_rays(ROOK_DIRS)
_QUEEN_RAYS = _build_rays(QUEEN_DIRS)


class PieceMoveGenerator:
    """Enumerates candidate moves for the piece standing on a square."""

    __slots__ = ("_board",)

    def __init__(self, board: Board) -> None:
        self._board = board

    def moves_from(self, sq: Square) -> list[Move]:
        """Pseudo-legal moves of the piece on *sq* (empty list if none)."""
        piece = self._board[sq]
        if piece is None:
            return []

        moves: list[Move] = []
        color = piece.color
        pt = piece.piece_type
        idx = sq.index

        if pt == PieceType.PAWN:
            self._gen_pawn(sq, color, moves)
        elif pt == PieceType.KNIGHT:
            self._gen_step(sq, color, _KNIGHT_TARGETS[idx], moves)
        elif pt == PieceType.BISHOP:
            self._gen_sliding(sq, color, _BISHOP_RAYS[idx], moves)
        elif pt == PieceType.ROOK:
            self._gen_sliding(sq, color, _ROOK_RAYS[idx], moves)
        elif pt == PieceType.QUEEN:
            self._gen_sliding(sq, color, _QUEEN_RAYS[idx], moves)
        else:
            self._gen_step(sq, color, _KING_TARGETS[idx], moves)
        return moves

    # -- Piece-specific generators (private) -------------------------------

    def _gen_pawn(self, sq: Square, color: Color, moves: list[Move]) -> None:
        board = self._board
        forward = color.forward
        promotion_row = color.promotion_row

        one_step = sq.offset(forward, 0)
        if one_step is None:
            # A pawn parked on its own promotion row cannot move.
            return

        if board.is_empty(one_step):
            self._add_pawn_move(sq, one_step, promotion_row, moves)
            if sq.row == color.pawn_row:
                two_step = one_step.offset(forward, 0)
                if two_step is not None and board.is_empty(two_step):
                    moves.append(Move(sq, two_step))

        for dcol in (-1, 1):
            cap_sq = sq.offset(forward, dcol)
            if cap_sq is None:
                continue
            target = board[cap_sq]
            if target is not None and target.color != color:
                self._add_pawn_move(sq, cap_sq, promotion_row, moves)

    @staticmethod
    def _add_pawn_move(
        sq: Square, to_sq: Square, promotion_row: int, moves: list[Move]
    ) -> None:
        if to_sq.row == promotion_row:
            for pt in PROMOTION_TYPES:
                moves.append(Move(sq, to_sq, pt))
        else:
            moves.append(Move(sq, to_sq))

    def _gen_step(
        self,
        sq: Square,
        color: Color,
        targets: tuple[Square, ...],
        moves: list[Move],
    ) -> None:
        board = self._board
        for to_sq in targets:
            target = board[to_sq]
            if target is None or target.color != color:
                moves.append(Move(sq, to_sq))

    def _gen_sliding(
        self,
        sq: Square,
        color: Color,
        rays: tuple[tuple[Square, ...], ...],
        moves: list[Move],
    ) -> None:
        board = self._board
        for ray in rays:
            for to_sq in ray:
                target = board[to_sq]
                if target is None:
                    moves.append(Move(sq, to_sq))
                    continue
                if target.color != color:
                    moves.append(Move(sq, to_sq))
                break


def pseudo_legal_moves(board: Board, sq: Square) -> list[Move]:
    """Shorthand for ``PieceMoveGenerator(board).moves_from(sq)``."""
    return PieceMoveGenerator(board).moves_from(sq)
