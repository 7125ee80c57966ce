"""FEN parsing and serialization.

Only piece placement and side to move carry meaning here. Castling,
en-passant and clock fields are tolerated so that FEN copied from other
tools loads, but their content is ignored.
"""

from __future__ import annotations

from chessrules.core.board import Board
from chessrules.core.enums import Color
from chessrules.core.piece import Piece
from chessrules.core.types import Square

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w"


def board_from_fen(placement: str) -> Board:
    """Parse the piece-placement field of a FEN string into a :class:`Board`."""
    ranks = placement.split("/")
    if len(ranks) != 8:
        raise ValueError(f"Invalid FEN board (must contain 8 ranks): {placement!r}")

    board = Board()
    for rank_idx, rank_text in enumerate(ranks):
        row = 8 - rank_idx
        col = 1
        for ch in rank_text:
            if ch.isdigit():
                step = int(ch)
                if not (1 <= step <= 8):
                    raise ValueError(f"Invalid FEN digit {ch!r}: {placement!r}")
                col += step
            else:
                if col > 8:
                    raise ValueError(f"Invalid FEN rank width: {placement!r}")
                board[Square(row, col)] = Piece.from_char(ch)
                col += 1
            if col > 9:
                raise ValueError(f"Invalid FEN rank width: {placement!r}")
        if col != 9:
            raise ValueError(f"Invalid FEN rank width: {placement!r}")
    return board


def board_to_fen(board: Board) -> str:
    """Serialise the placement of *board* to FEN."""
    rows: list[str] = []
    for row in range(8, 0, -1):
        empty = 0
        text = ""
        for col in range(1, 9):
            piece = board[Square(row, col)]
            if piece is None:
                empty += 1
            else:
                if empty:
                    text += str(empty)
                    empty = 0
                text += str(piece)
        if empty:
            text += str(empty)
        rows.append(text)
    return "/".join(rows)


def parse_fen(fen: str) -> tuple[Board, Color]:
    """Parse a FEN string into the board and the side to move."""
    parts = fen.split()
    if not (1 <= len(parts) <= 6):
        raise ValueError(f"Invalid FEN (need 1-6 fields): {fen!r}")

    board = board_from_fen(parts[0])

    side_part = parts[1] if len(parts) > 1 else "w"
    if side_part == "w":
        side = Color.WHITE
    elif side_part == "b":
        side = Color.BLACK
    else:
        raise ValueError(f"Invalid FEN side-to-move field: {side_part!r}")
    return board, side


def to_fen(board: Board, side: Color) -> str:
    """Placement plus side-to-move, e.g. ``'8/8/... w'``."""
    side_str = "w" if side == Color.WHITE else "b"
    return f"{board_to_fen(board)} {side_str}"
