"""Core domain layer — board, pieces, moves and per-piece move geometry.

Quick start::

    from chessrules.core import Board, pseudo_legal_moves, parse_square

    board = Board.initial()
    for move in pseudo_legal_moves(board, parse_square("g1")):
        print(move)
"""

from chessrules.core.board import Board
from chessrules.core.enums import Color, GameResult, PieceType
from chessrules.core.fen import (
    STARTING_FEN,
    board_from_fen,
    board_to_fen,
    parse_fen,
    to_fen,
)
from chessrules.core.move import Move
from chessrules.core.move_generator import PieceMoveGenerator, pseudo_legal_moves
from chessrules.core.piece import Piece
from chessrules.core.types import Square, parse_square

__all__ = [
    # Enums
    "Color",
    "GameResult",
    "PieceType",
    # Types / helpers
    "Square",
    "parse_square",
    # Domain objects
    "Board",
    "Move",
    "Piece",
    "PieceMoveGenerator",
    "pseudo_legal_moves",
    # Notation
    "STARTING_FEN",
    "board_from_fen",
    "board_to_fen",
    "parse_fen",
    "to_fen",
]
