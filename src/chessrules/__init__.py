"""Chess rules engine: legal moves, turn order, check, checkmate and stalemate."""

from chessrules.core import (
    STARTING_FEN,
    Board,
    Color,
    GameResult,
    Move,
    Piece,
    PieceType,
    Square,
    parse_square,
)
from chessrules.game import Game, InvalidMove, MoveRejection, MoveResult

__all__ = [
    "STARTING_FEN",
    "Board",
    "Color",
    "Game",
    "GameResult",
    "InvalidMove",
    "Move",
    "MoveRejection",
    "MoveResult",
    "Piece",
    "PieceType",
    "Square",
    "parse_square",
]
