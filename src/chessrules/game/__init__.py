"""Game layer — the state machine that enforces turns and move legality.

Quick start::

    from chessrules.core import Move, parse_square
    from chessrules.game import Game

    game = Game()
    result = game.apply_move(Move(parse_square("e2"), parse_square("e4")))
    assert result.ok
"""

from chessrules.game.errors import InvalidMove, MoveRejection
from chessrules.game.state import Game, MoveResult

__all__ = [
    "Game",
    "InvalidMove",
    "MoveRejection",
    "MoveResult",
]
