"""Move rejection reasons and the InvalidMove error."""

from __future__ import annotations

from enum import IntEnum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from chessrules.core.move import Move


class MoveRejection(IntEnum):
    """Which precondition of ``Game.apply_move`` failed."""

    EMPTY_SQUARE = auto()  # nothing on the start square
    WRONG_TURN = auto()  # piece belongs to the side not on move
    ILLEGAL = auto()  # not among the legal moves of that piece


_MESSAGES: dict[MoveRejection, str] = {
    MoveRejection.EMPTY_SQUARE: "no piece on {start}",
    MoveRejection.WRONG_TURN: "piece on {start} does not belong to the side to move",
    MoveRejection.ILLEGAL: "{move} is not a legal move",
}


class InvalidMove(Exception):
    """A submitted move failed validation; the game is left unchanged."""

    def __init__(self, move: Move, reason: MoveRejection) -> None:
        self.move = move
        self.reason = reason
        detail = _MESSAGES[reason].format(start=move.start.name, move=move)
        super().__init__(f"Invalid move {move}: {detail}")
