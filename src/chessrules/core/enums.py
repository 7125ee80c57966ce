"""Core enumerations for the chess domain."""

from __future__ import annotations

from enum import IntEnum


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    @property
    def forward(self) -> int:
        """Row step a pawn of this color advances by."""
        return 1 if self == Color.WHITE else -1

    @property
    def pawn_row(self) -> int:
        """Row pawns start on and may double-step from."""
        return 2 if self == Color.WHITE else 7

    @property
    def promotion_row(self) -> int:
        return 8 if self == Color.WHITE else 1

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Chess piece types ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6


class GameResult(IntEnum):
    """Outcome of a game as seen from the side to move."""

    IN_PROGRESS = 0
    WHITE_WINS = 1
    BLACK_WINS = 2
    DRAW = 3
