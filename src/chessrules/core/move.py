"""Move value object (UCI-style representation)."""

from __future__ import annotations

from dataclasses import dataclass

from chessrules.core.enums import PieceType
from chessrules.core.types import Square, parse_square

_PROMO_CHARS: dict[PieceType, str] = {
    PieceType.KNIGHT: "n",
    PieceType.BISHOP: "b",
    PieceType.ROOK: "r",
    PieceType.QUEEN: "q",
}
_CHAR_PROMOS: dict[str, PieceType] = {ch: pt for pt, ch in _PROMO_CHARS.items()}


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable move; equal by start, end and promotion."""

    start: Square
    end: Square
    promotion: PieceType | None = None

    def __post_init__(self) -> None:
        if self.promotion is not None and self.promotion not in _PROMO_CHARS:
            raise ValueError(f"Cannot promote to {self.promotion.name}")

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        base = f"{self.start.name}{self.end.name}"
        if self.promotion is not None:
            base += _PROMO_CHARS[self.promotion]
        return base

    @property
    def uci(self) -> str:
        """UCI long-algebraic notation."""
        return str(self)

    @classmethod
    def from_uci(cls, text: str) -> Move:
        """Parse ``e2e4`` / ``e7e8q`` style text."""
        if len(text) not in (4, 5):
            raise ValueError(f"Invalid UCI move: {text!r}")
        promotion: PieceType | None = None
        if len(text) == 5:
            promotion = _CHAR_PROMOS.get(text[4])
            if promotion is None:
                raise ValueError(f"Invalid promotion piece in move: {text!r}")
        return cls(parse_square(text[0:2]), parse_square(text[2:4]), promotion)
