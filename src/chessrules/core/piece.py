"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass

from chessrules.core.enums import Color, PieceType

_TYPE_CHARS: dict[PieceType, str] = {
    PieceType.PAWN: "p",
    PieceType.KNIGHT: "n",
    PieceType.BISHOP: "b",
    PieceType.ROOK: "r",
    PieceType.QUEEN: "q",
    PieceType.KING: "k",
}
_CHAR_TYPES: dict[str, PieceType] = {ch: pt for pt, ch in _TYPE_CHARS.items()}

# White glyphs start at U+2654 in the order K Q R B N P; black ones follow.
_GLYPH_ORDER: tuple[PieceType, ...] = (
    PieceType.KING,
    PieceType.QUEEN,
    PieceType.ROOK,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.PAWN,
)


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable ``(color, piece_type)`` pair."""

    color: Color
    piece_type: PieceType

    def __str__(self) -> str:
        """FEN character (uppercase = white, lowercase = black)."""
        ch = _TYPE_CHARS[self.piece_type]
        return ch.upper() if self.color == Color.WHITE else ch

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """Create piece from FEN character, e.g. 'N' → white knight."""
        ptype = _CHAR_TYPES.get(char.lower()) if len(char) == 1 else None
        if ptype is None:
            raise ValueError(f"Invalid piece character: {char!r}")
        return cls(Color.WHITE if char.isupper() else Color.BLACK, ptype)

    @property
    def symbol(self) -> str:
        """Unicode chess symbol, e.g. ♞."""
        base = 0x2654 if self.color == Color.WHITE else 0x265A
        return chr(base + _GLYPH_ORDER.index(self.piece_type))
