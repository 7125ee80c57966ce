"""Board - piece placement on an 8x8 board."""

from __future__ import annotations

from chessrules.core.enums import Color, PieceType
from chessrules.core.piece import Piece
from chessrules.core.types import ALL_SQUARES, Square

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class Board:
    """Mutable 64-square grid holding at most one piece per square."""

    __slots__ = ("_squares",)

    def __init__(self) -> None:
        self._squares: list[Piece | None] = [None] * 64

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        return self._squares[sq.index]

    def __setitem__(self, sq: Square, piece: Piece | None) -> None:
        self._squares[sq.index] = piece

    def get_piece(self, sq: Square) -> Piece | None:
        return self._squares[sq.index]

    def set_piece(self, sq: Square, piece: Piece | None) -> None:
        """Place *piece* on *sq*; ``None`` clears the square."""
        self._squares[sq.index] = piece

    def is_empty(self, sq: Square) -> bool:
        return self._squares[sq.index] is None

    # -- Query helpers ------------------------------------------------------

    def pieces(self, color: Color) -> list[Square]:
        """Squares occupied by *color*, a1 first, row by row."""
        return [
            sq
            for sq, piece in zip(ALL_SQUARES, self._squares)
            if piece is not None and piece.color == color
        ]

    def king_square(self, color: Color) -> Square:
        """Return the single king square for *color*.

        Raises ``ValueError`` when the king is missing or duplicated.
        """
        king = Piece(color, PieceType.KING)
        found = [sq for sq, piece in zip(ALL_SQUARES, self._squares) if piece == king]
        if not found:
            raise ValueError(f"No {color.name} king on board")
        if len(found) > 1:
            names = ", ".join(sq.name for sq in found)
            raise ValueError(f"More than one {color.name} king on board: {names}")
        return found[0]

    # -- Mutation / copying -------------------------------------------------

    def copy(self) -> Board:
        b = Board()
        b._squares = self._squares.copy()
        return b

    def clear(self) -> None:
        self._squares = [None] * 64

    def reset(self) -> None:
        """Restore the standard starting position."""
        self.clear()
        for col, pt in enumerate(_BACK_RANK, start=1):
            self[Square(1, col)] = Piece(Color.WHITE, pt)
            self[Square(2, col)] = Piece(Color.WHITE, PieceType.PAWN)
            self[Square(7, col)] = Piece(Color.BLACK, PieceType.PAWN)
            self[Square(8, col)] = Piece(Color.BLACK, pt)

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        b = cls()
        b.reset()
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._squares == other._squares

    def __repr__(self) -> str:
        rows: list[str] = []
        for row in range(8, 0, -1):
            cells = []
            for col in range(1, 9):
                p = self[Square(row, col)]
                cells.append(str(p) if p else ".")
            rows.append(f"{row} {' '.join(cells)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
