"""Square value object and coordinate helpers.

Squares use 1-based coordinates:
    row 1 is white's back rank, row 8 is black's back rank
    col 1 is the a-file, col 8 is the h-file
"""

from __future__ import annotations

from dataclasses import dataclass

_FILES = "abcdefgh"


@dataclass(frozen=True, slots=True)
class Square:
    """Immutable board coordinate, equal by ``(row, col)``."""

    row: int
    col: int

    def __post_init__(self) -> None:
        if not (1 <= self.row <= 8 and 1 <= self.col <= 8):
            raise ValueError(f"Square out of range: ({self.row}, {self.col})")

    @property
    def index(self) -> int:
        """Flat index 0–63 (a1=0, h1=7, a8=56)."""
        return (self.row - 1) * 8 + (self.col - 1)

    @property
    def name(self) -> str:
        """Algebraic name, e.g. ``Square(2, 5).name == 'e2'``."""
        return f"{_FILES[self.col - 1]}{self.row}"

    def offset(self, drow: int, dcol: int) -> Square | None:
        """Shifted square, or ``None`` when it falls off the board."""
        row = self.row + drow
        col = self.col + dcol
        if 1 <= row <= 8 and 1 <= col <= 8:
            return Square(row, col)
        return None

    @classmethod
    def from_index(cls, index: int) -> Square:
        if not 0 <= index < 64:
            raise ValueError(f"Square index out of range: {index}")
        return cls(index // 8 + 1, index % 8 + 1)

    def __str__(self) -> str:
        return self.name


def parse_square(name: str) -> Square:
    """Parse square name, e.g. 'e4' → Square(4, 5)."""
    if len(name) != 2 or name[0] not in _FILES or name[1] not in "12345678":
        raise ValueError(f"Invalid square name: {name!r}")
    return Square(int(name[1]), _FILES.index(name[0]) + 1)


ALL_SQUARES: tuple[Square, ...] = tuple(Square.from_index(i) for i in range(64))

# ── Named square constants ──────────────────────────────────────────────────

A1, B1, C1, D1, E1, F1, G1, H1 = ALL_SQUARES[0:8]
A2, B2, C2, D2, E2, F2, G2, H2 = ALL_SQUARES[8:16]
A3, B3, C3, D3, E3, F3, G3, H3 = ALL_SQUARES[16:24]
A4, B4, C4, D4, E4, F4, G4, H4 = ALL_SQUARES[24:32]
A5, B5, C5, D5, E5, F5, G5, H5 = ALL_SQUARES[32:40]
A6, B6, C6, D6, E6, F6, G6, H6 = ALL_SQUARES[40:48]
A7, B7, C7, D7, E7, F7, G7, H7 = ALL_SQUARES[48:56]
A8, B8, C8, D8, E8, F8, G8, H8 = ALL_SQUARES[56:64]
