"""Tests for Square, Piece and Move value objects."""

import pytest

from chessrules.core.enums import Color, PieceType
from chessrules.core.move import Move
from chessrules.core.piece import Piece
from chessrules.core.types import A1, E2, E4, E7, E8, H8, Square, parse_square


class TestSquare:
    def test_name(self) -> None:
        assert Square(2, 5).name == "e2"
        assert str(H8) == "h8"

    def test_parse(self) -> None:
        assert parse_square("e2") == E2
        assert parse_square("a1") == Square(1, 1)

    def test_equality_and_hash(self) -> None:
        assert Square(4, 5) == E4
        assert len({Square(4, 5), E4}) == 1

    @pytest.mark.parametrize("row,col", [(0, 1), (9, 1), (1, 0), (1, 9)])
    def test_out_of_range_rejected(self, row: int, col: int) -> None:
        with pytest.raises(ValueError, match="out of range"):
            Square(row, col)

    @pytest.mark.parametrize("name", ["", "e", "e9", "i1", "E2", "e22"])
    def test_parse_invalid(self, name: str) -> None:
        with pytest.raises(ValueError, match="Invalid square name"):
            parse_square(name)

    def test_index(self) -> None:
        assert A1.index == 0
        assert H8.index == 63
        assert Square.from_index(E4.index) == E4

    def test_offset(self) -> None:
        assert E2.offset(2, 0) == E4
        assert A1.offset(-1, 0) is None
        assert H8.offset(0, 1) is None


class TestPiece:
    def test_from_char(self) -> None:
        assert Piece.from_char("N") == Piece(Color.WHITE, PieceType.KNIGHT)
        assert Piece.from_char("q") == Piece(Color.BLACK, PieceType.QUEEN)

    def test_str_is_fen_char(self) -> None:
        assert str(Piece(Color.WHITE, PieceType.KING)) == "K"
        assert str(Piece(Color.BLACK, PieceType.PAWN)) == "p"

    @pytest.mark.parametrize("char", ["x", "", "kk", "1"])
    def test_invalid_char(self, char: str) -> None:
        with pytest.raises(ValueError, match="Invalid piece character"):
            Piece.from_char(char)

    def test_symbol(self) -> None:
        assert Piece(Color.WHITE, PieceType.KING).symbol == "♔"
        assert Piece(Color.WHITE, PieceType.QUEEN).symbol == "♕"
        assert Piece(Color.BLACK, PieceType.KNIGHT).symbol == "♞"
        assert Piece(Color.BLACK, PieceType.PAWN).symbol == "♟"


class TestMove:
    def test_uci(self) -> None:
        assert Move(E2, E4).uci == "e2e4"
        assert str(Move(E7, E8, PieceType.QUEEN)) == "e7e8q"

    def test_from_uci(self) -> None:
        assert Move.from_uci("e2e4") == Move(E2, E4)
        assert Move.from_uci("e7e8n") == Move(E7, E8, PieceType.KNIGHT)

    @pytest.mark.parametrize("text", ["e2", "e2e9", "e7e8k", "e7e8qq"])
    def test_from_uci_invalid(self, text: str) -> None:
        with pytest.raises(ValueError):
            Move.from_uci(text)

    def test_promotion_part_of_equality(self) -> None:
        assert Move(E7, E8) != Move(E7, E8, PieceType.QUEEN)
        assert Move(E7, E8, PieceType.ROOK) != Move(E7, E8, PieceType.QUEEN)

    @pytest.mark.parametrize("piece_type", [PieceType.KING, PieceType.PAWN])
    def test_non_promotable_type_rejected(self, piece_type: PieceType) -> None:
        with pytest.raises(ValueError, match="Cannot promote"):
            Move(E7, E8, piece_type)

    @pytest.mark.parametrize(
        "piece_type",
        [PieceType.QUEEN, PieceType.ROOK, PieceType.BISHOP, PieceType.KNIGHT],
    )
    def test_promotion_survives_uci_text(self, piece_type: PieceType) -> None:
        move = Move(E7, E8, piece_type)
        assert Move.from_uci(str(move)) == move
