"""Invariants that must hold for every position the engine is shown."""

import pytest

from chessrules.core.enums import Color
from chessrules.core.fen import STARTING_FEN
from chessrules.game.state import Game


def _perft(game: Game, depth: int) -> int:
    if depth == 0:
        return 1
    nodes = 0
    for move in game.all_legal_moves():
        child = Game(game.board, game.turn)
        child.make_move(move)
        nodes += _perft(child, depth - 1)
    return nodes


class TestKingSafety:
    @pytest.mark.parametrize("color", [Color.WHITE, Color.BLACK])
    def test_no_legal_move_leaves_own_king_in_check(
        self, sample_game: Game, color: Color
    ) -> None:
        for move in sample_game.all_legal_moves(color):
            child = Game(sample_game.board, color)
            child.make_move(move)
            assert not child.is_in_check(color), f"{move} exposes the {color} king"


class TestTerminalPartition:
    @pytest.mark.parametrize("color", [Color.WHITE, Color.BLACK])
    def test_exactly_one_state_holds(self, sample_game: Game, color: Color) -> None:
        mate = sample_game.is_in_checkmate(color)
        stale = sample_game.is_in_stalemate(color)
        has_moves = bool(sample_game.all_legal_moves(color))
        assert [mate, stale, has_moves].count(True) == 1
        assert (mate or stale) == (not has_moves)


class TestIdempotentInspection:
    def test_repeated_queries_agree_and_do_not_mutate(self, sample_game: Game) -> None:
        before = sample_game.board
        turn = sample_game.turn
        squares = before.pieces(Color.WHITE) + before.pieces(Color.BLACK)

        first = [sample_game.legal_moves(sq) for sq in squares]
        checks = (
            sample_game.is_in_check(Color.WHITE),
            sample_game.is_in_check(Color.BLACK),
        )
        second = [sample_game.legal_moves(sq) for sq in squares]

        assert first == second
        assert checks == (
            sample_game.is_in_check(Color.WHITE),
            sample_game.is_in_check(Color.BLACK),
        )
        assert sample_game.board == before
        assert sample_game.turn == turn


class TestMoveCounts:
    # Reference counts from https://www.chessprogramming.org/Perft_Results,
    # minus castling where a position allows it.

    def test_kiwipete_without_castling(self) -> None:
        game = Game.from_fen(
            "r3k2r/p1ppqpb1/bn2pnp1/3PN3/1p2P3/2N2Q1p/PPPBBPPP/R3K2R w"
        )
        assert len(game.all_legal_moves()) == 46

    def test_position_3(self) -> None:
        game = Game.from_fen("8/2p5/3p4/KP5r/1R3p1k/8/4P1P1/8 w")
        assert len(game.all_legal_moves()) == 14

    def test_starting_depth_2(self) -> None:
        assert _perft(Game.from_fen(STARTING_FEN), 2) == 400

    @pytest.mark.slow
    def test_starting_depth_3(self) -> None:
        assert _perft(Game.from_fen(STARTING_FEN), 3) == 8_902
