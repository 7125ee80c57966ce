"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import pytest

from chessrules.game import Game

# Positions exercised by the invariant checks: the opening, ordinary
# middlegames, pins, checks, mates, stalemates and promotions.
SAMPLE_FENS: tuple[str, ...] = (
    "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w",
    "rnb1kbnr/pppp1ppp/8/4p3/6Pq/5P2/PPPPP2P/RNBQKBNR w",
    "r3k2r/p1ppqpb1/bn2pnp1/3PN3/1p2P3/2N2Q1p/PPPBBPPP/R3K2R w",
    "8/2p5/3p4/KP5r/1R3p1k/8/4P1P1/8 w",
    "k3r3/8/8/8/8/8/4B3/4K3 w",
    "k3r3/8/8/8/8/8/R7/4K3 w",
    "7k/8/8/8/8/8/5PPP/r5K1 w",
    "R2k4/8/3K4/8/8/8/8/8 b",
    "8/8/8/8/8/1qk5/8/K7 w",
    "7k/8/5KQ1/8/8/8/8/8 b",
    "7k/P7/8/8/8/8/8/4K3 w",
    "4k3/8/8/8/8/8/6p1/4K3 b",
)


@pytest.fixture
def game() -> Game:
    """Fresh game from the standard starting position."""
    return Game()


@pytest.fixture(params=SAMPLE_FENS)
def sample_game(request: pytest.FixtureRequest) -> Game:
    return Game.from_fen(request.param)
