"""Tests for the capture-preferring random move picker."""

import random

from pocketchess.core.enums import Color
from pocketchess.core.move import Move
from pocketchess.core.types import B7, C6, D4, D5, D7, E2, E4, E6, F7
from pocketchess.engine.random_player import choose_move
from pocketchess.game.state import ChessGame


class TestChooseMove:
    def test_returns_a_legal_move(self, game: ChessGame, rng: random.Random) -> None:
        move = choose_move(game, Color.WHITE, rng)
        assert move is not None
        assert move in game.all_legal_moves()

    def test_not_our_turn(self, game: ChessGame, rng: random.Random) -> None:
        assert choose_move(game, Color.BLACK, rng) is None

    def test_no_legal_moves(self, rng: random.Random) -> None:
        game = ChessGame.from_fen("k7/5Q2/2K5/8/8/8/8/8 w")
        assert game.apply_move(Move(F7, B7))
        assert choose_move(game, Color.BLACK, rng) is None

    def test_prefers_captures(self, game: ChessGame) -> None:
        assert game.apply_move(Move(E2, E4))
        assert game.apply_move(Move(D7, D5))
        # exd5 is the only capture.
        for seed in range(20):
            assert choose_move(game, Color.WHITE, random.Random(seed)) == Move(E4, D5)

    def test_picks_among_several_captures(self) -> None:
        game = ChessGame.from_fen("4k3/8/2p1p3/8/3N4/8/8/4K3 w")
        seen = {
            choose_move(game, Color.WHITE, random.Random(seed)) for seed in range(50)
        }
        assert seen == {Move(D4, C6), Move(D4, E6)}

    def test_seeded_rng_is_reproducible(self, game: ChessGame) -> None:
        first = choose_move(game, Color.WHITE, random.Random(7))
        second = choose_move(game, Color.WHITE, random.Random(7))
        assert first == second

    def test_default_rng(self, game: ChessGame) -> None:
        assert choose_move(game, Color.WHITE) in game.all_legal_moves()
