"""Tests for the peer move codec."""

import json

import pytest

from pocketchess.core.enums import PieceType
from pocketchess.core.move import Move
from pocketchess.core.types import A7, A8, E2, E4, Square
from pocketchess.game.peer import (
    PeerProtocolError,
    decode_move,
    encode_move,
    move_from_tuple,
    move_to_tuple,
)
from pocketchess.game.state import ChessGame


class TestEncode:
    def test_four_integer_fields(self) -> None:
        payload = json.loads(encode_move(Move(E2, E4)))
        assert payload == {"fromRow": 6, "fromCol": 4, "toRow": 4, "toCol": 4}

    def test_tuple_form(self) -> None:
        assert move_to_tuple(Move(E2, E4)) == (6, 4, 4, 4)
        assert move_from_tuple((6, 4, 4, 4)) == Move(E2, E4)


class TestDecode:
    def test_round_trip(self) -> None:
        move = Move(Square(1, 3), Square(3, 3))
        assert decode_move(encode_move(move)) == move

    def test_accepts_text(self) -> None:
        text = '{"fromRow": 6, "fromCol": 4, "toRow": 4, "toCol": 4}'
        assert decode_move(text) == Move(E2, E4)

    def test_promotion_is_not_carried(self) -> None:
        move = Move(A7, A8, PieceType.KNIGHT)
        received = decode_move(encode_move(move))
        assert received == Move(A7, A8)
        assert received.promotion is None

    def test_off_board_coordinates_pass_through(self) -> None:
        move = decode_move(b'{"fromRow": 9, "fromCol": 0, "toRow": 7, "toCol": 0}')
        assert not move.from_sq.is_valid
        assert not ChessGame().apply_move(move)

    @pytest.mark.parametrize(
        "data",
        [
            b"not json",
            b"\xff\xfe",
            b"[6, 4, 4, 4]",
            b'{"fromRow": 6, "fromCol": 4, "toRow": 4}',
            b'{"fromRow": "6", "fromCol": 4, "toRow": 4, "toCol": 4}',
            b'{"fromRow": true, "fromCol": 4, "toRow": 4, "toCol": 4}',
            b'{"fromRow": 6.0, "fromCol": 4, "toRow": 4, "toCol": 4}',
            b"[" * 100_000,
        ],
    )
    def test_malformed(self, data: bytes) -> None:
        with pytest.raises(PeerProtocolError):
            decode_move(data)

    def test_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            decode_move(b"{}")


class TestRemoteGame:
    def test_moves_replayed_on_the_other_side(self) -> None:
        local, remote = ChessGame(), ChessGame()
        for uci in ("e2e4", "e7e5", "g1f3"):
            move = Move.from_uci(uci)
            assert local.apply_move(move)
            assert remote.apply_move(decode_move(encode_move(move)))
        assert local.rows() == remote.rows()
        assert local.current_player == remote.current_player
