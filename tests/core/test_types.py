"""Tests for Square, Piece and Move value types."""

import pytest

from pocketchess.core.enums import Color, PieceType
from pocketchess.core.move import Move
from pocketchess.core.piece import Piece
from pocketchess.core.types import A8, E2, E4, H1, Square, parse_square


class TestSquare:
    def test_names(self) -> None:
        assert Square(6, 4).name == "e2"
        assert A8.name == "a8"
        assert H1.name == "h1"

    def test_parse_square(self) -> None:
        assert parse_square("e4") == Square(4, 4)
        assert parse_square("a8") == Square(0, 0)

    @pytest.mark.parametrize("text", ["", "e", "i1", "a9", "e44"])
    def test_parse_square_invalid(self, text: str) -> None:
        with pytest.raises(ValueError, match="Invalid square name"):
            parse_square(text)

    def test_index_round_trip(self) -> None:
        for index in range(64):
            assert Square.from_index(index).index == index

    def test_validity(self) -> None:
        assert Square(0, 0).is_valid
        assert Square(7, 7).is_valid
        assert not Square(-1, 0).is_valid
        assert not Square(0, 8).is_valid

    def test_off_board_str(self) -> None:
        assert str(Square(9, 2)) == "(9, 2)"
        with pytest.raises(ValueError):
            Square(9, 2).name


class TestPiece:
    def test_from_char(self) -> None:
        assert Piece.from_char("N") == Piece(Color.WHITE, PieceType.KNIGHT)
        assert Piece.from_char("k") == Piece(Color.BLACK, PieceType.KING)

    @pytest.mark.parametrize("char", ["x", "", "Nn", "1"])
    def test_from_char_invalid(self, char: str) -> None:
        with pytest.raises(ValueError, match="Invalid piece character"):
            Piece.from_char(char)

    def test_str(self) -> None:
        assert str(Piece(Color.BLACK, PieceType.QUEEN)) == "q"
        assert str(Piece(Color.WHITE, PieceType.KNIGHT)) == "N"

    @pytest.mark.parametrize("char", "PNBRQKpnbrqk")
    def test_char_round_trip(self, char: str) -> None:
        assert str(Piece.from_char(char)) == char


class TestMove:
    def test_uci(self) -> None:
        assert Move(E2, E4).uci == "e2e4"
        promo = Move(parse_square("a7"), A8, PieceType.KNIGHT)
        assert str(promo) == "a7a8n"

    def test_from_uci(self) -> None:
        assert Move.from_uci("e2e4") == Move(E2, E4)
        assert Move.from_uci("a7a8Q") == Move(parse_square("a7"), A8, PieceType.QUEEN)

    @pytest.mark.parametrize("text", ["e2", "e2e4qq", "e2e4x", "z2e4"])
    def test_from_uci_invalid(self, text: str) -> None:
        with pytest.raises(ValueError):
            Move.from_uci(text)

    def test_value_equality(self) -> None:
        assert Move(Square(6, 4), Square(4, 4)) == Move(E2, E4)
        assert Move(E2, E4) != Move(E2, E4, PieceType.QUEEN)
