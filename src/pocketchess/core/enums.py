"""Core enumerations for the chess domain."""

from __future__ import annotations

from enum import IntEnum


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Chess piece types ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6


class GameResult(IntEnum):
    """Outcome of a game."""

    IN_PROGRESS = 0
    WHITE_WINS = 1
    BLACK_WINS = 2
    DRAW = 3


class MoveError(IntEnum):
    """Reason a move is rejected by :class:`~pocketchess.game.ChessGame`."""

    OUT_OF_BOUNDS = 1
    NO_PIECE = 2
    NOT_CURRENT_PLAYERS_PIECE = 3
    OWN_PIECE_AT_DESTINATION = 4
    UNREACHABLE = 5
    WOULD_EXPOSE_KING = 6
    INVALID_PROMOTION = 7
    GAME_OVER = 8
