"""FEN piece-placement parsing and serialization.

Only the placement field (and optionally the side-to-move field) is used;
castling, en passant and clocks have no meaning for this engine. The first
FEN rank is row 0 (Black's back rank).
"""

from __future__ import annotations

from pocketchess.core.board import Board
from pocketchess.core.enums import Color
from pocketchess.core.piece import Piece
from pocketchess.core.types import BOARD_SIZE, Square

STARTING_PLACEMENT = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"
STARTING_FEN = f"{STARTING_PLACEMENT} w"


def board_from_fen(placement: str) -> Board:
    """Parse a FEN placement field (e.g. ``'k7/8/.../4K3'``) into a :class:`Board`."""
    ranks = placement.split("/")
    if len(ranks) != BOARD_SIZE:
        raise ValueError(f"Invalid FEN board (must contain 8 ranks): {placement!r}")
    board = Board()
    for row, rank_text in enumerate(ranks):
        col = 0
        for ch in rank_text:
            if ch.isdigit():
                step = int(ch)
                if not (1 <= step <= BOARD_SIZE):
                    raise ValueError(f"Invalid FEN digit {ch!r}: {placement!r}")
                col += step
            else:
                if col >= BOARD_SIZE:
                    raise ValueError(f"Invalid FEN rank width: {placement!r}")
                board[Square(row, col)] = Piece.from_char(ch)
                col += 1
            if col > BOARD_SIZE:
                raise ValueError(f"Invalid FEN rank width: {placement!r}")
        if col != BOARD_SIZE:
            raise ValueError(f"Invalid FEN rank width: {placement!r}")
    return board


def board_to_fen(board: Board) -> str:
    """Serialise a :class:`Board` to a FEN placement field."""
    rows: list[str] = []
    for pieces in board.rows():
        empty = 0
        row = ""
        for piece in pieces:
            if piece is None:
                empty += 1
                continue
            if empty:
                row += str(empty)
                empty = 0
            row += str(piece)
        if empty:
            row += str(empty)
        rows.append(row)
    return "/".join(rows)


def parse_side(field: str) -> Color:
    if field == "w":
        return Color.WHITE
    if field == "b":
        return Color.BLACK
    raise ValueError(f"Invalid FEN side-to-move field: {field!r}")
