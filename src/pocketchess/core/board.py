"""Board - piece placement on an 8x8 board."""

from __future__ import annotations

from collections.abc import Iterator

from pocketchess.core.enums import Color, PieceType
from pocketchess.core.piece import Piece
from pocketchess.core.types import ALL_SQUARES, BOARD_SIZE, Square

_COLOR_COUNT = 2

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
    """Mutable 64-cell board stored as a flat row-major list."""

    __slots__ = ("_squares", "_king_squares")

    def __init__(self) -> None:
        self._squares: list[Piece | None] = [None] * 64
        # [color] -> king square cache (None if king missing).
        self._king_squares: list[Square | None] = [None] * _COLOR_COUNT

    @staticmethod
    def _index(sq: Square) -> int:
        if not sq.is_valid:
            raise IndexError(f"Square off the board: {sq!r}")
        return sq.index

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        return self._squares[self._index(sq)]

    def __setitem__(self, sq: Square, piece: Piece | None) -> None:
        idx = self._index(sq)
        old_piece = self._squares[idx]
        if old_piece == piece:
            return

        if (
            old_piece is not None
            and old_piece.piece_type == PieceType.KING
            and self._king_squares[int(old_piece.color)] == sq
        ):
            self._king_squares[int(old_piece.color)] = None

        self._squares[idx] = piece

        if piece is not None and piece.piece_type == PieceType.KING:
            self._king_squares[int(piece.color)] = sq

    def is_empty(self, sq: Square) -> bool:
        return self._squares[self._index(sq)] is None

    # -- Query helpers ------------------------------------------------------

    def occupied(self) -> Iterator[tuple[Square, Piece]]:
        """Yield ``(square, piece)`` for every occupied square, row-major."""
        for sq, piece in zip(ALL_SQUARES, self._squares):
            if piece is not None:
                yield sq, piece

    def pieces(self, color: Color) -> list[Square]:
        """All squares occupied by *color*."""
        return [sq for sq, piece in self.occupied() if piece.color == color]

    def king_square(self, color: Color) -> Square:
        """Return the king square for *color*."""
        sq = self._king_squares[int(color)]
        if sq is None:
            raise ValueError(f"No {color.name} king on board")
        return sq

    def rows(self) -> tuple[tuple[Piece | None, ...], ...]:
        """Immutable row-major snapshot, ``rows()[row][col]``."""
        return tuple(
            tuple(self._squares[r * BOARD_SIZE : (r + 1) * BOARD_SIZE])
            for r in range(BOARD_SIZE)
        )

    # -- Copying ------------------------------------------------------------

    def copy(self) -> Board:
        b = Board()
        b._squares = self._squares.copy()
        b._king_squares = self._king_squares.copy()
        return b

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        b = cls()
        for col in range(BOARD_SIZE):
            b[Square(1, col)] = Piece(Color.BLACK, PieceType.PAWN)
            b[Square(6, col)] = Piece(Color.WHITE, PieceType.PAWN)

        for col, pt in enumerate(_BACK_RANK):
            b[Square(0, col)] = Piece(Color.BLACK, pt)
            b[Square(7, col)] = Piece(Color.WHITE, pt)
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._squares == other._squares

    def __repr__(self) -> str:
        lines: list[str] = []
        for row_idx, row in enumerate(self.rows()):
            cells = [str(p) if p else "." for p in row]
            lines.append(f"{BOARD_SIZE - row_idx} {' '.join(cells)}")
        lines.append("  a b c d e f g h")
        return "\n".join(lines)
