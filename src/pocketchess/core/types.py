"""Square value type and coordinate helpers.

Board layout (row-major, Black at the top):
    row 0 = rank 8 (Black's back rank), row 7 = rank 1 (White's back rank)
    col 0 = file a, col 7 = file h

    a8=(0, 0) ... h8=(0, 7)
    ...
    a1=(7, 0) ... h1=(7, 7)
"""

from __future__ import annotations

from dataclasses import dataclass

BOARD_SIZE = 8


@dataclass(frozen=True, slots=True)
class Square:
    """A (row, col) board coordinate.

    Out-of-range values may be constructed; use :attr:`is_valid` before
    indexing a board with them.
    """

    row: int
    col: int

    @property
    def is_valid(self) -> bool:
        return 0 <= self.row < BOARD_SIZE and 0 <= self.col < BOARD_SIZE

    @property
    def index(self) -> int:
        """Flat index 0–63 (row * 8 + col)."""
        return self.row * BOARD_SIZE + self.col

    @classmethod
    def from_index(cls, index: int) -> Square:
        return cls(index // BOARD_SIZE, index % BOARD_SIZE)

    def offset(self, d_row: int, d_col: int) -> Square:
        return Square(self.row + d_row, self.col + d_col)

    @property
    def name(self) -> str:
        """Algebraic name, e.g. (6, 4) → 'e2'."""
        if not self.is_valid:
            raise ValueError(f"Square out of range: {self!r}")
        return chr(ord("a") + self.col) + str(BOARD_SIZE - self.row)

    def __str__(self) -> str:
        return self.name if self.is_valid else f"({self.row}, {self.col})"


def parse_square(name: str) -> Square:
    """Parse square name, e.g. 'e4' → Square(4, 4)."""
    if len(name) != 2 or name[0] not in "abcdefgh" or name[1] not in "12345678":
        raise ValueError(f"Invalid square name: {name!r}")
    return Square(BOARD_SIZE - int(name[1]), ord(name[0]) - ord("a"))


ALL_SQUARES: tuple[Square, ...] = tuple(Square.from_index(i) for i in range(64))


# ── Named square constants ──────────────────────────────────────────────────

A8, B8, C8, D8, E8, F8, G8, H8 = ALL_SQUARES[0:8]
A7, B7, C7, D7, E7, F7, G7, H7 = ALL_SQUARES[8:16]
A6, B6, C6, D6, E6, F6, G6, H6 = ALL_SQUARES[16:24]
A5, B5, C5, D5, E5, F5, G5, H5 = ALL_SQUARES[24:32]
A4, B4, C4, D4, E4, F4, G4, H4 = ALL_SQUARES[32:40]
A3, B3, C3, D3, E3, F3, G3, H3 = ALL_SQUARES[40:48]
A2, B2, C2, D2, E2, F2, G2, H2 = ALL_SQUARES[48:56]
A1, B1, C1, D1, E1, F1, G1, H1 = ALL_SQUARES[56:64]
