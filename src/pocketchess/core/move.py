"""Move value object (long-algebraic representation)."""

from __future__ import annotations

from dataclasses import dataclass

from pocketchess.core.enums import PieceType
from pocketchess.core.types import Square, parse_square

_PROMO_CHARS: dict[PieceType, str] = {
    PieceType.PAWN: "p",
    PieceType.KNIGHT: "n",
    PieceType.BISHOP: "b",
    PieceType.ROOK: "r",
    PieceType.QUEEN: "q",
    PieceType.KING: "k",
}
_PROMO_TYPES: dict[str, PieceType] = {v: k for k, v in _PROMO_CHARS.items()}


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable value object representing a single chess move.

    ``promotion`` only matters when a pawn reaches the far rank; it is
    ignored for every other move.
    """

    from_sq: Square
    to_sq: Square
    promotion: PieceType | None = None

    def __str__(self) -> str:
        base = f"{self.from_sq}{self.to_sq}"
        if self.promotion is not None:
            base += _PROMO_CHARS[self.promotion]
        return base

    @property
    def uci(self) -> str:
        """Long algebraic notation, e.g. ``e7e8q``."""
        return str(self)

    @classmethod
    def from_uci(cls, text: str) -> Move:
        """Parse long algebraic notation, e.g. ``'e2e4'`` or ``'a7a8n'``."""
        if len(text) not in (4, 5):
            raise ValueError(f"Invalid move text: {text!r}")
        promotion: PieceType | None = None
        if len(text) == 5:
            try:
                promotion = _PROMO_TYPES[text[4].lower()]
            except KeyError:
                raise ValueError(f"Invalid promotion in move: {text!r}") from None
        return cls(parse_square(text[:2]), parse_square(text[2:4]), promotion)
