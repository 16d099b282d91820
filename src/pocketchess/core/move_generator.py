"""Pseudo-legal move generation + attack detection."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pocketchess.core.enums import Color, PieceType
from pocketchess.core.piece import Piece
from pocketchess.core.types import ALL_SQUARES, Square

if TYPE_CHECKING:
    from pocketchess.core.board import Board


KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))

# Row direction a pawn advances in, and the row it starts on.
PAWN_DIRECTION: dict[Color, int] = {Color.WHITE: -1, Color.BLACK: 1}
PAWN_START_ROW: dict[Color, int] = {Color.WHITE: 6, Color.BLACK: 1}
PROMOTION_ROW: dict[Color, int] = {Color.WHITE: 0, Color.BLACK: 7}


# -- Precomputed lookup tables ---------------------------------------------


def _build_targets(
    offsets: tuple[tuple[int, int], ...],
) -> tuple[tuple[Square, ...], ...]:
    targets: list[tuple[Square, ...]] = []
    for sq in ALL_SQUARES:
        moves = [sq.offset(dr, dc) for dr, dc in offsets]
        targets.append(tuple(to_sq for to_sq in moves if to_sq.is_valid))
    return tuple(targets)


def _build_rays(
    directions: tuple[tuple[int, int], ...],
) -> tuple[tuple[tuple[Square, ...], ...], ...]:
    rays_per_square: list[tuple[tuple[Square, ...], ...]] = []
    for sq in ALL_SQUARES:
        square_rays: list[tuple[Square, ...]] = []
        for dr, dc in directions:
            ray: list[Square] = []
            to_sq = sq.offset(dr, dc)
            while to_sq.is_valid:
                ray.append(to_sq)
                to_sq = to_sq.offset(dr, dc)
            square_rays.append(tuple(ray))
        rays_per_square.append(tuple(square_rays))
    return tuple(rays_per_square)


_KNIGHT_TARGETS = _build_targets(KNIGHT_OFFSETS)
_KING_TARGETS = _build_targets(KING_OFFSETS)
_BISHOP_RAYS = _build_rays(BISHOP_DIRS)
_ROOK_RAYS = _build_rays(ROOK_DIRS)
_QUEEN_RAYS = tuple(r + b for r, b in zip(_ROOK_RAYS, _BISHOP_RAYS))

_SLIDING_RAYS = {
    PieceType.BISHOP: _BISHOP_RAYS,
    PieceType.ROOK: _ROOK_RAYS,
    PieceType.QUEEN: _QUEEN_RAYS,
}


class MoveGenerator:
    """Generates pseudo-legal destinations and answers attack queries.

    Operates read-only on a :class:`Board`; legality (self-check) filtering
    lives in :class:`~pocketchess.game.state.ChessGame`.
    """

    __slots__ = ("_board",)

    def __init__(self, board: Board) -> None:
        self._board = board

    # -- Public API ---------------------------------------------------------

    def pseudo_moves(self, sq: Square) -> list[Square]:
        """Destinations reachable by the piece on *sq*, ignoring check.

        Empty for an empty or off-board square.
        """
        if not sq.is_valid:
            return []
        piece = self._board[sq]
        if piece is None:
            return []

        moves: list[Square] = []
        color = piece.color
        pt = piece.piece_type
        if pt == PieceType.PAWN:
            self._gen_pawn(sq, color, moves)
        elif pt == PieceType.KNIGHT:
            self._gen_step(_KNIGHT_TARGETS[sq.index], color, moves)
        elif pt == PieceType.KING:
            self._gen_step(_KING_TARGETS[sq.index], color, moves)
        else:
            self._gen_sliding(_SLIDING_RAYS[pt][sq.index], color, moves)
        return moves

    def is_in_check(self, color: Color) -> bool:
        """Is *color*'s king attacked by the opponent?"""
        king_sq = self._board.king_square(color)
        return self.is_square_attacked(king_sq, color.opposite)

    def is_square_attacked(self, sq: Square, by_color: Color) -> bool:
        """Is *sq* attacked by any piece of *by_color*?"""
        if not sq.is_valid:
            return False
        board = self._board
        idx = sq.index

        # A pawn of by_color attacks sq from one row behind it.
        pawn_row = sq.row - PAWN_DIRECTION[by_color]
        enemy_pawn = Piece(by_color, PieceType.PAWN)
        for d_col in (-1, 1):
            from_sq = Square(pawn_row, sq.col + d_col)
            if from_sq.is_valid and board[from_sq] == enemy_pawn:
                return True

        for targets, pt in (
            (_KNIGHT_TARGETS[idx], PieceType.KNIGHT),
            (_KING_TARGETS[idx], PieceType.KING),
        ):
            for from_sq in targets:
                if board[from_sq] == Piece(by_color, pt):
                    return True

        for rays, slider in (
            (_BISHOP_RAYS[idx], PieceType.BISHOP),
            (_ROOK_RAYS[idx], PieceType.ROOK),
        ):
            for ray in rays:
                for from_sq in ray:
                    piece = board[from_sq]
                    if piece is None:
                        continue
                    if piece.color == by_color and piece.piece_type in (
                        slider,
                        PieceType.QUEEN,
                    ):
                        return True
                    break

        return False

    # -- Piece-specific generators (private) -------------------------------

    def _gen_pawn(self, sq: Square, color: Color, moves: list[Square]) -> None:
        board = self._board
        direction = PAWN_DIRECTION[color]

        one_step = sq.offset(direction, 0)
        if one_step.is_valid and board.is_empty(one_step):
            moves.append(one_step)
            if sq.row == PAWN_START_ROW[color]:
                two_step = sq.offset(2 * direction, 0)
                if two_step.is_valid and board.is_empty(two_step):
                    moves.append(two_step)

        for d_col in (-1, 1):
            cap_sq = sq.offset(direction, d_col)
            if not cap_sq.is_valid:
                continue
            target = board[cap_sq]
            if target is not None and target.color != color:
                moves.append(cap_sq)

    def _gen_step(
        self, targets: tuple[Square, ...], color: Color, moves: list[Square]
    ) -> None:
        board = self._board
        for to_sq in targets:
            target = board[to_sq]
            if target is None or target.color != color:
                moves.append(to_sq)

    def _gen_sliding(
        self,
        rays: tuple[tuple[Square, ...], ...],
        color: Color,
        moves: list[Square],
    ) -> None:
        board = self._board
        for ray in rays:
            for to_sq in ray:
                target = board[to_sq]
                if target is None:
                    moves.append(to_sq)
                    continue
                if target.color != color:
                    moves.append(to_sq)
                break
