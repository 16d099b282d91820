"""Game state machine — the board engine that owns the grid, turn and result."""

from __future__ import annotations

import logging

from pocketchess.core.board import Board
from pocketchess.core.enums import Color, GameResult, MoveError, PieceType
from pocketchess.core.move import Move
from pocketchess.core.move_generator import PROMOTION_ROW, MoveGenerator
from pocketchess.core.notation import board_from_fen, parse_side
from pocketchess.core.piece import Piece
from pocketchess.core.types import Square

_LOGGER = logging.getLogger(__name__)

_RESTRICTED_PROMOTIONS = frozenset({PieceType.PAWN, PieceType.KING})


class ChessGame:
    """A single chess game: 8x8 grid, side to move and terminal flags.

    The grid is only mutated by :meth:`apply_move`. Every query works on
    well-formed and malformed input alike: off-board squares and illegal
    moves yield ``False`` / empty lists instead of exceptions. A missing
    king is an invariant violation and surfaces as ``ValueError``.

    Args:
        board: Starting placement; the standard setup when omitted.
        current_player: Side to move first.
        allow_any_promotion: Accept promotion to pawn or king. Rejected
            with :attr:`MoveError.INVALID_PROMOTION` by default.
    """

    __slots__ = (
        "_board",
        "_current_player",
        "_game_over",
        "_winner",
        "_in_check",
        "_in_checkmate",
        "_is_draw",
        "_allow_any_promotion",
    )

    def __init__(
        self,
        board: Board | None = None,
        current_player: Color = Color.WHITE,
        *,
        allow_any_promotion: bool = False,
    ) -> None:
        self._board = board.copy() if board is not None else Board.initial()
        self._current_player = current_player
        self._game_over = False
        self._winner: Color | None = None
        self._in_check = False
        self._in_checkmate = False
        self._is_draw = False
        self._allow_any_promotion = allow_any_promotion

    @classmethod
    def from_fen(cls, fen: str, *, allow_any_promotion: bool = False) -> ChessGame:
        """Set up a game from ``'<placement> [w|b]'``; extra FEN fields are ignored."""
        parts = fen.split()
        if not parts:
            raise ValueError(f"Empty FEN: {fen!r}")
        side = parse_side(parts[1]) if len(parts) > 1 else Color.WHITE
        return cls(
            board_from_fen(parts[0]),
            side,
            allow_any_promotion=allow_any_promotion,
        )

    # ── Accessors ────────────────────────────────────────────────────────

    @property
    def board(self) -> Board:
        """Copy of the current grid; mutating it does not affect the game."""
        return self._board.copy()

    def rows(self) -> tuple[tuple[Piece | None, ...], ...]:
        return self._board.rows()

    def piece_at(self, sq: Square) -> Piece | None:
        if not sq.is_valid:
            return None
        return self._board[sq]

    @property
    def current_player(self) -> Color:
        return self._current_player

    @property
    def is_game_over(self) -> bool:
        return self._game_over

    @property
    def winner(self) -> Color | None:
        return self._winner

    @property
    def is_in_check(self) -> bool:
        return self._in_check

    @property
    def is_in_checkmate(self) -> bool:
        return self._in_checkmate

    @property
    def is_draw(self) -> bool:
        return self._is_draw

    @property
    def result(self) -> GameResult:
        if self._in_checkmate:
            if self._winner == Color.WHITE:
                return GameResult.WHITE_WINS
            return GameResult.BLACK_WINS
        if self._is_draw:
            return GameResult.DRAW
        return GameResult.IN_PROGRESS

    @property
    def status_text(self) -> str:
        """Human-readable state label, empty while nothing notable happened."""
        if self._in_checkmate:
            return "White wins!" if self._winner == Color.WHITE else "Black wins!"
        if self._is_draw:
            return "Draw!"
        if self._in_check:
            return "Check!"
        return ""

    # ── Move generation / validation ─────────────────────────────────────

    def pseudo_moves(self, sq: Square) -> list[Square]:
        """Destinations by movement rules alone, for a piece of either color."""
        return MoveGenerator(self._board).pseudo_moves(sq)

    def explain_rejection(self, move: Move) -> MoveError | None:
        """Why :meth:`apply_move` would reject *move*; None if it would be played."""
        if self._game_over:
            return MoveError.GAME_OVER
        return self._rejection(move)

    def is_legal(self, move: Move) -> bool:
        return self._rejection(move) is None

    def legal_moves(self, sq: Square) -> list[Square]:
        """Legal destinations for the current player's piece on *sq*."""
        piece = self.piece_at(sq)
        if piece is None or piece.color != self._current_player:
            return []
        return [
            to_sq for to_sq in self.pseudo_moves(sq) if self.is_legal(Move(sq, to_sq))
        ]

    def all_legal_moves(self) -> list[Move]:
        """Every legal move of the side to move, in row-major source order."""
        return [
            Move(from_sq, to_sq)
            for from_sq in self._board.pieces(self._current_player)
            for to_sq in self.legal_moves(from_sq)
        ]

    # ── Move application ─────────────────────────────────────────────────

    def apply_move(self, move: Move) -> bool:
        """Play *move* for the side to move.

        Returns False without touching any state when the move is rejected.
        """
        error = self.explain_rejection(move)
        if error is not None:
            _LOGGER.debug("Rejected move %s: %s", move, error.name)
            return False

        piece = self._board[move.from_sq]
        assert piece is not None
        self._board[move.from_sq] = None
        if self._is_promotion(piece, move.to_sq):
            piece = Piece(piece.color, move.promotion or PieceType.QUEEN)
        self._board[move.to_sq] = piece

        self._current_player = self._current_player.opposite
        self._update_game_state()
        return True

    def copy(self) -> ChessGame:
        game = ChessGame(
            self._board,
            self._current_player,
            allow_any_promotion=self._allow_any_promotion,
        )
        game._game_over = self._game_over
        game._winner = self._winner
        game._in_check = self._in_check
        game._in_checkmate = self._in_checkmate
        game._is_draw = self._is_draw
        return game

    # ── Internal ─────────────────────────────────────────────────────────

    def _rejection(self, move: Move) -> MoveError | None:
        from_sq, to_sq = move.from_sq, move.to_sq
        if not (from_sq.is_valid and to_sq.is_valid):
            return MoveError.OUT_OF_BOUNDS

        piece = self._board[from_sq]
        if piece is None:
            return MoveError.NO_PIECE
        if piece.color != self._current_player:
            return MoveError.NOT_CURRENT_PLAYERS_PIECE

        target = self._board[to_sq]
        if target is not None and target.color == piece.color:
            return MoveError.OWN_PIECE_AT_DESTINATION

        if to_sq not in self.pseudo_moves(from_sq):
            return MoveError.UNREACHABLE

        if (
            not self._allow_any_promotion
            and move.promotion in _RESTRICTED_PROMOTIONS
            and self._is_promotion(piece, to_sq)
        ):
            return MoveError.INVALID_PROMOTION

        if self._would_expose_king(piece, from_sq, to_sq):
            return MoveError.WOULD_EXPOSE_KING
        return None

    def _would_expose_king(self, piece: Piece, from_sq: Square, to_sq: Square) -> bool:
        # Played on a scratch copy so the live grid is never in a hypothetical state.
        scratch = self._board.copy()
        scratch[to_sq] = piece
        scratch[from_sq] = None
        return MoveGenerator(scratch).is_in_check(piece.color)

    @staticmethod
    def _is_promotion(piece: Piece, to_sq: Square) -> bool:
        return (
            piece.piece_type == PieceType.PAWN
            and to_sq.row == PROMOTION_ROW[piece.color]
        )

    def _update_game_state(self) -> None:
        player = self._current_player
        self._in_check = MoveGenerator(self._board).is_in_check(player)
        has_moves = any(self.legal_moves(sq) for sq in self._board.pieces(player))

        if self._in_check and not has_moves:
            self._in_checkmate = True
            self._game_over = True
            self._winner = player.opposite
            _LOGGER.info("Checkmate: %s wins", self._winner)
        elif not has_moves:
            self._is_draw = True
            self._game_over = True
            _LOGGER.info("Stalemate: %s has no legal move", player)

    def __repr__(self) -> str:
        header = f"ChessGame({self._current_player} to move, {self.result.name})"
        return f"{header}\n{self._board!r}"
