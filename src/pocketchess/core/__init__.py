"""Core domain layer — pure chess logic with zero external dependencies.

Quick start::

    from pocketchess.core import Board, MoveGenerator, parse_square

    board = Board.initial()
    gen = MoveGenerator(board)
    print(gen.pseudo_moves(parse_square("g1")))
"""

from pocketchess.core.board import Board
from pocketchess.core.enums import Color, GameResult, MoveError, PieceType
from pocketchess.core.move import Move
from pocketchess.core.move_generator import MoveGenerator
from pocketchess.core.notation import (
    STARTING_FEN,
    STARTING_PLACEMENT,
    board_from_fen,
    board_to_fen,
)
from pocketchess.core.piece import Piece
from pocketchess.core.types import BOARD_SIZE, Square, parse_square

__all__ = [
    # Enums
    "Color",
    "GameResult",
    "MoveError",
    "PieceType",
    # Types / helpers
    "BOARD_SIZE",
    "Square",
    "parse_square",
    # Domain objects
    "Board",
    "Move",
    "MoveGenerator",
    "Piece",
    # Notation
    "STARTING_FEN",
    "STARTING_PLACEMENT",
    "board_from_fen",
    "board_to_fen",
]
