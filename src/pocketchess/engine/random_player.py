"""One-ply move picker: a random capture if there is one, else any random move."""

from __future__ import annotations

import logging
import random
from typing import TYPE_CHECKING

from pocketchess.core.enums import Color
from pocketchess.core.move import Move

if TYPE_CHECKING:
    from pocketchess.game.state import ChessGame

_LOGGER = logging.getLogger(__name__)


def choose_move(
    game: ChessGame,
    color: Color,
    rng: random.Random | None = None,
) -> Move | None:
    """Pick a move for *color* using only the game's public interface.

    Returns None when *color* is not to move or has no legal move.
    """
    rng = rng or random.Random()
    moves = game.all_legal_moves() if game.current_player == color else []
    if not moves:
        return None

    captures = [move for move in moves if game.piece_at(move.to_sq) is not None]
    pool = captures or moves
    move = rng.choice(pool)
    _LOGGER.debug(
        "Picked %s from %d moves (%d captures)", move, len(moves), len(captures)
    )
    return move
