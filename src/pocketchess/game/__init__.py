"""Game layer — the board engine and its thin collaborators.

Quick start::

    from pocketchess.game import ChessGame
    from pocketchess.core import Move, parse_square

    game = ChessGame()
    game.apply_move(Move(parse_square("e2"), parse_square("e4")))
    print(game.status_text or f"{game.current_player} to move")
"""

from pocketchess.game.outcome import OpponentType, Outcome, ScoreRequest, outcome_for
from pocketchess.game.peer import (
    PeerProtocolError,
    decode_move,
    encode_move,
    move_from_tuple,
    move_to_tuple,
)
from pocketchess.game.state import ChessGame

__all__ = [
    # Engine
    "ChessGame",
    # Peer transport
    "PeerProtocolError",
    "decode_move",
    "encode_move",
    "move_from_tuple",
    "move_to_tuple",
    # Score reporting
    "OpponentType",
    "Outcome",
    "ScoreRequest",
    "outcome_for",
]
