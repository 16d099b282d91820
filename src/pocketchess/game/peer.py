"""Wire codec for moves exchanged between two peers.

A move travels as a UTF-8 JSON object with four integer fields::

    {"fromRow": 6, "fromCol": 4, "toRow": 4, "toCol": 4}

Promotion is not part of the payload; the receiving engine promotes to a
queen when a pawn reaches the far rank.
"""

from __future__ import annotations

import json
import logging

from pocketchess.core.move import Move
from pocketchess.core.types import Square

_LOGGER = logging.getLogger(__name__)

_FIELDS = ("fromRow", "fromCol", "toRow", "toCol")


class PeerProtocolError(ValueError):
    """Raised when a received payload is not a well-formed move."""


def move_to_tuple(move: Move) -> tuple[int, int, int, int]:
    return (move.from_sq.row, move.from_sq.col, move.to_sq.row, move.to_sq.col)


def move_from_tuple(values: tuple[int, int, int, int]) -> Move:
    from_row, from_col, to_row, to_col = values
    return Move(Square(from_row, from_col), Square(to_row, to_col))


def encode_move(move: Move) -> bytes:
    """Serialise *move* for sending to the opponent."""
    payload = dict(zip(_FIELDS, move_to_tuple(move)))
    return json.dumps(payload).encode("utf-8")


def decode_move(data: bytes | str) -> Move:
    """Parse a payload produced by :func:`encode_move`.

    Coordinates are not range-checked here; the engine rejects off-board
    moves like any other illegal move.
    """
    try:
        text = data.decode("utf-8") if isinstance(data, bytes) else data
        payload = json.loads(text)
    except (UnicodeDecodeError, json.JSONDecodeError, RecursionError) as exc:
        _LOGGER.warning("Dropping undecodable move payload: %r", data)
        raise PeerProtocolError(f"Invalid move payload: {data!r}") from exc

    if not isinstance(payload, dict):
        _LOGGER.warning("Dropping non-object move payload: %r", data)
        raise PeerProtocolError(f"Move payload must be an object: {data!r}")

    values: list[int] = []
    for field in _FIELDS:
        value = payload.get(field)
        # bool is an int subclass but never a coordinate.
        if not isinstance(value, int) or isinstance(value, bool):
            _LOGGER.warning("Dropping move payload with bad %s: %r", field, data)
            raise PeerProtocolError(f"Missing or non-integer {field!r}: {data!r}")
        values.append(value)
    return move_from_tuple((values[0], values[1], values[2], values[3]))
