"""Score-report payloads for finished games."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

from pocketchess.core.enums import Color

if TYPE_CHECKING:
    from pocketchess.game.state import ChessGame


class Outcome(StrEnum):
    """Result of a game from one player's point of view."""

    WIN = "win"
    LOSS = "loss"
    DRAW = "draw"


class OpponentType(StrEnum):
    ROBOT = "robot"
    HUMAN = "human"


def outcome_for(game: ChessGame, color: Color) -> Outcome | None:
    """Outcome for *color*, or None while the game is still running."""
    if not game.is_game_over:
        return None
    if game.is_draw:
        return Outcome.DRAW
    return Outcome.WIN if game.winner == color else Outcome.LOSS


@dataclass(frozen=True, slots=True)
class ScoreRequest:
    """Body of a score submission, keyed by the reporting device."""

    player_id: str
    result: Outcome
    opponent_type: OpponentType
    game_type: str = "chess"

    @classmethod
    def for_game(
        cls,
        game: ChessGame,
        color: Color,
        player_id: str,
        opponent_type: OpponentType,
    ) -> ScoreRequest:
        outcome = outcome_for(game, color)
        if outcome is None:
            raise ValueError("Cannot report a score for a game in progress")
        return cls(player_id, outcome, opponent_type)

    def to_dict(self) -> dict[str, str]:
        return {
            "playerId": self.player_id,
            "gameType": self.game_type,
            "result": self.result.value,
            "opponentType": self.opponent_type.value,
        }
