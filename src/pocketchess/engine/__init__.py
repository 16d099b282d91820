"""Move selection for computer opponents."""

from pocketchess.engine.random_player import choose_move

__all__ = ["choose_move"]
