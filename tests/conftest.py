"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import random

import pytest

from pocketchess.game.state import ChessGame


@pytest.fixture
def game() -> ChessGame:
    """A fresh game in the standard starting position."""
    return ChessGame()


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)
