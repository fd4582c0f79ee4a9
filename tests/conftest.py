"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import pytest

from chessgame.config import GameConfig
from chessgame.game.chess_game import ChessGame
from chessgame.game.service import ChessService


@pytest.fixture
def game() -> ChessGame:
    """A fresh game in the standard starting position."""
    return ChessGame("test-game")


@pytest.fixture
def service() -> ChessService:
    return ChessService(GameConfig(event="Test Event", white="Alice", black="Bob"))
