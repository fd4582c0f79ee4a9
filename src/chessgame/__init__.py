"""chessgame: a chess rules engine with FEN/PGN support and undo history."""

from chessgame.config import GameConfig
from chessgame.core import (
    STARTING_FEN,
    Color,
    GameState,
    Move,
    Piece,
    PieceType,
    Square,
    parse_square,
)
from chessgame.game import ChessGame, ChessService

__all__ = [
    "STARTING_FEN",
    "ChessGame",
    "ChessService",
    "Color",
    "GameConfig",
    "GameState",
    "Move",
    "Piece",
    "PieceType",
    "Square",
    "parse_square",
]
