"""Game layer: game instances, undo history and the multi-game registry."""

from chessgame.game.chess_game import ChessGame
from chessgame.game.history import History
from chessgame.game.interfaces import IChessGame, IChessService
from chessgame.game.service import ChessService

__all__ = [
    "ChessGame",
    "ChessService",
    "History",
    "IChessGame",
    "IChessService",
]
