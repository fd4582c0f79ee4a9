"""Core domain layer: pure chess logic with zero external dependencies.

Quick start::

    from chessgame.core import MoveGenerator, position_from_fen, STARTING_FEN

    pos = position_from_fen(STARTING_FEN)
    gen = MoveGenerator(pos)
    for move in gen.generate_legal_moves():
        print(move)
"""

from chessgame.core.attacks import is_in_check, is_square_attacked
from chessgame.core.board import Board
from chessgame.core.enums import CastlingRights, Color, GameState, PieceType
from chessgame.core.move import Move
from chessgame.core.move_generator import MoveGenerator
from chessgame.core.notation import (
    STARTING_FEN,
    position_from_fen,
    position_to_fen,
    resolve_san,
)
from chessgame.core.piece import Piece
from chessgame.core.position import Position
from chessgame.core.rules import Rules
from chessgame.core.types import ALL_SQUARES, Square, parse_square

__all__ = [
    # Enums / flags
    "CastlingRights",
    "Color",
    "GameState",
    "PieceType",
    # Types / helpers
    "ALL_SQUARES",
    "Square",
    "parse_square",
    # Domain objects
    "Board",
    "Move",
    "MoveGenerator",
    "Piece",
    "Position",
    "Rules",
    # Attacks
    "is_in_check",
    "is_square_attacked",
    # Notation
    "STARTING_FEN",
    "position_from_fen",
    "position_to_fen",
    "resolve_san",
]
