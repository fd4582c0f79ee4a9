"""High-level chess rules: checkmate, stalemate, draw detection."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chessgame.core.enums import Color, GameState, PieceType
from chessgame.core.move_generator import MoveGenerator

if TYPE_CHECKING:
    from chessgame.core.position import Position

_MINOR_PIECES = (PieceType.BISHOP, PieceType.KNIGHT)


class Rules:
    """Static rule-checker that operates on a :class:`Position`.

    Threefold repetition is not tracked: ``GameState.DRAW_BY_THREEFOLD_REPETITION``
    is never returned.
    """

    @staticmethod
    def is_in_check(position: Position) -> bool:
        gen = MoveGenerator(position)
        return gen.is_in_check(position.side_to_move)

    @staticmethod
    def is_checkmate(position: Position) -> bool:
        return Rules.game_state(position) in (
            GameState.CHECKMATE_WHITE_WINS,
            GameState.CHECKMATE_BLACK_WINS,
        )

    @staticmethod
    def is_stalemate(position: Position) -> bool:
        return Rules.game_state(position) == GameState.STALEMATE

    @staticmethod
    def is_insufficient_material(position: Position) -> bool:
        """K vs K, or K + a single bishop/knight vs K."""
        pieces = [piece for _, piece in position.board.occupied()]

        if len(pieces) == 2:
            return True

        if len(pieces) == 3:
            non_kings = [p for p in pieces if p.piece_type != PieceType.KING]
            return len(non_kings) == 1 and non_kings[0].piece_type in _MINOR_PIECES

        return False

    @staticmethod
    def is_fifty_move_rule(position: Position) -> bool:
        return position.halfmove_clock >= 100  # 100 half-moves = 50 full moves

    @staticmethod
    def game_state(position: Position) -> GameState:
        """Classify the position for the side to move."""
        gen = MoveGenerator(position)
        side = position.side_to_move

        if not gen.generate_legal_moves():
            king_sq = position.board.find_king(side)
            # Without a king there is nothing to mate; fall through to draws.
            if king_sq is not None:
                if gen.is_square_attacked(king_sq, side.opposite):
                    return (
                        GameState.CHECKMATE_BLACK_WINS
                        if side == Color.WHITE
                        else GameState.CHECKMATE_WHITE_WINS
                    )
                return GameState.STALEMATE

        if Rules.is_fifty_move_rule(position):
            return GameState.DRAW_BY_FIFTY_MOVE_RULE

        if Rules.is_insufficient_material(position):
            return GameState.DRAW_BY_INSUFFICIENT_MATERIAL

        return GameState.IN_PROGRESS
