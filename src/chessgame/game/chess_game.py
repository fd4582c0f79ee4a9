"""ChessGame: one game instance: position, history, notation import/export."""

from __future__ import annotations

import logging
import uuid
from collections.abc import Mapping

from chessgame.config import GameConfig
from chessgame.core.board import Board
from chessgame.core.enums import (
    PROMOTION_TYPES,
    CastlingRights,
    Color,
    GameState,
    PieceType,
)
from chessgame.core.move import Move
from chessgame.core.move_generator import MoveGenerator
from chessgame.core.notation import (
    STARTING_FEN,
    build_pgn,
    parse_pgn,
    pgn_result_token,
    position_from_fen,
    position_to_fen,
    resolve_san,
)
from chessgame.core.piece import Piece
from chessgame.core.position import Position
from chessgame.core.rules import Rules
from chessgame.core.types import Square
from chessgame.game.history import History
from chessgame.game.interfaces import IChessGame

_LOGGER = logging.getLogger(__name__)


class ChessGame(IChessGame):
    """A chess game driven by ``(from, to[, promotion])`` requests.

    Illegal requests and malformed notation are reported through return
    values (``None`` / ``False``) and never change the game. The game state
    is derived on demand from the current position.
    """

    __slots__ = ("_id", "_config", "_position", "_history")

    def __init__(
        self, game_id: str | None = None, config: GameConfig | None = None
    ) -> None:
        self._id = game_id if game_id is not None else str(uuid.uuid4())
        self._config = config if config is not None else GameConfig()
        self._position = Position()
        self._history = History(self._position)

    @property
    def id(self) -> str:
        return self._id

    # ── Setup ────────────────────────────────────────────────────────────

    def reset(self) -> None:
        """Standard starting position, empty history."""
        self._load(Position())

    def setup_position(
        self,
        pieces: Mapping[Square, Piece],
        active_color: Color = Color.WHITE,
        castling_rights: str = "KQkq",
        en_passant_target: Square | None = None,
        halfmove_clock: int = 0,
        fullmove_number: int = 1,
    ) -> None:
        """Place *pieces* on an empty board; off-board squares are ignored.

        The move history is discarded. Raises :class:`ValueError` for a
        malformed *castling_rights* string or an off-board
        *en_passant_target*.
        """
        castling = CastlingRights.from_fen(castling_rights)
        if en_passant_target is not None and not en_passant_target.is_valid():
            raise ValueError(f"Invalid en passant target: {en_passant_target!r}")
        board = Board()
        for square, piece in pieces.items():
            if square.is_valid():
                board[square] = piece
        self._load(
            Position(
                board,
                active_color,
                castling,
                en_passant_target,
                halfmove_clock,
                fullmove_number,
            )
        )

    def _load(self, position: Position) -> None:
        self._position = position
        self._history = History(position)

    # ── FEN / PGN ────────────────────────────────────────────────────────

    def import_fen(self, fen: str) -> bool:
        try:
            position = position_from_fen(fen)
        except ValueError as exc:
            _LOGGER.warning("Rejected FEN %r: %s", fen, exc)
            return False
        self._load(position)
        _LOGGER.debug("Game %s loaded FEN %s", self._id, fen)
        return True

    def export_fen(self) -> str:
        return position_to_fen(self._position)

    def import_pgn(self, pgn: str) -> bool:
        """Replay a PGN mainline from the start (or its ``FEN`` tag).

        On any unreadable tag or unresolvable move token the game is reset
        to the standard starting position and ``False`` is returned.
        """
        self.reset()
        try:
            parsed = parse_pgn(pgn)
            start_fen = parsed.start_fen
            if start_fen is not None:
                self._load(position_from_fen(start_fen))

            for token in parsed.tokens:
                move = resolve_san(self.get_legal_moves(), token)
                if move is None:
                    raise ValueError(f"Unresolvable move token {token!r}")
                self.make_move(move.from_sq, move.to_sq, move.promotion)
        except ValueError as exc:
            _LOGGER.warning("Rejected PGN import for game %s: %s", self._id, exc)
            self.reset()
            return False

        _LOGGER.debug(
            "Game %s imported %d plies from PGN", self._id, len(self._history)
        )
        return True

    def export_pgn(self) -> str:
        start = self._history.start
        result = pgn_result_token(self.get_game_state())

        headers = self._config.pgn_headers()
        headers["Result"] = result
        start_fen = position_to_fen(start)
        if start_fen != STARTING_FEN:
            headers["SetUp"] = "1"
            headers["FEN"] = start_fen

        return build_pgn(
            headers,
            [move.algebraic for move in self._history.moves],
            result,
            first_move_number=start.fullmove_number,
            black_first=start.side_to_move == Color.BLACK,
        )

    # ── Board queries ────────────────────────────────────────────────────

    def get_piece_at(self, square: Square) -> Piece | None:
        if not square.is_valid():
            return None
        return self._position.board[square]

    def get_all_pieces(self) -> dict[Square, Piece]:
        return self._position.board.pieces()

    def get_active_color(self) -> Color:
        return self._position.side_to_move

    # ── Moves ────────────────────────────────────────────────────────────

    def get_legal_moves(self, square: Square | None = None) -> list[Move]:
        return MoveGenerator(self._position).generate_legal_moves(square)

    def make_move(
        self,
        from_sq: Square,
        to_sq: Square,
        promotion: PieceType | None = None,
    ) -> Move | None:
        """Play ``from_sq -> to_sq`` if legal; return the completed move.

        A promoting pawn move without *promotion* promotes to a queen.
        """
        if not from_sq.is_valid() or not to_sq.is_valid():
            _LOGGER.debug("Rejected off-board move %s -> %s", from_sq, to_sq)
            return None

        position = self._position
        piece = position.board[from_sq]
        if piece is None or piece.color != position.side_to_move:
            _LOGGER.debug(
                "Rejected move from %s: no %s piece there",
                from_sq,
                position.side_to_move,
            )
            return None

        candidate = next(
            (m for m in self.get_legal_moves(from_sq) if m.to_sq == to_sq),
            None,
        )
        if candidate is None:
            _LOGGER.debug("Rejected illegal move %s -> %s", from_sq, to_sq)
            return None

        final_promotion: PieceType | None = None
        if candidate.promotion is not None:
            final_promotion = promotion if promotion is not None else PieceType.QUEEN
            if final_promotion not in PROMOTION_TYPES:
                _LOGGER.debug("Rejected promotion to %s", final_promotion.name)
                return None

        planned = Move(
            from_sq,
            to_sq,
            piece,
            is_en_passant=candidate.is_en_passant,
            is_castling=candidate.is_castling,
            promotion=final_promotion,
        )
        captured = position.make_move(planned)
        move = Move(
            from_sq,
            to_sq,
            piece,
            captured,
            candidate.is_en_passant,
            candidate.is_castling,
            final_promotion,
        )
        self._history.record(move, position)
        return move

    # ── Check / game state ───────────────────────────────────────────────

    def is_in_check(self, color: Color) -> bool:
        return MoveGenerator(self._position).is_in_check(color)

    def get_game_state(self) -> GameState:
        return Rules.game_state(self._position)

    # ── History ──────────────────────────────────────────────────────────

    def get_move_history(self) -> list[Move]:
        return self._history.moves

    def undo_last_move(self) -> bool:
        restored = self._history.undo_last()
        if restored is None:
            return False
        self._position = restored
        return True

    def undo_to_move(self, move_number: int) -> bool:
        """Keep the first *move_number* plies (0 restores the setup position)."""
        restored = self._history.undo_to(move_number)
        if restored is None:
            return False
        self._position = restored
        return True

    def get_undo_count(self) -> int:
        return len(self._history)

    def __repr__(self) -> str:
        return f"ChessGame(id={self._id!r}, fen={self.export_fen()!r})"
