"""Position: complete game state (board + metadata) and move execution."""

from __future__ import annotations

from chessgame.core.board import Board
from chessgame.core.enums import CastlingRights, Color, PieceType
from chessgame.core.move import Move
from chessgame.core.piece import Piece
from chessgame.core.types import Square


class Position:
    """Full chess position: board + side to move + castling + en passant + clocks.

    A position is a plain mutable value. Undo is handled one level up by
    keeping copies (see :class:`chessgame.game.history.History`).
    """

    __slots__ = (
        "board",
        "side_to_move",
        "castling",
        "en_passant",
        "halfmove_clock",
        "fullmove_number",
    )

    def __init__(
        self,
        board: Board | None = None,
        side_to_move: Color = Color.WHITE,
        castling: CastlingRights = CastlingRights.ALL,
        en_passant: Square | None = None,
        halfmove_clock: int = 0,
        fullmove_number: int = 1,
    ) -> None:
        self.board = board if board is not None else Board.initial()
        self.side_to_move = side_to_move
        self.castling = castling
        self.en_passant = en_passant
        self.halfmove_clock = halfmove_clock
        self.fullmove_number = fullmove_number

    # ── Move execution ───────────────────────────────────────────────────

    def captured_by(self, move: Move) -> tuple[Square, Piece | None]:
        """Square emptied by *move*'s capture and the piece standing there."""
        if move.is_en_passant:
            capture_sq = Square(move.to_sq.file, move.from_sq.rank)
        else:
            capture_sq = move.to_sq
        return capture_sq, self.board[capture_sq]

    def make_move(self, move: Move) -> Piece | None:
        """Apply an already-validated *move* and return the captured piece."""
        board = self.board
        piece = board[move.from_sq]
        if piece is None:
            raise ValueError(f"No piece on {move.from_sq}")

        capture_sq, captured = self.captured_by(move)

        board[move.from_sq] = None
        if move.is_en_passant:
            board[capture_sq] = None

        placed = piece
        if move.promotion is not None:
            placed = Piece(piece.color, move.promotion)
        board[move.to_sq] = placed

        if move.is_castling:
            rank = move.from_sq.rank
            if move.is_kingside_castle:
                rook_from, rook_to = Square(7, rank), Square(5, rank)
            else:
                rook_from, rook_to = Square(0, rank), Square(3, rank)
            board[rook_to] = board[rook_from]
            board[rook_from] = None

        self._update_castling(move, piece)

        # En passant target for the opponent
        if (
            piece.piece_type == PieceType.PAWN
            and abs(move.to_sq.rank - move.from_sq.rank) == 2
        ):
            self.en_passant = Square(
                move.from_sq.file, (move.from_sq.rank + move.to_sq.rank) // 2
            )
        else:
            self.en_passant = None

        # Clocks
        if piece.piece_type == PieceType.PAWN or captured is not None:
            self.halfmove_clock = 0
        else:
            self.halfmove_clock += 1

        if self.side_to_move == Color.BLACK:
            self.fullmove_number += 1

        self.side_to_move = self.side_to_move.opposite
        return captured

    # ── Castling bookkeeping ─────────────────────────────────────────────

    _ROOK_CORNERS: dict[Square, CastlingRights] = {
        Square(0, 0): CastlingRights.WHITE_QUEENSIDE,
        Square(7, 0): CastlingRights.WHITE_KINGSIDE,
        Square(0, 7): CastlingRights.BLACK_QUEENSIDE,
        Square(7, 7): CastlingRights.BLACK_KINGSIDE,
    }

    def _update_castling(self, move: Move, piece: Piece) -> None:
        if piece.piece_type == PieceType.KING:
            if piece.color == Color.WHITE:
                self.castling &= ~CastlingRights.WHITE_BOTH
            else:
                self.castling &= ~CastlingRights.BLACK_BOTH

        # A rook leaving its corner, or being captured there.
        for sq in (move.from_sq, move.to_sq):
            if sq in self._ROOK_CORNERS:
                self.castling &= ~self._ROOK_CORNERS[sq]

    # ── Utilities ────────────────────────────────────────────────────────

    def copy(self) -> Position:
        """Deep copy of board and metadata."""
        return Position(
            board=self.board.copy(),
            side_to_move=self.side_to_move,
            castling=self.castling,
            en_passant=self.en_passant,
            halfmove_clock=self.halfmove_clock,
            fullmove_number=self.fullmove_number,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        return (
            self.board == other.board
            and self.side_to_move == other.side_to_move
            and self.castling == other.castling
            and self.en_passant == other.en_passant
            and self.halfmove_clock == other.halfmove_clock
            and self.fullmove_number == other.fullmove_number
        )

    def __repr__(self) -> str:
        header = f"Position(side_to_move={self.side_to_move!s}, castling={self.castling.to_fen()!r})"
        return f"{header}\n{self.board!r}"
