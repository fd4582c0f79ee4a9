"""Move value object."""

from __future__ import annotations

from dataclasses import dataclass

from chessgame.core.enums import PieceType
from chessgame.core.piece import Piece
from chessgame.core.types import Square

_PROMO_CHARS: dict[PieceType, str] = {
    PieceType.KNIGHT: "n",
    PieceType.BISHOP: "b",
    PieceType.ROOK: "r",
    PieceType.QUEEN: "q",
}


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable record of a candidate or completed move.

    ``captured_piece`` is set whenever a piece leaves the board, including
    the pawn taken en passant. ``promotion`` is only set for pawn moves onto
    the last rank.
    """

    from_sq: Square
    to_sq: Square
    piece: Piece
    captured_piece: Piece | None = None
    is_en_passant: bool = False
    is_castling: bool = False
    promotion: PieceType | None = None

    @property
    def is_capture(self) -> bool:
        return self.captured_piece is not None

    @property
    def is_kingside_castle(self) -> bool:
        return self.is_castling and self.to_sq.file > self.from_sq.file

    # ── Display ──────────────────────────────────────────────────────────

    @property
    def algebraic(self) -> str:
        """Long algebraic form with piece letter, e.g. ``Ng1f3``, ``e5xd6``.

        This is the notation written to exported PGN move text.
        """
        if self.is_castling:
            return "O-O" if self.is_kingside_castle else "O-O-O"
        letter = "" if self.piece.piece_type == PieceType.PAWN else self.piece.letter
        capture = "x" if self.captured_piece is not None or self.is_en_passant else ""
        text = f"{letter}{self.from_sq}{capture}{self.to_sq}"
        if self.promotion is not None:
            text += "=" + _PROMO_CHARS[self.promotion].upper()
        return text

    @property
    def uci(self) -> str:
        """UCI long-algebraic notation."""
        base = f"{self.from_sq}{self.to_sq}"
        if self.promotion is not None:
            base += _PROMO_CHARS.get(self.promotion, "")
        return base

    def __str__(self) -> str:
        return self.uci
