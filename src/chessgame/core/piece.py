"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass

from chessgame.core.enums import Color, PieceType

_LETTERS: dict[PieceType, str] = {
    PieceType.KING: "K",
    PieceType.QUEEN: "Q",
    PieceType.ROOK: "R",
    PieceType.BISHOP: "B",
    PieceType.KNIGHT: "N",
    PieceType.PAWN: "P",
}
_TYPES_BY_LETTER: dict[str, PieceType] = {v: k for k, v in _LETTERS.items()}


@dataclass(frozen=True, slots=True)
class Piece:
    """A coloured piece. Promotion never mutates a piece; it places a new one."""

    color: Color
    piece_type: PieceType

    @property
    def letter(self) -> str:
        """Uppercase piece letter regardless of colour, e.g. ``'N'``."""
        return _LETTERS[self.piece_type]

    def __str__(self) -> str:
        """FEN character: uppercase for white, lowercase for black."""
        return self.letter if self.color == Color.WHITE else self.letter.lower()

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """Create a piece from its FEN character, e.g. ``'n'`` -> black knight."""
        ptype = _TYPES_BY_LETTER.get(char.upper()) if len(char) == 1 else None
        if ptype is None:
            raise ValueError(f"Invalid piece character: {char!r}")
        color = Color.WHITE if char.isupper() else Color.BLACK
        return cls(color, ptype)
