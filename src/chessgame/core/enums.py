"""Core enumerations and flags for chess domain."""

from __future__ import annotations

from enum import Enum, IntEnum, IntFlag, auto


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Chess piece types."""

    KING = 1
    QUEEN = 2
    ROOK = 3
    BISHOP = 4
    KNIGHT = 5
    PAWN = 6


PROMOTION_TYPES: tuple[PieceType, ...] = (
    PieceType.QUEEN,
    PieceType.ROOK,
    PieceType.BISHOP,
    PieceType.KNIGHT,
)


class CastlingRights(IntFlag):
    """Bitmask for castling availability."""

    NONE = 0
    WHITE_KINGSIDE = auto()
    WHITE_QUEENSIDE = auto()
    BLACK_KINGSIDE = auto()
    BLACK_QUEENSIDE = auto()

    WHITE_BOTH = WHITE_KINGSIDE | WHITE_QUEENSIDE
    BLACK_BOTH = BLACK_KINGSIDE | BLACK_QUEENSIDE
    ALL = WHITE_BOTH | BLACK_BOTH

    @classmethod
    def from_fen(cls, text: str) -> CastlingRights:
        """Parse a FEN castling field such as ``"KQkq"`` or ``"-"``."""
        if text == "-":
            return cls.NONE
        letters = dict(_CASTLING_LETTERS)
        rights = cls.NONE
        seen: set[str] = set()
        for ch in text:
            bit = letters.get(ch)
            if bit is None or ch in seen:
                raise ValueError(f"Invalid castling field: {text!r}")
            seen.add(ch)
            rights |= bit
        if not seen:
            raise ValueError(f"Invalid castling field: {text!r}")
        return rights

    def to_fen(self) -> str:
        """Render as a subset of ``"KQkq"``, or ``"-"`` when empty."""
        text = "".join(ch for ch, bit in _CASTLING_LETTERS if self & bit)
        return text or "-"


_CASTLING_LETTERS: tuple[tuple[str, CastlingRights], ...] = (
    ("K", CastlingRights.WHITE_KINGSIDE),
    ("Q", CastlingRights.WHITE_QUEENSIDE),
    ("k", CastlingRights.BLACK_KINGSIDE),
    ("q", CastlingRights.BLACK_QUEENSIDE),
)


class GameState(Enum):
    """Classification of the current position."""

    IN_PROGRESS = auto()
    CHECKMATE_WHITE_WINS = auto()
    CHECKMATE_BLACK_WINS = auto()
    STALEMATE = auto()
    DRAW_BY_INSUFFICIENT_MATERIAL = auto()
    DRAW_BY_FIFTY_MOVE_RULE = auto()
    # Declared for completeness; repetition is not tracked, so the
    # classifier never produces it.
    DRAW_BY_THREEFOLD_REPETITION = auto()

    @property
    def is_game_over(self) -> bool:
        return self is not GameState.IN_PROGRESS
