"""FEN parsing and serialization."""

from __future__ import annotations

from chessgame.core.board import Board
from chessgame.core.enums import CastlingRights, Color
from chessgame.core.piece import Piece
from chessgame.core.position import Position
from chessgame.core.types import Square, parse_square

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"

_SIDE_BY_CHAR: dict[str, Color] = {"w": Color.WHITE, "b": Color.BLACK}
# Rank an en passant target must sit on, keyed by the side to move.
_EP_RANK: dict[Color, int] = {Color.WHITE: 5, Color.BLACK: 2}


def _parse_counter(text: str, name: str, minimum: int) -> int:
    if not text.isdigit() or int(text) < minimum:
        raise ValueError(f"Invalid FEN {name}: {text!r}")
    return int(text)


def _parse_placement(placement: str) -> Board:
    rows = placement.split("/")
    if len(rows) != 8:
        raise ValueError(f"Invalid FEN board (must contain 8 ranks): {placement!r}")

    board = Board()
    for rank, row in zip(range(7, -1, -1), rows):
        file = 0
        for ch in row:
            if ch in "12345678":
                file += int(ch)
            elif file < 8:
                board[Square(file, rank)] = Piece.from_char(ch)
                file += 1
            else:
                raise ValueError(f"Invalid FEN rank width: {row!r}")
        if file != 8:
            raise ValueError(f"Invalid FEN rank width: {row!r}")
    return board


def _format_placement(board: Board) -> str:
    rows: list[str] = []
    for rank in range(7, -1, -1):
        row = ""
        gap = 0
        for file in range(8):
            piece = board[Square(file, rank)]
            if piece is None:
                gap += 1
                continue
            row += (str(gap) if gap else "") + str(piece)
            gap = 0
        rows.append(row + (str(gap) if gap else ""))
    return "/".join(rows)


def position_from_fen(fen: str) -> Position:
    """Parse a FEN string into a fresh :class:`Position`.

    Four to six fields are accepted; missing counters default to ``0 1``.
    Raises :class:`ValueError` on any malformed field.
    """
    parts = fen.split()
    if not (4 <= len(parts) <= 6):
        raise ValueError(f"Invalid FEN (need 4-6 fields): {fen!r}")

    placement, side_part, castling_part, ep_part = parts[:4]
    board = _parse_placement(placement)

    side = _SIDE_BY_CHAR.get(side_part)
    if side is None:
        raise ValueError(f"Invalid FEN side-to-move field: {side_part!r}")

    castling = CastlingRights.from_fen(castling_part)

    ep: Square | None = None
    if ep_part != "-":
        ep = parse_square(ep_part)
        if ep.rank != _EP_RANK[side]:
            raise ValueError(
                f"Invalid FEN en-passant square for side-to-move: {ep_part!r}"
            )

    halfmove = _parse_counter(parts[4], "halfmove clock", 0) if len(parts) > 4 else 0
    fullmove = _parse_counter(parts[5], "fullmove number", 1) if len(parts) > 5 else 1

    return Position(board, side, castling, ep, halfmove, fullmove)


def position_to_fen(pos: Position) -> str:
    """Serialise a :class:`Position` to six-field FEN."""
    side = "w" if pos.side_to_move == Color.WHITE else "b"
    ep = pos.en_passant.algebraic if pos.en_passant is not None else "-"
    return " ".join(
        (
            _format_placement(pos.board),
            side,
            pos.castling.to_fen(),
            ep,
            str(pos.halfmove_clock),
            str(pos.fullmove_number),
        )
    )
