"""Attack detection: which squares a piece attacks, and whether a king is in check."""

from __future__ import annotations

from chessgame.core.board import Board
from chessgame.core.enums import Color, PieceType
from chessgame.core.piece import Piece
from chessgame.core.types import ALL_SQUARES, Square

KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = BISHOP_DIRS + ROOK_DIRS


def pawn_direction(color: Color) -> int:
    """Rank step of a pawn of *color*: +1 for white, -1 for black."""
    return 1 if color == Color.WHITE else -1


# -- Precomputed lookup tables ---------------------------------------------


def _build_targets(
    offsets: tuple[tuple[int, int], ...],
) -> tuple[tuple[Square, ...], ...]:
    targets: list[tuple[Square, ...]] = []
    for sq in ALL_SQUARES:
        moves = (sq.offset(df, dr) for df, dr in offsets)
        targets.append(tuple(to_sq for to_sq in moves if to_sq is not None))
    return tuple(targets)


def _build_rays(
    directions: tuple[tuple[int, int], ...],
) -> tuple[tuple[tuple[Square, ...], ...], ...]:
    rays_per_square: list[tuple[tuple[Square, ...], ...]] = []
    for sq in ALL_SQUARES:
        square_rays: list[tuple[Square, ...]] = []
        for df, dr in directions:
            ray: list[Square] = []
            step = sq.offset(df, dr)
            while step is not None:
                ray.append(step)
                step = step.offset(df, dr)
            square_rays.append(tuple(ray))
        rays_per_square.append(tuple(square_rays))
    return tuple(rays_per_square)


KNIGHT_TARGETS = _build_targets(KNIGHT_OFFSETS)
KING_TARGETS = _build_targets(KING_OFFSETS)

BISHOP_RAYS = _build_rays(BISHOP_DIRS)
ROOK_RAYS = _build_rays(ROOK_DIRS)
QUEEN_RAYS = _build_rays(QUEEN_DIRS)

SLIDER_RAYS: dict[PieceType, tuple[tuple[tuple[Square, ...], ...], ...]] = {
    PieceType.BISHOP: BISHOP_RAYS,
    PieceType.ROOK: ROOK_RAYS,
    PieceType.QUEEN: QUEEN_RAYS,
}


# -- Attack detection ------------------------------------------------------


def attacks_square(board: Board, origin: Square, piece: Piece, target: Square) -> bool:
    """Does *piece* standing on *origin* attack *target*?

    Pawns attack diagonally forward only; kings attack adjacent squares only
    (castling destinations are never attack squares); sliders attack along
    each ray up to and including the first occupied square.
    """
    ptype = piece.piece_type
    if ptype == PieceType.PAWN:
        return target.rank - origin.rank == pawn_direction(piece.color) and abs(
            target.file - origin.file
        ) == 1
    if ptype == PieceType.KNIGHT:
        return target in KNIGHT_TARGETS[origin.index]
    if ptype == PieceType.KING:
        return target in KING_TARGETS[origin.index]

    for ray in SLIDER_RAYS[ptype][origin.index]:
        for sq in ray:
            if sq == target:
                return True
            if board[sq] is not None:
                break
    return False


def is_square_attacked(board: Board, square: Square, by_color: Color) -> bool:
    """Is *square* attacked by any piece of *by_color*?"""
    for origin, piece in board.occupied():
        if piece.color == by_color and attacks_square(board, origin, piece, square):
            return True
    return False


def is_in_check(board: Board, color: Color) -> bool:
    """Is *color*'s king attacked by the opponent?

    A board without a king of *color* is reported as in check.
    """
    king_sq = board.find_king(color)
    if king_sq is None:
        return True
    return is_square_attacked(board, king_sq, color.opposite)
