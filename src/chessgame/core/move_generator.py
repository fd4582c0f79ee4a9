"""Legal and pseudo-legal move generation."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chessgame.core.attacks import (
    KING_TARGETS,
    KNIGHT_TARGETS,
    SLIDER_RAYS,
    is_in_check,
    is_square_attacked,
    pawn_direction,
)
from chessgame.core.enums import PROMOTION_TYPES, CastlingRights, Color, PieceType
from chessgame.core.move import Move
from chessgame.core.piece import Piece
from chessgame.core.types import Square

if TYPE_CHECKING:
    from chessgame.core.position import Position


_KINGSIDE_RIGHT: dict[Color, CastlingRights] = {
    Color.WHITE: CastlingRights.WHITE_KINGSIDE,
    Color.BLACK: CastlingRights.BLACK_KINGSIDE,
}
_QUEENSIDE_RIGHT: dict[Color, CastlingRights] = {
    Color.WHITE: CastlingRights.WHITE_QUEENSIDE,
    Color.BLACK: CastlingRights.BLACK_QUEENSIDE,
}


class MoveGenerator:
    """Generates moves for a given :class:`Position`.

    Legality is checked by temporarily editing only the cells a move touches
    and restoring them before returning; the position is never left modified.
    """

    __slots__ = ("_pos", "_board")

    def __init__(self, position: Position) -> None:
        self._pos = position
        self._board = position.board

    # -- Public API ---------------------------------------------------------

    def generate_legal_moves(self, square: Square | None = None) -> list[Move]:
        """Strictly legal moves for the side to move.

        With *square*, only moves of the piece standing there; an empty
        square, an off-board square or an opponent's piece yields ``[]``.
        """
        if square is None:
            candidates = self.generate_pseudo_legal_moves()
        else:
            if not square.is_valid():
                return []
            piece = self._board[square]
            if piece is None or piece.color != self._pos.side_to_move:
                return []
            candidates = self.generate_moves(square, piece)
        return [move for move in candidates if not self.leaves_king_in_check(move)]

    def generate_pseudo_legal_moves(self) -> list[Move]:
        """All pseudo-legal moves (may leave own king in check)."""
        moves: list[Move] = []
        color = self._pos.side_to_move
        for sq, piece in self._board.occupied():
            if piece.color == color:
                moves.extend(self.generate_moves(sq, piece))
        return moves

    def generate_moves(self, sq: Square, piece: Piece) -> list[Move]:
        """Pseudo-legal moves of *piece* standing on *sq*."""
        moves: list[Move] = []
        ptype = piece.piece_type
        if ptype == PieceType.PAWN:
            self._gen_pawn(sq, piece, moves)
        elif ptype == PieceType.KNIGHT:
            self._gen_steps(sq, piece, KNIGHT_TARGETS[sq.index], moves)
        elif ptype == PieceType.KING:
            self._gen_steps(sq, piece, KING_TARGETS[sq.index], moves)
            self._gen_castling(sq, piece, moves)
        else:
            self._gen_sliding(sq, piece, SLIDER_RAYS[ptype][sq.index], moves)
        return moves

    def leaves_king_in_check(self, move: Move) -> bool:
        """Would *move* leave the mover's own king attacked?"""
        board = self._board
        from_piece = board[move.from_sq]
        to_piece = board[move.to_sq]
        ep_sq: Square | None = None
        ep_piece: Piece | None = None

        board[move.from_sq] = None
        board[move.to_sq] = move.piece
        if move.is_en_passant:
            # The captured pawn sits beside the origin, not on the destination.
            ep_sq = Square(move.to_sq.file, move.from_sq.rank)
            ep_piece = board[ep_sq]
            board[ep_sq] = None

        try:
            return is_in_check(board, move.piece.color)
        finally:
            board[move.to_sq] = to_piece
            board[move.from_sq] = from_piece
            if ep_sq is not None:
                board[ep_sq] = ep_piece

    # -- Attack detection (public) -----------------------------------------

    def is_in_check(self, color: Color) -> bool:
        return is_in_check(self._board, color)

    def is_square_attacked(self, sq: Square, by_color: Color) -> bool:
        return is_square_attacked(self._board, sq, by_color)

    # -- Piece-specific generators (private) -------------------------------

    def _gen_pawn(self, sq: Square, piece: Piece, moves: list[Move]) -> None:
        board = self._board
        direction = pawn_direction(piece.color)
        start_rank = 1 if piece.color == Color.WHITE else 6
        promotion_rank = 7 if piece.color == Color.WHITE else 0

        one_step = sq.offset(0, direction)
        if one_step is not None and board.is_empty(one_step):
            if one_step.rank == promotion_rank:
                for pt in PROMOTION_TYPES:
                    moves.append(Move(sq, one_step, piece, promotion=pt))
            else:
                moves.append(Move(sq, one_step, piece))
                if sq.rank == start_rank:
                    two_step = sq.offset(0, 2 * direction)
                    if two_step is not None and board.is_empty(two_step):
                        moves.append(Move(sq, two_step, piece))

        for file_delta in (-1, 1):
            cap_sq = sq.offset(file_delta, direction)
            if cap_sq is None:
                continue
            target = board[cap_sq]
            if target is not None and target.color != piece.color:
                if cap_sq.rank == promotion_rank:
                    for pt in PROMOTION_TYPES:
                        moves.append(Move(sq, cap_sq, piece, target, promotion=pt))
                else:
                    moves.append(Move(sq, cap_sq, piece, target))
            elif target is None and cap_sq == self._pos.en_passant:
                # the pawn that double-pushed sits beside us, not on cap_sq
                captured = board[Square(cap_sq.file, sq.rank)]
                if captured != Piece(piece.color.opposite, PieceType.PAWN):
                    continue
                moves.append(Move(sq, cap_sq, piece, captured, is_en_passant=True))

    def _gen_steps(
        self,
        sq: Square,
        piece: Piece,
        targets: tuple[Square, ...],
        moves: list[Move],
    ) -> None:
        board = self._board
        for to_sq in targets:
            target = board[to_sq]
            if target is None or target.color != piece.color:
                moves.append(Move(sq, to_sq, piece, target))

    def _gen_sliding(
        self,
        sq: Square,
        piece: Piece,
        rays: tuple[tuple[Square, ...], ...],
        moves: list[Move],
    ) -> None:
        board = self._board
        for ray in rays:
            for to_sq in ray:
                target = board[to_sq]
                if target is None:
                    moves.append(Move(sq, to_sq, piece))
                    continue
                if target.color != piece.color:
                    moves.append(Move(sq, to_sq, piece, target))
                break

    def _gen_castling(self, king_sq: Square, king: Piece, moves: list[Move]) -> None:
        color = king.color
        home_rank = 0 if color == Color.WHITE else 7
        if king_sq != Square(4, home_rank):
            return

        opponent = color.opposite
        if self.is_square_attacked(king_sq, opponent):
            return

        board = self._board
        rook = Piece(color, PieceType.ROOK)

        if self._pos.castling & _KINGSIDE_RIGHT[color]:
            f_sq = Square(5, home_rank)
            g_sq = Square(6, home_rank)
            if (
                board[Square(7, home_rank)] == rook
                and board.is_empty(f_sq)
                and board.is_empty(g_sq)
                and not self.is_square_attacked(f_sq, opponent)
                and not self.is_square_attacked(g_sq, opponent)
            ):
                moves.append(Move(king_sq, g_sq, king, is_castling=True))

        if self._pos.castling & _QUEENSIDE_RIGHT[color]:
            b_sq = Square(1, home_rank)
            c_sq = Square(2, home_rank)
            d_sq = Square(3, home_rank)
            if (
                board[Square(0, home_rank)] == rook
                and board.is_empty(b_sq)
                and board.is_empty(c_sq)
                and board.is_empty(d_sq)
                and not self.is_square_attacked(d_sq, opponent)
                and not self.is_square_attacked(c_sq, opponent)
            ):
                moves.append(Move(king_sq, c_sq, king, is_castling=True))
