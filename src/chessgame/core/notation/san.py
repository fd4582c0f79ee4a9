"""Best-effort resolution of SAN-like move tokens against legal moves."""

from __future__ import annotations

import re
from collections.abc import Sequence

from chessgame.core.enums import PieceType
from chessgame.core.move import Move
from chessgame.core.types import parse_square

_SAN_PIECE_REV: dict[str, PieceType] = {
    "N": PieceType.KNIGHT,
    "B": PieceType.BISHOP,
    "R": PieceType.ROOK,
    "Q": PieceType.QUEEN,
    "K": PieceType.KING,
}
_ANNOTATION_RE = re.compile(r"[+#!?]")
_TOKEN_RE = re.compile(
    r"^(?P<piece>[KQRBN])?(?P<file>[a-h])?(?P<rank>[1-8])?x?"
    r"(?P<dest>[a-h][1-8])(?:=(?P<promo>[QRBN]))?$"
)


def resolve_san(legal_moves: Sequence[Move], token: str) -> Move | None:
    """Pick the legal move a SAN-like *token* refers to.

    Accepts short SAN (``Nf3``, ``exd5``, ``e8=Q``) as well as the long form
    written by :attr:`Move.algebraic` (``Ng1f3``, ``e5xd6``). Candidates are
    filtered by destination, piece letter and promotion suffix (QUEEN when
    omitted), then by the optional origin file/rank hint. If several moves
    still match, the first in generation order is returned; this is not a
    complete SAN disambiguation.
    """
    clean = _ANNOTATION_RE.sub("", token)

    if clean in ("O-O", "O-O-O"):
        kingside = clean == "O-O"
        for move in legal_moves:
            if move.is_castling and move.is_kingside_castle == kingside:
                return move
        return None

    match = _TOKEN_RE.match(clean)
    if match is None:
        return None

    piece_type = _SAN_PIECE_REV.get(match["piece"] or "", PieceType.PAWN)
    dest = parse_square(match["dest"])
    promotion = _SAN_PIECE_REV[match["promo"]] if match["promo"] else PieceType.QUEEN

    candidates = [
        move
        for move in legal_moves
        if move.to_sq == dest
        and move.piece.piece_type == piece_type
        and (move.promotion is None or move.promotion == promotion)
    ]
    if len(candidates) <= 1:
        return candidates[0] if candidates else None

    from_file = ord(match["file"]) - ord("a") if match["file"] else None
    from_rank = int(match["rank"]) - 1 if match["rank"] else None
    for move in candidates:
        if from_file is not None and move.from_sq.file != from_file:
            continue
        if from_rank is not None and move.from_sq.rank != from_rank:
            continue
        return move
    return None
