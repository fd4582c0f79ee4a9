"""Notation package: FEN / PGN parsing and serialization."""

from chessgame.core.notation.fen import STARTING_FEN, position_from_fen, position_to_fen
from chessgame.core.notation.models import ParsedPgn
from chessgame.core.notation.pgn import (
    build_pgn,
    parse_pgn,
    pgn_movetext,
    pgn_result_token,
)
from chessgame.core.notation.san import resolve_san

__all__ = [
    "STARTING_FEN",
    "ParsedPgn",
    "position_from_fen",
    "position_to_fen",
    "resolve_san",
    "pgn_result_token",
    "pgn_movetext",
    "build_pgn",
    "parse_pgn",
]
