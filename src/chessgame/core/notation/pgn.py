"""PGN parsing and serialization helpers.

Import is deliberately best-effort: comments, variations and tag pairs are
stripped with regular expressions and move tokens are picked out of what
remains. Tokens are resolved against legal moves by
:func:`chessgame.core.notation.san.resolve_san`.
"""

from __future__ import annotations

import re

from chessgame.core.enums import GameState
from chessgame.core.notation.models import ParsedPgn

_PGN_HEADER_RE = re.compile(r'^\[(\w+)\s+"((?:[^"\\]|\\.)*)"\]\s*$')
_PGN_RESULT_TOKENS = ("1-0", "0-1", "1/2-1/2", "*")
_RESULT_RE = re.compile(r"(?<![\w/-])(1-0|0-1|1/2-1/2|\*)(?![\w/-])")
_COMMENT_RE = re.compile(r"\{[^}]*\}")
_VARIATION_RE = re.compile(r"\([^)]*\)")
_TAG_RE = re.compile(r"\[[^\]]*\]")
_MOVE_TOKEN_RE = re.compile(r"[KQRBN]?[a-h]?[1-8]?x?[a-h][1-8](?:=[QRBN])?|O-O(?:-O)?")

_RESULT_BY_STATE: dict[GameState, str] = {
    GameState.CHECKMATE_WHITE_WINS: "1-0",
    GameState.CHECKMATE_BLACK_WINS: "0-1",
    GameState.STALEMATE: "1/2-1/2",
    GameState.DRAW_BY_INSUFFICIENT_MATERIAL: "1/2-1/2",
    GameState.DRAW_BY_FIFTY_MOVE_RULE: "1/2-1/2",
    GameState.DRAW_BY_THREEFOLD_REPETITION: "1/2-1/2",
}


def pgn_result_token(state: GameState) -> str:
    """Convert :class:`GameState` to a PGN result token."""
    return _RESULT_BY_STATE.get(state, "*")


def pgn_movetext(
    sans: list[str],
    result_token: str,
    first_move_number: int = 1,
    black_first: bool = False,
) -> str:
    """Build PGN movetext, numbering from *first_move_number*.

    When *black_first* is set the first move is written as ``N... move``.
    """
    parts: list[str] = []
    offset = 1 if black_first else 0
    for idx, san in enumerate(sans):
        ply = idx + offset
        number = first_move_number + ply // 2
        if ply % 2 == 0:
            parts.append(f"{number}.")
        elif idx == 0:
            parts.append(f"{number}...")
        parts.append(san)
    parts.append(result_token)
    return " ".join(parts)


def build_pgn(
    headers: dict[str, str],
    sans: list[str],
    result_token: str,
    first_move_number: int = 1,
    black_first: bool = False,
) -> str:
    """Build a single-game PGN document."""
    lines: list[str] = []
    for key, value in headers.items():
        escaped = value.replace("\\", "\\\\").replace('"', '\\"')
        lines.append(f'[{key} "{escaped}"]')
    lines.append("")
    lines.append(pgn_movetext(sans, result_token, first_move_number, black_first))
    return "\n".join(lines)


def parse_pgn(pgn_text: str) -> ParsedPgn:
    """Split PGN text into tag pairs, mainline move tokens and the result."""
    headers: dict[str, str] = {}
    move_lines: list[str] = []

    for raw_line in pgn_text.splitlines():
        line = raw_line.strip()
        match = _PGN_HEADER_RE.match(line)
        if match is not None:
            key, raw_value = match.groups()
            headers[key] = raw_value.replace('\\"', '"').replace("\\\\", "\\")
            continue
        move_lines.append(line)

    movetext = "\n".join(move_lines)
    movetext = _TAG_RE.sub(" ", movetext)
    movetext = _COMMENT_RE.sub(" ", movetext)
    movetext = _VARIATION_RE.sub(" ", movetext)

    tokens = [m.group(0) for m in _MOVE_TOKEN_RE.finditer(movetext)]

    results = _RESULT_RE.findall(movetext)
    result_token = results[-1] if results else "*"
    header_result = headers.get("Result")
    if result_token == "*" and header_result in _PGN_RESULT_TOKENS:
        result_token = header_result

    return ParsedPgn(headers=headers, tokens=tokens, result_token=result_token)
