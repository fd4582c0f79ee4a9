"""Shared notation-layer data models."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class ParsedPgn:
    """Headers, mainline move tokens and result extracted from PGN text."""

    headers: dict[str, str]
    tokens: list[str]
    result_token: str

    @property
    def start_fen(self) -> str | None:
        """FEN tag value, or ``None`` when the game starts normally."""
        if self.headers.get("SetUp", "1") != "1":
            return None
        return self.headers.get("FEN")
