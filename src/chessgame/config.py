"""Game configuration."""

from __future__ import annotations

from dataclasses import dataclass

UNKNOWN_DATE = "????.??.??"


@dataclass(frozen=True, slots=True)
class GameConfig:
    """Defaults written into the tag pairs of exported PGN.

    Args:
        event: ``Event`` tag.
        site: ``Site`` tag.
        date: ``Date`` tag in ``YYYY.MM.DD`` form; ``None`` writes the
            PGN "unknown" placeholder.
        round: ``Round`` tag.
        white: ``White`` player name.
        black: ``Black`` player name.
    """

    event: str = "Chess Game"
    site: str = "ChessGame App"
    date: str | None = None
    round: str = "-"
    white: str = "Player"
    black: str = "Player"

    def pgn_headers(self) -> dict[str, str]:
        """The seven-tag roster minus ``Result``, in standard order."""
        return {
            "Event": self.event,
            "Site": self.site,
            "Date": self.date or UNKNOWN_DATE,
            "Round": self.round,
            "White": self.white,
            "Black": self.black,
        }
