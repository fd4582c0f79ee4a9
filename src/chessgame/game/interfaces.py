"""Abstract interfaces for the game layer.

Collaborators (UI, network transport, tests) depend on these ABCs rather
than on the concrete :class:`ChessGame` / :class:`ChessService`.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import TYPE_CHECKING

from chessgame.core.enums import Color

if TYPE_CHECKING:
    from chessgame.core.enums import GameState, PieceType
    from chessgame.core.move import Move
    from chessgame.core.piece import Piece
    from chessgame.core.types import Square


class IChessGame(ABC):
    """A single chess game. Not thread-safe; callers serialise access."""

    @property
    @abstractmethod
    def id(self) -> str: ...

    @abstractmethod
    def reset(self) -> None: ...

    @abstractmethod
    def setup_position(
        self,
        pieces: Mapping[Square, Piece],
        active_color: Color = Color.WHITE,
        castling_rights: str = "KQkq",
        en_passant_target: Square | None = None,
        halfmove_clock: int = 0,
        fullmove_number: int = 1,
    ) -> None: ...

    @abstractmethod
    def import_fen(self, fen: str) -> bool: ...

    @abstractmethod
    def export_fen(self) -> str: ...

    @abstractmethod
    def import_pgn(self, pgn: str) -> bool: ...

    @abstractmethod
    def export_pgn(self) -> str: ...

    @abstractmethod
    def get_piece_at(self, square: Square) -> Piece | None: ...

    @abstractmethod
    def get_all_pieces(self) -> dict[Square, Piece]: ...

    @abstractmethod
    def make_move(
        self,
        from_sq: Square,
        to_sq: Square,
        promotion: PieceType | None = None,
    ) -> Move | None: ...

    @abstractmethod
    def get_legal_moves(self, square: Square | None = None) -> list[Move]: ...

    @abstractmethod
    def is_in_check(self, color: Color) -> bool: ...

    @abstractmethod
    def get_game_state(self) -> GameState: ...

    @abstractmethod
    def get_active_color(self) -> Color: ...

    @abstractmethod
    def get_move_history(self) -> list[Move]: ...

    @abstractmethod
    def undo_last_move(self) -> bool: ...

    @abstractmethod
    def undo_to_move(self, move_number: int) -> bool: ...

    @abstractmethod
    def get_undo_count(self) -> int: ...


class IChessService(ABC):
    """Registry of games keyed by id."""

    @abstractmethod
    def create_game(self, game_id: str | None = None) -> IChessGame | None:
        """New game; ``None`` if *game_id* is already taken."""

    @abstractmethod
    def get_game(self, game_id: str) -> IChessGame | None: ...

    @abstractmethod
    def delete_game(self, game_id: str) -> bool: ...

    @abstractmethod
    def get_all_game_ids(self) -> list[str]: ...

    @abstractmethod
    def clear_all_games(self) -> None: ...
