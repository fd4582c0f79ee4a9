"""Move history and snapshot stack for undo."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from chessgame.core.move import Move
    from chessgame.core.position import Position


class History:
    """Stack of full position snapshots alongside the moves played.

    ``snapshots[0]`` is the setup position and ``snapshots[i]`` the position
    after ``moves[i - 1]``, so there is always one more snapshot than moves.
    Snapshots are stored and handed out as copies, never aliased.

    Every ply costs a whole-board copy; fine for human games, a known limit
    for very long ones.
    """

    __slots__ = ("_snapshots", "_moves")

    def __init__(self, start: Position) -> None:
        self._snapshots: list[Position] = [start.copy()]
        self._moves: list[Move] = []

    def record(self, move: Move, position: Position) -> None:
        """Append *move* and a snapshot of the *position* it produced."""
        self._snapshots.append(position.copy())
        self._moves.append(move)

    def undo_last(self) -> Position | None:
        """Drop the last ply; return a copy of the new current position."""
        if not self._moves:
            return None
        self._snapshots.pop()
        self._moves.pop()
        return self._snapshots[-1].copy()

    def undo_to(self, move_count: int) -> Position | None:
        """Keep the first *move_count* plies; ``None`` if out of range."""
        if not 0 <= move_count <= len(self._moves):
            return None
        del self._snapshots[move_count + 1 :]
        del self._moves[move_count:]
        return self._snapshots[-1].copy()

    @property
    def start(self) -> Position:
        """Copy of the position the history starts from."""
        return self._snapshots[0].copy()

    @property
    def moves(self) -> list[Move]:
        return list(self._moves)

    def __len__(self) -> int:
        return len(self._moves)
