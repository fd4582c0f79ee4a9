"""Tests for the snapshot-based move history."""

from chessgame.core.enums import Color, PieceType
from chessgame.core.move import Move
from chessgame.core.piece import Piece
from chessgame.core.position import Position
from chessgame.core.types import E2, E4, E5, E7
from chessgame.game.history import History

WP = Piece(Color.WHITE, PieceType.PAWN)
BP = Piece(Color.BLACK, PieceType.PAWN)


def _history_with_two_moves() -> tuple[History, Position, Position, Position]:
    start = Position()
    history = History(start)
    first = start.copy()
    move_1 = Move(E2, E4, WP)
    first.make_move(move_1)
    history.record(move_1, first)
    second = first.copy()
    move_2 = Move(E7, E5, BP)
    second.make_move(move_2)
    history.record(move_2, second)
    return history, start, first, second


class TestHistory:
    def test_empty(self) -> None:
        history = History(Position())
        assert len(history) == 0
        assert history.start == Position()
        assert history.moves == []
        assert history.undo_last() is None

    def test_record(self) -> None:
        history, *_ = _history_with_two_moves()
        assert len(history) == 2
        assert [m.to_sq for m in history.moves] == [E4, E5]

    def test_undo_last(self) -> None:
        history, start, first, _ = _history_with_two_moves()
        restored = history.undo_last()
        assert restored == first
        assert len(history) == 1
        assert history.undo_last() == start

    def test_undo_to(self) -> None:
        history, start, _, _ = _history_with_two_moves()
        assert history.undo_to(0) == start
        assert len(history) == 0

    def test_undo_to_out_of_range(self) -> None:
        history, *_ = _history_with_two_moves()
        assert history.undo_to(3) is None
        assert history.undo_to(-1) is None
        assert len(history) == 2

    def test_snapshots_are_not_aliased(self) -> None:
        history, _, first, _ = _history_with_two_moves()
        restored = history.undo_last()
        assert restored is not None
        restored.board[E4] = None
        assert history.undo_to(1) == first

    def test_recorded_position_is_copied(self) -> None:
        start = Position()
        history = History(start)
        start.make_move(Move(E2, E4, WP))
        assert history.start == Position()
