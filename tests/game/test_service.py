"""Tests for ChessService: the multi-game registry."""

import threading

from chessgame.core.notation import STARTING_FEN
from chessgame.core.types import E2, E4
from chessgame.game.service import ChessService


class TestCreateGame:
    def test_generated_id(self, service: ChessService) -> None:
        game = service.create_game()
        assert game is not None
        assert game.id
        assert service.get_game(game.id) is game

    def test_explicit_id(self, service: ChessService) -> None:
        game = service.create_game("lobby-1")
        assert game is not None
        assert game.id == "lobby-1"
        assert service.get_all_game_ids() == ["lobby-1"]

    def test_duplicate_id_rejected(self, service: ChessService) -> None:
        first = service.create_game("dup")
        assert service.create_game("dup") is None
        assert service.get_game("dup") is first
        assert service.get_all_game_ids() == ["dup"]

    def test_new_game_at_start(self, service: ChessService) -> None:
        game = service.create_game()
        assert game.export_fen() == STARTING_FEN

    def test_config_applied(self, service: ChessService) -> None:
        pgn = service.create_game().export_pgn()
        assert '[Event "Test Event"]' in pgn
        assert '[White "Alice"]' in pgn
        assert '[Black "Bob"]' in pgn


class TestRegistry:
    def test_unknown_game(self, service: ChessService) -> None:
        assert service.get_game("missing") is None

    def test_games_are_independent(self, service: ChessService) -> None:
        a = service.create_game("a")
        b = service.create_game("b")
        a.make_move(E2, E4)
        assert b.export_fen() == STARTING_FEN

    def test_delete(self, service: ChessService) -> None:
        service.create_game("x")
        assert service.delete_game("x")
        assert service.get_game("x") is None
        assert not service.delete_game("x")

    def test_all_ids(self, service: ChessService) -> None:
        service.create_game("a")
        service.create_game("b")
        assert sorted(service.get_all_game_ids()) == ["a", "b"]

    def test_clear(self, service: ChessService) -> None:
        service.create_game("a")
        service.create_game("b")
        service.clear_all_games()
        assert service.get_all_game_ids() == []
        assert service.get_game("a") is None

    def test_default_config(self) -> None:
        pgn = ChessService().create_game().export_pgn()
        assert '[Event "Chess Game"]' in pgn


class TestConcurrency:
    def test_parallel_creation(self, service: ChessService) -> None:
        def worker() -> None:
            for _ in range(50):
                service.create_game()

        threads = [threading.Thread(target=worker) for _ in range(4)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(service.get_all_game_ids()) == 200
