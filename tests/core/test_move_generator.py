"""Perft tests: the gold standard for move-generator correctness.

Reference values: https://www.chessprogramming.org/Perft_Results
"""

import pytest

from chessgame.core.enums import Color, PieceType
from chessgame.core.move_generator import MoveGenerator
from chessgame.core.notation import STARTING_FEN, position_from_fen
from chessgame.core.position import Position
from chessgame.core.types import A7, B5, B6, C1, D5, D6, E1, E2, E5, G1, Square


def perft(position: Position, depth: int) -> int:
    """Count leaf nodes at *depth*, playing each move on a copy."""
    if depth == 0:
        return 1
    moves = MoveGenerator(position).generate_legal_moves()
    if depth == 1:
        return len(moves)
    nodes = 0
    for move in moves:
        child = position.copy()
        child.make_move(move)
        nodes += perft(child, depth - 1)
    return nodes


def _targets(fen: str, square: Square) -> set[Square]:
    pos = position_from_fen(fen)
    return {m.to_sq for m in MoveGenerator(pos).generate_legal_moves(square)}


# ── Starting position ────────────────────────────────────────────────────────


class TestPerftStarting:
    def test_depth_1(self) -> None:
        pos = position_from_fen(STARTING_FEN)
        assert perft(pos, 1) == 20

    def test_depth_2(self) -> None:
        pos = position_from_fen(STARTING_FEN)
        assert perft(pos, 2) == 400

    def test_depth_3(self) -> None:
        pos = position_from_fen(STARTING_FEN)
        assert perft(pos, 3) == 8_902

    @pytest.mark.slow
    def test_depth_4(self) -> None:
        pos = position_from_fen(STARTING_FEN)
        assert perft(pos, 4) == 197_281


# ── Kiwipete (rich in tactics: castling, ep, promotions) ─────────────────────

KIWIPETE = "r3k2r/p1ppqpb1/bn2pnp1/3PN3/1p2P3/2N2Q1p/PPPBBPPP/R3K2R w KQkq - 0 1"


class TestPerftKiwipete:
    def test_depth_1(self) -> None:
        pos = position_from_fen(KIWIPETE)
        assert perft(pos, 1) == 48

    def test_depth_2(self) -> None:
        pos = position_from_fen(KIWIPETE)
        assert perft(pos, 2) == 2_039

    @pytest.mark.slow
    def test_depth_3(self) -> None:
        pos = position_from_fen(KIWIPETE)
        assert perft(pos, 3) == 97_862


# ── Endgame with en passant discovered checks ────────────────────────────────

POSITION_3 = "8/2p5/3p4/KP5r/1R3p1k/8/4P1P1/8 w - - 0 1"


class TestPerftPosition3:
    def test_depth_1(self) -> None:
        pos = position_from_fen(POSITION_3)
        assert perft(pos, 1) == 14

    def test_depth_2(self) -> None:
        pos = position_from_fen(POSITION_3)
        assert perft(pos, 2) == 191

    def test_depth_3(self) -> None:
        pos = position_from_fen(POSITION_3)
        assert perft(pos, 3) == 2_812

    @pytest.mark.slow
    def test_depth_4(self) -> None:
        pos = position_from_fen(POSITION_3)
        assert perft(pos, 4) == 43_238


# ── Promotions and castling rights under attack ──────────────────────────────

POSITION_4 = "r3k2r/Pppp1ppp/1b3nbN/nP6/BBP1P3/q4N2/Pp1P2PP/R2Q1RK1 w kq - 0 1"
POSITION_5 = "rnbq1k1r/pp1Pbppp/2p5/8/2B5/8/PPP1NnPP/RNBQK2R w KQ - 1 8"


class TestPerftPromotions:
    def test_position_4_depth_1(self) -> None:
        assert perft(position_from_fen(POSITION_4), 1) == 6

    def test_position_4_depth_2(self) -> None:
        assert perft(position_from_fen(POSITION_4), 2) == 264

    def test_position_5_depth_1(self) -> None:
        assert perft(position_from_fen(POSITION_5), 1) == 44

    def test_position_5_depth_2(self) -> None:
        assert perft(position_from_fen(POSITION_5), 2) == 1_486


# ── Targeted generation ──────────────────────────────────────────────────────


class TestPieceMoves:
    def test_square_filter(self) -> None:
        pos = position_from_fen(STARTING_FEN)
        moves = MoveGenerator(pos).generate_legal_moves(E2)
        assert {m.to_sq.algebraic for m in moves} == {"e3", "e4"}

    def test_opponent_square_is_empty(self) -> None:
        pos = position_from_fen(STARTING_FEN)
        assert MoveGenerator(pos).generate_legal_moves(E2.offset(0, 5)) == []

    def test_empty_square(self) -> None:
        pos = position_from_fen(STARTING_FEN)
        assert MoveGenerator(pos).generate_legal_moves(E5) == []

    def test_generation_leaves_position_untouched(self) -> None:
        pos = position_from_fen(KIWIPETE)
        before = pos.copy()
        MoveGenerator(pos).generate_legal_moves()
        assert pos == before

    def test_promotion_choices(self) -> None:
        pos = position_from_fen("8/P7/8/8/8/8/8/k6K w - - 0 1")
        moves = MoveGenerator(pos).generate_legal_moves(A7)
        assert sorted(m.promotion for m in moves) == sorted(
            [PieceType.QUEEN, PieceType.ROOK, PieceType.BISHOP, PieceType.KNIGHT]
        )

    def test_pinned_piece_cannot_move(self) -> None:
        assert _targets("4k3/4r3/8/8/8/8/4N3/4K3 w - - 0 1", E2) == set()

    def test_must_resolve_check(self) -> None:
        pos = position_from_fen("4r1k1/8/8/8/8/8/8/R3K3 w - - 0 1")
        for move in MoveGenerator(pos).generate_legal_moves():
            child = pos.copy()
            child.make_move(move)
            assert not MoveGenerator(child).is_in_check(Color.WHITE)


class TestEnPassant:
    def test_capture_available(self) -> None:
        fen = "rnbqkbnr/ppp1pppp/8/3pP3/8/8/PPPP1PPP/RNBQKBNR w KQkq d6 0 3"
        pos = position_from_fen(fen)
        moves = MoveGenerator(pos).generate_legal_moves(E5)
        ep = [m for m in moves if m.is_en_passant]
        assert len(ep) == 1
        assert ep[0].to_sq == D6
        assert ep[0].captured_piece is not None

    def test_not_available_without_target(self) -> None:
        fen = "rnbqkbnr/ppp1pppp/8/3pP3/8/8/PPPP1PPP/RNBQKBNR w KQkq - 0 3"
        pos = position_from_fen(fen)
        assert not any(m.is_en_passant for m in MoveGenerator(pos).generate_legal_moves())

    def test_horizontal_pin(self) -> None:
        fen = "8/8/8/KPp4r/8/8/8/4k3 w - c6 0 1"
        assert _targets(fen, B5) == {B6}

    def test_requires_pawn_beside(self) -> None:
        fen = "4k3/8/8/3P4/8/8/8/4K3 w - e6 0 1"
        assert _targets(fen, D5) == {D6}
        pos = position_from_fen(fen)
        assert not any(m.is_en_passant for m in MoveGenerator(pos).generate_legal_moves())


class TestCastling:
    def test_both_sides(self) -> None:
        targets = _targets("r3k2r/8/8/8/8/8/8/R3K2R w KQkq - 0 1", E1)
        assert G1 in targets
        assert C1 in targets

    def test_blocked(self) -> None:
        targets = _targets("r3k2r/8/8/8/8/8/8/RN2K1NR w KQkq - 0 1", E1)
        assert G1 not in targets
        assert C1 not in targets

    def test_not_out_of_check(self) -> None:
        targets = _targets("4r1k1/8/8/8/8/8/8/R3K2R w KQ - 0 1", E1)
        assert G1 not in targets
        assert C1 not in targets

    def test_not_through_attacked_square(self) -> None:
        targets = _targets("4k3/8/8/8/8/8/5r2/R3K2R w KQ - 0 1", E1)
        assert G1 not in targets
        assert C1 in targets

    def test_b_file_attack_does_not_block_queenside(self) -> None:
        assert C1 in _targets("1r2k3/8/8/8/8/8/8/R3K3 w Q - 0 1", E1)

    def test_requires_right(self) -> None:
        targets = _targets("r3k2r/8/8/8/8/8/8/R3K2R w Qkq - 0 1", E1)
        assert G1 not in targets
        assert C1 in targets

    def test_requires_rook_on_corner(self) -> None:
        targets = _targets("r3k2r/8/8/8/8/8/8/4K2R w KQkq - 0 1", E1)
        assert G1 in targets
        assert C1 not in targets

    def test_castling_move_flag(self) -> None:
        pos = position_from_fen("r3k2r/8/8/8/8/8/8/R3K2R w KQkq - 0 1")
        castles = [
            m for m in MoveGenerator(pos).generate_legal_moves(E1) if m.is_castling
        ]
        assert {m.is_kingside_castle for m in castles} == {True, False}
