"""Tests for the static evaluation used at search leaves."""

from connectfour.agent.heuristic import (
    WIN_SCORE,
    evaluate,
    heuristic_value,
)
from connectfour.game.board import Board
from connectfour.game.types import Token


class TestTerminal:
    def test_win_for_side(self):
        b = Board.from_moves([0, 1, 0, 1, 0, 1, 0])
        assert heuristic_value(b, Token.PLAYER1, Token.PLAYER1, False) == WIN_SCORE
        assert heuristic_value(b, Token.PLAYER2, Token.PLAYER1, False) == -WIN_SCORE

    def test_draw_is_zero(self, draw_moves):
        b = Board.from_moves(draw_moves)
        assert heuristic_value(b, Token.PLAYER1, None, True) == 0
        assert evaluate(b, Token.PLAYER2) == 0

    def test_evaluate_detects_win(self):
        b = Board.from_moves([6, 0, 6, 1, 5, 2, 5, 3])
        assert evaluate(b, Token.PLAYER2) == WIN_SCORE
        assert evaluate(b, Token.PLAYER1) == -WIN_SCORE


class TestLineScoring:
    def test_empty_board_is_zero(self):
        assert heuristic_value(Board(), Token.PLAYER1) == 0

    def test_single_center_disc(self):
        # All four lines through the bottom centre can still reach four
        b = Board.from_moves([3])
        assert heuristic_value(b, Token.PLAYER1) == 40
        assert heuristic_value(b, Token.PLAYER2) == -40

    def test_single_corner_disc(self):
        # The \ diagonal through a bottom corner has room for one cell only
        b = Board.from_moves([0])
        assert heuristic_value(b, Token.PLAYER1) == 30

    def test_opposing_discs_cut_lines(self):
        # Player 1 on (0,1) (1,1), player 2 on (0,0) (1,0). Player 2 has no
        # room horizontally, so only its vertical pair and one diagonal count.
        b = Board.from_moves([1, 0, 1, 0])
        assert heuristic_value(b, Token.PLAYER1) == 80 - 50

    def test_stacked_pair(self):
        # Each disc of the vertical pair scores 20 vertically plus 10 for
        # each of the other three lines; the lone corner disc scores 20.
        b = Board.from_moves([3, 6, 3])
        assert heuristic_value(b, Token.PLAYER1) == 100 - 20


class TestSymmetry:
    def test_negation_between_sides(self, random_positions):
        for b in random_positions:
            assert b.winner() is None
            full = b.is_full()
            assert heuristic_value(b, Token.PLAYER1, None, full) == -heuristic_value(
                b, Token.PLAYER2, None, full
            )

    def test_mirror_image_scores_the_same(self):
        moves = [3, 2, 4, 4, 1, 0]
        mirrored = [6 - c for c in moves]
        a = Board.from_moves(moves)
        b = Board.from_moves(mirrored)
        for side in Token:
            assert heuristic_value(a, side) == heuristic_value(b, side)
