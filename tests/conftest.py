import random

import pytest

from connectfour.game.board import Board

# Fills the board with no four anywhere: cell (row, col) belongs to player 1
# when (col // 2 + row) is even.
DRAW_SEQUENCE = (
    [0] + [2] * 6 + [3] * 6 + [6] * 6 + [0] * 5 + [1] * 6 + [4] * 6 + [5] * 6
)


@pytest.fixture
def draw_moves():
    return list(DRAW_SEQUENCE)


@pytest.fixture
def random_positions():
    """Boards reached by seeded random play that stop before anyone wins."""
    rng = random.Random(1234)
    boards = []
    for length in (0, 3, 6, 9, 12, 15, 18, 22):
        board = Board()
        while board.ply < length:
            moves = list(board.legal_moves())
            board.apply_move(rng.choice(moves))
            if board.winner() is not None:
                board.undo_move()
                break
        boards.append(board)
    return boards
