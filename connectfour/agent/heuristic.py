"""Static evaluation of Connect Four positions for the search agent."""

from __future__ import annotations

from typing import Optional

from connectfour.game.board import HEIGHT, WIDTH, Board
from connectfour.game.types import Token

WIN_SCORE = 10_000
DRAW_SCORE = 0

# Points per disc already in a line that can still reach four
LINE_WEIGHT = 10

# (row delta, column delta): vertical, diagonal /, horizontal, diagonal \
DIRECTIONS = [(1, 0), (1, 1), (0, 1), (-1, 1)]


def _line_length(
    board: Board,
    row: int,
    column: int,
    direction: tuple[int, int],
    token: Token,
) -> tuple[int, int]:
    """Walk away from (row, column) until an opposing disc or the edge.

    Returns (discs of `token` seen, cells walked).
    """
    dr, dc = direction
    current = 0
    possible = 0
    while True:
        row += dr
        column += dc
        if not (0 <= row < HEIGHT and 0 <= column < WIDTH):
            break
        cell = board.token_at(row, column)
        if cell is token:
            current += 1
        elif cell is not None:
            break
        possible += 1
    return current, possible


def heuristic_value(
    board: Board,
    side: Token,
    winner: Optional[Token] = None,
    is_full: bool = False,
) -> int:
    """Score the board from `side`'s point of view.

    Terminal boards score +/-WIN_SCORE or DRAW_SCORE. Otherwise every disc
    adds LINE_WEIGHT per disc in each line through it that still has room
    for four, positive for `side` and negative for the opponent, so the
    score for one side is exactly the negation of the other's.
    """
    if winner is not None:
        return WIN_SCORE if winner is side else -WIN_SCORE
    if is_full:
        return DRAW_SCORE

    total = 0
    for column in range(WIDTH):
        for row in range(HEIGHT):
            token = board.token_at(row, column)
            if token is None:
                continue
            for dr, dc in DIRECTIONS:
                fwd_current, fwd_possible = _line_length(board, row, column, (dr, dc), token)
                bwd_current, bwd_possible = _line_length(board, row, column, (-dr, -dc), token)

                current_len = fwd_current + bwd_current + 1
                possible_len = fwd_possible + bwd_possible + 1

                if possible_len >= 4:
                    score = LINE_WEIGHT * current_len
                    if token is side:
                        total += score
                    else:
                        total -= score
    return total


def evaluate(board: Board, side: Token) -> int:
    """Terminal-aware evaluation of `board` for `side`."""
    return heuristic_value(board, side, board.winner(), board.is_full())
