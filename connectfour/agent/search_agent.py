"""Search agent: depth-limited negamax with alpha-beta pruning and a
transposition table, evaluated with the line-counting heuristic."""

from __future__ import annotations

import enum
import logging
import random
from typing import Optional

from connectfour.agent.base import Agent, NoLegalMovesError
from connectfour.agent.heuristic import heuristic_value
from connectfour.agent.transposition import TranspositionTable, TTFlag
from connectfour.game.board import Board
from connectfour.game.types import Token

logger = logging.getLogger(__name__)

# Larger than any heuristic score; finite so negation stays exact
INF = 10**9


class Difficulty(enum.Enum):
    """Search depth per difficulty level."""

    EASY = 3
    MEDIUM = 5
    HARD = 7
    MASTER = 9
    UNFAIR = 11

    @property
    def depth(self) -> int:
        return self.value

    def __str__(self) -> str:
        return self.name.capitalize()


# ---------------------------------------------------------------------------
# Negamax with alpha-beta + transposition table
# ---------------------------------------------------------------------------

def negamax(
    board: Board,
    depth: int,
    alpha: int,
    beta: int,
    side: Token,
    tt: Optional[TranspositionTable] = None,
) -> int:
    """Negamax search with alpha-beta pruning and transposition table.

    `side` is the player to move on `board`. Returns the score from `side`'s
    point of view. The board is restored before returning.
    """
    alpha_orig = alpha

    key = board.position_code()
    if tt is not None:
        entry = tt.probe(key, depth)
        if entry is not None:
            if entry.flag is TTFlag.EXACT:
                return entry.value
            elif entry.flag is TTFlag.LOWER_BOUND:
                alpha = max(alpha, entry.value)
            elif entry.flag is TTFlag.UPPER_BOUND:
                beta = min(beta, entry.value)
            if alpha >= beta:
                return entry.value

    winner = board.winner()
    is_full = board.is_full()
    if depth == 0 or winner is not None or is_full:
        return heuristic_value(board, side, winner, is_full)

    best = -INF
    for column in board.legal_moves():
        with board.peek(column):
            score = -negamax(board, depth - 1, -beta, -alpha, side.other, tt)
        best = max(best, score)
        alpha = max(alpha, best)
        if alpha >= beta:
            break

    if tt is not None:
        if best <= alpha_orig:
            flag = TTFlag.UPPER_BOUND
        elif best >= beta:
            flag = TTFlag.LOWER_BOUND
        else:
            flag = TTFlag.EXACT
        tt.store(key, depth, best, flag)

    return best


def score_moves(
    board: Board,
    token: Token,
    depth: int,
    tt: Optional[TranspositionTable] = None,
) -> dict[int, int]:
    """Score every legal column for `token` with a full-window search.

    Each reply is searched `depth` plies deep after the root move.
    """
    scores: dict[int, int] = {}
    for column in board.legal_moves():
        with board.peek(column):
            scores[column] = -negamax(board, depth, -INF, INF, token.other, tt)
    return scores


# ---------------------------------------------------------------------------
# SearchAgent
# ---------------------------------------------------------------------------

class SearchAgent(Agent):
    """Negamax + alpha-beta agent; ties between best moves are broken at random."""

    def __init__(
        self,
        depth: int = Difficulty.MASTER.depth,
        rng: Optional[random.Random] = None,
        seed: Optional[int] = None,
    ) -> None:
        assert depth >= 0, f"depth must be non-negative: {depth}"
        self.depth = depth
        self.rng = rng if rng is not None else random.Random(seed)
        self.last_scores: dict[int, int] = {}

    @classmethod
    def from_difficulty(
        cls,
        difficulty: Difficulty,
        rng: Optional[random.Random] = None,
        seed: Optional[int] = None,
    ) -> SearchAgent:
        return cls(depth=difficulty.depth, rng=rng, seed=seed)

    @property
    def name(self) -> str:
        return f"SearchAgent(d={self.depth})"

    def decide_move(self, board: Board, token: Token) -> int:
        tt = TranspositionTable()
        scores = score_moves(board.copy(), token, self.depth, tt)
        self.last_scores = scores

        best_moves: list[int] = []
        best_score = -INF
        for column, score in scores.items():
            if score > best_score:
                best_score = score
                best_moves = [column]
            elif score == best_score:
                best_moves.append(column)

        if not best_moves:
            raise NoLegalMovesError("no legal moves")
        if len(best_moves) == 1:
            move = best_moves[0]
        else:
            move = self.rng.choice(best_moves)

        logger.debug(
            "%s for %s: scores=%s best=%s chose=%d tt=%s",
            self.name, token, scores, best_moves, move, tt.stats(),
        )
        return move
