from __future__ import annotations

import random
from typing import Optional

from connectfour.game.board import Board
from connectfour.game.types import Token

from .base import Agent, NoLegalMovesError


class RandomAgent(Agent):
    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self.rng = rng if rng is not None else random.Random()

    def decide_move(self, board: Board, token: Token) -> int:
        moves = list(board.legal_moves())
        if not moves:
            raise NoLegalMovesError("no legal moves")
        return self.rng.choice(moves)
