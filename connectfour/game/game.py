"""Turn-taking loop between two agents."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, NamedTuple, Optional

from .board import Board, format_column
from .types import Token

if TYPE_CHECKING:
    from connectfour.agent.base import Agent

logger = logging.getLogger(__name__)


class GameResult(NamedTuple):
    board: Board
    winner: Optional[Token]

    @property
    def is_draw(self) -> bool:
        return self.winner is None


class Game:
    """Alternate between two agents until someone connects four or the board fills."""

    def __init__(
        self,
        player1: Agent,
        player2: Agent,
        board: Optional[Board] = None,
    ) -> None:
        self.board = board if board is not None else Board()
        self.agents = {Token.PLAYER1: player1, Token.PLAYER2: player2}

    @property
    def is_over(self) -> bool:
        return self.board.is_over

    @property
    def winner(self) -> Optional[Token]:
        return self.board.winner()

    def step(self) -> int:
        """Ask the player to move for a column, play it, and return it."""
        assert not self.is_over, "Game is already over"
        token = self.board.current_player()
        agent = self.agents[token]

        column = agent.decide_move(self.board.copy(), token)
        assert self.board.is_legal(column), (
            f"{agent.name} chose illegal column {column}"
        )
        self.board.apply_move(column)
        logger.debug(
            "ply %d: %s (%s) played column %s",
            self.board.ply, token, agent.name, format_column(column),
        )
        return column

    def play(self) -> GameResult:
        while not self.is_over:
            self.step()

        winner = self.winner
        if winner is not None:
            logger.info("player %d wins after %d moves", winner.number, self.board.ply)
        else:
            logger.info("draw after %d moves", self.board.ply)
        return GameResult(self.board, winner)
