from __future__ import annotations

import abc

from connectfour.game.board import Board
from connectfour.game.types import Token


class NoLegalMovesError(RuntimeError):
    """A move was requested on a board where the game has already ended."""


class Agent(abc.ABC):
    @abc.abstractmethod
    def decide_move(self, board: Board, token: Token) -> int:
        """Return the 0-based column this agent wants to play for `token`."""

    @property
    def name(self) -> str:
        return self.__class__.__name__
