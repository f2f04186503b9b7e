"""Agent that replays a fixed list of columns, for tests and replays."""

from __future__ import annotations

from typing import Iterable

from connectfour.game.board import Board, format_column
from connectfour.game.types import Token

from .base import Agent


class ScriptExhaustedError(ValueError):
    pass


class IllegalScriptedMoveError(ValueError):
    pass


class ScriptedAgent(Agent):
    def __init__(self, columns: Iterable[int]) -> None:
        self.columns = list(columns)
        self._index = 0

    @property
    def remaining(self) -> int:
        return len(self.columns) - self._index

    def decide_move(self, board: Board, token: Token) -> int:
        if self._index >= len(self.columns):
            raise ScriptExhaustedError(
                f"script ran out after {len(self.columns)} moves"
            )
        column = self.columns[self._index]
        if not board.is_legal(column):
            raise IllegalScriptedMoveError(
                f"scripted move {self._index + 1} ({format_column(column)}) "
                f"is illegal for {token}"
            )
        self._index += 1
        return column
