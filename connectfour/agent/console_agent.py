"""Agent that asks a human for moves on the terminal."""

from __future__ import annotations

from typing import Callable

from connectfour.game.board import Board, parse_column
from connectfour.game.types import Token

from .base import Agent


class ConsoleAgent(Agent):
    """Prompt for a 1-based column until a legal one is entered.

    EOFError and KeyboardInterrupt from `input_fn` are left to the caller.
    """

    def __init__(
        self,
        input_fn: Callable[[str], str] = input,
        output_fn: Callable[[str], None] = print,
    ) -> None:
        self.input_fn = input_fn
        self.output_fn = output_fn

    def decide_move(self, board: Board, token: Token) -> int:
        prompt = f"{token} >> "
        while True:
            self.output_fn(f"\n{board}")
            line = self.input_fn(prompt).strip()
            column = parse_column(line)
            if column is not None and board.is_legal(column):
                return column
            self.output_fn(f"\nIllegal move '{line}', try again")
