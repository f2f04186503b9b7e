from __future__ import annotations

import enum


class Token(enum.Enum):
    PLAYER1 = 1
    PLAYER2 = 2

    @property
    def other(self) -> Token:
        return Token.PLAYER2 if self is Token.PLAYER1 else Token.PLAYER1

    @property
    def char(self) -> str:
        return "x" if self is Token.PLAYER1 else "o"

    @property
    def number(self) -> int:
        return self.value

    def __str__(self) -> str:
        return self.char
