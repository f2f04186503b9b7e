from __future__ import annotations

import contextlib
from typing import Iterable, Iterator, Optional

from .types import Token

WIDTH = 7
HEIGHT = 6
BOARD_SIZE = WIDTH * HEIGHT

# Bit layout for 7x6, row 0 at the bottom, one guard bit above each column:
#  .  .  .  .  .  .  .   guard
#  5 12 19 26 33 40 47
#  4 11 18 25 32 39 46
#  3 10 17 24 31 38 45
#  2  9 16 23 30 37 44
#  1  8 15 22 29 36 43
#  0  7 14 21 28 35 42
COLUMN_STRIDE = HEIGHT + 1

assert WIDTH * COLUMN_STRIDE <= 64, "board does not fit in a 64-bit bitboard"

BOTTOM_MASK = ((1 << (COLUMN_STRIDE * WIDTH)) - 1) // ((1 << COLUMN_STRIDE) - 1)
TOP_MASK = BOTTOM_MASK << HEIGHT

# Shift per line direction: vertical, horizontal, diagonal \, diagonal /
DIRECTION_SHIFTS = (1, COLUMN_STRIDE, HEIGHT, HEIGHT + 2)


def bit_index(row: int, column: int) -> int:
    return row + column * COLUMN_STRIDE


def is_win(bitboard: int) -> bool:
    """True if the bitboard holds four set bits in a line.

    For each direction, ``b & (b >> s)`` marks the starts of pairs and the
    same trick on the pairs with a double shift marks the starts of fours.
    Guard bits are never set, so lines cannot wrap between columns.
    """
    for shift in DIRECTION_SHIFTS:
        pairs = bitboard & (bitboard >> shift)
        if pairs & (pairs >> (2 * shift)):
            return True
    return False


def is_legal_bitboard(bitboard: int) -> bool:
    """A bitboard is legal while no guard-row bit is set."""
    return bitboard & TOP_MASK == 0


def parse_column(text: str) -> Optional[int]:
    """Parse a 1-based column number like '4' into a 0-based column.

    Returns None if the text is not a number in range.
    """
    text = text.strip()
    try:
        number = int(text)
    except ValueError:
        return None
    if not (1 <= number <= WIDTH):
        return None
    return number - 1


def format_column(column: int) -> str:
    """Format a 0-based column as the 1-based label shown to players."""
    return str(column + 1)


class Board:
    """7x6 Connect Four position stored as one bitboard per player.

    The board is mutated in place with apply_move/undo_move (or the peek
    context manager) so a single instance can be walked through a search
    tree.
    """

    def __init__(self) -> None:
        self.players: list[int] = [0, 0]
        self.heights: list[int] = [column * COLUMN_STRIDE for column in range(WIDTH)]
        self.moves: list[int] = [0] * BOARD_SIZE
        self.ply = 0

    @classmethod
    def from_moves(cls, columns: Iterable[int]) -> Board:
        """Build a board by playing the given 0-based columns in order."""
        board = cls()
        for column in columns:
            board.apply_move(column)
        return board

    def copy(self) -> Board:
        board = Board.__new__(Board)
        board.players = self.players[:]
        board.heights = self.heights[:]
        board.moves = self.moves[:]
        board.ply = self.ply
        return board

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def current_player(self) -> Token:
        return Token.PLAYER1 if self.ply & 1 == 0 else Token.PLAYER2

    def token_at(self, row: int, column: int) -> Optional[Token]:
        mask = 1 << bit_index(row, column)
        if self.players[0] & mask:
            return Token.PLAYER1
        if self.players[1] & mask:
            return Token.PLAYER2
        return None

    def has_space(self, column: int) -> bool:
        assert 0 <= column < WIDTH, f"column out of range [0, {WIDTH}): {column}"
        return is_legal_bitboard(
            self.players[self.ply & 1] | (1 << self.heights[column])
        )

    def is_legal(self, column: int) -> bool:
        return 0 <= column < WIDTH and self.has_space(column)

    def legal_moves(self) -> Iterator[int]:
        """Lazily yield every playable column, left to right."""
        heights = self.heights[:]
        return (
            column
            for column in range(WIDTH)
            if is_legal_bitboard(1 << heights[column])
        )

    def column_height(self, column: int) -> int:
        """Number of discs already in the column."""
        return self.heights[column] - column * COLUMN_STRIDE

    def winner(self) -> Optional[Token]:
        """Winning token, or None if the game is undecided or drawn."""
        if is_win(self.players[0]):
            return Token.PLAYER1
        if is_win(self.players[1]):
            return Token.PLAYER2
        return None

    def is_full(self) -> bool:
        return next(self.legal_moves(), None) is None

    @property
    def is_over(self) -> bool:
        return self.winner() is not None or self.is_full()

    @property
    def history(self) -> list[int]:
        return self.moves[: self.ply]

    @property
    def last_move(self) -> Optional[int]:
        if self.ply == 0:
            return None
        return self.moves[self.ply - 1]

    def position_code(self) -> int:
        """Key unique to the occupied cells plus the side to move.

        The bottom mask keeps the key above any raw occupancy mask.
        """
        return (
            self.players[self.ply & 1] + self.players[0] + self.players[1] + BOTTOM_MASK
        )

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def apply_move(self, column: int) -> None:
        """Drop a disc for the current player in the column."""
        assert self.has_space(column), f"column is full: {column}"

        self.players[self.ply & 1] ^= 1 << self.heights[column]
        self.heights[column] += 1

        self.moves[self.ply] = column
        self.ply += 1

    def undo_move(self) -> None:
        """Take back the most recent move."""
        assert self.ply > 0, "no move to undo"
        self.ply -= 1
        column = self.moves[self.ply]

        self.heights[column] -= 1
        self.players[self.ply & 1] ^= 1 << self.heights[column]

    @contextlib.contextmanager
    def peek(self, column: int) -> Iterator[Board]:
        """Apply a move for the duration of a with-block, then undo it."""
        self.apply_move(column)
        try:
            yield self
        finally:
            self.undo_move()

    # ------------------------------------------------------------------
    # Dunder
    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return (
            self.players == other.players
            and self.heights == other.heights
            and self.ply == other.ply
            and self.history == other.history
        )

    def __repr__(self) -> str:
        return f"Board.from_moves({self.history!r})"

    def __str__(self) -> str:
        lines = []
        for row in reversed(range(HEIGHT)):
            cells = []
            for column in range(WIDTH):
                token = self.token_at(row, column)
                cells.append(token.char if token is not None else ".")
            lines.append(" ".join(cells))
        lines.append("-" * (2 * WIDTH - 1))
        lines.append(" ".join(format_column(column) for column in range(WIDTH)))
        return "\n".join(lines)
