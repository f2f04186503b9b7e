"""Console game: a human at the terminal against the search agent."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Callable, Optional, Sequence

from connectfour.agent.base import Agent
from connectfour.agent.console_agent import ConsoleAgent
from connectfour.agent.search_agent import Difficulty, SearchAgent
from connectfour.game.game import Game

DIFFICULTIES = {d.name.lower(): d for d in Difficulty}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="connectfour",
        description="Play Connect Four against the computer.",
    )
    parser.add_argument(
        "--difficulty",
        choices=list(DIFFICULTIES),
        default="master",
        help="AI strength; sets the search depth (default: master)",
    )
    parser.add_argument(
        "--first",
        choices=["human", "ai"],
        default="human",
        help="Who drops the first disc (default: human)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the AI's tie-breaking",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )
    return parser


def build_players(
    args: argparse.Namespace,
    input_fn: Callable[[str], str] = input,
    output_fn: Callable[[str], None] = print,
) -> tuple[Agent, Agent]:
    human = ConsoleAgent(input_fn=input_fn, output_fn=output_fn)
    ai = SearchAgent.from_difficulty(DIFFICULTIES[args.difficulty], seed=args.seed)
    if args.first == "ai":
        return ai, human
    return human, ai


def main(
    argv: Optional[Sequence[str]] = None,
    input_fn: Callable[[str], str] = input,
    output_fn: Callable[[str], None] = print,
) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    player1, player2 = build_players(args, input_fn=input_fn, output_fn=output_fn)
    try:
        board, winner = Game(player1, player2).play()
    except (EOFError, KeyboardInterrupt):
        output_fn("\nQuitting program")
        return 1

    output_fn(f"\nFinal board:\n{board}")
    output_fn("")
    if winner is not None:
        output_fn(f"Player {winner.number} wins")
    else:
        output_fn("The game ended in a draw")
    return 0


if __name__ == "__main__":
    sys.exit(main())
