import itertools

from connectfour.agent.console_agent import ConsoleAgent
from connectfour.agent.search_agent import SearchAgent
from connectfour.cli import build_parser, build_players, main


class TestParser:
    def test_defaults(self):
        args = build_parser().parse_args([])
        assert args.difficulty == "master"
        assert args.first == "human"
        assert args.seed is None
        assert args.log_level == "WARNING"

    def test_options(self):
        args = build_parser().parse_args(
            ["--difficulty", "easy", "--first", "ai", "--seed", "3", "--log-level", "DEBUG"]
        )
        assert args.difficulty == "easy"
        assert args.first == "ai"
        assert args.seed == 3
        assert args.log_level == "DEBUG"


class TestBuildPlayers:
    def test_human_first(self):
        args = build_parser().parse_args(["--difficulty", "hard"])
        player1, player2 = build_players(args)
        assert isinstance(player1, ConsoleAgent)
        assert isinstance(player2, SearchAgent)
        assert player2.depth == 7

    def test_ai_first(self):
        args = build_parser().parse_args(["--first", "ai", "--difficulty", "unfair"])
        player1, player2 = build_players(args)
        assert isinstance(player1, SearchAgent)
        assert player1.depth == 11
        assert isinstance(player2, ConsoleAgent)


class TestMain:
    def test_full_game(self):
        # Cycle through every column; full ones are rejected and re-prompted
        columns = itertools.cycle(str(n) for n in range(1, 8))
        output = []
        status = main(
            ["--difficulty", "easy", "--seed", "0"],
            input_fn=lambda prompt: next(columns),
            output_fn=output.append,
        )
        assert status == 0
        assert any(line.startswith("\nFinal board:\n") for line in output)
        assert output[-1] in (
            "Player 1 wins",
            "Player 2 wins",
            "The game ended in a draw",
        )

    def test_quit_on_end_of_input(self):
        def closed(prompt):
            raise EOFError

        output = []
        status = main(["--difficulty", "easy"], input_fn=closed, output_fn=output.append)
        assert status == 1
        assert output[-1] == "\nQuitting program"

    def test_quit_on_interrupt(self):
        def interrupted(prompt):
            raise KeyboardInterrupt

        output = []
        status = main([], input_fn=interrupted, output_fn=output.append)
        assert status == 1
        assert output[-1] == "\nQuitting program"
