"""Play tab: Human vs AI with a clickable SVG board."""

from __future__ import annotations

import random as _random
from dataclasses import dataclass, field
from typing import Optional

import gradio as gr

from connectfour.agent.base import Agent
from connectfour.agent.random_agent import RandomAgent
from connectfour.agent.search_agent import Difficulty, SearchAgent
from connectfour.game.board import Board, format_column, parse_column
from connectfour.game.types import Token
from connectfour.ui.board_component import render_board_svg

AGENT_CHOICES: dict[str, Agent] = {
    f"{d} (depth {d.depth})": SearchAgent.from_difficulty(d) for d in Difficulty
}
AGENT_CHOICES["RandomAgent"] = RandomAgent()

DEFAULT_AGENT = next(iter(AGENT_CHOICES))


@dataclass
class GameSession:
    """Per-tab game state held in gr.State."""

    board: Board = field(default_factory=Board)
    agent: Agent = field(default_factory=lambda: AGENT_CHOICES[DEFAULT_AGENT])
    human_player: Token = field(default=Token.PLAYER1)

    def reset(self, human_player: Optional[Token] = None) -> None:
        self.board = Board()
        if human_player is not None:
            self.human_player = human_player

    @property
    def is_over(self) -> bool:
        return self.board.is_over

    @property
    def game_over_banner(self) -> str:
        """Short text for the SVG overlay banner. Empty if game is not over."""
        if not self.is_over:
            return ""
        winner = self.board.winner()
        if winner is None:
            return "Draw!"
        if winner is self.human_player:
            return "You win!"
        return "AI wins!"

    @property
    def status_text(self) -> str:
        if self.is_over:
            winner = self.board.winner()
            if winner is None:
                return "Game over, draw!"
            who = "You win!" if winner is self.human_player else "AI wins!"
            return f"Game over, {who} (player {winner.number} connected four)"
        if self.board.current_player() is self.human_player:
            return f"Your turn ({self.human_player})"
        return f"AI is thinking... ({self.board.current_player()})"

    @property
    def move_history_table(self) -> list[list[str]]:
        rows: list[list[str]] = []
        for i, column in enumerate(self.board.history):
            token = Token.PLAYER1 if i % 2 == 0 else Token.PLAYER2
            rows.append([str(i + 1), str(token), format_column(column)])
        return rows


def _make_board_html(session: GameSession) -> str:
    clickable = (
        not session.is_over
        and session.board.current_player() is session.human_player
    )
    return render_board_svg(
        session.board,
        clickable=clickable,
        game_over_message=session.game_over_banner,
    )


def _outputs(session: GameSession, status: Optional[str] = None) -> tuple:
    return (
        _make_board_html(session),
        status if status is not None else session.status_text,
        session.move_history_table,
        session,
    )


def _ai_move(session: GameSession) -> None:
    """Let the AI play if it is its turn."""
    if session.is_over or session.board.current_player() is session.human_player:
        return
    token = session.board.current_player()
    column = session.agent.decide_move(session.board.copy(), token)
    session.board.apply_move(column)


def _apply_human_move(column_text: str, session: GameSession):
    """Process a human move, then let the AI respond."""
    if session.is_over:
        return _outputs(session) + ("",)

    if session.board.current_player() is not session.human_player:
        return _outputs(session, "Wait, it's the AI's turn.") + ("",)

    column = parse_column(column_text)
    if column is None:
        return _outputs(
            session, f"Invalid column: '{column_text}'. Enter a number from 1 to 7."
        ) + ("",)

    if not session.board.is_legal(column):
        return _outputs(session, f"Column {format_column(column)} is full.") + ("",)

    session.board.apply_move(column)
    _ai_move(session)
    return _outputs(session) + ("",)


def _new_game_with_color(
    color_choice: str,
    session: GameSession,
    agent_choice: str = DEFAULT_AGENT,
):
    """Start a new game. color_choice is 'First', 'Second', or 'Random'."""
    if color_choice == "Random":
        human = _random.choice([Token.PLAYER1, Token.PLAYER2])
    elif color_choice == "Second":
        human = Token.PLAYER2
    else:
        human = Token.PLAYER1

    session.agent = AGENT_CHOICES.get(agent_choice, AGENT_CHOICES[DEFAULT_AGENT])
    session.reset(human_player=human)
    _ai_move(session)

    order = "first" if human is Token.PLAYER1 else "second"
    return _outputs(session) + (f"You play {order} ({human}).",)


def _undo_move(session: GameSession):
    """Undo the last move pair (AI + human)."""
    if session.board.ply == 0:
        return _outputs(session, "Nothing to undo.")

    # If the last move was the AI's, take back both the AI's and the human's
    last_token = Token.PLAYER1 if session.board.ply % 2 == 1 else Token.PLAYER2
    if last_token is not session.human_player:
        session.board.undo_move()
    if session.board.ply > 0:
        session.board.undo_move()
    # Undoing the human's only move when the AI opened leaves the AI to move
    _ai_move(session)
    return _outputs(session)


def build_play_tab() -> None:
    """Construct the Play tab UI inside a gr.Blocks context."""

    session_state = gr.State(GameSession())

    with gr.Row():
        with gr.Column(scale=3):
            board_html = gr.HTML(
                value=render_board_svg(Board()),
                label="Board",
            )
        with gr.Column(scale=1):
            status_text = gr.Textbox(
                value=f"Your turn ({Token.PLAYER1})",
                label="Status",
                interactive=False,
                lines=2,
            )
            order_info = gr.Textbox(
                value=f"You play first ({Token.PLAYER1}).",
                label="Order",
                interactive=False,
                lines=1,
            )

            gr.Markdown("### New Game")
            color_choice = gr.Radio(
                choices=["Random", "First", "Second"],
                value="First",
                label="Play",
            )
            agent_choice = gr.Dropdown(
                choices=list(AGENT_CHOICES.keys()),
                value=DEFAULT_AGENT,
                label="Opponent",
            )
            new_game_btn = gr.Button("New Game", variant="primary")
            undo_btn = gr.Button("Undo")

            gr.Markdown("### Enter Move")
            column_input = gr.Textbox(
                label="Column (1-7)",
                placeholder="4",
                elem_id="column-input",
                lines=1,
            )
            column_submit = gr.Button(
                "Drop Disc",
                elem_id="column-submit",
            )

            gr.Markdown("### Move History")
            move_table = gr.Dataframe(
                headers=["#", "Player", "Column"],
                datatype=["number", "str", "str"],
                interactive=False,
                column_count=3,
            )

    board_outputs = [board_html, status_text, move_table, session_state]

    column_submit.click(
        fn=_apply_human_move,
        inputs=[column_input, session_state],
        outputs=board_outputs + [column_input],
    )

    new_game_btn.click(
        fn=lambda color, agent, session: _new_game_with_color(color, session, agent),
        inputs=[color_choice, agent_choice, session_state],
        outputs=board_outputs + [order_info],
    )

    undo_btn.click(
        fn=_undo_move,
        inputs=[session_state],
        outputs=board_outputs,
    )
