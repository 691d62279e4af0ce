"""Play tab: Human vs AI with interactive SVG board."""

from __future__ import annotations

import random as _random
from dataclasses import dataclass, field

import gradio as gr

from tictactoe.agent.base import Agent
from tictactoe.agent.minimax_agent import MinimaxAgent
from tictactoe.agent.random_agent import RandomAgent
from tictactoe.game.board import (
    TicTacToeGameState,
    format_point,
    parse_coordinate,
)
from tictactoe.game.errors import TicTacToeError
from tictactoe.game.types import Player
from tictactoe.ui.board_component import render_board_svg

AGENT_CHOICES: dict[str, Agent] = {
    "Minimax (alpha-beta)": MinimaxAgent(pruning=True),
    "Minimax (full search)": MinimaxAgent(pruning=False),
    "RandomAgent": RandomAgent(),
}

# The human always plays X (the maximizer), the AI plays O.
HUMAN = Player.FIRST
AI = Player.SECOND


@dataclass
class GameSession:
    """Per-tab game state held in gr.State."""

    game: TicTacToeGameState = field(default_factory=TicTacToeGameState)
    agent: Agent = field(default_factory=MinimaxAgent)
    ai_first: bool = False

    def reset(self, ai_first: bool) -> None:
        self.ai_first = ai_first
        self.game = TicTacToeGameState(first_player=AI if ai_first else HUMAN)

    @property
    def game_over_banner(self) -> str:
        """Short text for the SVG overlay banner. Empty if game is not over."""
        g = self.game
        if not g.is_over:
            return ""
        if g.winner is HUMAN:
            return "You win!"
        if g.winner is AI:
            return "AI wins!"
        return "Tie!"

    @property
    def status_text(self) -> str:
        g = self.game
        if g.is_over:
            return f"Game over: {self.game_over_banner}"
        if g.current_player is HUMAN:
            return f"Your turn ({HUMAN})"
        return f"AI is thinking... ({AI})"

    @property
    def move_history_table(self) -> list[list[str]]:
        return [
            [str(i + 1), str(move.player), format_point(move.point)]
            for i, move in enumerate(self.game.moves)
        ]


def _make_board_html(session: GameSession) -> str:
    clickable = not session.game.is_over and session.game.current_player is HUMAN
    return render_board_svg(
        session.game,
        clickable=clickable,
        game_over_message=session.game_over_banner,
    )


def _ai_reply(session: GameSession) -> None:
    if not session.game.is_over and session.game.current_player is AI:
        session.game.apply_move(session.agent.select_move(session.game))


def _outputs(session: GameSession, status: str = ""):
    return (
        _make_board_html(session),
        status or session.status_text,
        session.move_history_table,
        session,
    )


def _apply_human_move(coord_text: str, session: GameSession):
    """Process a human move, then let the AI respond."""
    if session.game.is_over:
        return _outputs(session) + ("",)

    if session.game.current_player is not HUMAN:
        return _outputs(session, "Wait, it's the AI's turn.") + ("",)

    point = parse_coordinate(coord_text)
    if point is None:
        return _outputs(
            session, f"Invalid coordinate: '{coord_text}'. Use 'row col', e.g. 1 1."
        ) + ("",)

    try:
        session.game.apply_move(point)
    except TicTacToeError as e:
        return _outputs(session, str(e)) + ("",)

    _ai_reply(session)
    return _outputs(session) + ("",)


def _new_game(first_choice: str, agent_choice: str, session: GameSession):
    """Start a new game. first_choice is 'You', 'AI', or 'Random'."""
    if first_choice == "Random":
        ai_first = _random.choice([True, False])
    else:
        ai_first = first_choice == "AI"

    session.agent = AGENT_CHOICES.get(agent_choice, MinimaxAgent())
    session.reset(ai_first=ai_first)
    _ai_reply(session)

    who = "AI moves first." if ai_first else "You move first."
    return _outputs(session) + (f"You are {HUMAN}. {who}",)


def _resign(session: GameSession):
    if not session.game.is_over:
        session.game.resign(HUMAN)
    return _outputs(session)


def build_play_tab() -> None:
    """Construct the Play tab UI inside a gr.Blocks context."""

    session_state = gr.State(GameSession())

    with gr.Row():
        with gr.Column(scale=3):
            board_html = gr.HTML(
                value=render_board_svg(TicTacToeGameState()),
                label="Board",
            )
        with gr.Column(scale=2):
            status_text = gr.Textbox(
                value=f"Your turn ({HUMAN})",
                label="Status",
                interactive=False,
                lines=2,
            )
            first_info = gr.Textbox(
                value=f"You are {HUMAN}. You move first.",
                label="Players",
                interactive=False,
                lines=1,
            )

            gr.Markdown("### New Game")
            first_choice = gr.Radio(
                choices=["You", "AI", "Random"],
                value="You",
                label="Who moves first",
            )
            agent_choice = gr.Dropdown(
                choices=list(AGENT_CHOICES.keys()),
                value=list(AGENT_CHOICES.keys())[0],
                label="Opponent",
            )
            new_game_btn = gr.Button("New Game", variant="primary")
            resign_btn = gr.Button("Resign", variant="stop")

            gr.Markdown("### Enter Move")
            coord_input = gr.Textbox(
                label="Row and column (e.g. 1 1)",
                placeholder="1 1",
                elem_id="coord-input",
                lines=1,
            )
            coord_submit = gr.Button("Submit Move", elem_id="coord-submit")

            gr.Markdown("### Move History")
            move_table = gr.Dataframe(
                headers=["#", "Player", "Move"],
                datatype=["number", "str", "str"],
                interactive=False,
                column_count=3,
            )

    board_outputs = [board_html, status_text, move_table, session_state]

    coord_submit.click(
        fn=_apply_human_move,
        inputs=[coord_input, session_state],
        outputs=board_outputs + [coord_input],
    )

    new_game_btn.click(
        fn=_new_game,
        inputs=[first_choice, agent_choice, session_state],
        outputs=board_outputs + [first_info],
    )

    resign_btn.click(
        fn=_resign,
        inputs=[session_state],
        outputs=board_outputs,
    )
