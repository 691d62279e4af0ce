"""Text-mode game: you play X against the minimax engine on the terminal."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, TextIO

from tictactoe.agent.base import Agent
from tictactoe.agent.minimax_agent import MinimaxAgent
from tictactoe.game.board import TicTacToeGameState, format_board
from tictactoe.game.errors import TicTacToeError
from tictactoe.game.types import Outcome, Player, Point

logger = logging.getLogger(__name__)

FIRST_PROMPT = "Who is first? (0 - player, 1 - AI)"

RESULT_MESSAGES = {
    Outcome.FIRST_WINS: "You win!",
    Outcome.SECOND_WINS: "AI wins!",
    Outcome.DRAW: "Tie!",
}


def ask_ai_first(stdin: TextIO, stdout: TextIO) -> Optional[bool]:
    """Prompt until the answer is 0 or 1. None on end of input."""
    while True:
        print(FIRST_PROMPT, file=stdout)
        line = stdin.readline()
        if not line:
            return None
        answer = line.strip()
        if answer in ("0", "1"):
            return answer == "1"
        print("Error: answer 0 or 1", file=stdout)


def _read_human_move(game: TicTacToeGameState, stdin: TextIO, stdout: TextIO) -> bool:
    """Read lines until one is a legal move and apply it. False on end of input."""
    while True:
        print(format_board(game.board), file=stdout)
        line = stdin.readline()
        if not line:
            return False

        tokens = line.split()
        if len(tokens) != 2:
            print("Error: input coordinates should be two", file=stdout)
            continue
        try:
            row, col = int(tokens[0]), int(tokens[1])
        except ValueError:
            print("Error: coordinates should be numbers", file=stdout)
            continue

        try:
            game.apply_move(Point(row, col))
        except TicTacToeError as e:
            print(f"Error: {e}", file=stdout)
            continue
        return True


def play(
    agent: Agent,
    ai_first: bool,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> Optional[Outcome]:
    """Run one game. Returns the final outcome, or None if input ran out."""
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout
    game = TicTacToeGameState(first_player=Player.SECOND if ai_first else Player.FIRST)

    while not game.is_over:
        if game.current_player is Player.SECOND:
            move = agent.select_move(game)
            logger.info("AI plays %s", move)
            game.apply_move(move)
        elif not _read_human_move(game, stdin, stdout):
            return None

    print(RESULT_MESSAGES[game.outcome], file=stdout)
    print(format_board(game.board), file=stdout)
    return game.outcome


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tictactoe",
        description="Play tic-tac-toe against a minimax engine. Enter moves as 'row col' (0-2).",
    )
    parser.add_argument(
        "--first",
        choices=["player", "ai"],
        help="Who moves first. Asked interactively when omitted.",
    )
    parser.add_argument(
        "--no-pruning",
        action="store_true",
        help="Search the full game tree without alpha-beta pruning.",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log search values and node counts.",
    )
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.first is None:
        ai_first = ask_ai_first(sys.stdin, sys.stdout)
        if ai_first is None:
            return 1
    else:
        ai_first = args.first == "ai"

    agent = MinimaxAgent(pruning=not args.no_pruning)
    outcome = play(agent, ai_first)
    return 0 if outcome is not None else 1


if __name__ == "__main__":
    sys.exit(main())
