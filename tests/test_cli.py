import io

import pytest

from tictactoe.agent.base import Agent
from tictactoe.agent.minimax_agent import MinimaxAgent
from tictactoe.cli import ask_ai_first, build_parser, main, play
from tictactoe.game.types import Outcome, Point


class ScriptedAgent(Agent):
    """Plays a fixed list of moves in order."""

    def __init__(self, moves):
        self.moves = list(moves)

    def select_move(self, game_state):
        return self.moves.pop(0)


ALL_CELLS = "".join(f"{r} {c}\n" for r in range(3) for c in range(3))


def run(agent, ai_first, text):
    out = io.StringIO()
    outcome = play(agent, ai_first, io.StringIO(text), out)
    return outcome, out.getvalue()


class TestPlay:
    def test_human_wins(self):
        agent = ScriptedAgent([Point(1, 0), Point(1, 1)])
        outcome, out = run(agent, False, "0 0\n0 1\n0 2\n")
        assert outcome is Outcome.FIRST_WINS
        assert "You win!" in out
        assert out.rstrip().endswith("-----------")

    def test_ai_wins(self):
        agent = ScriptedAgent([Point(1, 0), Point(1, 1), Point(1, 2)])
        outcome, out = run(agent, True, "0 0\n0 1\n")
        assert outcome is Outcome.SECOND_WINS
        assert "AI wins!" in out
        assert "|O| |O| |O|" in out

    def test_tie(self):
        agent = ScriptedAgent([Point(0, 1), Point(1, 1), Point(1, 2), Point(2, 0)])
        outcome, out = run(agent, False, "0 0\n0 2\n1 0\n2 1\n2 2\n")
        assert outcome is Outcome.DRAW
        assert "Tie!" in out

    def test_bad_input_reprompts(self):
        agent = ScriptedAgent([Point(1, 0), Point(1, 1)])
        text = "5\na b\n3 3\n0 0\n1 0\n0 1\n0 2\n"
        outcome, out = run(agent, False, text)
        assert "Error: input coordinates should be two" in out
        assert "Error: coordinates should be numbers" in out
        assert "outside" in out
        assert "already occupied" in out
        assert outcome is Outcome.FIRST_WINS

    def test_end_of_input(self):
        outcome, out = run(ScriptedAgent([]), False, "")
        assert outcome is None
        assert "-----------" in out

    @pytest.mark.parametrize("ai_first", [False, True])
    def test_engine_never_loses(self, ai_first):
        outcome, out = run(MinimaxAgent(), ai_first, ALL_CELLS)
        assert outcome in (Outcome.SECOND_WINS, Outcome.DRAW)
        assert "You win!" not in out


class TestAskAiFirst:
    def test_answers(self):
        assert ask_ai_first(io.StringIO("0\n"), io.StringIO()) is False
        assert ask_ai_first(io.StringIO("1\n"), io.StringIO()) is True

    def test_invalid_then_valid(self):
        out = io.StringIO()
        assert ask_ai_first(io.StringIO("x\n2\n1\n"), out) is True
        assert out.getvalue().count("Error: answer 0 or 1") == 2
        assert out.getvalue().count("Who is first?") == 3

    def test_end_of_input(self):
        assert ask_ai_first(io.StringIO(""), io.StringIO()) is None


class TestMain:
    def test_parser_defaults(self):
        args = build_parser().parse_args([])
        assert args.first is None
        assert not args.no_pruning
        assert not args.verbose

    def test_full_game_from_flags(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO(ALL_CELLS))
        assert main(["--first", "player", "--no-pruning"]) == 0
        out = capsys.readouterr().out
        assert "AI wins!" in out or "Tie!" in out

    def test_prompts_for_first_player(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO("1\n" + ALL_CELLS))
        assert main([]) == 0
        out = capsys.readouterr().out
        assert "Who is first?" in out

    def test_no_input_exits_nonzero(self, monkeypatch):
        monkeypatch.setattr("sys.stdin", io.StringIO(""))
        assert main([]) == 1
