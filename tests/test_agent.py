import pytest

from tictactoe.agent.random_agent import RandomAgent
from tictactoe.game.board import TicTacToeGameState
from tictactoe.game.errors import NoLegalMovesError
from tictactoe.game.types import Point


def test_random_agent_returns_legal_move():
    g = TicTacToeGameState()
    agent = RandomAgent()
    while not g.is_over:
        move = agent.select_move(g)
        assert isinstance(move, Point)
        assert g.board.is_empty(move)
        g.apply_move(move)


def test_random_agent_no_moves_after_game_over():
    g = TicTacToeGameState()
    for p in [Point(0, 0), Point(1, 0), Point(0, 1), Point(1, 1), Point(0, 2)]:
        g.apply_move(p)
    with pytest.raises(NoLegalMovesError):
        RandomAgent().select_move(g)


def test_random_agent_name():
    assert RandomAgent().name == "RandomAgent"
