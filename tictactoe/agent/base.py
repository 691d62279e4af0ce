from __future__ import annotations

import abc

from tictactoe.game.board import TicTacToeGameState
from tictactoe.game.types import Point


class Agent(abc.ABC):
    @abc.abstractmethod
    def select_move(self, game_state: TicTacToeGameState) -> Point:
        """Return the cell where this agent wants to play."""

    @property
    def name(self) -> str:
        return self.__class__.__name__
