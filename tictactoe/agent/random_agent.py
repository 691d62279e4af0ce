from __future__ import annotations

import random

from tictactoe.game.board import TicTacToeGameState
from tictactoe.game.errors import NoLegalMovesError
from tictactoe.game.types import Point

from .base import Agent


class RandomAgent(Agent):
    def select_move(self, game_state: TicTacToeGameState) -> Point:
        moves = game_state.legal_moves()
        if not moves:
            raise NoLegalMovesError("No legal moves available")
        return random.choice(moves)
