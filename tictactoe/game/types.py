from __future__ import annotations

import enum
from typing import NamedTuple, Optional


class Player(enum.Enum):
    FIRST = 1
    SECOND = 2

    @property
    def other(self) -> Player:
        return Player.SECOND if self is Player.FIRST else Player.FIRST

    @property
    def symbol(self) -> str:
        return "X" if self is Player.FIRST else "O"

    def __str__(self) -> str:
        return self.symbol


class Point(NamedTuple):
    row: int  # 0-indexed, 0 = top
    col: int  # 0-indexed, 0 = left


class Outcome(enum.Enum):
    ONGOING = 0
    DRAW = 1
    FIRST_WINS = 2
    SECOND_WINS = 3

    @property
    def winner(self) -> Optional[Player]:
        if self is Outcome.FIRST_WINS:
            return Player.FIRST
        if self is Outcome.SECOND_WINS:
            return Player.SECOND
        return None

    @property
    def is_terminal(self) -> bool:
        return self is not Outcome.ONGOING
