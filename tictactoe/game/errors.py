"""Errors raised by the board, game state and search engine."""

from __future__ import annotations


class TicTacToeError(Exception):
    """Base class for recoverable game errors."""


class OutOfBoundsError(TicTacToeError, ValueError):
    def __init__(self, row: int, col: int, size: int) -> None:
        super().__init__(f"({row}, {col}) is outside the {size}x{size} board")
        self.row = row
        self.col = col


class CellOccupiedError(TicTacToeError, ValueError):
    def __init__(self, row: int, col: int) -> None:
        super().__init__(f"({row}, {col}) is already occupied")
        self.row = row
        self.col = col


class NoLegalMovesError(TicTacToeError):
    pass


class GameOverError(TicTacToeError):
    pass
