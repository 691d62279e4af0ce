from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .errors import CellOccupiedError, GameOverError, OutOfBoundsError
from .types import Outcome, Player, Point

BOARD_SIZE = 3

# Deepest terminal ply is BOARD_SIZE**2, so wins always score at least 1.
MAX_SOLUTION_DEPTH = BOARD_SIZE * BOARD_SIZE + 1

_ROWS = [[Point(r, c) for c in range(BOARD_SIZE)] for r in range(BOARD_SIZE)]
_COLS = [[Point(r, c) for r in range(BOARD_SIZE)] for c in range(BOARD_SIZE)]
_MAIN_DIAG = [Point(i, i) for i in range(BOARD_SIZE)]
_SECONDARY_DIAG = [Point(i, BOARD_SIZE - i - 1) for i in range(BOARD_SIZE)]

_WIN_OUTCOME = {Player.FIRST: Outcome.FIRST_WINS, Player.SECOND: Outcome.SECOND_WINS}


def parse_coordinate(text: str) -> Optional[Point]:
    """Parse a coordinate string like '0 2' into a Point.

    Expects exactly two whitespace-separated integers, row then column.
    Returns None if the string is malformed. Range is checked by Board.place.
    """
    tokens = text.split()
    if len(tokens) != 2:
        return None
    try:
        row, col = int(tokens[0]), int(tokens[1])
    except ValueError:
        return None
    return Point(row, col)


def format_point(point: Point) -> str:
    """Format a Point as 'row col'."""
    return f"{point.row} {point.col}"


def format_board(board: Board) -> str:
    """Render the board as text, one |X| |O| | | row per line."""
    rule = "-" * (BOARD_SIZE * 4 - 1)
    lines = [rule]
    for r in range(BOARD_SIZE):
        cells = []
        for c in range(BOARD_SIZE):
            player = board.get(Point(r, c))
            cells.append(f"|{player.symbol if player else ' '}|")
        lines.append(" ".join(cells))
        lines.append(rule)
    return "\n".join(lines)


class Board:
    """3x3 tic-tac-toe board. Cells are set once and never cleared."""

    def __init__(self) -> None:
        self._grid: dict[Point, Player] = {}

    def place(self, point: Point, player: Player) -> None:
        if not self.is_on_grid(point):
            raise OutOfBoundsError(point.row, point.col, BOARD_SIZE)
        if not self.is_empty(point):
            raise CellOccupiedError(point.row, point.col)
        self._grid[point] = player

    def get(self, point: Point) -> Optional[Player]:
        return self._grid.get(point)

    def is_empty(self, point: Point) -> bool:
        return point not in self._grid

    def is_on_grid(self, point: Point) -> bool:
        return 0 <= point.row < BOARD_SIZE and 0 <= point.col < BOARD_SIZE

    def open_cells(self) -> list[Point]:
        """Empty cells in row-major order."""
        return [
            Point(r, c)
            for r in range(BOARD_SIZE)
            for c in range(BOARD_SIZE)
            if Point(r, c) not in self._grid
        ]

    def is_full(self) -> bool:
        return len(self._grid) == BOARD_SIZE * BOARD_SIZE

    @property
    def occupied_count(self) -> int:
        return len(self._grid)

    def copy(self) -> Board:
        clone = Board()
        clone._grid = dict(self._grid)
        return clone

    def evaluate(self) -> Outcome:
        """Terminal value of the position.

        Lines are scanned row i, column i for each i (FIRST before SECOND),
        then the main and secondary diagonals. The first complete line wins.
        """
        for i in range(BOARD_SIZE):
            for line in (_ROWS[i], _COLS[i]):
                for player in (Player.FIRST, Player.SECOND):
                    if self._line_owned_by(line, player):
                        return _WIN_OUTCOME[player]
        for line in (_MAIN_DIAG, _SECONDARY_DIAG):
            for player in (Player.FIRST, Player.SECOND):
                if self._line_owned_by(line, player):
                    return _WIN_OUTCOME[player]
        if self.is_full():
            return Outcome.DRAW
        return Outcome.ONGOING

    def _line_owned_by(self, line: list[Point], player: Player) -> bool:
        return all(self._grid.get(p) is player for p in line)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._grid == other._grid

    def __str__(self) -> str:
        return format_board(self)


@dataclass
class Move:
    point: Point
    player: Player

    def __str__(self) -> str:
        return f"{self.player}: {format_point(self.point)}"


class TicTacToeGameState:
    """Live game: one board, whose turn it is and the moves played so far."""

    def __init__(self, first_player: Player = Player.FIRST) -> None:
        self.board = Board()
        self.first_player = first_player
        self.current_player = first_player
        self.moves: list[Move] = []
        self._outcome = Outcome.ONGOING

    @property
    def outcome(self) -> Outcome:
        return self._outcome

    @property
    def is_over(self) -> bool:
        return self._outcome.is_terminal

    @property
    def winner(self) -> Optional[Player]:
        return self._outcome.winner

    @property
    def is_draw(self) -> bool:
        return self._outcome is Outcome.DRAW

    def legal_moves(self) -> list[Point]:
        if self.is_over:
            return []
        return self.board.open_cells()

    def apply_move(self, point: Point) -> None:
        """Place a marker for the current player and advance the turn."""
        if self.is_over:
            raise GameOverError("Game is already over")

        player = self.current_player
        self.board.place(point, player)
        self.moves.append(Move(point=point, player=player))
        self._outcome = self.board.evaluate()
        self.current_player = player.other

    def resign(self, player: Player) -> None:
        if self.is_over:
            raise GameOverError("Game is already over")
        self._outcome = _WIN_OUTCOME[player.other]
