"""Minimax agent: exhaustive search to terminal positions, optional alpha-beta."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import NamedTuple, Optional

from tictactoe.agent.base import Agent
from tictactoe.game.board import MAX_SOLUTION_DEPTH, Board, TicTacToeGameState
from tictactoe.game.errors import NoLegalMovesError
from tictactoe.game.types import Outcome, Player, Point

logger = logging.getLogger(__name__)


class SearchResult(NamedTuple):
    score: int
    move: Optional[Point]


@dataclass
class SearchStats:
    """Counters filled in by search() when passed a stats object."""

    nodes: int = 0
    cutoffs: int = 0


# ---------------------------------------------------------------------------
# Terminal scoring (absolute viewpoint: positive = FIRST advantage)
# ---------------------------------------------------------------------------

def terminal_score(outcome: Outcome, depth: int) -> int:
    """Score a finished position reached `depth` plies below the root.

    Wins found sooner score higher in magnitude, so the maximizer prefers
    the fastest win and the minimizer the slowest loss.
    """
    if outcome is Outcome.FIRST_WINS:
        return MAX_SOLUTION_DEPTH - depth
    if outcome is Outcome.SECOND_WINS:
        return -(MAX_SOLUTION_DEPTH - depth)
    return 0


def generate_children(board: Board, maximize: bool) -> list[tuple[Board, Point]]:
    """One copy of the board per open cell, with the mover's marker placed."""
    player = Player.FIRST if maximize else Player.SECOND
    children = []
    for point in board.open_cells():
        child = board.copy()
        child.place(point, player)
        children.append((child, point))
    return children


# ---------------------------------------------------------------------------
# Minimax with optional alpha-beta
# ---------------------------------------------------------------------------

def search(
    board: Board,
    maximize: bool,
    depth: int = 0,
    alpha: Optional[int] = None,
    beta: Optional[int] = None,
    pruning: bool = True,
    stats: Optional[SearchStats] = None,
) -> SearchResult:
    """Best achievable score for the side to move, and the move that gets it.

    maximize is True when FIRST is to move. alpha/beta of None mean unbounded.
    Ties go to the first child in row-major order. With pruning, a node stops
    expanding as soon as its best value crosses the opposing bound and
    returns that value (fail-hard); the root result is the same either way.
    """
    if stats is not None:
        stats.nodes += 1

    outcome = board.evaluate()
    children = generate_children(board, maximize)
    if outcome is not Outcome.ONGOING or not children:
        return SearchResult(terminal_score(outcome, depth), None)

    best_value: Optional[int] = None
    best_move: Optional[Point] = None

    for child, point in children:
        value, _ = search(child, not maximize, depth + 1, alpha, beta, pruning, stats)

        if best_value is None:
            best_value, best_move = value, point
        elif maximize and value > best_value:
            best_value, best_move = value, point
        elif not maximize and value < best_value:
            best_value, best_move = value, point

        if not pruning:
            continue

        if maximize:
            if beta is not None and best_value >= beta:
                if stats is not None:
                    stats.cutoffs += 1
                return SearchResult(best_value, best_move)
            alpha = best_value if alpha is None else max(alpha, best_value)
        else:
            if alpha is not None and best_value <= alpha:
                if stats is not None:
                    stats.cutoffs += 1
                return SearchResult(best_value, best_move)
            beta = best_value if beta is None else min(beta, best_value)

    assert best_value is not None
    return SearchResult(best_value, best_move)


def choose_move(
    board: Board,
    use_pruning: bool = True,
    player: Player = Player.SECOND,
) -> Point:
    """Optimal move for `player` on `board`. The board is not modified.

    By default the engine plays SECOND, the minimizing side.
    """
    if board.is_full():
        raise NoLegalMovesError("Board is full")

    stats = SearchStats()
    result = search(
        board,
        maximize=player is Player.FIRST,
        pruning=use_pruning,
        stats=stats,
    )
    if result.move is None:
        raise NoLegalMovesError(f"Game is already decided ({board.evaluate().name})")

    logger.debug("Best value: %d at %s", result.score, result.move)
    logger.debug("Searched %d nodes, %d cutoffs", stats.nodes, stats.cutoffs)
    return result.move


# ---------------------------------------------------------------------------
# MinimaxAgent
# ---------------------------------------------------------------------------

class MinimaxAgent(Agent):
    """Perfect-play agent. Pruning changes speed, never the chosen move."""

    def __init__(self, pruning: bool = True) -> None:
        self.pruning = pruning

    @property
    def name(self) -> str:
        return "MinimaxAgent(alpha-beta)" if self.pruning else "MinimaxAgent(full)"

    def select_move(self, game_state: TicTacToeGameState) -> Point:
        if game_state.is_over:
            raise NoLegalMovesError("Game is already over")
        return choose_move(game_state.board, self.pruning, game_state.current_player)
