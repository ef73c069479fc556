"""8-puzzle solver."""

from __future__ import annotations

import logging

from backend.engine.search import AStarSearch, SearchResult
from backend.engine.solvability import is_solvable, same_class
from backend.models.board import Board
from backend.models.node import SearchNode

logger = logging.getLogger(__name__)


class Solver:
    """Stateless solver — all methods are static."""

    @staticmethod
    def search(start: Board, goal: Board) -> SearchResult | None:
        """Run A* from *start* to *goal*.

        Returns ``None`` without searching when the two boards are in
        different parity classes.
        """
        if not same_class(start, goal):
            logger.info("Start and goal have different inversion parity; not searching")
            return None
        return AStarSearch(start, goal).run()

    @staticmethod
    def solve(start: Board, goal: Board) -> list[SearchNode]:
        """Return the optimal path from *start* to *goal*, or ``[]`` if unsolvable."""
        result = Solver.search(start, goal)
        if result is None:
            return []
        return result.path

    @staticmethod
    def hint(start: Board, goal: Board) -> SearchNode | None:
        """Return the first step of an optimal path, or ``None`` if solved / unsolvable."""
        if start == goal:
            return None
        path = Solver.solve(start, goal)
        return path[1] if len(path) > 1 else None

    @staticmethod
    def is_solvable(board: Board) -> bool:
        """Return True if *board* has even inversion parity."""
        return is_solvable(board)
