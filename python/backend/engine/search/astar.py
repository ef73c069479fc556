"""A* search over 3×3 puzzle boards."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import StrEnum

from backend.engine.heuristic import goal_positions, manhattan_distance
from backend.engine.search.frontier import ClosedSet, Frontier
from backend.engine.search.path import reconstruct_path
from backend.models.board import Board
from backend.models.node import NodeArena, SearchNode

logger = logging.getLogger(__name__)


class SearchStatus(StrEnum):
    RUNNING = "running"
    FOUND = "found"
    EXHAUSTED = "exhausted"


@dataclass
class SearchResult:
    status: SearchStatus
    path: list[SearchNode] = field(default_factory=list)
    expanded: int = 0
    generated: int = 0

    @property
    def found(self) -> bool:
        return self.status is SearchStatus.FOUND

    @property
    def moves(self) -> int | None:
        """Number of slides in the solution, or ``None`` if none was found."""
        return len(self.path) - 1 if self.path else None


class AStarSearch:
    """One A* run from *start* to *goal* using the Manhattan heuristic.

    The frontier, closed set and node arena belong to this instance, so
    separate instances can run on separate threads.  Callers are expected
    to have checked that *goal* is reachable (see ``same_class``); if it
    is not, the search exhausts the start's parity class and reports
    ``EXHAUSTED``.
    """

    def __init__(self, start: Board, goal: Board) -> None:
        self.start = start
        self.goal = goal
        self.status = SearchStatus.RUNNING
        self._positions = goal_positions(goal)
        self._arena = NodeArena()
        self._frontier = Frontier()
        self._closed = ClosedSet()
        self._expanded = 0

    def _heuristic(self, board: Board) -> int:
        return manhattan_distance(board, self.goal, self._positions)

    def run(self) -> SearchResult:
        if self.status is not SearchStatus.RUNNING:
            raise RuntimeError("AStarSearch.run() may only be called once.")

        root = self._arena.create(self.start, g=0, h=self._heuristic(self.start))
        self._frontier.push(root)
        logger.debug("A* start: h=%d", root.h)

        while self._frontier:
            current = self._frontier.pop()

            if current.board == self.goal:
                self.status = SearchStatus.FOUND
                path = reconstruct_path(self._arena, current)
                logger.debug(
                    "A* found %d-move solution (expanded=%d, generated=%d)",
                    current.g, self._expanded, len(self._arena),
                )
                return self._result(path)

            # Duplicates of an expanded board may still sit in the heap.
            if current.board in self._closed:
                continue
            self._closed.add(current.board)
            self._expanded += 1

            for direction, board, tile in current.board.neighbors():
                if board in self._closed:
                    continue
                child = self._arena.create(
                    board,
                    g=current.g + 1,
                    h=self._heuristic(board),
                    parent=current,
                    move=direction,
                    moved_tile=tile,
                )
                self._frontier.push(child)

        self.status = SearchStatus.EXHAUSTED
        logger.warning(
            "A* exhausted %d boards without reaching the goal; "
            "start and goal are probably in different parity classes",
            self._expanded,
        )
        return self._result([])

    def _result(self, path: list[SearchNode]) -> SearchResult:
        return SearchResult(
            status=self.status,
            path=path,
            expanded=self._expanded,
            generated=len(self._arena),
        )


def solve(start: Board, goal: Board) -> list[SearchNode]:
    """Return the optimal path from *start* to *goal*, or ``[]``."""
    return AStarSearch(start, goal).run().path
