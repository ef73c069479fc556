"""Open and closed sets for A* search."""

from __future__ import annotations

import heapq
import itertools

from backend.models.board import Board
from backend.models.node import SearchNode


class Frontier:
    """Min-priority queue of nodes keyed by ``f``.

    Equal-``f`` nodes come out in insertion order.
    """

    def __init__(self) -> None:
        self._heap: list[tuple[int, int, SearchNode]] = []
        self._counter = itertools.count()

    def push(self, node: SearchNode) -> None:
        heapq.heappush(self._heap, (node.f, next(self._counter), node))

    def pop(self) -> SearchNode:
        """Remove and return the node with the smallest ``f``.

        Raises ``IndexError`` when empty.
        """
        if not self._heap:
            raise IndexError("pop from an empty frontier")
        return heapq.heappop(self._heap)[2]

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)


class ClosedSet:
    """Boards that have already been expanded."""

    def __init__(self) -> None:
        self._boards: set[Board] = set()

    def add(self, board: Board) -> None:
        self._boards.add(board)

    def __contains__(self, board: object) -> bool:
        return board in self._boards

    def __len__(self) -> int:
        return len(self._boards)
