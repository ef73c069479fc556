"""Search nodes and the arena that owns them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from backend.models.board import Board, Direction


@dataclass(frozen=True, slots=True)
class SearchNode:
    """One state in the search tree.

    ``parent`` is a handle into the owning ``NodeArena``, never a reference
    to another node.  The start node has no parent, move or moved tile.
    """

    index: int
    board: Board
    g: int
    h: int
    parent: int | None = None
    move: Direction | None = None
    moved_tile: int | None = None

    @property
    def f(self) -> int:
        return self.g + self.h

    @property
    def blank_pos(self) -> tuple[int, int]:
        return self.board.blank_pos

    @property
    def is_start(self) -> bool:
        return self.parent is None


class NodeArena:
    """Owns every node created during one search.

    Nodes are appended and never removed; the whole arena is dropped when
    the search that created it goes away.
    """

    def __init__(self) -> None:
        self._nodes: list[SearchNode] = []

    def create(
        self,
        board: Board,
        g: int,
        h: int,
        parent: SearchNode | None = None,
        move: Direction | None = None,
        moved_tile: int | None = None,
    ) -> SearchNode:
        node = SearchNode(
            index=len(self._nodes),
            board=board,
            g=g,
            h=h,
            parent=None if parent is None else parent.index,
            move=move,
            moved_tile=moved_tile,
        )
        self._nodes.append(node)
        return node

    def parent_of(self, node: SearchNode) -> SearchNode | None:
        if node.parent is None:
            return None
        return self._nodes[node.parent]

    def __getitem__(self, index: int) -> SearchNode:
        return self._nodes[index]

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[SearchNode]:
        return iter(self._nodes)
