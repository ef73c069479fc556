"""Turns a goal node back into the move sequence that reached it."""

from __future__ import annotations

from backend.models.node import NodeArena, SearchNode


def reconstruct_path(arena: NodeArena, node: SearchNode) -> list[SearchNode]:
    """Return the nodes from the start to *node*, inclusive.

    The result has ``node.g + 1`` entries; every entry after the first
    records the move and tile that produced it from its predecessor.
    """
    path: list[SearchNode] = []
    current: SearchNode | None = node
    while current is not None:
        path.append(current)
        current = arena.parent_of(current)
    path.reverse()
    return path
