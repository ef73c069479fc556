"""Manhattan distance heuristic."""

from __future__ import annotations

from backend.models.board import Board


def goal_positions(goal: Board) -> dict[int, tuple[int, int]]:
    """Map every tile label to its (row, col) in *goal*."""
    return {
        tile: (r, c)
        for r, row in enumerate(goal.tiles)
        for c, tile in enumerate(row)
    }


def manhattan_distance(
    board: Board,
    goal: Board,
    positions: dict[int, tuple[int, int]] | None = None,
) -> int:
    """Sum of ``|drow| + |dcol|`` for every non-blank tile of *board*.

    *board* and *goal* must hold the same labels.  Pass a precomputed
    ``goal_positions(goal)`` as *positions* to avoid rebuilding it on every
    call.
    """
    if positions is None:
        positions = goal_positions(goal)
    distance = 0
    for r, row in enumerate(board.tiles):
        for c, tile in enumerate(row):
            if tile == 0:
                continue
            gr, gc = positions[tile]
            distance += abs(r - gr) + abs(c - gc)
    return distance
