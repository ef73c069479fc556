"""Inversion-parity solvability test for the 3×3 puzzle.

On an odd-width board every slide changes the row-major order of the
non-blank tiles by an even number of transpositions, so the parity of the
inversion count is invariant.  Two boards are mutually reachable exactly
when their parities agree.
"""

from __future__ import annotations

from backend.models.board import Board


def inversion_count(board: Board) -> int:
    """Count pairs of non-blank tiles that appear in descending order."""
    flat = [v for v in board.flat() if v != 0]
    inversions = 0
    for i in range(len(flat)):
        for j in range(i + 1, len(flat)):
            if flat[i] > flat[j]:
                inversions += 1
    return inversions


def is_solvable(board: Board) -> bool:
    """Return True if *board* has an even inversion count."""
    return inversion_count(board) % 2 == 0


def same_class(start: Board, goal: Board) -> bool:
    """Return True if *goal* is reachable from *start* by legal slides."""
    return is_solvable(start) == is_solvable(goal)
