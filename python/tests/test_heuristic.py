from __future__ import annotations

import random

import pytest

from backend.engine.gamegenerator import GameGenerator
from backend.engine.heuristic import goal_positions, manhattan_distance
from backend.models.board import Board

GOAL = Board.from_rows([[1, 2, 3], [4, 5, 6], [7, 8, 0]])


def test_distance_to_itself_is_zero() -> None:
    for seed in range(10):
        board = GameGenerator.generate(30, seed=seed)
        assert manhattan_distance(board, board) == 0


@pytest.mark.parametrize(
    "rows, expected",
    [
        ([[1, 2, 3], [4, 5, 6], [7, 0, 8]], 1),
        ([[0, 1, 3], [4, 2, 5], [7, 8, 6]], 4),
        ([[8, 6, 7], [2, 5, 4], [3, 0, 1]], 21),
    ],
)
def test_known_distances(rows: list[list[int]], expected: int) -> None:
    assert manhattan_distance(Board.from_rows(rows), GOAL) == expected


def test_bounds_and_symmetry() -> None:
    rng = random.Random(11)
    for _ in range(50):
        flat = list(range(9))
        rng.shuffle(flat)
        board = Board.from_flat(flat)
        d = manhattan_distance(board, GOAL)
        assert 0 <= d <= 8 * 4
        assert d == manhattan_distance(GOAL, board)
        assert manhattan_distance(board, GOAL, goal_positions(GOAL)) == d


def test_goal_positions() -> None:
    positions = goal_positions(GOAL)
    assert positions[0] == (2, 2)
    assert positions[5] == (1, 1)
    assert len(positions) == 9
