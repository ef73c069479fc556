"""Solver test suite — known-optimal fixtures and scrambled boards.

Known cases are JSON fixtures under ``<project_root>/fixtures/``.  Every
returned path is replayed slide by slide to verify it is legal, and its
length is compared against the known optimum or a breadth-first search.
"""

from __future__ import annotations

import json
import random
from collections import deque
from pathlib import Path

import pytest

from backend.engine import search as search_module
from backend.engine.gamegenerator import GameGenerator
from backend.engine.gamesolver import Solver
from backend.models.board import Board, Direction
from backend.models.node import SearchNode

FIXTURES_DIR = Path(__file__).resolve().parent.parent.parent / "fixtures"
GOAL = Board.from_rows([[1, 2, 3], [4, 5, 6], [7, 8, 0]])


# -- fixture loaders ----------------------------------------------------------


def _load(name: str) -> list[dict]:
    with open(FIXTURES_DIR / name) as f:
        return json.load(f)


def _ids(case: dict) -> str:
    return case["id"]


_CASES_3x3 = _load("3x3.json")


# -- helpers ------------------------------------------------------------------


def _assert_valid_path(path: list[SearchNode], start: Board, goal: Board) -> None:
    """Check the path starts at *start*, ends at *goal*, and every step is one slide."""
    assert path, "solvable pair returned an empty path"
    assert path[0].board == start
    assert path[-1].board == goal
    assert path[0].move is None and path[0].moved_tile is None

    for i, (prev, node) in enumerate(zip(path, path[1:]), 1):
        assert isinstance(node.move, Direction), f"step {i} has no direction"
        board, tile = prev.board.slide(node.move)
        assert board == node.board, f"step {i} ({node.move}) does not match its board"
        assert tile == node.moved_tile
        assert node.g == i


def _bfs_distance(start: Board, goal: Board) -> int:
    """Exact move count by breadth-first search (small distances only)."""
    seen = {start}
    queue = deque([(start, 0)])
    while queue:
        board, depth = queue.popleft()
        if board == goal:
            return depth
        for _direction, nxt, _tile in board.neighbors():
            if nxt not in seen:
                seen.add(nxt)
                queue.append((nxt, depth + 1))
    raise AssertionError("goal unreachable")


# -- known cases --------------------------------------------------------------


@pytest.mark.parametrize("case", _CASES_3x3, ids=_ids)
def test_solve_known_cases(case: dict) -> None:
    start = Board.from_rows(case["start"])
    goal = Board.from_rows(case["goal"])

    path = Solver.solve(start, goal)

    _assert_valid_path(path, start, goal)
    assert len(path) - 1 == case["moves"]


def test_start_equals_goal_returns_single_entry() -> None:
    path = Solver.solve(GOAL, GOAL)

    assert len(path) == 1
    assert path[0].board == GOAL
    assert path[0].g == 0


def test_one_slide_records_moved_tile_and_direction() -> None:
    start = Board.from_rows([[1, 2, 3], [4, 5, 6], [7, 0, 8]])

    path = Solver.solve(start, GOAL)

    assert len(path) == 2
    assert path[1].moved_tile == 8
    assert path[1].move is Direction.RIGHT


# -- scrambled boards ---------------------------------------------------------


@pytest.mark.parametrize("seed", range(5))
def test_twenty_random_slides(seed: int) -> None:
    start = GameGenerator.scramble(GOAL, 20, random.Random(seed))

    path = Solver.solve(start, GOAL)

    _assert_valid_path(path, start, GOAL)
    assert len(path) - 1 <= 20


@pytest.mark.parametrize("seed", range(8))
def test_path_is_optimal(seed: int) -> None:
    start = GameGenerator.generate(12, seed=seed)

    path = Solver.solve(start, GOAL)

    _assert_valid_path(path, start, GOAL)
    assert len(path) - 1 == _bfs_distance(start, GOAL)


def test_custom_goal() -> None:
    goal = Board.from_rows([[1, 2, 3], [8, 0, 4], [7, 6, 5]])
    start = GameGenerator.generate(15, goal=goal, seed=3)

    path = Solver.solve(start, goal)

    _assert_valid_path(path, start, goal)
    assert len(path) - 1 == _bfs_distance(start, goal)


# -- unsolvable ---------------------------------------------------------------


def test_parity_mismatch_does_not_search(monkeypatch: pytest.MonkeyPatch) -> None:
    start = Board.from_rows([[1, 2, 3], [4, 5, 6], [8, 7, 0]])

    def _fail(*args, **kwargs):
        raise AssertionError("search must not run for a parity mismatch")

    monkeypatch.setattr("backend.engine.gamesolver.solver.AStarSearch", _fail)

    assert Solver.is_solvable(start) != Solver.is_solvable(GOAL)
    assert Solver.search(start, GOAL) is None
    assert Solver.solve(start, GOAL) == []
    assert Solver.hint(start, GOAL) is None


# -- hint ---------------------------------------------------------------------


def test_hint_returns_first_step() -> None:
    start = Board.from_rows([[1, 2, 3], [4, 5, 6], [0, 7, 8]])

    step = Solver.hint(start, GOAL)

    assert step is not None
    assert step.moved_tile == 7
    assert step.move is Direction.RIGHT


def test_hint_on_solved_board() -> None:
    assert Solver.hint(GOAL, GOAL) is None


def test_search_reports_statistics() -> None:
    start = Board.from_rows([[0, 1, 3], [4, 2, 5], [7, 8, 6]])

    result = Solver.search(start, GOAL)

    assert result is not None
    assert result.status is search_module.SearchStatus.FOUND
    assert result.moves == 4
    assert result.expanded >= 4
    assert result.generated >= result.expanded
