"""Vanilla terminal frontend — no third-party dependencies.

Uses only ``print`` and ANSI codes to narrate a solution step by step.
"""

from __future__ import annotations

import sys

from backend.engine.gamesolver import Solver
from backend.models.board import Board
from backend.models.node import SearchNode


# -- ANSI helpers -------------------------------------------------------------

_G = "\033[32;1m"    # bold green
_Y = "\033[33;1m"    # bold yellow
_C = "\033[36;1m"    # bold cyan
_RED = "\033[31;1m"  # bold red
_BOLD = "\033[1m"    # bold
_R = "\033[0m"       # reset


def _color(code: str, text: str) -> str:
    if not sys.stdout.isatty():
        return text
    return f"{code}{text}{_R}"


# -- board rendering ----------------------------------------------------------


def render_board(board: Board) -> str:
    """Return the board as an ASCII grid; the blank is shown as a space."""
    sep = "+---+---+---+"
    lines: list[str] = [sep]
    for row in board.tiles:
        cells = " | ".join(str(v) if v else " " for v in row)
        lines.append(f"| {cells} |")
        lines.append(sep)
    return "\n".join(lines)


def describe_step(step: int, node: SearchNode) -> str:
    return f"Step {step}: Move tile {node.moved_tile} {node.move.opposite.value}"


# -- narration ----------------------------------------------------------------


def _print_solution(path: list[SearchNode]) -> None:
    print(_color(_G, f"Solution found in {len(path) - 1} moves!"))
    print()
    for i, node in enumerate(path):
        if i == 0:
            print("Initial state:")
        else:
            print(_color(_C, describe_step(i, node)))
        print(render_board(node.board))
        print()


# -- public entry point -------------------------------------------------------


def run(start: Board, goal: Board) -> int:
    """Show both boards, solve, and print every step.  Returns an exit code."""
    print()
    print(_color(_BOLD, "Initial state:"))
    print(render_board(start))
    print()
    print(_color(_BOLD, "Goal state:"))
    print(render_board(goal))

    if Solver.is_solvable(start) != Solver.is_solvable(goal):
        print()
        print(_color(_Y, "This puzzle is not solvable!"))
        return 1

    print()
    print("Solving...")
    sys.stdout.flush()
    result = Solver.search(start, goal)
    if result is None or not result.found:
        print(_color(_RED, "No solution found."))
        return 2

    _print_solution(result.path)
    return 0
