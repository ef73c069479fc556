#!/usr/bin/env python3
"""8-Puzzle Solver.

Usage::

    python main.py                                  # enter both boards interactively
    python main.py --start "1 2 3 4 5 6 7 0 8"      # solve to the default goal
    python main.py --start 283164705 --goal 123804765 -f vanilla
    python main.py --scramble 20 --seed 7           # random start, 20 slides out
"""

import importlib
import logging
import sys
from enum import StrEnum
from pathlib import Path
from typing import Optional

import typer
from rich.logging import RichHandler

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from backend.engine.gamegenerator import GameGenerator  # noqa: E402
from backend.models.board import Board, InvalidBoardError  # noqa: E402
from frontend.cli.input_handler import parse_board, read_board  # noqa: E402

DEFAULT_GOAL = "1 2 3 4 5 6 7 8 0"


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    vanilla = "vanilla"
    rich = "rich"


_RUNNERS = {
    Frontend.vanilla: "frontend.cli.vanilla.app",
    Frontend.rich: "frontend.cli.rich.app",
}


# -- helpers ------------------------------------------------------------------


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
        force=True,
    )


def _board_option(text: str, name: str) -> Board:
    try:
        return parse_board(text)
    except InvalidBoardError as exc:
        raise typer.BadParameter(str(exc), param_hint=name) from None


def _boards(
    start: Optional[str], goal: Optional[str], scramble: Optional[int], seed: Optional[int]
) -> tuple[Board, Board]:
    if start is None and scramble is None:
        print("8-Puzzle Solver\n")
        start_board = read_board("initial state")
        print()
        goal_board = (
            _board_option(goal, "--goal") if goal is not None else read_board("goal state")
        )
        return start_board, goal_board

    goal_board = _board_option(goal or DEFAULT_GOAL, "--goal")
    if start is not None:
        return _board_option(start, "--start"), goal_board
    return GameGenerator.generate(scramble, goal=goal_board, seed=seed), goal_board


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    frontend: Frontend = typer.Option(
        Frontend.rich, "-f", "--frontend",
        help="Frontend used to narrate the solution.",
    ),
    start: Optional[str] = typer.Option(
        None, "--start",
        help="Start board as 9 tiles in row order, e.g. '1 2 3 4 5 6 7 0 8'.",
    ),
    goal: Optional[str] = typer.Option(
        None, "--goal",
        help=f"Goal board (default '{DEFAULT_GOAL}').",
    ),
    scramble: Optional[int] = typer.Option(
        None, "--scramble",
        min=0,
        help="Generate the start by applying N random slides to the goal.",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Random seed for --scramble.",
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Log search statistics.",
    ),
) -> None:
    """8-Puzzle Solver."""
    if start is not None and scramble is not None:
        raise typer.BadParameter("use either --start or --scramble, not both")

    _configure_logging(verbose)
    start_board, goal_board = _boards(start, goal, scramble, seed)

    mod = importlib.import_module(_RUNNERS[frontend])
    code = mod.run(start_board, goal_board)
    if code:
        raise typer.Exit(code)


if __name__ == "__main__":
    app()
