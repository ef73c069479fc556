"""Rich terminal frontend — tables, colours, and panels.

Uses the ``rich`` library for styled output while sharing the same
backend as the vanilla CLI.
"""

from __future__ import annotations

import rich.box
from rich.align import Align
from rich.columns import Columns
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from backend.engine.gamesolver import Solver
from backend.models.board import Board
from backend.models.node import SearchNode

console = Console()


# -- board rendering ----------------------------------------------------------


def render_board(board: Board, goal: Board | None = None) -> Table:
    """Return a Rich Table representing the puzzle grid.

    Tiles already in their *goal* cell are highlighted in green.
    """
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(len(board.tiles)):
        table.add_column(width=1, justify="center")

    for r, row in enumerate(board.tiles):
        cells: list[str] = []
        for c, val in enumerate(row):
            if val == 0:
                cells.append("[dim]·[/dim]")
            elif goal is not None and goal.tile_at(r, c) == val:
                cells.append(f"[bold green]{val}[/bold green]")
            else:
                cells.append(f"[bold white]{val}[/bold white]")
        table.add_row(*cells)

    return table


def _step_panel(step: int, node: SearchNode, goal: Board) -> Panel:
    if step == 0:
        title = "[bold cyan]Initial state[/bold cyan]"
        subtitle = None
    else:
        title = f"[bold cyan]Step {step}[/bold cyan]"
        subtitle = f"[dim]tile {node.moved_tile} {node.move.opposite.value}[/dim]"
    return Panel(
        Align.center(render_board(node.board, goal)),
        title=title,
        subtitle=subtitle,
        border_style="cyan",
        padding=(0, 1),
    )


# -- screens ------------------------------------------------------------------


def _draw_boards(start: Board, goal: Board) -> None:
    panels = [
        Panel(
            Align.center(render_board(start, goal)),
            title="[bold]Initial state[/bold]",
            border_style="bright_blue",
            padding=(1, 2),
        ),
        Panel(
            Align.center(render_board(goal, goal)),
            title="[bold green]Goal state[/bold green]",
            border_style="green",
            padding=(1, 2),
        ),
    ]
    console.print()
    console.print(Align.center(Columns(panels)))


def _draw_solution(path: list[SearchNode], goal: Board) -> None:
    summary = Text()
    summary.append("Solution found in ", style="green")
    summary.append(str(len(path) - 1), style="bold yellow")
    summary.append(" moves!", style="green")

    steps = Table(box=rich.box.ROUNDED, border_style="dim", title="Moves")
    steps.add_column("#", justify="right", style="dim", width=3)
    steps.add_column("Tile", justify="right", style="bold yellow")
    steps.add_column("Direction", style="cyan")
    for i, node in enumerate(path[1:], 1):
        steps.add_row(str(i), str(node.moved_tile), node.move.opposite.value)

    console.print()
    console.print(Align.center(summary))
    if len(path) > 1:
        console.print(Align.center(steps))
    console.print()
    console.print(
        Columns([_step_panel(i, node, goal) for i, node in enumerate(path)])
    )


# -- public entry point -------------------------------------------------------


def run(start: Board, goal: Board) -> int:
    """Show both boards, solve, and narrate every step.  Returns an exit code."""
    _draw_boards(start, goal)

    if Solver.is_solvable(start) != Solver.is_solvable(goal):
        console.print(
            Align.center(Text("\nThis puzzle is not solvable!\n", style="bold red"))
        )
        return 1

    with console.status("[bold cyan]Solving…[/bold cyan]"):
        result = Solver.search(start, goal)

    if result is None or not result.found:
        console.print(Align.center(Text("\nNo solution found.\n", style="bold red")))
        return 2

    _draw_solution(result.path, goal)
    stats = Text(
        f"expanded {result.expanded} boards, generated {result.generated} nodes",
        style="dim",
    )
    console.print(Align.center(stats))
    return 0
