"""Board parsing and interactive board entry for CLI frontends.

Accepts tiles separated by spaces and/or commas (``1 2 3``, ``1,2,3``) or,
for a whole board, a bare digit string (``123456780``).  Everything is
validated before a ``Board`` is handed to the solver.
"""

from __future__ import annotations

import re
from typing import Callable

from backend.models.board import SIZE, Board, InvalidBoardError

_SEP = re.compile(r"[\s,]+")


# -- parsing ------------------------------------------------------------------


def _tokens(text: str) -> list[str]:
    text = text.strip()
    if not text:
        return []
    if text.isdigit() and len(text) > 1:
        return list(text)
    return [t for t in _SEP.split(text) if t]


def _to_ints(tokens: list[str]) -> list[int]:
    try:
        return [int(t) for t in tokens]
    except ValueError:
        raise InvalidBoardError(
            f"Tiles must be whole numbers, got {' '.join(tokens)!r}."
        ) from None


def parse_row(text: str) -> list[int]:
    """Parse one row of exactly three tiles."""
    values = _to_ints(_tokens(text))
    if len(values) != SIZE:
        raise InvalidBoardError(f"Expected {SIZE} tiles per row, got {len(values)}.")
    return values


def parse_board(text: str) -> Board:
    """Parse a whole board given as nine tiles in row-major order."""
    return Board.from_flat(_to_ints(_tokens(text)))


# -- interactive entry ----------------------------------------------------------


def read_board(
    title: str,
    ask: Callable[[str], str] = input,
    echo: Callable[[str], object] = print,
) -> Board:
    """Prompt for a board row by row until a valid one is entered.

    *ask* and *echo* default to ``input`` / ``print``; frontends pass their
    own (e.g. a Rich console) and tests pass stubs.
    """
    echo(f"Enter {title} (use 0 for blank):")
    while True:
        try:
            rows = [parse_row(ask(f"Row {r + 1}: ")) for r in range(SIZE)]
            return Board.from_rows(rows)
        except InvalidBoardError as exc:
            echo(f"Invalid board: {exc} Please try again.")
