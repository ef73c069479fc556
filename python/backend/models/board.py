"""Board model for the 8-puzzle."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Iterator, Sequence

SIZE = 3
LABELS = frozenset(range(SIZE * SIZE))


class InvalidBoardError(ValueError):
    """Raised when a grid is not a 3×3 permutation of 0-8."""


class Direction(StrEnum):
    """Direction the *blank* travels.  The moved tile goes the other way."""

    UP = "UP"
    DOWN = "DOWN"
    LEFT = "LEFT"
    RIGHT = "RIGHT"

    @property
    def offset(self) -> tuple[int, int]:
        return _OFFSETS[self]

    @property
    def opposite(self) -> Direction:
        return _OPPOSITES[self]


_OFFSETS = {
    Direction.UP: (-1, 0),
    Direction.DOWN: (1, 0),
    Direction.LEFT: (0, -1),
    Direction.RIGHT: (0, 1),
}

_OPPOSITES = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


@dataclass(frozen=True)
class Board:
    """Immutable 3×3 sliding puzzle board.

    Tiles are stored as a tuple of row tuples; 0 represents the blank.
    Boards are hashable so they can be kept in sets and used as dict keys.
    """

    tiles: tuple[tuple[int, ...], ...]
    blank_pos: tuple[int, int] = field(init=False, compare=False, repr=False)

    def __post_init__(self) -> None:
        for r, row in enumerate(self.tiles):
            for c, v in enumerate(row):
                if v == 0:
                    object.__setattr__(self, "blank_pos", (r, c))
                    return
        # Malformed boards still construct; validate() reports them.
        object.__setattr__(self, "blank_pos", (-1, -1))

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> Board:
        """Create a validated board from nested rows.

        Example::

            Board.from_rows([[1, 2, 3], [4, 5, 6], [7, 0, 8]])
        """
        board = cls(tiles=tuple(tuple(int(v) for v in row) for row in rows))
        board.validate()
        return board

    @classmethod
    def from_flat(cls, flat: Sequence[int]) -> Board:
        """Create a validated board from a flat row-major tile list."""
        if len(flat) != SIZE * SIZE:
            raise InvalidBoardError(
                f"Expected {SIZE * SIZE} tiles for a {SIZE}×{SIZE} board, "
                f"got {len(flat)}."
            )
        return cls.from_rows(
            [flat[r * SIZE : (r + 1) * SIZE] for r in range(SIZE)]
        )

    # -- validation -----------------------------------------------------------

    def validate(self) -> None:
        """Raise ``InvalidBoardError`` unless this is a permutation of 0-8."""
        if len(self.tiles) != SIZE or any(len(row) != SIZE for row in self.tiles):
            raise InvalidBoardError(f"Board must be {SIZE}×{SIZE}.")
        values = self.flat()
        seen = set(values)
        if seen != LABELS:
            missing = sorted(LABELS - seen)
            extra = sorted(seen - LABELS)
            dupes = sorted({v for v in values if values.count(v) > 1})
            parts: list[str] = []
            if missing:
                parts.append(f"missing {missing}")
            if extra:
                parts.append(f"unexpected {extra}")
            if dupes:
                parts.append(f"duplicated {dupes}")
            raise InvalidBoardError(
                "Board must contain each of 0-8 exactly once ("
                + ", ".join(parts)
                + ")."
            )

    def is_valid(self) -> bool:
        try:
            self.validate()
        except InvalidBoardError:
            return False
        return True

    # -- queries --------------------------------------------------------------

    def tile_at(self, row: int, col: int) -> int:
        return self.tiles[row][col]

    def position_of(self, tile: int) -> tuple[int, int]:
        """Return the (row, col) holding *tile*."""
        for r, row in enumerate(self.tiles):
            for c, v in enumerate(row):
                if v == tile:
                    return r, c
        raise InvalidBoardError(f"Tile {tile} is not on the board.")

    def flat(self) -> list[int]:
        return [v for row in self.tiles for v in row]

    def rows(self) -> list[list[int]]:
        return [list(row) for row in self.tiles]

    def __iter__(self) -> Iterator[tuple[int, ...]]:
        return iter(self.tiles)

    # -- moves ----------------------------------------------------------------

    def can_slide(self, direction: Direction) -> bool:
        br, bc = self.blank_pos
        dr, dc = direction.offset
        return 0 <= br + dr < SIZE and 0 <= bc + dc < SIZE

    def slide(self, direction: Direction) -> tuple[Board, int]:
        """Move the blank one cell in *direction*.

        Returns the new board and the tile that slid into the blank's old
        cell.  Raises ``ValueError`` if the blank would leave the grid.
        """
        if not self.can_slide(direction):
            raise ValueError(f"Cannot move blank {direction.value} from {self.blank_pos}.")
        br, bc = self.blank_pos
        dr, dc = direction.offset
        tr, tc = br + dr, bc + dc
        grid = self.rows()
        tile = grid[tr][tc]
        grid[br][bc], grid[tr][tc] = tile, 0
        return Board(tiles=tuple(tuple(row) for row in grid)), tile

    def neighbors(self) -> list[tuple[Direction, Board, int]]:
        """Return ``(direction, board, moved_tile)`` for every legal slide.

        Order is UP, DOWN, LEFT, RIGHT.
        """
        out: list[tuple[Direction, Board, int]] = []
        for direction in Direction:
            if self.can_slide(direction):
                board, tile = self.slide(direction)
                out.append((direction, board, tile))
        return out
