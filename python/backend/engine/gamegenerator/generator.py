"""Generates 8-puzzle boards by scrambling a goal board."""

from __future__ import annotations

import random

from backend.models.board import Board, Direction


class GameGenerator:
    """Creates solvable puzzles by sliding the blank around a goal board."""

    @staticmethod
    def solved() -> Board:
        """Return the standard goal board (1-8 in order, blank bottom-right)."""
        return Board.from_flat([1, 2, 3, 4, 5, 6, 7, 8, 0])

    @staticmethod
    def scramble(
        board: Board, moves: int, rng: random.Random | None = None
    ) -> Board:
        """Return *board* after *moves* random legal slides.

        A slide never immediately undoes the previous one, so the result
        is at most *moves* slides away from *board*.
        """
        if moves < 0:
            raise ValueError("moves must be non-negative")
        rng = rng or random.Random()
        prev: Direction | None = None

        for _ in range(moves):
            options = [d for d in Direction if board.can_slide(d)]
            if prev is not None and prev.opposite in options and len(options) > 1:
                options.remove(prev.opposite)
            direction = rng.choice(options)
            board, _tile = board.slide(direction)
            prev = direction
        return board

    @staticmethod
    def generate(
        moves: int, goal: Board | None = None, seed: int | None = None
    ) -> Board:
        """Return a board *moves* random slides away from *goal*."""
        goal = goal or GameGenerator.solved()
        return GameGenerator.scramble(goal, moves, random.Random(seed))
