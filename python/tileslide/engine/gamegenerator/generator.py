"""Generates shuffled sliding puzzle boards."""

from __future__ import annotations

import logging
import random

from tileslide.models.board import PuzzleBoard

logger = logging.getLogger(__name__)

# A full shuffle makes this many moves per tile.
DEFAULT_SHUFFLE_FACTOR = 10

# Moves used to scramble a freshly nested sub-puzzle.
SUB_SHUFFLE_MOVES = 3


def default_shuffle_count(columns: int, rows: int) -> int:
    return DEFAULT_SHUFFLE_FACTOR * columns * rows


class GameGenerator:
    """Creates solvable puzzles by shuffling from the solved state."""

    @staticmethod
    def solved(
        columns: int, rows: int, empty_ordinal: int | None = None
    ) -> PuzzleBoard:
        """Return the goal-state board (empty tile last unless given)."""
        return PuzzleBoard(columns=columns, rows=rows, empty_ordinal=empty_ordinal)

    @staticmethod
    def scramble(
        board: PuzzleBoard,
        move_count: int | None = None,
        rng: random.Random | None = None,
    ) -> None:
        """Scramble *board* in-place using random valid moves.

        A non-empty scramble never leaves the board solved.
        """
        if move_count is None:
            move_count = default_shuffle_count(board.columns, board.rows)
        if move_count <= 0:
            return
        board.shuffle(move_count, rng=rng)
        # An even-length walk can wander back to the start
        if board.is_solved:
            board.shuffle(1, rng=rng)
        logger.debug(
            "Scrambled %d×%d board with %d moves",
            board.columns,
            board.rows,
            move_count,
        )

    @staticmethod
    def generate(
        columns: int,
        rows: int,
        empty_ordinal: int | None = None,
        move_count: int | None = None,
        rng: random.Random | None = None,
    ) -> PuzzleBoard:
        """Return a shuffled, *solvable* board of the given shape.

        The board is never returned solved unless it has no moves at all
        (a 1×1 grid) or *move_count* is zero.
        """
        board = GameGenerator.solved(columns, rows, empty_ordinal)
        if columns * rows < 2 or move_count == 0:
            return board

        GameGenerator.scramble(board, move_count, rng=rng)
        return board
