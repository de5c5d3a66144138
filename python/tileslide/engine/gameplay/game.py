"""Core gameplay logic: processes moves and checks the win condition."""

from __future__ import annotations

import logging
import random
from typing import Callable

from tileslide.engine.gamegenerator import GameGenerator
from tileslide.engine.gamesolver import Solver
from tileslide.engine.gamestate import GameState
from tileslide.models.board import Direction, PuzzleBoard

logger = logging.getLogger(__name__)

SolvedCallback = Callable[["GamePlay"], None]


class GamePlay:
    """Orchestrates a single game session.

    Player moves are refused once the board is solved; only ``shuffle``
    takes a solved board back into play.
    """

    def __init__(
        self,
        columns: int,
        rows: int,
        empty_ordinal: int | None = None,
        move_count: int | None = None,
        rng: random.Random | None = None,
        on_solved: SolvedCallback | None = None,
    ) -> None:
        board = GameGenerator.generate(
            columns, rows, empty_ordinal, move_count=move_count, rng=rng
        )
        self.state = GameState(board)
        self.on_solved = on_solved
        self._rng = rng

    @classmethod
    def from_board(
        cls, board: PuzzleBoard, on_solved: SolvedCallback | None = None
    ) -> GamePlay:
        """Create a game session from an existing board."""
        obj = object.__new__(cls)
        obj.state = GameState(board)
        obj.on_solved = on_solved
        obj._rng = None
        return obj

    @property
    def board(self) -> PuzzleBoard:
        return self.state.board

    # -- movement (direction = where the *tile* moves) ------------------------

    def move(self, direction: Direction) -> bool:
        """Slide a tile in *direction* into the adjacent empty slot.

        E.g. ``Direction.UP`` moves the tile **below** the hole upward.
        Returns True if the move was valid.
        """
        if self.board.is_solved:
            return False
        if self.board.slide(direction) is None:
            return False
        self._moved(1)
        return True

    def move_tile(self, ordinal: int) -> bool:
        """Slide tile *ordinal* toward the hole along its row or column.

        Every cell travelled counts as one move.  Returns True if the tile
        was aligned with the hole and the slide was applied.
        """
        board = self.board
        if board.is_solved or ordinal == board.empty_ordinal:
            return False
        empty = board.ordinal_coordinate(board.empty_ordinal)
        tile = board.ordinal_coordinate(ordinal)
        steps = abs(tile.column - empty.column) + abs(tile.row - empty.row)
        if not board.slide_tile_toward_empty(ordinal):
            return False
        self._moved(steps)
        return True

    # -- solver helpers -------------------------------------------------------

    def hint(self, max_states: int | None = None) -> int | None:
        """Return the tile an optimal solution moves next."""
        return Solver.hint(self.board, max_states=max_states)

    def apply_hint(self, max_states: int | None = None) -> int | None:
        """Move the hinted tile one cell and return it."""
        ordinal = self.hint(max_states=max_states)
        if ordinal is None:
            return None
        self.board.apply_solution([ordinal])
        self._moved(1)
        return ordinal

    def solve(
        self, fraction: float = 1.0, max_states: int | None = None
    ) -> list[int]:
        """Play the first *fraction* of an optimal solution.

        ``fraction=1.0`` solves the board; ``0.5`` plays half the moves.
        Returns the ordinals that were moved.
        """
        if not 0.0 <= fraction <= 1.0:
            raise ValueError(f"fraction must be within [0, 1], got {fraction}.")
        solution = Solver.solve(self.board, max_states=max_states)
        applied = solution[: int(len(solution) * fraction)]
        for ordinal in applied:
            self.board.apply_solution([ordinal])
            self._moved(1)
        return applied

    def shuffle(self, move_count: int | None = None) -> None:
        """Scramble the board again and restart the counters."""
        GameGenerator.scramble(self.board, move_count, rng=self._rng)
        self.state.reset()

    # -- queries --------------------------------------------------------------

    @property
    def is_won(self) -> bool:
        return self.state.is_solved

    # -- helpers --------------------------------------------------------------

    def _moved(self, count: int) -> None:
        self.state.increment_moves(count)
        if self.board.is_solved:
            self.state.pause()
            logger.debug(
                "Board solved in %d moves (%.1fs)",
                self.state.moves,
                self.state.elapsed_time,
            )
            if self.on_solved is not None:
                self.on_solved(self)
