"""Breadth-first search solver for sliding puzzle boards."""

from __future__ import annotations

import logging
from collections import deque

from tileslide.models.board import PuzzleBoard

logger = logging.getLogger(__name__)

# Offsets from the empty tile to its four orthogonal neighbours.
_OFFSETS: tuple[tuple[int, int], ...] = ((0, 1), (-1, 0), (0, -1), (1, 0))


class SolverError(Exception):
    """Base class for solver failures."""


class UnsolvableBoardError(SolverError):
    """The board cannot reach the solved state by legal moves."""


class SearchLimitExceeded(SolverError):
    """The search visited more states than the caller allowed."""

    def __init__(self, max_states: int) -> None:
        super().__init__(f"Search gave up after visiting {max_states} states.")
        self.max_states = max_states


class Solver:
    """Stateless solver; all methods are static."""

    @staticmethod
    def solve(
        board: PuzzleBoard,
        max_states: int | None = None,
        check_parity: bool = True,
    ) -> list[int]:
        """Return the shortest list of ordinals that solves *board*.

        Each ordinal names the tile that moves one cell into the hole at
        that step.  Returns ``[]`` if the board is already solved.  *board*
        itself is never modified.

        Raises ``UnsolvableBoardError`` when no solution exists and
        ``SearchLimitExceeded`` when more than *max_states* distinct states
        would have to be visited.
        """
        if board.is_solved:
            return []

        if check_parity and not Solver.is_solvable(board):
            raise UnsolvableBoardError(
                f"Board {board.position_of_ordinal} has the wrong parity "
                f"to be solved."
            )

        start = board.copy()
        queue: deque[tuple[PuzzleBoard, list[int]]] = deque([(start, [])])
        seen: set[PuzzleBoard] = {start}
        logger.debug(
            "Solving %d×%d board %s",
            board.columns,
            board.rows,
            board.position_of_ordinal,
        )

        while queue:
            current, path = queue.popleft()
            for dx, dy in _OFFSETS:
                candidate = current.copy()
                moved = candidate.swap_with_empty(dx, dy)
                if moved is None:
                    continue
                if candidate.is_solved:
                    logger.debug(
                        "Found %d-move solution after visiting %d states",
                        len(path) + 1,
                        len(seen),
                    )
                    return path + [moved]
                if candidate in seen:
                    continue
                if max_states is not None and len(seen) >= max_states:
                    raise SearchLimitExceeded(max_states)
                seen.add(candidate)
                queue.append((candidate, path + [moved]))

        raise UnsolvableBoardError(
            f"Exhausted {len(seen)} states without reaching the solved board."
        )

    @staticmethod
    def hint(board: PuzzleBoard, max_states: int | None = None) -> int | None:
        """Return the tile to move next, or ``None`` if already solved."""
        if board.is_solved:
            return None
        return Solver.solve(board, max_states=max_states)[0]

    @staticmethod
    def is_solvable(board: PuzzleBoard) -> bool:
        """Return True if *board* can reach the solved state."""
        positions = board.position_of_ordinal

        if board.columns == 1 or board.rows == 1:
            # Tiles in a single line can never pass each other.
            ordered = sorted(
                (ordinal for ordinal in range(len(positions))
                 if ordinal != board.empty_ordinal),
                key=positions.__getitem__,
            )
            return ordered == sorted(ordered)

        # Every move swaps the hole with a neighbour: it flips both the
        # permutation parity and the parity of the hole's distance home.
        empty = board.ordinal_coordinate(board.empty_ordinal)
        home = board.index_to_coordinate(board.empty_ordinal)
        distance = abs(empty.column - home.column) + abs(empty.row - home.row)
        return _permutation_parity(positions) == distance % 2


def _permutation_parity(permutation: list[int]) -> int:
    """Return 0 for an even permutation, 1 for an odd one."""
    visited = [False] * len(permutation)
    cycles = 0
    for start in range(len(permutation)):
        if visited[start]:
            continue
        cycles += 1
        i = start
        while not visited[i]:
            visited[i] = True
            i = permutation[i]
    return (len(permutation) - cycles) % 2
