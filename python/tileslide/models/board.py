"""Board model for the sliding puzzle.

A board is a ``columns × rows`` grid of tiles, one of which is designated
as the empty tile.  Grid cells are numbered row-major (``index = row *
columns + column``) and each tile is identified by its *ordinal*: the index
of the cell it occupies when the puzzle is solved.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any, Iterable, NamedTuple


class Direction(StrEnum):
    """Visual direction a tile slides into the empty slot."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


class Coordinate(NamedTuple):
    column: int
    row: int


# Offset from the empty tile to the tile that slides into it.  A tile
# sliding LEFT sits to the right of the hole, so the hole moves right.
_OFFSETS: dict[Direction, tuple[int, int]] = {
    Direction.LEFT: (1, 0),
    Direction.RIGHT: (-1, 0),
    Direction.UP: (0, 1),
    Direction.DOWN: (0, -1),
}

# Shuffle direction codes.  Opposite directions are exactly 2 apart.
_SHUFFLE_CODES: tuple[Direction, ...] = (
    Direction.UP,
    Direction.RIGHT,
    Direction.DOWN,
    Direction.LEFT,
)


@dataclass(eq=False)
class PuzzleBoard:
    """Permutation state of a sliding puzzle.

    ``position_of_ordinal[ordinal]`` is the grid index the tile currently
    occupies.  It is the only mutable state and is always a permutation of
    ``range(columns * rows)``.
    """

    columns: int
    rows: int
    empty_ordinal: int | None = None
    position_of_ordinal: list[int] = field(default_factory=list)
    _solved: bool | None = field(default=None, init=False, repr=False)

    def __post_init__(self) -> None:
        if self.columns < 1 or self.rows < 1:
            raise ValueError(
                f"Board dimensions must be positive, got "
                f"{self.columns}×{self.rows}."
            )
        count = self.columns * self.rows
        if self.empty_ordinal is None:
            self.empty_ordinal = count - 1
        if not 0 <= self.empty_ordinal < count:
            raise ValueError(
                f"Empty ordinal {self.empty_ordinal} is outside a "
                f"{self.columns}×{self.rows} board."
            )
        if not self.position_of_ordinal:
            self.position_of_ordinal = list(range(count))
        elif sorted(self.position_of_ordinal) != list(range(count)):
            raise ValueError(
                f"Positions must be a permutation of 0..{count - 1}, "
                f"got {self.position_of_ordinal}."
            )

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_positions(
        cls,
        columns: int,
        rows: int,
        positions: Iterable[int],
        empty_ordinal: int | None = None,
    ) -> PuzzleBoard:
        """Create a board from an ordinal → grid index list.

        Example::

            PuzzleBoard.from_positions(2, 2, [0, 1, 3, 2])
        """
        positions = list(positions)
        if len(positions) != columns * rows:
            raise ValueError(
                f"Expected {columns * rows} positions for a "
                f"{columns}×{rows} board, got {len(positions)}."
            )
        return cls(
            columns=columns,
            rows=rows,
            empty_ordinal=empty_ordinal,
            position_of_ordinal=positions,
        )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> PuzzleBoard:
        return cls.from_positions(
            data["columns"],
            data["rows"],
            data["position_of_ordinal"],
            empty_ordinal=data["empty_ordinal"],
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "columns": self.columns,
            "rows": self.rows,
            "empty_ordinal": self.empty_ordinal,
            "position_of_ordinal": list(self.position_of_ordinal),
        }

    def copy(self) -> PuzzleBoard:
        """Return an independent clone.

        The source board is already valid, so the clone skips validation.
        """
        board = object.__new__(PuzzleBoard)
        board.columns = self.columns
        board.rows = self.rows
        board.empty_ordinal = self.empty_ordinal
        board.position_of_ordinal = self.position_of_ordinal[:]
        board._solved = self._solved
        return board

    # -- value semantics ------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PuzzleBoard):
            return NotImplemented
        return (
            self.columns == other.columns
            and self.rows == other.rows
            and self.empty_ordinal == other.empty_ordinal
            and self.position_of_ordinal == other.position_of_ordinal
        )

    def __hash__(self) -> int:
        return hash(tuple(self.position_of_ordinal))

    # -- queries --------------------------------------------------------------

    @property
    def is_solved(self) -> bool:
        if self._solved is None:
            self._solved = all(
                position == ordinal
                for ordinal, position in enumerate(self.position_of_ordinal)
            )
        return self._solved

    def index_to_coordinate(self, index: int) -> Coordinate:
        return Coordinate(column=index % self.columns, row=index // self.columns)

    def coordinate_to_index(self, column: int, row: int) -> int:
        return column + row * self.columns

    def ordinal_coordinate(self, ordinal: int) -> Coordinate:
        return self.index_to_coordinate(self.position_of_ordinal[ordinal])

    def ordinal_at_position(self, index: int) -> int:
        """Return the ordinal currently occupying grid cell *index*."""
        # Grids are small, so a scan beats keeping a second mutable array
        # in sync with position_of_ordinal.
        return self.position_of_ordinal.index(index)

    def is_tile_correct(self, ordinal: int) -> bool:
        """Check if a specific tile is in its solved position."""
        return self.position_of_ordinal[ordinal] == ordinal

    def tiles(self) -> list[list[int]]:
        """Return the grid as rows of ordinals, top row first."""
        grid = [[0] * self.columns for _ in range(self.rows)]
        for ordinal, index in enumerate(self.position_of_ordinal):
            column, row = self.index_to_coordinate(index)
            grid[row][column] = ordinal
        return grid

    def can_swap_with_empty(self, dx: int, dy: int) -> bool:
        column, row = self.ordinal_coordinate(self.empty_ordinal)
        return 0 <= column + dx < self.columns and 0 <= row + dy < self.rows

    # -- moves ----------------------------------------------------------------

    def swap_with_empty(self, dx: int, dy: int) -> int | None:
        """Swap the empty tile with the tile at offset ``(dx, dy)`` from it.

        Returns the ordinal of the tile that moved, or ``None`` if the
        offset points outside the grid (the board is left unchanged).
        """
        empty = self.ordinal_coordinate(self.empty_ordinal)
        column = empty.column + dx
        if not 0 <= column < self.columns:
            return None
        row = empty.row + dy
        if not 0 <= row < self.rows:
            return None
        other = self.ordinal_at_position(self.coordinate_to_index(column, row))
        positions = self.position_of_ordinal
        positions[self.empty_ordinal], positions[other] = (
            positions[other],
            positions[self.empty_ordinal],
        )
        self._solved = None
        return other

    def slide(self, direction: Direction) -> int | None:
        """Slide one tile in *direction* into the empty slot.

        E.g. ``Direction.UP`` moves the tile **below** the empty slot up.
        """
        dx, dy = _OFFSETS[direction]
        return self.swap_with_empty(dx, dy)

    def slide_left(self) -> int | None:
        return self.swap_with_empty(1, 0)

    def slide_right(self) -> int | None:
        return self.swap_with_empty(-1, 0)

    def slide_up(self) -> int | None:
        return self.swap_with_empty(0, 1)

    def slide_down(self) -> int | None:
        return self.swap_with_empty(0, -1)

    def slide_tile_toward_empty(self, ordinal: int) -> bool:
        """Slide *ordinal* (and any tiles between it and the hole) into the hole.

        The tile must share a row or a column with the empty tile.  The
        slide is carried out as a series of single-cell swaps.  Returns
        False without moving anything if the board is solved, *ordinal* is
        the empty tile, or the tile is not aligned with the hole.
        """
        if self.is_solved or ordinal == self.empty_ordinal:
            return False
        empty = self.ordinal_coordinate(self.empty_ordinal)
        tile = self.ordinal_coordinate(ordinal)
        dx = dy = 0
        if tile.column == empty.column:
            distance = tile.row - empty.row
            dy = 1 if distance > 0 else -1
        elif tile.row == empty.row:
            distance = tile.column - empty.column
            dx = 1 if distance > 0 else -1
        else:
            return False
        for _ in range(abs(distance)):
            self.swap_with_empty(dx, dy)
        return True

    def apply_solution(self, ordinals: Iterable[int]) -> None:
        """Replay a solver path, one single-cell swap per ordinal."""
        for step, ordinal in enumerate(ordinals):
            empty = self.ordinal_coordinate(self.empty_ordinal)
            tile = self.ordinal_coordinate(ordinal)
            dx = tile.column - empty.column
            dy = tile.row - empty.row
            if abs(dx) + abs(dy) != 1:
                raise ValueError(
                    f"Step {step}: tile {ordinal} at {tuple(tile)} is not "
                    f"adjacent to the empty tile at {tuple(empty)}."
                )
            self.swap_with_empty(dx, dy)

    def shuffle(self, move_count: int, rng: random.Random | None = None) -> None:
        """Make *move_count* random single-cell moves.

        A move never undoes the move made just before it, unless the hole
        is wedged at the end of a single row or column and has no other
        way out.
        """
        if move_count <= 0:
            return
        if self.columns * self.rows < 2:
            raise ValueError("A 1×1 board has no moves to shuffle with.")
        rng = rng or random.Random()
        last_code: int | None = None
        made = 0
        while made < move_count:
            legal = [
                code
                for code, direction in enumerate(_SHUFFLE_CODES)
                if self.can_swap_with_empty(*_OFFSETS[direction])
            ]
            forward = [
                code
                for code in legal
                if last_code is None or abs(code - last_code) != 2
            ]
            code = rng.choice(forward or legal)
            self.slide(_SHUFFLE_CODES[code])
            last_code = code
            made += 1

    # -- solving --------------------------------------------------------------

    def compute_solution(self) -> list[int]:
        """Return the ordinals to move, one cell each, to solve the board."""
        from tileslide.engine.gamesolver import Solver

        return Solver.solve(self)
