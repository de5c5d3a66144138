"""Nested sub-puzzles.

Any tile of a board can itself hold a puzzle.  Boards know nothing about
this: the tree keeps every board in a flat list and links them by index.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import Iterator

from tileslide.engine.gamegenerator import SUB_SHUFFLE_MOVES, GameGenerator
from tileslide.models.board import PuzzleBoard

logger = logging.getLogger(__name__)

ROOT = 0


@dataclass
class BoardNode:
    board: PuzzleBoard
    parent: int | None = None
    parent_ordinal: int | None = None
    # tile ordinal -> node id of the puzzle nested in that tile
    children: dict[int, int] = field(default_factory=dict)


class BoardTree:
    """A root board plus the sub-puzzles nested inside its tiles."""

    def __init__(self, root: PuzzleBoard) -> None:
        self._nodes: list[BoardNode] = [BoardNode(board=root)]

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[BoardNode]:
        return iter(self._nodes)

    def __getitem__(self, node_id: int) -> BoardNode:
        return self._nodes[node_id]

    @property
    def root(self) -> PuzzleBoard:
        return self._nodes[ROOT].board

    def board(self, node_id: int) -> PuzzleBoard:
        return self._nodes[node_id].board

    def parent_of(self, node_id: int) -> int | None:
        return self._nodes[node_id].parent

    def children_of(self, node_id: int) -> list[int]:
        return list(self._nodes[node_id].children.values())

    def child_at(self, node_id: int, ordinal: int) -> int | None:
        return self._nodes[node_id].children.get(ordinal)

    def depth(self, node_id: int) -> int:
        depth = 0
        parent = self._nodes[node_id].parent
        while parent is not None:
            depth += 1
            parent = self._nodes[parent].parent
        return depth

    # -- building -------------------------------------------------------------

    def add_child(
        self, node_id: int, ordinal: int, board: PuzzleBoard | None = None
    ) -> int:
        """Nest a puzzle inside tile *ordinal* of board *node_id*.

        Defaults to a solved board with the parent's columns and rows and
        its own default empty tile.  A tile holds at most one puzzle; if it
        already has one, that node's id is returned.
        """
        node = self._nodes[node_id]
        parent_board = node.board
        if not 0 <= ordinal < len(parent_board.position_of_ordinal):
            raise ValueError(f"Tile {ordinal} is not on board {node_id}.")
        if ordinal == parent_board.empty_ordinal:
            raise ValueError("The empty tile cannot hold a sub-puzzle.")
        if ordinal in node.children:
            return node.children[ordinal]

        if board is None:
            board = PuzzleBoard(
                columns=parent_board.columns,
                rows=parent_board.rows,
            )
        child_id = len(self._nodes)
        self._nodes.append(
            BoardNode(board=board, parent=node_id, parent_ordinal=ordinal)
        )
        node.children[ordinal] = child_id
        logger.debug(
            "Nested board %d in tile %d of board %d", child_id, ordinal, node_id
        )
        return child_id

    def sub_shuffle(
        self,
        node_id: int,
        ordinal: int,
        move_count: int = SUB_SHUFFLE_MOVES,
        rng: random.Random | None = None,
    ) -> int:
        """Turn tile *ordinal* into a sub-puzzle if needed and shuffle it."""
        child_id = self.add_child(node_id, ordinal)
        GameGenerator.scramble(self._nodes[child_id].board, move_count, rng=rng)
        return child_id

    # -- queries --------------------------------------------------------------

    def find_unsolved(self, node_id: int = ROOT) -> int | None:
        """Return the board the player should work on next.

        Unsolved puzzles nested below *node_id* come first, deepest first,
        then *node_id* itself; failing that, each ancestor's subtree is
        searched in turn.  Returns ``None`` when every board is solved.
        """
        current: int | None = node_id
        while current is not None:
            match = self._find_unsolved_below(current)
            if match is not None:
                return match
            current = self._nodes[current].parent
        return None

    def is_recursively_solved(self, node_id: int = ROOT) -> bool:
        """True if board *node_id* and every puzzle nested below it are solved."""
        node = self._nodes[node_id]
        if not node.board.is_solved:
            return False
        return all(
            self.is_recursively_solved(child) for child in node.children.values()
        )

    def _find_unsolved_below(self, node_id: int) -> int | None:
        node = self._nodes[node_id]
        for ordinal in sorted(node.children):
            match = self._find_unsolved_below(node.children[ordinal])
            if match is not None:
                return match
        if not node.board.is_solved:
            return node_id
        return None
