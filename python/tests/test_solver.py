"""Solver test suite.

Boards are built by shuffling from the solved state with seeded RNGs, so
the number of shuffle moves is an upper bound on the optimal solution.
Every returned move list is replayed through the real game engine to
verify correctness.
"""

from __future__ import annotations

import itertools
import random

import pytest

from tileslide.engine.gameplay.game import GamePlay
from tileslide.engine.gamesolver.solver import (
    SearchLimitExceeded,
    Solver,
    UnsolvableBoardError,
)
from tileslide.models.board import PuzzleBoard

SHAPES = [(2, 2), (3, 2), (2, 3), (3, 3), (4, 2)]
SEEDS = range(4)


# -- helpers ------------------------------------------------------------------


def _shuffled(columns: int, rows: int, moves: int, seed: int) -> PuzzleBoard:
    board = PuzzleBoard(columns=columns, rows=rows)
    board.shuffle(moves, rng=random.Random(seed))
    return board


def _ids(case: tuple[int, int, int]) -> str:
    columns, rows, seed = case
    return f"{columns}x{rows}-seed{seed}"


def _assert_solve(board: PuzzleBoard, max_length: int) -> list[int]:
    """Solve the board and verify the returned moves reach the goal state."""
    before = board.copy()

    moves = Solver.solve(board)

    # ---- move-list sanity ---------------------------------------------------
    assert isinstance(moves, list), "solve() must return a list of ordinals"
    assert board == before, "solve() must not modify its input"
    assert len(moves) <= max_length
    assert all(m != board.empty_ordinal for m in moves)

    # ---- replay one cell at a time through the game engine ------------------
    game = GamePlay.from_board(board.copy())
    for i, ordinal in enumerate(moves):
        assert not game.is_won, f"Board solved early, at move {i}"
        assert game.move_tile(ordinal), f"Move {i} (tile {ordinal}) was invalid"

    assert game.is_won, f"Board not solved after {len(moves)} moves"
    assert game.state.moves == len(moves)
    return moves


# -- tests --------------------------------------------------------------------


@pytest.mark.parametrize(
    "case",
    [(c, r, seed) for (c, r) in SHAPES for seed in SEEDS],
    ids=_ids,
)
def test_solve_shuffled_boards(case: tuple[int, int, int]) -> None:
    columns, rows, seed = case
    moves = 10
    board = _shuffled(columns, rows, moves, seed)
    _assert_solve(board, max_length=moves)


def test_single_move_board_solves_with_that_tile(one_move_3x3: PuzzleBoard) -> None:
    assert Solver.solve(one_move_3x3) == [5]


def test_solved_board_needs_no_moves(solved_3x3: PuzzleBoard) -> None:
    assert Solver.solve(solved_3x3) == []
    assert Solver.hint(solved_3x3) is None


def test_solution_is_optimal(corner_3x3: PuzzleBoard) -> None:
    # The hole is four cells from home, so four moves is the minimum.
    moves = Solver.solve(corner_3x3)
    assert moves == [0, 1, 4, 5]
    replay = corner_3x3.copy()
    replay.apply_solution(moves)
    assert replay.is_solved


@pytest.mark.parametrize("moves", [1, 2])
def test_2x2_solution_length_matches_shuffle(moves: int) -> None:
    for seed in range(10):
        board = _shuffled(2, 2, moves, seed)
        assert len(Solver.solve(board)) == moves


def test_hint_is_first_solution_step(corner_3x3: PuzzleBoard) -> None:
    assert Solver.hint(corner_3x3) == Solver.solve(corner_3x3)[0]


# -- unsolvable boards --------------------------------------------------------


def test_odd_permutation_is_rejected() -> None:
    board = PuzzleBoard.from_positions(2, 2, [1, 0, 2, 3])
    assert not Solver.is_solvable(board)
    with pytest.raises(UnsolvableBoardError):
        Solver.solve(board)


def test_exhausted_search_raises() -> None:
    board = PuzzleBoard.from_positions(3, 2, [1, 0, 2, 3, 4, 5])
    with pytest.raises(UnsolvableBoardError, match="Exhausted"):
        Solver.solve(board, check_parity=False)


@pytest.mark.parametrize("positions", list(itertools.permutations(range(4))))
def test_parity_check_agrees_with_search_2x2(positions: tuple[int, ...]) -> None:
    board = PuzzleBoard.from_positions(2, 2, positions)
    _assert_parity_matches_search(board)


@pytest.mark.parametrize(
    "positions", list(itertools.permutations(range(6)))[::23]
)
def test_parity_check_agrees_with_search_3x2(positions: tuple[int, ...]) -> None:
    board = PuzzleBoard.from_positions(3, 2, positions, empty_ordinal=2)
    _assert_parity_matches_search(board)


@pytest.mark.parametrize("positions", list(itertools.permutations(range(3))))
def test_parity_check_agrees_with_search_single_row(
    positions: tuple[int, ...],
) -> None:
    board = PuzzleBoard.from_positions(3, 1, positions, empty_ordinal=1)
    _assert_parity_matches_search(board)


def _assert_parity_matches_search(board: PuzzleBoard) -> None:
    try:
        moves = Solver.solve(board, check_parity=False)
    except UnsolvableBoardError:
        solvable = False
    else:
        solvable = True
        replay = board.copy()
        replay.apply_solution(moves)
        assert replay.is_solved
    assert Solver.is_solvable(board) is solvable


# -- search limits ------------------------------------------------------------


def test_search_limit(corner_3x3: PuzzleBoard) -> None:
    with pytest.raises(SearchLimitExceeded) as excinfo:
        Solver.solve(corner_3x3, max_states=3)
    assert excinfo.value.max_states == 3


def test_generous_search_limit_still_solves(corner_3x3: PuzzleBoard) -> None:
    assert len(Solver.solve(corner_3x3, max_states=10_000)) == 4
