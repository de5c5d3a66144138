"""Shared boards for the test suite."""

from __future__ import annotations

import random

import pytest

from tileslide.models.board import PuzzleBoard


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def solved_3x3() -> PuzzleBoard:
    return PuzzleBoard(columns=3, rows=3, empty_ordinal=8)


@pytest.fixture
def one_move_3x3(solved_3x3: PuzzleBoard) -> PuzzleBoard:
    """Solved 3×3 with tile 5 slid down into the hole."""
    solved_3x3.swap_with_empty(0, -1)
    return solved_3x3


@pytest.fixture
def corner_3x3(solved_3x3: PuzzleBoard) -> PuzzleBoard:
    """3×3 whose hole was walked to the top-left corner in four moves."""
    solved_3x3.slide_down()
    solved_3x3.slide_right()
    solved_3x3.slide_down()
    solved_3x3.slide_right()
    return solved_3x3
