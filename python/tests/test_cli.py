"""Command line tests."""

from __future__ import annotations

import pytest
from typer.testing import CliRunner

from tileslide.main import app

runner = CliRunner()


def test_solve_one_move_board() -> None:
    result = runner.invoke(
        app, ["solve", "-c", "3", "-r", "3", "--positions", "0,1,2,3,4,8,6,7,5"]
    )
    assert result.exit_code == 0, result.output
    assert "Solved in 1 moves" in result.output


def test_solve_shuffled_board_with_seed() -> None:
    result = runner.invoke(
        app, ["-v", "solve", "-c", "2", "-r", "3", "-m", "6", "--seed", "3"]
    )
    assert result.exit_code == 0, result.output
    assert "Solved" in result.output


def test_solve_already_solved_board() -> None:
    result = runner.invoke(app, ["solve", "-c", "2", "-r", "2", "-p", "0,1,2,3"])
    assert result.exit_code == 0
    assert "Already solved!" in result.output


def test_unsolvable_board_exits_with_error() -> None:
    result = runner.invoke(app, ["solve", "-c", "2", "-r", "2", "-p", "1,0,2,3"])
    assert result.exit_code == 1


def test_search_limit_exits_with_error() -> None:
    result = runner.invoke(
        app,
        ["solve", "-c", "3", "-r", "3", "-p", "1,4,2,3,5,8,6,7,0", "--max-states", "2"],
    )
    assert result.exit_code == 1


def test_malformed_positions_are_a_usage_error() -> None:
    result = runner.invoke(app, ["solve", "-c", "2", "-r", "2", "-p", "a,b,c,d"])
    assert result.exit_code == 2
    result = runner.invoke(app, ["solve", "-c", "2", "-r", "2", "-p", "0,0,1,2"])
    assert result.exit_code == 2


def test_bad_empty_ordinal_exits_with_error() -> None:
    result = runner.invoke(app, ["shuffle", "-c", "2", "-r", "2", "--empty", "7"])
    assert result.exit_code == 1


def test_shuffle_prints_positions() -> None:
    result = runner.invoke(app, ["shuffle", "-c", "3", "-r", "2", "--seed", "1"])
    assert result.exit_code == 0, result.output
    assert "positions:" in result.output


def test_size_is_bounded() -> None:
    result = runner.invoke(app, ["shuffle", "-c", "9"])
    assert result.exit_code == 2


@pytest.mark.timeout(120)
def test_default_state_limit_bounds_large_search() -> None:
    result = runner.invoke(
        app, ["solve", "-c", "4", "-r", "4", "-m", "40", "--seed", "1"]
    )
    # Either solved within the default limit or gave up cleanly.
    assert result.exit_code in (0, 1), result.output
