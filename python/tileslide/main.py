"""Sliding tile puzzle command line.

Usage::

    tileslide shuffle -c 4 -r 4            # print a fully shuffled 4×4 board
    tileslide solve -c 3 -r 3 -m 20        # shuffle 20 moves, then solve
    tileslide solve -c 2 -r 2 --positions 0,1,3,2
    tileslide -v solve ...                 # with solver debug logging
"""

from __future__ import annotations

import logging
import random
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from tileslide.engine.gamegenerator import GameGenerator
from tileslide.engine.gamesolver import Solver, SolverError
from tileslide.frontend.cli.rich import render_board, render_solution
from tileslide.models.board import PuzzleBoard

MIN_SIZE = 1
MAX_SIZE = 6

# Enough for every reachable 3×3 state (9!/2 = 181,440).
DEFAULT_MAX_STATES = 200_000

console = Console()
err_console = Console(stderr=True)

app = typer.Typer(add_completion=False, help="Sliding tile puzzle tools.")


# -- helpers ------------------------------------------------------------------


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def _parse_positions(raw: str) -> list[int]:
    try:
        return [int(part) for part in raw.replace(" ", "").split(",") if part]
    except ValueError:
        raise typer.BadParameter(
            f"expected comma-separated integers, got {raw!r}",
            param_hint="--positions",
        ) from None


def _build_board(
    columns: int,
    rows: int,
    empty: Optional[int],
    positions: Optional[str],
    moves: Optional[int],
    seed: Optional[int],
) -> PuzzleBoard:
    if positions is not None:
        try:
            return PuzzleBoard.from_positions(
                columns, rows, _parse_positions(positions), empty_ordinal=empty
            )
        except ValueError as exc:
            raise typer.BadParameter(str(exc), param_hint="--positions") from None
    rng = random.Random(seed) if seed is not None else None
    return GameGenerator.generate(columns, rows, empty, move_count=moves, rng=rng)


# -- CLI entry point ----------------------------------------------------------


@app.callback()
def main(
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Show debug logging.",
    ),
) -> None:
    """Sliding tile puzzle tools."""
    _configure_logging(verbose)


@app.command()
def shuffle(
    columns: int = typer.Option(
        4, "-c", "--columns", min=MIN_SIZE, max=MAX_SIZE, help="Grid columns.",
    ),
    rows: int = typer.Option(
        4, "-r", "--rows", min=MIN_SIZE, max=MAX_SIZE, help="Grid rows.",
    ),
    empty: Optional[int] = typer.Option(
        None, "--empty", min=0,
        help="Ordinal of the empty tile (default: last).",
    ),
    moves: Optional[int] = typer.Option(
        None, "-m", "--moves", min=0,
        help="Random moves to make (default: 10 per tile).",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed", help="Seed for a reproducible shuffle.",
    ),
) -> None:
    """Print a shuffled board."""
    try:
        board = _build_board(columns, rows, empty, None, moves, seed)
    except ValueError as exc:
        err_console.print(f"[red]{exc}[/red]")
        raise typer.Exit(code=1) from None

    console.print(render_board(board, title=f"{columns}×{rows}"))
    console.print(
        "positions: " + ",".join(str(p) for p in board.position_of_ordinal),
        highlight=False,
    )


@app.command()
def solve(
    columns: int = typer.Option(
        3, "-c", "--columns", min=MIN_SIZE, max=MAX_SIZE, help="Grid columns.",
    ),
    rows: int = typer.Option(
        3, "-r", "--rows", min=MIN_SIZE, max=MAX_SIZE, help="Grid rows.",
    ),
    empty: Optional[int] = typer.Option(
        None, "--empty", min=0,
        help="Ordinal of the empty tile (default: last).",
    ),
    positions: Optional[str] = typer.Option(
        None, "-p", "--positions",
        help="Comma-separated grid index of each ordinal. Omit to shuffle.",
    ),
    moves: int = typer.Option(
        20, "-m", "--moves", min=0,
        help="Random moves to make when no positions are given.",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed", help="Seed for a reproducible shuffle.",
    ),
    max_states: int = typer.Option(
        DEFAULT_MAX_STATES, "--max-states", min=1,
        help="Give up after visiting this many board states.",
    ),
) -> None:
    """Solve a board with breadth-first search and print the moves."""
    try:
        board = _build_board(columns, rows, empty, positions, moves, seed)
    except ValueError as exc:
        err_console.print(f"[red]{exc}[/red]")
        raise typer.Exit(code=1) from None

    console.print(render_board(board, title="Start"))

    try:
        solution = Solver.solve(board, max_states=max_states)
    except SolverError as exc:
        err_console.print(f"[bold red]{exc}[/bold red]")
        raise typer.Exit(code=1) from None

    console.print(render_solution(solution))
    if solution:
        board.apply_solution(solution)
        console.print(render_board(board, title="Solved"))


if __name__ == "__main__":
    app()
