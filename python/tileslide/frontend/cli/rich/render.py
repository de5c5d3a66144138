"""Rich renderables for boards and solver output."""

from __future__ import annotations

from typing import Sequence

import rich.box
from rich.table import Table
from rich.text import Text

from tileslide.models.board import PuzzleBoard


def render_board(board: PuzzleBoard, title: str | None = None) -> Table:
    """Return a Rich Table representing the puzzle grid.

    Tiles show their ordinal; tiles already in their solved cell are green
    and the empty tile is a dim dot.
    """
    width = len(str(board.columns * board.rows - 1))
    table = Table(
        title=title,
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(board.columns):
        table.add_column(width=width + 1, justify="center")

    for row in board.tiles():
        cells: list[str] = []
        for ordinal in row:
            if ordinal == board.empty_ordinal:
                cells.append("[dim]·[/dim]")
            elif board.is_tile_correct(ordinal):
                cells.append(f"[bold green]{ordinal:>{width}}[/bold green]")
            else:
                cells.append(f"[bold white]{ordinal:>{width}}[/bold white]")
        table.add_row(*cells)

    return table


def render_solution(ordinals: Sequence[int]) -> Text:
    text = Text()
    if not ordinals:
        text.append("Already solved!", style="bold green")
        return text
    text.append(f"Solved in {len(ordinals)} moves: ", style="bold cyan")
    text.append(" → ".join(str(ordinal) for ordinal in ordinals), style="yellow")
    return text
