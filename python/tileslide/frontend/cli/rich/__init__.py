from tileslide.frontend.cli.rich.render import render_board, render_solution

__all__ = ["render_board", "render_solution"]
