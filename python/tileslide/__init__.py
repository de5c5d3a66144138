"""Sliding tile puzzle model, breadth-first solver and command line tools."""

from tileslide.models import Coordinate, Direction, PuzzleBoard

__all__ = ["Coordinate", "Direction", "PuzzleBoard"]
__version__ = "0.1.0"
