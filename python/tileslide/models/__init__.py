from tileslide.models.board import Coordinate, Direction, PuzzleBoard

__all__ = ["Coordinate", "Direction", "PuzzleBoard"]
