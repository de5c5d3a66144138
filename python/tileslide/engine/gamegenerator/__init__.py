from tileslide.engine.gamegenerator.generator import (
    DEFAULT_SHUFFLE_FACTOR,
    SUB_SHUFFLE_MOVES,
    GameGenerator,
    default_shuffle_count,
)

__all__ = [
    "DEFAULT_SHUFFLE_FACTOR",
    "SUB_SHUFFLE_MOVES",
    "GameGenerator",
    "default_shuffle_count",
]
