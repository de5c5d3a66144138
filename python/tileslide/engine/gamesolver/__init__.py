from tileslide.engine.gamesolver.solver import (
    SearchLimitExceeded,
    Solver,
    SolverError,
    UnsolvableBoardError,
)

__all__ = ["SearchLimitExceeded", "Solver", "SolverError", "UnsolvableBoardError"]
