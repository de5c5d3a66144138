from tileslide.engine.gamestate.state import GameState

__all__ = ["GameState"]
