from tileslide.engine.nesting.tree import ROOT, BoardNode, BoardTree

__all__ = ["ROOT", "BoardNode", "BoardTree"]
