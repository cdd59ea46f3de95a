from .greedy import GreedyLineSplitter

__all__ = ["GreedyLineSplitter"]
