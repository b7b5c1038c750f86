"""
Strategies Package - Concrete strategy implementations.

Import this module to register all built-in strategies.
"""

from .dfs import DepthFirstStrategy, SearchSession
from .greedy import GreedyStrategy

__all__ = [
    "DepthFirstStrategy",
    "SearchSession",
    "GreedyStrategy",
]
