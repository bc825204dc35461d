"""
Graph search algorithms: breadth-first, depth-first and shortest path.
"""

from .algorithms.search import BreadthFirstSearch, DepthFirstSearch, GraphSearch
from .algorithms.shortest_path import ShortestPathFinder
from .base import FifoFrontier, Frontier, GraphAlgorithm, LifoFrontier
from .path_models import INFINITY, SearchResult, ShortestPathResult

__all__ = [
    "INFINITY",
    "BreadthFirstSearch",
    "DepthFirstSearch",
    "FifoFrontier",
    "Frontier",
    "GraphAlgorithm",
    "GraphSearch",
    "LifoFrontier",
    "SearchResult",
    "ShortestPathFinder",
    "ShortestPathResult",
]
