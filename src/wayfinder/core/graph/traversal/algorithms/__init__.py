"""Graph search algorithm implementations."""

from .search import BreadthFirstSearch, DepthFirstSearch, GraphSearch
from .shortest_path import ShortestPathFinder

__all__ = [
    "BreadthFirstSearch",
    "DepthFirstSearch",
    "GraphSearch",
    "ShortestPathFinder",
]
