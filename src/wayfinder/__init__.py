"""
Wayfinder - Directed Weighted Graphs and Observable Search Algorithms

This package provides a generic directed, weighted graph together with three
classical algorithms that report their progress to registered observers:

- Breadth-first search
- Depth-first search
- Dijkstra single-source shortest paths

It also includes an adapter that turns rectangular mazes into graphs.
"""

__version__ = "0.1.0"
__author__ = "Wayfinder Team"
__license__ = "See LICENSE file"

# Version compatibility check
import sys

if sys.version_info < (3, 9):
    raise RuntimeError("Wayfinder requires Python 3.9 or higher")

# Import commonly used components for easier access
from .core.config import GraphConfig, VertexOrder, load_config
from .core.exceptions import (
    DuplicateVertexError,
    GraphOperationError,
    InvalidWeightError,
    UnknownVertexError,
    UnreachableTargetError,
)
from .core.graph import RecordingObserver, WeightedGraph

__all__ = [
    "DuplicateVertexError",
    "GraphConfig",
    "GraphOperationError",
    "InvalidWeightError",
    "RecordingObserver",
    "UnknownVertexError",
    "UnreachableTargetError",
    "VertexOrder",
    "WeightedGraph",
    "load_config",
]
