"""
Data models for graph search results.

This module provides the values returned by the search algorithms alongside the
events they emit:
- SearchResult: Outcome of a breadth-first or depth-first search
- ShortestPathResult: Costs, predecessors and path from a shortest-path run

Example:
    >>> result = graph.do_dijkstra("A", "D")
    >>> result.path
    ['A', 'B', 'D']
    >>> result.cost
    2
"""

import math
from dataclasses import dataclass, field
from typing import Dict, Generic, List, Optional

from ...types import V

# Tentative cost of a vertex no path has reached yet.
INFINITY = math.inf


@dataclass
class SearchResult(Generic[V]):
    """
    Outcome of a breadth-first or depth-first search.

    Attributes:
        start: Vertex the search started from
        target: Vertex the search was looking for
        visited: Vertices visited, in visit order
        concluded: True if the target was visited
    """

    start: V
    target: V
    visited: List[V] = field(default_factory=list)
    concluded: bool = False


@dataclass
class ShortestPathResult(Generic[V]):
    """
    Outcome of a shortest-path computation.

    Attributes:
        start: Vertex the computation started from
        end: Vertex the path leads to
        path: Lowest-cost vertex sequence from start to end
        costs: Final cost of every vertex, INFINITY where unreachable
        predecessors: Previous vertex on the best path to each reached vertex.
            The start vertex and unreachable vertices have no entry.
        finalized: Vertices in the order they were finalized
    """

    start: V
    end: V
    path: List[V]
    costs: Dict[V, float]
    predecessors: Dict[V, V]
    finalized: List[V] = field(default_factory=list)

    @property
    def cost(self) -> float:
        """Total weight of the path."""
        return self.costs[self.end]

    def cost_to(self, vertex: V) -> float:
        """Final cost of any vertex."""
        return self.costs[vertex]

    def predecessor_of(self, vertex: V) -> Optional[V]:
        """Previous vertex on the best path to vertex, or None."""
        return self.predecessors.get(vertex)
