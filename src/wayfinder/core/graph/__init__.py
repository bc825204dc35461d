"""
Graph module for the Wayfinder system.

This module provides a complete weighted graph implementation with support for:
- Directed, weighted edges stored as a per-vertex adjacency mapping
- Breadth-first and depth-first search towards a target vertex
- Dijkstra shortest paths with path reconstruction
- Observers notified synchronously as the algorithms progress

A graph is not thread-safe. Run at most one algorithm at a time against a graph
and do not insert vertices or edges while an algorithm is running; hosts that
share a graph between threads must hold their own lock around each call.
"""

from typing import Any, Dict, Generic, Iterator, List, Optional, Tuple, Union

from ..types import V, Weight
from .base import BaseGraph, Edge
from .events import (
    AlgorithmEvent,
    GraphAlgorithmObserver,
    ObserverRegistry,
)
from .observers import BaseObserver, LoggingObserver, RecordingObserver
from .traversal import (
    INFINITY,
    BreadthFirstSearch,
    DepthFirstSearch,
    SearchResult,
    ShortestPathFinder,
    ShortestPathResult,
)
from ..config import GraphConfig, load_config


class WeightedGraph(Generic[V]):
    """
    High-level graph interface combining all components.

    This class provides a unified interface to the graph system, integrating
    the base graph structure with the observer registry and the search
    algorithms.

    Example:
        >>> graph = WeightedGraph()
        >>> for vertex in "ABCD":
        ...     graph.insert_vertex(vertex)
        >>> graph.insert_edge("A", "B", 1)
        >>> graph.insert_edge("B", "D", 1)
        >>> graph.do_dijkstra("A", "D").path
        ['A', 'B', 'D']
    """

    def __init__(self, config: Union[GraphConfig, Dict[str, Any], str, None] = None):
        """
        Initialize the graph with its components.

        Args:
            config: Graph configuration, or any source accepted by load_config
        """
        self.config = load_config(config)
        self._base_graph: BaseGraph[V] = BaseGraph()
        self.registry: ObserverRegistry[V] = ObserverRegistry(log_events=self.config.log_events)

    def add_observer(self, observer: GraphAlgorithmObserver[V]) -> None:
        """Register an observer to be notified by every later algorithm run."""
        self.registry.register(observer)

    def insert_vertex(self, vertex: V) -> None:
        """Add a vertex. Raises DuplicateVertexError if it is already present."""
        self._base_graph.insert_vertex(vertex)

    def has_vertex(self, vertex: V) -> bool:
        """Check if a vertex exists in the graph."""
        return self._base_graph.has_vertex(vertex)

    def insert_edge(self, from_vertex: V, to_vertex: V, weight: Weight) -> None:
        """Add or overwrite the directed edge from_vertex -> to_vertex."""
        self._base_graph.insert_edge(from_vertex, to_vertex, weight)

    def weight_of(self, from_vertex: V, to_vertex: V) -> Optional[Weight]:
        """Get the edge weight, or None if the vertices are not connected."""
        return self._base_graph.weight_of(from_vertex, to_vertex)

    def has_edge(self, from_vertex: V, to_vertex: V) -> bool:
        """Check if an edge exists between two vertices."""
        return self._base_graph.has_edge(from_vertex, to_vertex)

    def get_neighbors(self, vertex: V) -> List[V]:
        """Get outgoing neighbors of a vertex."""
        return self._base_graph.get_neighbors(vertex)

    def iter_adjacency(self, vertex: V) -> Iterator[Tuple[V, Weight]]:
        """Iterate over (neighbor, weight) pairs of a vertex."""
        return self._base_graph.iter_adjacency(vertex)

    def get_vertices(self) -> List[V]:
        """Get all vertices in insertion order."""
        return self._base_graph.get_vertices()

    def get_edges(self) -> Iterator[Edge[V]]:
        """Get all edges in the graph."""
        return self._base_graph.get_edges()

    def get_vertex_count(self) -> int:
        """Get the total number of vertices in the graph."""
        return self._base_graph.get_vertex_count()

    def get_edge_count(self) -> int:
        """Get the total number of edges in the graph."""
        return self._base_graph.get_edge_count()

    def do_bfs(self, start: V, end: V) -> SearchResult[V]:
        """
        Breadth-first search from start, stopping once end is visited.

        Observers receive a start event, one visit event per visited vertex
        and, only if end is visited, a conclusion event right after its visit.

        Args:
            start: Vertex where the search begins
            end: The search stops just after this vertex is visited

        Returns:
            SearchResult: Visit order and whether end was reached
        """
        return BreadthFirstSearch(self._base_graph, self.registry, self.config).run(start, end)

    def do_dfs(self, start: V, end: V) -> SearchResult[V]:
        """
        Depth-first search from start, stopping once end is visited.

        Emits the same events as do_bfs, with a depth-first start event.

        Args:
            start: Vertex where the search begins
            end: The search stops just after this vertex is visited

        Returns:
            SearchResult: Visit order and whether end was reached
        """
        return DepthFirstSearch(self._base_graph, self.registry, self.config).run(start, end)

    def do_dijkstra(self, start: V, end: V) -> ShortestPathResult[V]:
        """
        Dijkstra's algorithm from start, reporting the lowest-cost path to end.

        The algorithm does not stop when end is reached; it finalizes every
        vertex first. Observers receive a start event, one finalization event
        per vertex with its optimal cost, and finally the path from start to end.

        Args:
            start: Vertex where the algorithm starts
            end: Vertex whose lowest-cost path is reported

        Returns:
            ShortestPathResult: Costs, predecessors and the path to end

        Raises:
            UnreachableTargetError: If end cannot be reached from start
        """
        return ShortestPathFinder(self._base_graph, self.registry, self.config).run(start, end)

    def __contains__(self, vertex: object) -> bool:
        return vertex in self._base_graph

    def __len__(self) -> int:
        return len(self._base_graph)


__all__ = [
    "INFINITY",
    "AlgorithmEvent",
    "BaseGraph",
    "BaseObserver",
    "Edge",
    "GraphAlgorithmObserver",
    "LoggingObserver",
    "ObserverRegistry",
    "RecordingObserver",
    "SearchResult",
    "ShortestPathResult",
    "WeightedGraph",
]
