"""
Core graph data structure with an adjacency mapping representation.

This module provides the BaseGraph class that stores a directed, weighted graph
as a mapping from each vertex to its outgoing neighbors and edge weights.
Vertices must be inserted before any edge touches them, and every weight is a
non-negative integer.

The implementation is pure, focusing only on graph storage without side
concerns like observers or algorithms, which are handled by separate modules.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Generic, Iterator, List, Optional, Tuple

from ..exceptions import DuplicateVertexError, InvalidWeightError, UnknownVertexError
from ..types import V, Weight

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Edge(Generic[V]):
    """
    A directed, weighted edge between two vertices.

    Attributes:
        from_vertex: Source vertex
        to_vertex: Target vertex
        weight: Non-negative edge weight
    """

    from_vertex: V
    to_vertex: V
    weight: Weight


@dataclass
class BaseGraph(Generic[V]):
    """
    Pure graph data structure implementation using nested mappings.

    Each vertex maps to a dict of outgoing neighbor -> weight. Both levels keep
    insertion order, which is the order the algorithms see vertices and
    neighbors in.

    Attributes:
        _adjacency (Dict[V, Dict[V, Weight]]): Outgoing adjacency per vertex
        _edge_count (int): Total number of directed edges
    """

    _adjacency: Dict[V, Dict[V, Weight]] = field(default_factory=dict)
    _edge_count: int = 0

    def insert_vertex(self, vertex: V) -> None:
        """
        Add a vertex with no outgoing edges.

        Args:
            vertex: The vertex to add

        Raises:
            DuplicateVertexError: If the vertex is already in the graph
        """
        if vertex in self._adjacency:
            raise DuplicateVertexError(vertex)
        self._adjacency[vertex] = {}
        logger.debug("Inserted vertex %r", vertex)

    def has_vertex(self, vertex: V) -> bool:
        """
        Check if a vertex exists in the graph.

        Args:
            vertex: The vertex to check

        Returns:
            bool: True if the vertex exists, False otherwise
        """
        return vertex in self._adjacency

    def insert_edge(self, from_vertex: V, to_vertex: V, weight: Weight) -> None:
        """
        Set the weight of the directed edge from_vertex -> to_vertex.

        Inserting the same pair again silently replaces the previous weight.

        Args:
            from_vertex: Source vertex
            to_vertex: Target vertex
            weight: Non-negative integer weight

        Raises:
            TypeError: If the weight is not an integer
            InvalidWeightError: If the weight is negative
            UnknownVertexError: If either vertex is not in the graph
        """
        if isinstance(weight, bool) or not isinstance(weight, int):
            raise TypeError("weight must be an integer")
        if weight < 0:
            raise InvalidWeightError(weight)
        self._require_vertex(from_vertex)
        self._require_vertex(to_vertex)

        neighbors = self._adjacency[from_vertex]
        if to_vertex not in neighbors:
            self._edge_count += 1
        neighbors[to_vertex] = weight
        logger.debug("Set edge %r -> %r with weight %d", from_vertex, to_vertex, weight)

    def weight_of(self, from_vertex: V, to_vertex: V) -> Optional[Weight]:
        """
        Get the weight of the edge between two vertices.

        Args:
            from_vertex: Source vertex
            to_vertex: Target vertex

        Returns:
            Optional[Weight]: The edge weight, or None if there is no edge

        Raises:
            UnknownVertexError: If either vertex is not in the graph
        """
        self._require_vertex(from_vertex)
        self._require_vertex(to_vertex)
        return self._adjacency[from_vertex].get(to_vertex)

    def has_edge(self, from_vertex: V, to_vertex: V) -> bool:
        """Check if an edge exists between two vertices."""
        return to_vertex in self._adjacency.get(from_vertex, {})

    def get_neighbors(self, vertex: V) -> List[V]:
        """
        Get the outgoing neighbors of a vertex.

        Args:
            vertex: The vertex to get neighbors for

        Returns:
            List[V]: Neighbors in edge insertion order

        Raises:
            UnknownVertexError: If the vertex is not in the graph
        """
        self._require_vertex(vertex)
        return list(self._adjacency[vertex])

    def iter_adjacency(self, vertex: V) -> Iterator[Tuple[V, Weight]]:
        """Iterate over (neighbor, weight) pairs of a vertex."""
        self._require_vertex(vertex)
        return iter(self._adjacency[vertex].items())

    def get_vertices(self) -> List[V]:
        """Get all vertices in insertion order."""
        return list(self._adjacency)

    def get_edges(self) -> Iterator[Edge[V]]:
        """
        Get all edges in the graph.

        Returns:
            Iterator[Edge[V]]: Edges grouped by source vertex
        """
        for from_vertex, neighbors in self._adjacency.items():
            for to_vertex, weight in neighbors.items():
                yield Edge(from_vertex, to_vertex, weight)

    def get_vertex_count(self) -> int:
        """Get the total number of vertices in the graph."""
        return len(self._adjacency)

    def get_edge_count(self) -> int:
        """Get the total number of directed edges in the graph."""
        return self._edge_count

    def _require_vertex(self, vertex: V) -> None:
        if vertex not in self._adjacency:
            raise UnknownVertexError(vertex)

    def __contains__(self, vertex: object) -> bool:
        return vertex in self._adjacency

    def __len__(self) -> int:
        return len(self._adjacency)
