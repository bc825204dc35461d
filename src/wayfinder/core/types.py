"""
Core type definitions and protocols.

This module provides the vertex type variable and the read-only graph protocol
that the search algorithms are written against.
"""

from typing import Hashable, Iterator, List, Optional, Protocol, Tuple, TypeVar

# Vertices are opaque identities compared by equality and hashed as mapping keys.
V = TypeVar("V", bound=Hashable)

# Edge weights and path costs. Costs may also be INFINITY.
Weight = int


class GraphProtocol(Protocol[V]):
    """Protocol defining the read-only graph operations used by the algorithms."""

    def has_vertex(self, vertex: V) -> bool:
        """Check if a vertex exists in the graph."""
        ...

    def get_vertices(self) -> List[V]:
        """Get all vertices in insertion order."""
        ...

    def get_neighbors(self, vertex: V) -> List[V]:
        """Get outgoing neighbors of a vertex in insertion order."""
        ...

    def weight_of(self, from_vertex: V, to_vertex: V) -> Optional[Weight]:
        """Get the weight of an edge, or None if there is no edge."""
        ...

    def iter_adjacency(self, vertex: V) -> Iterator[Tuple[V, Weight]]:
        """Iterate over (neighbor, weight) pairs of a vertex."""
        ...
