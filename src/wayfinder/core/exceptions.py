"""
Custom exceptions for the weighted graph system.

This module defines the hierarchy of exceptions raised by the graph store and
the search algorithms. Every error is raised synchronously at the point of the
violating operation; nothing is retried or recovered internally.
"""

from typing import Any


class GraphOperationError(Exception):
    """
    Raised when graph operations fail.

    Base class for every error raised by the graph store and the algorithm
    engines, so callers can catch the whole family at once.

    Examples:
        * Duplicate vertex insertion
        * Edge operations on missing vertices
        * Unreachable shortest-path targets
    """

    def __str__(self) -> str:
        """Format graph operation error message."""
        return f"Graph Operation Error: {super().__str__()}"


class DuplicateVertexError(GraphOperationError):
    """
    Raised when inserting a vertex that is already in the graph.

    Attributes:
        vertex: The vertex that was inserted twice
    """

    def __init__(self, vertex: Any):
        super().__init__(f"Vertex {vertex!r} is already in the graph")
        self.vertex = vertex


class UnknownVertexError(GraphOperationError):
    """
    Raised when an operation references a vertex absent from the graph.

    Examples:
        * Edge insertion with a missing endpoint
        * Weight lookup between missing vertices
        * Search started from a missing vertex

    Attributes:
        vertex: The vertex that could not be found
    """

    def __init__(self, vertex: Any):
        super().__init__(f"Vertex {vertex!r} not found in the graph")
        self.vertex = vertex


class InvalidWeightError(GraphOperationError):
    """
    Raised when an edge insertion supplies a negative weight.

    Attributes:
        weight: The rejected weight
    """

    def __init__(self, weight: Any):
        super().__init__(f"Edge weight must be non-negative, got {weight!r}")
        self.weight = weight


class UnreachableTargetError(GraphOperationError):
    """
    Raised when a shortest path cannot connect the end vertex back to the start.

    The shortest-path engine finalizes every vertex before reconstructing the
    path, so this is raised after all finalization notifications and before
    the path notification.

    Attributes:
        start: Vertex the search started from
        end: Vertex that could not be reached
    """

    def __init__(self, start: Any, end: Any):
        super().__init__(f"No path exists between {start!r} and {end!r}")
        self.start = start
        self.end = end


class ConfigurationError(Exception):
    """
    Raised when configuration is invalid.

    Examples:
        * Unknown configuration keys
        * Invalid ordering values
        * Sorted ordering requested for vertices that cannot be compared
    """
