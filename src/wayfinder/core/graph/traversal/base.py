"""Base classes for graph search algorithms."""

from abc import ABC, abstractmethod
from collections import deque
from typing import Any, Deque, Generic, List, Optional

from wayfinder.core.config import GraphConfig, VertexOrder
from wayfinder.core.exceptions import UnknownVertexError
from ...types import GraphProtocol, V
from ..events import ObserverRegistry


class Frontier(ABC, Generic[V]):
    """
    Pending vertex candidates of a search.

    A frontier may hold the same vertex more than once; searches discard
    already visited vertices when they are removed, not when they are added.
    """

    @abstractmethod
    def push(self, vertex: V) -> None:
        """Add a candidate."""

    @abstractmethod
    def pop(self) -> V:
        """Remove and return the next candidate."""

    @abstractmethod
    def __len__(self) -> int:
        pass


class FifoFrontier(Frontier[V]):
    """First-in-first-out frontier used by breadth-first search."""

    def __init__(self) -> None:
        self._queue: Deque[V] = deque()

    def push(self, vertex: V) -> None:
        self._queue.append(vertex)

    def pop(self) -> V:
        return self._queue.popleft()

    def __len__(self) -> int:
        return len(self._queue)


class LifoFrontier(Frontier[V]):
    """Last-in-first-out frontier used by depth-first search."""

    def __init__(self) -> None:
        self._stack: List[V] = []

    def push(self, vertex: V) -> None:
        self._stack.append(vertex)

    def pop(self) -> V:
        return self._stack.pop()

    def __len__(self) -> int:
        return len(self._stack)


class GraphAlgorithm(ABC, Generic[V]):
    """
    Abstract base class for algorithms that run against a graph.

    Algorithms only read the graph. Progress is reported through the
    observer registry.
    """

    def __init__(
        self,
        graph: GraphProtocol[V],
        registry: Optional[ObserverRegistry[V]] = None,
        config: Optional[GraphConfig] = None,
    ):
        """Initialize algorithm with graph, observers and configuration."""
        self.graph = graph
        self.registry = registry if registry is not None else ObserverRegistry()
        self.config = config or GraphConfig()

    @abstractmethod
    def run(self, start: V, end: V) -> Any:
        """Run the algorithm from start towards end."""

    def validate_vertices(self, start: V, end: V) -> None:
        """Validate that vertices exist in graph."""
        if not self.graph.has_vertex(start):
            raise UnknownVertexError(start)
        if not self.graph.has_vertex(end):
            raise UnknownVertexError(end)

    def arrange_vertices(self, order: VertexOrder) -> List[V]:
        """
        Arrange every vertex of the graph in the given order.

        Called before the start event so an ordering the vertices cannot
        satisfy fails before observers hear anything.

        Raises:
            ConfigurationError: If the order requires comparing incomparable vertices
        """
        return order.arrange(self.graph.get_vertices())
