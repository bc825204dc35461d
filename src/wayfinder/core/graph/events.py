"""
Graph algorithm event system.

This module provides the observer protocol through which the search algorithms
report progress, and the registry that delivers those notifications.

Delivery is synchronous and in registration order. There is no isolation
between observers: an exception raised by one observer aborts delivery of the
current event to the remaining observers and propagates to the caller of the
algorithm.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Generic, List, Protocol, Sequence

from ..types import V

logger = logging.getLogger(__name__)


class AlgorithmEvent(Enum):
    """Events emitted by the graph algorithms, valued by observer method name."""

    BFS_STARTED = "on_bfs_started"
    DFS_STARTED = "on_dfs_started"
    VISITED = "on_visit"
    SEARCH_CONCLUDED = "on_search_concluded"
    DIJKSTRA_STARTED = "on_dijkstra_started"
    VERTEX_FINALIZED = "on_vertex_finalized"
    PATH_COMPUTED = "on_path_computed"


class GraphAlgorithmObserver(Protocol[V]):
    """Protocol for objects that listen to graph algorithm progress."""

    def on_bfs_started(self) -> None:
        """Called once before a breadth-first search visits any vertex."""
        ...

    def on_dfs_started(self) -> None:
        """Called once before a depth-first search visits any vertex."""
        ...

    def on_visit(self, vertex: V) -> None:
        """
        Called just after a search visits a vertex.

        Args:
            vertex: The vertex being visited
        """
        ...

    def on_search_concluded(self) -> None:
        """Called once after a search visits its target. Never called otherwise."""
        ...

    def on_dijkstra_started(self) -> None:
        """Called once before the shortest-path computation finalizes any vertex."""
        ...

    def on_vertex_finalized(self, vertex: V, cost: float) -> None:
        """
        Called each time a vertex's shortest-path cost becomes final.

        Args:
            vertex: The vertex added to the finalized set
            cost: Optimal cost from the start vertex, or INFINITY if unreachable
        """
        ...

    def on_path_computed(self, path: List[V]) -> None:
        """
        Called once after every vertex is finalized.

        Args:
            path: Lowest-cost sequence of vertices, start first and end last
        """
        ...


@dataclass
class ObserverRegistry(Generic[V]):
    """
    Ordered collection of algorithm observers.

    Observers are kept in registration order. Registering the same observer
    twice is allowed and results in it being notified twice per event.

    Attributes:
        _observers (List[GraphAlgorithmObserver]): Registered observers
        log_events (bool): Log every dispatched event at DEBUG level
    """

    _observers: List[GraphAlgorithmObserver[V]] = field(default_factory=list)
    log_events: bool = False

    def register(self, observer: GraphAlgorithmObserver[V]) -> None:
        """
        Add an observer to the end of the notification order.

        Args:
            observer (GraphAlgorithmObserver): The observer to add
        """
        self._observers.append(observer)

    @property
    def observers(self) -> Sequence[GraphAlgorithmObserver[V]]:
        """Registered observers in notification order."""
        return tuple(self._observers)

    def snapshot(self) -> "ObserverRegistry[V]":
        """
        Copy of the registry holding the observers registered so far.

        Algorithms dispatch a whole run through a snapshot, so an observer
        registered mid-run only sees later runs.
        """
        return ObserverRegistry(list(self._observers), self.log_events)

    def notify(self, event: AlgorithmEvent, *payload: Any) -> None:
        """
        Deliver an event to every registered observer.

        Args:
            event (AlgorithmEvent): The event to deliver
            *payload: Arguments passed to the observer method
        """
        if self.log_events:
            logger.debug("Dispatching %s%r to %d observer(s)", event.name, payload, len(self))

        for observer in self._observers:
            getattr(observer, event.value)(*payload)

    def __len__(self) -> int:
        return len(self._observers)
