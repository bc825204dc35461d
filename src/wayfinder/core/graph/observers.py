"""Ready-made graph algorithm observers."""

import logging
from dataclasses import dataclass, field
from typing import Any, Generic, List, Optional, Tuple

from ..types import V
from .events import AlgorithmEvent


class BaseObserver(Generic[V]):
    """Observer that ignores every event. Subclass and override what you need."""

    def on_bfs_started(self) -> None:
        pass

    def on_dfs_started(self) -> None:
        pass

    def on_visit(self, vertex: V) -> None:
        pass

    def on_search_concluded(self) -> None:
        pass

    def on_dijkstra_started(self) -> None:
        pass

    def on_vertex_finalized(self, vertex: V, cost: float) -> None:
        pass

    def on_path_computed(self, path: List[V]) -> None:
        pass


@dataclass
class RecordingObserver(BaseObserver[V]):
    """
    Observer that records every event in arrival order.

    Each record is an ``(AlgorithmEvent, payload)`` pair where payload is the
    tuple of arguments the event carried.

    Attributes:
        records (List[Tuple[AlgorithmEvent, Tuple[Any, ...]]]): Received events
    """

    records: List[Tuple[AlgorithmEvent, Tuple[Any, ...]]] = field(default_factory=list)

    def on_bfs_started(self) -> None:
        self.records.append((AlgorithmEvent.BFS_STARTED, ()))

    def on_dfs_started(self) -> None:
        self.records.append((AlgorithmEvent.DFS_STARTED, ()))

    def on_visit(self, vertex: V) -> None:
        self.records.append((AlgorithmEvent.VISITED, (vertex,)))

    def on_search_concluded(self) -> None:
        self.records.append((AlgorithmEvent.SEARCH_CONCLUDED, ()))

    def on_dijkstra_started(self) -> None:
        self.records.append((AlgorithmEvent.DIJKSTRA_STARTED, ()))

    def on_vertex_finalized(self, vertex: V, cost: float) -> None:
        self.records.append((AlgorithmEvent.VERTEX_FINALIZED, (vertex, cost)))

    def on_path_computed(self, path: List[V]) -> None:
        self.records.append((AlgorithmEvent.PATH_COMPUTED, (list(path),)))

    @property
    def events(self) -> List[AlgorithmEvent]:
        """Event types received, in order."""
        return [event for event, _ in self.records]

    @property
    def visited(self) -> List[V]:
        """Vertices reported by visit events, in order."""
        return [payload[0] for event, payload in self.records if event is AlgorithmEvent.VISITED]

    @property
    def finalized(self) -> List[Tuple[V, float]]:
        """(vertex, cost) pairs reported by finalization events, in order."""
        return [
            (payload[0], payload[1])
            for event, payload in self.records
            if event is AlgorithmEvent.VERTEX_FINALIZED
        ]

    @property
    def path(self) -> Optional[List[V]]:
        """Path from the last path event, if any."""
        for event, payload in reversed(self.records):
            if event is AlgorithmEvent.PATH_COMPUTED:
                return payload[0]
        return None

    def clear(self) -> None:
        """Forget all recorded events."""
        self.records.clear()


class LoggingObserver(BaseObserver[V]):
    """Observer that writes every event to a logger."""

    def __init__(self, logger: Optional[logging.Logger] = None, level: int = logging.INFO):
        """
        Initialize the observer.

        Args:
            logger (Optional[logging.Logger]): Logger to write to. Defaults to
                this module's logger.
            level (int): Level every event is logged at
        """
        self.logger = logger or logging.getLogger(__name__)
        self.level = level

    def on_bfs_started(self) -> None:
        self.logger.log(self.level, "Breadth-first search started")

    def on_dfs_started(self) -> None:
        self.logger.log(self.level, "Depth-first search started")

    def on_visit(self, vertex: V) -> None:
        self.logger.log(self.level, "Visited %r", vertex)

    def on_search_concluded(self) -> None:
        self.logger.log(self.level, "Search reached its target")

    def on_dijkstra_started(self) -> None:
        self.logger.log(self.level, "Shortest path computation started")

    def on_vertex_finalized(self, vertex: V, cost: float) -> None:
        self.logger.log(self.level, "Finalized %r with cost %s", vertex, cost)

    def on_path_computed(self, path: List[V]) -> None:
        self.logger.log(self.level, "Shortest path: %s", " -> ".join(repr(v) for v in path))
