"""Dijkstra shortest path computation."""

import logging
from heapq import heapify, heappop, heappush
from typing import Dict, List, Set, Tuple

from wayfinder.core.exceptions import UnreachableTargetError
from ...events import AlgorithmEvent
from ..base import GraphAlgorithm
from ..path_models import INFINITY, ShortestPathResult
from ....types import V

logger = logging.getLogger(__name__)


class ShortestPathFinder(GraphAlgorithm[V]):
    """
    Label-setting shortest path computation over non-negative weights.

    Every vertex of the graph is finalized, in non-decreasing cost order, even
    after the end vertex has been reached. Vertices no path reaches are
    finalized last with cost INFINITY. Among vertices with equal tentative
    cost, the one that comes first in the configured tie-break order is
    finalized first.
    """

    def run(self, start: V, end: V) -> ShortestPathResult[V]:
        """
        Compute shortest paths from start and the lowest-cost path to end.

        Args:
            start: Vertex to measure costs from
            end: Vertex whose path is reconstructed and reported

        Returns:
            ShortestPathResult: Final costs, predecessors and the path to end

        Raises:
            UnknownVertexError: If start or end is not in the graph
            UnreachableTargetError: If no path leads from start to end
            ConfigurationError: If tie_break cannot arrange the vertices
        """
        self.validate_vertices(start, end)
        order = self.arrange_vertices(self.config.tie_break)
        registry = self.registry.snapshot()
        registry.notify(AlgorithmEvent.DIJKSTRA_STARTED)

        rank: Dict[V, int] = {vertex: i for i, vertex in enumerate(order)}

        costs: Dict[V, float] = {vertex: INFINITY for vertex in order}
        costs[start] = 0
        predecessors: Dict[V, V] = {}
        finalized: Set[V] = set()
        finalized_order: List[V] = []

        # Entries are (cost, rank, vertex). Stale entries for already
        # finalized vertices are skipped when popped.
        queue: List[Tuple[float, int, V]] = [(costs[vertex], rank[vertex], vertex) for vertex in order]
        heapify(queue)

        while queue:
            cost, _, vertex = heappop(queue)
            if vertex in finalized or cost > costs[vertex]:
                continue

            finalized.add(vertex)
            finalized_order.append(vertex)
            registry.notify(AlgorithmEvent.VERTEX_FINALIZED, vertex, cost)

            for neighbor, weight in self.graph.iter_adjacency(vertex):
                if neighbor in finalized:
                    continue
                new_cost = cost + weight
                if new_cost < costs[neighbor]:
                    costs[neighbor] = new_cost
                    predecessors[neighbor] = vertex
                    heappush(queue, (new_cost, rank[neighbor], neighbor))

        path = self._reconstruct_path(start, end, predecessors)
        registry.notify(AlgorithmEvent.PATH_COMPUTED, list(path))
        logger.debug("Shortest path from %r to %r costs %s", start, end, costs[end])

        return ShortestPathResult(
            start=start,
            end=end,
            path=path,
            costs=costs,
            predecessors=predecessors,
            finalized=finalized_order,
        )

    def _reconstruct_path(self, start: V, end: V, predecessors: Dict[V, V]) -> List[V]:
        """Walk predecessors back from end to start and return the path start first."""
        path = [end]
        current = end
        while current != start:
            if current not in predecessors:
                logger.info("No path exists between %r and %r", start, end)
                raise UnreachableTargetError(start, end)
            current = predecessors[current]
            path.append(current)
        path.reverse()
        return path
