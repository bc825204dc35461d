"""Breadth-first and depth-first search."""

import logging
from abc import abstractmethod
from typing import ClassVar, Set

from ...events import AlgorithmEvent
from ..base import FifoFrontier, Frontier, GraphAlgorithm, LifoFrontier
from ..path_models import SearchResult
from ....types import V

logger = logging.getLogger(__name__)


class GraphSearch(GraphAlgorithm[V]):
    """
    Search from a start vertex until a target vertex is visited.

    Subclasses choose the frontier discipline and the start event. Every
    removed candidate that has not been visited yet is reported with a visit
    event; visiting the target reports the conclusion event and stops the
    search immediately. If the frontier runs dry first, the search ends
    without a conclusion event and without raising.
    """

    started_event: ClassVar[AlgorithmEvent]

    @abstractmethod
    def make_frontier(self) -> Frontier[V]:
        """Create the empty frontier for one run."""

    def run(self, start: V, end: V) -> SearchResult[V]:
        """
        Search from start until end is visited.

        Args:
            start: Vertex to search from
            end: Vertex to search for

        Returns:
            SearchResult: Visit order and whether the target was reached

        Raises:
            UnknownVertexError: If start or end is not in the graph
            ConfigurationError: If neighbor_order cannot arrange the vertices
        """
        self.validate_vertices(start, end)
        self.arrange_vertices(self.config.neighbor_order)
        registry = self.registry.snapshot()
        result = SearchResult(start=start, target=end)
        registry.notify(self.started_event)

        visited: Set[V] = set()
        frontier = self.make_frontier()
        frontier.push(start)

        while frontier:
            candidate = frontier.pop()
            if candidate in visited:
                continue

            result.visited.append(candidate)
            registry.notify(AlgorithmEvent.VISITED, candidate)

            if candidate == end:
                result.concluded = True
                registry.notify(AlgorithmEvent.SEARCH_CONCLUDED)
                logger.debug(
                    "%s reached %r after %d visit(s)",
                    type(self).__name__,
                    end,
                    len(result.visited),
                )
                return result

            visited.add(candidate)
            for neighbor in self.config.neighbor_order.arrange(self.graph.get_neighbors(candidate)):
                if neighbor not in visited:
                    frontier.push(neighbor)

        logger.info("%s from %r never reached %r", type(self).__name__, start, end)
        return result


class BreadthFirstSearch(GraphSearch[V]):
    """Graph search with a first-in-first-out frontier."""

    started_event = AlgorithmEvent.BFS_STARTED

    def make_frontier(self) -> Frontier[V]:
        return FifoFrontier()


class DepthFirstSearch(GraphSearch[V]):
    """Graph search with a last-in-first-out frontier."""

    started_event = AlgorithmEvent.DFS_STARTED

    def make_frontier(self) -> Frontier[V]:
        return LifoFrontier()
