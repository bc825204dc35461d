"""
Maze to graph conversion.

A maze is a rectangular grid of junctures, each identified by its X and Y
coordinates with (0, 0) in the upper left corner. Every juncture becomes a
vertex. For every pair of adjacent junctures not separated by a wall, one
directed edge is added in each open direction, weighted by the maze.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterator, Protocol, Tuple, Union

from ..core.config import GraphConfig
from ..core.graph import WeightedGraph

logger = logging.getLogger(__name__)


@dataclass(frozen=True, order=True)
class Juncture:
    """
    A cell of a maze.

    Attributes:
        x (int): Column, growing to the right
        y (int): Row, growing downwards
    """

    x: int
    y: int

    def above(self) -> "Juncture":
        return Juncture(self.x, self.y - 1)

    def below(self) -> "Juncture":
        return Juncture(self.x, self.y + 1)

    def left(self) -> "Juncture":
        return Juncture(self.x - 1, self.y)

    def right(self) -> "Juncture":
        return Juncture(self.x + 1, self.y)


class Maze(Protocol):
    """Protocol for maze data sources consumed by MazeGraph."""

    def get_maze_width(self) -> int:
        """Number of junctures per row."""
        ...

    def get_maze_height(self) -> int:
        """Number of junctures per column."""
        ...

    def is_wall_above(self, juncture: Juncture) -> bool:
        ...

    def is_wall_below(self, juncture: Juncture) -> bool:
        ...

    def is_wall_to_left(self, juncture: Juncture) -> bool:
        ...

    def is_wall_to_right(self, juncture: Juncture) -> bool:
        ...

    def get_weight_above(self, juncture: Juncture) -> int:
        ...

    def get_weight_below(self, juncture: Juncture) -> int:
        ...

    def get_weight_to_left(self, juncture: Juncture) -> int:
        ...

    def get_weight_to_right(self, juncture: Juncture) -> int:
        ...


def iter_junctures(maze: Maze) -> Iterator[Juncture]:
    """Yield every juncture of a maze, column by column."""
    for x in range(maze.get_maze_width()):
        for y in range(maze.get_maze_height()):
            yield Juncture(x, y)


def _passages(
    maze: Maze,
) -> Tuple[Tuple[Callable[[Juncture], bool], Callable[[Juncture], int], Callable[[Juncture], Juncture]], ...]:
    return (
        (maze.is_wall_above, maze.get_weight_above, Juncture.above),
        (maze.is_wall_below, maze.get_weight_below, Juncture.below),
        (maze.is_wall_to_left, maze.get_weight_to_left, Juncture.left),
        (maze.is_wall_to_right, maze.get_weight_to_right, Juncture.right),
    )


class MazeGraph(WeightedGraph[Juncture]):
    """Weighted graph whose vertices are the junctures of a maze."""

    def __init__(
        self,
        maze: Maze,
        config: Union[GraphConfig, Dict[str, Any], str, None] = None,
    ):
        """
        Build the graph from a maze.

        Args:
            maze (Maze): Source of junctures, walls and weights
            config: Graph configuration, or any source accepted by load_config

        Raises:
            UnknownVertexError: If the maze reports an open passage leading
                outside the grid
            InvalidWeightError: If the maze reports a negative weight
        """
        super().__init__(config)
        self.maze = maze

        for juncture in iter_junctures(maze):
            self.insert_vertex(juncture)

        passages = _passages(maze)
        for juncture in iter_junctures(maze):
            for is_wall, get_weight, step in passages:
                if not is_wall(juncture):
                    self.insert_edge(juncture, step(juncture), get_weight(juncture))

        logger.debug(
            "Built maze graph with %d junctures and %d edges",
            self.get_vertex_count(),
            self.get_edge_count(),
        )
