"""Build weighted graphs from rectangular mazes."""

from .graph import Juncture, Maze, MazeGraph, iter_junctures

__all__ = ["Juncture", "Maze", "MazeGraph", "iter_junctures"]
