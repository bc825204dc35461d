"""Shared test fixtures."""

from typing import Iterable, Tuple

import pytest

from wayfinder.core.graph import RecordingObserver, WeightedGraph


def build_graph(
    vertices: Iterable[str],
    edges: Iterable[Tuple[str, str, int]],
    **kwargs,
) -> WeightedGraph[str]:
    """Helper function to create a graph from vertices and (from, to, weight) edges."""
    graph: WeightedGraph[str] = WeightedGraph(**kwargs)
    for vertex in vertices:
        graph.insert_vertex(vertex)
    for from_vertex, to_vertex, weight in edges:
        graph.insert_edge(from_vertex, to_vertex, weight)
    return graph


@pytest.fixture
def recorder() -> RecordingObserver:
    """Fixture providing an observer that records every event."""
    return RecordingObserver()


@pytest.fixture
def diamond_graph() -> WeightedGraph[str]:
    """Two routes from A to D: A->B->D costs 2, A->C->D costs 5."""
    return build_graph(
        "ABCD",
        [
            ("A", "B", 1),
            ("B", "D", 1),
            ("A", "C", 4),
            ("C", "D", 1),
        ],
    )


@pytest.fixture
def disconnected_graph() -> WeightedGraph[str]:
    """Two vertices and no edges."""
    return build_graph("AB", [])


@pytest.fixture
def complex_graph() -> WeightedGraph[str]:
    """Create a complex test graph with cycles and multiple paths."""
    return build_graph(
        "ABCDE",
        [
            ("A", "B", 1),
            ("B", "C", 2),
            ("C", "D", 1),
            ("D", "E", 3),
            ("A", "C", 5),
            ("B", "D", 2),
            ("C", "E", 4),
            ("E", "A", 6),  # Creates a cycle
            ("D", "B", 2),  # Creates another cycle
            ("E", "C", 3),  # Creates more complex paths
        ],
    )


@pytest.fixture
def graph_factory():
    """Fixture providing the build_graph helper."""
    return build_graph
