"""
Tests for the Dijkstra shortest path computation.
"""

import pytest

from wayfinder.core.exceptions import (
    ConfigurationError,
    UnknownVertexError,
    UnreachableTargetError,
)
from wayfinder.core.graph import AlgorithmEvent, RecordingObserver, WeightedGraph
from wayfinder.core.graph.traversal import INFINITY, ShortestPathFinder


def brute_force_costs(graph, start):
    """Minimum path weight from start to every vertex, by enumerating simple paths."""
    best = {vertex: INFINITY for vertex in graph.get_vertices()}

    def walk(vertex, cost, seen):
        best[vertex] = min(best[vertex], cost)
        for neighbor, weight in graph.iter_adjacency(vertex):
            if neighbor not in seen:
                walk(neighbor, cost + weight, seen | {neighbor})

    walk(start, 0, {start})
    return best


def path_weight(graph, path):
    """Sum of edge weights along a vertex sequence."""
    return sum(graph.weight_of(a, b) for a, b in zip(path, path[1:]))


def test_dijkstra_event_sequence(diamond_graph, recorder):
    """Test the finalization order, costs and reported path."""
    diamond_graph.add_observer(recorder)

    diamond_graph.do_dijkstra("A", "D")

    assert recorder.records == [
        (AlgorithmEvent.DIJKSTRA_STARTED, ()),
        (AlgorithmEvent.VERTEX_FINALIZED, ("A", 0)),
        (AlgorithmEvent.VERTEX_FINALIZED, ("B", 1)),
        (AlgorithmEvent.VERTEX_FINALIZED, ("D", 2)),
        (AlgorithmEvent.VERTEX_FINALIZED, ("C", 4)),
        (AlgorithmEvent.PATH_COMPUTED, (["A", "B", "D"],)),
    ]


def test_dijkstra_result(diamond_graph):
    """Test the returned costs, predecessors and path."""
    result = diamond_graph.do_dijkstra("A", "D")

    assert result.path == ["A", "B", "D"]
    assert result.cost == 2
    assert result.costs == {"A": 0, "B": 1, "C": 4, "D": 2}
    assert result.predecessor_of("D") == "B"
    assert result.predecessor_of("A") is None
    assert result.finalized == ["A", "B", "D", "C"]


def test_dijkstra_finalizes_every_vertex(complex_graph, recorder):
    """Test the computation continues past the end vertex."""
    complex_graph.add_observer(recorder)

    complex_graph.do_dijkstra("A", "B")

    assert sorted(vertex for vertex, _ in recorder.finalized) == ["A", "B", "C", "D", "E"]
    assert recorder.events[-1] is AlgorithmEvent.PATH_COMPUTED
    assert recorder.events.count(AlgorithmEvent.PATH_COMPUTED) == 1


def test_dijkstra_costs_non_decreasing(complex_graph, recorder):
    """Test vertices are finalized in non-decreasing cost order."""
    complex_graph.add_observer(recorder)

    complex_graph.do_dijkstra("A", "E")

    costs = [cost for _, cost in recorder.finalized]
    assert costs == sorted(costs)


@pytest.mark.parametrize("start", list("ABCDE"))
def test_dijkstra_costs_are_optimal(complex_graph, recorder, start):
    """Test every finalized cost equals the true minimum path weight."""
    complex_graph.add_observer(recorder)

    complex_graph.do_dijkstra(start, start)

    assert dict(recorder.finalized) == brute_force_costs(complex_graph, start)


def test_dijkstra_complex_path(complex_graph):
    """Test the path on a graph with cycles and competing routes."""
    result = complex_graph.do_dijkstra("A", "E")

    assert result.path == ["A", "B", "D", "E"]
    assert result.cost == 6
    assert result.finalized == ["A", "B", "C", "D", "E"]


@pytest.mark.parametrize("end", list("ABCDE"))
def test_path_weight_matches_cost(complex_graph, end):
    """Test the path runs from start to end and its weight equals the end's cost."""
    result = complex_graph.do_dijkstra("A", end)

    assert result.path[0] == "A"
    assert result.path[-1] == end
    assert path_weight(complex_graph, result.path) == result.cost


def test_dijkstra_start_is_end(diamond_graph, recorder):
    """Test the path from a vertex to itself."""
    diamond_graph.add_observer(recorder)

    result = diamond_graph.do_dijkstra("B", "B")

    assert result.path == ["B"]
    assert result.cost == 0
    assert recorder.path == ["B"]


def test_dijkstra_unreachable_end(disconnected_graph, recorder):
    """Test an unreachable end raises after every vertex is finalized."""
    disconnected_graph.add_observer(recorder)

    with pytest.raises(UnreachableTargetError) as exc_info:
        disconnected_graph.do_dijkstra("A", "B")

    assert exc_info.value.start == "A"
    assert exc_info.value.end == "B"
    assert recorder.records == [
        (AlgorithmEvent.DIJKSTRA_STARTED, ()),
        (AlgorithmEvent.VERTEX_FINALIZED, ("A", 0)),
        (AlgorithmEvent.VERTEX_FINALIZED, ("B", INFINITY)),
    ]


def test_dijkstra_unreachable_end_against_edge_direction(diamond_graph):
    """Test an end only reachable by walking edges backwards is unreachable."""
    with pytest.raises(UnreachableTargetError):
        diamond_graph.do_dijkstra("D", "A")


def test_unreachable_vertices_finalized_last(graph_factory, recorder):
    """Test vertices no path reaches are finalized with INFINITY after the rest."""
    graph = graph_factory("XABY", [("A", "B", 3)])
    graph.add_observer(recorder)

    result = graph.do_dijkstra("A", "B")

    assert recorder.finalized == [("A", 0), ("B", 3), ("X", INFINITY), ("Y", INFINITY)]
    assert result.cost_to("X") == INFINITY
    assert result.path == ["A", "B"]


def test_zero_weight_edges(graph_factory):
    """Test zero weight edges are followed."""
    graph = graph_factory("ABC", [("A", "B", 0), ("B", "C", 0), ("A", "C", 1)])

    result = graph.do_dijkstra("A", "C")

    assert result.path == ["A", "B", "C"]
    assert result.cost == 0


def test_relaxation_replaces_longer_route(graph_factory):
    """Test a later, cheaper route replaces an earlier tentative cost."""
    graph = graph_factory(
        "ABCD",
        [("A", "D", 10), ("A", "B", 1), ("B", "C", 1), ("C", "D", 1)],
    )

    result = graph.do_dijkstra("A", "D")

    assert result.path == ["A", "B", "C", "D"]
    assert result.cost == 3


def test_overwritten_edge_weight_is_used(graph_factory):
    """Test the latest weight of a reinserted edge is used."""
    graph = graph_factory("ABC", [("A", "B", 1), ("B", "C", 1), ("A", "C", 5)])
    graph.insert_edge("A", "C", 1)

    assert graph.do_dijkstra("A", "C").path == ["A", "C"]


def test_tie_break_insertion_order(graph_factory, recorder):
    """Test equal costs are finalized in vertex insertion order by default."""
    graph = graph_factory("SZY", [("S", "Z", 1), ("S", "Y", 1)])
    graph.add_observer(recorder)

    graph.do_dijkstra("S", "Y")

    assert recorder.finalized == [("S", 0), ("Z", 1), ("Y", 1)]


def test_tie_break_sorted(graph_factory, recorder):
    """Test sorted tie-breaking finalizes the smallest vertex first."""
    graph = graph_factory("SZY", [("S", "Z", 1), ("S", "Y", 1)], config={"tie_break": "sorted"})
    graph.add_observer(recorder)

    graph.do_dijkstra("S", "Y")

    assert recorder.finalized == [("S", 0), ("Y", 1), ("Z", 1)]


def test_equal_cost_paths_are_deterministic(graph_factory):
    """Test repeated runs pick the same path among equal-cost routes."""
    graph = graph_factory("ABCD", [("A", "B", 1), ("A", "C", 1), ("B", "D", 1), ("C", "D", 1)])

    paths = {tuple(graph.do_dijkstra("A", "D").path) for _ in range(5)}

    assert paths == {("A", "B", "D")}


def test_sorted_tie_break_requires_comparable_vertices(recorder):
    """Test sorted ordering on incomparable vertices fails before any event."""
    graph: WeightedGraph = WeightedGraph({"tie_break": "sorted"})
    graph.insert_vertex(1)
    graph.insert_vertex("a")
    graph.add_observer(recorder)

    with pytest.raises(ConfigurationError):
        graph.do_dijkstra(1, "a")

    assert recorder.records == []


@pytest.mark.parametrize("start,end", [("Z", "A"), ("A", "Z")])
def test_dijkstra_unknown_vertex(diamond_graph, recorder, start, end):
    """Test missing vertices are rejected before any event."""
    diamond_graph.add_observer(recorder)

    with pytest.raises(UnknownVertexError):
        diamond_graph.do_dijkstra(start, end)

    assert recorder.records == []


def test_finder_without_registry(diamond_graph):
    """Test the finder runs with its own empty registry."""
    result = ShortestPathFinder(diamond_graph).run("A", "C")

    assert result.path == ["A", "C"]
    assert result.cost == 4


def test_maze_sized_grid():
    """Test a grid with uniform weights yields Manhattan distances."""
    graph: WeightedGraph[tuple] = WeightedGraph()
    size = 4
    cells = [(x, y) for x in range(size) for y in range(size)]
    for cell in cells:
        graph.insert_vertex(cell)
    for x, y in cells:
        for dx, dy in ((1, 0), (-1, 0), (0, 1), (0, -1)):
            neighbor = (x + dx, y + dy)
            if neighbor in graph:
                graph.insert_edge((x, y), neighbor, 1)
    recorder = RecordingObserver()
    graph.add_observer(recorder)

    result = graph.do_dijkstra((0, 0), (3, 3))

    assert result.cost == 6
    assert len(result.path) == 7
    assert all(cost == x + y for (x, y), cost in recorder.finalized)
