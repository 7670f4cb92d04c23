import math

import pytest

from subway_router.domain.errors import (
    GraphBuildError,
    InvalidDistanceError,
    SelfLoopError,
    ShapeError,
)
from subway_router.graph import Edge, FloatDistance, Graph, IntDistance


def F(value):
    return FloatDistance(value)


@pytest.fixture
def abc_graph():
    # A -> B (1), B -> A (2), C -> A (3)
    return Graph.build(
        ["A", "B", "C"],
        [
            [None, F(1), None],
            [F(2), None, None],
            [F(3), None, None],
        ],
    )


def test_build_creates_directed_edges(abc_graph):
    assert len(abc_graph) == 3
    assert abc_graph.edge_count == 3
    assert abc_graph.adjacent(0) == (Edge(0, 1, F(1)),)
    assert abc_graph.adjacent(1) == (Edge(1, 0, F(2)),)
    assert abc_graph.adjacent(2) == (Edge(2, 0, F(3)),)


def test_no_reverse_edge_is_implied(abc_graph):
    # C -> A exists but A -> C does not
    assert all(edge.target != 2 for edge in abc_graph.adjacent(0))
    assert abc_graph.incoming(2) == ()


def test_incoming_edges(abc_graph):
    sources = sorted(edge.source for edge in abc_graph.incoming(0))

    assert sources == [1, 2]
    assert abc_graph.incoming(1) == (Edge(0, 1, F(1)),)


def test_edges_iterates_every_edge_once(abc_graph):
    assert sorted((e.source, e.target) for e in abc_graph.edges()) == [
        (0, 1),
        (1, 0),
        (2, 0),
    ]


def test_nodes_carry_values(abc_graph):
    assert [node.value for node in abc_graph] == ["A", "B", "C"]
    assert abc_graph.value(1) == "B"
    assert abc_graph[2].index == 2


def test_distance_type_is_inferred(abc_graph):
    assert abc_graph.distance_type is FloatDistance
    assert abc_graph.zero() == F(0)


def test_edgeless_graph_defaults_to_float_distance():
    graph = Graph.build(["A", "B"], [[None, None], [None, None]])

    assert graph.edge_count == 0
    assert graph.zero() == F(0)


def test_empty_graph():
    graph = Graph.build([], [])

    assert len(graph) == 0
    assert list(graph.edges()) == []


@pytest.mark.parametrize(
    "matrix",
    [
        [[None, F(1)]],
        [[None, F(1)], [None]],
        [[None, F(1), None], [None, None, None]],
        [[None], [None]],
    ],
)
def test_non_square_matrix_raises_shape_error(matrix):
    with pytest.raises(ShapeError):
        Graph.build(["A", "B"], matrix)


def test_diagonal_entry_raises_self_loop_error():
    with pytest.raises(SelfLoopError) as excinfo:
        Graph.build(["A", "B"], [[None, F(1)], [F(1), F(0)]])

    assert excinfo.value.index == 1
    assert isinstance(excinfo.value, GraphBuildError)


def test_from_weights_wraps_raw_numbers():
    graph = Graph.from_weights(["A", "B"], [[None, 2.5], [1, None]])

    assert graph.adjacent(0) == (Edge(0, 1, F(2.5)),)
    assert graph.adjacent(1) == (Edge(1, 0, F(1.0)),)


def test_from_weights_rejects_nan():
    with pytest.raises(InvalidDistanceError):
        Graph.from_weights(["A", "B"], [[None, math.nan], [None, None]])


def test_from_weights_with_int_distances():
    graph = Graph.from_weights(["A", "B"], [[None, 3], [None, None]], IntDistance)

    assert graph.distance_type is IntDistance
    assert graph.adjacent(0)[0].distance == IntDistance(3)


def test_mixed_distance_types_are_rejected():
    with pytest.raises(InvalidDistanceError):
        Graph.build(["A", "B"], [[None, F(1)], [IntDistance(1), None]])


@pytest.mark.parametrize("raw", [math.nan, 1.0, 2])
def test_build_rejects_raw_numbers(raw):
    # raw weights must go through from_weights, which validates them
    with pytest.raises(InvalidDistanceError):
        Graph.build(["A", "B"], [[None, raw], [None, None]])


def test_build_rejects_raw_numbers_with_explicit_type():
    with pytest.raises(InvalidDistanceError):
        Graph.build(["A", "B"], [[None, 1.0], [None, None]], FloatDistance)


def test_build_rejects_a_type_without_zero():
    with pytest.raises(InvalidDistanceError):
        Graph.build(["A", "B"], [[None, 1.0], [None, None]], float)


def test_from_weights_rejects_a_type_without_zero():
    with pytest.raises(InvalidDistanceError):
        Graph.from_weights(["A", "B"], [[None, 1.0], [None, None]], float)


def test_equal_payloads_are_distinct_nodes():
    graph = Graph.build(["X", "X"], [[None, F(1)], [None, None]])

    assert graph[0] is not graph[1]
    assert graph[0] != graph[1]
    assert graph.adjacent(0)[0].target == 1


def test_find_node_returns_first_match(abc_graph):
    assert abc_graph.find_node(lambda value: value in ("B", "C")) == 1
    assert abc_graph.find_node(lambda value: value == "Z") is None


@pytest.mark.parametrize("index", [-1, 3, 100])
def test_unknown_node_raises_index_error(abc_graph, index):
    with pytest.raises(IndexError):
        abc_graph.node(index)
