import math
import pytest
from pygraphforest.GraphElements import (
    GraphNode,
    GraphEdge,
    COLOR_WHITE,
    COLOR_BLACK,
)


def test_node_requires_label():
    with pytest.raises(TypeError):
        GraphNode(None)


def test_node_equality_and_hash_depend_on_label_only():
    a1 = GraphNode("a")
    a2 = GraphNode("a")
    a2.color = COLOR_BLACK
    a2.integer_distance = 7
    a2.previous = GraphNode("z")
    assert a1 == a2
    assert hash(a1) == hash(a2)
    assert a1 != GraphNode("b")
    assert len({a1, a2}) == 1


def test_node_scratch_defaults():
    node = GraphNode(3)
    assert node.label == 3
    assert node.color == COLOR_WHITE
    assert node.integer_distance == 0
    assert node.floating_point_distance == 0.0
    assert node.previous is None
    assert node.entering_time == 0
    assert node.exiting_time == 0


def test_node_label_is_read_only():
    node = GraphNode("a")
    with pytest.raises(AttributeError):
        node.label = "b"


def test_node_str():
    assert str(GraphNode("a")) == "Node[ a ]"


def test_edge_requires_endpoints():
    with pytest.raises(TypeError):
        GraphEdge(None, GraphNode("a"), False)
    with pytest.raises(TypeError):
        GraphEdge(GraphNode("a"), None, False)


def test_edge_weight_sentinel():
    a, b = GraphNode("a"), GraphNode("b")
    unweighted = GraphEdge(a, b, False)
    assert not unweighted.has_weight()
    assert math.isnan(unweighted.weight)

    weighted = GraphEdge(a, b, False, 2.5)
    assert weighted.has_weight()
    weighted.weight = math.nan
    assert not weighted.has_weight()


def test_undirected_edge_equality_ignores_endpoint_order():
    a, b = GraphNode("a"), GraphNode("b")
    e1 = GraphEdge(a, b, False, 1.0)
    e2 = GraphEdge(GraphNode("b"), GraphNode("a"), False, 9.0)
    assert e1 == e2
    assert hash(e1) == hash(e2)
    assert len({e1, e2}) == 1


def test_directed_edge_equality_respects_endpoint_order():
    a, b = GraphNode("a"), GraphNode("b")
    assert GraphEdge(a, b, True) == GraphEdge(GraphNode("a"), GraphNode("b"), True)
    assert GraphEdge(a, b, True) != GraphEdge(b, a, True)


def test_directed_and_undirected_edges_differ():
    a, b = GraphNode("a"), GraphNode("b")
    assert GraphEdge(a, b, True) != GraphEdge(a, b, False)


def test_edge_str():
    a, b = GraphNode("a"), GraphNode("b")
    assert str(GraphEdge(a, b, False)) == "Edge [ Node[ a ] -- Node[ b ] ]"
    assert str(GraphEdge(a, b, True)) == "Edge [ Node[ a ] --> Node[ b ] ]"
