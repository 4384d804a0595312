import pytest

from standardcodes.graph import SAMPLE_EDGES, Node, build_sample_graph
from standardcodes.trace import Trace


def test_add_neighbor_is_symmetric():
    a = Node(1)
    b = Node(2)
    a.add_neighbor(b)
    assert a.neighbors == [b]
    assert b.neighbors == [a]


def test_neighbors_keep_insertion_order():
    a, b, c = Node(1), Node(2), Node(3)
    a.add_neighbor(b)
    a.add_neighbor(c)
    assert [n.value for n in a.neighbors] == [2, 3]


def test_mark_visited():
    node = Node(5)
    assert node.visited is False
    node.mark_visited()
    assert node.visited is True


def test_node_creation_is_traced():
    trace = Trace(None)
    Node(42, trace)
    assert trace.messages == ["Create new Node, Value: 42"]


def test_sample_graph_values_and_size():
    values = [34, 56, 22, 56, 86, 42, 23, 65, 32, 45, 57, 23]
    nodes = build_sample_graph(values)
    assert [n.value for n in nodes] == values[:10]


def test_sample_graph_edges():
    nodes = build_sample_graph(list(range(10)))
    for a, b in SAMPLE_EDGES:
        assert nodes[b] in nodes[a].neighbors
        assert nodes[a] in nodes[b].neighbors
    total_degree = sum(len(n.neighbors) for n in nodes)
    assert total_degree == 2 * len(SAMPLE_EDGES)


def test_sample_graph_first_node_neighbors():
    nodes = build_sample_graph(list(range(10)))
    assert nodes[0].neighbors == [nodes[1], nodes[2]]


def test_sample_graph_too_few_values():
    with pytest.raises(ValueError):
        build_sample_graph([1, 2, 3])


def test_sample_graph_traces_creation():
    trace = Trace(None)
    build_sample_graph(list(range(10)), trace)
    assert trace.messages[0] == "Erstelle Beispielbaum für BFS und DFS"
    assert "Create new Node, Value: 9" in trace.messages
    assert len(trace.messages) == 11