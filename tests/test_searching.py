import pytest

from standardcodes.graph import Node, build_sample_graph
from standardcodes.searching import (
    binary_search,
    breadth_first_search,
    depth_first_search,
    interpolation_search,
    linear_search,
)
from standardcodes.trace import Trace

UNSORTED = [34, 56, 22, 56, 86, 42, 23, 65, 32, 45, 57, 23, 56, 23, 55, 57, 23]
SORTED_UNIQUE = [3, 7, 12, 18, 25, 31, 40, 52, 67, 81, 99]


def test_linear_search_finds_first_occurrence():
    assert linear_search(UNSORTED, 56) == UNSORTED.index(56)
    assert linear_search(UNSORTED, 23) == UNSORTED.index(23)


def test_linear_search_index_zero():
    assert linear_search(UNSORTED, 34) == 0


def test_linear_search_missing():
    assert linear_search(UNSORTED, 1000) is None
    assert linear_search([], 1) is None


def test_linear_search_trace_messages():
    trace = Trace(None)
    linear_search([5, 6], 6, trace)
    assert trace.messages == [
        "Start Linear Search",
        "Searching for 6",
        "Checking value 5",
        "Checking value 6",
        "End Linear Search",
        "Element 6 found at index 1",
    ]


@pytest.mark.parametrize("search", [binary_search, interpolation_search])
def test_sorted_search_finds_every_element(search):
    for index, value in enumerate(SORTED_UNIQUE):
        assert search(SORTED_UNIQUE, value) == index


@pytest.mark.parametrize("search", [binary_search, interpolation_search])
@pytest.mark.parametrize("target", [0, 4, 50, 100])
def test_sorted_search_missing(search, target):
    assert search(SORTED_UNIQUE, target) is None


@pytest.mark.parametrize("search", [binary_search, interpolation_search])
def test_sorted_search_duplicates(search):
    values = sorted(UNSORTED)
    for target in set(values):
        index = search(values, target)
        assert values[index] == target


@pytest.mark.parametrize("search", [binary_search, interpolation_search])
def test_sorted_search_empty(search):
    assert search([], 5) is None


@pytest.mark.parametrize("search", [binary_search, interpolation_search])
def test_sorted_search_single_element(search):
    assert search([9], 9) == 0
    assert search([9], 8) is None


def test_binary_search_out_of_range_message():
    trace = Trace(None)
    assert binary_search(SORTED_UNIQUE, 1000, trace) is None
    assert trace.messages[-1] == "Search value smaller or bigger than listed values"


def test_interpolation_search_reports_not_found():
    trace = Trace(None)
    interpolation_search(SORTED_UNIQUE, 50, trace)
    assert trace.messages[-2:] == ["End Interpolation Search", "Element 50 not found"]


@pytest.mark.parametrize("search", [breadth_first_search, depth_first_search])
def test_graph_search_finds_each_value(search):
    values = list(range(1, 11))
    for target in values:
        nodes = build_sample_graph(values)
        found = search(nodes[0], target)
        assert found is nodes[target - 1]
        assert found.value == target


@pytest.mark.parametrize("search", [breadth_first_search, depth_first_search])
def test_graph_search_missing_visits_all(search):
    nodes = build_sample_graph(list(range(1, 11)))
    assert search(nodes[0], 99) is None
    assert all(node.visited for node in nodes)


def test_breadth_first_order():
    trace = Trace(None)
    nodes = build_sample_graph(list(range(1, 11)))
    breadth_first_search(nodes[0], 99, trace)
    order = [
        int(m.split(": ")[1]) for m in trace.messages if m.startswith("Next iteration: ")
    ]
    assert order == list(range(1, 11))


def test_depth_first_order():
    trace = Trace(None)
    nodes = build_sample_graph(list(range(1, 11)))
    depth_first_search(nodes[0], 99, trace)
    order = [int(m.split(": ")[1]) for m in trace.messages if m.startswith("Current Node: ")]
    assert order == [1, 2, 4, 3, 5, 6, 7, 8, 10, 9]


@pytest.mark.parametrize("search", [breadth_first_search, depth_first_search])
def test_graph_search_lone_node(search):
    node = Node(7)
    assert search(node, 7) is node
    assert search(Node(7), 8) is None


def test_graph_search_reports_found_node():
    trace = Trace(None)
    nodes = build_sample_graph(list(range(1, 11)))
    depth_first_search(nodes[0], 6, trace)
    assert trace.messages[-1] == "Element 6 found at node 6"