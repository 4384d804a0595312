"""Undirected graph nodes and the sample graph used by the graph searches."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from standardcodes.trace import Trace

# Edges of the sample graph, as pairs of positions in the value list.
SAMPLE_EDGES: tuple[tuple[int, int], ...] = (
    (0, 1),
    (0, 2),
    (1, 3),
    (1, 4),
    (2, 3),
    (3, 4),
    (4, 5),
    (4, 6),
    (6, 7),
    (6, 8),
    (6, 9),
    (7, 9),
)
SAMPLE_SIZE = 10


@dataclass(eq=False)
class Node:
    """A graph node holding an integer value and its undirected neighbours."""

    value: int
    trace: Trace | None = field(default=None, repr=False)
    neighbors: list[Node] = field(default_factory=list, init=False, repr=False)
    visited: bool = field(default=False, init=False)

    def __post_init__(self) -> None:
        if self.trace is not None:
            self.trace.write(f"Create new Node, Value: {self.value}")

    def add_neighbor(self, neighbor: Node) -> None:
        """Connect this node and ``neighbor`` in both directions."""
        self.neighbors.append(neighbor)
        neighbor.neighbors.append(self)

    def mark_visited(self) -> None:
        self.visited = True


def build_sample_graph(values: Sequence[int], trace: Trace | None = None) -> list[Node]:
    """Build the ten-node sample graph from the first ten values.

    The first node of the returned list is the start node for searches.
    """
    if len(values) < SAMPLE_SIZE:
        raise ValueError(
            f"the sample graph needs at least {SAMPLE_SIZE} values, got {len(values)}"
        )
    if trace is not None:
        trace.write("Erstelle Beispielbaum für BFS und DFS")
    nodes = [Node(value, trace) for value in values[:SAMPLE_SIZE]]
    for a, b in SAMPLE_EDGES:
        nodes[a].add_neighbor(nodes[b])
    return nodes