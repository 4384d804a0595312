"""Search algorithms over lists and graphs, each tracing its steps."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator, Sequence

from standardcodes.graph import Node
from standardcodes.trace import Trace


def _tracer(trace: Trace | None) -> Trace:
    return trace if trace is not None else Trace(None)


def _report(trace: Trace, name: str, target: int, location: str | None) -> None:
    trace.write(f"End {name}")
    if location is None:
        trace.write(f"Element {target} not found")
    else:
        trace.write(f"Element {target} found at {location}")


def linear_search(values: Sequence[int], target: int, trace: Trace | None = None) -> int | None:
    """Return the index of the first occurrence of ``target``, or ``None``."""
    trace = _tracer(trace)
    trace.write("Start Linear Search")
    trace.write(f"Searching for {target}")
    found = None
    for index, value in enumerate(values):
        trace.write(f"Checking value {value}")
        if value == target:
            found = index
            break
    _report(trace, "Linear Search", target, None if found is None else f"index {found}")
    return found


def binary_search(values: Sequence[int], target: int, trace: Trace | None = None) -> int | None:
    """Return an index of ``target`` in the ascending ``values``, or ``None``."""
    trace = _tracer(trace)
    trace.write("Start Binary Search")
    trace.write(f"Searching for {target}")
    if not values or target < values[0] or target > values[-1]:
        trace.write("Search value smaller or bigger than listed values")
        return None

    start, end = 0, len(values) - 1
    found = None
    while start <= end:
        check = (start + end) // 2
        trace.write(f"Check index: {check}")
        if values[check] == target:
            found = check
            break
        if values[check] < target:
            start = check + 1
        else:
            end = check - 1

    _report(trace, "Binary Search", target, None if found is None else f"index {found}")
    return found


def interpolation_search(
    values: Sequence[int], target: int, trace: Trace | None = None
) -> int | None:
    """Return an index of ``target`` in the ascending ``values``, or ``None``."""
    trace = _tracer(trace)
    trace.write("Start Interpolation Search")
    trace.write(f"Searching for {target}")
    trace.write("Init Start and End")
    start, end = 0, len(values) - 1
    found = None
    while start <= end and values[start] <= target <= values[end]:
        span = values[end] - values[start]
        if span == 0:
            check = start
        else:
            check = start + (end - start) * (target - values[start]) // span
        trace.write(f"Check Index/Value: {check}/{values[check]}")
        if values[check] == target:
            found = check
            break
        if values[check] < target:
            start = check + 1
        else:
            end = check - 1

    _report(
        trace, "Interpolation Search", target, None if found is None else f"index {found}"
    )
    return found


def breadth_first_search(start: Node, target: int, trace: Trace | None = None) -> Node | None:
    """Search the graph from ``start`` level by level for a node holding ``target``."""
    trace = _tracer(trace)
    trace.write("Start Breadth-First Search")
    trace.write(f"Searching for {target}")
    found = None
    queue = deque([start])
    start.mark_visited()
    while queue:
        node = queue.popleft()
        trace.write(f"Next iteration: {node.value}")
        if node.value == target:
            found = node
            break
        for neighbor in node.neighbors:
            if not neighbor.visited:
                trace.write("Node not visited, push to list")
                neighbor.mark_visited()
                queue.append(neighbor)

    _report(
        trace, "Breadth-First Search", target, None if found is None else f"node {found.value}"
    )
    return found


def depth_first_search(start: Node, target: int, trace: Trace | None = None) -> Node | None:
    """Search the graph from ``start`` branch by branch for a node holding ``target``."""
    trace = _tracer(trace)
    trace.write("Start Depth-First Search")
    trace.write(f"Searching for {target}")

    def enter(node: Node) -> bool:
        node.mark_visited()
        trace.write(f"Current Node: {node.value}")
        return node.value == target

    found = None
    if enter(start):
        found = start
    else:
        stack: list[Iterator[Node]] = [iter(start.neighbors)]
        while stack and found is None:
            neighbor = next(stack[-1], None)
            if neighbor is None:
                stack.pop()
                continue
            trace.write("Running through the direct neighbors")
            if neighbor.visited:
                continue
            trace.write("Node not visited")
            if enter(neighbor):
                found = neighbor
            else:
                stack.append(iter(neighbor.neighbors))

    _report(
        trace, "Depth-First Search", target, None if found is None else f"node {found.value}"
    )
    return found