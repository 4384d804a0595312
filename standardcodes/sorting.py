"""Sorting algorithms over integer lists, each tracing its steps."""

from __future__ import annotations

import heapq
from collections.abc import Sequence
from dataclasses import dataclass, field

from standardcodes.trace import Trace


def _tracer(trace: Trace | None) -> Trace:
    return trace if trace is not None else Trace(None)


def _finish(
    trace: Trace,
    name: str,
    result: list[int],
    iterations: int | None = None,
    swaps: int | None = None,
) -> list[int]:
    trace.write(f"End {name}")
    if iterations is not None:
        trace.write(f"Iterations: {iterations}")
    if swaps is not None:
        trace.write(f"Swaps: {swaps}")
    trace.write("New order:")
    for value in result:
        trace.write(str(value))
    return result


def bubble_sort(values: Sequence[int], trace: Trace | None = None) -> list[int]:
    """Return the values in ascending order using bubble sort."""
    trace = _tracer(trace)
    result = list(values)
    iterations = swaps = 0
    trace.write("Start Bubble Sort")
    for last in range(len(result) - 1, 0, -1):
        for j in range(last):
            iterations += 1
            trace.write(str(result[j]))
            if result[j] > result[j + 1]:
                swaps += 1
                trace.write(f"Swap {result[j]} and {result[j + 1]}")
                result[j], result[j + 1] = result[j + 1], result[j]
        trace.write("Next outer iteration")
    return _finish(trace, "Bubble Sort", result, iterations, swaps)


def optimized_bubble_sort(values: Sequence[int], trace: Trace | None = None) -> list[int]:
    """Bubble sort that stops after the first pass without a swap."""
    trace = _tracer(trace)
    result = list(values)
    iterations = swaps = 0
    trace.write("Start optimized Bubble Sort")
    for last in range(len(result) - 1, 0, -1):
        swapped = False
        for j in range(last):
            iterations += 1
            trace.write(str(result[j]))
            if result[j] > result[j + 1]:
                swaps += 1
                swapped = True
                trace.write(f"Swap {result[j]} and {result[j + 1]}")
                result[j], result[j + 1] = result[j + 1], result[j]
        if not swapped:
            trace.write("No change, sorting finished")
            break
        trace.write("Next outer iteration")
    return _finish(trace, "optimized Bubble Sort", result, iterations, swaps)


def insertion_sort(values: Sequence[int], trace: Trace | None = None) -> list[int]:
    """Return the values in ascending order using insertion sort."""
    trace = _tracer(trace)
    result = list(values)
    iterations = swaps = 0
    trace.write("Taking first value as start for sorted list")
    trace.write("Start Insertion Sort")
    for i in range(1, len(result)):
        value = result[i]
        j = i
        trace.write(f"Value: {value}")
        while j > 0 and result[j - 1] > value:
            iterations += 1
            swaps += 1
            trace.write(f"Swap {result[j]} and {result[j - 1]}")
            result[j], result[j - 1] = result[j - 1], result[j]
            j -= 1
        trace.write("Next outer iteration")
    return _finish(trace, "Insertion Sort", result, iterations, swaps)


def merge_sort(values: Sequence[int], trace: Trace | None = None) -> list[int]:
    """Return the values in ascending order using top-down merge sort."""
    trace = _tracer(trace)
    trace.write("New function call - Start Merge Sort")
    trace.write("Given List:")
    for value in values:
        trace.write(str(value))
    if len(values) <= 1:
        return list(values)

    middle = len(values) // 2
    left = merge_sort(values[:middle], trace)
    right = merge_sort(values[middle:], trace)
    return _finish(trace, "Merge Sort", list(heapq.merge(left, right)))


@dataclass(eq=False)
class TreeNode:
    """Node of an unbalanced binary search tree; equal values go right."""

    value: int
    trace: Trace | None = field(default=None, repr=False)
    left: TreeNode | None = field(default=None, init=False)
    right: TreeNode | None = field(default=None, init=False)

    def __post_init__(self) -> None:
        if self.trace is not None:
            self.trace.write(f"Create new Node, Value: {self.value}")

    def insert(self, value: int) -> None:
        """Place ``value`` in the subtree rooted at this node."""
        trace = _tracer(self.trace)
        trace.write(f"Insert new Value: {value}")
        node = self
        while True:
            if value < node.value:
                trace.write(f"New value is smaller than {node.value}")
                if node.left is None:
                    node.left = TreeNode(value, self.trace)
                    return
                node = node.left
            else:
                trace.write(f"New value is bigger or equal than {node.value}")
                if node.right is None:
                    node.right = TreeNode(value, self.trace)
                    return
                node = node.right

    def traverse(self) -> list[int]:
        """Return the values of this subtree in order."""
        result: list[int] = []
        stack: list[TreeNode] = []
        node: TreeNode | None = self
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            result.append(node.value)
            node = node.right
        return result


def tree_sort(values: Sequence[int], trace: Trace | None = None) -> list[int]:
    """Return the values in ascending order via a binary search tree."""
    trace = _tracer(trace)
    trace.write("Start Binary Tree Sort")
    if not values:
        return _finish(trace, "Binary Tree Sort", [])
    root = TreeNode(values[0], trace)
    for value in values[1:]:
        root.insert(value)
    return _finish(trace, "Binary Tree Sort", root.traverse())


def heapify(values: list[int], start: int, end: int, trace: Trace | None = None) -> None:
    """Sift ``values[start]`` down the max-heap occupying ``values[:end + 1]``."""
    trace = _tracer(trace)
    parent = start
    while True:
        left = 2 * parent + 1
        right = left + 1
        biggest = left
        if right <= end and values[right] > values[left]:
            trace.write(
                f"Right Child ({right}/{values[right]}) is bigger than "
                f"left Child ({left} / {values[left]})"
            )
            biggest = right
        if left <= end and values[parent] < values[biggest]:
            trace.write(
                f"Biggest Child ({biggest}/{values[biggest]}) is bigger than "
                f"Parent ({parent} / {values[parent]})"
            )
            values[parent], values[biggest] = values[biggest], values[parent]
            trace.write("Heapify to the Bottom")
            parent = biggest
        else:
            trace.write("Heapify finished")
            return


def heap_sort(values: Sequence[int], trace: Trace | None = None) -> list[int]:
    """Return the values in ascending order using heap sort."""
    trace = _tracer(trace)
    result = list(values)
    size = len(result)
    trace.write("Start Heap Sort")
    trace.write("Initiate Heap")
    for parent in range(size // 2 - 1, -1, -1):
        trace.write(f"Next Parent {parent} / {result[parent]}")
        heapify(result, parent, size - 1, trace)
    for last in range(size - 1, 0, -1):
        trace.write("Swapping biggest Value on index 0 with last place")
        result[0], result[last] = result[last], result[0]
        trace.write("Heapify from top to bottom")
        heapify(result, 0, last - 1, trace)
    return _finish(trace, "Heap Sort", result)


def selection_sort(values: Sequence[int], trace: Trace | None = None) -> list[int]:
    """Return the values in ascending order using selection sort."""
    trace = _tracer(trace)
    result = list(values)
    trace.write("Start Selection Sort")
    for i in range(len(result) - 1):
        trace.write("Start iterating outer loop")
        smallest = min(range(i, len(result)), key=result.__getitem__)
        if smallest != i:
            trace.write(
                f"Swap {smallest}/{result[smallest]} with {i}/{result[i]}"
            )
            result[i], result[smallest] = result[smallest], result[i]
    return _finish(trace, "Selection Sort", result)


def partition(values: list[int], start: int, end: int, trace: Trace | None = None) -> int:
    """Partition ``values[start:end + 1]`` around its last element.

    Afterwards every value left of the returned index is at most the pivot and
    every value right of it is greater.
    """
    if not 0 <= start <= end < len(values):
        raise ValueError(f"invalid range {start}..{end} for a list of {len(values)}")
    trace = _tracer(trace)
    pivot = values[end]
    trace.write(f"Start-Index: {start}")
    trace.write(f"End-Index: {end}")
    trace.write(f"Pivot: {pivot}")
    store = start
    for i in range(start, end):
        if values[i] <= pivot:
            if i != store:
                trace.write(f"Swap values of i({store}) and j({i}) ")
                values[store], values[i] = values[i], values[store]
            store += 1
    values[store], values[end] = values[end], values[store]
    return store


def quick_sort(values: Sequence[int], trace: Trace | None = None) -> list[int]:
    """Return the values in ascending order using quicksort."""
    trace = _tracer(trace)
    result = list(values)
    trace.write("Start Quick Sort")
    ranges = [(0, len(result) - 1)]
    while ranges:
        low, high = ranges.pop()
        if low < high:
            split = partition(result, low, high, trace)
            ranges.append((split + 1, high))
            ranges.append((low, split - 1))
    return _finish(trace, "Quick Sort", result)