"""Command line entry point: sort a list of integers, then search it."""

from __future__ import annotations

import re
import sys
from collections.abc import Callable, Sequence

from standardcodes.graph import build_sample_graph
from standardcodes.searching import (
    binary_search,
    breadth_first_search,
    depth_first_search,
    interpolation_search,
    linear_search,
)
from standardcodes.sorting import (
    bubble_sort,
    heap_sort,
    insertion_sort,
    merge_sort,
    optimized_bubble_sort,
    quick_sort,
    selection_sort,
    tree_sort,
)
from standardcodes.trace import Trace

USAGE = (
    "Bitte Parameter eingeben. Reihenfolge: Suchwert, Suchliste (Komma getrennt), "
    "Suchalgorithmus, Sortieralgorithmus"
)

SORTERS: dict[str, Callable[..., list[int]]] = {
    "bubble": bubble_sort,
    "bubbleopt": optimized_bubble_sort,
    "insert": insertion_sort,
    "merge": merge_sort,
    "tree": tree_sort,
    "heap": heap_sort,
    "select": selection_sort,
    "quick": quick_sort,
}

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _to_int(text: str) -> int:
    """Read the integer at the start of ``text``; 0 when there is none."""
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def parse_list(text: str) -> list[int]:
    """Split a comma separated list into integers.

    Empty fields between commas count as 0; a trailing empty field is dropped.
    """
    if not text:
        return []
    fields = text.split(",")
    if fields[-1] == "":
        fields.pop()
    return [_to_int(part) for part in fields]


def _report(trace: Trace, message: str) -> None:
    print(message)
    trace.write(message)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the program with ``argv`` (defaults to the process arguments)."""
    args = list(sys.argv[1:] if argv is None else argv)
    trace = Trace()
    trace.clear()

    if len(args) < 4:
        print(USAGE)
        return 1

    target = _to_int(args[0])
    list_text, search_name, sort_name = args[1], args[2], args[3]

    print(f"Search value: {target}")
    trace.write(f"Search value: {target}")
    print(f"List: {list_text}")
    trace.write(f"List: {list_text}")
    print(f"Search Algorithm: {search_name}")
    trace.write(f"Search Algorithm: {search_name}")
    print(f"Sort Algorithm: {sort_name}\n")
    trace.write(f"Sort Algorithm: {sort_name}")

    print("Checking list...\n")
    values = parse_list(list_text)

    print("Checking sort algorithm\n")
    if sort_name:
        sorter = SORTERS.get(sort_name)
        if sorter is None:
            _report(trace, f"Unbekannter Sortieralgorithmus: {sort_name}")
            return 2
        values = sorter(values, trace)

    print("Checking search algorithm...\n")
    if search_name == "linear":
        linear_search(values, target, trace)
    elif search_name == "binary":
        if not sort_name:
            _report(trace, "Binary Search benötigt eine sortierte Liste!")
        else:
            binary_search(values, target, trace)
    elif search_name == "interpol":
        if not sort_name:
            _report(trace, "Interpolation Search benötigt eine sortierte Liste!")
        else:
            interpolation_search(values, target, trace)
    elif search_name in ("bfs", "dfs"):
        start = build_sample_graph(values, trace)[0]
        if search_name == "bfs":
            breadth_first_search(start, target, trace)
        else:
            depth_first_search(start, target, trace)
    else:
        _report(trace, f"Unbekannter Suchgorithmus: {search_name}")
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())