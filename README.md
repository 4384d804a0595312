# standardcodes

Textbook sorting and searching algorithms that record every step they take.
Steps go to a trace file, `output.txt` in the current directory by default.
Each line in the file has the form `<seconds since start>: <message>`.

## Installation

```
pip install .
```

For the tests:

```
pip install .[test]
pytest
```

## Command line

```
standardcodes SEARCH_VALUE LIST SEARCH_ALGORITHM SORT_ALGORITHM
```

- `SEARCH_VALUE`: the integer to look for.
- `LIST`: integers separated by commas, for example `34,56,22,56,86`.
  An empty field between two commas counts as 0. A trailing comma is ignored.
- `SEARCH_ALGORITHM`: one of `linear`, `binary`, `interpol`, `bfs`, `dfs`.
- `SORT_ALGORITHM`: one of `bubble`, `bubbleopt`, `insert`, `merge`, `tree`,
  `heap`, `select`, `quick`. Pass an empty string (`""`) to leave the list
  unsorted.

Example:

```
standardcodes 32 34,56,22,56,86,42,23,65,32,45,57,23,56,23,55,57,23 linear bubble
```

The command empties `output.txt` when it starts. It then prints its arguments
and writes the trace of the sort and the search to `output.txt`.

- `binary` and `interpol` need a sorted list. With an empty sort algorithm the
  command only prints a notice and does not run the search.
- `bfs` and `dfs` build a fixed ten-node sample graph from the first ten list
  values. With fewer than ten values, `build_sample_graph` raises
  `ValueError`.

Exit status:

- 0 on success.
- 1 when fewer than four arguments are given. The usage message is printed.
- 2 when the sort or search algorithm name is unknown.

## Library use

```python
from standardcodes.trace import Trace
from standardcodes.sorting import heap_sort
from standardcodes.searching import binary_search

trace = Trace()          # writes to output.txt
trace.clear()
ordered = heap_sort([5, 3, 9, 1], trace)
index = binary_search(ordered, 9, trace)   # 3
```

The `trace` argument is optional for every algorithm. Without it nothing is
recorded. `Trace(None)` writes nothing to disk. It still keeps the message
texts in its `messages` list. `Trace.write(text)` returns the timestamped
line it recorded.

### `standardcodes.sorting`

`bubble_sort`, `optimized_bubble_sort`, `insertion_sort`, `merge_sort`,
`tree_sort`, `heap_sort`, `selection_sort` and `quick_sort` take a sequence of
integers. Each returns a new list in ascending order. The input is left
unchanged.

The helpers work on a list in place:

- `heapify(values, start, end, trace)` sifts `values[start]` down the max-heap
  stored in `values[:end + 1]`.
- `partition(values, start, end, trace)` partitions `values[start:end + 1]`
  around its last element and returns the pivot's final index. It raises
  `ValueError` for an invalid range.

`TreeNode` is the binary search tree behind `tree_sort`. Equal values go to
the right. It has `insert(value)` and `traverse()`; `traverse()` returns the
values in order.

### `standardcodes.searching`

- `linear_search(values, target, trace)` returns the index of the first
  occurrence, or `None`.
- `binary_search(values, target, trace)` and
  `interpolation_search(values, target, trace)` expect ascending values. They
  return an index of `target`, or `None`.
- `breadth_first_search(start, target, trace)` and
  `depth_first_search(start, target, trace)` search a graph from a `Node`.
  They return the node holding `target`, or `None`. Both mark the nodes they
  visit, so build a fresh graph for each search.

### `standardcodes.graph`

`Node(value, trace=None)` is an undirected graph node. It has
`add_neighbor(other)` and `mark_visited()`, and the attributes `neighbors` and
`visited`. `build_sample_graph(values, trace=None)` returns the ten nodes of
the sample graph. The first node is the start node.

### `standardcodes.trace`

`Trace(path="output.txt")` is the timestamped step log. Its methods are
`clear()` and `write(text)`.