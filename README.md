# algokit

Classic algorithms and data structures in plain Python, with no
dependencies beyond the standard library. Each algorithm is an importable
function or class, and each module also has a small command that runs a
demonstration.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `algokit.floodfill` | `flood_fill(grid, row, col, target, replacement)` replaces, in place, the 8-connected region of `target` cells around the start and returns how many cells it filled (0 when the start is off the grid, on another value, or when `target == replacement`). `format_grid(grid)` renders a grid one row per line. |
| `algokit.hanoi` | `hanoi_moves(disks, source="A", spare="B", target="C")` yields `(from, to)` peg pairs solving the Tower of Hanoi; raises `ValueError` for fewer than one disk. |
| `algokit.search` | `binary_search(items, value)` returns an index of `value` in a sorted sequence, or `None` if it is absent. |
| `algokit.tree` | `TreeNode` (a dataclass with `data`, `left`, `right`, compared by identity) and the generator traversals `pre_order`, `in_order`, `post_order` and `level_order`. `lowest_common_ancestor(root, p, q)` returns the deepest node having both nodes as descendants. |
| `algokit.shortest_paths` | `floyd_warshall(dist)` returns a new matrix of all-pairs shortest distances, using the constant `INF` (99999) for missing edges; a non-square matrix raises `ValueError`. `format_matrix(dist)` renders a matrix, writing `INF` for unreachable pairs. |
| `algokit.linked_list` | `Node` and `LinkedList`, with `push` (insert at the front), `reverse` (in place) and iteration over the values. |
| `algokit.mergesort` | `merge(left, right)` merges two sorted sequences; `merge_sort(items)` returns a new, stably sorted list. |
| `algokit.scheduling` | `Process`, `ScheduledProcess` (with `waiting_time` and `turnaround_time`), `Schedule` (with `total_waiting_time` and `average_waiting_time`), `shortest_job_first(processes)` for non-preemptive SJF scheduling, and `format_schedule(schedule)`. |
| `algokit.subsequences` | `subsequences(text)` yields every subsequence of a string, from the whole string down to the empty one. |

## Examples

```python
from algokit.search import binary_search
from algokit.mergesort import merge_sort
from algokit.subsequences import subsequences
from algokit.hanoi import hanoi_moves

merge_sort([12, 11, 13, 5, 6, 7])      # [5, 6, 7, 11, 12, 13]
binary_search([2, 3, 4, 10, 40], 10)   # 3
binary_search([2, 3, 4, 10, 40], 7)    # None
list(subsequences("ab"))               # ['ab', 'a', 'b', '']
list(hanoi_moves(2))                   # [('A', 'B'), ('A', 'C'), ('B', 'C')]
```

A shortest-job-first schedule:

```python
from algokit.scheduling import Process, shortest_job_first, format_schedule

schedule = shortest_job_first([
    Process(1, 0, 6),
    Process(2, 1, 8),
    Process(3, 2, 7),
    Process(4, 3, 3),
])
print(schedule.average_waiting_time)
print(format_schedule(schedule))
```

Ready jobs with equal burst time are taken in order of arrival, and the
clock jumps to the next arrival when nothing is ready. An empty list of
processes or a negative burst time raises `ValueError`. In the table
printed by `format_schedule`, the last column, headed "Waiting Time", holds
each process's turnaround time (completion minus arrival).

## Commands

Each command runs a demonstration and prints its result:

```
algokit-floodfill
algokit-hanoi [DISKS]
algokit-search [VALUE]
algokit-tree
algokit-shortest-paths
algokit-linked-list
algokit-mergesort [VALUES ...]
algokit-sjf
algokit-subsequences [TEXT]
```

- `algokit-hanoi` takes the number of disks as an argument, or asks for it
  when none is given, then prints each move followed by the total number
  of moves.
- `algokit-search` looks for a value (10 by default) in the array
  `2 3 4 10 40`.
- `algokit-mergesort` sorts the integers given, or `12 11 13 5 6 7` when
  none are.
- `algokit-subsequences` lists the subsequences of the text given, or of
  `abc`.

The other commands work on fixed sample data and take no arguments.