# algolab

Classic algorithms in plain Python, using only the standard library.
Functions take ordinary Python values (lists, tuples, matrices as lists of
rows) and return new results; they raise `ValueError` for input they cannot
work with.

## Modules

| Module | Contents |
| --- | --- |
| `algolab.sorting` | `insertion_sort`, `selection_sort`, `merge_sort`, `quick_sort` with a `PartitionScheme`, and `time_sorts` |
| `algolab.matching` | `rabin_karp` substring search |
| `algolab.maxsubarray` | `max_subarray` by divide and conquer, returning a `SubArray` |
| `algolab.growth` | `factorial`, `growth_row`, `growth_table`, `render_table` for growth-rate functions |
| `algolab.hull` | `Point`, `orientation`, `brute_force_hull`, `graham_scan`, `quick_hull`, `hull_edges`, `monotone_chain`, `read_points`, `benchmark_hulls` |
| `algolab.hull_angular` | `sort_by_angle`, `brute_force_hull_by_angle`, `graham_scan_by_angle`, `merge_hulls`, `divide_and_conquer_hull` |
| `algolab.puzzle` | the 15 puzzle: `manhattan_distance`, `is_goal`, `find_blank`, `solve`, `format_solution`, `Move`, `Solution` |
| `algolab.backtracking` | `n_queens` and `subsets_with_sum` |
| `algolab.matrices` | `multiply`, `strassen`, `strassen_2x2`, `matrix_chain_order` (returning a `ChainOrder`), `multiply_chain`, `random_dimensions`, `random_matrix` |
| `algolab.vertex_cover` | `approx_vertex_cover` and `first_edge_cover` |
| `algolab.knapsack` | `Item`, `fractional_knapsack`, `knapsack_branch_and_bound`, `knapsack_backtracking` |
| `algolab.paths` | `bellman_ford`, `dijkstra`, `shortest_paths`, `ShortestPaths`, `NegativeCycleError` |
| `algolab.mst` | `Edge`, `DisjointSet`, `kruskal`, `prim` |
| `algolab.flow` | `FlowNetwork` and `max_flow` (Ford-Fulkerson) |

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Usage

```python
from algolab.sorting import PartitionScheme, merge_sort, quick_sort
from algolab.matching import rabin_karp
from algolab.backtracking import n_queens
from algolab.matrices import matrix_chain_order
from algolab.paths import shortest_paths
from algolab.flow import max_flow

merge_sort([5, 2, 9, 1])                          # [1, 2, 5, 9]
quick_sort([3, 1, 2], PartitionScheme.LOMUTO)     # [1, 2, 3]
rabin_karp("ABCCDDAEFG", "CDD", 181)              # [3]
len(n_queens(8))                                  # 92

order = matrix_chain_order([10, 20, 5, 30])
order.cost, order.parenthesize()                  # fewest multiplications and the bracketing

paths = shortest_paths(3, [(0, 1, 4), (1, 2, -2)], 0)
paths.distances, paths.path(2)                    # (0, 4, 2), [0, 1, 2]

max_flow(
    [
        [0, 16, 13, 0, 0, 0],
        [0, 0, 10, 12, 0, 0],
        [0, 4, 0, 0, 14, 0],
        [0, 0, 9, 0, 0, 20],
        [0, 0, 0, 7, 0, 4],
        [0, 0, 0, 0, 0, 0],
    ],
    0,
    5,
    "bfs",
)                                                 # 23
```

Some details worth knowing:

- `quick_sort` accepts a `PartitionScheme` or its value: `"first"`,
  `"hoare"` or `"lomuto"`.
- `rabin_karp` returns every start index, overlapping matches included; the
  modulus defaults to 101.
- `graham_scan` returns an empty list for fewer than three points;
  `monotone_chain` and `graham_scan_by_angle` raise `ValueError` instead.
- `read_points` parses lines such as `"3,4"`, skipping malformed lines with a
  `UserWarning`.
- `puzzle.solve` raises `ValueError` for a malformed board or one that cannot
  reach the goal.
- `strassen` multiplies blocks of at most 64 rows the schoolbook way and pads
  odd sizes above that.
- `shortest_paths` uses Bellman-Ford when any edge weight is negative and
  Dijkstra otherwise. A negative cycle reachable from the source raises
  `NegativeCycleError`, whose `cycle` attribute lists its vertices. In the
  matrix given to `dijkstra`, an entry of 0, `None` or `math.inf` means no edge.
- `prim` raises `ValueError` if the graph is not connected; `kruskal` returns
  a spanning forest.
- `FlowNetwork.max_flow` and `max_flow` find augmenting paths breadth-first
  (`"bfs"`) or depth-first (`"dfs"`) and leave the input unchanged.

## Command-line tools

Time merge sort against quick sort on growing prefixes of random integers and
write the times to a CSV file:

```
algolab-sorting --count 100000 --step 100 --output merge_quick_sort_times.csv --seed 1
```

All options are optional; the values above, apart from `--seed`, are the
defaults.

Print the table of growth-rate functions for n from 0 up to, not including, 100:

```
algolab-growth --start 0 --stop 100
```

## What it does not do

The package is a library of functions plus the two commands above. It has no
interactive programs that prompt for graphs, points or matrices; build those
values in Python and call the functions. The convex hull timings from
`benchmark_hulls` are yielded as tuples rather than written to a file by a
command.