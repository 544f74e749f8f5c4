# tspbb

Exact solvers for the travelling salesman problem based on branch and bound,
with three search strategies to compare:

- breadth-first (`branch_and_bound_bfs`)
- depth-first (`branch_and_bound_dfs`)
- best-first (`branch_and_bound_best_first`)

Each works on a full (possibly asymmetric) cost matrix or on a symmetric one
stored as a triangle. A cost of `-1` means there is no edge between two
cities; randomly generated matrices have `-1` on the diagonal. Every tour
starts and ends at city 0.

## Installation

```
pip install .
```

For the tests:

```
pip install .[test]
pytest
```

## Running a benchmark

```
tspbb [CONFIG]
```

The `tspbb` command reads the configuration file `CONFIG` (by default
`config.txt` in the current directory), runs the chosen algorithm for the
configured number of iterations and prints the progress and the result. It
then appends a line to `<algorithm>_results.csv` in the current directory
holding the matrix kind (`Symmetric` or `Asymmetric`), the number of cities
and the average time per iteration in milliseconds.

The command exits with status 1 and a message on standard error when the
configuration file cannot be opened, the algorithm is unknown, the number of
iterations is below 1, or the matrix file cannot be read or is malformed.

A configuration file holds `key=value` lines; empty lines and lines starting
with `#` are ignored, as are unknown keys:

```
# which search to use
algorithm=branch_and_bound_best_first
matrix_file=matrix.txt
iterations=10
random_data=false
symmetric_matrix=false
num_cities=10
progress_info=true
```

Boolean settings are true only when written exactly as `true`.

With `random_data=true` a fresh random matrix of `num_cities` cities (costs
1 to 100) is made for each iteration and only the average time is printed.
Otherwise the matrix is read once from `matrix_file`, and the best tour, the
average time and the tour's cost are printed (`no tour` when no closed tour
exists). With `symmetric_matrix=true` the matrix is kept as a
`SymmetricCostMatrix`, and only the lower triangle of the file is used.

A matrix file starts with the number of cities, followed by the costs row by
row, separated by whitespace:

```
4
-1 10 15 20
10 -1 35 25
15 35 -1 30
20 25 30 -1
```

## Using the library

```python
from tspbb.cost_matrix import CostMatrix
from tspbb.branch_and_bound import branch_and_bound_best_first

matrix = CostMatrix.from_file("matrix.txt")
result = branch_and_bound_best_first(matrix)
print(result.path, result.cost)
```

- `tspbb.cost_matrix.CostMatrix` and `tspbb.symmetric_matrix.SymmetricCostMatrix`
  are built with `from_file(path)`, `random(num_cities, rng)` or from a size,
  and offer `cost(i, j)`, `set_cost(i, j, value)`, `format()` and `len()`.
  Out-of-range indices raise `IndexError`.
- `tspbb.branch_and_bound.solve(matrix, strategy)` takes a `Strategy` value
  (or its name, such as `"branch_and_bound_dfs"`) and returns a `TourResult`
  with `cost`, `path` and `found`. When no tour exists, `cost` is `None` and
  `path` is empty. `lower_bound(matrix, visited, current_cost)` is the bound
  used to prune the search tree.
- `tspbb.frontier` holds the `Node` type and the three frontiers
  (`FifoFrontier`, `LifoFrontier`, `BestFirstFrontier`) that drive the
  search orders.
- `tspbb.config` provides `ConfigData`, `load_config(path)` and
  `save_results_to_csv(...)`; `tspbb.solver.run(config, out)` runs a whole
  benchmark and returns a `RunSummary`.
- `tspbb.permutations` has `factorial`, an in-place `shuffle` and
  `next_permutation`.