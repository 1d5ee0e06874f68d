# algokit

Small, dependency-free solutions to classic recursion, backtracking and
dynamic-programming problems: subsets, combinations, permutations, string
partitioning, board puzzles, graph colouring and grid path costs.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

| Module | Functions |
| --- | --- |
| `algokit.basics` | `ascending`, `descending`, `factorial`, `fibonacci_sequence`, `sum_to` |
| `algokit.subsets` | `subsets`, `subsets_with_dup`, `subset_sums`, `has_subsequence_sum`, `count_subsequences_with_sum` |
| `algokit.combinations` | `combine`, `combination_sum`, `combination_sum2`, `combination_sum3` |
| `algokit.permutations` | `permute`, `permute_unique`, `kth_permutation` |
| `algokit.strings` | `restore_ip_addresses`, `letter_combinations`, `palindrome_partitions`, `generate_parentheses`, `word_break` |
| `algokit.boards` | `solve_n_queens`, `total_n_queens`, `solve_sudoku`, `find_paths`, `word_exists` |
| `algokit.graph` | `graph_coloring` |
| `algokit.one_d` | `climb_stairs`, `fibonacci`, `frog_jump`, `rob` |
| `algokit.grid` | `min_falling_path_sum`, `min_path_sum`, `ninja_training`, `minimum_total`, `unique_paths`, `unique_paths_with_obstacles` |

## Examples

```python
from algokit.combinations import combine
from algokit.permutations import kth_permutation
from algokit.strings import generate_parentheses, restore_ip_addresses
from algokit.boards import total_n_queens
from algokit.grid import unique_paths

combine(4, 2)                     # [[1, 2], [1, 3], [1, 4], [2, 3], [2, 4], [3, 4]]
kth_permutation(3, 3)             # "213"
generate_parentheses(2)           # ["(())", "()()"]
restore_ip_addresses("25525511135")
total_n_queens(8)                 # 92
unique_paths(3, 7)                # 28
```

## Behaviour worth knowing

- Enumerations return lists in the order their search finds the results;
  `subset_sums` sorts its result ascending.
- `permute` treats values as distinct, so input with repeated values yields
  no permutations; use `permute_unique` for multisets.
- `solve_sudoku` fills the board passed to it in place, using `"."` for empty
  cells, and returns whether it found a solution. A board it cannot solve is
  left as it was.
- `find_paths` takes a square grid of `1` (open) and `0` (closed) cells and
  returns routes as strings of the letters `D`, `L`, `R` and `U`.
- Invalid input raises `ValueError`: negative counts (`factorial`, `sum_to`,
  `climb_stairs`, `fibonacci`), an out-of-range `k` for `kth_permutation`,
  non-positive candidates for `combination_sum`, non-digit text for
  `restore_ip_addresses`, edges naming unknown nodes for `graph_coloring`,
  and empty or misshapen grids, boards and triangles.

## What it does not do

This is a library only. It installs no command-line program and prints
nothing; every function returns its result to the caller.