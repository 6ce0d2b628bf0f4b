# algodrills

A collection of classic algorithm exercises written as plain Python functions.
It covers introductory puzzles, recursion, memoised and tabulated dynamic
programming, and small graph algorithms. Each function takes ordinary Python
values and returns a result. None of them read input or print output.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `algodrills.introductory`

Short puzzles: `collatz_sequence`, `missing_number`, `longest_repetition`,
`increase_array_moves`, `beautiful_permutation`, `number_spiral`, `two_knights`,
`two_sets`, `bit_strings`, `trailing_zeros`, `coin_piles` and
`digit_countdown_moves`. When a puzzle has no answer, the function raises
`NoSolutionError`, a subclass of `ValueError`.

```python
from algodrills.introductory import collatz_sequence, trailing_zeros

collatz_sequence(3)   # [3, 10, 5, 16, 8, 4, 2, 1]
trailing_zeros(20)    # 4
```

### `algodrills.combinatorics`

Permutations and counting: `creating_strings`, `count_arrangements`,
`apple_division`, `gray_code`, `tower_of_hanoi`, `palindrome_reorder` and
`digit_query`. `palindrome_reorder` raises `NoSolutionError` when the letters
cannot form a palindrome.

```python
from algodrills.combinatorics import gray_code, tower_of_hanoi

gray_code(2)          # ['00', '01', '11', '10']
tower_of_hanoi(2)     # [(1, 2), (1, 3), (2, 3)]
```

### `algodrills.sums`

Target-sum dynamic programming over a bank of positive numbers. Each number
may be used any number of times. Every problem comes in a memoised version
and a tabulated version:

- `can_sum` and `can_sum_table`
- `how_sum` and `how_sum_table`
- `best_sum` and `best_sum_table`

A table version returns one entry for every value from 0 to the target.

```python
from algodrills.sums import best_sum

best_sum(8, [2, 3, 5])   # [3, 5]
```

### `algodrills.words` and `algodrills.decompositions`

These build a target string from a bank of reusable, non-empty words:

- `can_construct` and `can_construct_table` tell whether it can be built.
- `count_construct` and `count_construct_table` count the ways.
- `all_construct` and `all_construct_table` list every way.

### `algodrills.sequences`

`fibonacci_sequence` and `fibonacci_table` produce Fibonacci numbers.
`grid_traveller` and `grid_traveller_table` count the paths through a grid
that move only right or down.

### `algodrills.graphs`

`Graph` is an undirected graph with non-negative weights. It has two Dijkstra
variants, `shortest_paths` and `shortest_paths_ordered`. Both report
unreachable nodes as `INF`. For graphs given as adjacency lists,
`is_connected_bfs` and `is_connected_dfs` check connectivity.

```python
from algodrills.graphs import Graph

g = Graph(3)
g.add_edge(0, 1, 4)
g.add_edge(1, 2, 1)
g.shortest_paths(0)   # [0, 4, 5]
```

### `algodrills.recursion`

Small recursive classics: `binary_search`, `to_binary`, `merge_sort`,
`merge_sort_in_place`, `is_palindrome`, `reverse_string` and `sum_to`.

## What it does not do

The package is a library only. It has no command-line program.

It also does not include:

- backtracking solvers for board puzzles such as N-queens or sudoku
- maze path-finding
- counting grid paths that follow a move pattern