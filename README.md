# algokit

A collection of classic algorithms and data structures in plain Python.
It has no third-party dependencies.

## What is inside

| Area | Modules |
| --- | --- |
| Bits | `algokit.bits`, `algokit.bit_vector`, `algokit.rs_table`, `algokit.dictionary` |
| Arithmetic | `algokit.arith` (`gcd`, `lcm`, `is_prime`) |
| Geometry | `algokit.geometry` (`Point2D`, `dot`, `cross`, `convex_hull`) |
| Graphs | `algokit.matching` (`max_bipartite_matching`) |
| Numerics | `algokit.fft`, `algokit.matrix`, `algokit.simplex` |
| Sequences | `algokit.dsu`, `algokit.fenwick`, `algokit.heap`, `algokit.median`, `algokit.merge_sort`, `algokit.rmq`, `algokit.sat2`, `algokit.segtree`, `algokit.treap` |
| Solvers | `algokit.dlx` (exact cover with dancing links), `algokit.sudoku`, `algokit.langford`, `algokit.nqueens`, `algokit.words` |
| Strings | `algokit.aho_corasick`, `algokit.kmp`, `algokit.suffix_array` |

The solvers (`solve_exact_cover`, `solve_sudoku`, `langford_pairings`,
`n_queens`, `word_rectangles`) are generators: they yield solutions one at a
time, so you can stop after the first or count them all.

## Installation

```
pip install .
```

Install the test extra to run the test suite:

```
pip install ".[test]"
pytest
```

## Examples

String search:

```python
from algokit.kmp import kmp_search, prefix_function

kmp_search("ababab", "ba")   # [1, 3]
prefix_function("aaaaa")     # [0, 0, 1, 2, 3, 4]
```

Suffix arrays:

```python
from algokit.suffix_array import skew

skew("aaaa")                 # [3, 2, 1, 0]
```

Prefix sums and disjoint sets:

```python
from algokit.fenwick import Fenwick
from algokit.dsu import DisjointSets

tree = Fenwick(8)
for i, v in enumerate([6, 4, 1, 2, 3, 5, 7, 9]):
    tree.add(i, v)
tree.prefix_sum(3)           # 11
tree.range_sum(2, 5)         # 6

sets = DisjointSets(5)
sets.union(2, 3)             # True
sets.find(2) == sets.find(3) # True
sets.component_count         # 4
```

Convex hull:

```python
from algokit.geometry import Point2D, convex_hull

convex_hull([Point2D(1, 1), Point2D(3, 1), Point2D(2, 2)])
# [Point2D(x=1, y=1), Point2D(x=3, y=1), Point2D(x=2, y=2)]
```

Combinatorial search:

```python
from algokit.nqueens import count_n_queens
from algokit.sudoku import solve_sudoku

count_n_queens(8)            # 92

board = [[0] * 9 for _ in range(9)]
first = next(solve_sudoku(board))
```

Linear programming (`Simplex.solve` raises `UnboundedProblemError` when the
maximum is infinite):

```python
from algokit.simplex import Simplex

solution = Simplex([[1, 1, 3], [2, 2, 5], [4, 1, 2]], [30, 24, 36], [3, 1, 2]).solve()
solution.target              # 28.0
```

## Command line

The package installs an `algokit` command with these subcommands:

- `langford` reads `n` from standard input and prints the number of Langford
  pairings; `--use-naive-solver` switches off pruning.
- `nqueens` reads `n` from standard input and prints the number of n-queens
  placements.
- `words` reads words from standard input, lower-cases them, and counts the
  5x6 grids whose columns are 5-letter words and whose rows are 6-letter
  words; every 100th grid is printed, then the total.
- `matrix-transpose` transposes a `--height` by `--width` matrix and checks
  the result (defaults 16384 by 16384).
- `merge-sort` sorts `--size` random integers with the given `--cache-size`
  and `--cache-line-size` and checks the order (default size 512,000,000).

```
echo 8 | algokit nqueens
algokit matrix-transpose --height 64 --width 32
algokit --help
```

The defaults of `matrix-transpose` and `merge-sort` are very large and need a
lot of memory and time; pass smaller sizes for a quick run. A failed check
exits with status 1, unreadable input with status 2.

## Limits

`RankSelectTable` answers rank queries only; it has no select operation.
The matrix routines work on Python lists and are meant for correctness, not
speed.