# algocollection

A small library of classic algorithms. Each one is a plain function that takes Python values and returns Python values. The package needs nothing beyond the standard library.

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

- `algocollection.sorting`: `selection_sort`, `merge_sort`, `four_way_merge_sort`, `heap_sort`, `quick_sort`, `counting_sort` (non-negative integers only), `map_count_sort`, `sort_binary`, `unique_sorted_union` and `merge_into_vacancies`.
- `algocollection.arrays`: `find_sorted_triplet`, `max_profit`, `equilibrium_indices`, `shortest_unsorted_subarray`, `trapped_rain_water`, `find_pair_with_sum`, `min_max`, `nonnegative_product`, `reversed_elements` and `fractional_knapsack`.
- `algocollection.text`: `kmp_search`, `longest_unique_substring_length`, and the generators `permutations_by_swapping` and `subsets`.
- `algocollection.trees`: the dataclasses `BinaryNode` and `Node`, with `level_order`, `tree_height`, `root_to_leaf_sums`, `roots_match` and `read_tree_level_wise`.
- `algocollection.graphs`: a directed `Graph` class with `add_edge` and `bfs`, and `travelling_salesman`, which tries every tour over a square cost matrix.
- `algocollection.dynamic`: `catalan`, `fibonacci`, `matrix_chain_order`, `coin_change`, `wine_profit_top_down` and `wine_profit_bottom_up`.
- `algocollection.arithmetic`: `armstrong_numbers`, `factorial`, `triangular_sum`, `to_binary`, `bitwise_add` (32-bit wrapping), `max_without_comparison`, `calculate`, `float_arithmetic` (returns a `FloatResults` tuple), `chained_integer_ops` (returns an `IntegerChain` tuple), `floyds_triangle`, `pascals_triangle` and `tower_of_hanoi` (yields `(disk, from_peg, to_peg)` moves).

## Examples

```python
from algocollection.sorting import merge_sort
from algocollection.text import kmp_search
from algocollection.dynamic import coin_change
from algocollection.graphs import Graph

merge_sort([19, 12, 13, 24, 35, 26])   # [12, 13, 19, 24, 26, 35]
kmp_search("ABCABAABCABAC", "CAB")     # [2, 8]
coin_change([1, 2, 5], 11)             # 3

g = Graph(4)
for v, w in [(0, 1), (0, 2), (1, 2), (2, 0), (2, 3), (3, 3)]:
    g.add_edge(v, w)
g.bfs(2)                               # [2, 0, 3, 1]
```

The sorting functions return new lists and leave their input alone. When a function cannot give an answer it raises an exception: usually `ValueError`, and `ZeroDivisionError` for division by zero in the arithmetic routines.

## What it does not do

The package is a library only. It has no command-line program. Its functions do not read from standard input or print. Every result is returned to the caller.