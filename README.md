# algokit

Small implementations of classic algorithms that need nothing beyond the
standard library. Every function takes ordinary Python values and returns
them. None of them print.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## What is inside

### `algokit.sorting`

- `counting_sort(values, max_value)`: a stable counting sort for integers in `0..max_value`. It raises `ValueError` for a value outside that range or for a negative `max_value`.
- `merge_sort(values)`: returns a new, stably sorted list.
- `quick_sort(values)`: returns a new sorted list. Each range is partitioned around its first element.
- `binary_search(values, item)`: returns an index of `item` in an ascending sequence, or `None` when it is absent.
- `recursive_max(values)`: returns the maximum found by splitting the sequence in halves. It raises `ValueError` for an empty sequence.

```python
from algokit.sorting import counting_sort, binary_search

ordered = counting_sort([1, 4, 1, 2, 7, 5, 2], 8)   # [1, 1, 2, 2, 4, 5, 7]
binary_search(ordered, 5)                           # 5
```

### `algokit.greedy`

- `make_change(amount, denominations=DEFAULT_DENOMINATIONS)`: greedy coin change that takes the largest coins first. The default denominations are `(1, 2, 5, 10, 20, 50, 100)`. It raises `ValueError` when the amount cannot be paid exactly or when a denomination is not positive.
- `FractionalItem(price, weight)`: an item that may be split. Its `ratio` property gives the price per unit of weight, and the weight must be positive.
- `fractional_knapsack(items, capacity)`: the maximum profit when items may be taken in part. Items are taken in order of decreasing ratio.

```python
from algokit.greedy import FractionalItem, fractional_knapsack, make_change

make_change(34)   # [20, 10, 2, 2]
fractional_knapsack([FractionalItem(6, 6), FractionalItem(3, 1)], 6)
```

### `algokit.graphs`

- `bfs(node_count, edges, source=1)`: breadth-first search on an undirected graph with nodes `1..node_count`. Neighbours are visited in increasing order. It returns a `BfsResult` with `order`, `distance` and `parent`. These cover only the nodes that were reached, and the parent of the source is `None`.
- `prim_mst(node_count, edges, source=1)`: Prim's minimum spanning tree over nodes `1..node_count`. The edges are given as `(u, v, weight)`. It returns `TreeEdge(parent, node, weight)` values in the order the nodes join the tree, and raises `ValueError` if the graph is not connected.
- `kruskal_mst(vertex_count, edges)`: Kruskal's minimum spanning forest over vertices `0..vertex_count-1`. It returns the accepted `WeightedEdge(u, v, weight)` values in the order they were taken.
- `topological_sort(vertex_count, edges)`: orders the vertices `1..vertex_count` by decreasing depth-first finish time. In a directed acyclic graph every edge then points forward. Cycles are not detected.

Every graph function raises `ValueError` for a node number outside its range.

### `algokit.dynamic`

- `lcs(x, y)`: longest common subsequence of two sequences. The `LcsResult` holds the `lengths` table and the `directions` table of `Direction` values. It also has the `length` property and the `subsequence()` method.
- `matrix_chain_order(dimensions)`: the cheapest order in which to multiply a chain of matrices. The `MatrixChainResult` holds the `costs` and `splits` tables, the `cost` and `count` properties, and `parenthesization()`, which writes the bracketing as for example `((A1A2)A3)`.
- `knapsack_01(capacity, weights, values)`: the 0/1 knapsack. The `KnapsackResult` holds the full `table`, the `best_value` property and `selected()`, which gives the indices of the chosen items starting from 0.

```python
from algokit.dynamic import knapsack_01, lcs, matrix_chain_order

lcs("ABBCAAC", "ACCBCCA").subsequence()
result = knapsack_01(8, [3, 4, 5, 6], [2, 3, 4, 1])
result.best_value, result.selected()   # (6, [0, 2])
matrix_chain_order([10, 20, 30]).parenthesization()   # "(A1A2)"
```

## What it does not do

algokit is a library only. It has no command-line program, it does not read
graphs or numbers from standard input, and it prints no tables. The tables
are available as attributes of the result objects, so callers can format
them as they like.