# contestlib

Classic algorithms and data structures of the kind used in programming
contests, written in plain Python with no runtime dependencies.

## Installation

```
pip install contestlib
```

To run the test suite:

```
pip install "contestlib[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `contestlib.shortest_paths` | `bellman_ford`, `dijkstra`, `floyd_warshall`, `johnson`, `NegativeCycleError` |
| `contestlib.centroid` | `find_centroid`, `centroid_decomposition` |
| `contestlib.components` | `kosaraju` (strongly connected components), `find_cut_vertices_and_bridges`, `CutResult` |
| `contestlib.lca` | `BinaryLiftingLCA` |
| `contestlib.hld` | `HeavyLightTree`: edge weight changes and path maximum |
| `contestlib.sack` | `dominating_colour_sums`: sum of the most frequent colours in every subtree |
| `contestlib.fenwick` | `FenwickTree`, `FenwickTree2D` |
| `contestlib.segment_tree` | `MinSegmentTree`, `LazySumSegmentTree`, `PersistentSegmentTree` |
| `contestlib.sparse_table` | `SparseTable`, `SparseTable2D` (range minimum) |
| `contestlib.convex_hull` | `Line`, `ConvexHullTrick`, `LiChaoTree`, `frog_jumps` |
| `contestlib.treap` | `Treap`: a randomised sorted multiset |
| `contestlib.dp_optimization` | `divide_and_conquer_dp`, `knuth_dp` |
| `contestlib.huffman` | `HuffmanTree` |
| `contestlib.suffix_array` | `suffix_array`, `lcp_array` |
| `contestlib.matrix` | `mat_mul`, `mat_pow`, `fibonacci` |

## Conventions

- Graph and tree vertices are numbered from 1, except in `kosaraju`, which
  takes vertices 0..n-1.
- Weighted graphs take edges as `(u, v, w)`, unweighted ones as `(u, v)`.
  The shortest-path functions treat every edge as undirected, so any edge of
  negative weight already forms a negative cycle.
- `FenwickTree` and `FenwickTree2D` are 1-based; the segment trees and sparse
  tables are 0-based. All ranges are inclusive at both ends.
- Invalid arguments raise `ValueError` or `IndexError`; a negative cycle
  raises `NegativeCycleError` (a subclass of `ValueError`).

## Examples

Shortest paths:

```python
from contestlib.shortest_paths import dijkstra, johnson, NegativeCycleError

edges = [(1, 2, 4), (2, 3, 1), (1, 3, 7)]
dijkstra(3, edges, 1)          # {1: 0, 2: 4, 3: 5}
johnson(3, edges)[(3, 1)]      # 5

try:
    johnson(2, [(1, 2, -1)])
except NegativeCycleError:
    print("negative cycle")
```

Unreachable vertices get `math.inf`. `floyd_warshall` and `johnson` return a
dictionary keyed by `(from, to)`.

Range queries:

```python
from contestlib.fenwick import FenwickTree
from contestlib.segment_tree import MinSegmentTree, LazySumSegmentTree

fw = FenwickTree(10)
fw.add(3, 5)
fw.prefix_sum(4)               # 5

seg = MinSegmentTree([5, 2, 8, 1])
seg.query(0, 2)                # 2

lazy = LazySumSegmentTree([1, 2, 3, 4])
lazy.range_add(1, 3, 10)
lazy.query(0, 3)               # 40
```

A persistent sum tree whose versions can be copied; the values given form
version 0:

```python
from contestlib.segment_tree import PersistentSegmentTree

tree = PersistentSegmentTree([1, 2, 3])
copy = tree.copy(0)            # 1
tree.set(copy, 1, 10)
tree.query(0, 0, 2)            # 6
tree.query(copy, 0, 2)         # 14
```

Trees:

```python
from contestlib.lca import BinaryLiftingLCA
from contestlib.hld import HeavyLightTree

lca = BinaryLiftingLCA(5, [(1, 2), (1, 3), (2, 4), (2, 5)], 1)  # (parent, child)
lca.lca(4, 5)                  # 2

hld = HeavyLightTree(3, [(1, 2, 5), (2, 3, 7)])  # edges numbered 1, 2
hld.query(1, 3)                # 7
hld.change(2, 1)
hld.query(1, 3)                # 5
```

Lines:

```python
from contestlib.convex_hull import ConvexHullTrick, LiChaoTree

hull = ConvexHullTrick()       # minimum; slopes inserted non-increasing
hull.insert(1, 0)
hull.insert(-1, 4)
hull.query(3)                  # 1

lichao = LiChaoTree(0, 100)    # maximum over integer x in 0..100
lichao.add_line(2, 0)
lichao.add_line(-1, 30)
lichao.query(5)                # 25
```

Strings and numbers:

```python
from contestlib.suffix_array import suffix_array, lcp_array
from contestlib.huffman import HuffmanTree
from contestlib.matrix import fibonacci

order = suffix_array("banana")  # [5, 3, 1, 0, 4, 2]
lcp_array("banana", order)      # [0, 1, 3, 0, 0, 2]

HuffmanTree("never gonna give you up").codes()  # {' ': '...', 'a': '...', ...}

fibonacci(10)                   # 55, modulo 1_000_000_007 by default
```

Each function and class has a docstring that gives its arguments, its index
conventions and the errors it raises.

## What it does not do

contestlib is a library only. It has no command-line program and does not
read problem input from standard input or print answers; callers pass data to
the functions and classes and use what they return.