# algokit

Classic algorithms written as plain Python functions and small classes, with
no dependencies beyond the standard library.

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

| Module | Contents |
| --- | --- |
| `algokit.binary_search` | `binary_search`, `search_half_open`, `search_half_open_checked`, `leftmost_half_open`, `leftmost_closed`, `rightmost_half_open`, `rightmost_closed`, `count_less`, `count_at_most`, and `minimum_effort_path` (grid search by binary search on the allowed step height) |
| `algokit.bits` | `bit_mask`, `extract_bits`, `add_digits` (digital root) |
| `algokit.sequences` | `unique_adjacent`, `find_min_rotated` |
| `algokit.fenwick` | `FenwickTree` (1-based `update` / `query`) and `count_smaller` |
| `algokit.subsequence` | `longest_common_subsequence`, `longest_palindromic_subsequence` |
| `algokit.substring` | `longest_common_substring`, `longest_common_substring_dp`, and the `main` command |
| `algokit.palindrome` | `longest_palindrome_expand`, `longest_palindrome_dp`, `longest_palindrome_manacher` |
| `algokit.graph` | `Graph`, `BFSResult`, `parse_graph`, `bfs`, `find_path`, `find_cycle`, and the `main` command |
| `algokit.dfs_analysis` | `articulation_vertices` (returns an `ArticulationReport`), `classify_edges` (with `EdgeType`), `topological_sort` (raises `NotADAGError` on a cycle) |
| `algokit.matrix_graphs` | `has_cycle_undirected`, `is_bipartite`, `transitive_closure` |
| `algokit.spanning_tree` | `DisjointSet`, `kruskal_weight`, `prim_weight` |
| `algokit.scc` | `count_strongly_connected_components` (Kosaraju) |
| `algokit.words` | `ladder_length`, `word_break` |

Searches that find nothing return `-1`; invalid arguments raise `ValueError`
or `IndexError`.

## Examples

Binary search on a sorted list with repeated values:

```python
from algokit.binary_search import binary_search, leftmost_closed, rightmost_closed

nums = [1, 2, 3, 5, 5, 5, 7, 8, 9]
binary_search(nums, 5)     # 4
leftmost_closed(nums, 5)   # 3
rightmost_closed(nums, 5)  # 5
binary_search(nums, 15)    # -1
```

Counting smaller elements to the right with a Fenwick tree:

```python
from algokit.fenwick import count_smaller

count_smaller([5, 2, 6, 1])  # [2, 1, 1, 0]
```

String dynamic programming:

```python
from algokit.subsequence import longest_common_subsequence
from algokit.palindrome import longest_palindrome_manacher

longest_common_subsequence("abcde", "ace")       # 3
longest_palindrome_manacher("forgeeksskeegfor")  # "geeksskeeg"
```

Bits and digits:

```python
from algokit.bits import extract_bits, add_digits

extract_bits(0xB10, 9, 14)  # 5
add_digits(38)              # 2
```

Graphs:

```python
from algokit.graph import parse_graph, bfs, find_path
from algokit.dfs_analysis import topological_sort

g = parse_graph("4 4\n0 1\n1 2\n2 3\n3 0\n")
result = bfs(g, 0)
find_path(result.parents, 0, 2)  # a shortest path from 0 to 2

dag = parse_graph("3 2\n0 1\n1 2\n", directed=True)
topological_sort(dag)  # [0, 1, 2]
```

Word ladder:

```python
from algokit.words import ladder_length

ladder_length("hit", "cog", ["hot", "dot", "dog", "lot", "log", "cog"])  # 5
```

## Command-line tools

Both commands read from a file named as their argument, or from standard
input when the argument is missing or `-`.

`algokit-common-substring` reads a number of cases, then for each case two
lengths followed by two strings (each cut to its given length), and prints
`ans : N` with the length of the longest common substring of each pair:

```
printf '1\n6 6\nABCDGH\nACDGHR\n' | algokit-common-substring
```

`algokit-graph` reads a vertex count and an edge count followed by one
`x y` pair per edge, prints the adjacency lists, and searches from vertex 0:

```
printf '4 4\n0 1\n1 2\n2 3\n3 0\n' | algokit-graph
```

Options:

- `--mode bfs` (default): print the visit order and the edges examined by a
  breadth-first search, then the path from vertex 0 to `--target`
  (default 2), or `cannot find start value` if it is unreachable.
- `--mode dfs`: run a depth-first cycle search and print the first cycle
  found, or `no cycle found`.
- `--directed`: treat the edges as directed.

## Limits

- Graph vertices are the integers `0 .. n - 1`; edges read by `parse_graph`
  carry no weights. Weighted graphs are handled only by the spanning-tree
  functions, which take a weight matrix with `None` for missing edges.
- There are no shortest-path algorithms for weighted graphs.