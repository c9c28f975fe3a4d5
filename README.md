# dsakit

A collection of classic algorithms and data structures in plain Python, with
no third-party dependencies.

## What is inside

| Module | Contents |
| --- | --- |
| `dsakit.binary_search` | `binary_search`, `binary_search_recursive`, `lower_bound`, `upper_bound`, `find_first`, `find_last`, `search_range`, `search_rotated`, `find_peak_element`, `int_sqrt`, `search_insert` |
| `dsakit.kmp` | Knuth–Morris–Pratt matching: `compute_lps_array`, `kmp_search`, `kmp_search_first`, `kmp_count`, `kmp_search_with_overlap` |
| `dsakit.two_pointer` | `two_sum`, `is_palindrome`, `reverse_array`, `remove_duplicates`, `max_sum_subarray` |
| `dsakit.sliding_window` | `max_sum_fixed_window`, `avg_of_subarrays` |
| `dsakit.dfs` | `TreeNode`, `Stack`; depth-first traversals of adjacency mappings (`dfs_recursive`, `dfs_iterative`, `dfs_with_custom_stack`) and of binary trees (`pre_order`, `in_order`, `post_order`, `pre_order_iterative`, `max_depth`); `find_path`, `find_all_paths`, `has_cycle_undirected`, `has_cycle_directed`, `count_components`, `get_connected_components`, `is_connected`, `topological_sort`, `make_undirected`, `dfs_debug` |
| `dsakit.bfs` | `Queue` and an undirected `Graph` with `simple_bfs`, `bfs_with_distance`, `bfs_shortest_path`, `bfs_level_order`, `bfs_multi_source` |
| `dsakit.binary_tree` | `TreeNode`, `morris_inorder_traversal`, `morris_preorder_traversal`, `regular_inorder_traversal`, `build_example_tree`, `build_complex_tree`, `format_tree` |
| `dsakit.merge_intervals` | `Interval`, `merge_intervals`, `insert_interval`, `can_attend_meetings`, `min_meeting_rooms`, `interval_intersection`, `remove_covered_intervals` |
| `dsakit.quickselect` | `quick_select` and `median_of_medians` for the k-th smallest value (0-based) |
| `dsakit.topological` | Directed `Graph` on vertices `0 .. n - 1` with `add_edge`, `topological_sort` and `has_cycle`; `CycleError` |
| `dsakit.trie` | Prefix tree `Trie` with `insert`, `insert_with_value`, `search`, `search_with_value`, `starts_with`, `count_prefix`, `find_all_with_prefix`, `delete`; supports `len()` and `in` |
| `dsakit.union_find` | `ArrayUnionFind` over the integers `0 .. n - 1` and `MapUnionFind` over any hashable keys, each with `find`, `union`, `connected`, `size_of`, `sets` |

## Behaviour worth knowing

- Search functions return `-1` (or `(-1, -1)` for `search_range` and `two_sum`)
  when nothing is found.
- `compute_lps_array` raises `ValueError` for an empty pattern; the KMP search
  functions return no matches when the text or the pattern is empty.
- `quick_select` and `median_of_medians` raise `IndexError` when `k` is out of
  range, and leave the input sequence untouched.
- `Graph.topological_sort` in `dsakit.topological` raises `CycleError` (a
  `ValueError`) when the graph has a cycle; `add_edge` raises `IndexError` for
  a vertex outside the graph.
- `Trie.search_with_value` raises `KeyError` for a word that is not stored.
  `Trie.delete` returns whether the word was present and never removes the
  empty word.
- `Stack.pop` and `Stack.peek` in `dsakit.dfs` raise `IndexError` on an empty
  stack; `Queue.dequeue` in `dsakit.bfs` returns `None` on an empty queue.
- The DFS traversal functions return the visit order as a list;
  `dfs_debug` returns its trace as a list of indented lines.
- `MapUnionFind.find` adds an unknown element as a new singleton set.

## Installation

```
pip install .
```

## Examples

```python
from dsakit.binary_search import binary_search, lower_bound
from dsakit.kmp import kmp_search

binary_search([1, 3, 5, 7, 9, 11, 13], 7)       # 3
lower_bound([1, 2, 2, 2, 3, 4, 5], 2)           # 1
kmp_search("AABAACAADAABAAABAA", "AABA")        # [0, 9, 13]
```

```python
from dsakit.trie import Trie

words = Trie()
for word in ("cat", "car", "cart", "dog", "done"):
    words.insert(word)

words.search("car")          # True
words.search("do")           # False
words.starts_with("do")      # True
len(words)                   # 5
```

```python
from dsakit.union_find import MapUnionFind

network = MapUnionFind()
network.union("serverA", "serverB")
network.union("serverB", "serverC")
network.connected("serverA", "serverC")   # True
network.size_of("serverA")                # 3
```

```python
from dsakit.merge_intervals import Interval, merge_intervals

merge_intervals([Interval(1, 3), Interval(2, 6), Interval(8, 10)])
# [Interval(start=1, end=6), Interval(start=8, end=10)]
```

## Demonstrations

Each algorithm family comes with a short command that prints worked examples:

```
dsakit-binary-search
dsakit-kmp
dsakit-two-pointer
dsakit-sliding-window
dsakit-dfs
dsakit-merge-intervals
dsakit-quickselect
dsakit-bfs
dsakit-binary-tree
dsakit-topological
dsakit-trie
dsakit-union-find
```

## Running the tests

```
pip install ".[test]"
pytest
```