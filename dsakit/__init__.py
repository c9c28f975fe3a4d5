"""Classic algorithms and data structures: searching, two pointers, sliding windows,
graph traversal, string matching, intervals, selection, tries and disjoint sets."""

__version__ = "0.1.0"

__all__ = [
    "binary_search",
    "kmp",
    "two_pointer",
    "sliding_window",
    "dfs",
    "merge_intervals",
    "quickselect",
    "bfs",
    "binary_tree",
    "topological",
    "trie",
    "union_find",
]