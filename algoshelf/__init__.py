"""Classic algorithms and data structures: backtracking, numerical methods, dynamic programming, graphs, greedy methods and containers."""

__version__ = "0.1.0"

__all__ = [
    "avl_tree",
    "backtracking",
    "binary_heap",
    "binary_tree",
    "circular_list",
    "disjoint_set",
    "dynamic_programming",
    "greedy",
    "lca",
    "linked_list",
    "numerics",
    "queues",
    "shortest_paths",
    "spanning_tree",
    "stack",
    "traversal",
    "trie",
]