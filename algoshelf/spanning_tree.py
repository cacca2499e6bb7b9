"""Minimum spanning forest cost by Kruskal's method."""

from __future__ import annotations

from collections.abc import Iterable

from algoshelf.disjoint_set import DisjointSet

Edge = tuple[int, int, float]


def kruskal(node_count: int, edges: Iterable[Edge]) -> float:
    """Return the total cost of a minimum spanning forest.

    Nodes are numbered 0..node_count, so graphs numbered from either 0 or 1
    fit. Edges are (from, to, cost) and undirected; they are taken in order
    of cost, ties broken by their end points.
    """
    if node_count < 0:
        raise ValueError("node_count must not be negative")
    ordered = []
    for src, dst, cost in edges:
        for node in (src, dst):
            if not 0 <= node <= node_count:
                raise ValueError(f"node {node} is outside 0..{node_count}")
        ordered.append((cost, src, dst))
    ordered.sort()

    components = DisjointSet(node_count)
    total: float = 0
    for cost, src, dst in ordered:
        if components.union(src, dst):
            total += cost
    return total