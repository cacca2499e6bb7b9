"""Lowest common ancestors in a rooted tree by binary lifting."""

from __future__ import annotations

from collections.abc import Iterable


class LowestCommonAncestor:
    """Answers lowest-common-ancestor queries on a tree rooted at node 1.

    Nodes are numbered 1..node_count and the tree is given by its
    node_count - 1 undirected edges.
    """

    def __init__(self, node_count: int, edges: Iterable[tuple[int, int]]) -> None:
        if node_count < 1:
            raise ValueError("the tree needs at least one node")
        edge_list = list(edges)
        if len(edge_list) != node_count - 1:
            raise ValueError(f"a tree of {node_count} nodes has {node_count - 1} edges")
        self._count = node_count
        adjacency: list[list[int]] = [[] for _ in range(node_count)]
        for a, b in edge_list:
            self._check(a)
            self._check(b)
            adjacency[a - 1].append(b - 1)
            adjacency[b - 1].append(a - 1)

        parent = [-1] * node_count
        depth = [0] * node_count
        seen = [False] * node_count
        seen[0] = True
        pending = [0]
        while pending:
            node = pending.pop()
            for neighbour in adjacency[node]:
                if not seen[neighbour]:
                    seen[neighbour] = True
                    parent[neighbour] = node
                    depth[neighbour] = depth[node] + 1
                    pending.append(neighbour)
        if not all(seen):
            raise ValueError("the edges do not connect every node")

        self._depth = depth
        self._up = [parent]
        for _ in range(1, max(1, node_count.bit_length())):
            previous = self._up[-1]
            self._up.append([previous[p] if p != -1 else -1 for p in previous])

    def _check(self, node: int) -> None:
        if not 1 <= node <= self._count:
            raise ValueError(f"node {node} is outside 1..{self._count}")

    def level(self, node: int) -> int:
        """Return the depth of node; the root is at level 0."""
        self._check(node)
        return self._depth[node - 1]

    def query(self, u: int, v: int) -> int:
        """Return the deepest node that is an ancestor of both u and v."""
        self._check(u)
        self._check(v)
        u, v = u - 1, v - 1
        if self._depth[v] > self._depth[u]:
            u, v = v, u
        distance = self._depth[u] - self._depth[v]
        for power, ancestors in enumerate(self._up):
            if distance >> power & 1:
                u = ancestors[u]
        if u == v:
            return u + 1
        for ancestors in reversed(self._up):
            if ancestors[u] != ancestors[v]:
                u, v = ancestors[u], ancestors[v]
        return self._up[0][u] + 1