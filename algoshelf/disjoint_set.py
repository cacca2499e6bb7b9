"""Union-find over the integers 0..size with union by rank and path compression."""

from __future__ import annotations


class DisjointSet:
    """Disjoint subsets of the elements 0 to size, each starting on its own."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self._parent = list(range(size + 1))
        self._rank = [1] * (size + 1)

    def _check(self, x: int) -> None:
        if not 0 <= x < len(self._parent):
            raise IndexError(f"element {x} is out of range")

    def find(self, x: int) -> int:
        """Return the representative of the subset holding x."""
        self._check(x)
        root = x
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[x] != root:
            self._parent[x], x = root, self._parent[x]
        return root

    def union(self, x: int, y: int) -> bool:
        """Merge the subsets of x and y; return False if they were already one."""
        a, b = self.find(x), self.find(y)
        if a == b:
            return False
        if self._rank[a] < self._rank[b]:
            self._parent[a] = b
        elif self._rank[a] > self._rank[b]:
            self._parent[b] = a
        else:
            self._parent[a] = b
            self._rank[b] += 1
        return True

    def connected(self, x: int, y: int) -> bool:
        """Tell whether x and y are in the same subset."""
        return self.find(x) == self.find(y)