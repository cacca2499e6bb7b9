"""Graph traversals: breadth-first, depth-first (recursive order and stack
based), topological sort and counting strongly connected components."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Mapping, Sequence
from typing import Union

Adjacency = Union[Mapping[int, Sequence[int]], Sequence[Sequence[int]]]

_GREY = 1
_BLACK = 2


def _neighbours(adjacency: Adjacency, vertex: int) -> Sequence[int]:
    if isinstance(adjacency, Mapping):
        return adjacency.get(vertex, ())
    if 0 <= vertex < len(adjacency):
        return adjacency[vertex]
    return ()


def _build_adjacency(vertex_count: int, edges: Iterable[tuple[int, int]]) -> list[list[int]]:
    if vertex_count < 0:
        raise ValueError("vertex_count must not be negative")
    adjacency: list[list[int]] = [[] for _ in range(vertex_count)]
    for u, v in edges:
        if not (0 <= u < vertex_count and 0 <= v < vertex_count):
            raise ValueError(f"edge ({u}, {v}) names a vertex outside 0..{vertex_count - 1}")
        adjacency[u].append(v)
    return adjacency


def _finish_order(
    adjacency: Sequence[Sequence[int]], roots: Iterable[int], visited: set[int]
) -> list[int]:
    """Depth-first search from each unvisited root; return vertices as they finish."""
    order = []
    for root in roots:
        if root in visited:
            continue
        visited.add(root)
        stack = [(root, iter(adjacency[root]))]
        while stack:
            node, remaining = stack[-1]
            for neighbour in remaining:
                if neighbour not in visited:
                    visited.add(neighbour)
                    stack.append((neighbour, iter(adjacency[neighbour])))
                    break
            else:
                stack.pop()
                order.append(node)
    return order


def bfs(adjacency: Adjacency, start: int) -> list[int]:
    """Return vertices reachable from start in breadth-first order.

    adjacency maps each vertex to its successors, as a mapping or a list.
    """
    visited = {start}
    order = []
    pending = deque([start])
    while pending:
        vertex = pending.popleft()
        order.append(vertex)
        for neighbour in _neighbours(adjacency, vertex):
            if neighbour not in visited:
                visited.add(neighbour)
                pending.append(neighbour)
    return order


def dfs(matrix: Sequence[Sequence[int]], start: int) -> list[int]:
    """Return vertices reachable from start in depth-first order.

    matrix is an adjacency matrix where 1 marks an edge; neighbours are
    tried in increasing order.
    """
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("matrix must be square")
    if not 0 <= start < size:
        raise ValueError(f"start {start} is outside 0..{size - 1}")
    visited = [False] * size
    visited[start] = True
    order = [start]
    stack = [(start, 0)]
    while stack:
        node, next_index = stack[-1]
        for i in range(next_index, size):
            if matrix[node][i] == 1 and not visited[i]:
                stack[-1] = (node, i + 1)
                visited[i] = True
                order.append(i)
                stack.append((i, 0))
                break
        else:
            stack.pop()
    return order


def dfs_iterative(adjacency: Adjacency, start: int) -> list[int]:
    """Return vertices reachable from start, visited with an explicit stack.

    All successors of a vertex are pushed in list order, so the last one
    listed is explored first.
    """
    state = {start: _GREY}
    stack = [start]
    order = []
    while stack:
        vertex = stack.pop()
        if state.get(vertex) != _GREY:
            continue
        order.append(vertex)
        for neighbour in _neighbours(adjacency, vertex):
            stack.append(neighbour)
            if state.get(neighbour) != _BLACK:
                state[neighbour] = _GREY
        state[vertex] = _BLACK
    return order


def topological_sort(vertex_count: int, edges: Iterable[tuple[int, int]]) -> list[int]:
    """Order vertices 0..vertex_count-1 so every directed edge points forward.

    The graph must be acyclic for the order to be meaningful.
    """
    adjacency = _build_adjacency(vertex_count, edges)
    order = _finish_order(adjacency, range(vertex_count), set())
    order.reverse()
    return order


def count_strongly_connected(vertex_count: int, edges: Iterable[tuple[int, int]]) -> int:
    """Return the number of strongly connected components, by Kosaraju's method."""
    adjacency = _build_adjacency(vertex_count, edges)
    finished = _finish_order(adjacency, range(vertex_count), set())
    reverse: list[list[int]] = [[] for _ in range(vertex_count)]
    for u, successors in enumerate(adjacency):
        for v in successors:
            reverse[v].append(u)
    visited: set[int] = set()
    count = 0
    for vertex in reversed(finished):
        if vertex not in visited:
            _finish_order(reverse, [vertex], visited)
            count += 1
    return count