"""Shortest paths: Bellman-Ford, Floyd-Warshall and two forms of Dijkstra."""

from __future__ import annotations

import heapq
import math
from collections.abc import Iterable, Sequence

INF = math.inf

Edge = tuple[int, int, float]


class NegativeCycleError(ValueError):
    """Raised when a negative-weight cycle makes shortest distances undefined."""


def _check_vertex(vertex: int, low: int, high: int, name: str) -> None:
    if not low <= vertex <= high:
        raise ValueError(f"{name} {vertex} is outside {low}..{high}")


def _checked_edges(
    edges: Iterable[Edge], low: int, high: int
) -> list[Edge]:
    checked = []
    for src, dst, weight in edges:
        _check_vertex(src, low, high, "edge source")
        _check_vertex(dst, low, high, "edge destination")
        checked.append((src, dst, weight))
    return checked


def bellman_ford(
    vertex_count: int, edges: Iterable[Edge], source: int
) -> list[float]:
    """Return distances from source to vertices 0..vertex_count-1 over directed edges.

    Unreachable vertices get math.inf. Raises NegativeCycleError when a
    negative cycle is reachable from source.
    """
    _check_vertex(source, 0, vertex_count - 1, "source")
    edge_list = _checked_edges(edges, 0, vertex_count - 1)
    dist: list[float] = [INF] * vertex_count
    dist[source] = 0

    for _ in range(vertex_count):
        changed = False
        for u, v, w in edge_list:
            if dist[u] != INF and dist[u] + w < dist[v]:
                dist[v] = dist[u] + w
                changed = True
        if not changed:
            break

    for u, v, w in edge_list:
        if dist[u] != INF and dist[u] + w < dist[v]:
            raise NegativeCycleError(
                "graph contains a negative weight cycle; shortest distances are not defined"
            )
    return dist


def floyd_warshall(vertex_count: int, edges: Iterable[Edge]) -> list[list[float]]:
    """Return the matrix of shortest distances between all pairs of vertices.

    A later edge between the same pair replaces an earlier one. Missing
    paths are math.inf.
    """
    if vertex_count < 0:
        raise ValueError("vertex_count must not be negative")
    dist: list[list[float]] = [
        [0 if i == j else INF for j in range(vertex_count)] for i in range(vertex_count)
    ]
    for src, dst, weight in _checked_edges(edges, 0, vertex_count - 1):
        dist[src][dst] = weight

    for k in range(vertex_count):
        through = dist[k]
        for row in dist:
            to_k = row[k]
            if to_k == INF:
                continue
            for j, k_to_j in enumerate(through):
                if k_to_j != INF and to_k + k_to_j < row[j]:
                    row[j] = to_k + k_to_j
    return dist


def dijkstra(
    node_count: int,
    edges: Iterable[Edge],
    source: int,
    directed: bool = False,
) -> dict[int, float]:
    """Return distances from source to nodes 1..node_count.

    Edges are undirected unless directed is true. Weights must not be
    negative. Unreachable nodes get math.inf.
    """
    _check_vertex(source, 1, node_count, "source")
    adjacency: dict[int, list[tuple[float, int]]] = {
        node: [] for node in range(1, node_count + 1)
    }
    for src, dst, weight in _checked_edges(edges, 1, node_count):
        if weight < 0:
            raise ValueError("edge weights must not be negative")
        adjacency[src].append((weight, dst))
        if not directed:
            adjacency[dst].append((weight, src))

    dist: dict[int, float] = {node: INF for node in adjacency}
    dist[source] = 0
    pending: list[tuple[float, int]] = [(0, source)]
    while pending:
        d, u = heapq.heappop(pending)
        if d > dist[u]:
            continue
        for weight, v in adjacency[u]:
            if d + weight < dist[v]:
                dist[v] = d + weight
                heapq.heappush(pending, (dist[v], v))
    return dist


def dijkstra_dense(weights: Sequence[Sequence[float]], source: int) -> list[float]:
    """Return distances from source in a graph given as a weight matrix.

    A zero entry means there is no edge. Unreachable vertices get math.inf.
    """
    size = len(weights)
    if any(len(row) != size for row in weights):
        raise ValueError("weights must be a square matrix")
    _check_vertex(source, 0, size - 1, "source")

    dist: list[float] = [INF] * size
    dist[source] = 0
    done = [False] * size
    for _ in range(size - 1):
        candidates = [(d, i) for i, d in enumerate(dist) if not done[i] and d != INF]
        if not candidates:
            break
        _, u = min(candidates)
        done[u] = True
        for v, weight in enumerate(weights[u]):
            if not done[v] and weight and dist[u] + weight < dist[v]:
                dist[v] = dist[u] + weight
    return dist