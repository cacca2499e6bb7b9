import random

import pytest

from algoshelf.traversal import (
    bfs,
    count_strongly_connected,
    dfs,
    dfs_iterative,
    topological_sort,
)


def _random_adjacency(seed, n, p=0.3):
    rng = random.Random(seed)
    return [[v for v in range(n) if v != u and rng.random() < p] for u in range(n)]


def _edges(adjacency):
    return [(u, v) for u, successors in enumerate(adjacency) for v in successors]


def test_bfs_small_example():
    assert bfs({0: [1, 2], 1: [3]}, 0) == [0, 1, 2, 3]


@pytest.mark.parametrize("seed", range(6))
def test_bfs_levels_never_decrease(seed):
    adjacency = _random_adjacency(seed, 9)
    order = bfs(adjacency, 0)
    assert order[0] == 0
    level = {0: 0}
    for vertex in order:
        for neighbour in adjacency[vertex]:
            level.setdefault(neighbour, level[vertex] + 1)
    levels = [level[v] for v in order]
    assert levels == sorted(levels)
    assert len(order) == len(set(order))


def test_bfs_vertex_without_entry_has_no_successors():
    assert bfs({0: [5]}, 0) == [0, 5]


def test_dfs_matrix_example():
    graph = [[0, 1, 1, 0], [0, 0, 1, 0], [1, 0, 0, 1], [0, 0, 0, 1]]
    assert dfs(graph, 2) == [2, 0, 1, 3]


@pytest.mark.parametrize("seed", range(6))
def test_dfs_reaches_same_vertices_as_bfs(seed):
    adjacency = _random_adjacency(seed, 8)
    n = len(adjacency)
    matrix = [[1 if v in adjacency[u] else 0 for v in range(n)] for u in range(n)]
    order = dfs(matrix, 0)
    assert set(order) == set(bfs(adjacency, 0))
    assert len(order) == len(set(order))
    for position, vertex in enumerate(order[1:], start=1):
        assert any(matrix[earlier][vertex] == 1 for earlier in order[:position])


def test_dfs_rejects_bad_start():
    with pytest.raises(ValueError):
        dfs([[0]], 1)


def test_dfs_rejects_non_square():
    with pytest.raises(ValueError):
        dfs([[0, 1]], 0)


def test_dfs_iterative_last_successor_first():
    assert dfs_iterative({0: [1, 2]}, 0) == [0, 2, 1]


@pytest.mark.parametrize("seed", range(6))
def test_dfs_iterative_visits_reachable_once(seed):
    adjacency = _random_adjacency(seed, 10)
    order = dfs_iterative(adjacency, 3)
    assert order[0] == 3
    assert len(order) == len(set(order))
    assert set(order) == set(bfs(adjacency, 3))


@pytest.mark.parametrize("seed", range(6))
def test_topological_sort_orders_every_edge(seed):
    rng = random.Random(seed)
    n = 9
    labels = list(range(n))
    rng.shuffle(labels)
    edges = [
        (labels[i], labels[j])
        for i in range(n)
        for j in range(i + 1, n)
        if rng.random() < 0.3
    ]
    order = topological_sort(n, edges)
    assert sorted(order) == list(range(n))
    position = {v: i for i, v in enumerate(order)}
    for u, v in edges:
        assert position[u] < position[v]


def test_topological_sort_rejects_bad_edge():
    with pytest.raises(ValueError):
        topological_sort(2, [(0, 2)])


def test_scc_of_dag_is_vertex_count():
    edges = [(0, 1), (1, 2), (0, 2), (2, 3)]
    assert count_strongly_connected(4, edges) == 4


@pytest.mark.parametrize("seed", range(8))
def test_scc_count_matches_mutual_reachability(seed):
    adjacency = _random_adjacency(seed, 8, p=0.2)
    n = len(adjacency)
    reach = {v: set(bfs(adjacency, v)) for v in range(n)}
    classes = {
        frozenset(u for u in range(n) if u in reach[v] and v in reach[u])
        for v in range(n)
    }
    assert count_strongly_connected(n, _edges(adjacency)) == len(classes)


def test_scc_rejects_bad_edge():
    with pytest.raises(ValueError):
        count_strongly_connected(2, [(-1, 0)])