"""Dynamic programming classics: Catalan numbers, coin change, egg dropping,
Fibonacci, matrix chains, Armstrong numbers, Kadane's maximum subarray,
longest common substring and tree height."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from functools import lru_cache


def catalan_numbers(n: int) -> list[int]:
    """Return the Catalan numbers C(0) to C(n)."""
    if n < 0:
        raise ValueError("n must not be negative")
    catalan = [1]
    for i in range(1, n + 1):
        catalan.append(sum(catalan[j] * catalan[i - 1 - j] for j in range(i)))
    return catalan


def min_coins(coins: Sequence[int], total: int) -> int | None:
    """Return the fewest coins summing to total, or None when total cannot be made.

    Each coin value may be used any number of times.
    """
    if total < 0:
        raise ValueError("total must not be negative")
    if any(coin <= 0 for coin in coins):
        raise ValueError("coin values must be positive")
    best: list[int | None] = [0] + [None] * total
    for amount in range(1, total + 1):
        options = [
            previous + 1
            for coin in coins
            if coin <= amount and (previous := best[amount - coin]) is not None
        ]
        best[amount] = min(options, default=None)
    return best[total]


def egg_drop(eggs: int, floors: int) -> int:
    """Return the minimum number of drops that finds the critical floor in the worst case."""
    if eggs < 1:
        raise ValueError("at least one egg is needed")
    if floors < 0:
        raise ValueError("floors must not be negative")
    previous = list(range(floors + 1))
    for _ in range(2, eggs + 1):
        current = [0] * (floors + 1)
        if floors >= 1:
            current[1] = 1
        for j in range(2, floors + 1):
            current[j] = 1 + min(
                max(previous[x - 1], current[j - x]) for x in range(1, j + 1)
            )
        previous = current
    return previous[floors]


def fibonacci(n: int) -> int:
    """Return the n-th Fibonacci number, computed bottom-up."""
    if n < 0:
        raise ValueError("n must not be negative")
    a, b = 0, 1
    for _ in range(n):
        a, b = b, a + b
    return a


@lru_cache(maxsize=None)
def _fib_memo(n: int) -> int:
    if n <= 1:
        return n
    return _fib_memo(n - 1) + _fib_memo(n - 2)


def fibonacci_memo(n: int) -> int:
    """Return the n-th Fibonacci number, computed top-down with memoisation."""
    if n < 0:
        raise ValueError("n must not be negative")
    # Fill the cache in steps so the recursion never runs deep.
    for k in range(0, n, 256):
        _fib_memo(k)
    return _fib_memo(n)


def matrix_chain_cost(dims: Sequence[int]) -> int:
    """Return the fewest scalar multiplications to multiply a chain of matrices.

    Matrix i has dimensions dims[i - 1] x dims[i].
    """
    dims = list(dims)
    if not dims:
        raise ValueError("dims must not be empty")

    @lru_cache(maxsize=None)
    def cost(i: int, j: int) -> int:
        if j <= i + 1:
            return 0
        return min(
            cost(i, k) + cost(k, j) + dims[i] * dims[k] * dims[j]
            for k in range(i + 1, j)
        )

    return cost(0, len(dims) - 1)


def is_armstrong(n: int) -> bool:
    """Tell whether n equals the sum of the cubes of its digits, keeping its sign."""
    sign = -1 if n < 0 else 1
    return sign * sum(int(digit) ** 3 for digit in str(abs(n))) == n


def max_subarray_sum(values: Iterable[int]) -> int:
    """Return the largest sum of a non-empty contiguous run of values."""
    best: int | None = None
    running = 0
    for value in values:
        running += value
        if best is None or running > best:
            best = running
        if running < 0:
            running = 0
    if best is None:
        raise ValueError("values must not be empty")
    return best


def longest_common_substring(first: str, second: str) -> str:
    """Return the longest string found contiguously in both first and second.

    Among equally long candidates the one ending earliest in first wins.
    """
    best_length = 0
    best_end = 0
    previous = [0] * (len(second) + 1)
    for i, a in enumerate(first, start=1):
        current = [0] * (len(second) + 1)
        for j, b in enumerate(second, start=1):
            if a == b:
                current[j] = previous[j - 1] + 1
                if current[j] > best_length:
                    best_length = current[j]
                    best_end = i
        previous = current
    return first[best_end - best_length:best_end]


def tree_height(node_count: int, edges: Iterable[tuple[int, int]]) -> int:
    """Return the number of levels in a tree of nodes 1..node_count rooted at 1."""
    if node_count < 1:
        raise ValueError("the tree needs at least one node")
    adjacency: dict[int, list[int]] = {node: [] for node in range(1, node_count + 1)}
    for u, v in edges:
        if u not in adjacency or v not in adjacency:
            raise ValueError(f"edge ({u}, {v}) names a node outside 1..{node_count}")
        adjacency[u].append(v)
        adjacency[v].append(u)

    parent: dict[int, int | None] = {1: None}
    order = []
    pending = [1]
    while pending:
        node = pending.pop()
        order.append(node)
        for neighbour in adjacency[node]:
            if neighbour not in parent:
                parent[neighbour] = node
                pending.append(neighbour)

    height: dict[int, int] = {}
    for node in reversed(order):
        height[node] = 1 + max(
            (height[child] for child in adjacency[node] if parent.get(child) == node and child != 1),
            default=0,
        )
    return height[1]