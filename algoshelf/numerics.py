"""Numerical methods: Gaussian elimination and the false-position root finder."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class EliminationResult:
    """The upper-triangular augmented matrix and the solution vector."""

    matrix: list[list[float]]
    solution: list[float]


def gaussian_elimination(augmented: Sequence[Sequence[float]]) -> EliminationResult:
    """Solve a linear system given as an n x (n+1) augmented matrix.

    Elimination runs without pivoting. A zero on the diagonal during back
    substitution gives 0 for that unknown.
    """
    rows = [[float(value) for value in row] for row in augmented]
    size = len(rows)
    if any(len(row) != size + 1 for row in rows):
        raise ValueError("augmented matrix must have n rows of n + 1 values")

    for step in range(size - 1):
        pivot_row = rows[step]
        pivot = pivot_row[step]
        if pivot == 0:
            raise ValueError(f"zero pivot at step {step}")
        for row in rows[step + 1:]:
            factor = row[step] / pivot
            row[step:] = [a - factor * b for a, b in zip(row[step:], pivot_row[step:])]

    solution = [0.0] * size
    for i in reversed(range(size)):
        row = rows[i]
        total = sum(row[j] * solution[j] for j in reversed(range(i + 1, size)))
        solution[i] = 0.0 if row[i] == 0 else (row[size] - total) / row[i]

    return EliminationResult(matrix=rows, solution=solution)


def false_position(
    func: Callable[[float], float],
    search_limit: int = 100,
    max_iterations: int = 100,
) -> float:
    """Approximate a root of func by regula falsi.

    The bracket is [i - 1, i] for the first integer i in [0, search_limit)
    where func(i) >= 0. Only the lower end moves; iteration stops early once
    0 < func(c) < 0.09.
    """
    if max_iterations < 1:
        raise ValueError("max_iterations must be at least 1")
    upper = next((i for i in range(search_limit) if func(i) >= 0), None)
    if upper is None:
        raise ValueError("no sign change found in the search range")

    a, b = float(upper - 1), float(upper)
    root = a
    for _ in range(max_iterations):
        fa, fb = func(a), func(b)
        if fb == fa:
            raise ValueError("function values at bracket ends are equal")
        root = (a * fb - b * fa) / (fb - fa)
        a = root
        if 0 < func(root) < 0.09:
            break
    return root