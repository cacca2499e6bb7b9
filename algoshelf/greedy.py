"""Greedy algorithms: the fractional knapsack and Huffman coding."""

from __future__ import annotations

import heapq
import itertools
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Item:
    """An item of positive weight carrying a profit."""

    weight: float
    profit: float

    def __post_init__(self) -> None:
        if self.weight <= 0:
            raise ValueError("item weight must be positive")

    @property
    def profit_per_unit(self) -> float:
        return self.profit / self.weight


def fractional_knapsack(
    capacity: float, items: Iterable[Item]
) -> tuple[float, list[tuple[float, float]]]:
    """Fill a knapsack greedily by profit per unit of weight.

    Whole items are taken from the best ratio down; the first that no longer
    fits is taken in part. Returns the total profit and the (weight, profit)
    taken from each item in the order they were taken.
    """
    ranked = sorted(items, key=lambda item: item.profit_per_unit, reverse=True)
    total = 0.0
    taken: list[tuple[float, float]] = []
    remaining = float(capacity)
    for item in ranked:
        if remaining <= 0:
            break
        if remaining >= item.weight:
            total += item.profit
            remaining -= item.weight
            taken.append((item.weight, item.profit))
        else:
            part = item.profit_per_unit * remaining
            total += part
            taken.append((remaining, part))
            break
    return total, taken


@dataclass(eq=False)
class _Node:
    frequency: float
    symbol: str | None = None
    left: _Node | None = None
    right: _Node | None = None


def huffman_codes(
    frequencies: Union[Mapping[str, float], Iterable[tuple[str, float]]],
) -> dict[str, str]:
    """Build a Huffman code for symbols with the given frequencies.

    The two lightest subtrees are merged repeatedly, the first taken going
    left ('0'). Codes are listed in pre-order of the tree. A single symbol
    gets the empty code.
    """
    pairs = list(frequencies.items() if isinstance(frequencies, Mapping) else frequencies)
    if not pairs:
        raise ValueError("at least one symbol is needed")
    order = itertools.count()
    heap = [(frequency, next(order), _Node(frequency, symbol)) for symbol, frequency in pairs]
    heapq.heapify(heap)
    while len(heap) > 1:
        left_freq, _, left = heapq.heappop(heap)
        right_freq, _, right = heapq.heappop(heap)
        merged = _Node(left_freq + right_freq, left=left, right=right)
        heapq.heappush(heap, (merged.frequency, next(order), merged))

    codes: dict[str, str] = {}
    pending = [(heap[0][2], "")]
    while pending:
        node, code = pending.pop()
        if node.symbol is not None:
            codes[node.symbol] = code
            continue
        if node.right is not None:
            pending.append((node.right, code + "1"))
        if node.left is not None:
            pending.append((node.left, code + "0"))
    return codes