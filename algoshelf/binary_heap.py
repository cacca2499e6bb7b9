"""A fixed-capacity binary min-heap with key decrease and deletion by index."""

from __future__ import annotations

from typing import Any


class HeapOverflowError(OverflowError):
    """Raised when inserting into a heap that is already full."""


class MinHeap:
    """An array-backed binary min-heap holding at most capacity keys."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items: list[Any] = []

    def __len__(self) -> int:
        return len(self._items)

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._items):
            raise IndexError("heap index out of range")

    def _sift_up(self, index: int) -> None:
        items = self._items
        while index > 0:
            parent = (index - 1) // 2
            if items[parent] <= items[index]:
                break
            items[parent], items[index] = items[index], items[parent]
            index = parent

    def _sift_down(self, index: int) -> None:
        items = self._items
        size = len(items)
        while True:
            smallest = index
            for child in (2 * index + 1, 2 * index + 2):
                if child < size and items[child] < items[smallest]:
                    smallest = child
            if smallest == index:
                return
            items[index], items[smallest] = items[smallest], items[index]
            index = smallest

    def insert(self, key: Any) -> None:
        """Add key, raising HeapOverflowError when the heap is full."""
        if len(self._items) >= self.capacity:
            raise HeapOverflowError("could not insert key: heap is full")
        self._items.append(key)
        self._sift_up(len(self._items) - 1)

    def decrease_key(self, index: int, new_value: Any) -> None:
        """Lower the key at index to new_value and restore heap order."""
        self._check_index(index)
        if new_value > self._items[index]:
            raise ValueError("new value is larger than the current key")
        self._items[index] = new_value
        self._sift_up(index)

    def extract_min(self) -> Any:
        """Remove and return the smallest key."""
        if not self._items:
            raise IndexError("extract from an empty heap")
        items = self._items
        smallest = items[0]
        last = items.pop()
        if items:
            items[0] = last
            self._sift_down(0)
        return smallest

    def delete_key(self, index: int) -> None:
        """Remove the key stored at index."""
        self._check_index(index)
        self._items[index] = float("-inf")
        self._sift_up(index)
        self.extract_min()

    def minimum(self) -> Any:
        """Return the smallest key without removing it."""
        if not self._items:
            raise IndexError("minimum of an empty heap")
        return self._items[0]