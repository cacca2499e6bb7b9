"""First-in first-out queues: linked, fixed-array and circular."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from typing import Any


class QueueEmptyError(IndexError):
    """Raised when taking from or looking into an empty queue."""


class QueueFullError(OverflowError):
    """Raised when adding to a queue that has no room left."""


class LinkedQueue:
    """An unbounded queue of items."""

    def __init__(self) -> None:
        self._items: deque[Any] = deque()

    def enqueue(self, item: Any) -> None:
        """Add item at the rear."""
        self._items.append(item)

    def dequeue(self) -> Any:
        """Remove and return the front item."""
        if not self._items:
            raise QueueEmptyError("queue is empty")
        return self._items.popleft()

    def front(self) -> Any:
        """Return the front item without removing it."""
        if not self._items:
            raise QueueEmptyError("queue is empty")
        return self._items[0]

    def clear(self) -> None:
        """Remove every item."""
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._items))


class ArrayQueue:
    """A linear queue in a fixed array of capacity slots.

    Slots freed at the front are not reused until the queue empties, so the
    queue is full once the rear reaches the last slot.
    """

    def __init__(self, capacity: int = 10) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self._slots: list[Any] = [None] * capacity
        self._front = -1
        self._rear = -1

    def enqueue(self, item: Any) -> None:
        """Store item in the next slot after the rear."""
        if self._rear == len(self._slots) - 1:
            raise QueueFullError("queue is full")
        if self._front == -1:
            self._front = 0
        self._rear += 1
        self._slots[self._rear] = item

    def dequeue(self) -> Any:
        """Remove and return the front item."""
        if self._front == -1:
            raise QueueEmptyError("queue is empty")
        item = self._slots[self._front]
        self._slots[self._front] = None
        if self._front == self._rear:
            self._front = self._rear = -1
        else:
            self._front += 1
        return item

    def __len__(self) -> int:
        return 0 if self._front == -1 else self._rear - self._front + 1

    def __iter__(self) -> Iterator[Any]:
        if self._front == -1:
            return iter(())
        return iter(self._slots[self._front:self._rear + 1])


class CircularQueue:
    """A queue kept as a ring whose rear links back to its front."""

    def __init__(self) -> None:
        self._ring: deque[Any] = deque()

    def enqueue(self, item: Any) -> None:
        """Add item after the rear."""
        self._ring.append(item)

    def dequeue(self) -> Any:
        """Remove and return the front item."""
        if not self._ring:
            raise QueueEmptyError("queue is empty")
        return self._ring.popleft()

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._ring))