"""A circular singly linked list of values."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from typing import Any


class CircularList:
    """A ring of values with a distinguished head.

    Advancing drops the head, making the next value the new head.
    """

    def __init__(self) -> None:
        self._ring: deque[Any] = deque()

    def insert_front(self, value: Any) -> None:
        """Insert value before the head; it becomes the new head."""
        self._ring.appendleft(value)

    def insert_tail(self, value: Any) -> None:
        """Insert value after the last node, just before the head."""
        self._ring.append(value)

    def head(self) -> Any:
        """Return the value at the head."""
        if not self._ring:
            raise IndexError("list is empty")
        return self._ring[0]

    def advance(self) -> None:
        """Unlink the head so that the following node becomes the head."""
        if not self._ring:
            raise IndexError("list is empty")
        self._ring.popleft()

    def render(self) -> str:
        """Describe the list, showing the ring closing back on the head."""
        if not self._ring:
            return "List is empty !"
        cells = "".join(f"{value} -> " for value in self._ring)
        return f"CLL list: {cells}{self._ring[0]}\nTotal element: {len(self._ring)}"

    def __contains__(self, value: object) -> bool:
        return value in self._ring

    def __len__(self) -> int:
        return len(self._ring)

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._ring))