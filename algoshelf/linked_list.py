"""Singly linked lists: one built from linked nodes, one kept in a fixed pool
of array slots with a free list."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any

_NIL = -1


@dataclass(eq=False)
class _Node:
    value: Any
    next: _Node | None = None


class LinkedList:
    """A singly linked list of values in insertion order."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: _Node | None = None
        self._tail: _Node | None = None
        for value in values:
            self.append(value)

    def append(self, value: Any) -> None:
        """Add value at the end of the list."""
        node = _Node(value)
        if self._tail is None:
            self._head = self._tail = node
        else:
            self._tail.next = node
            self._tail = node

    def remove(self, value: Any) -> None:
        """Remove the first node holding value.

        Raises ValueError when the list is empty or value is not in it.
        """
        if self._head is None:
            raise ValueError("linked list is empty")
        previous: _Node | None = None
        current: _Node | None = self._head
        while current is not None and current.value != value:
            previous, current = current, current.next
        if current is None:
            raise ValueError(f"{value!r} not found in list")
        if previous is None:
            self._head = current.next
        else:
            previous.next = current.next
        if current is self._tail:
            self._tail = previous

    def reverse(self) -> None:
        """Reverse the order of the nodes in place."""
        previous: _Node | None = None
        current = self._head
        self._tail = current
        while current is not None:
            current.next, previous, current = previous, current, current.next
        self._head = previous

    def __contains__(self, value: object) -> bool:
        return any(item == value for item in self)

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next


class ArrayLinkedList:
    """A linked list whose nodes live in a fixed pool of capacity slots.

    Links are slot indices; free slots are chained into an availability list.
    """

    def __init__(self, capacity: int = 100) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._values: list[Any] = [None] * capacity
        self._next: list[int] = list(range(1, capacity)) + [_NIL] if capacity else []
        self._avail = 0 if capacity else _NIL
        self._head = _NIL

    def _take_slot(self) -> int:
        if self._avail == _NIL:
            raise OverflowError("no free nodes left in the pool")
        slot = self._avail
        self._avail = self._next[slot]
        return slot

    def insert_front(self, value: Any) -> None:
        """Put value at the start of the list."""
        slot = self._take_slot()
        self._values[slot] = value
        self._next[slot] = self._head
        self._head = slot

    def insert_end(self, value: Any) -> None:
        """Put value at the end of the list."""
        slot = self._take_slot()
        self._values[slot] = value
        self._next[slot] = _NIL
        if self._head == _NIL:
            self._head = slot
            return
        last = self._head
        while self._next[last] != _NIL:
            last = self._next[last]
        self._next[last] = slot

    def __iter__(self) -> Iterator[Any]:
        slot = self._head
        while slot != _NIL:
            yield self._values[slot]
            slot = self._next[slot]