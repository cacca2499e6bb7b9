"""A last-in first-out stack, and a report of the students with the highest GPA."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Iterator, Sequence
from pathlib import Path
from typing import Any


class StackEmptyError(IndexError):
    """Raised when taking from or looking into an empty stack."""


class Stack:
    """A stack of items; iteration runs from the top down."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._items: list[Any] = list(items)

    def push(self, item: Any) -> None:
        """Put item on top of the stack."""
        self._items.append(item)

    def pop(self) -> Any:
        """Remove and return the top item."""
        if not self._items:
            raise StackEmptyError("stack is empty")
        return self._items.pop()

    def top(self) -> Any:
        """Return the top item without removing it."""
        if not self._items:
            raise StackEmptyError("stack is empty")
        return self._items[-1]

    def clear(self) -> None:
        """Remove every item."""
        self._items.clear()

    def copy(self) -> Stack:
        """Return an independent stack holding the same items in the same order."""
        return Stack(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items[::-1])


def highest_gpa_students(records: Iterable[tuple[float, str]]) -> tuple[float, list[str]]:
    """Return the highest GPA and the names that share it.

    Names come back in stack order: the last one read comes first.
    """
    names = Stack()
    highest: float | None = None
    for gpa, name in records:
        if highest is None or gpa > highest:
            names.clear()
            names.push(name)
            highest = gpa
        elif gpa == highest:
            names.push(name)
    if highest is None:
        raise ValueError("no student records given")
    return highest, list(names)


def read_student_records(path: str | Path) -> list[tuple[float, str]]:
    """Read whitespace-separated pairs of GPA and name from a file.

    Reading stops at the first pair that is incomplete or whose GPA is not a number.
    """
    tokens = Path(path).read_text().split()
    records = []
    for gpa_token, name in zip(tokens[::2], tokens[1::2]):
        try:
            gpa = float(gpa_token)
        except ValueError:
            break
        records.append((gpa, name))
    return records


def main(argv: Sequence[str] | None = None) -> int:
    """Print the highest GPA in a file and the students who have it."""
    parser = argparse.ArgumentParser(
        description="Report the students with the highest GPA."
    )
    parser.add_argument("path", help="file of GPA and name pairs")
    args = parser.parse_args(argv)
    highest, names = highest_gpa_students(read_student_records(args.path))
    print(f"Highest GPA: {highest:.2f}")
    print("Students the highest GPA are: ")
    for name in names:
        print(name)
    print()
    return 0