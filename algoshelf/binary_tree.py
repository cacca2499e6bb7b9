"""A plain binary tree with level-order and path-directed insertion and the
usual traversals, including Morris in-order traversal."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class _Node:
    value: Any
    left: _Node | None = None
    right: _Node | None = None


class BinaryTree:
    """A binary tree of arbitrary values with no ordering between them."""

    def __init__(self) -> None:
        self._root: _Node | None = None

    def insert(self, value: Any) -> None:
        """Put value in the first free child slot in breadth-first order."""
        node = _Node(value)
        if self._root is None:
            self._root = node
            return
        pending = deque([self._root])
        while pending:
            current = pending.popleft()
            if current.left is None:
                current.left = node
                return
            pending.append(current.left)
            if current.right is None:
                current.right = node
                return
            pending.append(current.right)

    def insert_at(self, value: Any, path: str) -> None:
        """Place value by following path, a string of 'l' and 'r' steps.

        Steps are followed from the root until they lead to an empty slot,
        where the value is placed. The path must end exactly there.
        """
        if self._root is None:
            if path:
                raise ValueError("the tree is empty; only the root can be set")
            self._root = _Node(value)
            return
        if not path:
            raise ValueError("the root is already occupied")
        current = self._root
        for position, step in enumerate(path):
            if step not in ("l", "r"):
                raise ValueError(f"invalid step {step!r}; use 'l' or 'r'")
            child = current.left if step == "l" else current.right
            if child is None:
                if position != len(path) - 1:
                    raise ValueError("path continues past an empty slot")
                if step == "l":
                    current.left = _Node(value)
                else:
                    current.right = _Node(value)
                return
            current = child
        raise ValueError("path ends on an occupied node")

    def morris_inorder(self) -> list[Any]:
        """Return values in in-order, walking the tree with temporary threads."""
        result = []
        current = self._root
        while current is not None:
            if current.left is None:
                result.append(current.value)
                current = current.right
                continue
            predecessor = current.left
            while predecessor.right is not None and predecessor.right is not current:
                predecessor = predecessor.right
            if predecessor.right is None:
                predecessor.right = current
                current = current.left
            else:
                result.append(current.value)
                predecessor.right = None
                current = current.right
        return result

    def breadth_first(self) -> list[Any]:
        """Return values level by level, left to right."""
        if self._root is None:
            return []
        result = []
        pending = deque([self._root])
        while pending:
            node = pending.popleft()
            result.append(node.value)
            if node.left is not None:
                pending.append(node.left)
            if node.right is not None:
                pending.append(node.right)
        return result

    def preorder(self) -> list[Any]:
        """Return values node first, then left and right subtrees."""
        result = []

        def visit(node: _Node | None) -> None:
            if node is not None:
                result.append(node.value)
                visit(node.left)
                visit(node.right)

        visit(self._root)
        return result

    def inorder(self) -> list[Any]:
        """Return values left subtree first, then node, then right subtree."""
        result = []

        def visit(node: _Node | None) -> None:
            if node is not None:
                visit(node.left)
                result.append(node.value)
                visit(node.right)

        visit(self._root)
        return result

    def postorder(self) -> list[Any]:
        """Return values of both subtrees before the node itself."""
        result = []

        def visit(node: _Node | None) -> None:
            if node is not None:
                visit(node.left)
                visit(node.right)
                result.append(node.value)

        visit(self._root)
        return result