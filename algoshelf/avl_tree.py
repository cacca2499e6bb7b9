"""A self-balancing AVL search tree."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Any


@dataclass
class _Node:
    key: Any
    left: _Node | None = None
    right: _Node | None = None
    height: int = 1


def _height(node: _Node | None) -> int:
    return node.height if node is not None else 0


def _update(node: _Node) -> None:
    node.height = 1 + max(_height(node.left), _height(node.right))


def _balance(node: _Node) -> int:
    return _height(node.left) - _height(node.right)


def _rotate_right(root: _Node) -> _Node:
    pivot = root.left
    assert pivot is not None
    root.left = pivot.right
    pivot.right = root
    _update(root)
    _update(pivot)
    return pivot


def _rotate_left(root: _Node) -> _Node:
    pivot = root.right
    assert pivot is not None
    root.right = pivot.left
    pivot.left = root
    _update(root)
    _update(pivot)
    return pivot


def _insert(node: _Node | None, key: Any) -> _Node:
    if node is None:
        return _Node(key)
    if key < node.key:
        node.left = _insert(node.left, key)
    else:
        node.right = _insert(node.right, key)
    _update(node)
    balance = _balance(node)
    if balance > 1:
        assert node.left is not None
        if _balance(node.left) < 0:
            node.left = _rotate_left(node.left)
        return _rotate_right(node)
    if balance < -1:
        assert node.right is not None
        if _balance(node.right) > 0:
            node.right = _rotate_right(node.right)
        return _rotate_left(node)
    return node


def _delete(node: _Node | None, key: Any) -> _Node | None:
    if node is None:
        return None
    if key < node.key:
        node.left = _delete(node.left, key)
    elif key > node.key:
        node.right = _delete(node.right, key)
    else:
        if node.right is None:
            return node.left
        if node.left is None:
            return node.right
        successor = node.right
        while successor.left is not None:
            successor = successor.left
        node.key = successor.key
        node.right = _delete(node.right, successor.key)
    _update(node)
    return node


class AVLTree:
    """A binary search tree kept height-balanced on insertion.

    Equal keys go to the right subtree. Deletion removes the key in the usual
    search-tree way, replacing a node with two children by its in-order
    successor, and does not rebalance.
    """

    def __init__(self) -> None:
        self._root: _Node | None = None

    def insert(self, key: Any) -> None:
        """Insert key and restore the balance along the insertion path."""
        self._root = _insert(self._root, key)

    def delete(self, key: Any) -> None:
        """Remove one occurrence of key; absent keys are ignored."""
        self._root = _delete(self._root, key)

    def level_order(self) -> list[Any]:
        """Return the keys in breadth-first order, left to right."""
        if self._root is None:
            return []
        keys = []
        pending = deque([self._root])
        while pending:
            node = pending.popleft()
            keys.append(node.key)
            if node.left is not None:
                pending.append(node.left)
            if node.right is not None:
                pending.append(node.right)
        return keys

    def height(self) -> int:
        """Return the number of levels in the tree; 0 when empty."""
        return _height(self._root)