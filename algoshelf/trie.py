"""A prefix tree over lower-case ASCII words."""

from __future__ import annotations

import string
from dataclasses import dataclass, field

_ALPHABET = frozenset(string.ascii_lowercase)


@dataclass
class _Node:
    children: dict[str, _Node] = field(default_factory=dict)
    is_word: bool = False


def _check(word: str) -> None:
    if not set(word) <= _ALPHABET:
        raise ValueError("words may only contain the letters a to z")


class Trie:
    """A set of words made of the letters a to z, stored as a prefix tree."""

    def __init__(self) -> None:
        self._root = _Node()

    def insert(self, word: str) -> None:
        """Add word to the trie."""
        _check(word)
        node = self._root
        for letter in word:
            node = node.children.setdefault(letter, _Node())
        node.is_word = True

    def delete(self, word: str) -> bool:
        """Remove word; return whether it was present.

        Nodes that no longer lead to any word are pruned, so a word that is
        a prefix of another only loses its end marker.
        """
        _check(word)
        path = [self._root]
        for letter in word:
            child = path[-1].children.get(letter)
            if child is None:
                return False
            path.append(child)
        if not path[-1].is_word:
            return False
        path[-1].is_word = False
        for letter, node in zip(reversed(word), reversed(path)):
            if node.is_word or node.children:
                break
            parent = path[len(path) - 2 - (len(path) - 1 - path.index(node)) + (len(path) - 1 - path.index(node))]
            del parent.children[letter]
            path.pop()
        return True

    def __contains__(self, word: object) -> bool:
        if not isinstance(word, str) or not set(word) <= _ALPHABET:
            return False
        node = self._root
        for letter in word:
            child = node.children.get(letter)
            if child is None:
                return False
            node = child
        return node.is_word