"""A trie of lowercase ASCII keys."""

from __future__ import annotations

import string
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field


@dataclass
class _Node:
    children: dict[str, _Node] = field(default_factory=dict)
    end: bool = False


class Trie:
    """Set of lowercase ASCII strings stored as a prefix tree."""

    def __init__(self, keys: Iterable[str] = ()) -> None:
        self._root = _Node()
        self._count = 0
        for key in keys:
            self.put(key)

    @staticmethod
    def _validate(key: str) -> None:
        if any(char not in string.ascii_lowercase for char in key):
            raise ValueError(f"key {key!r} must hold only lowercase ASCII letters")

    def put(self, key: str) -> None:
        """Add ``key`` to the trie."""
        self._validate(key)
        node = self._root
        for char in key:
            node = node.children.setdefault(char, _Node())
        if not node.end:
            node.end = True
            self._count += 1

    def get(self, key: str) -> bool:
        """Whether ``key`` was added to the trie."""
        node = self._root
        for char in key:
            node = node.children.get(char)
            if node is None:
                return False
        return node.end

    def keys(self) -> list[str]:
        """All stored keys in lexicographic order."""
        return list(self)

    def __iter__(self) -> Iterator[str]:
        def walk(node: _Node, prefix: str) -> Iterator[str]:
            if node.end:
                yield prefix
            for char in sorted(node.children):
                yield from walk(node.children[char], prefix + char)

        return walk(self._root, "")

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.get(key)

    def __len__(self) -> int:
        return self._count