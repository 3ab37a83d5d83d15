"""An unbalanced binary search tree with parent links."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass(eq=False)
class BSTNode:
    """A node of a binary search tree."""

    item: int
    parent: BSTNode | None = None
    left: BSTNode | None = None
    right: BSTNode | None = None

    def __repr__(self) -> str:
        return f"BSTNode({self.item!r})"


class BinarySearchTree:
    """Binary search tree: smaller keys to the left, equal or larger keys to the right."""

    def __init__(self, items: Iterable[int] = ()) -> None:
        self.root: BSTNode | None = None
        self._size = 0
        for item in items:
            self.insert(item)

    def insert(self, x: int) -> BSTNode:
        """Add ``x`` as a new leaf and return its node."""
        parent: BSTNode | None = None
        node = self.root
        while node is not None:
            parent = node
            node = node.left if x < node.item else node.right
        created = BSTNode(x, parent=parent)
        if parent is None:
            self.root = created
        elif x < parent.item:
            parent.left = created
        else:
            parent.right = created
        self._size += 1
        return created

    def search(self, x: int) -> BSTNode | None:
        """The first node holding ``x`` on the way down from the root, or None."""
        node = self.root
        while node is not None and node.item != x:
            node = node.left if x < node.item else node.right
        return node

    def _replace(self, node: BSTNode, child: BSTNode | None) -> None:
        if child is not None:
            child.parent = node.parent
        if node.parent is None:
            self.root = child
        elif node.parent.left is node:
            node.parent.left = child
        else:
            node.parent.right = child

    def delete(self, x: int) -> None:
        """Remove one occurrence of ``x``; raise KeyError if it is absent."""
        node = self.search(x)
        if node is None:
            raise KeyError(x)
        if node.left is not None and node.right is not None:
            successor = node.right
            while successor.left is not None:
                successor = successor.left
            node.item = successor.item
            node = successor
        self._replace(node, node.left if node.left is not None else node.right)
        self._size -= 1

    def _in_order_nodes(self) -> Iterator[BSTNode]:
        stack: list[BSTNode] = []
        node = self.root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node
            node = node.right

    def inorder(self) -> list[int]:
        """Keys in ascending order."""
        return [node.item for node in self._in_order_nodes()]

    def morris_inorder(self) -> list[int]:
        """Keys in ascending order, walked with temporary threads and no stack."""
        out: list[int] = []
        node = self.root
        while node is not None:
            if node.left is None:
                out.append(node.item)
                node = node.right
                continue
            pred = node.left
            while pred.right is not None and pred.right is not node:
                pred = pred.right
            if pred.right is node:
                pred.right = None
                out.append(node.item)
                node = node.right
            else:
                pred.right = node
                node = node.left
        return out

    def _levels(self) -> Iterator[list[BSTNode]]:
        level = [self.root] if self.root is not None else []
        while level:
            yield level
            level = [
                child
                for node in level
                for child in (node.left, node.right)
                if child is not None
            ]

    def depth(self) -> int:
        """Number of levels in the tree; 0 when empty."""
        return sum(1 for _ in self._levels())

    def max_width(self) -> int:
        """Widest level, counting the gaps between its outermost nodes."""
        if self.root is None:
            return 0
        level: list[tuple[BSTNode, int]] = [(self.root, 0)]
        width = 0
        while level:
            first = level[0][1]
            width = max(width, level[-1][1] - first + 1)
            level = [
                (child, (position - first) * 2 + offset)
                for node, position in level
                for offset, child in ((0, node.left), (1, node.right))
                if child is not None
            ]
        return width

    def node_count(self) -> int:
        """Number of nodes."""
        return sum(len(level) for level in self._levels())

    def leaf_count(self) -> int:
        """Number of nodes without children."""
        return sum(
            1
            for level in self._levels()
            for node in level
            if node.left is None and node.right is None
        )

    def minimum(self) -> int:
        """Smallest key; raise ValueError when the tree is empty."""
        if self.root is None:
            raise ValueError("minimum of an empty tree")
        node = self.root
        while node.left is not None:
            node = node.left
        return node.item

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[int]:
        return (node.item for node in self._in_order_nodes())

    def __contains__(self, x: object) -> bool:
        return isinstance(x, int) and self.search(x) is not None