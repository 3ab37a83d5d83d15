"""Plain binary trees: flattening to a right-linked list and zigzag level order."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(eq=False)
class TreeNode:
    """A binary tree node."""

    val: int = 0
    left: TreeNode | None = None
    right: TreeNode | None = None


def flatten(root: TreeNode | None) -> None:
    """Rearrange the tree in place into its pre-order sequence linked through ``right``."""
    node = root
    while node is not None:
        if node.left is not None:
            tail = node.left
            while tail.right is not None:
                tail = tail.right
            tail.right = node.right
            node.right = node.left
            node.left = None
        node = node.right


def zigzag_level_order(root: TreeNode | None) -> list[list[int]]:
    """Values level by level; even-numbered levels (from 0) read right to left."""
    levels: list[list[int]] = []
    level = [root] if root is not None else []
    while level:
        values = [node.val for node in level]
        if len(levels) % 2 == 0:
            values.reverse()
        levels.append(values)
        level = [
            child for node in level for child in (node.left, node.right) if child is not None
        ]
    return levels