"""Binary tree nodes, in-order traversal and mirroring."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class TreeNode:
    """A binary tree node holding a value and two optional children."""

    val: Any
    left: TreeNode | None = None
    right: TreeNode | None = None


def inorder(root: TreeNode | None) -> list[Any]:
    """Return the values of the tree in in-order sequence."""
    values: list[Any] = []
    stack: list[TreeNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        values.append(node.val)
        node = node.right
    return values


def mirror(root: TreeNode | None) -> TreeNode | None:
    """Return a new tree that is the mirror image of ``root``; the original is untouched."""
    if root is None:
        return None
    return TreeNode(root.val, left=mirror(root.right), right=mirror(root.left))