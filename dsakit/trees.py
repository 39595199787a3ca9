"""Binary tree nodes and depth-first traversals."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any


@dataclass
class TreeNode:
    """A binary tree node holding a value and two optional children."""

    value: Any
    left: TreeNode | None = None
    right: TreeNode | None = None


def inorder(root: TreeNode | None) -> Iterator[Any]:
    """Yield values left subtree first, then the node, then the right subtree."""
    if root is None:
        return
    yield from inorder(root.left)
    yield root.value
    yield from inorder(root.right)


def preorder(root: TreeNode | None) -> Iterator[Any]:
    """Yield values node first, then the left subtree, then the right subtree."""
    if root is None:
        return
    yield root.value
    yield from preorder(root.left)
    yield from preorder(root.right)