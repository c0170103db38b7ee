"""Binary trees: traversals, binary-search-tree checks, lookups and insertion."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from itertools import pairwise
from typing import Any


class DuplicateKeyError(ValueError):
    """Raised when inserting a value already present in a binary search tree."""


@dataclass(eq=False)
class TreeNode:
    """A binary tree node."""

    value: Any
    left: TreeNode | None = field(default=None, repr=False)
    right: TreeNode | None = field(default=None, repr=False)


def _inorder(root: TreeNode | None) -> Iterator[Any]:
    if root is not None:
        yield from _inorder(root.left)
        yield root.value
        yield from _inorder(root.right)


def preorder(root: TreeNode | None) -> list[Any]:
    """Values in root, left, right order."""
    if root is None:
        return []
    return [root.value, *preorder(root.left), *preorder(root.right)]


def inorder(root: TreeNode | None) -> list[Any]:
    """Values in left, root, right order."""
    return list(_inorder(root))


def postorder(root: TreeNode | None) -> list[Any]:
    """Values in left, right, root order."""
    if root is None:
        return []
    return [*postorder(root.left), *postorder(root.right), root.value]


def is_bst(root: TreeNode | None) -> bool:
    """True if an in-order walk yields strictly increasing values."""
    return all(a < b for a, b in pairwise(_inorder(root)))


def search_bst(root: TreeNode | None, value: Any) -> TreeNode | None:
    """Node holding ``value`` in a binary search tree, found recursively."""
    if root is None:
        return None
    if value == root.value:
        return root
    if value < root.value:
        return search_bst(root.left, value)
    return search_bst(root.right, value)


def search_bst_iterative(root: TreeNode | None, value: Any) -> TreeNode | None:
    """Node holding ``value`` in a binary search tree, found with a loop."""
    node = root
    while node is not None:
        if value == node.value:
            return node
        node = node.left if value < node.value else node.right
    return None


def insert_bst(root: TreeNode | None, value: Any) -> TreeNode:
    """Insert ``value`` as a new leaf and return the tree's root.

    An empty tree becomes a single node; a value already present is refused.
    """
    new = TreeNode(value)
    if root is None:
        return new
    node = root
    while True:
        if value == node.value:
            raise DuplicateKeyError(f"cannot insert {value!r}: already present")
        if value < node.value:
            if node.left is None:
                node.left = new
                return root
            node = node.left
        else:
            if node.right is None:
                node.right = new
                return root
            node = node.right