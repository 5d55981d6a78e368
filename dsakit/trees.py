"""Binary trees and binary search trees built from linked nodes."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class TreeNode:
    """A binary tree node."""

    data: Any
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None


def _preorder_nodes(root: Optional[TreeNode]) -> Iterator[TreeNode]:
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        yield node
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)


def count_nodes(root: Optional[TreeNode]) -> int:
    """Return the number of nodes in the tree."""
    return sum(1 for _ in _preorder_nodes(root))


def preorder(root: Optional[TreeNode]) -> list[Any]:
    """Return node data in root, left, right order."""
    return [node.data for node in _preorder_nodes(root)]


def inorder(root: Optional[TreeNode]) -> list[Any]:
    """Return node data in left, root, right order."""
    result: list[Any] = []
    stack: list[TreeNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        result.append(node.data)
        node = node.right
    return result


def postorder(root: Optional[TreeNode]) -> list[Any]:
    """Return node data in left, right, root order."""
    result: list[Any] = []
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        result.append(node.data)
        if node.left is not None:
            stack.append(node.left)
        if node.right is not None:
            stack.append(node.right)
    result.reverse()
    return result


def find_min(root: Optional[TreeNode]) -> Optional[TreeNode]:
    """Return the leftmost node of the tree, or ``None`` for an empty tree."""
    node = root
    while node is not None and node.left is not None:
        node = node.left
    return node


def bst_insert(root: Optional[TreeNode], value: Any) -> TreeNode:
    """Insert ``value`` into a search tree and return its root.

    Values equal to a node's data go into its right subtree.
    """
    new = TreeNode(value)
    if root is None:
        return new
    node = root
    while True:
        if value < node.data:
            if node.left is None:
                node.left = new
                return root
            node = node.left
        else:
            if node.right is None:
                node.right = new
                return root
            node = node.right


def bst_search(root: Optional[TreeNode], key: Any) -> Optional[TreeNode]:
    """Return the node holding ``key``, or ``None`` when absent."""
    node = root
    while node is not None and node.data != key:
        node = node.right if node.data < key else node.left
    return node


def bst_delete(root: Optional[TreeNode], key: Any) -> Optional[TreeNode]:
    """Remove one node holding ``key`` from a search tree and return the new root.

    A node with two children takes the data of its in-order successor, which
    is then removed from the right subtree. An absent key leaves the tree as is.
    """
    parent: Optional[TreeNode] = None
    node = root
    while node is not None:
        if key < node.data:
            parent, node = node, node.left
        elif key > node.data:
            parent, node = node, node.right
        else:
            break
    if node is None:
        return root

    if node.left is not None and node.right is not None:
        successor = find_min(node.right)
        node.data = successor.data
        node.right = bst_delete(node.right, successor.data)
        return root

    child = node.left if node.left is not None else node.right
    if parent is None:
        return child
    if parent.left is node:
        parent.left = child
    else:
        parent.right = child
    return root