"""
Unbalanced binary search tree of integers.

Every operation walks the tree with a loop or an explicit stack, so sorted insertions that degrade the tree
into a long chain never run into Python's recursion limit. Not thread-safe.
"""

import logging
from collections.abc import Iterable, Iterator

from structures.rendering import render_tree

logger = logging.getLogger(__name__)


class TreeNode:
    """Node of a binary search tree."""

    def __init__(self, value: int):
        self.value = value
        self.left: TreeNode | None = None
        self.right: TreeNode | None = None

    def __repr__(self):
        return f"TreeNode({self.value})"


class BinarySearchTree:
    """BST with the strict ordering left < node < right. Duplicate values are dropped on insert."""

    def __init__(self, values: Iterable[int] = ()):
        self.root: TreeNode | None = None
        self.size = 0
        for value in values:
            self.insert(value)

    def insert(self, value: int) -> bool:
        """Insert `value`. Returns False (and leaves the tree untouched) if it is already present."""
        if self.root is None:
            self.root = TreeNode(value)
            self.size += 1
            return True

        node = self.root
        while True:
            if value < node.value:
                if node.left is None:
                    node.left = TreeNode(value)
                    break
                node = node.left
            elif value > node.value:
                if node.right is None:
                    node.right = TreeNode(value)
                    break
                node = node.right
            else:
                logger.debug("Dropped duplicate value %d", value)
                return False

        self.size += 1
        return True

    def in_order_traversal(self) -> Iterator[int]:
        """Yield values in ascending order. Each call starts a fresh traversal."""
        stack: list[TreeNode] = []
        node = self.root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.value
            node = node.right

    def find(self, value: int) -> TreeNode | None:
        """Return the node holding `value`, or None."""
        node = self.root
        while node is not None and node.value != value:
            node = node.left if value < node.value else node.right
        return node

    def find_lca(self, n1: int, n2: int) -> TreeNode | None:
        """
        Lowest common ancestor of the nodes holding `n1` and `n2`.

        Descends from the root while both values lie on the same side of the current node; the first node
        that splits them (or equals one of them) is the answer. Returns None for an empty tree.

        Both values must be in the tree. Membership is not checked: for absent values the result is the node
        where the search paths for `n1` and `n2` diverge (or None if both run off the same leaf), which is not
        a meaningful ancestor. Use `value in tree` first when the inputs are untrusted.
        """
        node = self.root
        while node is not None:
            if node.value < n1 and node.value < n2:
                node = node.right
            elif node.value > n1 and node.value > n2:
                node = node.left
            else:
                return node
        return None

    def print_tree(self) -> str:
        """Box-drawing picture of the tree."""
        return "\n".join(render_tree(self.root))

    def __contains__(self, value: int) -> bool:
        return self.find(value) is not None

    def __iter__(self) -> Iterator[int]:
        return self.in_order_traversal()

    def __len__(self) -> int:
        return self.size
