"""An unbalanced binary search tree of integers that allows duplicate keys."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False)
class BSTNode:
    """A node of a binary search tree."""

    data: int
    left: Optional[BSTNode] = None
    right: Optional[BSTNode] = None


class BST:
    """Binary search tree.

    For every node, keys in the left subtree are smaller than the node's key
    and keys in the right subtree are greater than or equal to it.
    """

    def __init__(self) -> None:
        self._root: Optional[BSTNode] = None

    @property
    def root(self) -> Optional[BSTNode]:
        """The root node, or None when the tree is empty."""
        return self._root

    def insert(self, node: Optional[BSTNode]) -> None:
        """Place ``node`` in the tree as a new leaf; its children are cleared."""
        if node is None:
            return
        node.left = None
        node.right = None

        if self._root is None:
            self._root = node
            return

        parent = self._root
        while True:
            if node.data < parent.data:
                if parent.left is None:
                    parent.left = node
                    return
                parent = parent.left
            else:
                if parent.right is None:
                    parent.right = node
                    return
                parent = parent.right

    def insert_data(self, data: int) -> BSTNode:
        """Create a node holding ``data``, insert it and return it."""
        node = BSTNode(data)
        self.insert(node)
        return node

    def _replace_child(
        self, parent: Optional[BSTNode], old: BSTNode, new: Optional[BSTNode]
    ) -> None:
        if parent is None:
            self._root = new
        elif parent.left is old:
            parent.left = new
        else:
            parent.right = new

    def remove(self, data: int) -> None:
        """Remove one node holding ``data``; do nothing if there is none.

        A node with two children takes the value of its in-order successor,
        which is then removed from the right subtree.
        """
        parent: Optional[BSTNode] = None
        cursor = self._root
        while cursor is not None:
            if cursor.data == data:
                if cursor.left is None or cursor.right is None:
                    child = cursor.left if cursor.left is not None else cursor.right
                    self._replace_child(parent, cursor, child)
                    return
                successor = cursor.right
                while successor.left is not None:
                    successor = successor.left
                cursor.data = successor.data
                data = successor.data
                parent = cursor
                cursor = cursor.right
            elif cursor.data < data:
                parent = cursor
                cursor = cursor.right
            else:
                parent = cursor
                cursor = cursor.left

    def get_node(self, data: int) -> Optional[BSTNode]:
        """Return a node holding ``data``, or None if the tree has none."""
        cursor = self._root
        while cursor is not None:
            if cursor.data == data:
                return cursor
            cursor = cursor.left if data < cursor.data else cursor.right
        return None

    def __contains__(self, data: object) -> bool:
        if not isinstance(data, int):
            return False
        return self.get_node(data) is not None

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __iter__(self) -> Iterator[int]:
        """Yield the keys in in-order sequence (ascending)."""
        stack: list[BSTNode] = []
        cursor = self._root
        while stack or cursor is not None:
            while cursor is not None:
                stack.append(cursor)
                cursor = cursor.left
            cursor = stack.pop()
            yield cursor.data
            cursor = cursor.right

    def to_list(self) -> list[int]:
        """Return the keys in ascending order."""
        return list(self)