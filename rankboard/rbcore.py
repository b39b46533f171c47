"""Red-black tree core: nodes, rotations, insertion with rebalancing and validation."""

from __future__ import annotations

import enum
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Optional


class Color(enum.Enum):
    """Colour of a red-black tree node."""

    RED = "red"
    BLACK = "black"


@dataclass(eq=False)
class RBNode:
    """A node of a red-black tree."""

    data: int
    color: Color = Color.RED
    parent: Optional[RBNode] = field(default=None, repr=False)
    left: Optional[RBNode] = field(default=None, repr=False)
    right: Optional[RBNode] = field(default=None, repr=False)


def _color_of(node: Optional[RBNode]) -> Color:
    """Missing children count as black leaves."""
    return Color.BLACK if node is None else node.color


def _is_red(node: Optional[RBNode]) -> bool:
    return _color_of(node) is Color.RED


def _is_black(node: Optional[RBNode]) -> bool:
    return _color_of(node) is Color.BLACK


def _set_color(node: Optional[RBNode], color: Color) -> None:
    if node is not None:
        node.color = color


def _minimum(node: Optional[RBNode]) -> Optional[RBNode]:
    while node is not None and node.left is not None:
        node = node.left
    return node


def _black_height(node: Optional[RBNode]) -> int:
    """Black height of ``node``'s subtree, or -1 if a red-black rule is broken."""
    if node is None:
        return 1
    if _is_red(node) and (_is_red(node.left) or _is_red(node.right)):
        return -1
    left = _black_height(node.left)
    if left < 0:
        return -1
    right = _black_height(node.right)
    if right < 0 or left != right:
        return -1
    return left + 1 if node.color is Color.BLACK else left


class RedBlackTreeBase:
    """Red-black tree of integers with insertion, lookup and validation.

    Keys smaller than a node go to its left subtree; equal or greater keys go
    to its right subtree, so duplicate keys are allowed.
    """

    def __init__(self) -> None:
        self._root: Optional[RBNode] = None

    @property
    def root(self) -> Optional[RBNode]:
        """The root node, or None when the tree is empty."""
        return self._root

    def _transplant(self, old: RBNode, new: Optional[RBNode]) -> None:
        """Put the subtree ``new`` where ``old`` hangs from its parent."""
        if old.parent is None:
            self._root = new
        elif old is old.parent.left:
            old.parent.left = new
        else:
            old.parent.right = new
        if new is not None:
            new.parent = old.parent

    def rotate_left(self, node: Optional[RBNode]) -> None:
        """Rotate left around ``node``; do nothing if it has no right child."""
        if node is None or node.right is None:
            return
        pivot = node.right
        node.right = pivot.left
        if pivot.left is not None:
            pivot.left.parent = node
        pivot.parent = node.parent
        if node.parent is None:
            self._root = pivot
        elif node is node.parent.left:
            node.parent.left = pivot
        else:
            node.parent.right = pivot
        pivot.left = node
        node.parent = pivot

    def rotate_right(self, node: Optional[RBNode]) -> None:
        """Rotate right around ``node``; do nothing if it has no left child."""
        if node is None or node.left is None:
            return
        pivot = node.left
        node.left = pivot.right
        if pivot.right is not None:
            pivot.right.parent = node
        pivot.parent = node.parent
        if node.parent is None:
            self._root = pivot
        elif node is node.parent.right:
            node.parent.right = pivot
        else:
            node.parent.left = pivot
        pivot.right = node
        node.parent = pivot

    def insert(self, node: Optional[RBNode]) -> None:
        """Insert ``node`` as a new red leaf and rebalance the tree."""
        if node is None:
            return
        node.parent = None
        node.left = None
        node.right = None
        node.color = Color.RED

        if self._root is None:
            self._root = node
            node.color = Color.BLACK
            return

        parent = self._root
        while True:
            if node.data < parent.data:
                if parent.left is None:
                    parent.left = node
                    break
                parent = parent.left
            else:
                if parent.right is None:
                    parent.right = node
                    break
                parent = parent.right
        node.parent = parent

        self._fix_after_insert(node)

    def _fix_after_insert(self, z: RBNode) -> None:
        while z is not self._root and z.parent is not None and _is_red(z.parent):
            parent: Optional[RBNode] = z.parent
            grand = parent.parent
            if grand is None:
                break

            if parent is grand.left:
                uncle = grand.right
                if _is_red(uncle):
                    _set_color(parent, Color.BLACK)
                    _set_color(uncle, Color.BLACK)
                    _set_color(grand, Color.RED)
                    z = grand
                    continue
                if z is parent.right:
                    z = parent
                    self.rotate_left(z)
                    parent = z.parent
                    grand = parent.parent if parent is not None else None
                if parent is not None and grand is not None:
                    _set_color(parent, Color.BLACK)
                    _set_color(grand, Color.RED)
                    self.rotate_right(grand)
            else:
                uncle = grand.left
                if _is_red(uncle):
                    _set_color(parent, Color.BLACK)
                    _set_color(uncle, Color.BLACK)
                    _set_color(grand, Color.RED)
                    z = grand
                    continue
                if z is parent.left:
                    z = parent
                    self.rotate_right(z)
                    parent = z.parent
                    grand = parent.parent if parent is not None else None
                if parent is not None and grand is not None:
                    _set_color(parent, Color.BLACK)
                    _set_color(grand, Color.RED)
                    self.rotate_left(grand)

        _set_color(self._root, Color.BLACK)

    def insert_data(self, data: int) -> RBNode:
        """Create a node holding ``data``, insert it and return it."""
        node = RBNode(data)
        self.insert(node)
        return node

    def get_node(self, data: int) -> Optional[RBNode]:
        """Return a node holding ``data``, or None if the tree has none."""
        cursor = self._root
        while cursor is not None:
            if data == cursor.data:
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
        stack: list[RBNode] = []
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

    def validate(self) -> bool:
        """Check the red-black invariants.

        An empty tree is valid. Otherwise the root must be black, no red node
        may have a red child, and every path to a leaf must cross the same
        number of black nodes.
        """
        if self._root is None:
            return True
        if self._root.color is not Color.BLACK:
            return False
        return _black_height(self._root) > 0