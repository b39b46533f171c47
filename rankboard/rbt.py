"""Red-black tree with removal and double-black repair."""

from __future__ import annotations

from typing import NamedTuple, Optional

from rankboard.rbcore import (
    Color,
    RBNode,
    RedBlackTreeBase,
    _is_black,
    _is_red,
    _minimum,
    _set_color,
)


class _Family(NamedTuple):
    """The nodes around the node that carries the extra black."""

    parent: RBNode
    x_is_left: bool
    sibling: Optional[RBNode]
    near: Optional[RBNode]
    far: Optional[RBNode]


def _family(x: Optional[RBNode], xp: Optional[RBNode]) -> Optional[_Family]:
    parent = x.parent if x is not None else xp
    if parent is None:
        return None
    x_is_left = x is parent.left
    sibling = parent.right if x_is_left else parent.left
    if sibling is None:
        near = far = None
    elif x_is_left:
        near, far = sibling.left, sibling.right
    else:
        near, far = sibling.right, sibling.left
    return _Family(parent, x_is_left, sibling, near, far)


class RedBlackTree(RedBlackTreeBase):
    """Red-black tree of integers supporting insertion and removal.

    Duplicate keys are allowed; removal takes out one node holding the key.
    """

    def remove(self, data: int) -> None:
        """Remove one node holding ``data``; do nothing if there is none."""
        node = self.get_node(data)
        if node is not None:
            self.remove_node(node)

    def remove_node(self, node: Optional[RBNode]) -> None:
        """Unlink ``node`` from the tree, using its successor when it has two children."""
        if node is None:
            return
        z = node
        y = z
        removed_color = y.color
        x: Optional[RBNode]
        xp: Optional[RBNode]

        if z.left is None:
            x, xp = z.right, z.parent
            self._transplant(z, z.right)
        elif z.right is None:
            x, xp = z.left, z.parent
            self._transplant(z, z.left)
        else:
            y = _minimum(z.right)
            assert y is not None
            removed_color = y.color
            x = y.right
            if y.parent is z:
                xp = y
                if x is not None:
                    x.parent = y
            else:
                xp = y.parent
                self._transplant(y, y.right)
                y.right = z.right
                if y.right is not None:
                    y.right.parent = y
            self._transplant(z, y)
            y.left = z.left
            if y.left is not None:
                y.left.parent = y
            y.color = z.color

        if removed_color is Color.BLACK:
            x = self._fix_after_remove(x, xp)
            _set_color(x, Color.BLACK)
            _set_color(self._root, Color.BLACK)

    def _fix_after_remove(
        self, x: Optional[RBNode], xp: Optional[RBNode]
    ) -> Optional[RBNode]:
        """Repair a double black at ``x`` (whose parent is ``xp``); return the final x."""
        while True:
            if x is self._root:
                if x is not None:
                    x.color = Color.BLACK
                break
            if x is not None and _is_red(x):
                break

            # Red sibling: rotate so that the sibling becomes black.
            fam = _family(x, xp)
            if fam is not None and _is_red(fam.sibling):
                _set_color(fam.sibling, Color.BLACK)
                _set_color(fam.parent, Color.RED)
                if fam.x_is_left:
                    self.rotate_left(fam.parent)
                else:
                    self.rotate_right(fam.parent)
                xp = x.parent if x is not None else fam.parent

            # Black parent, black sibling with black children: push the black up.
            fam = _family(x, xp)
            if (
                fam is not None
                and _is_black(fam.parent)
                and _is_black(fam.sibling)
                and _is_black(fam.near)
                and _is_black(fam.far)
            ):
                _set_color(fam.sibling, Color.RED)
                x = fam.parent
                xp = x.parent
                continue

            # Red parent, black sibling with black children: swap colours.
            fam = _family(x, xp)
            if (
                fam is not None
                and _is_red(fam.parent)
                and _is_black(fam.sibling)
                and _is_black(fam.near)
                and _is_black(fam.far)
            ):
                _set_color(fam.sibling, Color.RED)
                fam.parent.color = Color.BLACK
                break

            # Black sibling, red near child, black far child: rotate the sibling.
            fam = _family(x, xp)
            if (
                fam is not None
                and _is_black(fam.sibling)
                and _is_red(fam.near)
                and _is_black(fam.far)
            ):
                _set_color(fam.near, Color.BLACK)
                _set_color(fam.sibling, Color.RED)
                if fam.x_is_left:
                    self.rotate_right(fam.sibling)
                else:
                    self.rotate_left(fam.sibling)

            # Black sibling, red far child: rotate the parent and finish.
            fam = _family(x, xp)
            if fam is not None and _is_black(fam.sibling) and _is_red(fam.far):
                if fam.sibling is not None:
                    fam.sibling.color = fam.parent.color
                fam.parent.color = Color.BLACK
                _set_color(fam.far, Color.BLACK)
                if fam.x_is_left:
                    self.rotate_left(fam.parent)
                else:
                    self.rotate_right(fam.parent)
                break

            parent = x.parent if x is not None else xp
            if parent is None:
                break
            x = parent
            xp = x.parent
        return x