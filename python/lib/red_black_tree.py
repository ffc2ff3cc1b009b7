#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
red_black_tree.py
-----------------

Red‑Black balancing strategy for `OrderedMap`.

Each node carries a colour instead of a height. The classic invariants are
kept after every insert and erase:

1. the root is black
2. a red node never has a red child
3. every root‑to‑leaf path crosses the same number of black nodes

Missing children are plain ``None`` and count as black leaves, see
`_color`. Insertion colours the new node red and repairs a red‑red conflict
by recolouring (red uncle) or by one or two rotations (black uncle).
Erasure transplants the in‑order successor into place and, when a black
node left the tree, resolves the "doubly black" position using the four
sibling cases.

Typical usage
~~~~~~~~~~~~~
>>> from ordered_map import RedBlackTree
>>> rbt = RedBlackTree()
>>> rbt.insert(5, "five")[1]
True
>>> rbt.insert(2, "two")[1]
True
>>> rbt.min_key()
2
"""

from __future__ import annotations

from typing import Any, Optional, Tuple

from bst_node import Node, leftmost, replace_child, rotate_left, rotate_right

# ----------------------------------------------------------------------
#  Node colour constants – using simple booleans is fastest
# ----------------------------------------------------------------------
RED = True
BLACK = False


class RedBlackNode(Node):
    __slots__ = ("color",)

    def __init__(
        self,
        key: Any,
        value: Any,
        parent: Optional[RedBlackNode] = None,
        color: bool = RED,
    ) -> None:
        super().__init__(key, value, parent)
        self.color = color

    def __repr__(self) -> str:
        col = "R" if self.color == RED else "B"
        return f"<{col} {self.key!r}:{self.value!r}>"


def _color(node: Optional[RedBlackNode]) -> bool:
    return BLACK if node is None else node.color


class RedBlackBalancing:
    """Colour‑based strategy; stateless, one instance can serve many trees."""

    name = "red-black"

    # ------------------------------------------------------------------
    #   Insertion
    # ------------------------------------------------------------------
    def insert(self, tree: Any, key: Any, value: Any) -> Tuple[RedBlackNode, bool]:
        less = tree._less
        parent: Optional[RedBlackNode] = None
        cur = tree._root
        go_left = False

        while cur is not None:
            parent = cur
            if less(key, cur.key):
                cur = cur.left
                go_left = True
            elif less(cur.key, key):
                cur = cur.right
                go_left = False
            else:
                # Key already exists → keep the stored pair.
                return cur, False

        new_node = RedBlackNode(key, value, parent, RED)
        if parent is None:
            tree._root = new_node
        elif go_left:
            parent.left = new_node
        else:
            parent.right = new_node

        tree._size += 1
        self._fix_insert(tree, new_node)
        return new_node, True

    def _fix_insert(self, tree: Any, z: RedBlackNode) -> None:
        """Restore red‑black properties after inserting node `z` (which is RED)."""
        while z.parent is not None and z.parent.color == RED:
            parent = z.parent
            # A red parent is never the root, so the grandparent exists.
            grandparent = parent.parent
            if parent is grandparent.left:
                uncle = grandparent.right
                if _color(uncle) == RED:
                    # Case 1 – recolour
                    parent.color = BLACK
                    uncle.color = BLACK
                    grandparent.color = RED
                    z = grandparent
                else:
                    if z is parent.right:
                        # Case 2 – left‑rotate at parent
                        z = parent
                        self._rotate_left(tree, z)
                        parent = z.parent
                    # Case 3 – right‑rotate at grandparent
                    parent.color = BLACK
                    grandparent.color = RED
                    self._rotate_right(tree, grandparent)
            else:  # Mirror of the above (parent is a right child)
                uncle = grandparent.left
                if _color(uncle) == RED:
                    parent.color = BLACK
                    uncle.color = BLACK
                    grandparent.color = RED
                    z = grandparent
                else:
                    if z is parent.left:
                        z = parent
                        self._rotate_right(tree, z)
                        parent = z.parent
                    parent.color = BLACK
                    grandparent.color = RED
                    self._rotate_left(tree, grandparent)
        tree._root.color = BLACK

    # ------------------------------------------------------------------
    #   Rotations – the shared primitives plus root bookkeeping
    # ------------------------------------------------------------------
    @staticmethod
    def _rotate_left(tree: Any, x: RedBlackNode) -> None:
        pivot = rotate_left(x)
        if pivot.parent is None:
            tree._root = pivot

    @staticmethod
    def _rotate_right(tree: Any, y: RedBlackNode) -> None:
        pivot = rotate_right(y)
        if pivot.parent is None:
            tree._root = pivot

    # ------------------------------------------------------------------
    #   Erasure
    # ------------------------------------------------------------------
    def erase(self, tree: Any, key: Any) -> bool:
        less = tree._less
        cur = tree._root
        while cur is not None:
            if less(key, cur.key):
                cur = cur.left
            elif less(cur.key, key):
                cur = cur.right
            else:
                self._delete_node(tree, cur)
                return True
        return False

    @staticmethod
    def _transplant(
        tree: Any, u: RedBlackNode, v: Optional[RedBlackNode]
    ) -> None:
        """Replace subtree rooted at `u` with the subtree rooted at `v`."""
        if u.parent is None:
            tree._root = v
        else:
            replace_child(u.parent, u, v)
        if v is not None:
            v.parent = u.parent

    def _delete_node(self, tree: Any, z: RedBlackNode) -> None:
        """Unlink `z` and fix up any colour violations."""
        y = z  # node whose colour leaves its current position
        y_original_color = y.color
        if z.left is None:
            x, x_parent = z.right, z.parent
            self._transplant(tree, z, z.right)
        elif z.right is None:
            x, x_parent = z.left, z.parent
            self._transplant(tree, z, z.left)
        else:
            # z has two children: its in‑order successor `y` takes its place
            y = leftmost(z.right)
            y_original_color = y.color
            x = y.right
            if y.parent is z:
                x_parent = y
            else:
                x_parent = y.parent
                self._transplant(tree, y, y.right)
                y.right = z.right
                y.right.parent = y
            self._transplant(tree, z, y)
            y.left = z.left
            y.left.parent = y
            y.color = z.color

        z.detach()
        tree._size -= 1

        if y_original_color == BLACK:
            self._fix_delete(tree, x, x_parent)

    def _fix_delete(
        self,
        tree: Any,
        x: Optional[RedBlackNode],
        parent: Optional[RedBlackNode],
    ) -> None:
        """
        Restore red‑black properties after a black node left the tree.

        `x` is the node that moved into the vacated position (possibly
        ``None``), `parent` is its parent – tracked separately because a
        missing child has no parent link of its own.
        """
        while x is not tree._root and _color(x) == BLACK:
            if x is parent.left:
                w = parent.right  # sibling
                if w.color == RED:
                    # Case 1 – sibling is red
                    w.color = BLACK
                    parent.color = RED
                    self._rotate_left(tree, parent)
                    w = parent.right
                if _color(w.left) == BLACK and _color(w.right) == BLACK:
                    # Case 2 – both of sibling's children are black
                    w.color = RED
                    x = parent
                    parent = x.parent
                else:
                    if _color(w.right) == BLACK:
                        # Case 3 – sibling's right child is black, left child is red
                        w.left.color = BLACK
                        w.color = RED
                        self._rotate_right(tree, w)
                        w = parent.right
                    # Case 4 – sibling's right child is red
                    w.color = parent.color
                    parent.color = BLACK
                    w.right.color = BLACK
                    self._rotate_left(tree, parent)
                    x, parent = tree._root, None
            else:
                # Mirror of the above, with "left" and "right" swapped
                w = parent.left
                if w.color == RED:
                    w.color = BLACK
                    parent.color = RED
                    self._rotate_right(tree, parent)
                    w = parent.left
                if _color(w.right) == BLACK and _color(w.left) == BLACK:
                    w.color = RED
                    x = parent
                    parent = x.parent
                else:
                    if _color(w.left) == BLACK:
                        w.right.color = BLACK
                        w.color = RED
                        self._rotate_left(tree, w)
                        w = parent.left
                    w.color = parent.color
                    parent.color = BLACK
                    w.left.color = BLACK
                    self._rotate_right(tree, parent)
                    x, parent = tree._root, None
        if x is not None:
            x.color = BLACK

    # ------------------------------------------------------------------
    #   Validation/checking utilities – useful for debugging
    # ------------------------------------------------------------------
    def validate(self, root: Optional[RedBlackNode]) -> None:
        """
        Verify the colour invariants of the tree rooted at *root*.
        Raises ``AssertionError`` with a descriptive message if something is broken.
        """

        def dfs(node: Optional[RedBlackNode]) -> int:
            """Return the black height of the subtree; raise on violation."""
            if node is None:
                return 1  # leaves count as black height 1 (they are black)

            # Property 2: red nodes have black children
            if node.color == RED:
                assert _color(node.left) == BLACK, "Red node has red left child"
                assert _color(node.right) == BLACK, "Red node has red right child"

            left_black = dfs(node.left)
            right_black = dfs(node.right)

            # Property 3: all paths have the same black height
            assert left_black == right_black, "Black-height mismatch"
            return left_black + (1 if node.color == BLACK else 0)

        if root is not None:
            # Property 1: root is black
            assert root.color == BLACK, "Root is not black"
            dfs(root)


RED_BLACK = RedBlackBalancing()
