#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
bst_node.py
-----------

Building blocks shared by every balancing strategy:

* the base node type (key, value, parent/left/right links)
* the default key ordering
* in‑order navigation over parent links (`leftmost`, `rightmost`,
  `successor`, `predecessor`) – no auxiliary stack is ever needed
* single left / right rotations that keep parent links consistent
* the `BalancingStrategy` protocol implemented by the AVL and red‑black
  strategies

The `parent` attribute is a plain back‑reference used for climbing and
relinking only; the tree is held together by the `left` / `right` links.
"""

from __future__ import annotations

import operator
from typing import Any, Callable, Generic, Optional, Protocol, Tuple, TypeVar

K = TypeVar("K")
V = TypeVar("V")

# A strict weak ordering: ``less(a, b)`` is True when *a* sorts before *b*.
Less = Callable[[K, K], bool]

default_less: Less = operator.lt


class Node(Generic[K, V]):
    """Tree node – strategies extend it with their own balance metadata."""

    __slots__ = ("key", "value", "parent", "left", "right")

    def __init__(
        self,
        key: K,
        value: V,
        parent: Optional["Node[K, V]"] = None,
    ) -> None:
        self.key = key
        self.value = value
        self.parent = parent
        self.left: Optional[Node[K, V]] = None
        self.right: Optional[Node[K, V]] = None

    def detach(self) -> None:
        """Drop every link so a released node cannot be walked from."""
        self.parent = self.left = self.right = None

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.key!r}:{self.value!r}>"


class BalancingStrategy(Protocol):
    """
    What an ordered map needs from a balancing discipline.

    Every method receives the owning tree and works directly on its
    ``_root``, ``_size`` and ``_less`` attributes.
    """

    name: str

    def insert(self, tree: Any, key: Any, value: Any) -> Tuple[Node, bool]:
        ...

    def erase(self, tree: Any, key: Any) -> bool:
        ...

    def validate(self, root: Optional[Node]) -> None:
        ...


# ----------------------------------------------------------------------
#  In‑order navigation
# ----------------------------------------------------------------------
def leftmost(node: Node[K, V]) -> Node[K, V]:
    while node.left is not None:
        node = node.left
    return node


def rightmost(node: Node[K, V]) -> Node[K, V]:
    while node.right is not None:
        node = node.right
    return node


def successor(node: Node[K, V]) -> Optional[Node[K, V]]:
    """
    Return the node following *node* in key order, or ``None`` at the end.

    With a right subtree the answer is its leftmost node. Otherwise climb
    until we arrive at an ancestor from its left side.
    """
    if node.right is not None:
        return leftmost(node.right)
    parent = node.parent
    while parent is not None and node is parent.right:
        node = parent
        parent = parent.parent
    return parent


def predecessor(node: Node[K, V]) -> Optional[Node[K, V]]:
    """Mirror image of `successor`."""
    if node.left is not None:
        return rightmost(node.left)
    parent = node.parent
    while parent is not None and node is parent.left:
        node = parent
        parent = parent.parent
    return parent


# ----------------------------------------------------------------------
#  Rotations
# ----------------------------------------------------------------------
def replace_child(
    parent: Optional[Node[K, V]], old: Node[K, V], new: Optional[Node[K, V]]
) -> None:
    if parent is None:
        return
    if old is parent.left:
        parent.left = new
    else:
        parent.right = new


def rotate_left(x: Node[K, V]) -> Node[K, V]:
    """
    Left‑rotate the subtree rooted at `x` and return its new root.

    The new root takes over `x`'s parent link and its slot in that parent.
    When `x` was the tree root the caller must store the returned node as
    the new root.
    """
    y = x.right
    if y is None:
        raise RuntimeError("rotate_left called on a node with no right child")
    # Turn y's left subtree into x's right subtree
    x.right = y.left
    if y.left is not None:
        y.left.parent = x
    # Link x's parent to y
    y.parent = x.parent
    replace_child(x.parent, x, y)
    # Put x on y's left
    y.left = x
    x.parent = y
    return y


def rotate_right(y: Node[K, V]) -> Node[K, V]:
    """Right‑rotate the subtree rooted at `y` and return its new root."""
    x = y.left
    if x is None:
        raise RuntimeError("rotate_right called on a node with no left child")
    y.left = x.right
    if x.right is not None:
        x.right.parent = y
    x.parent = y.parent
    replace_child(y.parent, y, x)
    x.right = y
    y.parent = x
    return x
