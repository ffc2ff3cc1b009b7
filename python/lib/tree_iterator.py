#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
tree_iterator.py
----------------

Positions into an `OrderedMap`.

A position is a (tree, node) handle. The end position holds ``None`` as
its node and is never dereferenceable. Moving a position walks parent
links through `bst_node.successor` / `bst_node.predecessor`, so both
kinds below share exactly one traversal algorithm:

* `TreePosition`       – returned by ``begin()``, ``end()``, ``find()`` and
  ``insert()``; the stored value can be replaced through it.
* `ConstTreePosition`  – returned by ``cbegin()`` / ``cend()``; read only.

Erasing the node under a position invalidates that position. Positions on
other nodes stay usable, rotations only relink nodes.
"""

from __future__ import annotations

from typing import Any, Generic, Optional, Tuple, TypeVar

from bst_node import Node, predecessor, rightmost, successor

K = TypeVar("K")
V = TypeVar("V")


class _Position(Generic[K, V]):
    __slots__ = ("_tree", "_node")

    def __init__(self, tree: Any, node: Optional[Node[K, V]]) -> None:
        self._tree = tree
        self._node = node

    def _require_node(self) -> Node[K, V]:
        if self._node is None:
            raise IndexError("end position is not dereferenceable")
        return self._node

    # ------------------------------------------------------------------
    #   Dereference
    # ------------------------------------------------------------------
    @property
    def key(self) -> K:
        return self._require_node().key

    @property
    def value(self) -> V:
        return self._require_node().value

    @property
    def item(self) -> Tuple[K, V]:
        node = self._require_node()
        return node.key, node.value

    def is_end(self) -> bool:
        return self._node is None

    # ------------------------------------------------------------------
    #   Movement (in place, like ``++it`` / ``--it``)
    # ------------------------------------------------------------------
    def advance(self) -> "_Position[K, V]":
        """Step to the next key; stepping past the largest key gives end."""
        self._node = successor(self._require_node())
        return self

    def retreat(self) -> "_Position[K, V]":
        """
        Step to the previous key. From end this lands on the largest key.
        Raises ``IndexError`` when there is nothing before the position.
        """
        if self._node is None:
            root = self._tree._root
            if root is None:
                raise IndexError("retreat from end of an empty tree")
            self._node = rightmost(root)
            return self
        prev = predecessor(self._node)
        if prev is None:
            raise IndexError("retreat past the first position")
        self._node = prev
        return self

    def copy(self) -> "_Position[K, V]":
        return type(self)(self._tree, self._node)

    # ------------------------------------------------------------------
    #   Comparison – mutable and read‑only positions compare freely
    # ------------------------------------------------------------------
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, _Position):
            return NotImplemented
        return self._tree is other._tree and self._node is other._node

    # Positions move in place, so they cannot serve as set members or keys
    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        if self._node is None:
            return f"{type(self).__name__}(end)"
        return f"{type(self).__name__}({self._node.key!r}: {self._node.value!r})"


class TreePosition(_Position[K, V]):
    """Mutable position: the value (never the key) may be replaced."""

    __slots__ = ()

    @property
    def value(self) -> V:
        return self._require_node().value

    @value.setter
    def value(self, new_value: V) -> None:
        self._require_node().value = new_value


class ConstTreePosition(_Position[K, V]):
    """Read‑only position."""

    __slots__ = ()
