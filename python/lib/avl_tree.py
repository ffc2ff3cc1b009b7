#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
avl_tree.py
-----------

AVL balancing strategy for `OrderedMap`.

Every node stores its height (a leaf has height 0, an empty subtree -1).
After an insert or erase the recursion unwinds back to the root and, at
every ancestor, recomputes the height and applies one of the four rotation
patterns when the balance factor leaves the range [-1, 1]:

* LL – left heavy, left child not right heavy   → rotate right
* LR – left heavy, left child right heavy       → rotate child left, then right
* RR – right heavy, right child not left heavy  → rotate left
* RL – right heavy, right child left heavy      → rotate child right, then left

The recursive helpers return the (possibly new) root of the subtree they
were handed; the caller stores it back into the slot that owns the subtree
(a child attribute, or the tree root).
"""

from __future__ import annotations

from typing import Any, Optional, Tuple

from bst_node import Node, leftmost, rotate_left, rotate_right


class AvlNode(Node):
    __slots__ = ("height",)

    def __init__(self, key: Any, value: Any, parent: Optional[AvlNode] = None) -> None:
        super().__init__(key, value, parent)
        self.height = 0

    def __repr__(self) -> str:
        return f"<h{self.height} {self.key!r}:{self.value!r}>"


def _height(node: Optional[AvlNode]) -> int:
    return -1 if node is None else node.height


def _update_height(node: AvlNode) -> None:
    node.height = 1 + max(_height(node.left), _height(node.right))


def _balance_factor(node: Optional[AvlNode]) -> int:
    if node is None:
        return 0
    return _height(node.left) - _height(node.right)


class AvlBalancing:
    """Height‑balanced strategy; stateless, one instance can serve many trees."""

    name = "avl"

    # ------------------------------------------------------------------
    #   Insertion
    # ------------------------------------------------------------------
    def insert(self, tree: Any, key: Any, value: Any) -> Tuple[AvlNode, bool]:
        root, node, inserted = self._insert(tree, tree._root, None, key, value)
        tree._root = root
        return node, inserted

    def _insert(
        self,
        tree: Any,
        node: Optional[AvlNode],
        parent: Optional[AvlNode],
        key: Any,
        value: Any,
    ) -> Tuple[AvlNode, AvlNode, bool]:
        """
        Insert below *node* and return ``(subtree_root, target, inserted)``
        where *target* holds *key* (new or pre‑existing).
        """
        if node is None:
            created = AvlNode(key, value, parent)
            tree._size += 1
            return created, created, True

        less = tree._less
        if less(key, node.key):
            node.left, target, inserted = self._insert(tree, node.left, node, key, value)
        elif less(node.key, key):
            node.right, target, inserted = self._insert(tree, node.right, node, key, value)
        else:
            # Equal keys – the stored pair wins.
            return node, node, False

        if not inserted:
            return node, target, False
        return self._rebalance(node), target, True

    # ------------------------------------------------------------------
    #   Erasure
    # ------------------------------------------------------------------
    def erase(self, tree: Any, key: Any) -> bool:
        tree._root, erased = self._erase(tree, tree._root, key)
        return erased

    def _erase(
        self, tree: Any, node: Optional[AvlNode], key: Any
    ) -> Tuple[Optional[AvlNode], bool]:
        if node is None:
            return None, False

        less = tree._less
        if less(key, node.key):
            node.left, erased = self._erase(tree, node.left, key)
        elif less(node.key, key):
            node.right, erased = self._erase(tree, node.right, key)
        elif node.left is not None and node.right is not None:
            # Two children: take over the successor's pair, then remove the
            # successor itself. It has no left child, so that erase splices.
            succ = leftmost(node.right)
            node.key, node.value = succ.key, succ.value
            node.right, erased = self._erase(tree, node.right, succ.key)
        else:
            child = node.left if node.left is not None else node.right
            if child is not None:
                child.parent = node.parent
            node.detach()
            tree._size -= 1
            return child, True

        if not erased:
            return node, False
        return self._rebalance(node), True

    # ------------------------------------------------------------------
    #   Rebalancing
    # ------------------------------------------------------------------
    def _rebalance(self, node: AvlNode) -> AvlNode:
        """Refresh *node*'s height and rotate if needed; return the subtree root."""
        _update_height(node)
        balance = _balance_factor(node)
        if balance > 1:
            if _balance_factor(node.left) < 0:
                node.left = self._rotate_left(node.left)
            return self._rotate_right(node)
        if balance < -1:
            if _balance_factor(node.right) > 0:
                node.right = self._rotate_right(node.right)
            return self._rotate_left(node)
        return node

    @staticmethod
    def _rotate_left(node: AvlNode) -> AvlNode:
        pivot = rotate_left(node)
        _update_height(node)
        _update_height(pivot)
        return pivot

    @staticmethod
    def _rotate_right(node: AvlNode) -> AvlNode:
        pivot = rotate_right(node)
        _update_height(node)
        _update_height(pivot)
        return pivot

    # ------------------------------------------------------------------
    #   Validation
    # ------------------------------------------------------------------
    def validate(self, root: Optional[AvlNode]) -> None:
        """
        Check stored heights and the AVL balance condition.
        Raises ``AssertionError`` on the first violation.
        """

        def dfs(node: Optional[AvlNode]) -> int:
            if node is None:
                return -1
            left = dfs(node.left)
            right = dfs(node.right)
            assert node.height == 1 + max(left, right), (
                f"Stale height at {node!r}"
            )
            assert abs(left - right) <= 1, f"Unbalanced at {node!r}"
            return node.height

        dfs(root)


AVL = AvlBalancing()
