#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
ordered_map.py
--------------

A self‑balancing ordered map (key → value) with a pluggable balancing
strategy. Keys are ordered by a caller supplied ``less(a, b)`` function
(``operator.lt`` by default); two keys are equal when neither is less than
the other. Insert, erase and lookup are O(log n).

Features
~~~~~~~~
* `tree.insert(key, value)` – returns ``(position, inserted)``; an existing
  key keeps its stored value (first insert wins)
* `tree.find(key)`          – position of *key* or ``tree.end()``
* `tree.erase(key)` / `tree.erase(position)` – ``True`` if a node was removed
* `tree.begin()`, `tree.end()`, `tree.cbegin()`, `tree.cend()` – positions
* `tree.size()`, `tree.empty()`, `tree.clear()`
* `value = tree[key]`, `del tree[key]` (KeyError if missing), `key in tree`
* iteration (`for key in tree:`) – keys in ascending order, `reversed(tree)`
* `tree.items()`, `tree.keys()`, `tree.values()`
* `tree.min_key()`, `tree.max_key()`
* `tree.successor(key)`, `tree.predecessor(key)` (raise KeyError if not found)
* `tree.validate()` – sanity‑check every invariant (useful for debugging)

Two strategies are available: ``"avl"`` (default) and ``"red-black"``.
`AvlTree` and `RedBlackTree` are the same map with the strategy fixed.

Typical usage
~~~~~~~~~~~~~
>>> from ordered_map import AvlTree
>>> ages = AvlTree()
>>> pos, inserted = ages.insert("Joe", 25)
>>> inserted
True
>>> ages.insert("Joe", 99)[1]
False
>>> ages["Joe"]
25
>>> ages.erase("Joe")
True
>>> ages.empty()
True

Not thread safe: callers must serialise mutation and iteration themselves.
"""

from __future__ import annotations

import logging
from typing import (
    Any,
    Dict,
    Generator,
    Generic,
    Iterable,
    List,
    Optional,
    Tuple,
    TypeVar,
    Union,
)

from avl_tree import AVL
from bst_node import (
    BalancingStrategy,
    Less,
    Node,
    default_less,
    leftmost,
    predecessor,
    rightmost,
    successor,
)
from red_black_tree import RED_BLACK
from tree_iterator import ConstTreePosition, TreePosition, _Position

logger = logging.getLogger(__name__)

K = TypeVar("K")
V = TypeVar("V")

STRATEGIES: Dict[str, BalancingStrategy] = {
    AVL.name: AVL,
    RED_BLACK.name: RED_BLACK,
}


def resolve_strategy(strategy: Union[str, BalancingStrategy]) -> BalancingStrategy:
    """Accept a strategy object or one of the names in `STRATEGIES`."""
    if isinstance(strategy, str):
        try:
            return STRATEGIES[strategy]
        except KeyError:
            raise ValueError(
                f"Unknown balancing strategy {strategy!r}; "
                f"expected one of {sorted(STRATEGIES)}"
            ) from None
    return strategy


class OrderedMap(Generic[K, V]):
    """
    An ordered mapping implemented with a balanced binary search tree.

    Parameters
    ----------
    items : iterable of (key, value) or OrderedMap, optional
        Initial contents, inserted one by one (O(n log n)). Earlier pairs
        win over later pairs with an equal key.
    less : callable, optional
        Strict weak ordering over keys. Defaults to ``operator.lt``, or to
        the ordering of *items* when it is an `OrderedMap`.
    strategy : str or strategy object, optional
        Balancing discipline, see `STRATEGIES`. Defaults to ``"avl"``, or
        to the strategy of *items* when it is an `OrderedMap`.
    """

    __slots__ = ("_root", "_size", "_less", "_strategy")

    def __init__(
        self,
        items: Optional[Iterable[Tuple[K, V]]] = None,
        *,
        less: Optional[Less] = None,
        strategy: Optional[Union[str, BalancingStrategy]] = None,
    ) -> None:
        if isinstance(items, OrderedMap):
            if less is None:
                less = items._less
            if strategy is None:
                strategy = items._strategy
            items = items.items()
        self._root: Optional[Node[K, V]] = None
        self._size: int = 0
        self._less: Less = default_less if less is None else less
        self._strategy = resolve_strategy("avl" if strategy is None else strategy)

        if items is not None:
            for key, value in items:
                self.insert(key, value)
            logger.debug(
                "Built %s map with %d entries", self._strategy.name, self._size
            )

    @property
    def strategy(self) -> BalancingStrategy:
        return self._strategy

    # ------------------------------------------------------------------
    #   Helper look‑up (internal)
    # ------------------------------------------------------------------
    def _search_node(self, key: K) -> Optional[Node[K, V]]:
        """Return the node that holds *key* or ``None`` if not found."""
        less = self._less
        cur = self._root
        while cur is not None:
            if less(key, cur.key):
                cur = cur.left
            elif less(cur.key, key):
                cur = cur.right
            else:
                return cur
        return None

    # ------------------------------------------------------------------
    #   Core operations
    # ------------------------------------------------------------------
    def insert(self, key: K, value: V) -> Tuple[TreePosition[K, V], bool]:
        """
        Insert *key* with *value* unless the key is already present.

        Returns the position holding *key* and whether a node was created.
        A present key keeps its stored value; erase it first to replace it.
        """
        node, inserted = self._strategy.insert(self, key, value)
        return TreePosition(self, node), inserted

    def find(self, key: K) -> TreePosition[K, V]:
        return TreePosition(self, self._search_node(key))

    def erase(self, target: Union[K, _Position[K, V]]) -> bool:
        """
        Remove a key, given either the key itself or a position on it.

        Returns ``False`` only when the key is absent. A position must come
        from this tree (``ValueError`` otherwise) and must not be end
        (``IndexError``).
        """
        if isinstance(target, _Position):
            if target._tree is not self:
                raise ValueError("position belongs to a different tree")
            # Read the key before the node is unlinked.
            key = target._require_node().key
        else:
            key = target
        return self._strategy.erase(self, key)

    def size(self) -> int:
        return self._size

    def empty(self) -> bool:
        return self._root is None

    def clear(self) -> None:
        """Drop every entry, detaching each node so stale positions dead-end."""
        logger.debug("Clearing %d entries", self._size)
        stack = [] if self._root is None else [self._root]
        while stack:
            node = stack.pop()
            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)
            node.detach()
        self._root = None
        self._size = 0

    # ------------------------------------------------------------------
    #   Positions
    # ------------------------------------------------------------------
    def _first(self) -> Optional[Node[K, V]]:
        return None if self._root is None else leftmost(self._root)

    def begin(self) -> TreePosition[K, V]:
        return TreePosition(self, self._first())

    def end(self) -> TreePosition[K, V]:
        return TreePosition(self, None)

    def cbegin(self) -> ConstTreePosition[K, V]:
        return ConstTreePosition(self, self._first())

    def cend(self) -> ConstTreePosition[K, V]:
        return ConstTreePosition(self, None)

    # ------------------------------------------------------------------
    #   Mapping protocol
    # ------------------------------------------------------------------
    def __contains__(self, key: object) -> bool:
        return self._search_node(key) is not None  # type: ignore[arg-type]

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._root is not None

    def __getitem__(self, key: K) -> V:
        node = self._search_node(key)
        if node is None:
            raise KeyError(key)
        return node.value

    def __delitem__(self, key: K) -> None:
        if not self.erase(key):
            raise KeyError(key)

    def get(self, key: K, default: Optional[V] = None) -> Optional[V]:
        node = self._search_node(key)
        return default if node is None else node.value

    def _nodes(self) -> Generator[Node[K, V], None, None]:
        node = self._first()
        while node is not None:
            yield node
            node = successor(node)

    def __iter__(self) -> Generator[K, None, None]:
        """Yield keys in ascending order by following parent links."""
        for node in self._nodes():
            yield node.key

    def __reversed__(self) -> Generator[K, None, None]:
        node = None if self._root is None else rightmost(self._root)
        while node is not None:
            yield node.key
            node = predecessor(node)

    # ------------------------------------------------------------------
    #   Convenience collection‑like view methods
    # ------------------------------------------------------------------
    def keys(self) -> List[K]:
        """Return a list of all keys in sorted order."""
        return list(self)

    def values(self) -> List[V]:
        """Return a list of all values in key order."""
        return [node.value for node in self._nodes()]

    def items(self) -> List[Tuple[K, V]]:
        """Return a list of ``(key, value)`` pairs in sorted order."""
        return [(node.key, node.value) for node in self._nodes()]

    # ------------------------------------------------------------------
    #   Minimum / maximum, successor / predecessor
    # ------------------------------------------------------------------
    def min_key(self) -> K:
        """Return the smallest key stored in the tree."""
        if self._root is None:
            raise ValueError("Tree is empty")
        return leftmost(self._root).key

    def max_key(self) -> K:
        """Return the largest key stored in the tree."""
        if self._root is None:
            raise ValueError("Tree is empty")
        return rightmost(self._root).key

    def successor(self, key: K) -> K:
        """Return the smallest key greater than *key*; raise KeyError if none."""
        node = self._search_node(key)
        if node is None:
            raise KeyError(key)
        nxt = successor(node)
        if nxt is None:
            raise KeyError(f"No successor for {key}")
        return nxt.key

    def predecessor(self, key: K) -> K:
        """Return the greatest key smaller than *key*; raise KeyError if none."""
        node = self._search_node(key)
        if node is None:
            raise KeyError(key)
        prev = predecessor(node)
        if prev is None:
            raise KeyError(f"No predecessor for {key}")
        return prev.key

    # ------------------------------------------------------------------
    #   Validation/checking utilities – useful for debugging
    # ------------------------------------------------------------------
    def validate(self) -> None:
        """
        Verify ordering, parent links, the element count and the
        strategy's balance invariants.
        Raises ``AssertionError`` with a descriptive message if something is broken.
        """
        less = self._less
        if self._root is not None:
            assert self._root.parent is None, "Root has a parent"

        count = 0
        stack: List[Node[K, V]] = [] if self._root is None else [self._root]
        while stack:
            node = stack.pop()
            count += 1
            for child in (node.left, node.right):
                if child is None:
                    continue
                assert child.parent is node, f"Broken parent link at {child!r}"
                stack.append(child)
            if node.left is not None:
                assert less(node.left.key, node.key), (
                    "BST property violated (left child larger)"
                )
            if node.right is not None:
                assert less(node.key, node.right.key), (
                    "BST property violated (right child smaller)"
                )
        assert count == self._size, f"Size {self._size} but {count} nodes"

        previous = None
        walked = 0
        for node in self._nodes():
            if walked:
                assert less(previous.key, node.key), "In-order keys not ascending"
            previous = node
            walked += 1
        assert walked == self._size, "Traversal does not visit every node"

        self._strategy.validate(self._root)

    # ------------------------------------------------------------------
    #   Convenience string representation (for debugging)
    # ------------------------------------------------------------------
    def __repr__(self) -> str:
        items = ", ".join(f"{k!r}: {v!r}" for k, v in self.items())
        return f"{type(self).__name__}({{{items}}})"


class AvlTree(OrderedMap[K, V]):
    """`OrderedMap` balanced with the AVL discipline."""

    __slots__ = ()

    def __init__(
        self,
        items: Optional[Iterable[Tuple[K, V]]] = None,
        *,
        less: Optional[Less] = None,
    ) -> None:
        super().__init__(items, less=less, strategy=AVL)


class RedBlackTree(OrderedMap[K, V]):
    """`OrderedMap` balanced with the red‑black discipline."""

    __slots__ = ()

    def __init__(
        self,
        items: Optional[Iterable[Tuple[K, V]]] = None,
        *,
        less: Optional[Less] = None,
    ) -> None:
        super().__init__(items, less=less, strategy=RED_BLACK)
