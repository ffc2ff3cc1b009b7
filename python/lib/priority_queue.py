#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
priority_queue.py
-----------------

A small priority queue built on the array heap algorithms in
`heap_algorithms`.

Features
~~~~~~~~
* O(log n) push and pop, O(1) peek.
* O(n) construction from an iterable of ``(item, priority)`` pairs.
* Optional max‑heap mode (just set max_heap=True).
* Stable tie‑breaking (insertion order) – items with the same priority are
  returned in the order they were inserted.
* Custom key function (like `sorted(..., key=…)`) so you can push items
  without explicitly giving a priority.
* Priorities only need ``<``; they do not have to be numbers. A custom
  ``less(a, b)`` comparator replaces ``<`` for priorities that have none.

Typical usage
~~~~~~~~~~~~~
>>> from priority_queue import PriorityQueue
>>> pq = PriorityQueue()
>>> pq.push('task1', 5)
>>> pq.push('task2', 2)
>>> pq.push('task3', 7)
>>> pq.pop()
'task2'
>>> pq.peek()
'task1'
"""

from __future__ import annotations

import itertools
import operator
from typing import (
    Any,
    Callable,
    Generic,
    Iterable,
    Iterator,
    List,
    Optional,
    Tuple,
    TypeVar,
)

from heap_algorithms import is_heap, make_heap, pop_heap, push_heap

# ----------------------------------------------------------------------
#  Generic type variables
# ----------------------------------------------------------------------
T = TypeVar('T')                     # type of the stored item
P = TypeVar('P')                     # type of the priority (needs `<`)

# A heap entry: (priority, insertion_counter, item)
_Entry = Tuple[Any, int, Any]


class PriorityQueue(Generic[T, P]):
    """
    A min‑priority queue (or max‑priority if requested).

    Parameters
    ----------
    items : iterable of (item, priority), optional
        Initial contents, heapified in one O(n) pass. A priority of
        ``None`` is replaced by ``key(item)``.

    key : Callable[[T], P], optional
        If supplied, ``push(item)`` will call ``key(item)`` to obtain the
        priority automatically. When ``key`` is ``None`` the item itself
        is its priority.

    less : Callable[[P, P], bool], optional
        Strict weak ordering over priorities, ``operator.lt`` by default.
        The least priority under *less* is served first, the greatest when
        *max_heap* is set.

    max_heap : bool, default ``False``
        If true, the queue behaves as a *max*‑heap (largest priority first).
    """

    __slots__ = ("_heap", "_counter", "_key", "_less", "_max_heap")

    def __init__(
        self,
        items: Optional[Iterable[Tuple[T, Optional[P]]]] = None,
        *,
        key: Optional[Callable[[T], P]] = None,
        less: Optional[Callable[[P, P], bool]] = None,
        max_heap: bool = False,
    ) -> None:
        # The underlying list the heap algorithms work on.
        self._heap: List[_Entry] = []

        # A monotonically increasing counter to guarantee stable ordering.
        self._counter = itertools.count()

        # Function that extracts a priority from an item (if user supplied).
        self._key: Callable[[T], P] = (lambda x: x) if key is None else key

        # Ordering over priorities.
        self._less: Callable[[P, P], bool] = operator.lt if less is None else less

        self._max_heap = max_heap

        if items is not None:
            self._heap = [self._entry(item, priority) for item, priority in items]
            make_heap(self._heap, self._ranks_below)

    # ------------------------------------------------------------------
    #   Helper: wrap a (priority, item) pair as a heap entry.
    # ------------------------------------------------------------------
    def _entry(self, item: T, priority: Optional[P]) -> _Entry:
        if priority is None:
            priority = self._key(item)
        return (priority, next(self._counter), item)

    def _ranks_below(self, a: _Entry, b: _Entry) -> bool:
        """
        Heap ordering over entries: True when *a* should come out after *b*.
        Equal priorities fall back to insertion order.
        """
        pa, ca, _ = a
        pb, cb, _ = b
        less = self._less
        if self._max_heap:
            if less(pa, pb):
                return True
            if less(pb, pa):
                return False
        else:
            if less(pb, pa):
                return True
            if less(pa, pb):
                return False
        return cb < ca

    # ------------------------------------------------------------------
    #   Core public API
    # ------------------------------------------------------------------
    def push(self, item: T, priority: Optional[P] = None) -> None:
        """
        Insert *item* with the given *priority*.
        If ``priority`` is omitted, ``self._key(item)`` is called.
        """
        self._heap.append(self._entry(item, priority))
        push_heap(self._heap, self._ranks_below)

    def pop(self) -> T:
        """
        Remove and return the element with the smallest (or largest for
        a max‑heap) priority.
        Raises ``IndexError`` if the queue is empty.
        """
        if not self._heap:
            raise IndexError("pop from an empty priority queue")
        pop_heap(self._heap, self._ranks_below)
        return self._heap.pop()[2]

    def peek(self) -> T:
        """
        Return the top element **without** removing it.
        Raises ``IndexError`` if the queue is empty.
        """
        if not self._heap:
            raise IndexError("peek from an empty priority queue")
        return self._heap[0][2]   # entry is (priority, counter, item)

    # ------------------------------------------------------------------
    #   Python protocol support
    # ------------------------------------------------------------------
    def __len__(self) -> int:
        """Return the number of items currently stored."""
        return len(self._heap)

    def __contains__(self, item: Any) -> bool:
        """Linear membership test."""
        return any(entry[2] == item for entry in self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)

    # ------------------------------------------------------------------
    #   Convenience: bulk insertion / iteration
    # ------------------------------------------------------------------
    def extend(self, items: Iterable[Tuple[T, Optional[P]]]) -> None:
        """
        Insert a bunch of (item, priority) pairs at once.
        The overall complexity is O(k log (k+n)), where ``k`` is the number
        of new items and ``n`` is the current size.
        """
        for item, priority in items:
            self.push(item, priority)

    def __iter__(self) -> Iterator[T]:
        """
        Iterate over the items **in arbitrary heap order** (i.e. not sorted).
        If you need them sorted, repeatedly ``pop()`` into a list.
        """
        return (entry[2] for entry in self._heap)

    # ------------------------------------------------------------------
    #   Debug/validation helpers
    # ------------------------------------------------------------------
    def _is_valid(self) -> bool:
        """Internal sanity check – useful while debugging."""
        return is_heap(self._heap, self._ranks_below)
