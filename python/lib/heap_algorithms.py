#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
heap_algorithms.py
------------------

Binary heap algorithms over any mutable random‑access sequence (a ``list``
is the usual choice), in the spirit of C++'s ``std::make_heap`` family.

The ordering is given by ``less(a, b)``, meaning *a* ranks below *b*. The
element at index 0 is the best one: with the default ``operator.lt`` that
is the largest (a max‑heap); pass ``operator.gt`` for a min‑heap.

For every index ``i`` the heap property requires that neither child
``2i+1`` nor ``2i+2`` ranks above the element at ``i``.

>>> data = [3, 1, 4, 1, 5, 9, 2, 6]
>>> make_heap(data)
>>> data[0]
9
>>> data.append(10)
>>> push_heap(data)
>>> data[0]
10
>>> pop_heap(data)
>>> data.pop()
10
"""

from __future__ import annotations

import operator
from typing import Any, Callable, MutableSequence

Less = Callable[[Any, Any], bool]


def _sift_up(seq: MutableSequence[Any], idx: int, less: Less) -> None:
    """Move the entry at *idx* up until its parent no longer ranks below it."""
    while idx > 0:
        parent = (idx - 1) // 2
        if not less(seq[parent], seq[idx]):
            break
        seq[idx], seq[parent] = seq[parent], seq[idx]
        idx = parent


def _sift_down(seq: MutableSequence[Any], idx: int, end: int, less: Less) -> None:
    """
    Move the entry at *idx* down inside ``seq[:end]`` until no child ranks
    above it. The better of the two children is the one swapped in.
    """
    while (child := 2 * idx + 1) < end:
        right = child + 1
        if right < end and less(seq[child], seq[right]):
            child = right
        if not less(seq[idx], seq[child]):
            break
        seq[idx], seq[child] = seq[child], seq[idx]
        idx = child


def make_heap(seq: MutableSequence[Any], less: Less = operator.lt) -> None:
    """Rearrange *seq* in place into a heap, O(n)."""
    n = len(seq)
    # Leaves already satisfy the property; start from the last parent.
    for idx in range(n // 2 - 1, -1, -1):
        _sift_down(seq, idx, n, less)


def push_heap(seq: MutableSequence[Any], less: Less = operator.lt) -> None:
    """
    Restore the heap property after an element was appended to *seq*.
    ``seq[:-1]`` must already be a heap. O(log n).
    """
    if seq:
        _sift_up(seq, len(seq) - 1, less)


def pop_heap(seq: MutableSequence[Any], less: Less = operator.lt) -> None:
    """
    Move the best element to the end of *seq* and re‑heapify the rest.

    The sequence keeps its length; the caller removes the last element
    (``seq.pop()``). Does nothing on an empty sequence. O(log n).
    """
    last = len(seq) - 1
    if last <= 0:
        return
    seq[0], seq[last] = seq[last], seq[0]
    _sift_down(seq, 0, last, less)


def is_heap(seq: MutableSequence[Any], less: Less = operator.lt) -> bool:
    """Return True when every parent in *seq* ranks at least as high as its children."""
    n = len(seq)
    for child in range(1, n):
        if less(seq[(child - 1) // 2], seq[child]):
            return False
    return True
