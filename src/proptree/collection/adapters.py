"""Collection strategies built on ``vec``.

Each adapter maps the list strategy into another container. Containers that
collapse duplicates (sets and dicts) can end up smaller than the requested
minimum; those values are rejected locally under the filter name
``"minimum size"``, and the filter keeps shrinking from producing them.

Python 3.13+.
"""

from __future__ import annotations

import heapq
from collections import deque
from typing import Any

from proptree.strategy.traits import Strategy, as_strategy
from proptree.tuple import TupleStrategy

from .size_range import SizeRange, size_range
from .vec import vec

__all__ = ["binary_heap", "hash_map", "hash_set", "sorted_map", "sorted_set", "vec_deque"]

MIN_SIZE_WHENCE = "minimum size"


def _bound(size: Any) -> SizeRange:
    return SizeRange.default() if size is None else size_range(size)


def _heapified(values: list[Any]) -> list[Any]:
    heap = list(values)
    heapq.heapify(heap)
    return heap


def _sorted_items(pairs: list[tuple[Any, Any]]) -> dict[Any, Any]:
    return dict(sorted(dict(pairs).items()))


def vec_deque(element: Any, size: Any = None) -> Strategy[deque[Any]]:
    """Deques of ``element`` values with length in ``size``."""
    return vec(element, _bound(size)).map(deque)


def binary_heap(element: Any, size: Any = None) -> Strategy[list[Any]]:
    """Lists of ``element`` values arranged as a ``heapq`` min-heap."""
    return vec(element, _bound(size)).map(_heapified)


def hash_set(element: Any, size: Any = None) -> Strategy[set[Any]]:
    """Sets of ``element`` values with size in ``size``.

    Duplicates are drawn and collapsed; a set smaller than the lower bound
    counts as a local reject.

    Example:
        >>> s = hash_set(range(0, 100), range(2, 5))
        >>> type(s).__name__
        'Filter'
    """
    bound = _bound(size)
    low = bound.start
    return vec(element, bound).map(set).filter(MIN_SIZE_WHENCE, lambda s: len(s) >= low)


def hash_map(key: Any, value: Any, size: Any = None) -> Strategy[dict[Any, Any]]:
    """Dicts with keys from ``key`` and values from ``value``.

    Later pairs win when keys repeat; a dict smaller than the lower bound
    counts as a local reject.
    """
    bound = _bound(size)
    low = bound.start
    pairs = TupleStrategy((as_strategy(key), as_strategy(value)))
    return vec(pairs, bound).map(dict).filter(MIN_SIZE_WHENCE, lambda d: len(d) >= low)


def sorted_set(element: Any, size: Any = None) -> Strategy[list[Any]]:
    """Ascending lists of distinct ``element`` values.

    The ordered counterpart of ``hash_set``; elements must be orderable.
    """
    bound = _bound(size)
    low = bound.start
    return (
        vec(element, bound)
        .map(lambda values: sorted(set(values)))
        .filter(MIN_SIZE_WHENCE, lambda s: len(s) >= low)
    )


def sorted_map(key: Any, value: Any, size: Any = None) -> Strategy[dict[Any, Any]]:
    """Dicts whose keys iterate in ascending order; later pairs win."""
    bound = _bound(size)
    low = bound.start
    pairs = TupleStrategy((as_strategy(key), as_strategy(value)))
    return vec(pairs, bound).map(_sorted_items).filter(MIN_SIZE_WHENCE, lambda d: len(d) >= low)
