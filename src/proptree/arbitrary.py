"""Default strategies derived from Python types.

Example:
    >>> s = arbitrary(list[tuple[int, bool]])
    >>> type(s).__name__
    'VecStrategy'

Supported:
    bool, int (signed 64-bit), None, tuple[A, B, ...] (arity 1 to 12),
    list[T], collections.deque[T], set[T], frozenset[T], dict[K, V]

Collections use the default size range ``[0, 99]``.

Python 3.13+.
"""

from __future__ import annotations

import types
from collections import deque
from typing import Any, get_args, get_origin

from proptree.collection import hash_map, hash_set, vec, vec_deque
from proptree.num import booleans, integers
from proptree.strategy.just import Just
from proptree.strategy.traits import Strategy
from proptree.tuple import tuples

__all__ = ["arbitrary"]


def arbitrary(tp: Any) -> Strategy[Any]:
    """Return the default strategy for values of type ``tp``.

    Raises:
        TypeError: If ``tp`` has no default strategy
        ValueError: If a tuple type has an unsupported arity
    """
    if tp is bool:
        return booleans()
    if tp is int:
        return integers()
    if tp is None or tp is types.NoneType:
        return Just(None)

    origin = get_origin(tp)
    args = get_args(tp)
    if origin is None or not args:
        msg = f"No default strategy for type {tp!r}"
        raise TypeError(msg)

    if origin is tuple:
        if len(args) == 2 and args[1] is Ellipsis:
            msg = f"Variable-length tuples have no default strategy: {tp!r}"
            raise TypeError(msg)
        return tuples(*(arbitrary(arg) for arg in args))
    if origin is list:
        return vec(arbitrary(args[0]))
    if origin is deque:
        return vec_deque(arbitrary(args[0]))
    if origin is set:
        return hash_set(arbitrary(args[0]))
    if origin is frozenset:
        return hash_set(arbitrary(args[0])).map(frozenset)
    if origin is dict:
        key, value = args
        return hash_map(arbitrary(key), arbitrary(value))

    msg = f"No default strategy for type {tp!r}"
    raise TypeError(msg)
