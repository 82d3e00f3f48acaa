"""Bounded collection strategies.

Exports:
    SizeRange, size_range: Inclusive length bounds and their coercion
    vec: Variable-length lists with delete-then-shrink minimization
    vec_deque, binary_heap: Deques and heap-ordered lists
    hash_set, hash_map, sorted_set, sorted_map: Sets and dicts, hashed or ordered

Python 3.13+.
"""

from .adapters import binary_heap, hash_map, hash_set, sorted_map, sorted_set, vec_deque
from .size_range import SizeRange, size_range
from .vec import Shrink, VecStrategy, VecValueTree, vec

__all__ = [
    "Shrink",
    "SizeRange",
    "VecStrategy",
    "VecValueTree",
    "binary_heap",
    "hash_map",
    "hash_set",
    "size_range",
    "sorted_map",
    "sorted_set",
    "vec",
    "vec_deque",
]
