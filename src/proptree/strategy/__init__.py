"""Strategy and value-tree contracts plus the generic adaptors.

Exports:
    Strategy, ValueTree: Abstract capability pair
    as_strategy: Coerce ranges and tuples into strategies
    Just: Constant strategy
    Map, Filter: Value transformation and local rejection
    Fuse: Latch exhaustion of a value tree
    Flatten, IndFlatten, IndFlattenMap: Dependent composition
    Union: Weighted choice

Python 3.13+.
"""

from .flatten import Flatten, FlattenValueTree, IndFlatten, IndFlattenMap
from .fuse import Fuse
from .just import Just, JustValueTree
from .traits import Strategy, ValueTree, as_strategy
from .union import Union, UnionValueTree
from .wrappers import Filter, FilterValueTree, Map, MapValueTree

__all__ = [
    "Filter",
    "FilterValueTree",
    "Flatten",
    "FlattenValueTree",
    "Fuse",
    "IndFlatten",
    "IndFlattenMap",
    "Just",
    "JustValueTree",
    "Map",
    "MapValueTree",
    "Strategy",
    "Union",
    "UnionValueTree",
    "ValueTree",
    "as_strategy",
]
