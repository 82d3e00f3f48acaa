"""Hypothesis strategies for proptree property-based testing.

Strategies generate engine inputs (bounds, weights, seeds) and whole
proptree strategy descriptions together with the bounds they were built
from, so tests can check generated values against them.

Usage:
    from tests.strategies import int_bounds, size_bounds, vec_specs
"""

from .engine import (
    VecSpec,
    int_bounds,
    seeds,
    size_bounds,
    small_int_bounds,
    vec_specs,
    weight_lists,
)

__all__ = [
    "VecSpec",
    "int_bounds",
    "seeds",
    "size_bounds",
    "small_int_bounds",
    "vec_specs",
    "weight_lists",
]
