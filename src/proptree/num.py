"""Integer and boolean strategies.

Integers are drawn uniformly from an inclusive range and shrink by binary
search toward the value in range closest to zero (the range's "origin").

The search keeps two offsets from the origin: ``lo`` (smallest offset not
yet ruled out) and ``hi`` (offset of the last value known to be current
before a simplification). ``simplify()`` jumps to the midpoint; a following
``complicate()`` restores the previous value exactly and moves ``lo`` past
the rejected midpoint, so no ruled-out value is ever proposed again.

Python 3.13+.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from proptree.constants import DEFAULT_INT_MAX, DEFAULT_INT_MIN
from proptree.enums import BoolShrinkState
from proptree.strategy.traits import Strategy, ValueTree

if TYPE_CHECKING:
    from proptree.runner.runner import TestRunner

__all__ = [
    "BinarySearch",
    "BoolValueTree",
    "Booleans",
    "IntRange",
    "booleans",
    "integers",
]


@dataclass(frozen=True, slots=True)
class IntRange(Strategy[int]):
    """Integers in the inclusive range ``[low, high]``.

    Example:
        >>> IntRange.from_range(range(1, 20))
        IntRange(low=1, high=19)
    """

    low: int
    high: int

    def __post_init__(self) -> None:
        """Validate bounds.

        Raises:
            ValueError: If low > high
        """
        if self.low > self.high:
            msg = f"IntRange requires low <= high, got [{self.low}, {self.high}]"
            raise ValueError(msg)

    @classmethod
    def from_range(cls, r: range) -> IntRange:
        """Build from a half-open ``range`` with step 1.

        Raises:
            ValueError: If the range is empty or its step is not 1
        """
        if r.step != 1:
            msg = f"Only ranges with step 1 can be strategies, got step {r.step}"
            raise ValueError(msg)
        if r.start >= r.stop:
            msg = f"Cannot draw from empty range {r!r}"
            raise ValueError(msg)
        return cls(r.start, r.stop - 1)

    def new_tree(self, runner: TestRunner) -> BinarySearch:
        value = runner.draw_integer(self.low, self.high)
        return BinarySearch.clamped(self.low, value, self.high)


@dataclass(slots=True)
class BinarySearch(ValueTree[int]):
    """Binary-search shrinker over one integer.

    Attributes:
        origin: Simplest value in range (closest to zero)
        sign: +1 if values at or above origin are searched, -1 otherwise
        lo: Smallest offset from origin not yet ruled out
        hi: Offset of the value simplify() started from
        curr: Offset of the current value
        prev: Offset to restore on complicate(), or None
    """

    origin: int
    sign: int
    lo: int
    hi: int
    curr: int
    prev: int | None = field(default=None)

    @classmethod
    def clamped(cls, low: int, start: int, high: int) -> BinarySearch:
        """Search from ``start`` toward the value in ``[low, high]`` closest to zero."""
        origin = min(max(0, low), high)
        sign = 1 if start >= origin else -1
        offset = abs(start - origin)
        return cls(origin=origin, sign=sign, lo=0, hi=offset, curr=offset)

    def current(self) -> int:
        return self.origin + self.sign * self.curr

    def simplify(self) -> bool:
        if self.curr <= self.lo:
            return False
        self.hi = self.curr
        mid = self.lo + (self.hi - self.lo) // 2
        self.prev = self.curr
        self.curr = mid
        return True

    def complicate(self) -> bool:
        if self.prev is None:
            return False
        # The midpoint was too simple: nothing at or below it needs retrying.
        self.lo = self.curr + 1
        self.curr = self.prev
        self.prev = None
        return True


@dataclass(frozen=True, slots=True)
class Booleans(Strategy[bool]):
    """Uniform booleans; ``True`` simplifies to ``False``."""

    def new_tree(self, runner: TestRunner) -> BoolValueTree:
        return BoolValueTree(runner.draw_integer(0, 1) == 1)


@dataclass(slots=True)
class BoolValueTree(ValueTree[bool]):
    """Boolean tree: one simplification (True -> False), undone at most once."""

    value: bool
    state: BoolShrinkState = field(default=BoolShrinkState.UNTOUCHED)

    def current(self) -> bool:
        return self.value

    def simplify(self) -> bool:
        if self.state is BoolShrinkState.UNTOUCHED and self.value:
            self.value = False
            self.state = BoolShrinkState.SIMPLIFIED
            return True
        return False

    def complicate(self) -> bool:
        if self.state is BoolShrinkState.SIMPLIFIED:
            self.value = True
            self.state = BoolShrinkState.FINAL
            return True
        return False


def integers(min_value: int = DEFAULT_INT_MIN, max_value: int = DEFAULT_INT_MAX) -> IntRange:
    """Integers in ``[min_value, max_value]`` (both inclusive)."""
    return IntRange(min_value, max_value)


def booleans() -> Booleans:
    return Booleans()
