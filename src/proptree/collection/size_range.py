"""Inclusive size bounds for collection strategies.

A SizeRange is the closed interval ``[start, end]`` of lengths a collection
strategy may produce. Most callers pass something coercible instead of
building one directly:

    ==================  ==================
    argument            bound
    ==================  ==================
    ``5``               ``[5, 5]``
    ``range(2, 7)``     ``[2, 6]``
    ``range(7)``        ``[0, 6]``
    ``(2, 7)``          ``[2, 6]``
    ``SizeRange(...)``  unchanged
    ==================  ==================

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from proptree.constants import DEFAULT_SIZE_HIGH, DEFAULT_SIZE_LOW, MAX_SIZE

__all__ = ["SizeRange", "size_range"]


@dataclass(frozen=True, slots=True)
class SizeRange:
    """Closed interval of admissible collection sizes.

    Attributes:
        start: Smallest admissible size
        end: Largest admissible size (inclusive)

    Example:
        >>> SizeRange(1, 4).extract()
        (1, 4)
        >>> list(SizeRange(1, 4) + 2)
        [3, 4, 5, 6]
    """

    start: int
    end: int

    def __post_init__(self) -> None:
        """Validate bounds.

        Raises:
            ValueError: If an end is negative, above MAX_SIZE, or the
                interval is reversed
        """
        if self.start < 0 or self.end < 0:
            msg = f"Size bounds must be non-negative, got [{self.start}, {self.end}]"
            raise ValueError(msg)
        if self.end > MAX_SIZE:
            msg = f"Size bound {self.end} exceeds maximum {MAX_SIZE}"
            raise ValueError(msg)
        if self.start > self.end:
            msg = f"Size range is empty: [{self.start}, {self.end}]"
            raise ValueError(msg)

    @classmethod
    def inclusive(cls, low: int, high: int) -> SizeRange:
        return cls(low, high)

    @classmethod
    def up_to(cls, high: int) -> SizeRange:
        """Sizes ``0`` through ``high`` inclusive."""
        return cls(0, high)

    @classmethod
    def exactly(cls, size: int) -> SizeRange:
        return cls(size, size)

    @classmethod
    def from_range(cls, r: range) -> SizeRange:
        """Convert a half-open ``range`` with step 1.

        Raises:
            ValueError: If the range is empty or its step is not 1
        """
        if r.step != 1:
            msg = f"Size ranges require step 1, got step {r.step}"
            raise ValueError(msg)
        if r.start >= r.stop:
            msg = f"Size range is empty: {r!r}"
            raise ValueError(msg)
        return cls(r.start, r.stop - 1)

    @classmethod
    def default(cls) -> SizeRange:
        """The bound used when none is given: ``[0, 99]``."""
        return cls(DEFAULT_SIZE_LOW, DEFAULT_SIZE_HIGH)

    @property
    def end_excl(self) -> int:
        """Exclusive upper end, clamped so it stays representable."""
        if self.end >= MAX_SIZE:
            return MAX_SIZE
        return self.end + 1

    def extract(self) -> tuple[int, int]:
        return self.start, self.end

    def to_range(self) -> range:
        return range(self.start, self.end + 1)

    def __iter__(self) -> Iterator[int]:
        return iter(self.to_range())

    def __contains__(self, size: object) -> bool:
        return isinstance(size, int) and self.start <= size <= self.end

    def __add__(self, n: int) -> SizeRange:
        if not isinstance(n, int):
            return NotImplemented
        return SizeRange(self.start + n, self.end + n)


def size_range(value: object) -> SizeRange:
    """Coerce ``value`` into a SizeRange.

    Raises:
        TypeError: If ``value`` is not an int, range, 2-tuple, or SizeRange
        ValueError: If the resulting bound is invalid
    """
    match value:
        case SizeRange():
            return value
        case bool():
            msg = "Size bounds cannot be booleans"
            raise TypeError(msg)
        case int():
            return SizeRange.exactly(value)
        case range():
            return SizeRange.from_range(value)
        case tuple((int() as low, int() as high)):
            return SizeRange.from_range(range(low, high))
        case _:
            msg = f"Cannot use {type(value).__name__} as a size range"
            raise TypeError(msg)
