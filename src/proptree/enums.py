"""Enumerations for proptree type-safe constants.

Uses StrEnum for automatic string conversion.

Python 3.13+.
"""

from enum import StrEnum


class Backend(StrEnum):
    """Execution backend for a property.

    StrEnum provides automatic string conversion: str(Backend.RANDOM) == "random"
    """

    RANDOM = "random"
    """Seeded random draws, failing values minimized by simplify/complicate."""

    EXHAUSTIVE = "exhaustive"
    """Every choice sequence enumerated depth-first, no shrink search."""


class CaseOutcome(StrEnum):
    """Result of running a property body against one value."""

    PASSED = "passed"
    REJECTED = "rejected"
    FAILED = "failed"


class BoolShrinkState(StrEnum):
    """Progress of a boolean value tree through its single simplification."""

    UNTOUCHED = "untouched"
    SIMPLIFIED = "simplified"
    """True was lowered to False; complicate() may still restore it."""

    FINAL = "final"


class ShrinkPhase(StrEnum):
    """Phase named by a collection value tree's shrink cursor."""

    DELETE = "delete"
    """Attempting to delete the element at the cursor index."""

    SHRINK = "shrink"
    """Attempting to simplify the element at the cursor index."""


__all__ = [
    "Backend",
    "BoolShrinkState",
    "CaseOutcome",
    "ShrinkPhase",
]
