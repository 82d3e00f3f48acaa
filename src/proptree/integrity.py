"""Engine integrity exceptions.

These exceptions indicate CONTRACT VIOLATIONS inside the engine, not a
property of the generated input. They must propagate to the top level:
runners never retry, record or swallow them, even mid-shrink.

Design:
    - Subclass AssertionError: a broken invariant is an assertion failure
    - NOT ProptreeError subclasses (different error domain)
    - Carry diagnostic context for post-mortem analysis
    - Immutable after construction
    - @final decorator prevents subclassing

Hierarchy:
    EngineIntegrityError (base - contract violations)
    ├─ FilterUnrecoverableError (filtered tree cannot return to an accepted value)
    ├─ ImmutabilityViolationError (mutation attempt on a frozen error)
    ├─ ReplayDivergenceError (exhaustive replay drew a different choice)
    └─ ShrinkStateError (shrink cursor left every valid state)

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import final

__all__ = [
    "EngineIntegrityError",
    "FilterUnrecoverableError",
    "ImmutabilityViolationError",
    "IntegrityContext",
    "ReplayDivergenceError",
    "ShrinkStateError",
]


@dataclass(frozen=True, slots=True)
class IntegrityContext:
    """Context for integrity error diagnosis.

    Attributes:
        component: Engine component where the violation occurred (vec, filter)
        operation: Operation being performed (simplify, complicate, new_tree)
        state: repr() of the offending internal state (optional)
    """

    component: str
    operation: str
    state: str | None = None


class EngineIntegrityError(AssertionError):
    """Base exception for engine contract violations.

    Attributes:
        context: Structured diagnostic context for post-mortem analysis
    """

    __slots__ = ("_context", "_frozen")

    _context: IntegrityContext | None
    _frozen: bool

    def __init__(
        self,
        message: str,
        context: IntegrityContext | None = None,
    ) -> None:
        """Initialize EngineIntegrityError.

        Args:
            message: Human-readable error description
            context: Structured diagnostic context (optional)
        """
        super().__init__(message)
        object.__setattr__(self, "_context", context)
        object.__setattr__(self, "_frozen", True)

    # Python's exception machinery sets these while propagating.
    _PYTHON_EXCEPTION_ATTRS: frozenset[str] = frozenset(
        ("__traceback__", "__context__", "__cause__", "__suppress_context__", "__notes__")
    )

    def __setattr__(self, name: str, value: object) -> None:
        """Reject attribute mutations after initialization.

        Raises:
            ImmutabilityViolationError: If attempting to modify after construction
        """
        if name in self._PYTHON_EXCEPTION_ATTRS:
            object.__setattr__(self, name, value)
            return
        if getattr(self, "_frozen", False):
            msg = f"Cannot modify integrity error attribute: {name}"
            raise ImmutabilityViolationError(msg)
        object.__setattr__(self, name, value)

    @property
    def context(self) -> IntegrityContext | None:
        """Structured diagnostic context."""
        return self._context

    def __repr__(self) -> str:
        """Return detailed representation for debugging."""
        return f"{self.__class__.__name__}({self.args[0]!r}, context={self._context!r})"


@final
class ShrinkStateError(EngineIntegrityError):
    """A collection tree's shrink cursor is in neither the delete nor the
    shrink phase after simplify ran to completion.
    """


@final
class FilterUnrecoverableError(EngineIntegrityError):
    """A filtered tree exhausted complicate() without regaining a value the
    filter accepts.

    Indicates the underlying tree does not honour the complicate contract.
    """


@final
class ImmutabilityViolationError(EngineIntegrityError):
    """Attempt to mutate a frozen integrity error."""


@final
class ReplayDivergenceError(EngineIntegrityError):
    """Replaying a recorded choice prefix asked for a different choice.

    The exhaustive runner relies on strategies drawing the same sequence
    of choices for the same answers; a strategy consulting outside state
    breaks that.
    """
