"""Strategy and value-tree contracts.

A Strategy is an immutable description of how to produce values. Asking it
for a ValueTree (``new_tree``) draws one candidate from a runner; the tree
is the live, mutable representative of that candidate for the lifetime of
one test case.

Contract:
    - ``current()`` has no side effects and returns equal values until the
      next successful ``simplify()``/``complicate()``.
    - ``simplify()`` moves one step toward a simpler candidate and reports
      whether the candidate changed. Two ``False`` results in a row without a
      successful ``complicate()`` in between mean the tree is exhausted.
    - ``complicate()`` undoes the most recent successful ``simplify()``
      (never more than one step). With nothing to undo it returns ``False``
      and changes nothing.
    - ``new_tree()`` raises GenerationRejectedError when the runner says no
      acceptable value can be produced; it never returns an out-of-bounds value.

Python 3.13+.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from proptree.runner.runner import TestRunner

__all__ = ["Strategy", "ValueTree", "as_strategy"]


class ValueTree[T](ABC):
    """Live, mutable representative of one generated candidate."""

    __slots__ = ()

    @abstractmethod
    def current(self) -> T:
        """Return the current value without side effects."""

    @abstractmethod
    def simplify(self) -> bool:
        """Attempt one step toward a simpler value.

        Returns:
            True if the current value changed
        """

    @abstractmethod
    def complicate(self) -> bool:
        """Undo the most recent successful simplify().

        Returns:
            True if an undo was possible
        """


class Strategy[T](ABC):
    """Immutable, shareable description of how to generate values.

    Composition never mutates its inputs: one strategy instance may appear
    in any number of composed strategies.
    """

    __slots__ = ()

    @abstractmethod
    def new_tree(self, runner: TestRunner) -> ValueTree[T]:
        """Draw a fresh value tree from the runner.

        Raises:
            GenerationRejectedError: If no acceptable value can be produced
        """

    # ------------------------------------------------------------------
    # Combinators
    # ------------------------------------------------------------------

    def map[U](self, fun: Callable[[T], U]) -> Strategy[U]:
        """Transform every generated value with ``fun``.

        Shrinking is delegated to this strategy's tree.
        """
        from .wrappers import Map  # noqa: PLC0415 - circular

        return Map(self, fun)

    def filter(self, whence: str, fun: Callable[[T], bool]) -> Strategy[T]:
        """Keep only values accepted by ``fun``.

        Each rejected draw counts as a local reject; ``whence`` names the
        filter in the error raised once the runner's budget is spent.
        """
        from .wrappers import Filter  # noqa: PLC0415 - circular

        return Filter(self, whence, fun)

    def flat_map[U](self, fun: Callable[[T], Any]) -> Strategy[U]:
        """Generate a value, then draw from the strategy ``fun`` builds from it.

        ``fun`` may return anything ``as_strategy`` accepts.
        """
        from .flatten import Flatten  # noqa: PLC0415 - circular
        from .wrappers import Map  # noqa: PLC0415 - circular

        return Flatten(Map(self, lambda value: as_strategy(fun(value))))

    def ind_flat_map[U](self, fun: Callable[[T], Any]) -> Strategy[U]:
        """Like flat_map, but the outer value is discarded once drawn.

        Shrinking operates purely on the inner tree.
        """
        from .flatten import IndFlatten  # noqa: PLC0415 - circular
        from .wrappers import Map  # noqa: PLC0415 - circular

        return IndFlatten(Map(self, lambda value: as_strategy(fun(value))))

    def ind_flat_map2[U](self, fun: Callable[[T], Any]) -> Strategy[tuple[T, U]]:
        """Like ind_flat_map, but yields ``(outer, inner)`` pairs."""
        from .flatten import IndFlattenMap  # noqa: PLC0415 - circular

        return IndFlattenMap(self, lambda value: as_strategy(fun(value)))

    def boxed(self) -> Strategy[T]:
        """Return this strategy typed as the shared Strategy interface.

        Python references already give shared ownership, so no wrapper is
        needed; the method exists so heterogeneous alternatives can be
        normalized explicitly before being combined.
        """
        return self


def as_strategy(obj: object) -> Strategy[Any]:
    """Coerce ``obj`` into a Strategy.

    Accepts:
        - Strategy instances (returned unchanged)
        - ``range`` objects with step 1 (integers in the half-open range)
        - tuples of coercible objects (tuple strategy of the same arity)

    Raises:
        TypeError: If ``obj`` cannot be used as a strategy
        ValueError: If a range is empty or has a step other than 1
    """
    if isinstance(obj, Strategy):
        return obj
    if isinstance(obj, range):
        from proptree.num import IntRange  # noqa: PLC0415 - circular

        return IntRange.from_range(obj)
    if isinstance(obj, tuple):
        from proptree.tuple import TupleStrategy  # noqa: PLC0415 - circular

        return TupleStrategy(tuple(as_strategy(item) for item in obj))
    msg = f"Cannot use {type(obj).__name__} as a strategy"
    raise TypeError(msg)
