"""Map and filter adaptors.

Map transforms values while delegating shrinking. Filter rejects values
locally at generation time and keeps the tree on accepted values while
shrinking.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from proptree.diagnostics.templates import ErrorTemplate
from proptree.integrity import FilterUnrecoverableError, IntegrityContext

from .traits import Strategy, ValueTree

if TYPE_CHECKING:
    from proptree.runner.runner import TestRunner

__all__ = ["Filter", "FilterValueTree", "Map", "MapValueTree"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Map[T, U](Strategy[U]):
    """Strategy producing ``fun(value)`` for each value of ``source``."""

    source: Strategy[T]
    fun: Callable[[T], U]

    def new_tree(self, runner: TestRunner) -> MapValueTree[T, U]:
        return MapValueTree(self.source.new_tree(runner), self.fun)


@dataclass(slots=True)
class MapValueTree[T, U](ValueTree[U]):
    """Tree whose value is ``fun`` applied to the source tree's value."""

    source: ValueTree[T]
    fun: Callable[[T], U]

    def current(self) -> U:
        return self.fun(self.source.current())

    def simplify(self) -> bool:
        return self.source.simplify()

    def complicate(self) -> bool:
        return self.source.complicate()


@dataclass(frozen=True, slots=True)
class Filter[T](Strategy[T]):
    """Strategy keeping only values of ``source`` accepted by ``fun``.

    Attributes:
        source: Underlying strategy
        whence: Description of the filter, used in rejection diagnostics
        fun: Acceptance predicate
    """

    source: Strategy[T]
    whence: str
    fun: Callable[[T], bool]

    def new_tree(self, runner: TestRunner) -> FilterValueTree[T]:
        """Draw until the predicate accepts.

        Raises:
            GenerationRejectedError: If the runner's local reject budget runs out
        """
        while True:
            tree = self.source.new_tree(runner)
            if self.fun(tree.current()):
                return FilterValueTree(tree, self.whence, self.fun)
            runner.reject_local(self.whence)


@dataclass(slots=True)
class FilterValueTree[T](ValueTree[T]):
    """Tree that only ever exposes values accepted by the filter.

    A simplification the filter rejects is undone immediately and the next
    simplification of the source is tried instead.
    """

    source: ValueTree[T]
    whence: str
    fun: Callable[[T], bool]

    def current(self) -> T:
        return self.source.current()

    def simplify(self) -> bool:
        while self.source.simplify():
            if self.fun(self.source.current()):
                return True
            logger.debug("Filter %r rejected a simplification; undoing", self.whence)
            self._ensure_acceptable("simplify")
        return False

    def complicate(self) -> bool:
        if self.source.complicate():
            self._ensure_acceptable("complicate")
            return True
        return False

    def _ensure_acceptable(self, operation: str) -> None:
        """Complicate the source until the filter accepts its value.

        Raises:
            FilterUnrecoverableError: If the source cannot complicate further
        """
        while not self.fun(self.source.current()):
            if not self.source.complicate():
                raise FilterUnrecoverableError(
                    ErrorTemplate.filter_unrecoverable(self.whence),
                    IntegrityContext(component="filter", operation=operation),
                )
