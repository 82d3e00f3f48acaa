"""Dependent (flattened) strategies.

Used when the strategy to draw from depends on a value drawn earlier, e.g.
draw a centre, then draw two numbers near it.

Three shapes are provided:

- ``Flatten``: keeps the meta tree (whose value is a strategy) and the inner
  tree committed to at construction. Its tree reports no change from
  ``simplify()``/``complicate()``. Re-choosing the inner strategy safely
  would mean regenerating and tracking several candidate inner trees; under
  exhaustive execution every inner strategy is covered anyway.
- ``IndFlatten``: returns the committed inner tree directly; the meta choice
  is dropped and shrinking follows the inner tree's own contract.
- ``IndFlattenMap``: pairs the left tree with the dependent right tree as a
  TupleValueTree so both values can be inspected together.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from .fuse import Fuse
from .traits import Strategy, ValueTree

if TYPE_CHECKING:
    from proptree.runner.runner import TestRunner
    from proptree.tuple import TupleValueTree

__all__ = [
    "Flatten",
    "FlattenValueTree",
    "IndFlatten",
    "IndFlattenMap",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Flatten[T](Strategy[T]):
    """Flattens a strategy of strategies into a strategy of values.

    Attributes:
        source: Strategy whose values are themselves strategies
    """

    source: Strategy[Strategy[T]]

    def new_tree(self, runner: TestRunner) -> FlattenValueTree[T]:
        meta = self.source.new_tree(runner)
        return FlattenValueTree.new(runner, meta)


@dataclass(slots=True)
class FlattenValueTree[T](ValueTree[T]):
    """Tree produced by Flatten.

    Attributes:
        meta: Tree whose current value is the inner strategy
        inner: Inner tree committed to at construction
        final_complication: Inner tree to restore once complication of the
            current one is exhausted (unused while shrinking is disabled)
        runner: Runner fork reserved for regenerating inner trees
        complicate_regen_remaining: Regeneration budget. Stored for a
            regenerate-on-complicate search; inert while simplify() and
            complicate() report no change.
    """

    meta: Fuse[Strategy[T]]
    inner: Fuse[T]
    runner: TestRunner
    final_complication: Fuse[T] | None = field(default=None)
    complicate_regen_remaining: int = field(default=0)

    @classmethod
    def new(cls, runner: TestRunner, meta: ValueTree[Strategy[T]]) -> FlattenValueTree[T]:
        """Commit to one inner tree drawn from the meta tree's current strategy.

        Raises:
            GenerationRejectedError: If the inner strategy rejects
        """
        inner = meta.current().new_tree(runner)
        logger.debug("Flatten committed to inner tree %s", type(inner).__name__)
        return cls(meta=Fuse(meta), inner=Fuse(inner), runner=runner.partial_clone())

    def current(self) -> T:
        return self.inner.current()

    def simplify(self) -> bool:
        return False

    def complicate(self) -> bool:
        return False


@dataclass(frozen=True, slots=True)
class IndFlatten[T](Strategy[T]):
    """Flatten without retaining the outer choice.

    Attributes:
        source: Strategy whose values are themselves strategies
    """

    source: Strategy[Strategy[T]]

    def new_tree(self, runner: TestRunner) -> ValueTree[T]:
        outer = self.source.new_tree(runner)
        return outer.current().new_tree(runner)


@dataclass(frozen=True, slots=True)
class IndFlattenMap[T](Strategy[tuple[T, Any]]):
    """Draws ``left``, then ``right`` from ``fun(left)``; yields ``(left, right)``.

    The left value is never regenerated independently of the right once
    they are paired.

    Attributes:
        source: Strategy for the left value
        fun: Builds the right-hand strategy from the left value
    """

    source: Strategy[T]
    fun: Callable[[T], Strategy[Any]]

    def new_tree(self, runner: TestRunner) -> TupleValueTree:
        from proptree.tuple import TupleValueTree  # noqa: PLC0415 - circular

        left = self.source.new_tree(runner)
        right = self.fun(left.current()).new_tree(runner)
        return TupleValueTree((left, right))
