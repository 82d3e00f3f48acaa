"""Weighted choice between strategies producing the same value type.

Each alternative is drawn with probability proportional to its weight; a
weight of zero makes an alternative unreachable under every backend.
Alternatives are listed simplest first by convention.

Shrinking first simplifies the chosen alternative's tree. Once that is
exhausted the tree moves to the nearest earlier alternative with a positive
weight, so a failure reproducible there is reported in its simpler form.
Undoing a move pins the tree to the later alternative.

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from .fuse import Fuse
from .traits import Strategy, ValueTree, as_strategy

if TYPE_CHECKING:
    from proptree.runner.runner import TestRunner

__all__ = ["Union", "UnionValueTree"]


@dataclass(frozen=True, slots=True)
class Union[T](Strategy[T]):
    """Weighted union of alternatives.

    Attributes:
        options: ``(weight, strategy)`` pairs, simplest first

    Example:
        >>> u = Union.weighted([(1, range(0, 1)), (2, range(2, 3))])
        >>> u.weights
        (1, 2)
    """

    options: tuple[tuple[int, Strategy[T]], ...]

    def __post_init__(self) -> None:
        """Validate weights.

        Raises:
            ValueError: If there are no options, a weight is negative, or
                every weight is zero
        """
        if not self.options:
            msg = "Union requires at least one option"
            raise ValueError(msg)
        for weight, _ in self.options:
            if weight < 0:
                msg = f"Union weights must be non-negative, got {weight}"
                raise ValueError(msg)
        if sum(weight for weight, _ in self.options) == 0:
            msg = "Union requires at least one positive weight"
            raise ValueError(msg)

    @classmethod
    def weighted(cls, options: Iterable[tuple[int, Any]]) -> Union[Any]:
        """Build from ``(weight, strategy-like)`` pairs."""
        return cls(tuple((int(weight), as_strategy(s)) for weight, s in options))

    @classmethod
    def uniform(cls, alternatives: Iterable[Any]) -> Union[Any]:
        """Build with equal weight on every alternative."""
        return cls(tuple((1, as_strategy(s)) for s in alternatives))

    @property
    def weights(self) -> tuple[int, ...]:
        return tuple(weight for weight, _ in self.options)

    def new_tree(self, runner: TestRunner) -> UnionValueTree[T]:
        pick = runner.choose_weighted(self.weights)
        _, strategy = self.options[pick]
        trees: list[Fuse[T] | None] = [None] * len(self.options)
        trees[pick] = Fuse(strategy.new_tree(runner))
        min_pick = next(i for i, (weight, _) in enumerate(self.options) if weight > 0)
        return UnionValueTree(self.options, trees, pick, min_pick, runner)


@dataclass(slots=True)
class UnionValueTree[T](ValueTree[T]):
    """Tree for the chosen alternative, able to fall back to earlier ones.

    Trees for earlier alternatives are drawn only when shrinking first
    moves to them, from a fork of the generating runner.

    Attributes:
        options: ``(weight, strategy)`` pairs of the union
        trees: Drawn tree per alternative, ``None`` until needed
        pick: Index of the alternative currently shown
        min_pick: Lowest index simplify() may still move to
        runner: Runner the union was generated with
        prev_pick: Alternative to restore if the last move is undone
    """

    options: tuple[tuple[int, Strategy[T]], ...]
    trees: list[Fuse[T] | None]
    pick: int
    min_pick: int
    runner: TestRunner
    prev_pick: int | None = field(default=None)

    def _tree(self, index: int) -> Fuse[T]:
        tree = self.trees[index]
        if tree is None:
            _, strategy = self.options[index]
            tree = Fuse(strategy.new_tree(self.runner.partial_clone()))
            self.trees[index] = tree
        return tree

    def _earlier(self) -> int | None:
        for index in range(self.pick - 1, self.min_pick - 1, -1):
            if self.options[index][0] > 0:
                return index
        return None

    def current(self) -> T:
        return self._tree(self.pick).current()

    def simplify(self) -> bool:
        if self._tree(self.pick).simplify():
            self.prev_pick = None
            return True
        earlier = self._earlier()
        if earlier is None:
            return False
        self.prev_pick = self.pick
        self.pick = earlier
        return True

    def complicate(self) -> bool:
        if self.prev_pick is not None:
            # The earlier alternative passed; stay on this one from now on.
            self.pick = self.prev_pick
            self.min_pick = self.prev_pick
            self.prev_pick = None
            return True
        return self._tree(self.pick).complicate()
