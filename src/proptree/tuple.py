"""Support for combining strategies into tuples.

``tuples(a, b, c)`` (or simply the tuple ``(a, b, c)`` wherever a strategy
is expected) produces positional tuples of the component values. Arities
1 through 12 are supported.

Tuple trees do not shrink on their own: ``simplify()`` and ``complicate()``
always report no change. Minimization of tuple-shaped inputs is left to
the layer driving the property (exhaustive exploration covers every
combination by construction).

Python 3.13+.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from proptree.constants import MAX_TUPLE_ARITY, MIN_TUPLE_ARITY
from proptree.strategy.traits import Strategy, ValueTree, as_strategy

if TYPE_CHECKING:
    from proptree.runner.runner import TestRunner

__all__ = ["TupleStrategy", "TupleValueTree", "tuples"]


def _check_arity(arity: int) -> None:
    if not MIN_TUPLE_ARITY <= arity <= MAX_TUPLE_ARITY:
        msg = (
            f"Tuple strategies support arity {MIN_TUPLE_ARITY} to "
            f"{MAX_TUPLE_ARITY}, got {arity}"
        )
        raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class TupleStrategy(Strategy[tuple[Any, ...]]):
    """Product of a fixed number of component strategies."""

    components: tuple[Strategy[Any], ...]

    def __post_init__(self) -> None:
        """Validate arity.

        Raises:
            ValueError: If the arity is outside 1..12
        """
        _check_arity(len(self.components))

    def new_tree(self, runner: TestRunner) -> TupleValueTree:
        """Draw one tree per component, in order.

        A component's GenerationRejectedError propagates unchanged.
        """
        return TupleValueTree(tuple(s.new_tree(runner) for s in self.components))


@dataclass(slots=True)
class TupleValueTree(ValueTree[tuple[Any, ...]]):
    """Positional tuple of component trees."""

    trees: tuple[ValueTree[Any], ...]

    def __post_init__(self) -> None:
        _check_arity(len(self.trees))

    def current(self) -> tuple[Any, ...]:
        return tuple(tree.current() for tree in self.trees)

    def simplify(self) -> bool:
        return False

    def complicate(self) -> bool:
        return False


def tuples(*strategies: object) -> TupleStrategy:
    """Compose 1 to 12 strategies into a tuple strategy.

    Each argument may be anything ``as_strategy`` accepts.

    Example:
        >>> s = tuples(range(0, 10), range(10, 20))
        >>> len(s.components)
        2
    """
    return TupleStrategy(tuple(as_strategy(s) for s in strategies))
