"""Use proptree strategies inside Hypothesis tests.

``as_search_strategy`` wraps a proptree strategy as a Hypothesis
``SearchStrategy``. Every choice the strategy makes is drawn from
Hypothesis, so Hypothesis owns replay, the example database and
shrinking; proptree's own simplify/complicate search is not used.

Requires the ``hypothesis`` extra.

Example:
    >>> from hypothesis import given
    >>> from proptree.collection import vec
    >>> @given(as_search_strategy(vec(range(0, 10), range(1, 4))))
    ... def test_non_empty(xs):
    ...     assert xs

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any

from hypothesis import reject
from hypothesis import strategies as st

from proptree.config import Config
from proptree.runner.runner import TestRunner, validate_weights
from proptree.strategy.traits import as_strategy

__all__ = ["HypothesisRunner", "as_search_strategy"]


class HypothesisRunner(TestRunner):
    """Runner whose choices come from a Hypothesis ``draw`` function."""

    __slots__ = ("_draw",)

    def __init__(
        self, draw: Callable[[st.SearchStrategy[Any]], Any], config: Config | None = None
    ) -> None:
        super().__init__(config, seed=0)
        self._draw = draw

    def draw_integer(self, low: int, high: int) -> int:
        if low > high:
            msg = f"Cannot draw from empty interval [{low}, {high}]"
            raise ValueError(msg)
        return self._draw(st.integers(min_value=low, max_value=high))

    def choose_weighted(self, weights: Sequence[int]) -> int:
        """Weighted index; Hypothesis shrinks toward earlier alternatives."""
        validate_weights(weights)
        target = self.draw_integer(0, sum(weights) - 1)
        for index, weight in enumerate(weights):
            if target < weight:
                return index
            target -= weight
        msg = "Weighted choice fell outside the weight total"
        raise AssertionError(msg)

    def reject_local(self, reason: str) -> None:
        """Hand the rejection to Hypothesis, which discards the example."""
        self._local_rejects += 1
        reject()

    def flat_map_regen(self) -> bool:
        return False

    def partial_clone(self) -> HypothesisRunner:
        return self


def as_search_strategy(strategy: object, config: Config | None = None) -> st.SearchStrategy[Any]:
    """Expose ``strategy`` (or anything ``as_strategy`` accepts) to Hypothesis."""
    strat = as_strategy(strategy)

    @st.composite
    def drawn(draw: Callable[[st.SearchStrategy[Any]], Any]) -> Any:
        return strat.new_tree(HypothesisRunner(draw, config)).current()

    return drawn()
