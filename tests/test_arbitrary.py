"""Default strategies for Python types."""

from collections import deque

import pytest
from hypothesis import given

from proptree.arbitrary import arbitrary
from proptree.collection import VecStrategy
from proptree.constants import DEFAULT_INT_MAX, DEFAULT_INT_MIN
from proptree.num import IntRange
from proptree.strategy import Just
from proptree.tuple import TupleStrategy
from tests.helpers.trees import seeded_runner
from tests.strategies import seeds


class TestScalars:
    def test_int(self) -> None:
        assert arbitrary(int) == IntRange(DEFAULT_INT_MIN, DEFAULT_INT_MAX)

    def test_bool(self) -> None:
        values = {arbitrary(bool).new_tree(seeded_runner(s)).current() for s in range(20)}
        assert values == {False, True}

    @pytest.mark.parametrize("tp", [None, type(None)])
    def test_none(self, tp: object) -> None:
        assert arbitrary(tp) == Just(None)


class TestContainers:
    def test_tuple(self) -> None:
        strategy = arbitrary(tuple[int, bool])
        assert isinstance(strategy, TupleStrategy)
        assert len(strategy.components) == 2

    def test_list(self) -> None:
        strategy = arbitrary(list[int])
        assert isinstance(strategy, VecStrategy)
        assert strategy.size.extract() == (0, 99)

    @given(seeds())
    def test_nested_values_have_declared_types(self, seed: int) -> None:
        """PROPERTY: generated values match the requested type shape."""
        value = arbitrary(list[tuple[int, bool]]).new_tree(seeded_runner(seed)).current()
        assert isinstance(value, list)
        assert all(isinstance(a, int) and isinstance(b, bool) for a, b in value)

    def test_deque(self) -> None:
        value = arbitrary(deque[bool]).new_tree(seeded_runner(1)).current()
        assert isinstance(value, deque)

    def test_set_and_frozenset(self) -> None:
        assert isinstance(arbitrary(set[int]).new_tree(seeded_runner(1)).current(), set)
        assert isinstance(arbitrary(frozenset[int]).new_tree(seeded_runner(1)).current(), frozenset)

    def test_dict(self) -> None:
        value = arbitrary(dict[int, bool]).new_tree(seeded_runner(3)).current()
        assert isinstance(value, dict)
        assert all(isinstance(k, int) and isinstance(v, bool) for k, v in value.items())


class TestUnsupported:
    @pytest.mark.parametrize("tp", [str, float, list, tuple[int, ...], dict])
    def test_no_default(self, tp: object) -> None:
        with pytest.raises(TypeError, match="default strategy"):
            arbitrary(tp)

    def test_tuple_arity_limit(self) -> None:
        with pytest.raises(ValueError, match="arity"):
            arbitrary(tuple[(int,) * 13])  # type: ignore[misc]
