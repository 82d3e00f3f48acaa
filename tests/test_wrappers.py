"""Just, Map, Filter and Fuse adaptors."""

import pytest
from hypothesis import given

from proptree.config import Config
from proptree.diagnostics import DiagnosticCode, GenerationRejectedError
from proptree.integrity import FilterUnrecoverableError
from proptree.num import IntRange
from proptree.strategy import Filter, FilterValueTree, Fuse, Just, Map, MapValueTree
from tests.helpers.trees import ScriptedTree, forced_runner, seeded_runner
from tests.strategies import int_bounds, seeds


class TestJust:
    """Constant strategy."""

    def test_current_is_value(self) -> None:
        tree = Just([1, 2]).new_tree(seeded_runner())
        assert tree.current() == [1, 2]

    def test_never_simplifies_or_complicates(self) -> None:
        tree = Just(3).new_tree(seeded_runner())
        assert tree.simplify() is False
        assert tree.complicate() is False
        assert tree.current() == 3


class TestMap:
    """Value transformation with delegated shrinking."""

    def test_applies_function(self) -> None:
        tree = IntRange(0, 9).map(lambda x: x << 1).new_tree(forced_runner(4))
        assert tree.current() == 8

    def test_delegates_shrinking(self) -> None:
        tree = MapValueTree(ScriptedTree([3, 2, 1]), lambda x: x * 10)
        assert tree.current() == 30
        assert tree.simplify()
        assert tree.current() == 20
        assert tree.complicate()
        assert tree.current() == 30

    def test_map_does_not_mutate_source(self) -> None:
        source = IntRange(0, 9)
        mapped = source.map(str)
        assert isinstance(mapped, Map)
        assert mapped.source is source
        assert source == IntRange(0, 9)

    @given(int_bounds(), seeds())
    def test_simplify_then_complicate_restores(self, bounds: tuple[int, int], seed: int) -> None:
        """PROPERTY: mapped trees honour the undo contract."""
        low, high = bounds
        tree = IntRange(low, high).map(lambda x: -x).new_tree(seeded_runner(seed))
        before = tree.current()
        if tree.simplify():
            assert tree.complicate()
        assert tree.current() == before


class TestFilter:
    """Local rejection during generation and filtered shrinking."""

    def test_generated_values_accepted(self) -> None:
        runner = seeded_runner(3)
        strategy = IntRange(0, 100).filter("even", lambda x: x % 2 == 0)
        for _ in range(50):
            assert strategy.new_tree(runner).current() % 2 == 0

    def test_rejections_count_as_local_rejects(self) -> None:
        runner = seeded_runner(5)
        calls: list[int] = []

        def is_zero(x: int) -> bool:
            calls.append(x)
            return x == 0

        tree = IntRange(0, 9).filter("zero", is_zero).new_tree(runner)
        assert tree.current() == 0
        assert runner.local_rejects == len(calls) - 1

    def test_budget_exhaustion_raises_generation_rejected(self) -> None:
        runner = seeded_runner(0, max_local_rejects=10)
        strategy = IntRange(0, 9).filter("never", lambda _: False)
        with pytest.raises(GenerationRejectedError) as exc_info:
            strategy.new_tree(runner)
        assert exc_info.value.reason == "never"
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.LOCAL_REJECTS_EXHAUSTED
        assert runner.local_rejects == 11

    def test_filter_is_a_strategy(self) -> None:
        strategy = IntRange(0, 9).filter("any", lambda _: True)
        assert isinstance(strategy, Filter)
        assert strategy.whence == "any"

    def test_simplify_skips_rejected_values(self) -> None:
        tree = FilterValueTree(ScriptedTree([4, 3, 2, 1]), "even", lambda x: x % 2 == 0)
        assert tree.simplify()
        assert tree.current() == 2

    def test_simplify_exhausts_when_nothing_accepted(self) -> None:
        source = ScriptedTree([4, 3])
        tree = FilterValueTree(source, "even", lambda x: x % 2 == 0)
        assert tree.simplify() is False
        assert tree.current() == 4

    def test_complicate_returns_to_accepted_value(self) -> None:
        tree = FilterValueTree(ScriptedTree([4, 2, 1]), "even", lambda x: x % 2 == 0)
        assert tree.simplify()
        assert tree.current() == 2
        assert tree.complicate()
        assert tree.current() == 4

    def test_unrecoverable_filter_is_fatal(self) -> None:
        # Built directly on a value the predicate rejects, so no undo can recover.
        tree = FilterValueTree(ScriptedTree([1, 2]), "never", lambda _: False)
        with pytest.raises(FilterUnrecoverableError) as exc_info:
            tree.simplify()
        assert exc_info.value.context is not None
        assert exc_info.value.context.component == "filter"
        assert isinstance(exc_info.value, AssertionError)

    def test_filter_in_config_budget(self) -> None:
        runner = seeded_runner(0, max_local_rejects=0)
        with pytest.raises(GenerationRejectedError):
            Just(1).filter("never", lambda _: False).new_tree(runner)
        assert runner.config == Config(seed=0, max_local_rejects=0)


class TestFuse:
    """Exhaustion latching."""

    def test_simplify_latches_after_false(self) -> None:
        inner = ScriptedTree([1], strict=True)
        fused = Fuse(inner)
        assert fused.simplify() is False
        assert fused.simplify() is False
        assert inner.simplify_calls == 1

    def test_complicate_success_reopens_simplify(self) -> None:
        inner = ScriptedTree([3, 2])
        fused = Fuse(inner)
        assert fused.simplify()
        assert fused.simplify() is False
        assert fused.complicate()
        assert fused.may_simplify
        assert fused.current() == 3

    def test_complicate_latches_after_false(self) -> None:
        inner = ScriptedTree([1])
        fused = Fuse(inner)
        assert fused.complicate() is False
        assert fused.complicate() is False
        assert inner.complicate_calls == 1
