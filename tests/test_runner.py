"""Randomized runner: choice primitives, runs, and the shrink loop."""

import logging

import pytest
from hypothesis import given

from proptree.config import Config
from proptree.diagnostics import (
    DiagnosticCode,
    GenerationRejectedError,
    PropertyFailedError,
    TestAbortedError,
)
from proptree.enums import Backend, CaseOutcome
from proptree.integrity import ShrinkStateError
from proptree.num import IntRange
from proptree.runner import (
    ExplorationReport,
    RunReport,
    TestRunner,
    execute_body,
    run,
    run_property,
)
from proptree.sugar import prop_assert, prop_assume
from tests.helpers.trees import ScriptedTree, seeded_runner
from tests.strategies import seeds, weight_lists


class TestChoicePrimitives:
    """Integer draws, weighted choice, reject and regen budgets."""

    def test_draw_integer_bounds(self) -> None:
        runner = seeded_runner(1)
        assert all(-3 <= runner.draw_integer(-3, 3) <= 3 for _ in range(200))

    def test_draw_integer_single_value(self) -> None:
        assert seeded_runner().draw_integer(7, 7) == 7

    def test_draw_integer_empty_interval(self) -> None:
        with pytest.raises(ValueError, match="empty interval"):
            seeded_runner().draw_integer(3, 2)

    @given(weight_lists(), seeds())
    def test_choose_weighted_skips_zero_weights(self, weights: list[int], seed: int) -> None:
        """PROPERTY: a zero-weight index is never returned."""
        index = seeded_runner(seed).choose_weighted(weights)
        assert 0 <= index < len(weights)
        assert weights[index] > 0

    @pytest.mark.parametrize("weights", [[], [0, 0], [1, -1]])
    def test_choose_weighted_invalid(self, weights: list[int]) -> None:
        with pytest.raises(ValueError, match="Weights"):
            seeded_runner().choose_weighted(weights)

    def test_reject_local_budget(self) -> None:
        runner = seeded_runner(max_local_rejects=2)
        runner.reject_local("odd")
        runner.reject_local("odd")
        with pytest.raises(GenerationRejectedError) as exc_info:
            runner.reject_local("odd")
        assert exc_info.value.reason == "odd"
        assert runner.local_rejects == 3

    def test_reject_local_logs_warning(self, caplog: pytest.LogCaptureFixture) -> None:
        runner = seeded_runner(max_local_rejects=0)
        with caplog.at_level(logging.WARNING, logger="proptree.runner.runner"):
            with pytest.raises(GenerationRejectedError):
                runner.reject_local("never")
        assert "Local reject budget" in caplog.text

    def test_flat_map_regen_budget(self) -> None:
        runner = seeded_runner(max_flat_map_regens=2)
        assert runner.flat_map_regen() is False
        assert runner.flat_map_regen() is True
        assert runner.flat_map_regens == 2

    def test_partial_clone(self) -> None:
        runner = seeded_runner(3, max_local_rejects=5)
        runner.reject_local("x")
        clone = runner.partial_clone()
        assert clone is not runner
        assert clone.config == runner.config
        assert clone.local_rejects == 0

    def test_partial_clone_is_deterministic(self) -> None:
        a = seeded_runner(3).partial_clone()
        b = seeded_runner(3).partial_clone()
        assert a.seed == b.seed
        assert [a.draw_integer(0, 10**9) for _ in range(5)] == [
            b.draw_integer(0, 10**9) for _ in range(5)
        ]


class TestSeeding:
    def test_same_seed_same_values(self) -> None:
        strategy = IntRange(0, 10**9)
        a, b = seeded_runner(99), seeded_runner(99)
        assert [strategy.new_tree(a).current() for _ in range(10)] == [
            strategy.new_tree(b).current() for _ in range(10)
        ]

    def test_seed_argument_overrides_config(self) -> None:
        assert TestRunner(Config(seed=1), seed=2).seed == 2

    def test_missing_seed_is_drawn(self) -> None:
        assert isinstance(TestRunner().seed, int)

    def test_report_carries_seed(self) -> None:
        report = TestRunner(Config(cases=4, seed=77)).run(range(0, 10), lambda _: None)
        assert report == RunReport(passed=4, rejected=0, seed=77)


class TestExecuteBody:
    """Classification of body outcomes."""

    def test_pass(self) -> None:
        assert execute_body(lambda _: None, 1) == (CaseOutcome.PASSED, "")

    def test_rejection(self) -> None:
        assert execute_body(lambda _: prop_assume(False, "odd"), 1) == (CaseOutcome.REJECTED, "odd")

    def test_explicit_failure(self) -> None:
        assert execute_body(lambda _: prop_assert(False, "bad"), 1) == (CaseOutcome.FAILED, "bad")

    def test_plain_exception_is_failure(self) -> None:
        def body(_: int) -> None:
            raise KeyError("missing")

        outcome, reason = execute_body(body, 1)
        assert outcome is CaseOutcome.FAILED
        assert reason == "KeyError: 'missing'"

    def test_bare_assert_is_failure(self) -> None:
        def body(x: int) -> None:
            assert x < 0

        outcome, reason = execute_body(body, 1)
        assert outcome is CaseOutcome.FAILED
        assert reason.startswith("AssertionError")

    def test_integrity_errors_propagate(self) -> None:
        def body(_: int) -> None:
            raise ShrinkStateError("broken")

        with pytest.raises(ShrinkStateError):
            execute_body(body, 1)

    def test_base_exceptions_propagate(self) -> None:
        def body(_: int) -> None:
            raise KeyboardInterrupt

        with pytest.raises(KeyboardInterrupt):
            execute_body(body, 1)


class TestRun:
    """Whole randomized runs."""

    def test_passing_run(self) -> None:
        calls: list[int] = []
        report = run(range(0, 10), calls.append, Config(cases=20, seed=0))
        assert report.passed == 20
        assert len(calls) == 20

    def test_rejections_counted(self) -> None:
        def body(x: int) -> None:
            prop_assume(x % 2 == 0)

        report = run(range(0, 100), body, Config(cases=50, seed=4))
        assert report.passed == 50
        assert report.rejected > 0

    def test_global_reject_budget(self) -> None:
        calls: list[int] = []

        def body(x: int) -> None:
            calls.append(x)
            prop_assume(False, "never")

        with pytest.raises(TestAbortedError) as exc_info:
            run(range(0, 10), body, Config(max_global_rejects=5, seed=0))
        assert len(calls) == 6
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.GLOBAL_REJECTS_EXHAUSTED
        assert "never" in str(exc_info.value)

    def test_generation_failure_aborts(self) -> None:
        strategy = IntRange(0, 9).filter("never", lambda _: False)
        with pytest.raises(TestAbortedError) as exc_info:
            run(strategy, lambda _: None, Config(max_local_rejects=3, seed=0))
        assert isinstance(exc_info.value.__cause__, GenerationRejectedError)
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.GENERATION_ABORTED

    def test_failure_shrinks_to_threshold(self) -> None:
        def body(x: int) -> None:
            assert x < 500

        with pytest.raises(PropertyFailedError) as exc_info:
            run(IntRange(0, 10_000), body, Config(seed=12))
        assert exc_info.value.value == 500
        assert exc_info.value.reason.startswith("AssertionError")
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.value == "500"

    def test_negative_failure_shrinks_toward_zero(self) -> None:
        def body(x: int) -> None:
            prop_assert(x > -100, "too small")

        with pytest.raises(PropertyFailedError) as exc_info:
            run(IntRange(-10_000, -1), body, Config(seed=3))
        assert exc_info.value.value == -100
        assert exc_info.value.reason == "too small"

    def test_shrinking_disabled(self) -> None:
        def body(x: int) -> None:
            assert x < 500

        with pytest.raises(PropertyFailedError) as exc_info:
            run(IntRange(0, 10_000), body, Config(seed=12, max_shrink_iters=0))
        assert exc_info.value.value >= 500

    def test_integrity_error_escapes_shrink_loop(self) -> None:
        def body(x: int) -> None:
            if x < 10:
                raise ShrinkStateError("reached the floor")
            raise AssertionError

        with pytest.raises(ShrinkStateError):
            run(IntRange(1000, 2000).map(lambda x: x - 1000), body, Config(seed=5))

    def test_failure_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.INFO, logger="proptree.runner.runner"):
            with pytest.raises(PropertyFailedError):
                run(IntRange(10, 20), lambda x: prop_assert(False), Config(seed=0))
        assert "Minimal failing value: 10" in caplog.text


class TestRunOne:
    def test_passing_tree(self) -> None:
        seeded_runner().run_one(ScriptedTree([1]), lambda _: None)

    def test_rejected_tree(self) -> None:
        with pytest.raises(TestAbortedError):
            seeded_runner().run_one(ScriptedTree([1]), lambda _: prop_assume(False))

    def test_failing_tree_is_shrunk(self) -> None:
        tree = ScriptedTree([9, 7, 5])
        with pytest.raises(PropertyFailedError) as exc_info:
            seeded_runner().run_one(tree, lambda x: prop_assert(x < 5))
        assert exc_info.value.value == 5


class TestShrink:
    """The simplify/complicate loop."""

    def test_reports_last_failing_value(self) -> None:
        def body(x: int) -> None:
            assert x < 9

        value, reason = seeded_runner().shrink(ScriptedTree([10, 9, 8]), body, "initial")
        assert value == 9
        assert reason.startswith("AssertionError")

    def test_unsimplifiable_tree_keeps_original(self) -> None:
        tree = ScriptedTree([10])
        value, reason = seeded_runner().shrink(tree, lambda _: prop_assert(False), "initial")
        assert (value, reason) == (10, "initial")

    def test_passing_candidate_is_undone(self) -> None:
        tree = ScriptedTree([10, 3])
        value, _ = seeded_runner().shrink(tree, lambda x: prop_assert(x < 5), "initial")
        assert value == 10
        assert tree.current() == 10
        assert tree.complicate_calls == 1

    def test_iteration_cap(self, caplog: pytest.LogCaptureFixture) -> None:
        runner = seeded_runner(max_shrink_iters=3)
        tree = ScriptedTree(list(range(100, 0, -1)))
        with caplog.at_level(logging.WARNING, logger="proptree.runner.runner"):
            value, _ = runner.shrink(tree, lambda _: prop_assert(False), "initial")
        assert value == 97
        assert "max_shrink_iters" in caplog.text


class TestRunProperty:
    def test_random_backend(self) -> None:
        report = run_property(range(0, 5), lambda _: None, Config(cases=3, seed=0))
        assert isinstance(report, RunReport)

    def test_exhaustive_backend(self) -> None:
        report = run_property(range(0, 5), lambda _: None, Config(backend=Backend.EXHAUSTIVE))
        assert isinstance(report, ExplorationReport)
        assert report.paths == 5

    def test_default_config(self) -> None:
        report = run_property(range(0, 5), lambda _: None)
        assert isinstance(report, RunReport)
        assert report.passed == Config().cases
