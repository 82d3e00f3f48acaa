"""Randomized test runner.

The runner is both the source of randomness for strategies (``draw_integer``,
``choose_weighted``) and the driver of a property run (``run``): it draws
values, feeds them to the body, and on the first failure minimizes the
failing value by alternating ``simplify()`` and ``complicate()`` on its tree.

Shrink loop, starting from a failing tree:

    simplify() once; if nothing changed, the failing value is already minimal.
    repeat (at most max_shrink_iters times):
        body fails   -> remember the value, simplify(); stop if False
        body passes  -> complicate(); stop if False

The value reported is the last one observed failing.

Python 3.13+.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any

from proptree.config import Config
from proptree.diagnostics import (
    ErrorTemplate,
    GenerationRejectedError,
    PropertyFailedError,
    TestAbortedError,
    TestCaseFailed,
    TestCaseRejected,
)
from proptree.enums import CaseOutcome
from proptree.integrity import EngineIntegrityError
from proptree.strategy.traits import Strategy, ValueTree, as_strategy

__all__ = ["RunReport", "TestRunner", "execute_body", "run"]

logger = logging.getLogger(__name__)

type Body = Callable[[Any], object]


def execute_body(body: Body, value: Any) -> tuple[CaseOutcome, str]:
    """Run ``body`` on ``value`` and classify the result.

    TestCaseRejected is a rejection; TestCaseFailed and any other Exception
    (plain ``assert`` included) are failures. Engine integrity errors are
    not verdicts and propagate.

    Returns:
        Tuple of (outcome, reason); reason is empty for passes
    """
    try:
        body(value)
    except EngineIntegrityError:
        raise
    except TestCaseRejected as e:
        return CaseOutcome.REJECTED, e.reason
    except TestCaseFailed as e:
        return CaseOutcome.FAILED, e.reason
    except Exception as e:  # noqa: BLE001 - any body exception is a counterexample
        return CaseOutcome.FAILED, ErrorTemplate.case_raised(e)
    return CaseOutcome.PASSED, ""


def validate_weights(weights: Sequence[int]) -> None:
    if not weights or any(w < 0 for w in weights) or sum(weights) == 0:
        msg = f"Weights must be non-negative with a positive total, got {list(weights)}"
        raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class RunReport:
    """Outcome of a passing randomized run.

    Attributes:
        passed: Cases the body accepted
        rejected: Cases the body rejected (failed assumptions)
        seed: Seed the PRNG was initialized with
    """

    passed: int
    rejected: int
    seed: int


class TestRunner:
    """Seeded source of choices and driver of randomized property runs.

    Strategies consume the choice primitives while generating; the run
    methods consume strategies. One runner may serve many runs; reject
    counters accumulate over its lifetime.

    Example:
        >>> runner = TestRunner(Config(cases=16, seed=1))
        >>> runner.run(range(0, 10), lambda x: None).passed
        16
    """

    __test__ = False
    __slots__ = ("_config", "_flat_map_regens", "_local_rejects", "_rng", "_seed")

    def __init__(self, config: Config | None = None, *, seed: int | None = None) -> None:
        """Initialize runner.

        Args:
            config: Run configuration (default: ``Config()``)
            seed: PRNG seed; overrides ``config.seed``. When both are None a
                seed is drawn from the operating system.
        """
        self._config = config if config is not None else Config()
        if seed is None:
            seed = self._config.seed
        if seed is None:
            seed = random.SystemRandom().getrandbits(64)
        self._seed = seed
        self._rng = random.Random(seed)
        self._local_rejects = 0
        self._flat_map_regens = 0

    @property
    def config(self) -> Config:
        return self._config

    @property
    def seed(self) -> int:
        """Seed this runner's PRNG was initialized with (read-only)."""
        return self._seed

    @property
    def local_rejects(self) -> int:
        return self._local_rejects

    @property
    def flat_map_regens(self) -> int:
        return self._flat_map_regens

    # ------------------------------------------------------------------
    # Choice primitives consumed by strategies
    # ------------------------------------------------------------------

    def draw_integer(self, low: int, high: int) -> int:
        """Uniform integer in ``[low, high]``.

        Raises:
            ValueError: If low > high
        """
        if low > high:
            msg = f"Cannot draw from empty interval [{low}, {high}]"
            raise ValueError(msg)
        return self._rng.randint(low, high)

    def choose_weighted(self, weights: Sequence[int]) -> int:
        """Index chosen with probability proportional to its weight.

        Zero-weight indices are never chosen.

        Raises:
            ValueError: If weights are empty, negative, or all zero
        """
        validate_weights(weights)
        target = self._rng.randrange(sum(weights))
        for index, weight in enumerate(weights):
            if target < weight:
                return index
            target -= weight
        # randrange(total) is always below the running sum
        msg = "Weighted choice fell outside the weight total"
        raise AssertionError(msg)

    def reject_local(self, reason: str) -> None:
        """Count one local (filter) rejection.

        Raises:
            GenerationRejectedError: Once rejections exceed max_local_rejects
        """
        self._local_rejects += 1
        limit = self._config.max_local_rejects
        if self._local_rejects > limit:
            logger.warning("Local reject budget (%d) exhausted by %r", limit, reason)
            raise GenerationRejectedError(
                ErrorTemplate.local_rejects_exhausted(reason, limit), reason=reason
            )

    def flat_map_regen(self) -> bool:
        """Count one flatten regeneration.

        Returns:
            True once the regeneration budget is used up
        """
        self._flat_map_regens += 1
        return self._flat_map_regens >= self._config.max_flat_map_regens

    def partial_clone(self) -> TestRunner:
        """Fork with the same config, fresh counters, and a PRNG seeded from this one."""
        return TestRunner(self._config, seed=self._rng.getrandbits(64))

    # ------------------------------------------------------------------
    # Running properties
    # ------------------------------------------------------------------

    def run(self, strategy: object, body: Body) -> RunReport:
        """Run ``body`` against ``config.cases`` values of ``strategy``.

        Args:
            strategy: Strategy, or anything ``as_strategy`` accepts
            body: Called with each value; signals its verdict by returning
                (pass) or raising

        Returns:
            RunReport for the passing run

        Raises:
            PropertyFailedError: With the minimal failing value found
            TestAbortedError: On too many body rejects or if generation fails
        """
        strat = as_strategy(strategy)
        passed = 0
        rejected = 0
        last_reject: str | None = None

        while passed < self._config.cases:
            tree = self._generate(strat)
            outcome, reason = execute_body(body, tree.current())
            match outcome:
                case CaseOutcome.PASSED:
                    passed += 1
                case CaseOutcome.REJECTED:
                    rejected += 1
                    last_reject = reason
                    if rejected > self._config.max_global_rejects:
                        logger.warning(
                            "Global reject budget (%d) exhausted",
                            self._config.max_global_rejects,
                        )
                        raise TestAbortedError(
                            ErrorTemplate.global_rejects_exhausted(
                                self._config.max_global_rejects, last_reject
                            )
                        )
                case CaseOutcome.FAILED:
                    logger.info(
                        "Property failed after %d passing cases (seed=%d); shrinking",
                        passed,
                        self._seed,
                    )
                    value, reason = self.shrink(tree, body, reason)
                    logger.info("Minimal failing value: %r", value)
                    raise PropertyFailedError(
                        ErrorTemplate.property_failed(reason, value), reason=reason, value=value
                    )

        return RunReport(passed=passed, rejected=rejected, seed=self._seed)

    def run_one(self, tree: ValueTree[Any], body: Body) -> None:
        """Run ``body`` on one existing tree, shrinking it if it fails.

        Raises:
            PropertyFailedError: With the minimal failing value found
            TestAbortedError: If the body rejects the value
        """
        outcome, reason = execute_body(body, tree.current())
        if outcome is CaseOutcome.REJECTED:
            raise TestAbortedError(ErrorTemplate.case_rejected(reason))
        if outcome is CaseOutcome.FAILED:
            value, reason = self.shrink(tree, body, reason)
            raise PropertyFailedError(
                ErrorTemplate.property_failed(reason, value), reason=reason, value=value
            )

    def shrink(self, tree: ValueTree[Any], body: Body, reason: str) -> tuple[Any, str]:
        """Minimize a failing tree.

        Args:
            tree: Tree whose current value fails ``body``
            body: Property body
            reason: Failure reason for the current value

        Returns:
            Tuple of (last value observed failing, its failure reason)
        """
        last_value = tree.current()
        last_reason = reason
        limit = self._config.max_shrink_iters
        if limit == 0 or not tree.simplify():
            return last_value, last_reason

        iterations = 0
        while iterations < limit:
            iterations += 1
            value = tree.current()
            outcome, why = execute_body(body, value)
            if outcome is CaseOutcome.FAILED:
                last_value, last_reason = value, why
                logger.debug("Shrink step %d: %r still fails", iterations, value)
                if not tree.simplify():
                    break
            elif not tree.complicate():
                break
        else:
            logger.warning("Shrinking stopped at max_shrink_iters (%d)", limit)

        return last_value, last_reason

    def _generate(self, strategy: Strategy[Any]) -> ValueTree[Any]:
        try:
            return strategy.new_tree(self)
        except GenerationRejectedError as e:
            raise TestAbortedError(ErrorTemplate.generation_aborted(e.reason)) from e


def run(strategy: object, body: Body, config: Config | None = None) -> RunReport:
    """Run ``body`` against ``strategy`` with a fresh randomized runner.

    Raises:
        PropertyFailedError: With the minimal failing value found
        TestAbortedError: On too many body rejects or if generation fails
    """
    return TestRunner(config).run(strategy, body)
