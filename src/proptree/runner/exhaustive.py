"""Exhaustive execution: enumerate every choice sequence.

Instead of sampling, the exhaustive runner explores the tree of all
choices a strategy can make, depth-first. Each path is one complete
generation: choices on the recorded prefix are replayed, every new choice
takes its lowest value, and the untried alternatives of each new choice
are queued as branches. One value per path is fed to the body; no
simplify/complicate search is issued, since every reachable value is
visited anyway.

Branches are queued lazily as ``(head, value, high)``: taking ``value`` at
the position after ``head`` and, once explored, the sibling ``value + 1``
up to ``high``. Memory therefore grows with path depth, not breadth.

Weighted choices branch only over their nonzero weights.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

from proptree.config import Config
from proptree.diagnostics import (
    ErrorTemplate,
    GenerationRejectedError,
    PathLimitExceededError,
    PropertyFailedError,
)
from proptree.enums import CaseOutcome
from proptree.integrity import IntegrityContext, ReplayDivergenceError
from proptree.strategy.traits import Strategy, as_strategy

from .runner import Body, TestRunner, execute_body, validate_weights

__all__ = ["ExhaustiveRunner", "ExplorationReport", "PathRunner", "run_exhaustive"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Choice:
    """One recorded choice: ``value`` taken from ``[low, high]``."""

    value: int
    low: int
    high: int


@dataclass(frozen=True, slots=True)
class _Branch:
    head: tuple[int, ...]
    value: int
    high: int


@dataclass(slots=True)
class ExplorationReport:
    """Outcome of an exhaustive run.

    Attributes:
        paths: Choice sequences explored
        passed: Paths whose value the body accepted
        pruned: Paths abandoned by a strategy or body rejection
    """

    paths: int = field(default=0)
    passed: int = field(default=0)
    pruned: int = field(default=0)


class PathRunner(TestRunner):
    """Runner that follows one path through the choice tree.

    The first ``len(prefix)`` choices are forced; every later choice takes
    its lowest admissible value. All choices are recorded for branching.
    """

    __slots__ = ("_choices", "_prefix")

    def __init__(self, config: Config, prefix: tuple[int, ...]) -> None:
        super().__init__(config, seed=0)
        self._prefix = prefix
        self._choices: list[Choice] = []

    @property
    def choices(self) -> list[Choice]:
        return self._choices

    @property
    def prefix(self) -> tuple[int, ...]:
        return self._prefix

    def draw_integer(self, low: int, high: int) -> int:
        """Next choice on this path.

        Raises:
            ValueError: If low > high
            ReplayDivergenceError: If a forced choice falls outside the bounds
        """
        if low > high:
            msg = f"Cannot draw from empty interval [{low}, {high}]"
            raise ValueError(msg)
        position = len(self._choices)
        if position < len(self._prefix):
            value = self._prefix[position]
            if not low <= value <= high:
                raise ReplayDivergenceError(
                    ErrorTemplate.replay_diverged(position, value, low, high),
                    IntegrityContext(
                        component="exhaustive",
                        operation="draw_integer",
                        state=repr(self._prefix),
                    ),
                )
        else:
            value = low
        self._choices.append(Choice(value, low, high))
        return value

    def choose_weighted(self, weights: Sequence[int]) -> int:
        validate_weights(weights)
        reachable = [index for index, weight in enumerate(weights) if weight > 0]
        return reachable[self.draw_integer(0, len(reachable) - 1)]

    def reject_local(self, reason: str) -> None:
        """Prune this path: there is no other value to try on it.

        Raises:
            GenerationRejectedError: Always
        """
        self._local_rejects += 1
        raise GenerationRejectedError(f"Path pruned by {reason}", reason=reason)

    def flat_map_regen(self) -> bool:
        return False

    def partial_clone(self) -> PathRunner:
        """Flattened strategies keep drawing from this path."""
        return self


class ExhaustiveRunner:
    """Depth-first explorer of every value a strategy can produce.

    Example:
        >>> report = ExhaustiveRunner().run(range(0, 4), lambda x: None)
        >>> report.paths
        4
    """

    __slots__ = ("_config",)

    def __init__(self, config: Config | None = None) -> None:
        self._config = config if config is not None else Config()

    @property
    def config(self) -> Config:
        return self._config

    def run(self, strategy: object, body: Body) -> ExplorationReport:
        """Feed every reachable value of ``strategy`` to ``body``.

        Raises:
            PropertyFailedError: On the first failing value in enumeration order
            PathLimitExceededError: If more than ``max_paths`` paths are needed
        """
        strat = as_strategy(strategy)
        report = ExplorationReport()
        pending: list[_Branch] = []

        self._explore(strat, body, (), pending, report)
        while pending:
            branch = pending.pop()
            if branch.value < branch.high:
                pending.append(_Branch(branch.head, branch.value + 1, branch.high))
            self._explore(strat, body, (*branch.head, branch.value), pending, report)

        logger.info(
            "Exhaustive run complete: %d paths, %d passed, %d pruned",
            report.paths,
            report.passed,
            report.pruned,
        )
        return report

    def _explore(
        self,
        strategy: Strategy[Any],
        body: Body,
        prefix: tuple[int, ...],
        pending: list[_Branch],
        report: ExplorationReport,
    ) -> None:
        report.paths += 1
        if report.paths > self._config.max_paths:
            raise PathLimitExceededError(
                ErrorTemplate.path_limit_exceeded(self._config.max_paths),
                paths=report.paths - 1,
            )

        path = PathRunner(self._config, prefix)
        try:
            tree = strategy.new_tree(path)
        except GenerationRejectedError as e:
            logger.debug("Path %r pruned during generation: %s", prefix, e.reason)
            report.pruned += 1
            self._queue_branches(path, pending)
            return
        self._queue_branches(path, pending)

        value = tree.current()
        outcome, reason = execute_body(body, value)
        match outcome:
            case CaseOutcome.PASSED:
                report.passed += 1
            case CaseOutcome.REJECTED:
                logger.debug("Path %r rejected by body: %s", prefix, reason)
                report.pruned += 1
            case CaseOutcome.FAILED:
                logger.info("Property failed on path %r: %r", prefix, value)
                raise PropertyFailedError(
                    ErrorTemplate.property_failed(reason, value), reason=reason, value=value
                )

    @staticmethod
    def _queue_branches(path: PathRunner, pending: list[_Branch]) -> None:
        # Shallowest first, so the deepest branch is explored next.
        choices = path.choices
        values = tuple(choice.value for choice in choices)
        for position in range(len(path.prefix), len(choices)):
            choice = choices[position]
            if choice.low < choice.high:
                pending.append(_Branch(values[:position], choice.low + 1, choice.high))


def run_exhaustive(
    strategy: object, body: Body, config: Config | None = None
) -> ExplorationReport:
    """Feed every reachable value of ``strategy`` to ``body``.

    Raises:
        PropertyFailedError: On the first failing value in enumeration order
        PathLimitExceededError: If more than ``max_paths`` paths are needed
    """
    return ExhaustiveRunner(config).run(strategy, body)
