"""Test runners.

Exports:
    TestRunner, run: Randomized runs with shrinking
    ExhaustiveRunner, run_exhaustive: Depth-first enumeration of every choice
    RunReport, ExplorationReport: Outcomes of passing runs
    run_property: Dispatch on ``Config.backend``

Python 3.13+.
"""

from typing import Any

from proptree.config import Config
from proptree.enums import Backend

from .exhaustive import ExhaustiveRunner, ExplorationReport, PathRunner, run_exhaustive
from .runner import RunReport, TestRunner, execute_body, run

__all__ = [
    "ExhaustiveRunner",
    "ExplorationReport",
    "PathRunner",
    "RunReport",
    "TestRunner",
    "execute_body",
    "run",
    "run_exhaustive",
    "run_property",
]


def run_property(
    strategy: object, body: Any, config: Config | None = None
) -> RunReport | ExplorationReport:
    """Run ``body`` against ``strategy`` with the backend ``config`` names.

    Raises:
        PropertyFailedError: If the property fails
        TestAbortedError: If a randomized run aborts
        PathLimitExceededError: If an exhaustive run exceeds its path budget
    """
    cfg = config if config is not None else Config()
    match cfg.backend:
        case Backend.EXHAUSTIVE:
            return run_exhaustive(strategy, body, cfg)
        case _:
            return run(strategy, body, cfg)
