"""Constant strategies."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from .traits import Strategy, ValueTree

if TYPE_CHECKING:
    from proptree.runner.runner import TestRunner

__all__ = ["Just", "JustValueTree"]


@dataclass(frozen=True, slots=True)
class Just[T](Strategy[T]):
    """Strategy that always produces ``value``.

    Example:
        >>> from proptree.runner import TestRunner
        >>> Just(7).new_tree(TestRunner()).current()
        7
    """

    value: T

    def new_tree(self, runner: TestRunner) -> JustValueTree[T]:
        return JustValueTree(self.value)


@dataclass(slots=True)
class JustValueTree[T](ValueTree[T]):
    """Tree for a constant; there is nothing to simplify."""

    value: T

    def current(self) -> T:
        return self.value

    def simplify(self) -> bool:
        return False

    def complicate(self) -> bool:
        return False
