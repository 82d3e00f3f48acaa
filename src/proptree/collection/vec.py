"""Variable-length list strategy with two-phase shrinking.

Shrinking a list first tries to delete elements (front to back), then to
simplify the surviving elements (front to back). A deletion is never made
once the number of included elements has reached the length floor the
strategy was generated with, so every shrunk list stays inside the size
bound.

The shrink cursor and the last applied action are per-tree state:

    cursor = Shrink(DELETE, i)   next simplify() tries excluding element i
    cursor = Shrink(SHRINK, i)   next simplify() tries simplifying element i
    prev_shrink                  action complicate() would undo, or None

Python 3.13+.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from proptree.diagnostics.templates import ErrorTemplate
from proptree.enums import ShrinkPhase
from proptree.integrity import IntegrityContext, ShrinkStateError
from proptree.strategy.traits import Strategy, ValueTree, as_strategy

from .size_range import SizeRange, size_range

if TYPE_CHECKING:
    from proptree.runner.runner import TestRunner

__all__ = ["Shrink", "VecStrategy", "VecValueTree", "vec"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Shrink:
    """One shrink action: delete or simplify the element at ``index``."""

    phase: ShrinkPhase
    index: int

    @classmethod
    def delete(cls, index: int) -> Shrink:
        return cls(ShrinkPhase.DELETE, index)

    @classmethod
    def shrink(cls, index: int) -> Shrink:
        return cls(ShrinkPhase.SHRINK, index)


@dataclass(frozen=True, slots=True)
class VecStrategy[T](Strategy[list[T]]):
    """Lists of values drawn from ``element`` with length in ``size``.

    Attributes:
        element: Strategy for each element
        size: Admissible lengths
    """

    element: Strategy[T]
    size: SizeRange

    def new_tree(self, runner: TestRunner) -> VecValueTree[T]:
        """Draw a length, then one element tree per position.

        Raises:
            GenerationRejectedError: If an element strategy rejects
        """
        low, high = self.size.extract()
        length = runner.draw_integer(low, high)
        elements = [self.element.new_tree(runner) for _ in range(length)]
        return VecValueTree(elements=elements, included=[True] * length, min_size=low)


@dataclass(slots=True)
class VecValueTree[T](ValueTree[list[T]]):
    """Value tree for VecStrategy.

    Attributes:
        elements: One tree per generated position
        included: Whether each position is part of the current value
        min_size: Length floor; deletions stop once this many remain
        cursor: Next action simplify() will attempt
        prev_shrink: Last applied action, undone by complicate()
    """

    elements: list[ValueTree[T]]
    included: list[bool]
    min_size: int
    cursor: Shrink = field(default_factory=lambda: Shrink.delete(0))
    prev_shrink: Shrink | None = field(default=None)

    @property
    def included_count(self) -> int:
        return sum(self.included)

    def current(self) -> list[T]:
        return [
            tree.current()
            for tree, keep in zip(self.elements, self.included, strict=True)
            if keep
        ]

    def simplify(self) -> bool:
        """Try the next deletion, else the next element simplification.

        Raises:
            ShrinkStateError: If the cursor is in a state no sequence of
                operations can produce
        """
        if self.cursor.phase is ShrinkPhase.DELETE:
            ix = self.cursor.index
            if ix >= len(self.elements) or self.included_count == self.min_size:
                self.cursor = Shrink.shrink(0)
            else:
                self.included[ix] = False
                self.prev_shrink = self.cursor
                self.cursor = Shrink.delete(ix + 1)
                logger.debug("Deleted element %d", ix)
                return True

        while self.cursor.phase is ShrinkPhase.SHRINK:
            ix = self.cursor.index
            if ix >= len(self.elements):
                return False
            if not self.included[ix]:
                self.cursor = Shrink.shrink(ix + 1)
                continue
            if self.elements[ix].simplify():
                self.prev_shrink = self.cursor
                return True
            self.cursor = Shrink.shrink(ix + 1)

        raise ShrinkStateError(
            ErrorTemplate.shrink_state_unreachable(self.cursor),
            IntegrityContext(component="vec", operation="simplify", state=repr(self.cursor)),
        )

    def complicate(self) -> bool:
        match self.prev_shrink:
            case None:
                return False
            case Shrink(phase=ShrinkPhase.DELETE, index=ix):
                self.included[ix] = True
                self.prev_shrink = None
                logger.debug("Restored element %d", ix)
                return True
            case Shrink(phase=ShrinkPhase.SHRINK, index=ix):
                if self.elements[ix].complicate():
                    return True
                self.prev_shrink = None
                return False
            case _:
                raise ShrinkStateError(
                    ErrorTemplate.shrink_state_unreachable(self.prev_shrink),
                    IntegrityContext(
                        component="vec", operation="complicate", state=repr(self.prev_shrink)
                    ),
                )


def vec(element: Any, size: Any = None) -> VecStrategy[Any]:
    """Lists of ``element`` values with length in ``size``.

    ``element`` may be anything ``as_strategy`` accepts; ``size`` anything
    ``size_range`` accepts, defaulting to ``[0, 99]``.

    Example:
        >>> s = vec(range(1, 20), range(5, 20))
        >>> s.size.extract()
        (5, 19)
    """
    bound = SizeRange.default() if size is None else size_range(size)
    return VecStrategy(as_strategy(element), bound)
