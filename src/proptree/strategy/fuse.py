"""Fuse: stop calling an exhausted value tree.

Some trees are not required to keep answering ``False`` once they have
reported exhaustion, and may misbehave if asked again. Wrapping one in a
Fuse guarantees that after ``simplify()`` (or ``complicate()``) returns
``False``, further calls of the same kind return ``False`` without reaching
the inner tree until the other operation succeeds.

Python 3.13+.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .traits import ValueTree

__all__ = ["Fuse"]


@dataclass(slots=True)
class Fuse[T](ValueTree[T]):
    """Value tree adaptor that latches exhaustion.

    Attributes:
        inner: Wrapped tree
        may_simplify: False once inner.simplify() has reported exhaustion
        may_complicate: False once inner.complicate() has reported exhaustion
    """

    inner: ValueTree[T]
    may_simplify: bool = field(default=True)
    may_complicate: bool = field(default=True)

    def current(self) -> T:
        return self.inner.current()

    def simplify(self) -> bool:
        if not self.may_simplify:
            return False
        if self.inner.simplify():
            self.may_complicate = True
            return True
        self.may_simplify = False
        return False

    def complicate(self) -> bool:
        if not self.may_complicate:
            return False
        if self.inner.complicate():
            self.may_simplify = True
            return True
        self.may_complicate = False
        return False
