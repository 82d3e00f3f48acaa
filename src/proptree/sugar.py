"""Declarative layer over strategies and runners.

Example:
    >>> from proptree.sugar import proptest, prop_assert
    >>> @proptest(range(0, 10), range(0, 10))
    ... def test_addition(a, b):
    ...     prop_assert(a + b <= 18)
    >>> test_addition()

Decorated tests take no arguments, so test collectors see a plain
zero-argument function. The run configuration comes from the decorator's
``config`` argument, or from ``PROPTREE_*`` environment variables.

Python 3.13+.
"""

from __future__ import annotations

import functools
import inspect
from collections.abc import Callable
from typing import Any

from proptree.config import Config
from proptree.diagnostics import TestCaseFailed, TestCaseRejected
from proptree.runner import run_property
from proptree.strategy.traits import Strategy, as_strategy
from proptree.strategy.union import Union
from proptree.tuple import tuples

__all__ = [
    "compose",
    "compose_flat",
    "destructure",
    "one_of",
    "prop_assert",
    "prop_assert_eq",
    "prop_assert_ne",
    "prop_assume",
    "proptest",
]


def destructure(value: Any, arity: int) -> tuple[Any, ...]:
    """Unpack a generated value into ``arity`` positional arguments.

    With arity 1 the value is passed whole, even if it is itself a tuple.

    Raises:
        ValueError: If arity is not positive, or a tuple of the wrong
            length is given
        TypeError: If arity > 1 and ``value`` is not a tuple
    """
    if arity < 1:
        msg = f"Arity must be positive, got {arity}"
        raise ValueError(msg)
    if arity == 1:
        return (value,)
    if not isinstance(value, tuple):
        msg = f"Expected a tuple of {arity} values, got {type(value).__name__}"
        raise TypeError(msg)
    if len(value) != arity:
        msg = f"Expected a tuple of {arity} values, got {len(value)}"
        raise ValueError(msg)
    return value


def _combined(strategies: tuple[object, ...]) -> Strategy[Any]:
    if not strategies:
        msg = "At least one strategy is required"
        raise TypeError(msg)
    if len(strategies) == 1:
        return as_strategy(strategies[0])
    return tuples(*strategies)


def proptest(
    *strategies: object, config: Config | None = None
) -> Callable[[Callable[..., object]], Callable[[], None]]:
    """Turn a function of generated arguments into a property test.

    One positional argument of the decorated function per strategy. The
    backend is taken from ``config.backend``.

    Raises:
        TypeError: If no strategies are given
    """
    strategy = _combined(strategies)
    arity = len(strategies)

    def decorator(fn: Callable[..., object]) -> Callable[[], None]:
        def body(value: Any) -> None:
            fn(*destructure(value, arity))

        @functools.wraps(fn)
        def wrapper() -> None:
            cfg = config if config is not None else Config.from_env()
            run_property(strategy, body, cfg)

        # Hide the generated parameters from signature-based collectors
        wrapper.__signature__ = inspect.Signature()  # type: ignore[attr-defined]
        wrapper.strategy = strategy  # type: ignore[attr-defined]
        return wrapper

    return decorator


def compose(
    *strategies: object,
) -> Callable[[Callable[..., Any]], Callable[[], Strategy[Any]]]:
    """Build a strategy factory from a function of generated values.

    Example:
        >>> @compose(range(0, 10), range(0, 10))
        ... def ordered(a, b):
        ...     return min(a, b), max(a, b)
        >>> isinstance(ordered(), Strategy)
        True
    """
    strategy = _combined(strategies)
    arity = len(strategies)

    def decorator(fn: Callable[..., Any]) -> Callable[[], Strategy[Any]]:
        @functools.wraps(fn)
        def factory() -> Strategy[Any]:
            return strategy.map(lambda value: fn(*destructure(value, arity)))

        return factory

    return decorator


def compose_flat(
    *outer: object, inner: Callable[..., object]
) -> Callable[[Callable[..., Any]], Callable[[], Strategy[Any]]]:
    """Two-stage form of ``compose``: later strategies depend on earlier values.

    ``inner`` receives the outer values and returns the second-stage
    strategy (a tuple for several values). The decorated function receives
    the outer values followed by the inner ones.

    Example:
        >>> @compose_flat(
        ...     range(-1000, 1000),
        ...     inner=lambda c: (range(c - 10, c + 10), range(c - 10, c + 10)),
        ... )
        ... def nearby_numbers(centre, a, b):
        ...     return a, b
    """
    outer_strategy = _combined(outer)
    outer_arity = len(outer)

    def stage_two(outer_value: Any) -> Strategy[tuple[Any, ...]]:
        outer_values = destructure(outer_value, outer_arity)
        spec = inner(*outer_values)
        inner_strategy = as_strategy(spec) if isinstance(spec, tuple) else tuples(spec)
        return inner_strategy.map(lambda inner_values: (*outer_values, *inner_values))

    def decorator(fn: Callable[..., Any]) -> Callable[[], Strategy[Any]]:
        @functools.wraps(fn)
        def factory() -> Strategy[Any]:
            return outer_strategy.flat_map(stage_two).map(lambda values: fn(*values))

        return factory

    return decorator


def _is_weighted(item: object) -> bool:
    return (
        isinstance(item, tuple)
        and len(item) == 2
        and isinstance(item[0], int)
        and not isinstance(item[0], bool)
    )


def one_of(*items: object) -> Strategy[Any]:
    """Choose among alternatives, simplest first.

    Each item is a strategy-like object (weight 1) or a ``(weight, strategy)``
    pair. A weight of 0 makes the alternative unreachable. A single item is
    returned as its own strategy.

    Raises:
        ValueError: If no items are given or the weights are invalid
    """
    if not items:
        msg = "one_of requires at least one alternative"
        raise ValueError(msg)
    options = [item if _is_weighted(item) else (1, item) for item in items]
    if len(options) == 1 and options[0][0] > 0:
        return as_strategy(options[0][1])
    return Union.weighted(options)


def prop_assume(condition: object, message: str = "") -> None:
    """Reject the current input unless ``condition`` holds.

    Raises:
        TestCaseRejected: If the condition is false
    """
    if not condition:
        raise TestCaseRejected(message or "assumption failed")


def prop_assert(condition: object, message: str = "assertion failed") -> None:
    """Fail the current case unless ``condition`` holds.

    Raises:
        TestCaseFailed: If the condition is false
    """
    if not condition:
        raise TestCaseFailed(message)


def prop_assert_eq(left: object, right: object, message: str = "") -> None:
    if left != right:
        detail = f"assertion failed: `(left == right)`\n  left: `{left!r}`,\n right: `{right!r}`"
        raise TestCaseFailed(f"{detail}: {message}" if message else detail)


def prop_assert_ne(left: object, right: object, message: str = "") -> None:
    if left == right:
        detail = f"assertion failed: `(left != right)`\n  left: `{left!r}`,\n right: `{right!r}`"
        raise TestCaseFailed(f"{detail}: {message}" if message else detail)
