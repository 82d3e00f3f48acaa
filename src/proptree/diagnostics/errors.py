"""proptree exception hierarchy with structured diagnostics.

All exceptions accept either a plain message or a Diagnostic object.

Hierarchy:
    ProptreeError
    ├─ GenerationRejectedError (strategy could not produce a value)
    ├─ TestCaseError (raised from property bodies)
    │  ├─ TestCaseRejected (assumption not met; input is discarded)
    │  └─ TestCaseFailed (assertion failed; input is a counterexample)
    └─ TestRunError (a whole run did not pass)
       ├─ TestAbortedError (too many rejects, or generation impossible)
       ├─ PropertyFailedError (carries the minimal failing value)
       └─ PathLimitExceededError (exhaustive budget exhausted)

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic

__all__ = [
    "GenerationRejectedError",
    "PathLimitExceededError",
    "PropertyFailedError",
    "ProptreeError",
    "TestAbortedError",
    "TestCaseError",
    "TestCaseFailed",
    "TestCaseRejected",
    "TestRunError",
]


class ProptreeError(Exception):
    """Base exception for all proptree errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize ProptreeError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class GenerationRejectedError(ProptreeError):
    """A strategy could not generate a value for the current runner.

    Raised from ``Strategy.new_tree``. Composite strategies propagate it
    rather than substituting a default value.

    Attributes:
        reason: Short description of why generation was rejected
    """

    def __init__(self, message: str | Diagnostic, *, reason: str = "") -> None:
        super().__init__(message)
        self.reason = reason or str(message)


class TestCaseError(ProptreeError):
    """Base for errors raised by a property body to report its verdict.

    Attributes:
        reason: Human-readable reason given by the body
    """

    __test__ = False

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


class TestCaseRejected(TestCaseError):
    """The input does not satisfy the body's assumptions.

    The runner discards the input and draws another; rejections count
    against ``Config.max_global_rejects``.
    """


class TestCaseFailed(TestCaseError):
    """The property does not hold for the input."""


class TestRunError(ProptreeError):
    """A property run did not pass."""

    __test__ = False


class TestAbortedError(TestRunError):
    """The run stopped before reaching a verdict.

    Raised when body rejections exceed ``Config.max_global_rejects`` or the
    strategy itself cannot generate values.
    """


class PropertyFailedError(TestRunError):
    """The property failed.

    Under the randomized backend ``value`` is the minimal failing value
    found by shrinking. Under the exhaustive backend it is the first
    failing value reached by the enumeration.

    Attributes:
        reason: Failure reason reported by the body
        value: Failing input
    """

    def __init__(self, message: str | Diagnostic, *, reason: str, value: object) -> None:
        super().__init__(message)
        self.reason = reason
        self.value = value


class PathLimitExceededError(TestRunError):
    """Exhaustive exploration could not cover the domain within ``max_paths``.

    Attributes:
        paths: Number of paths explored before giving up
    """

    def __init__(self, message: str | Diagnostic, *, paths: int) -> None:
        super().__init__(message)
        self.paths = paths
