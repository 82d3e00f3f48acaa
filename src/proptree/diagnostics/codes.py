"""Diagnostic codes and data structures.

Defines error codes and the structured diagnostic carried by proptree
exceptions.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Generation errors (strategy could not produce a value)
        2000-2999: Test case errors (raised by property bodies)
        3000-3999: Run errors (runner gave up or found a failure)
    """

    # Generation errors (1000-1999)
    LOCAL_REJECTS_EXHAUSTED = 1001

    # Test case errors (2000-2999)
    CASE_REJECTED = 2001

    # Run errors (3000-3999)
    GLOBAL_REJECTS_EXHAUSTED = 3001
    PROPERTY_FAILED = 3002
    GENERATION_ABORTED = 3003
    PATH_LIMIT_EXCEEDED = 3004


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        value: repr() of the value involved, if any (failing input, etc.)
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    value: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic in compiler style.

        Example output:
            error[PROPERTY_FAILED]: Property failed: sum too large
              = value: [1, 2, 6]
              = help: The value shown is the minimal failing input found

        Returns:
            Formatted error message
        """
        lines = [f"{self.severity}[{self.code.name}]: {self.message}"]
        if self.value is not None:
            lines.append(f"  = value: {self.value}")
        if self.hint:
            lines.append(f"  = help: {self.hint}")
        return "\n".join(lines)
