"""Diagnostic system for proptree errors.

Provides structured error diagnostics with codes and hints.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
    GenerationRejectedError,
    PathLimitExceededError,
    PropertyFailedError,
    ProptreeError,
    TestAbortedError,
    TestCaseError,
    TestCaseFailed,
    TestCaseRejected,
    TestRunError,
)
from .templates import ErrorTemplate

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "ErrorTemplate",
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
