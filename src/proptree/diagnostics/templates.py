"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate"]

# Failing values can be arbitrarily large; keep diagnostics readable.
_MAX_VALUE_REPR = 500


def _value_repr(value: object) -> str:
    text = repr(value)
    if len(text) > _MAX_VALUE_REPR:
        return text[:_MAX_VALUE_REPR] + "..."
    return text


class ErrorTemplate:
    """Centralized error message templates.

    All diagnostics raised by the engine are created here, keeping
    exception constructors free of message formatting.
    """

    @staticmethod
    def local_rejects_exhausted(whence: str, limit: int) -> Diagnostic:
        """Too many values rejected while generating one tree.

        Args:
            whence: Description of the filter doing the rejecting
            limit: Configured max_local_rejects

        Returns:
            Diagnostic for LOCAL_REJECTS_EXHAUSTED
        """
        msg = f"Too many local rejects ({limit}): {whence}"
        return Diagnostic(
            code=DiagnosticCode.LOCAL_REJECTS_EXHAUSTED,
            message=msg,
            hint="Loosen the filter or generate acceptable values directly",
        )

    @staticmethod
    def case_rejected(reason: str) -> Diagnostic:
        """Property body rejected its input (failed assumption)."""
        return Diagnostic(
            code=DiagnosticCode.CASE_REJECTED,
            message=f"Input rejected: {reason}",
            severity="warning",
        )

    @staticmethod
    def case_raised(exc: BaseException) -> str:
        """Reason text for an unexpected exception raised by a body."""
        detail = str(exc)
        if detail:
            return f"{type(exc).__name__}: {detail}"
        return type(exc).__name__

    @staticmethod
    def global_rejects_exhausted(limit: int, last_reason: str | None) -> Diagnostic:
        """Too many inputs rejected by the property body.

        Args:
            limit: Configured max_global_rejects
            last_reason: Reason given by the most recent rejection

        Returns:
            Diagnostic for GLOBAL_REJECTS_EXHAUSTED
        """
        msg = f"Too many global rejects ({limit})"
        if last_reason:
            msg += f"; last: {last_reason}"
        return Diagnostic(
            code=DiagnosticCode.GLOBAL_REJECTS_EXHAUSTED,
            message=msg,
            hint="Assumptions reject most generated inputs; constrain the strategy instead",
        )

    @staticmethod
    def generation_aborted(reason: str) -> Diagnostic:
        """Strategy could not generate a value during a run."""
        return Diagnostic(
            code=DiagnosticCode.GENERATION_ABORTED,
            message=f"Generation aborted: {reason}",
        )

    @staticmethod
    def property_failed(reason: str, value: object) -> Diagnostic:
        """Property failed; value is the minimal failing input found.

        Args:
            reason: Failure reason reported by the body
            value: Minimal failing value

        Returns:
            Diagnostic for PROPERTY_FAILED
        """
        return Diagnostic(
            code=DiagnosticCode.PROPERTY_FAILED,
            message=f"Property failed: {reason}",
            value=_value_repr(value),
            hint="The value shown is the minimal failing input found",
        )

    @staticmethod
    def path_limit_exceeded(limit: int) -> Diagnostic:
        """Exhaustive exploration ran out of path budget."""
        return Diagnostic(
            code=DiagnosticCode.PATH_LIMIT_EXCEEDED,
            message=f"Exhaustive exploration exceeded {limit} paths",
            hint="Narrow the strategy bounds or raise Config.max_paths",
        )

    @staticmethod
    def shrink_state_unreachable(state: object) -> str:
        """Message for a collection tree whose cursor left both phases."""
        return f"Unexpected shrink state: {state!r}"

    @staticmethod
    def filter_unrecoverable(whence: str) -> str:
        """Message for a filtered tree that cannot regain an accepted value."""
        return f"Unable to complicate filtered strategy back into acceptable value: {whence}"

    @staticmethod
    def replay_diverged(position: int, forced: int, low: int, high: int) -> str:
        """Message for a replayed choice that no longer fits its bounds."""
        return (
            f"Replayed choice {position} was {forced}, "
            f"but the strategy now asks for a value in [{low}, {high}]"
        )
