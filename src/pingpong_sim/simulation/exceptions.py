# src/pingpong_sim/simulation/exceptions.py
"""
Defines custom, diagnosable exceptions specific to the buffer-alternation core.

All exceptions in this module inherit from the `DiagnosableError` base class, so they:
1.  Can be caught explicitly in `try...except` blocks (e.g., `except InvalidInput:`).
2.  Are guaranteed to implement `get_diagnostic_report()`.
3.  Are all catchable under the common `DiagnosableError` type.
"""
from dataclasses import dataclass, field
from typing import Any, Optional

from ..errors import DiagnosableError, format_diagnostic_report


@dataclass(eq=False)
class InvalidInput(DiagnosableError, ValueError):
    """
    Raised synchronously, before any buffer is touched, when the caller supplies an
    unusable initial state, iteration count, or buffer pair.

    This class also inherits from `ValueError` so callers that do not know about the
    diagnostic hierarchy can still catch it idiomatically.
    """
    details: str
    user_input: Optional[Any] = field(default=None)

    def __str__(self):
        return f"Invalid input: {self.details}"

    def get_diagnostic_report(self) -> str:
        """Generates the diagnostic report for rejected simulation input."""
        return format_diagnostic_report(
            error_type="Invalid Input",
            details=self.details,
            suggestion="Supply a non-empty, one-dimensional sequence of finite numbers as the initial state and a non-negative integer iteration count.",
            context={'user_input': _abbreviate(self.user_input)}
        )


@dataclass(eq=False)
class TransitionFailure(DiagnosableError):
    """
    An error raised by a user-supplied transition function, enriched with the
    iteration at which it occurred.

    The core `step` and `run` operations never raise this type; they let the
    original error propagate. It is created by the execution facade and the CLI,
    which need an actionable report for the user.
    """
    iteration_index: int
    original_error: BaseException
    transition_name: Optional[str] = None

    def __str__(self):
        return (
            f"Transition function failed at iteration {self.iteration_index}: "
            f"{type(self.original_error).__name__}: {self.original_error}"
        )

    def get_diagnostic_report(self) -> str:
        """Generates the diagnostic report for a failed step."""
        return format_diagnostic_report(
            error_type=f"Transition Failure ({type(self.original_error).__name__})",
            details=(
                f"The transition function raised an error while writing the destination buffer.\n"
                f"Original error: {self.original_error}\n"
                f"The destination buffer may be partially written; the run was aborted."
            ),
            suggestion="A transition function must overwrite every destination cell as a pure function of the source cells, without modifying the source buffer.",
            context={'iteration': self.iteration_index, 'transition': self.transition_name}
        )


@dataclass(eq=False)
class AlternatorStateError(DiagnosableError):
    """
    Raised when an Alternator is asked to step again after a previous step failed
    part-way, leaving its buffers in an undefined state.
    """
    iteration_index: int
    phase: str

    def __str__(self):
        return f"Alternator cannot step at iteration {self.iteration_index} while in phase {self.phase}."

    def get_diagnostic_report(self) -> str:
        return format_diagnostic_report(
            error_type="Alternator State Error",
            details=(
                f"The alternator is in phase '{self.phase}'. A previous step did not complete, "
                f"so the buffer contents are undefined."
            ),
            suggestion="Discard this alternator and start a new run from a known initial state.",
            context={'iteration': self.iteration_index}
        )


def _abbreviate(value: Any, limit: int = 80) -> Optional[str]:
    if value is None:
        return None
    text = repr(value)
    return text if len(text) <= limit else text[:limit - 3] + "..."
