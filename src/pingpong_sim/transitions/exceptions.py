# src/pingpong_sim/transitions/exceptions.py
from dataclasses import dataclass
from typing import List

from ..errors import DiagnosableError, format_diagnostic_report


@dataclass(eq=False)
class UnknownTransitionError(DiagnosableError, KeyError):
    """Raised when a transition name is not present in the transition registry."""
    name: str
    available: List[str]

    def __str__(self):
        return f"Unknown transition '{self.name}'. Available transitions: {self.available}"

    def get_diagnostic_report(self) -> str:
        return format_diagnostic_report(
            error_type="Unknown Transition",
            details=f"No transition function is registered under the name '{self.name}'.",
            suggestion=f"Use one of the registered transitions: {', '.join(self.available) or '(none)'}.",
            context={'user_input': self.name}
        )
