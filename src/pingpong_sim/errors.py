# src/pingpong_sim/errors.py
"""
User-facing errors and the plain-text diagnostic report every internal error renders.

Internal errors subclass `DiagnosableError`; the facade turns them into a single
`SimulationRunError` whose message is the rendered report.
"""
from abc import ABC, abstractmethod
from typing import Any, Mapping

REPORT_TITLE = " PingPong Sim: Diagnostic Report "
REPORT_WIDTH = 72

# Context keys rendered in the report header, in order.
_CONTEXT_LABELS = (
    ("iteration", "Iteration"),
    ("transition", "Transition"),
    ("source_file", "Source File"),
    ("user_input", "User Input"),
)


class PingPongError(Exception):
    """Base class for all user-facing errors in PingPong Sim."""


class SimulationRunError(PingPongError):
    """
    Raised by `run_simulation` when a run fails at any stage. The message is a
    rendered diagnostic report; the underlying error is chained.
    """


class DiagnosableError(Exception, ABC):
    """Base of internal errors. Subclasses must render their own report."""

    @abstractmethod
    def get_diagnostic_report(self) -> str:
        raise NotImplementedError


def format_diagnostic_report(
    error_type: str,
    details: str,
    suggestion: str,
    context: Mapping[str, Any],
) -> str:
    """
    Renders a report: a titled header with the error type and whichever of the
    iteration index, transition name, run file and offending input are known,
    followed by indented details and an optional suggestion.

    An iteration index of 0 is shown; other empty context values are omitted.
    """
    lines = ["", REPORT_TITLE.center(REPORT_WIDTH, "="), _header_line("Error Type", error_type)]
    for key, label in _CONTEXT_LABELS:
        value = context.get(key)
        if value is None or (key != "iteration" and not value):
            continue
        if key == "user_input":
            value = f"'{value}'"
        lines.append(_header_line(label, value))

    lines.extend(_section("Details", details))
    if suggestion:
        lines.extend(_section("Suggestion", suggestion))
    lines.append("=" * REPORT_WIDTH)
    return "\n".join(lines)


def _header_line(label: str, value: Any) -> str:
    return f"{label + ':':<16}{value}"


def _section(title: str, body: str):
    yield ""
    yield f"{title}:"
    for line in body.splitlines():
        yield f"  {line}"
