# src/pingpong_sim/config/exceptions.py
"""
Defines custom, diagnosable exceptions for loading and validating run files.

`ConfigParsingError` covers file-level and YAML syntax problems, while
`SchemaValidationError` covers structural problems found by the Cerberus schema. Both
implement `get_diagnostic_report`, as mandated by `DiagnosableError`.
"""
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

from ..errors import DiagnosableError, format_diagnostic_report


@dataclass(eq=False)
class ConfigParsingError(DiagnosableError):
    """
    Raised for file-system issues or invalid YAML that prevent a run file from
    being loaded at all.
    """
    details: str
    file_path: Optional[Path] = field(default=None)

    def __str__(self):
        return f"Config error in file '{self.file_path}': {self.details}"

    def get_diagnostic_report(self) -> str:
        return format_diagnostic_report(
            error_type="Run File Parsing Error",
            details=self.details,
            suggestion="Ensure the file exists, is readable, and contains a YAML mapping.",
            context={'source_file': self.file_path}
        )


@dataclass(eq=False)
class SchemaValidationError(DiagnosableError):
    """
    Raised when a run file is valid YAML but does not conform to the run schema
    (unknown keys, wrong types, negative iteration counts, non-finite cells, ...).
    """
    errors: Dict[str, Any]
    file_path: Optional[Path] = field(default=None)

    def issue_lines(self) -> List[str]:
        return [f"  - Field '{path}': {message}" for path, message in flatten_cerberus_errors(self.errors)]

    def __str__(self):
        return f"Run file schema validation failed for '{self.file_path}':\n" + "\n".join(self.issue_lines())

    def get_diagnostic_report(self) -> str:
        """Lists every schema violation found in the run file."""
        lines = self.issue_lines()
        details = (
            "The structure of the run file does not conform to the required schema.\n"
            f"See details for {len(lines)} issue(s) below:\n\n" + "\n".join(lines)
        )
        return format_diagnostic_report(
            error_type="Run File Schema Validation Error",
            details=details,
            suggestion="A run file accepts 'iterations' (integer >= 0), 'initial_state' (non-empty list of finite numbers) and 'transition' (a registered transition name).",
            context={'source_file': self.file_path}
        )


def flatten_cerberus_errors(errors: Dict[Any, Any], prefix: str = "") -> List[tuple]:
    """
    Cerberus nests errors for sub-schemas as lists of dicts. This flattens them into
    (dotted_path, message) pairs, sorted by path.
    """
    flat = []
    for key, messages in errors.items():
        path = f"{prefix}.{key}" if prefix else str(key)
        for message in messages:
            if isinstance(message, dict):
                flat.extend(flatten_cerberus_errors(message, path))
            else:
                flat.append((path, message))
    return sorted(flat)
