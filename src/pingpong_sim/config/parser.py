# src/pingpong_sim/config/parser.py
import logging
import math
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

import cerberus
import yaml

from ..constants import DEFAULT_ITERATIONS, DEFAULT_TRANSITION
from ..transitions import get_transition
from .exceptions import ConfigParsingError, SchemaValidationError
from .run_config import RunConfig

logger = logging.getLogger(__name__)


class RunConfigValidator(cerberus.Validator):
    """Cerberus validator with rules rejecting NaN/infinite cells and boolean counts."""

    def _validate_finite(self, constraint: bool, field: str, value: Any):
        """
        The rule's arguments are validated against this schema:
        {'type': 'boolean'}
        """
        if constraint and isinstance(value, float) and not math.isfinite(value):
            self._error(field, f"value {value} is not finite")

    def _validate_strict_integer(self, constraint: bool, field: str, value: Any):
        """
        Cerberus counts booleans as integers; this rule does not.

        The rule's arguments are validated against this schema:
        {'type': 'boolean'}
        """
        if constraint and isinstance(value, bool):
            self._error(field, f"must be an integer, not the boolean {value}")


class RunConfigParser:
    """
    Loads and validates a YAML run file, producing a frozen `RunConfig`.
    The transition name is resolved against the registry so an unknown name fails at
    parse time rather than mid-run.
    """
    _schema = {
        "iterations": {
            "type": "integer", "strict_integer": True, "required": False, "min": 0,
            "default": DEFAULT_ITERATIONS,
        },
        "initial_state": {
            "type": "list", "required": True, "minlength": 1,
            "schema": {"type": "number", "finite": True},
        },
        "transition": {"type": "string", "required": False, "empty": False, "default": DEFAULT_TRANSITION},
    }

    def __init__(self):
        self._validator = RunConfigValidator(self._schema)
        self._validator.allow_unknown = False
        logger.debug("RunConfigParser initialized.")

    def parse_file(self, path: Union[str, Path]) -> RunConfig:
        """Parses the run file at `path`."""
        resolved_path = Path(path).resolve()
        logger.info(f"Loading run file: {resolved_path}")
        raw = self._load_yaml(resolved_path)
        return self.parse_dict(raw, source_path=resolved_path)

    def parse_dict(self, raw: Mapping[str, Any], source_path: Optional[Path] = None) -> RunConfig:
        """Validates an already-loaded mapping against the run schema."""
        if not isinstance(raw, Mapping):
            raise ConfigParsingError(details="The run configuration must be a mapping.", file_path=source_path)
        if not self._validator.validate(dict(raw)):
            raise SchemaValidationError(self._validator.errors, source_path)

        document = self._validator.document
        transition_name = document["transition"]
        get_transition(transition_name)

        config = RunConfig(
            iterations=document["iterations"],
            initial_state=tuple(document["initial_state"]),
            transition_name=transition_name,
            source_path=source_path,
        )
        logger.debug(f"Parsed run config: {config}")
        return config

    def _load_yaml(self, source: Path) -> Dict[str, Any]:
        """Loads and performs basic sanity checks on a YAML file."""
        if not source.is_file():
            raise ConfigParsingError(details=f"Run file not found at path: {source}", file_path=source)
        try:
            with source.open("r", encoding="utf-8") as f:
                content = yaml.safe_load(f)
        except PermissionError as e:
            raise ConfigParsingError(details=f"Permission denied when trying to read file: {e}", file_path=source) from e
        except yaml.YAMLError as e:
            raise ConfigParsingError(details=f"Invalid YAML syntax: {e}", file_path=source) from e

        if content is None:
            raise ConfigParsingError(details="The YAML file is empty or contains no valid content.", file_path=source)
        if not isinstance(content, dict):
            raise ConfigParsingError(details="The root of the YAML file must be a dictionary (mapping).", file_path=source)
        return content
