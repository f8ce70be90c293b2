# src/pingpong_sim/__init__.py
import logging
from .log_config import setup_logging

setup_logging()
logger = logging.getLogger(__name__)
logger.debug("PingPong Sim package initialized.")

from .transitions import TRANSITION_REGISTRY, register_transition, get_transition, shift_right
from .config import RunConfig, RunConfigParser, ConfigParsingError, SchemaValidationError
from .simulation import (
    Alternator, BufferId, StepPhase, parity_roles, initialize, step, run,
    IterationRecord, SimulationResult,
    run_simulation, run_from_config, iterate_simulation,
    InvalidInput, TransitionFailure, AlternatorStateError,
)
from .reporting import format_record, render_records
from .errors import PingPongError, SimulationRunError, DiagnosableError

__all__ = [
    # Core
    "Alternator", "BufferId", "StepPhase", "parity_roles", "initialize", "step", "run",
    # Results
    "IterationRecord", "SimulationResult",
    # Facade
    "run_simulation", "run_from_config", "iterate_simulation",
    # Transitions
    "TRANSITION_REGISTRY", "register_transition", "get_transition", "shift_right",
    # Configuration
    "RunConfig", "RunConfigParser",
    # Reporting
    "format_record", "render_records",
    # Errors
    "PingPongError", "SimulationRunError", "DiagnosableError",
    "InvalidInput", "TransitionFailure", "AlternatorStateError",
    "ConfigParsingError", "SchemaValidationError",
]
