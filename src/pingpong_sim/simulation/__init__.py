# src/pingpong_sim/simulation/__init__.py
from .exceptions import (
    AlternatorStateError,
    InvalidInput,
    TransitionFailure,
)
from .roles import BufferId, StepPhase, parity_roles
from .results import IterationRecord, SimulationResult
from .alternator import Alternator, initialize, run, step
from .execution import iterate_simulation, run_from_config, run_simulation, with_diagnostics

__all__ = [
    # Exceptions
    "AlternatorStateError",
    "InvalidInput",
    "TransitionFailure",
    # Roles & Lifecycle
    "BufferId",
    "StepPhase",
    "parity_roles",
    # Results
    "IterationRecord",
    "SimulationResult",
    # Core
    "Alternator",
    "initialize",
    "run",
    "step",
    # Facade
    "iterate_simulation",
    "run_from_config",
    "run_simulation",
    "with_diagnostics",
]
