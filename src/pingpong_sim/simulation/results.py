# src/pingpong_sim/simulation/results.py
"""
Defines the formal, explicit, and type-safe data contracts for simulation results.

Frozen dataclasses replace raw tuples for passing per-iteration observations from the
Alternator to its consumers (the reporting layer, the execution facade, and tests).
"""
from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np


@dataclass(frozen=True)
class IterationRecord:
    """
    The observation produced by a single step.

    Attributes:
        iteration_index: The zero-based index of the step.
        source_snapshot: A copy of the source buffer as read by the step.
        destination_snapshot: A copy of the destination buffer after the step.
    """
    iteration_index: int
    source_snapshot: np.ndarray
    destination_snapshot: np.ndarray


@dataclass(frozen=True)
class SimulationResult:
    """
    The final, user-facing result of a completed run.

    Attributes:
        records: One `IterationRecord` per completed step, in order.
        final_state: A copy of the newest state. Equals the initial state when no
                     iterations were requested.
        transition_name: The registered name of the transition, if one was used.
    """
    records: Tuple[IterationRecord, ...]
    final_state: np.ndarray
    transition_name: Optional[str] = None

    @property
    def iterations(self) -> int:
        return len(self.records)
