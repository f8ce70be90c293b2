# src/pingpong_sim/simulation/roles.py
import numbers
from enum import Enum, auto
from typing import Tuple

from .exceptions import InvalidInput


class BufferId(Enum):
    """Identifies one of the two buffers owned by an Alternator."""
    A = 0
    B = 1


class StepPhase(Enum):
    """
    The per-iteration lifecycle of an Alternator.
    """
    AWAITING_STEP = auto()  # Ready for the next step; buffers are consistent.
    STEPPING = auto()       # Transition function is running (or failed mid-write).
    STEPPED = auto()        # Destination holds the newest state.

    def __str__(self):
        return self.name


def require_non_negative_int(value, label: str = "Iteration index") -> int:
    """Returns `value` as a plain int, or raises InvalidInput."""
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise InvalidInput(
            details=f"{label} must be an integer, got {type(value).__name__}.",
            user_input=value,
        )
    if value < 0:
        raise InvalidInput(
            details=f"{label} must be non-negative, got {value}.",
            user_input=value,
        )
    return int(value)


def parity_roles(iteration_index: int) -> Tuple[BufferId, BufferId]:
    """
    Returns the (source, destination) buffer ids for an iteration.

    Even iterations read A and write B; odd iterations read B and write A.
    """
    if require_non_negative_int(iteration_index) % 2 == 0:
        return BufferId.A, BufferId.B
    return BufferId.B, BufferId.A
