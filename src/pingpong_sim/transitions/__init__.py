# src/pingpong_sim/transitions/__init__.py
from .exceptions import UnknownTransitionError
from .registry import (
    TRANSITION_REGISTRY,
    TransitionFn,
    available_transitions,
    get_transition,
    register_transition,
)
# Importing the rules module populates the registry.
from .rules import shift_right

__all__ = [
    "TRANSITION_REGISTRY",
    "TransitionFn",
    "available_transitions",
    "get_transition",
    "register_transition",
    "shift_right",
    "UnknownTransitionError",
]
