# src/pingpong_sim/transitions/registry.py
import logging
from typing import Callable, Dict, List

import numpy as np

from .exceptions import UnknownTransitionError

logger = logging.getLogger(__name__)

TransitionFn = Callable[[np.ndarray, np.ndarray], None]

TRANSITION_REGISTRY: Dict[str, TransitionFn] = {}


def register_transition(name: str):
    """
    A function decorator to register a transition function in the global transition
    registry, making it available to run configurations and the command line.
    """
    def decorator(fn: TransitionFn) -> TransitionFn:
        if not callable(fn):
            raise TypeError(f"Transition '{name}' must be callable, got {type(fn).__name__}.")
        if not name or not isinstance(name, str):
            raise ValueError("Transition name must be a non-empty string.")

        if name in TRANSITION_REGISTRY:
            logger.warning(f"Transition '{name}' is being redefined/overwritten.")
        fn.transition_name = name
        TRANSITION_REGISTRY[name] = fn
        logger.debug(f"Registered transition '{name}' -> {fn.__name__}")
        return fn
    return decorator


def get_transition(name: str) -> TransitionFn:
    """Looks up a registered transition by name."""
    try:
        return TRANSITION_REGISTRY[name]
    except KeyError:
        raise UnknownTransitionError(name=name, available=available_transitions()) from None


def available_transitions() -> List[str]:
    return sorted(TRANSITION_REGISTRY)
