# src/pingpong_sim/transitions/rules.py
"""
Built-in transition functions.

A transition receives a read-only `source` and a `destination` of the same length, and
must overwrite every cell of `destination` from the cells of `source` alone.
"""
import numpy as np

from .registry import register_transition


@register_transition("shift_right")
def shift_right(source: np.ndarray, destination: np.ndarray) -> None:
    """Moves every cell one place to the right and injects a zero at index 0."""
    destination[0] = 0
    destination[1:] = source[:-1]
