# src/pingpong_sim/constants.py
import logging

logger = logging.getLogger(__name__)

# --- Run Defaults ---

#: Number of iterations performed when neither the command line nor a run file says otherwise.
DEFAULT_ITERATIONS: int = 8

#: A single live cell at the left edge of an eight-cell buffer.
DEFAULT_INITIAL_STATE: tuple = (1, 0, 0, 0, 0, 0, 0, 0)

#: Registered name of the transition used by default.
DEFAULT_TRANSITION: str = "shift_right"

# --- Report Rendering ---

#: Separator line written after each iteration in the reference rendering.
RECORD_SEPARATOR: str = "=" * 25
