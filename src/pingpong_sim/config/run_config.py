# src/pingpong_sim/config/run_config.py
from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path
from typing import Optional, Tuple

# The run configuration is the contract between the YAML parser (or the command line)
# and the execution facade. It is frozen so a run's inputs cannot change mid-flight.

@dataclass(frozen=True)
class RunConfig:
    """A validated description of a single ping-pong run."""
    iterations: int
    initial_state: Tuple[float, ...]
    transition_name: str
    source_path: Optional[Path] = None

    def with_overrides(
        self,
        iterations: Optional[int] = None,
        initial_state: Optional[Tuple[float, ...]] = None,
        transition_name: Optional[str] = None,
    ) -> RunConfig:
        """Returns a copy with every non-None argument replacing the stored value."""
        changes = {}
        if iterations is not None:
            changes['iterations'] = iterations
        if initial_state is not None:
            changes['initial_state'] = tuple(initial_state)
        if transition_name is not None:
            changes['transition_name'] = transition_name
        return replace(self, **changes)
