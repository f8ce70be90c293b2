# src/pingpong_sim/simulation/execution.py
"""
Provides the public, batteries-included API for running a simulation.

This module is a thin Facade over the alternation core. The core (`alternator.run`)
lets every error from a transition function propagate unchanged; this layer adds:
1.  **Transition lookup:** a transition may be given as a callable or a registered name.
2.  **Context enrichment:** `with_diagnostics` wraps step-function errors into a
    `TransitionFailure` carrying the failing iteration index.
3.  **Top-level error handling:** `run_simulation` converts any `DiagnosableError` into a
    single, actionable `SimulationRunError` with the original exception chained.
"""
import logging
from typing import Iterable, Iterator, Optional, Sequence, Tuple, Union

import numpy as np

from ..config.run_config import RunConfig
from ..errors import DiagnosableError, SimulationRunError, format_diagnostic_report
from ..transitions import TransitionFn, get_transition
from .alternator import run
from .exceptions import TransitionFailure
from .results import IterationRecord, SimulationResult

logger = logging.getLogger(__name__)


def resolve_transition(transition: Union[str, TransitionFn]) -> Tuple[TransitionFn, Optional[str]]:
    """Returns (callable, registered name or None) for a transition given by name or value."""
    if isinstance(transition, str):
        return get_transition(transition), transition
    return transition, getattr(transition, "transition_name", None)


def with_diagnostics(
    records: Iterable[IterationRecord],
    transition_name: Optional[str] = None,
) -> Iterator[IterationRecord]:
    """
    Re-yields `records`, converting any non-diagnosable error raised while producing
    the next record into a `TransitionFailure` for that iteration.
    """
    iterator = iter(records)
    next_index = 0
    while True:
        try:
            record = next(iterator)
        except StopIteration:
            return
        except DiagnosableError:
            raise
        except Exception as e:
            logger.error(f"Transition function failed at iteration {next_index}: {e}")
            raise TransitionFailure(
                iteration_index=next_index, original_error=e, transition_name=transition_name
            ) from e
        next_index = record.iteration_index + 1
        yield record


def iterate_simulation(
    n_iterations: int,
    initial_state: Sequence[float],
    transition: Union[str, TransitionFn],
) -> Iterator[IterationRecord]:
    """
    Lazily runs a simulation with diagnostic wrapping. Input errors are raised
    immediately; transition errors surface as `TransitionFailure` while iterating.
    """
    transition_fn, transition_name = resolve_transition(transition)
    return with_diagnostics(run(n_iterations, initial_state, transition_fn), transition_name)


def run_simulation(
    n_iterations: int,
    initial_state: Sequence[float],
    transition: Union[str, TransitionFn],
) -> SimulationResult:
    """
    Runs a complete simulation and collects every iteration record.

    Args:
        n_iterations: Number of steps to perform (>= 0).
        initial_state: The first buffer contents.
        transition: A transition callable, or the name of a registered transition.

    Returns:
        A `SimulationResult` with one record per step and the final state.

    Raises:
        SimulationRunError: A user-friendly, diagnosable error if the run fails at any
                            stage. The original exception is chained for debugging.
    """
    try:
        logger.info(f"--- Starting simulation: {n_iterations} iteration(s) ---")
        transition_fn, transition_name = resolve_transition(transition)
        records = tuple(with_diagnostics(run(n_iterations, initial_state, transition_fn), transition_name))

        if records:
            final_state = records[-1].destination_snapshot.copy()
        else:
            final_state = np.array(initial_state, dtype=np.float64)

        result = SimulationResult(records=records, final_state=final_state, transition_name=transition_name)
        logger.info(f"Simulation successful after {result.iterations} iteration(s).")
        return result

    except DiagnosableError as e:
        logger.error(f"A diagnosable error occurred during simulation: {e}")
        raise SimulationRunError(e.get_diagnostic_report()) from e

    except Exception as e:
        logger.critical(f"An unexpected internal error occurred during simulation: {e}", exc_info=True)
        report = format_diagnostic_report(
            error_type=f"An Unexpected Simulation Error Occurred ({type(e).__name__})",
            details=f"The simulator encountered an unexpected internal error: {e}",
            suggestion="This may be a bug. Review the traceback and consider filing a bug report.",
            context={}
        )
        raise SimulationRunError(report) from e


def run_from_config(config: RunConfig) -> SimulationResult:
    """A convenience wrapper around `run_simulation` for a parsed `RunConfig`."""
    return run_simulation(config.iterations, config.initial_state, config.transition_name)
