# src/pingpong_sim/simulation/alternator.py
"""
The double-buffer ("ping-pong") alternation protocol.

Two equal-length buffers are created once from the initial state. On iteration i the
buffer selected by `parity_roles(i)` is read and the other one is overwritten by the
transition function; the freshly written buffer becomes the source of iteration i+1.
Buffers are never reallocated.
"""
import logging
from contextlib import contextmanager
from typing import Callable, Iterator, Sequence, Tuple

import numpy as np

from .exceptions import AlternatorStateError, InvalidInput
from .results import IterationRecord
from .roles import BufferId, StepPhase, parity_roles, require_non_negative_int

logger = logging.getLogger(__name__)

TransitionFn = Callable[[np.ndarray, np.ndarray], None]


def initialize(initial_state: Sequence[float]) -> Tuple[np.ndarray, np.ndarray]:
    """
    Creates the two simulation buffers from a caller-supplied initial state.

    Args:
        initial_state: A non-empty, one-dimensional sequence of finite numbers.

    Returns:
        A tuple (buffer_a, buffer_b) of independent float64 arrays with identical
        contents. Integer input is widened so a transition may write fractional values.

    Raises:
        InvalidInput: If the state is empty, not one-dimensional, not numeric, or
                      contains NaN/Inf values.
    """
    try:
        state = np.array(initial_state)
    except (TypeError, ValueError) as e:
        raise InvalidInput(
            details=f"Initial state could not be converted to an array: {e}",
            user_input=initial_state,
        ) from e

    if state.ndim != 1:
        raise InvalidInput(
            details=f"Initial state must be a one-dimensional sequence, got {state.ndim} dimension(s).",
            user_input=initial_state,
        )
    if state.size == 0:
        raise InvalidInput(details="Initial state is empty.", user_input=initial_state)
    if not np.issubdtype(state.dtype, np.number) or np.issubdtype(state.dtype, np.complexfloating):
        raise InvalidInput(
            details=f"Initial state must contain only real numbers, got dtype '{state.dtype}'.",
            user_input=initial_state,
        )
    if not np.all(np.isfinite(state)):
        bad = np.flatnonzero(~np.isfinite(state)).tolist()
        raise InvalidInput(
            details=f"Initial state contains non-finite values at index/indices {bad}.",
            user_input=initial_state,
        )

    buffer_a = state.astype(np.float64)
    buffer_b = buffer_a.copy()
    logger.debug(f"Initialized two buffers of length {state.size} (input dtype {state.dtype}).")
    return buffer_a, buffer_b


def step(
    iteration_index: int,
    buffer_a: np.ndarray,
    buffer_b: np.ndarray,
    transition_fn: TransitionFn,
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Performs one step under the role assignment of `iteration_index`.

    The source buffer is write-locked while `transition_fn` runs, so a transition
    that tries to modify it fails with numpy's read-only `ValueError`. Any error
    raised by the transition function propagates unchanged.

    Returns:
        The (source, destination) pair actually used.
    """
    source_id, _ = parity_roles(iteration_index)
    _check_buffer_pair(buffer_a, buffer_b)
    _check_transition(transition_fn)

    if source_id is BufferId.A:
        source, destination = buffer_a, buffer_b
    else:
        source, destination = buffer_b, buffer_a

    logger.debug(f"Iteration {iteration_index}: reading buffer {source_id.name}, writing the other.")
    with _write_locked(source):
        transition_fn(source, destination)
    return source, destination


def run(
    n_iterations: int,
    initial_state: Sequence[float],
    transition_fn: TransitionFn,
) -> Iterator[IterationRecord]:
    """
    Runs `n_iterations` steps over a fresh pair of buffers.

    Input is validated before this function returns; the steps themselves are
    performed lazily as the returned iterator is consumed. The iterator cannot be
    restarted. A consumer that needs to resume a run should use an `Alternator`
    directly and call its `run` method again.

    Raises:
        InvalidInput: For a negative or non-integer iteration count, or an invalid
                      initial state.
    """
    n = require_non_negative_int(n_iterations, "Iteration count")
    alternator = Alternator(initial_state)
    logger.info(f"Starting ping-pong run of {n} iteration(s) over {alternator.length} cell(s).")
    return alternator.run(n, transition_fn)


class Alternator:
    """
    Owns the two buffers of a single simulation run and the step counter that
    decides their roles.

    Callers only ever receive read-only views or copies of the buffers; the
    Alternator is the sole writer, through the transition function it is given.
    """
    def __init__(self, initial_state: Sequence[float]):
        self._buffer_a, self._buffer_b = initialize(initial_state)
        self.iteration_index: int = 0
        self.phase: StepPhase = StepPhase.AWAITING_STEP

    @property
    def length(self) -> int:
        return int(self._buffer_a.size)

    def roles(self) -> Tuple[BufferId, BufferId]:
        """The (source, destination) ids the next step will use."""
        return parity_roles(self.iteration_index)

    @property
    def current_state(self) -> np.ndarray:
        """A read-only view of the newest state, i.e. the next step's source."""
        source_id, _ = self.roles()
        return _read_only_view(self._buffer(source_id))

    def buffers(self) -> Tuple[np.ndarray, np.ndarray]:
        """Read-only views of buffer A and buffer B."""
        return _read_only_view(self._buffer_a), _read_only_view(self._buffer_b)

    def step(self, transition_fn: TransitionFn) -> Tuple[np.ndarray, np.ndarray]:
        """
        Advances the simulation by one iteration.

        Returns:
            Read-only views of the (source, destination) pair used by the step.

        Raises:
            AlternatorStateError: If a previous step failed part-way.
        """
        if self.phase is StepPhase.STEPPING:
            raise AlternatorStateError(iteration_index=self.iteration_index, phase=str(self.phase))
        _check_transition(transition_fn)
        self.phase = StepPhase.STEPPING
        source, destination = step(self.iteration_index, self._buffer_a, self._buffer_b, transition_fn)
        self.phase = StepPhase.STEPPED
        self.iteration_index += 1
        return _read_only_view(source), _read_only_view(destination)

    def run(self, n_iterations: int, transition_fn: TransitionFn) -> Iterator[IterationRecord]:
        """
        Returns a lazy iterator performing `n_iterations` further steps, continuing
        from the current iteration index.
        """
        n = require_non_negative_int(n_iterations, "Iteration count")
        _check_transition(transition_fn)
        if self.phase is StepPhase.STEPPING:
            raise AlternatorStateError(iteration_index=self.iteration_index, phase=str(self.phase))
        return self._iterate(n, transition_fn)

    def _iterate(self, n_iterations: int, transition_fn: TransitionFn) -> Iterator[IterationRecord]:
        for _ in range(n_iterations):
            index = self.iteration_index
            source, destination = self.step(transition_fn)
            yield IterationRecord(
                iteration_index=index,
                source_snapshot=source.copy(),
                destination_snapshot=destination.copy(),
            )
        logger.info(f"Completed {n_iterations} step(s); next iteration index is {self.iteration_index}.")

    def _buffer(self, buffer_id: BufferId) -> np.ndarray:
        return self._buffer_a if buffer_id is BufferId.A else self._buffer_b


# --- Private helpers ---

@contextmanager
def _write_locked(buffer: np.ndarray):
    was_writeable = buffer.flags.writeable
    buffer.flags.writeable = False
    try:
        yield buffer
    finally:
        if was_writeable:
            buffer.flags.writeable = True


def _read_only_view(buffer: np.ndarray) -> np.ndarray:
    view = buffer.view()
    view.flags.writeable = False
    return view


def _check_buffer_pair(buffer_a: np.ndarray, buffer_b: np.ndarray):
    if not isinstance(buffer_a, np.ndarray) or not isinstance(buffer_b, np.ndarray):
        raise InvalidInput(
            details="Both buffers must be numpy arrays, as produced by initialize().",
            user_input=(type(buffer_a).__name__, type(buffer_b).__name__),
        )
    if buffer_a.shape != buffer_b.shape:
        raise InvalidInput(
            details=f"Buffers must have the same shape, got {buffer_a.shape} and {buffer_b.shape}.",
        )
    if np.may_share_memory(buffer_a, buffer_b):
        raise InvalidInput(details="Buffer A and buffer B must not share memory.")


def _check_transition(transition_fn):
    if not callable(transition_fn):
        raise InvalidInput(
            details=f"Transition function must be callable, got {type(transition_fn).__name__}.",
            user_input=transition_fn,
        )
