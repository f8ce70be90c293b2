# tests/conftest.py
import logging

import numpy as np
import pytest

from pingpong_sim import TRANSITION_REGISTRY

# The reference scenario: a single live cell at the left edge of eight cells.
REFERENCE_STATE = [1, 0, 0, 0, 0, 0, 0, 0]


def increment(source, destination):
    """A transition that changes every cell: destination = source + 1."""
    destination[:] = source + 1


def expected_shift_state(shifts: int, length: int = 8) -> np.ndarray:
    """The reference state after `shifts` applications of shift_right."""
    state = np.zeros(length, dtype=int)
    if shifts < length:
        state[shifts] = 1
    return state


@pytest.fixture
def reference_state():
    return list(REFERENCE_STATE)


@pytest.fixture
def call_counter():
    """A transition (shift by one) that records how many times it was called."""
    calls = []

    def counting_shift(source, destination):
        calls.append(source.copy())
        destination[0] = 0
        destination[1:] = source[:-1]

    counting_shift.calls = calls
    return counting_shift


@pytest.fixture
def failing_after():
    """Factory for transitions that raise RuntimeError on the (n+1)-th call."""
    def factory(n_successful: int):
        state = {'calls': 0}

        def flaky(source, destination):
            if state['calls'] >= n_successful:
                raise RuntimeError("transition exploded")
            state['calls'] += 1
            destination[:] = source
        return flaky
    return factory


@pytest.fixture
def scratch_registry():
    """Removes any transitions registered during a test."""
    before = dict(TRANSITION_REGISTRY)
    yield TRANSITION_REGISTRY
    TRANSITION_REGISTRY.clear()
    TRANSITION_REGISTRY.update(before)


@pytest.fixture
def restore_logging():
    """The CLI reconfigures the root logger; put it back afterwards."""
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level
    yield
    for handler in root_logger.handlers[:]:
        if handler not in handlers:
            root_logger.removeHandler(handler)
    for handler in handlers:
        if handler not in root_logger.handlers:
            root_logger.addHandler(handler)
    root_logger.setLevel(level)


def reference_output(n_iterations: int = 8, length: int = 8) -> str:
    """The reference rendering of the built-in eight-cell scenario."""
    lines = []
    for i in range(n_iterations):
        before = ["0"] * length
        after = ["0"] * length
        if i < length:
            before[i] = "1"
        if i + 1 < length:
            after[i + 1] = "1"
        lines.append(f"run {i} in:  {','.join(before)}")
        lines.append(f"run {i} out: {','.join(after)}")
        lines.append("=" * 25)
    return "\n".join(lines) + "\n"
