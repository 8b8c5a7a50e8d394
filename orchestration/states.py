"""
Run states.

Explicit state enumeration for one pipeline run over an event record.
"""

from enum import Enum, auto


class RunState(Enum):
    """
    All possible states of a pipeline run.
    """

    # Initial state
    IDLE = auto()

    # Stages executing
    RUNNING = auto()

    # Terminal states
    COMPLETED = auto()
    FAILED = auto()

    def is_terminal(self) -> bool:
        """Check if this is a terminal state."""
        return self in (RunState.COMPLETED, RunState.FAILED)

    def __str__(self) -> str:
        """String representation of state."""
        return self.name


# Valid state transitions
VALID_TRANSITIONS = {
    RunState.IDLE: {
        RunState.RUNNING,
        RunState.FAILED,
    },
    RunState.RUNNING: {
        RunState.COMPLETED,
        RunState.FAILED,
    },
    RunState.COMPLETED: set(),  # Terminal
    RunState.FAILED: set(),     # Terminal
}


def is_valid_transition(from_state: RunState, to_state: RunState) -> bool:
    """
    Check if a state transition is valid.

    Args:
        from_state: Current state
        to_state: Target state

    Returns:
        True if transition is valid
    """
    return to_state in VALID_TRANSITIONS.get(from_state, set())
