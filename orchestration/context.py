"""
Run context.

Immutable summary of one pipeline run, rebuilt after every stage.
"""

from dataclasses import dataclass, field, replace
from typing import Optional
from datetime import datetime

from domain.record import EventRecord
from .states import RunState, is_valid_transition


@dataclass(frozen=True)
class RunContext:
    """
    Immutable context for one pipeline run.

    The context itself is frozen; the event record it points at is the
    live, mutable record of the run.
    """

    record: EventRecord
    current_state: RunState = RunState.IDLE

    # Execution metadata
    start_time: datetime = field(default_factory=datetime.now)
    steps_completed: int = 0
    retries: int = 0

    # Error tracking
    failed_step: Optional[int] = None
    error_message: Optional[str] = None

    def with_state(self, new_state: RunState) -> 'RunContext':
        """
        Return new context with updated state.

        Raises:
            ValueError: If the transition is not allowed
        """
        if not is_valid_transition(self.current_state, new_state):
            raise ValueError(f"Invalid run state transition: {self.current_state} → {new_state}")
        return replace(self, current_state=new_state)

    def with_record(self, record: EventRecord) -> 'RunContext':
        """Return new context pointing at another (restored) record."""
        return replace(self, record=record)

    def with_step_completed(self) -> 'RunContext':
        return replace(self, steps_completed=self.steps_completed + 1)

    def with_retry(self) -> 'RunContext':
        return replace(self, retries=self.retries + 1)

    def with_error(self, message: str, failed_step: Optional[int] = None) -> 'RunContext':
        """
        Return new context with error information.

        Args:
            message: Error message
            failed_step: Index of the stage that failed

        Returns:
            New RunContext in the FAILED state
        """
        return replace(
            self,
            current_state=RunState.FAILED,
            failed_step=failed_step,
            error_message=message,
        )

    @property
    def elapsed_time(self) -> float:
        """Get elapsed time in seconds."""
        return (datetime.now() - self.start_time).total_seconds()

    @property
    def is_terminal(self) -> bool:
        return self.current_state.is_terminal()

    @property
    def is_successful(self) -> bool:
        return self.current_state == RunState.COMPLETED

    @property
    def has_error(self) -> bool:
        return self.current_state == RunState.FAILED

    def get_summary(self) -> dict:
        """
        Get summary of the run.

        Returns:
            Dict with execution summary
        """
        return {
            "state": str(self.current_state),
            "elapsed_time_sec": self.elapsed_time,
            "start_time": self.start_time.isoformat(),
            "steps_completed": self.steps_completed,
            "retries": self.retries,
            "record_entries": len(self.record),
            "failed_step": self.failed_step,
            "error_message": self.error_message,
            "is_successful": self.is_successful,
        }
