"""
RecordHistory - Event record snapshots keyed by processing step.

Lets a run step back to the record as it was after an earlier stage
and re-run what followed (the generator's 'undo').

Step keys:
    -1      record before any processing stage ran
    0, 1..  record after stage 0, 1, ... executed
"""

import logging
from typing import Optional

from domain.record import EventRecord
from utils.log import NOTICE, RECORD_HISTORY_LOGGER


logger = logging.getLogger(RECORD_HISTORY_LOGGER)


class RecordHistory:
    """
    Owning snapshot buffer for one pipeline run.

    Snapshots are deep copies going in and coming out, so neither the
    live record nor a restored record can alter what is stored. A
    disabled history ignores every snapshot.
    """

    def __init__(self, enabled: bool = False):
        """
        Initialize history.

        Args:
            enabled: Fixed for the lifetime of the buffer
        """
        self._enabled = bool(enabled)
        self._snapshots: dict[int, EventRecord] = {}

    @classmethod
    def copy_of(cls, other: 'RecordHistory') -> 'RecordHistory':
        """New history with the same enabled flag and copies of every snapshot."""
        history = cls(enabled=other.enabled)
        history.copy_from(other)
        return history

    @property
    def enabled(self) -> bool:
        return self._enabled

    @property
    def steps(self) -> list[int]:
        return sorted(self._snapshots)

    def add_snapshot(self, step: int, record: Optional[EventRecord]):
        """
        Store a copy of the record for a processing step.

        The first snapshot for a step wins; later ones are ignored.
        """
        if not self._enabled:
            return

        if record is None:
            logger.warning(
                "Input event record snapshot is null. Is not added at history record"
            )
            return

        if step in self._snapshots:
            logger.warning(f"Event record snapshot for processing step: {step} already exists!")
            return

        logger.log(NOTICE, f"Adding event record snapshot for processing step: {step}")
        self._store(step, record)

    def get_snapshot(self, step: int) -> Optional[EventRecord]:
        """
        Copy of the snapshot for a processing step.

        Returns:
            EventRecord, or None if no snapshot exists for the step
        """
        snapshot = self._snapshots.get(step)
        if snapshot is None:
            return None
        return snapshot.copy()

    def purge_history(self):
        """Delete every snapshot."""
        logger.log(NOTICE, "Purging event record history buffer")

        for step in sorted(self._snapshots):
            logger.info(f"Deleting event record snapshot for processing step: {step}")
        self._snapshots.clear()

    def purge_recent_history(self, start_step: int):
        """
        Delete snapshots for processing steps >= start_step.

        start_step == -1 empties the buffer; anything lower is ignored.
        """
        logger.log(
            NOTICE,
            f"Purging recent event record history buffer (processing step >= {start_step})"
        )

        if start_step < -1:
            logger.warning(f"Invalid starting step: {start_step} - Ignoring")
            return

        if start_step == -1:
            self.purge_history()
            return

        doomed = [step for step in self._snapshots if step >= start_step]
        for step in sorted(doomed):
            logger.info(f"Deleting event record snapshot for processing step: {step}")
            del self._snapshots[step]

    def copy_from(self, other: 'RecordHistory'):
        """
        Replace all snapshots with copies of those held by other.

        Copies regardless of this buffer's enabled flag.
        """
        if other is self:
            return

        self.purge_history()
        for step in other.steps:
            self._store(step, other._snapshots[step])

    def close(self):
        """End of run: release every snapshot."""
        self.purge_history()

    def _store(self, step: int, record: EventRecord):
        self._snapshots[step] = record.copy()

    def __enter__(self) -> 'RecordHistory':
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False

    def __len__(self) -> int:
        return len(self._snapshots)

    def __contains__(self, step) -> bool:
        return step in self._snapshots

    def __str__(self) -> str:
        lines = [f"****** Event record history [depth: {len(self)}]"]
        for step in self.steps:
            lines.append(f"[After processing step = {step}] :")
            lines.append(str(self._snapshots[step]))
        return "\n".join(lines)
