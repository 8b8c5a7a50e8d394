"""
InitialStateStage - Adds the initial state to an empty event record.
"""

from domain.record import EventRecord
from .base import Stage, StageResult


class InitialStateStage(Stage):
    """
    First stage of a generation pipeline.

    Appends the probe, target and struck nucleon of the record's
    interaction. The probe energy is fixed per stage instance.
    """

    def __init__(self, probe_energy: float):
        super().__init__()
        if probe_energy <= 0:
            raise ValueError(f"probe_energy must be positive, got {probe_energy}")
        self.probe_energy = probe_energy

    def process(self, record: EventRecord) -> StageResult:
        if record.interaction is None:
            return StageResult.failed("record carries no interaction")
        if len(record) > 0:
            return StageResult.failed(f"record already holds {len(record)} entries")

        record.append_initial_state(self.probe_energy)
        self.logger.debug(f"Initial state appended for {record.interaction}")
        return StageResult.ok()
