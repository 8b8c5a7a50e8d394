"""
Orchestration layer for event generation.

Ordered stage execution over one event record, with snapshot/rollback.
"""

from .states import RunState
from .context import RunContext
from .history import RecordHistory
from .driver import PipelineDriver
from .stages import Stage, StageResult, InitialStateStage

__all__ = [
    "RunState",
    "RunContext",
    "RecordHistory",
    "PipelineDriver",
    "Stage",
    "StageResult",
    "InitialStateStage",
]
