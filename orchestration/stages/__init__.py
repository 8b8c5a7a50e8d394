"""
Processing stages run by the pipeline driver.
"""

from .base import Stage, StageResult
from .initial_state import InitialStateStage

__all__ = [
    "Stage",
    "StageResult",
    "InitialStateStage",
]
