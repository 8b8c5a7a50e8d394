"""
Base processing stage.

Abstract base class for all stages run over an event record.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
import logging

from domain.record import EventRecord


@dataclass(frozen=True)
class StageResult:
    """Outcome of running one stage over a record."""

    success: bool
    message: str = ""

    @classmethod
    def ok(cls, message: str = "") -> 'StageResult':
        return cls(success=True, message=message)

    @classmethod
    def failed(cls, message: str) -> 'StageResult':
        if not message:
            raise ValueError("failure message cannot be empty")
        return cls(success=False, message=message)


class Stage(ABC):
    """
    Base class for processing stages.

    A stage mutates the event record in place and reports whether it
    succeeded. Stages must not keep per-record state between calls.
    """

    def __init__(self):
        """Initialize stage."""
        self.logger = logging.getLogger(self.__class__.__name__)

    @property
    def name(self) -> str:
        return self.__class__.__name__

    @abstractmethod
    def process(self, record: EventRecord) -> StageResult:
        """
        Run this stage over the record.

        Args:
            record: Live event record, mutated in place

        Returns:
            StageResult
        """
        pass

    def __str__(self) -> str:
        return self.name
