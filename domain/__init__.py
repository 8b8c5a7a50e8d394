"""
Domain models for the event generator.

Pure data structures with validation, no business logic.
"""

from .interaction import (
    TargetDescriptor,
    InitialState,
    ScatteringType,
    InteractionType,
    ProcessInfo,
    ExclusiveTag,
    Interaction,
    InteractionList,
    NoChannel,
    InteractionListResult,
)
from .record import ParticleStatus, ParticleEntry, EventRecord
from .config import (
    InteractionListConfig,
    HistoryConfig,
    DriverConfig,
    GenerationConfig,
)

__all__ = [
    "TargetDescriptor",
    "InitialState",
    "ScatteringType",
    "InteractionType",
    "ProcessInfo",
    "ExclusiveTag",
    "Interaction",
    "InteractionList",
    "NoChannel",
    "InteractionListResult",
    "ParticleStatus",
    "ParticleEntry",
    "EventRecord",
    "InteractionListConfig",
    "HistoryConfig",
    "DriverConfig",
    "GenerationConfig",
]
