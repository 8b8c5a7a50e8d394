"""
Interaction list services.

Generators enumerating the interaction channels of one process family.
"""

from .base import InteractionListGenerator
from .dis import DISInteractionListGenerator
from .qel import QELInteractionListGenerator
from .registry import GENERATORS, get_generator

__all__ = [
    "InteractionListGenerator",
    "DISInteractionListGenerator",
    "QELInteractionListGenerator",
    "GENERATORS",
    "get_generator",
]
