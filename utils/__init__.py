"""
Utility modules for the generator.
"""

from .log import (
    NOTICE,
    INTERACTION_LIST_LOGGER,
    RECORD_HISTORY_LOGGER,
    setup_logging,
)

__all__ = [
    "NOTICE",
    "INTERACTION_LIST_LOGGER",
    "RECORD_HISTORY_LOGGER",
    "setup_logging",
]
