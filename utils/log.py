"""
Logging utilities for the generator.

Registers the NOTICE severity and names the subsystem loggers.
"""

import logging
import sys


# Between INFO (20) and WARNING (30)
NOTICE = 25
logging.addLevelName(NOTICE, "NOTICE")

# Subsystem loggers
INTERACTION_LIST_LOGGER = "InteractionList"
RECORD_HISTORY_LOGGER = "RecordHistory"


def setup_logging(level: str = "INFO"):
    """Setup logging configuration."""
    logging.basicConfig(
        level=logging.getLevelName(level.upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)]
    )
