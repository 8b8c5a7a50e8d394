"""
Registry of interaction list generators keyed by process name.
"""

from .base import InteractionListGenerator
from .dis import DISInteractionListGenerator
from .qel import QELInteractionListGenerator


GENERATORS: dict[str, type[InteractionListGenerator]] = {
    "DIS": DISInteractionListGenerator,
    "QEL": QELInteractionListGenerator,
}


def get_generator(process: str) -> InteractionListGenerator:
    """
    Instantiate the generator registered for a process family.

    Raises:
        KeyError: If no generator is registered under that name
    """
    key = process.upper()
    if key not in GENERATORS:
        raise KeyError(f"Unknown process '{process}', expected one of {sorted(GENERATORS)}")
    return GENERATORS[key]()
