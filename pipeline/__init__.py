"""
Pipeline execution layer.

Runs many independent events over a shared, read-only driver.
"""

from .executor import EventGenerationExecutor, GenerationSummary

__all__ = ["EventGenerationExecutor", "GenerationSummary"]
