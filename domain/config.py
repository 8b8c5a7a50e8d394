"""
Configuration domain models.

Validated configuration objects for interaction enumeration,
the pipeline driver and the record history.
"""

import os
from dataclasses import dataclass, field
from typing import Mapping, Optional


HISTORY_ENV_VAR = "EVGEN_HISTORY_ENABLE"

_FALSE_VALUES = {"", "0", "false", "no", "off"}


def _require_bool(name: str, value) -> bool:
    if not isinstance(value, bool):
        raise ValueError(f"{name} must be a bool, got {value!r}")
    return value


@dataclass(frozen=True)
class InteractionListConfig:
    """Flags consumed by interaction list generators."""

    is_cc: bool = False
    is_nc: bool = False
    is_charm: bool = False

    def __post_init__(self):
        """Validate flags."""
        _require_bool("is-CC", self.is_cc)
        _require_bool("is-NC", self.is_nc)
        _require_bool("is-Charm", self.is_charm)

    @property
    def any_interaction_type(self) -> bool:
        return self.is_cc or self.is_nc

    @classmethod
    def from_dict(cls, config_dict: Mapping) -> 'InteractionListConfig':
        """
        Create config from a mapping keyed 'is-CC', 'is-NC', 'is-Charm'.

        Missing keys default to False.
        """
        return cls(
            is_cc=config_dict.get("is-CC", False),
            is_nc=config_dict.get("is-NC", False),
            is_charm=config_dict.get("is-Charm", False),
        )


@dataclass(frozen=True)
class HistoryConfig:
    """Whether event record snapshots are kept."""

    enabled: bool = False

    def __post_init__(self):
        _require_bool("enabled", self.enabled)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'HistoryConfig':
        """
        Read the process-wide toggle once.

        Args:
            environ: Environment mapping (defaults to os.environ)

        Returns:
            HistoryConfig with the toggle resolved
        """
        environ = os.environ if environ is None else environ
        value = environ.get(HISTORY_ENV_VAR)
        if value is None:
            return cls(enabled=False)
        return cls(enabled=value.strip().lower() not in _FALSE_VALUES)


@dataclass(frozen=True)
class DriverConfig:
    """Configuration for the pipeline driver."""

    # Re-runs allowed per stage after restoring the pre-stage snapshot
    max_retries: int = 0

    def __post_init__(self):
        if not isinstance(self.max_retries, int) or isinstance(self.max_retries, bool):
            raise ValueError(f"max_retries must be an int, got {self.max_retries!r}")
        if self.max_retries < 0:
            raise ValueError(f"max_retries must be non-negative, got {self.max_retries}")


@dataclass(frozen=True)
class GenerationConfig:
    """
    Complete generator configuration.

    Immutable configuration object validated at creation.
    """

    process: str = "DIS"
    interaction_list: InteractionListConfig = field(default_factory=InteractionListConfig)
    driver: DriverConfig = field(default_factory=DriverConfig)
    history: HistoryConfig = field(default_factory=HistoryConfig)

    # Run metadata
    run_name: str = "evgen_run"
    threads: int = 4
    show_progress_bar: bool = True

    def __post_init__(self):
        """Validate generation configuration."""
        if not self.process:
            raise ValueError("process cannot be empty")
        if not isinstance(self.threads, int) or isinstance(self.threads, bool):
            raise ValueError(f"threads must be an int, got {self.threads!r}")
        if self.threads <= 0:
            raise ValueError(f"threads must be positive, got {self.threads}")
        _require_bool("show_progress_bar", self.show_progress_bar)

    @classmethod
    def from_dict(
        cls,
        config_dict: dict,
        environ: Optional[Mapping[str, str]] = None
    ) -> 'GenerationConfig':
        """
        Create GenerationConfig from a dictionary (e.g., loaded from YAML).

        Args:
            config_dict: Dictionary with configuration values
            environ: Environment used when history.enabled is unset

        Returns:
            Validated GenerationConfig instance
        """
        generator_dict = config_dict.get("generator") or {}
        driver_dict = config_dict.get("driver") or {}
        history_dict = config_dict.get("history") or {}
        run_metadata = config_dict.get("run_metadata") or {}

        history_enabled = history_dict.get("enabled")
        if history_enabled is None:
            history = HistoryConfig.from_env(environ)
        else:
            history = HistoryConfig(enabled=history_enabled)

        return cls(
            process=generator_dict.get("process", "DIS"),
            interaction_list=InteractionListConfig.from_dict(generator_dict),
            driver=DriverConfig(max_retries=driver_dict.get("max_retries", 0)),
            history=history,
            run_name=run_metadata.get("run_name", "evgen_run"),
            threads=run_metadata.get("threads", 4),
            show_progress_bar=run_metadata.get("show_progress_bar", True),
        )
