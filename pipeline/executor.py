"""
EventGenerationExecutor - Runs many independent events concurrently.

Each event gets its own EventRecord and RecordHistory; the driver,
its stages and the interaction channels are shared read-only.
"""

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass
from typing import Optional, Sequence

from tqdm import tqdm

from domain.config import GenerationConfig, HistoryConfig
from domain.interaction import Interaction
from domain.record import EventRecord
from orchestration import PipelineDriver, RecordHistory, RunContext


@dataclass(frozen=True)
class GenerationSummary:
    """Outcome counts of a batch of runs."""

    total_events: int
    successful_events: int
    failed_events: int
    total_retries: int

    @property
    def success_rate(self) -> float:
        """Calculate success rate as percentage."""
        if self.total_events == 0:
            return 0.0
        return (self.successful_events / self.total_events) * 100

    def to_dict(self) -> dict:
        return {
            "total_events": self.total_events,
            "successful_events": self.successful_events,
            "failed_events": self.failed_events,
            "success_rate": f"{self.success_rate:.1f}%",
            "total_retries": self.total_retries,
        }


class EventGenerationExecutor:
    """
    Thread pool over independent pipeline runs.

    Runs never share a record or a history, so no locking is needed.
    """

    def __init__(
        self,
        driver: PipelineDriver,
        history_config: HistoryConfig,
        max_threads: int = 4,
        show_progress: bool = True
    ):
        """
        Initialize executor.

        Args:
            driver: Driver holding the ordered stages
            history_config: Toggle applied to every run's history
            max_threads: Maximum number of concurrent runs
            show_progress: Whether to show progress bar
        """
        if max_threads <= 0:
            raise ValueError(f"max_threads must be positive, got {max_threads}")

        self.driver = driver
        self.history_config = history_config
        self.max_threads = max_threads
        self.show_progress = show_progress
        self.logger = logging.getLogger(self.__class__.__name__)

    @classmethod
    def from_config(cls, driver: PipelineDriver, config: GenerationConfig) -> 'EventGenerationExecutor':
        return cls(
            driver=driver,
            history_config=config.history,
            max_threads=config.threads,
            show_progress=config.show_progress_bar,
        )

    def generate(self, interactions: Sequence[Interaction]) -> list[Optional[RunContext]]:
        """
        Run one event per interaction.

        Args:
            interactions: Channel of each event, in event order

        Returns:
            Final context per event, in event order; None where the run
            raised instead of returning a context
        """
        results: list[Optional[RunContext]] = [None] * len(interactions)

        with ThreadPoolExecutor(max_workers=self.max_threads) as executor:
            futures = {
                executor.submit(self._run_single_event, interaction): index
                for index, interaction in enumerate(interactions)
            }

            with tqdm(
                total=len(interactions),
                desc="Generating events",
                unit="event",
                disable=not self.show_progress
            ) as pbar:
                for future in as_completed(futures):
                    index = futures[future]
                    try:
                        results[index] = future.result()
                    except Exception as e:
                        self.logger.warning(f"Error generating event {index}: {e}")
                    finally:
                        pbar.update(1)

        return results

    def _run_single_event(self, interaction: Interaction) -> RunContext:
        """Run the driver over a fresh record (runs in thread)."""
        record = EventRecord(interaction=interaction)
        with RecordHistory(enabled=self.history_config.enabled) as history:
            return self.driver.run(record, history)

    @staticmethod
    def summarize(results: Sequence[Optional[RunContext]]) -> GenerationSummary:
        """Count outcomes of a batch of runs."""
        successful = sum(1 for r in results if r is not None and r.is_successful)
        retries = sum(r.retries for r in results if r is not None)
        return GenerationSummary(
            total_events=len(results),
            successful_events=successful,
            failed_events=len(results) - successful,
            total_retries=retries,
        )
