"""
Pipeline driver for one event.

Runs an ordered sequence of stages over a single event record and
checkpoints the record in a RecordHistory after every stage.
"""

import logging
from typing import Optional, Sequence

from domain.config import DriverConfig
from domain.record import EventRecord
from .context import RunContext
from .history import RecordHistory
from .states import RunState
from .stages.base import Stage, StageResult


class PipelineDriver:
    """
    Sequential stage runner with snapshot/rollback.

    Stages run strictly in the order given. When a stage fails and
    retries remain, the record is restored from the snapshot taken after
    the previous stage and the same stage runs again.
    """

    def __init__(self, stages: Sequence[Stage], config: Optional[DriverConfig] = None):
        """
        Initialize driver.

        Args:
            stages: Ordered stages; shared read-only across runs
            config: Retry policy
        """
        self.stages = tuple(stages)
        self.config = config or DriverConfig()
        self.logger = logging.getLogger(self.__class__.__name__)

        self._validate_stages()

    def _validate_stages(self):
        """Validate that every stage implements the Stage interface."""
        for i, stage in enumerate(self.stages):
            if not isinstance(stage, Stage):
                raise TypeError(f"stage {i} ({stage!r}) does not implement Stage")

    def run(self, initial_record: EventRecord, history: RecordHistory) -> RunContext:
        """
        Run every stage over the record.

        Args:
            initial_record: Record to evolve; mutated in place
            history: Snapshot buffer owned by this run

        Returns:
            Final RunContext (COMPLETED or FAILED) holding the final record
        """
        context = RunContext(record=initial_record).with_state(RunState.RUNNING)

        self.logger.debug(f"Starting run over {len(self.stages)} stages")

        if history.enabled:
            history.add_snapshot(-1, context.record)

        for step, stage in enumerate(self.stages):
            context = self._run_stage(step, stage, context, history)
            if context.has_error:
                self._log_final_state(context)
                return context

        context = context.with_state(RunState.COMPLETED)
        self._log_final_state(context)
        return context

    def _run_stage(
        self,
        step: int,
        stage: Stage,
        context: RunContext,
        history: RecordHistory
    ) -> RunContext:
        """
        Run one stage, retrying from the previous snapshot on failure.

        Returns:
            Updated context; FAILED if the stage could not be completed
        """
        attempt = 0

        while True:
            result = self._execute_stage(step, stage, context.record)

            if result.success:
                if history.enabled:
                    history.add_snapshot(step, context.record)
                return context.with_step_completed()

            self.logger.warning(f"Stage {step} ({stage.name}) failed: {result.message}")

            if attempt >= self.config.max_retries:
                return context.with_error(
                    message=f"Stage {step} ({stage.name}) failed: {result.message}",
                    failed_step=step,
                )

            restored = history.get_snapshot(step - 1)
            if restored is None:
                return context.with_error(
                    message=(
                        f"Stage {step} ({stage.name}) failed and no snapshot for "
                        f"step {step - 1} is available to restore"
                    ),
                    failed_step=step,
                )

            attempt += 1
            self.logger.info(
                f"Restoring record from step {step - 1} and retrying stage {step} "
                f"(attempt {attempt + 1}/{self.config.max_retries + 1})"
            )
            history.purge_recent_history(step)
            context = context.with_record(restored).with_retry()

    def _execute_stage(self, step: int, stage: Stage, record: EventRecord) -> StageResult:
        """Run a stage, turning exceptions into failed results."""
        self.logger.debug(f"Running stage {step}: {stage.name}")
        try:
            result = stage.process(record)
        except Exception as e:
            self.logger.error(f"Error in stage {step} ({stage.name}): {e}", exc_info=True)
            return StageResult.failed(f"{type(e).__name__}: {e}")

        if not isinstance(result, StageResult):
            return StageResult.failed(
                f"stage returned {type(result).__name__} instead of StageResult"
            )
        return result

    def _log_final_state(self, context: RunContext):
        """Log final run state."""
        if context.is_successful:
            self.logger.debug(
                f"Run completed: {context.steps_completed} stages, {context.retries} retries"
            )
        else:
            self.logger.error(f"Run failed: {context.error_message}")
