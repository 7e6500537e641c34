"""
Fit analysis workflow.

FitWorkflow owns the intake and walks it through the analysis lifecycle:

    IDLE --analyze()--> PROCESSING --score ok--> SCORED
                             |
                             +--error / timeout / cancel--> FAILED

SCORED and FAILED go back to IDLE on reset() or on the next analyze().
The PROCESSING transition happens synchronously inside analyze(); the
scoring call runs afterwards as an asyncio task, so a real scoring service
can replace the simulated one without changing this contract.
"""

import asyncio
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List, Optional

from omegaconf import DictConfig

from autoapply.contexts.intake.intake_state import IntakeState, ResumeFile
from autoapply.contexts.targeting.exceptions import ScoringError
from autoapply.contexts.targeting.factory import get_scorer
from autoapply.contexts.targeting.fit_result import FitResult
from autoapply.contexts.targeting.scorers import FitScorer
from autoapply.contexts.workflow.config import load_workflow_config
from autoapply.contexts.workflow.exceptions import InvalidTransitionError, WorkflowBusyError
from autoapply.contexts.workflow.logger import (
    log_analysis_failure,
    log_analysis_result,
    log_analysis_start,
    log_ignored_trigger,
    log_listener_error,
    log_phase_change,
)
from autoapply.utils.timestamp import now_exact


class WorkflowPhase(str, Enum):
    """Lifecycle phase of a fit analysis."""

    IDLE = "idle"
    PROCESSING = "processing"
    SCORED = "scored"
    FAILED = "failed"


ALLOWED_TRANSITIONS = {
    WorkflowPhase.IDLE: {WorkflowPhase.PROCESSING},
    WorkflowPhase.PROCESSING: {WorkflowPhase.SCORED, WorkflowPhase.FAILED},
    WorkflowPhase.SCORED: {WorkflowPhase.IDLE},
    WorkflowPhase.FAILED: {WorkflowPhase.IDLE},
}


@dataclass(frozen=True)
class PhaseChange:
    """One recorded phase transition."""

    old_phase: WorkflowPhase
    new_phase: WorkflowPhase
    timestamp: str = field(default_factory=now_exact)


PhaseListener = Callable[[PhaseChange], None]


class FitWorkflow:
    """
    Intake, validation and scoring lifecycle for one user session.

    Collaborators are passed in explicitly: the scorer (defaults to the one
    named in config) and the config (defaults to load_workflow_config()).

    Attributes:
        phase: Current WorkflowPhase
        intake: Current IntakeState (edits rejected while PROCESSING)
        result: FitResult once SCORED, else None
        error: ScoringError once FAILED, else None
        history: Every PhaseChange so far, oldest first
    """

    def __init__(self, scorer: Optional[FitScorer] = None, config: Optional[DictConfig] = None):
        self.config = config if config is not None else load_workflow_config()
        self.scorer = scorer if scorer is not None else get_scorer(self.config)
        self.timeout_seconds: Optional[float] = self.config.scoring.timeout_seconds

        self.phase = WorkflowPhase.IDLE
        self.intake = IntakeState()
        self.result: Optional[FitResult] = None
        self.error: Optional[ScoringError] = None
        self.history: List[PhaseChange] = []

        self._listeners: List[PhaseListener] = []
        self._task: Optional[asyncio.Task] = None
        self._started_at = 0.0

    # =========================================================================
    # INTAKE EDITS
    # =========================================================================

    def set_job_description(self, text: str) -> None:
        self._ensure_editable()
        self.intake.job_description_text = text

    def set_job_url(self, text: str) -> None:
        self._ensure_editable()
        self.intake.job_url = text

    def set_resume_file(self, resume: ResumeFile) -> None:
        """Replace the résumé. File type and size are not checked."""
        self._ensure_editable()
        self.intake.resume_file = resume

    def clear_resume_file(self) -> None:
        self._ensure_editable()
        self.intake.resume_file = None

    # =========================================================================
    # LIFECYCLE
    # =========================================================================

    @property
    def is_processing(self) -> bool:
        return self.phase is WorkflowPhase.PROCESSING

    @property
    def can_analyze(self) -> bool:
        return not self.is_processing and self.intake.is_complete

    def analyze(self) -> asyncio.Task:
        """
        Start an analysis of the current intake.

        Must be called from inside a running event loop. On success the phase is
        PROCESSING by the time this returns, and the returned task completes once
        the workflow reaches SCORED or FAILED. The task's result is the FitResult,
        or None if the analysis failed.

        Calling again while PROCESSING does nothing and returns the in-flight task.
        Calling from SCORED or FAILED starts over from IDLE.

        Raises:
            ValidationError: "missing job input" or "missing resume" (phase unchanged)
            RuntimeError: If there is no running event loop (phase unchanged)
        """
        if self.is_processing:
            log_ignored_trigger()
            return self._task

        self.intake.validate()
        loop = asyncio.get_running_loop()

        if self.phase is not WorkflowPhase.IDLE:
            self._clear_outcome()
            self._transition(WorkflowPhase.IDLE)

        intake = self.intake.snapshot()
        log_analysis_start(intake, self.scorer.name)

        self._started_at = time.perf_counter()
        # The task only starts running on the next loop iteration, after PROCESSING
        self._task = loop.create_task(self._complete(intake), name="fit-analysis")
        self._transition(WorkflowPhase.PROCESSING)
        return self._task

    def cancel(self) -> bool:
        """
        Cancel the in-flight analysis. The workflow moves to FAILED.

        Returns:
            True if an analysis was cancelled, False if none was running
        """
        if not self.is_processing:
            return False

        task = self._task
        self._fail(task, ScoringError("analysis cancelled", scorer=self.scorer.name))
        if task is not None:
            task.cancel()
        return True

    def reset(self, clear_intake: bool = False) -> None:
        """
        Drop any result or error and return to IDLE.

        Raises:
            WorkflowBusyError: While PROCESSING
        """
        self._ensure_editable()
        if self.phase is not WorkflowPhase.IDLE:
            self._clear_outcome()
            self._transition(WorkflowPhase.IDLE)
        if clear_intake:
            self.intake = IntakeState()

    def subscribe(self, listener: PhaseListener) -> None:
        """Call listener with every future PhaseChange."""
        self._listeners.append(listener)

    # =========================================================================
    # INTERNAL HELPERS
    # =========================================================================

    async def _complete(self, intake: IntakeState) -> Optional[FitResult]:
        task = asyncio.current_task()
        scorer_name = self.scorer.name

        try:
            result = await asyncio.wait_for(self.scorer.score(intake), timeout=self.timeout_seconds)
        except asyncio.CancelledError:
            self._fail(task, ScoringError("analysis cancelled", scorer=scorer_name))
            raise
        except asyncio.TimeoutError as e:
            error = ScoringError(
                f"scoring timed out after {self.timeout_seconds}s", scorer=scorer_name, original_error=e
            )
            self._fail(task, error)
            return None
        except ScoringError as e:
            self._fail(task, e)
            return None
        except Exception as e:
            error = ScoringError(f"scorer raised {type(e).__name__}", scorer=scorer_name, original_error=e)
            self._fail(task, error)
            return None

        if not self._is_current(task):
            return None

        self.result = result
        self._transition(WorkflowPhase.SCORED)
        log_analysis_result(result, time.perf_counter() - self._started_at)
        return result

    def _is_current(self, task: Optional[asyncio.Task]) -> bool:
        return self.is_processing and task is self._task

    def _fail(self, task: Optional[asyncio.Task], error: ScoringError) -> None:
        # A cancelled or superseded task may report late; only the current one counts
        if not self._is_current(task):
            return
        self.error = error
        self._transition(WorkflowPhase.FAILED)
        log_analysis_failure(error, time.perf_counter() - self._started_at)

    def _clear_outcome(self) -> None:
        self.result = None
        self.error = None

    def _ensure_editable(self) -> None:
        if self.is_processing:
            raise WorkflowBusyError("Cannot change intake while an analysis is in progress")

    def _transition(self, new_phase: WorkflowPhase) -> None:
        if new_phase not in ALLOWED_TRANSITIONS[self.phase]:
            raise InvalidTransitionError(self.phase, new_phase)

        change = PhaseChange(old_phase=self.phase, new_phase=new_phase)
        self.phase = new_phase
        self.history.append(change)
        log_phase_change(change)

        # Listeners observe; they cannot veto or abort a transition
        for listener in self._listeners:
            try:
                listener(change)
            except Exception:
                log_listener_error(change)


async def run_analysis(workflow: FitWorkflow) -> Optional[FitResult]:
    """
    Run one analysis to completion.

    Returns:
        The FitResult, or None if the analysis failed or was cancelled
        (inspect workflow.error)

    Raises:
        ValidationError: If intake is incomplete
    """
    task = workflow.analyze()
    await asyncio.wait({task})
    if task.cancelled():
        return None
    return task.result()
