"""
Fit scoring backends.

The workflow only ever talks to FitScorer.score(); swapping the simulated
scorer for a real model call does not touch the state machine.
"""

import asyncio
import random
import time
from abc import ABC, abstractmethod
from typing import Any, Mapping, Optional

from autoapply.contexts.intake.intake_state import IntakeState
from autoapply.contexts.targeting.fit_result import MAX_FIT_SCORE, MIN_FIT_SCORE, FitResult
from autoapply.contexts.targeting.logger import log_scoring_result, log_scoring_start

DEFAULT_TAILORED_SUMMARY = (
    "Your tailored résumé has been generated with optimized keywords and formatting."
)


class FitScorer(ABC):
    """
    Abstract base for fit scoring backends.

    Subclasses must:
    - Set a name (used in logs and on FitResult.scorer)
    - Implement score() as a coroutine returning a FitResult or raising ScoringError
    """

    name: str

    @abstractmethod
    async def score(self, intake: IntakeState) -> FitResult:
        """Score a complete intake."""


class SimulatedScorer(FitScorer):
    """
    Placeholder scorer standing in for a real analysis call.

    Waits delay_seconds, then draws a fit score uniformly from the inclusive
    range [min_score, max_score] and returns a fixed tailored summary.
    """

    name = "simulated"

    def __init__(
        self,
        delay_seconds: float = 3.0,
        min_score: int = 70,
        max_score: int = 100,
        tailored_summary: str = DEFAULT_TAILORED_SUMMARY,
        rng: Optional[random.Random] = None,
        seed: Optional[int] = None,
    ):
        if not MIN_FIT_SCORE <= min_score <= max_score <= MAX_FIT_SCORE:
            raise ValueError(
                f"Score range must satisfy {MIN_FIT_SCORE} <= min <= max <= {MAX_FIT_SCORE}, "
                f"got [{min_score}, {max_score}]"
            )
        if delay_seconds < 0:
            raise ValueError(f"delay_seconds must be >= 0, got {delay_seconds}")

        self.delay_seconds = delay_seconds
        self.min_score = min_score
        self.max_score = max_score
        self.tailored_summary = tailored_summary
        self.rng = rng if rng is not None else random.Random(seed)

    @classmethod
    def from_config(cls, scoring: Mapping[str, Any]) -> "SimulatedScorer":
        """Build from the `scoring` section of the workflow config."""
        return cls(
            delay_seconds=float(scoring["delay_seconds"]),
            min_score=int(scoring["min_score"]),
            max_score=int(scoring["max_score"]),
            tailored_summary=scoring["tailored_summary"],
            seed=scoring.get("seed"),
        )

    async def score(self, intake: IntakeState) -> FitResult:
        start = time.perf_counter()
        log_scoring_start(self.name, intake.resume_file.name if intake.resume_file else "(no resume)")

        await asyncio.sleep(self.delay_seconds)
        fit_score = self.rng.randint(self.min_score, self.max_score)

        log_scoring_result(self.name, fit_score, time.perf_counter() - start)
        return FitResult(
            fit_score=fit_score,
            tailored_summary=self.tailored_summary,
            scorer=self.name,
        )
