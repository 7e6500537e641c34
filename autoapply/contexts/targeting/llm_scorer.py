"""
LLM-backed fit scorer.

Sends the job description and the extracted résumé text to an LLM provider
and expects a JSON object back:

    {"fit_score": <int 0-100>, "tailored_summary": "<short text>"}

Provider calls are blocking, so they run in a worker thread to keep the
event loop (and the workflow's PROCESSING phase) responsive.
"""

import asyncio
import time
from typing import Optional

from autoapply.contexts.intake.exceptions import UnsupportedResumeFormatError
from autoapply.contexts.intake.intake_state import IntakeState
from autoapply.contexts.intake.resume_text import extract_resume_text
from autoapply.contexts.targeting.exceptions import ScoringError
from autoapply.contexts.targeting.fit_result import MAX_FIT_SCORE, MIN_FIT_SCORE, FitResult
from autoapply.contexts.targeting.logger import (
    log_scoring_result,
    log_scoring_start,
    log_unparseable_response,
)
from autoapply.contexts.targeting.scorers import FitScorer
from autoapply.utils.llm import LLMProvider, parse_object_response

SYSTEM_PROMPT = """You are an expert technical recruiter and résumé writer.
Rate how well the candidate's résumé fits the job on a 0-100 scale and describe,
in one or two sentences, how the résumé should be tailored for this job.

Respond with ONLY a JSON object in exactly this schema:
{"fit_score": <integer 0-100>, "tailored_summary": "<string>"}"""

USER_PROMPT_TEMPLATE = """Job URL: {job_url}

Job Description:
{job_description}

Résumé ({resume_name}):
{resume_text}
"""


def build_user_prompt(intake: IntakeState, resume_text: str) -> str:
    return USER_PROMPT_TEMPLATE.format(
        job_url=intake.job_url or "(not provided)",
        job_description=intake.job_description_text or "(see job URL)",
        resume_name=intake.resume_file.name,
        resume_text=resume_text,
    )


def _coerce_score(raw) -> Optional[int]:
    """Accept ints, integral floats and digit strings; reject everything else."""
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float) and raw.is_integer():
        return int(raw)
    if isinstance(raw, str) and raw.strip().isdigit():
        return int(raw.strip())
    return None


class LLMScorer(FitScorer):
    """Fit scorer that asks an LLM provider for a score and tailoring summary."""

    def __init__(self, provider: LLMProvider):
        self.provider = provider
        self.name = f"llm:{provider.name}"

    async def score(self, intake: IntakeState) -> FitResult:
        start = time.perf_counter()
        log_scoring_start(self.name, intake.resume_file.name)

        try:
            resume_text = await asyncio.to_thread(extract_resume_text, intake.resume_file)
        except UnsupportedResumeFormatError as e:
            raise ScoringError(str(e), scorer=self.name, original_error=e) from e

        user_prompt = build_user_prompt(intake, resume_text)
        response = await asyncio.to_thread(self.provider.generate, SYSTEM_PROMPT, user_prompt)

        result = self.parse_response(response.content)
        log_scoring_result(self.name, result.fit_score, time.perf_counter() - start)
        return result

    def parse_response(self, content: str) -> FitResult:
        """
        Turn raw model output into a FitResult.

        Raises:
            ScoringError: If the response has no JSON object, the score is not an
                integer in [0, 100], or the summary is missing
        """
        parsed = parse_object_response(content)
        if parsed is None:
            log_unparseable_response(self.name, content)
            raise ScoringError("Model response did not contain a JSON object", scorer=self.name)

        fit_score = _coerce_score(parsed.get("fit_score"))
        if fit_score is None or not MIN_FIT_SCORE <= fit_score <= MAX_FIT_SCORE:
            raise ScoringError(
                f"Model returned invalid fit_score: {parsed.get('fit_score')!r}", scorer=self.name
            )

        summary = parsed.get("tailored_summary")
        if not isinstance(summary, str) or not summary.strip():
            raise ScoringError("Model response is missing tailored_summary", scorer=self.name)

        return FitResult(fit_score=fit_score, tailored_summary=summary.strip(), scorer=self.name)
