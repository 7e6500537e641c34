"""Unit tests for SimulatedScorer."""

import asyncio
import random

import pytest

from autoapply.contexts.intake import IntakeState, ResumeFile
from autoapply.contexts.targeting import SimulatedScorer
from autoapply.contexts.targeting.scorers import DEFAULT_TAILORED_SUMMARY
from autoapply.contexts.workflow.defaults import get_default_config

INTAKE = IntakeState(
    job_description_text="Senior Engineer...",
    resume_file=ResumeFile(name="resume.pdf"),
)


def _draw_scores(scorer: SimulatedScorer, count: int) -> list[int]:
    async def draw():
        return [(await scorer.score(INTAKE)).fit_score for _ in range(count)]

    return asyncio.run(draw())


@pytest.mark.unit
def test_scores_cover_inclusive_range():
    """Default range is [70, 100] with both ends reachable."""
    scores = _draw_scores(SimulatedScorer(delay_seconds=0, seed=1234), 3000)

    assert all(isinstance(score, int) for score in scores)
    assert min(scores) == 70
    assert max(scores) == 100


@pytest.mark.unit
def test_same_seed_same_scores():
    """Test seeded scorers are reproducible."""
    first = _draw_scores(SimulatedScorer(delay_seconds=0, seed=42), 20)
    second = _draw_scores(SimulatedScorer(delay_seconds=0, seed=42), 20)
    assert first == second


@pytest.mark.unit
def test_injected_rng_is_used():
    """Test an injected RNG drives the score."""
    rng = random.Random(7)
    expected = random.Random(7).randint(70, 100)

    result = asyncio.run(SimulatedScorer(delay_seconds=0, rng=rng).score(INTAKE))

    assert result.fit_score == expected


@pytest.mark.unit
def test_result_fields():
    """Test simulated results carry summary and scorer name."""
    result = asyncio.run(SimulatedScorer(delay_seconds=0, seed=0).score(INTAKE))

    assert result.tailored_summary == DEFAULT_TAILORED_SUMMARY
    assert result.scorer == "simulated"
    assert result.scored_at


@pytest.mark.unit
def test_custom_range():
    """Test a configured score range is honored."""
    scores = _draw_scores(SimulatedScorer(delay_seconds=0, min_score=85, max_score=85), 10)
    assert scores == [85] * 10


@pytest.mark.unit
@pytest.mark.parametrize(
    "kwargs",
    [
        {"min_score": 90, "max_score": 80},
        {"min_score": -1, "max_score": 80},
        {"min_score": 70, "max_score": 101},
        {"delay_seconds": -0.5},
    ],
)
def test_invalid_settings_rejected(kwargs):
    """Test invalid scorer settings raise ValueError."""
    with pytest.raises(ValueError):
        SimulatedScorer(**kwargs)


@pytest.mark.unit
def test_from_config_defaults():
    """Test building a scorer from default config."""
    scorer = SimulatedScorer.from_config(get_default_config()["scoring"])

    assert scorer.delay_seconds == 3.0
    assert (scorer.min_score, scorer.max_score) == (70, 100)
    assert scorer.tailored_summary == DEFAULT_TAILORED_SUMMARY
