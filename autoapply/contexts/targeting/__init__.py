"""
Targeting Context

Responsibilities:
- Scores how well a résumé fits a job description
- Maps fit scores to display tiers
- Hides the scoring backend (simulated or LLM) behind one interface

Owns: FitScorer implementations, FitResult, ScoreTier
Never: Changes workflow phase or edits intake
"""

from autoapply.contexts.targeting.exceptions import ScoringError
from autoapply.contexts.targeting.factory import SCORER_BACKENDS, get_scorer
from autoapply.contexts.targeting.fit_result import FitResult
from autoapply.contexts.targeting.scorers import FitScorer, SimulatedScorer
from autoapply.contexts.targeting.tiers import ScoreTier, score_tier

__all__ = [
    "FitResult",
    "FitScorer",
    "SCORER_BACKENDS",
    "ScoreTier",
    "ScoringError",
    "SimulatedScorer",
    "get_scorer",
    "score_tier",
]
