"""Result of a completed fit analysis."""

from dataclasses import dataclass, field

from autoapply.contexts.targeting.tiers import ScoreTier, score_tier
from autoapply.utils.timestamp import now_exact

MIN_FIT_SCORE = 0
MAX_FIT_SCORE = 100


@dataclass(frozen=True)
class FitResult:
    """Fit score and tailored summary produced by a scorer."""

    fit_score: int
    tailored_summary: str
    scorer: str = ""
    scored_at: str = field(default_factory=now_exact)

    @property
    def tier(self) -> ScoreTier:
        return score_tier(self.fit_score)

    def to_dict(self) -> dict:
        return {
            "fit_score": self.fit_score,
            "tier": self.tier.value,
            "tailored_summary": self.tailored_summary,
            "scorer": self.scorer,
            "scored_at": self.scored_at,
        }
