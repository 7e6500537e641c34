"""
Fit score tiers.

Maps an integer fit score to the tier shown next to it. The mapping is total:
every integer lands in exactly one tier, including scores below any
generation range.
"""

from enum import Enum


class ScoreTier(str, Enum):
    """Display tier for a fit score."""

    EXCELLENT = "excellent"
    GREAT = "great"
    GOOD = "good"
    FAIR = "fair"

    @property
    def message(self) -> str:
        return TIER_MESSAGES[self]

    @property
    def color(self) -> str:
        return TIER_COLORS[self]


# (lower bound, tier), highest first
TIER_THRESHOLDS = (
    (90, ScoreTier.EXCELLENT),
    (80, ScoreTier.GREAT),
    (70, ScoreTier.GOOD),
)

TIER_MESSAGES = {
    ScoreTier.EXCELLENT: "Excellent match! Your profile aligns perfectly with this role.",
    ScoreTier.GREAT: "Great match! You have most of the required skills.",
    ScoreTier.GOOD: "Good match! Consider highlighting relevant experience.",
    ScoreTier.FAIR: "Fair match. Focus on transferable skills and relevant experience.",
}

TIER_COLORS = {
    ScoreTier.EXCELLENT: "green",
    ScoreTier.GREAT: "blue",
    ScoreTier.GOOD: "yellow",
    ScoreTier.FAIR: "red",
}


def score_tier(score: int) -> ScoreTier:
    """
    Get the display tier for a fit score.

    Examples:
        >>> score_tier(95)
        <ScoreTier.EXCELLENT: 'excellent'>
        >>> score_tier(65).value
        'fair'
    """
    for lower_bound, tier in TIER_THRESHOLDS:
        if score >= lower_bound:
            return tier
    return ScoreTier.FAIR
