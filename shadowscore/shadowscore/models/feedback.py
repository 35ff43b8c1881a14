"""
Feedback data model.
"""

from enum import Enum

from pydantic import BaseModel, Field


class ScoreTier(str, Enum):
    """Qualitative bucket derived from the accuracy percentage."""

    EXCELLENT = "excellent"
    GOOD = "good"
    FAIR = "fair"
    NEEDS_IMPROVEMENT = "needs_improvement"

    @property
    def label(self) -> str:
        """Short display label."""
        return _TIER_LABELS[self]


_TIER_LABELS: dict[ScoreTier, str] = {
    ScoreTier.EXCELLENT: "Excellent",
    ScoreTier.GOOD: "Good",
    ScoreTier.FAIR: "Fair",
    ScoreTier.NEEDS_IMPROVEMENT: "Needs improvement",
}


class Feedback(BaseModel):
    """Human-readable guidance for one practice attempt."""

    message: str = Field(..., description="Headline plus one line per error category")
    tier: ScoreTier = Field(..., description="Score tier the headline was chosen from")

    model_config = {"frozen": True}

    def __str__(self) -> str:
        return self.message
