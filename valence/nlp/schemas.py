"""
Pydantic schemas for polarity results.

PolarityResult is the only artifact retained from a scoring call.
"""

from typing import Dict

from pydantic import BaseModel, ConfigDict, Field


class PolarityResult(BaseModel):
    """Sentiment polarity of one text sample.

    negative + neutral + positive is 1.0 (give or take rounding) for any
    non-empty text; all four are 0.0 for empty text.
    """

    model_config = ConfigDict(frozen=True)

    negative: float = Field(0.0, ge=0.0, le=1.0, description="Share of negative valence mass")
    neutral: float = Field(0.0, ge=0.0, le=1.0, description="Share of neutral tokens")
    positive: float = Field(0.0, ge=0.0, le=1.0, description="Share of positive valence mass")
    compound: float = Field(0.0, ge=-1.0, le=1.0, description="Normalized summary polarity")

    @classmethod
    def zero(cls) -> "PolarityResult":
        return cls(negative=0.0, neutral=0.0, positive=0.0, compound=0.0)

    def to_dict(self) -> Dict[str, float]:
        """The four-key polarity map."""
        return self.model_dump()

    @property
    def label(self) -> str:
        """Common VADER thresholding of the compound score."""
        if self.compound >= 0.05:
            return "positive"
        if self.compound <= -0.05:
            return "negative"
        return "neutral"
