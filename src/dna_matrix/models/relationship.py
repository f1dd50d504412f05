"""Relationship estimate returned by the classifier."""
from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Confidence(str, Enum):
    """Confidence tier of a relationship band."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    @property
    def rank(self) -> int:
        return _CONFIDENCE_RANKS[self]


_CONFIDENCE_RANKS = {Confidence.HIGH: 3, Confidence.MEDIUM: 2, Confidence.LOW: 1}


class RelationshipEstimate(BaseModel):
    """Narrowest and broadest plausible relationship for a cM value."""

    model_config = ConfigDict(frozen=True)

    min_label: str = Field(description="Closest plausible relationship")
    max_label: str = Field(description="Most distant plausible relationship")
    color: str = Field(pattern=r"^#[0-9a-f]{6}$", description="Display colour of the band")
    confidence: Confidence

    @property
    def label(self) -> str:
        if self.min_label == self.max_label:
            return self.min_label
        return f"{self.min_label} – {self.max_label}"
