"""Per-match summary derived from segments."""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class AggregatedMatch(BaseModel):
    """Summary statistics for every segment sharing one match name."""

    model_config = ConfigDict(frozen=True)

    match_name: str
    total_centimorgans: float = Field(ge=0.0, description="Sum of segment cM")
    longest_segment: float = Field(ge=0.0, description="Largest single segment cM")
    segment_count: int = Field(ge=1)
