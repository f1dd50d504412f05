"""Comparison grid models."""
from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from .relationship import RelationshipEstimate


class ComparisonMetric(str, Enum):
    """Value shown in each off-diagonal grid cell."""

    RELATIONSHIP = "relationship"
    TOTAL_CM = "total_cm"
    LONGEST_SEGMENT = "longest_segment"

    @property
    def display_name(self) -> str:
        return _METRIC_NAMES[self]

    @property
    def description(self) -> str:
        return _METRIC_DESCRIPTIONS[self]


_METRIC_NAMES = {
    ComparisonMetric.RELATIONSHIP: "Relationship Range",
    ComparisonMetric.TOTAL_CM: "Total Shared cM",
    ComparisonMetric.LONGEST_SEGMENT: "Longest Segment",
}

_METRIC_DESCRIPTIONS = {
    ComparisonMetric.RELATIONSHIP: "Estimated relationship categories based on shared centiMorgans",
    ComparisonMetric.TOTAL_CM: "Total centiMorgans shared between matches",
    ComparisonMetric.LONGEST_SEGMENT: "Longest shared DNA segment in centiMorgans",
}


class GridCell(BaseModel):
    """One comparison between two selected matches."""

    model_config = ConfigDict(frozen=True)

    row_name: str
    column_name: str
    shared_centimorgans: float | None = Field(default=None, ge=0.0)
    longest_shared: float | None = Field(default=None, ge=0.0)
    relationship: RelationshipEstimate | None = None

    @property
    def is_self(self) -> bool:
        return self.row_name == self.column_name


class ComparisonGrid(BaseModel):
    """Square grid of pairwise comparisons in selection order."""

    model_config = ConfigDict(frozen=True)

    match_names: tuple[str, ...]
    rows: tuple[tuple[GridCell, ...], ...]
    metric: ComparisonMetric = ComparisonMetric.RELATIONSHIP
    source: str = Field(description="Name of the value source that filled the cells")
    synthetic: bool = Field(default=False, description="True when cell values are placeholders")

    @property
    def size(self) -> int:
        return len(self.match_names)

    def cell(self, row_name: str, column_name: str) -> GridCell:
        i = self.match_names.index(row_name)
        j = self.match_names.index(column_name)
        return self.rows[i][j]
