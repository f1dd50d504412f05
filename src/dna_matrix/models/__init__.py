"""Pydantic data models."""

from .grid import ComparisonGrid, ComparisonMetric, GridCell
from .match import AggregatedMatch
from .relationship import Confidence, RelationshipEstimate
from .segment import MatchSegment, ParsedDataset, RowWarning

__all__ = [
    "MatchSegment",
    "RowWarning",
    "ParsedDataset",
    "AggregatedMatch",
    "Confidence",
    "RelationshipEstimate",
    "ComparisonMetric",
    "GridCell",
    "ComparisonGrid",
]
