"""DNA match analysis: parsing, aggregation and relationship estimation.

IMPORTANT: relationship ranges are estimates from shared cM alone; many
relationships overlap in shared DNA and documentary evidence is still
needed to confirm any of them.
"""
from __future__ import annotations

from dna_matrix.dna.aggregate import aggregate_matches, segments_by_match
from dna_matrix.dna.grid import (
    NO_MATCH,
    SELF_CELL,
    SegmentOverlapSource,
    SyntheticSource,
    ValueSource,
    build_comparison_grid,
    format_cell,
)
from dna_matrix.dna.overlap import SharedValue, segment_overlap_cm, shared_between
from dna_matrix.dna.parser import REQUIRED_HEADERS, parse_csv
from dna_matrix.dna.relationship import (
    MIN_CLASSIFIABLE_CM,
    RELATIONSHIP_BANDS,
    classify_relationship,
    relationship_legend,
)

__all__ = [
    # Parsing
    "REQUIRED_HEADERS",
    "parse_csv",
    # Aggregation
    "aggregate_matches",
    "segments_by_match",
    # Relationship estimation
    "RELATIONSHIP_BANDS",
    "MIN_CLASSIFIABLE_CM",
    "classify_relationship",
    "relationship_legend",
    # Cross-match comparison
    "SharedValue",
    "segment_overlap_cm",
    "shared_between",
    "ValueSource",
    "SegmentOverlapSource",
    "SyntheticSource",
    "build_comparison_grid",
    "format_cell",
    "SELF_CELL",
    "NO_MATCH",
]
