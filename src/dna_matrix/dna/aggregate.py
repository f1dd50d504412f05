"""Per-match aggregation of segment records."""
from __future__ import annotations

import math
from collections.abc import Iterable

from dna_matrix.models.match import AggregatedMatch
from dna_matrix.models.segment import MatchSegment


def segments_by_match(segments: Iterable[MatchSegment]) -> dict[str, list[MatchSegment]]:
    """Group segments by exact match name, in first-occurrence order."""
    groups: dict[str, list[MatchSegment]] = {}
    for segment in segments:
        groups.setdefault(segment.match_name, []).append(segment)
    return groups


def aggregate_matches(segments: Iterable[MatchSegment]) -> list[AggregatedMatch]:
    """Reduce segments to one summary per match.

    Args:
        segments: Parsed segments, in file order

    Returns:
        One AggregatedMatch per distinct match name, in first-occurrence order
    """
    return [
        AggregatedMatch(
            match_name=name,
            total_centimorgans=math.fsum(s.centimorgans for s in group),
            longest_segment=max(s.centimorgans for s in group),
            segment_count=len(group),
        )
        for name, group in segments_by_match(segments).items()
    ]
