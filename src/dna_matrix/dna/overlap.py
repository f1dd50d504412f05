"""Cross-match shared DNA estimated from overlapping segments.

Two matches who each share a segment with the data owner in the same
chromosome region are likely to share that region with each other. The
overlap of such a pair contributes the smaller of the two proportional cM
shares, so an overlap never counts for more than either segment carries.
"""
from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass

from dna_matrix.models.segment import MatchSegment


@dataclass(frozen=True)
class SharedValue:
    """Shared DNA between two matches."""

    total_cm: float = 0.0
    longest_cm: float = 0.0


def normalize_chromosome(chromosome: str) -> str:
    """Normalize a chromosome label ("chr7", "Chr 7" and "7" compare equal)."""
    label = chromosome.strip().lower()
    if label.startswith("chr"):
        label = label[3:].strip()
    return label


def segment_overlap_cm(first: MatchSegment, second: MatchSegment) -> float:
    """cM attributable to the overlap of two segments (0.0 if disjoint)."""
    if normalize_chromosome(first.chromosome) != normalize_chromosome(second.chromosome):
        return 0.0

    start = max(first.start_location, second.start_location)
    end = min(first.end_location, second.end_location)
    if end <= start:
        return 0.0

    return min(_proportional_cm(first, start, end), _proportional_cm(second, start, end))


def _proportional_cm(segment: MatchSegment, start: int, end: int) -> float:
    # Only reached with start < end inside the segment, so its length is positive
    length = segment.end_location - segment.start_location
    return segment.centimorgans * (end - start) / length


def shared_between(first: Iterable[MatchSegment], second: Iterable[MatchSegment]) -> SharedValue:
    """Estimate DNA shared between two matches from their segment sets.

    Args:
        first: Segments of the first match
        second: Segments of the second match

    Returns:
        SharedValue with summed overlap cM and the largest single overlap
    """
    by_chromosome: dict[str, list[MatchSegment]] = {}
    for segment in second:
        by_chromosome.setdefault(normalize_chromosome(segment.chromosome), []).append(segment)

    pieces: list[float] = []
    for segment in first:
        for other in by_chromosome.get(normalize_chromosome(segment.chromosome), []):
            cm = segment_overlap_cm(segment, other)
            if cm > 0:
                pieces.append(cm)

    return SharedValue(total_cm=math.fsum(pieces), longest_cm=max(pieces, default=0.0))
