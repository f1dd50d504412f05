"""Pairwise comparison grid for selected matches.

Cell values come from a value source. ``SegmentOverlapSource`` derives them
from the uploaded segments; ``SyntheticSource`` produces seeded placeholder
values and marks the grid as synthetic.
"""
from __future__ import annotations

import random
from collections.abc import Iterable, Sequence
from itertools import combinations
from typing import Protocol

import structlog

from dna_matrix.dna.aggregate import segments_by_match
from dna_matrix.dna.overlap import SharedValue, shared_between
from dna_matrix.dna.relationship import classify_relationship
from dna_matrix.exceptions import SelectionError
from dna_matrix.models.grid import ComparisonGrid, ComparisonMetric, GridCell
from dna_matrix.models.match import AggregatedMatch
from dna_matrix.models.segment import MatchSegment

logger = structlog.get_logger(__name__)

SELF_CELL = "—"
NO_MATCH = "No match"


class ValueSource(Protocol):
    """Supplies the shared DNA value for a pair of matches."""

    name: str
    synthetic: bool

    def shared(self, first: AggregatedMatch, second: AggregatedMatch) -> SharedValue: ...


class SegmentOverlapSource:
    """Shared values from overlapping segments in the uploaded dataset."""

    name = "segment_overlap"
    synthetic = False

    def __init__(self, segments: Iterable[MatchSegment]):
        self._groups = segments_by_match(segments)

    def shared(self, first: AggregatedMatch, second: AggregatedMatch) -> SharedValue:
        return shared_between(
            self._groups.get(first.match_name, []),
            self._groups.get(second.match_name, []),
        )


class SyntheticSource:
    """Placeholder values in [0, ceiling) for demos without comparison data."""

    name = "synthetic"
    synthetic = True

    def __init__(self, seed: int | None = None, ceiling: float = 100.0):
        self._random = random.Random(seed)
        self._ceiling = ceiling

    def shared(self, first: AggregatedMatch, second: AggregatedMatch) -> SharedValue:
        value = self._random.random() * self._ceiling
        return SharedValue(total_cm=value, longest_cm=value)


def build_comparison_grid(
    selection: Sequence[AggregatedMatch],
    value_source: ValueSource,
    metric: ComparisonMetric | str = ComparisonMetric.RELATIONSHIP,
) -> ComparisonGrid:
    """Build the N x N comparison grid for a selection.

    Each unordered pair is evaluated once, so the grid is symmetric.
    Diagonal cells carry no value.

    Raises:
        SelectionError: If fewer than 2 matches are selected or names repeat
        ValueError: If the metric is unknown
    """
    metric = ComparisonMetric(metric)
    names = [m.match_name for m in selection]

    if len(names) < 2:
        raise SelectionError("Select at least 2 matches to build a comparison grid")
    if len(set(names)) != len(names):
        raise SelectionError("Selected matches must be distinct")

    shared: dict[tuple[int, int], SharedValue] = {
        (i, j): value_source.shared(selection[i], selection[j])
        for i, j in combinations(range(len(selection)), 2)
    }

    rows: list[tuple[GridCell, ...]] = []
    for i, row_name in enumerate(names):
        row: list[GridCell] = []
        for j, column_name in enumerate(names):
            if i == j:
                row.append(GridCell(row_name=row_name, column_name=column_name))
                continue
            value = shared[(min(i, j), max(i, j))]
            row.append(
                GridCell(
                    row_name=row_name,
                    column_name=column_name,
                    shared_centimorgans=value.total_cm,
                    longest_shared=value.longest_cm,
                    relationship=classify_relationship(value.total_cm),
                )
            )
        rows.append(tuple(row))

    logger.info(
        "grid.built",
        size=len(names),
        metric=metric.value,
        source=value_source.name,
        synthetic=value_source.synthetic,
    )

    return ComparisonGrid(
        match_names=tuple(names),
        rows=tuple(rows),
        metric=metric,
        source=value_source.name,
        synthetic=value_source.synthetic,
    )


def format_cell(cell: GridCell, metric: ComparisonMetric | str) -> str:
    """Display text for a grid cell under the given metric."""
    metric = ComparisonMetric(metric)

    if cell.is_self:
        return SELF_CELL

    if metric is ComparisonMetric.RELATIONSHIP:
        return cell.relationship.label if cell.relationship else NO_MATCH
    if metric is ComparisonMetric.TOTAL_CM:
        return f"{cell.shared_centimorgans:.1f} cM"
    return f"{cell.longest_shared:.1f} cM"
