"""Application state for one user working with one match export.

The session owns the loaded dataset, the aggregated matches and the
current selection. Collaborators read the tuple projections; only
``load``, ``select`` and ``deselect`` change state.
"""
from __future__ import annotations

import structlog

from dna_matrix.config import Settings
from dna_matrix.dna.aggregate import aggregate_matches
from dna_matrix.dna.grid import SegmentOverlapSource, ValueSource, build_comparison_grid
from dna_matrix.dna.parser import parse_csv
from dna_matrix.exceptions import SelectionError
from dna_matrix.models.grid import ComparisonGrid, ComparisonMetric
from dna_matrix.models.match import AggregatedMatch
from dna_matrix.models.segment import ParsedDataset

logger = structlog.get_logger(__name__)


class MatchSession:
    """Loaded dataset plus an ordered, duplicate-free match selection."""

    def __init__(self, settings: Settings | None = None):
        self.settings = settings or Settings()
        self._dataset: ParsedDataset | None = None
        self._available: tuple[AggregatedMatch, ...] = ()
        self._selected: list[AggregatedMatch] = []

    @property
    def dataset(self) -> ParsedDataset | None:
        return self._dataset

    @property
    def available(self) -> tuple[AggregatedMatch, ...]:
        return self._available

    @property
    def selected(self) -> tuple[AggregatedMatch, ...]:
        return tuple(self._selected)

    def load(self, text: str) -> ParsedDataset:
        """Parse and aggregate an export, replacing any previous upload.

        On a validation error the previous state is left untouched and the
        error propagates to the caller.
        """
        dataset = parse_csv(text, delimiter=self.settings.delimiter)
        available = tuple(aggregate_matches(dataset.segments))

        self._dataset = dataset
        self._available = available
        self._selected = []

        logger.info(
            "session.loaded",
            segments=dataset.segment_count,
            matches=len(available),
            warnings=len(dataset.warnings),
        )
        return dataset

    def get_match(self, match_name: str) -> AggregatedMatch:
        for match in self._available:
            if match.match_name == match_name:
                return match
        raise SelectionError(f"Unknown match: {match_name}")

    def select(self, match_name: str) -> AggregatedMatch:
        """Append a match to the selection; selecting twice is a no-op."""
        match = self.get_match(match_name)
        if all(m.match_name != match_name for m in self._selected):
            self._selected.append(match)
            logger.debug("session.selected", match=match_name, count=len(self._selected))
        return match

    def deselect(self, match_name: str) -> None:
        """Remove a match from the selection."""
        remaining = [m for m in self._selected if m.match_name != match_name]
        if len(remaining) == len(self._selected):
            raise SelectionError(f"Match is not selected: {match_name}")
        self._selected = remaining
        logger.debug("session.deselected", match=match_name, count=len(self._selected))

    def search(self, term: str = "", limit: int | None = None) -> list[AggregatedMatch]:
        """Case-insensitive name search over matches not yet selected."""
        limit = self.settings.search_limit if limit is None else limit
        needle = term.strip().lower()
        selected_names = {m.match_name for m in self._selected}

        results = [
            m
            for m in self._available
            if needle in m.match_name.lower() and m.match_name not in selected_names
        ]
        return results[:limit]

    def grid(
        self,
        metric: ComparisonMetric | str = ComparisonMetric.RELATIONSHIP,
        value_source: ValueSource | None = None,
    ) -> ComparisonGrid:
        """Build the comparison grid for the current selection.

        Uses overlapping uploaded segments unless another source is given.
        """
        if value_source is None:
            segments = self._dataset.segments if self._dataset else ()
            value_source = SegmentOverlapSource(segments)
        return build_comparison_grid(self._selected, value_source, metric)
