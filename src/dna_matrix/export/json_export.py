"""JSON export for comparison grids.

Writes the grid in a structured form that can be:
- Re-rendered by another front end
- Archived alongside the source export
- Consumed by analysis notebooks
"""
from __future__ import annotations

import json
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

import structlog

from dna_matrix import __version__
from dna_matrix.dna.grid import format_cell
from dna_matrix.dna.relationship import relationship_legend
from dna_matrix.fs import atomic_write_text
from dna_matrix.models.grid import ComparisonGrid, GridCell

logger = structlog.get_logger(__name__)


def grid_to_dict(grid: ComparisonGrid) -> dict[str, Any]:
    """Convert a grid to a JSON-ready dictionary."""
    return {
        "metadata": {
            "generator": "dna-matrix",
            "version": __version__,
            "export_date": datetime.now(UTC).isoformat(),
            "metric": grid.metric.value,
            "source": grid.source,
            "synthetic": grid.synthetic,
            "size": grid.size,
        },
        "matches": list(grid.match_names),
        "rows": [[_cell_to_dict(cell, grid) for cell in row] for row in grid.rows],
        "legend": relationship_legend(),
    }


def _cell_to_dict(cell: GridCell, grid: ComparisonGrid) -> dict[str, Any]:
    relationship = cell.relationship
    return {
        "row": cell.row_name,
        "column": cell.column_name,
        "display": format_cell(cell, grid.metric),
        "shared_cm": cell.shared_centimorgans,
        "longest_cm": cell.longest_shared,
        "relationship": relationship.model_dump(mode="json") if relationship else None,
    }


def export_grid_json(grid: ComparisonGrid, out_file: Path, pretty: bool = True) -> Path:
    """Export a comparison grid to a JSON file.

    Args:
        grid: Grid to export
        out_file: Output file path
        pretty: Indent the output

    Returns:
        Path to the created file
    """
    export_dict = grid_to_dict(grid)
    text = json.dumps(export_dict, indent=2 if pretty else None, ensure_ascii=False)

    path = atomic_write_text(out_file, text + "\n")
    logger.info("export.json_written", path=str(path), size=grid.size, synthetic=grid.synthetic)
    return path
