"""Export modules for comparison grids.

Supported formats:
- JSON: Structured grid data with the relationship legend
"""
from __future__ import annotations

from dna_matrix.export.json_export import export_grid_json, grid_to_dict

__all__ = [
    "export_grid_json",
    "grid_to_dict",
]
