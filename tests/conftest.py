"""Shared fixtures for DNA Matrix tests."""

from pathlib import Path

import pytest
import structlog

EXAMPLE_EXPORT = """Match Name,Chromosome,Start Location,End Location,Centimorgans,Matching SNPs
Jane Doe,1,1000000,5000000,25.3,450
Jane Doe,7,200000,1800000,12.1,210
John Smith,3,500000,2500000,68.4,900
"""


@pytest.fixture(autouse=True)
def _reset_structlog():
    """Drop logging config a CLI invocation bound to its own streams."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def example_export() -> str:
    return EXAMPLE_EXPORT


@pytest.fixture
def example_file(tmp_path: Path) -> Path:
    path = tmp_path / "matches.csv"
    path.write_text(EXAMPLE_EXPORT, encoding="utf-8")
    return path
