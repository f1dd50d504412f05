"""Parser for per-segment DNA match exports.

The export is delimited text whose first line names the columns. Columns
may come in any order; the six in ``REQUIRED_HEADERS`` must all be present.

Rows that cannot be used are skipped and reported as ``RowWarning`` entries
on the dataset rather than dropped silently:
- wrong number of fields
- non-numeric, non-finite, negative or implausibly large numeric values
"""
from __future__ import annotations

import csv
import math

import structlog

from dna_matrix.exceptions import MissingHeadersError
from dna_matrix.models.segment import MAX_SEGMENT_CM, MatchSegment, ParsedDataset, RowWarning

logger = structlog.get_logger(__name__)

MATCH_NAME = "Match Name"
CHROMOSOME = "Chromosome"
START_LOCATION = "Start Location"
END_LOCATION = "End Location"
CENTIMORGANS = "Centimorgans"
MATCHING_SNPS = "Matching SNPs"

REQUIRED_HEADERS = (
    MATCH_NAME,
    CHROMOSOME,
    START_LOCATION,
    END_LOCATION,
    CENTIMORGANS,
    MATCHING_SNPS,
)


def parse_csv(text: str, delimiter: str = ",") -> ParsedDataset:
    """Parse a DNA match export into segments and totals.

    Args:
        text: Full file contents
        delimiter: Single-character field delimiter

    Returns:
        ParsedDataset with accepted segments, totals and per-row warnings

    Raises:
        MissingHeadersError: If any required column is absent from the header
    """
    reader = csv.reader(text.splitlines(), delimiter=delimiter)
    # The header is the first non-blank line
    header = next((row for row in reader if not _is_blank(row)), [])
    headers = [h.strip() for h in header]

    missing = [h for h in REQUIRED_HEADERS if h not in headers]
    if missing:
        logger.warning("parser.missing_headers", missing=missing)
        raise MissingHeadersError(missing=missing)

    column_indices = {name: headers.index(name) for name in REQUIRED_HEADERS}

    segments: list[MatchSegment] = []
    warnings: list[RowWarning] = []

    for row in reader:
        line_number = reader.line_num
        if _is_blank(row):
            continue

        if len(row) != len(headers):
            reason = f"expected {len(headers)} fields, found {len(row)}"
        else:
            try:
                segments.append(_parse_row([v.strip() for v in row], column_indices))
                continue
            except ValueError as e:
                reason = str(e)

        logger.debug("parser.row_skipped", line=line_number, reason=reason)
        warnings.append(
            RowWarning(line_number=line_number, reason=reason, raw=delimiter.join(row))
        )

    total = math.fsum(s.centimorgans for s in segments)
    logger.info(
        "parser.parsed",
        segments=len(segments),
        skipped=len(warnings),
        total_cm=round(total, 2),
    )

    return ParsedDataset(
        segments=tuple(segments),
        segment_count=len(segments),
        total_centimorgans=total,
        warnings=tuple(warnings),
    )


def _is_blank(row: list[str]) -> bool:
    """True for an empty line or one holding only whitespace."""
    return not row or (len(row) == 1 and not row[0].strip())


def _parse_row(values: list[str], column_indices: dict[str, int]) -> MatchSegment:
    """Build a segment from trimmed field values."""

    def get_value(col: str) -> str:
        return values[column_indices[col]]

    centimorgans = _parse_float(get_value(CENTIMORGANS), CENTIMORGANS)
    if centimorgans < 0:
        raise ValueError(f"Negative {CENTIMORGANS} value '{get_value(CENTIMORGANS)}'")
    if centimorgans > MAX_SEGMENT_CM:
        raise ValueError(
            f"Implausible {CENTIMORGANS} value '{get_value(CENTIMORGANS)}' (above {MAX_SEGMENT_CM:g})"
        )

    matching_snps = _parse_int(get_value(MATCHING_SNPS), MATCHING_SNPS)
    if matching_snps < 0:
        raise ValueError(f"Negative {MATCHING_SNPS} value '{get_value(MATCHING_SNPS)}'")

    return MatchSegment(
        match_name=get_value(MATCH_NAME),
        chromosome=get_value(CHROMOSOME),
        start_location=_parse_int(get_value(START_LOCATION), START_LOCATION),
        end_location=_parse_int(get_value(END_LOCATION), END_LOCATION),
        centimorgans=centimorgans,
        matching_snps=matching_snps,
    )


def _parse_float(value: str, column: str) -> float:
    try:
        number = float(value)
    except ValueError as e:
        raise ValueError(f"Invalid {column} value '{value}'") from e
    if not math.isfinite(number):
        raise ValueError(f"Invalid {column} value '{value}'")
    return number


def _parse_int(value: str, column: str) -> int:
    try:
        return int(value)
    except ValueError:
        pass
    # Some exports write whole numbers as "1200.0"
    number = _parse_float(value, column)
    if not number.is_integer():
        raise ValueError(f"Invalid {column} value '{value}'")
    return int(number)
