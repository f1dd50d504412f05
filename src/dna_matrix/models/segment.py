"""Per-segment match records and the parse result."""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator

# Whole diploid autosomal genome; no real segment or match total exceeds it
MAX_SEGMENT_CM = 7400.0


class MatchSegment(BaseModel):
    """One shared-DNA segment between the data owner and a named match.

    Chromosome, locations and SNP count are carried through untouched;
    only the match name and centiMorgans drive aggregation.
    """

    model_config = ConfigDict(frozen=True)

    match_name: str = Field(description="Match identifier, repeated across segments")
    chromosome: str
    start_location: int
    end_location: int
    centimorgans: float = Field(ge=0.0, le=MAX_SEGMENT_CM, allow_inf_nan=False)
    matching_snps: int = Field(ge=0)


class RowWarning(BaseModel):
    """A body row that was skipped while parsing."""

    model_config = ConfigDict(frozen=True)

    line_number: int = Field(ge=2, description="1-based line number; the header is line 1")
    reason: str
    raw: str = Field(default="", description="The offending row, re-joined")


class ParsedDataset(BaseModel):
    """Result of parsing one match export."""

    model_config = ConfigDict(frozen=True)

    segments: tuple[MatchSegment, ...] = ()
    segment_count: int = Field(default=0, ge=0)
    total_centimorgans: float = Field(default=0.0, ge=0.0)
    warnings: tuple[RowWarning, ...] = ()

    @model_validator(mode="after")
    def _count_matches_segments(self) -> ParsedDataset:
        if self.segment_count != len(self.segments):
            raise ValueError(
                f"segment_count={self.segment_count} does not match {len(self.segments)} segments"
            )
        return self
