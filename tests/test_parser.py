"""Tests for the match export parser."""

import math

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from dna_matrix.dna.parser import REQUIRED_HEADERS, parse_csv
from dna_matrix.exceptions import MissingHeadersError, ValidationError
from dna_matrix.models.segment import MAX_SEGMENT_CM

HEADER = ",".join(REQUIRED_HEADERS)


class TestHeaders:
    """Header validation."""

    def test_canonical_order(self, example_export):
        """Test parsing the example export."""
        dataset = parse_csv(example_export)
        assert dataset.segment_count == 3

    def test_any_column_order(self):
        """Test headers are matched by name in any order."""
        text = (
            "Matching SNPs,Centimorgans,Match Name,End Location,Chromosome,Start Location\n"
            "450,25.3,Jane Doe,5000000,1,1000000\n"
        )
        dataset = parse_csv(text)

        segment = dataset.segments[0]
        assert segment.match_name == "Jane Doe"
        assert segment.chromosome == "1"
        assert segment.start_location == 1000000
        assert segment.end_location == 5000000
        assert segment.centimorgans == 25.3
        assert segment.matching_snps == 450

    def test_extra_columns_ignored(self):
        """Test unknown columns are ignored."""
        text = f"Notes,{HEADER}\nmaternal,Jane Doe,1,10,20,7.5,100\n"
        dataset = parse_csv(text)
        assert dataset.segments[0].centimorgans == 7.5

    def test_missing_headers_named_in_message(self):
        """Test missing headers are listed in canonical order."""
        text = "Match Name,Chromosome,End Location,Centimorgans\nJane Doe,1,10,7.5\n"

        with pytest.raises(MissingHeadersError) as exc_info:
            parse_csv(text)

        assert exc_info.value.missing == ["Start Location", "Matching SNPs"]
        assert str(exc_info.value) == "Missing required headers: Start Location, Matching SNPs"

    def test_missing_headers_is_validation_error(self):
        """Test missing headers surface as a validation error."""
        with pytest.raises(ValidationError):
            parse_csv("Match Name\nJane Doe\n")

    def test_empty_text_misses_every_header(self):
        """Test empty text misses every required header."""
        with pytest.raises(MissingHeadersError) as exc_info:
            parse_csv("")
        assert exc_info.value.missing == list(REQUIRED_HEADERS)

    def test_headers_are_trimmed(self):
        """Test whitespace around header names is ignored."""
        text = (
            " Match Name , Chromosome ,Start Location,End Location,Centimorgans, Matching SNPs\n"
            "Jane Doe,1,10,20,7.5,100\n"
        )
        assert parse_csv(text).segment_count == 1

    def test_header_names_are_case_sensitive(self):
        """Test header matching is case sensitive."""
        text = HEADER.replace("Centimorgans", "centimorgans") + "\nJane Doe,1,10,20,7.5,100\n"
        with pytest.raises(MissingHeadersError) as exc_info:
            parse_csv(text)
        assert exc_info.value.missing == ["Centimorgans"]


class TestRows:
    """Body row handling."""

    def test_values_are_trimmed(self):
        """Test whitespace around values is trimmed."""
        dataset = parse_csv(f"{HEADER}\n  Jane Doe ,  1 , 10 , 20 , 7.5 , 100 \n")
        segment = dataset.segments[0]
        assert segment.match_name == "Jane Doe"
        assert segment.chromosome == "1"

    def test_row_order_preserved(self, example_export):
        """Test segments keep file order."""
        dataset = parse_csv(example_export)
        assert [s.centimorgans for s in dataset.segments] == [25.3, 12.1, 68.4]

    def test_wrong_field_count_skipped_with_warning(self):
        """Test rows with the wrong field count are reported."""
        text = f"{HEADER}\nJane Doe,1,10,20,7.5\nJohn Smith,2,10,20,8.0,100\n"
        dataset = parse_csv(text)

        assert dataset.segment_count == 1
        assert dataset.segments[0].match_name == "John Smith"
        assert len(dataset.warnings) == 1
        warning = dataset.warnings[0]
        assert warning.line_number == 2
        assert warning.reason == "expected 6 fields, found 5"
        assert warning.raw == "Jane Doe,1,10,20,7.5"

    def test_blank_lines_skipped_silently(self):
        """Test blank lines produce no segment or warning."""
        text = f"{HEADER}\n\nJane Doe,1,10,20,7.5,100\n   \n"
        dataset = parse_csv(text)
        assert dataset.segment_count == 1
        assert dataset.warnings == ()

    def test_quoted_name_with_delimiter(self):
        """Test quoted values may contain the delimiter."""
        dataset = parse_csv(f'{HEADER}\n"Doe, Jane",1,10,20,7.5,100\n')
        assert dataset.segments[0].match_name == "Doe, Jane"

    def test_crlf_line_endings(self):
        """Test Windows line endings."""
        text = f"{HEADER}\r\nJane Doe,1,10,20,7.5,100\r\n"
        dataset = parse_csv(text)
        assert dataset.segments[0].matching_snps == 100

    def test_tab_delimiter(self):
        """Test a tab-delimited export."""
        text = "\t".join(REQUIRED_HEADERS) + "\nJane Doe\t1\t10\t20\t7.5\t100\n"
        dataset = parse_csv(text, delimiter="\t")
        assert dataset.segments[0].centimorgans == 7.5

    def test_integral_float_accepted_for_int_columns(self):
        """Test integral floats in integer columns."""
        dataset = parse_csv(f"{HEADER}\nJane Doe,1,1000.0,2000,7.5,100\n")
        assert dataset.segments[0].start_location == 1000

    def test_leading_blank_lines_keep_line_numbers(self):
        """Test blank lines before the header do not shift line numbers."""
        dataset = parse_csv(f"\n\n{HEADER}\nBroken,Row\nJane Doe,1,10,20,7.5,100\n")

        assert dataset.segment_count == 1
        assert dataset.warnings[0].line_number == 4

    def test_row_of_empty_fields_reported(self):
        """Test a row of empty fields is reported, not dropped."""
        dataset = parse_csv(f"{HEADER}\n,,,,,\n")

        assert dataset.segment_count == 0
        assert len(dataset.warnings) == 1
        assert dataset.warnings[0].line_number == 2
        assert dataset.warnings[0].reason == "Invalid Centimorgans value ''"

    def test_trailing_empty_field_kept(self):
        """Test a trailing empty field still counts as a field."""
        text = "\t".join(REQUIRED_HEADERS) + "\tNotes\nJane Doe\t1\t10\t20\t7.5\t100\t\n"
        dataset = parse_csv(text, delimiter="\t")
        assert dataset.segment_count == 1


class TestNumericPolicy:
    """Rows with unusable numbers are skipped and reported."""

    @pytest.mark.parametrize(
        "row,column",
        [
            ("Jane Doe,1,10,20,abc,100", "Centimorgans"),
            ("Jane Doe,1,10,20,nan,100", "Centimorgans"),
            ("Jane Doe,1,10,20,inf,100", "Centimorgans"),
            ("Jane Doe,1,ten,20,7.5,100", "Start Location"),
            ("Jane Doe,1,10,20.5,7.5,100", "End Location"),
            ("Jane Doe,1,10,20,7.5,", "Matching SNPs"),
        ],
    )
    def test_invalid_number_skips_row(self, row, column):
        """Test unusable numbers skip the row with a warning."""
        dataset = parse_csv(f"{HEADER}\n{row}\nJohn Smith,2,10,20,8.0,100\n")

        assert dataset.segment_count == 1
        assert column in dataset.warnings[0].reason
        assert not math.isnan(dataset.total_centimorgans)

    def test_negative_centimorgans_rejected(self):
        """Test negative centiMorgans are rejected."""
        dataset = parse_csv(f"{HEADER}\nJane Doe,1,10,20,-3.0,100\n")
        assert dataset.segment_count == 0
        assert dataset.warnings[0].reason == "Negative Centimorgans value '-3.0'"

    def test_negative_snps_rejected(self):
        """Test negative SNP counts are rejected."""
        dataset = parse_csv(f"{HEADER}\nJane Doe,1,10,20,3.0,-1\n")
        assert dataset.segment_count == 0
        assert "Matching SNPs" in dataset.warnings[0].reason

    def test_end_before_start_passes_through(self):
        """Test reversed coordinates are kept as given."""
        dataset = parse_csv(f"{HEADER}\nJane Doe,1,500,20,3.0,10\n")
        assert dataset.segments[0].start_location == 500
        assert dataset.segments[0].end_location == 20

    def test_implausible_centimorgans_rejected(self):
        """Test values beyond genome scale cannot overflow the total."""
        dataset = parse_csv(f"{HEADER}\nA,1,1,2,1e308,1\nB,1,1,2,1e308,1\n")

        assert dataset.segment_count == 0
        assert dataset.total_centimorgans == 0.0
        assert [w.line_number for w in dataset.warnings] == [2, 3]
        assert dataset.warnings[0].reason == "Implausible Centimorgans value '1e308' (above 7400)"

    def test_genome_scale_bound_is_inclusive(self):
        """Test the genome-scale bound itself is accepted."""
        dataset = parse_csv(f"{HEADER}\nA,1,1,2,{MAX_SEGMENT_CM},1\nA,2,1,2,7400.01,1\n")

        assert dataset.segment_count == 1
        assert dataset.total_centimorgans == MAX_SEGMENT_CM
        assert len(dataset.warnings) == 1


class TestTotals:
    """Dataset totals."""

    def test_example_totals(self, example_export):
        """Test totals for the example export."""
        dataset = parse_csv(example_export)
        assert dataset.segment_count == len(dataset.segments) == 3
        assert dataset.total_centimorgans == pytest.approx(105.8)

    def test_header_only(self):
        """Test a header with no rows."""
        dataset = parse_csv(HEADER)
        assert dataset.segments == ()
        assert dataset.segment_count == 0
        assert dataset.total_centimorgans == 0.0

    def test_repeatable(self, example_export):
        """Test parsing the same text twice gives equal results."""
        assert parse_csv(example_export) == parse_csv(example_export)

    @given(
        values=st.lists(
            st.floats(min_value=0, max_value=4000, allow_nan=False, allow_infinity=False),
            max_size=30,
        )
    )
    @settings(max_examples=50)
    def test_total_is_order_independent_sum(self, values):
        """Test the total does not depend on row order."""
        rows = "\n".join(f"M{i % 4},1,10,20,{v!r},1" for i, v in enumerate(values))
        forward = parse_csv(f"{HEADER}\n{rows}")
        backward = parse_csv(f"{HEADER}\n" + "\n".join(reversed(rows.splitlines())))

        assert forward.segment_count == len(values)
        assert forward.total_centimorgans == math.fsum(values)
        assert backward.total_centimorgans == forward.total_centimorgans
