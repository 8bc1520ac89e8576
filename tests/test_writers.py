"""Tests for the row writer and header rows."""

import io
from pathlib import Path

import pytest

from vcf2tsv.catalog import TagCatalog
from vcf2tsv.exceptions import OutputWriteError
from vcf2tsv.writers import RowWriter, write_header
from vcf2tsv.writers.header import grouping_row, names_row


class TestRowWriter:
    """Test delimiter handling and row termination."""

    def test_delimiter_between_fields_only(self) -> None:
        sink = io.StringIO()
        writer = RowWriter(sink)

        writer.write_field("a")
        writer.write_field("b")
        writer.write_field("c")
        writer.newline()

        assert sink.getvalue() == "a\tb\tc\n"

    def test_field_count_resets(self) -> None:
        sink = io.StringIO()
        writer = RowWriter(sink)

        writer.write_field("a")
        writer.write_field("b")
        assert writer.field_count == 2
        writer.newline()
        assert writer.field_count == 0
        writer.write_field("c")
        writer.newline()

        assert sink.getvalue() == "a\tb\nc\n"
        assert writer.rows_written == 2

    def test_empty_fields_keep_columns(self) -> None:
        sink = io.StringIO()
        writer = RowWriter(sink)

        writer.write_fields(["", "x", ""])
        writer.newline()

        assert sink.getvalue() == "\tx\t\n"

    def test_open_truncates(self, tmp_path: Path) -> None:
        out = tmp_path / "out.tsv"
        out.write_text("stale content\n")

        with RowWriter.open(out) as writer:
            writer.write_field("fresh")
            writer.newline()

        assert out.read_text() == "fresh\n"

    def test_closed_on_error(self, tmp_path: Path) -> None:
        out = tmp_path / "out.tsv"

        with pytest.raises(RuntimeError):
            with RowWriter.open(out) as writer:
                writer.write_field("partial")
                writer.newline()
                raise RuntimeError("boom")

        assert out.read_text() == "partial\n"

    def test_open_missing_directory(self, tmp_path: Path) -> None:
        with pytest.raises(OutputWriteError, match="Cannot create output file"):
            RowWriter.open(tmp_path / "missing" / "out.tsv")

    def test_sink_failure_is_output_error(self) -> None:
        class BrokenSink(io.StringIO):
            def write(self, s: str) -> int:
                raise OSError("disk full")

        writer = RowWriter(BrokenSink())

        with pytest.raises(OutputWriteError, match="disk full"):
            writer.write_field("a")


class TestHeaderRows:
    """Test the two header rows."""

    def test_grouping_row(self) -> None:
        catalog = TagCatalog(["DP", "AF"], ["GT", "GQ"])

        row = grouping_row(catalog, ["S1", "S2"])

        assert row == ["VARIANT"] * 8 + ["S1", "S1", "S2", "S2"]

    def test_names_row(self) -> None:
        catalog = TagCatalog(["DP", "AF"], ["GT", "GQ"])

        row = names_row(catalog, ["S1", "S2"])

        assert row == [
            "CHROM", "POS", "REF", "ALT", "QUAL", "FILTER",
            "DP", "AF",
            "GT", "GQ", "GT", "GQ",
        ]

    def test_rows_same_width(self) -> None:
        catalog = TagCatalog(["DP"], ["GT", "GQ", "AD"])
        samples = ["S1", "S2", "S3"]

        assert len(grouping_row(catalog, samples)) == len(names_row(catalog, samples))
        assert len(names_row(catalog, samples)) == catalog.column_count(len(samples))

    def test_no_format_tags(self) -> None:
        """Samples contribute no columns when there are no FORMAT tags."""
        catalog = TagCatalog(["DP"], [])

        assert grouping_row(catalog, ["S1"]) == ["VARIANT"] * 7
        assert names_row(catalog, ["S1"]) == ["CHROM", "POS", "REF", "ALT", "QUAL", "FILTER", "DP"]

    def test_write_header(self) -> None:
        sink = io.StringIO()
        catalog = TagCatalog(["DP"], ["GT"])

        write_header(RowWriter(sink), catalog, ["S1"])

        assert sink.getvalue() == (
            "VARIANT\tVARIANT\tVARIANT\tVARIANT\tVARIANT\tVARIANT\tVARIANT\tS1\n"
            "CHROM\tPOS\tREF\tALT\tQUAL\tFILTER\tDP\tGT\n"
        )
