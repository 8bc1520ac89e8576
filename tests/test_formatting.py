"""Tests for value rendering."""

import math
import struct

import pytest

from vcf2tsv.formatting import (
    MISSING_INTEGER,
    VECTOR_END_INTEGER,
    format_filters,
    format_flag,
    format_float,
    format_genotype,
    format_integer,
    format_string,
    formatter_for,
    is_missing_float,
)
from vcf2tsv.models import SampleCall, ValueType


def float32_from_bits(bits: int) -> float:
    """Build a Python float from raw single-precision bits."""
    return struct.unpack("<f", struct.pack("<I", bits))[0]


class TestFormatInteger:
    """Test integer rendering."""

    def test_plain_value(self) -> None:
        assert format_integer(10) == "10"
        assert format_integer(-3) == "-3"
        assert format_integer(0) == "0"

    def test_missing_sentinel_is_empty(self) -> None:
        assert format_integer(MISSING_INTEGER) == ""
        assert format_integer(VECTOR_END_INTEGER) == ""

    def test_none_is_empty(self) -> None:
        assert format_integer(None) == ""


class TestFormatFloat:
    """Test float rendering."""

    def test_single_precision_shortest_form(self) -> None:
        """Values widened from float32 print with their short form."""
        assert format_float(float32_from_bits(0x3DCCCCCD)) == "0.1"
        assert format_float(0.2) == "0.2"

    def test_integral_value_has_no_decimal_point(self) -> None:
        assert format_float(50.0) == "50"
        assert format_float(12.5) == "12.5"

    def test_large_value_is_positional(self) -> None:
        assert format_float(1e20) == "100000000000000000000"

    def test_missing_sentinel_is_empty(self) -> None:
        missing = float32_from_bits(0x7F800001)
        assert math.isnan(missing)
        assert is_missing_float(missing) is True
        assert format_float(missing) == ""

    def test_vector_end_is_empty(self) -> None:
        assert format_float(float32_from_bits(0x7F800002)) == ""

    def test_none_is_empty(self) -> None:
        assert format_float(None) == ""

    def test_plain_nan_is_not_missing(self) -> None:
        """Only the sentinel payload means missing."""
        assert is_missing_float(float("nan")) is False
        assert format_float(float("nan")) == "NaN"


class TestFormatFlagAndString:
    """Test flag and string rendering."""

    def test_flag(self) -> None:
        assert format_flag(True) == "true"
        assert format_flag(False) == "false"
        assert format_flag(None) == "false"

    def test_string_passthrough(self) -> None:
        assert format_string("missense_variant") == "missense_variant"

    def test_utf8_bytes_decoded(self) -> None:
        assert format_string("café".encode()) == "café"

    def test_invalid_bytes_are_empty(self) -> None:
        assert format_string(b"\xff\xfe") == ""

    def test_none_is_empty(self) -> None:
        assert format_string(None) == ""


class TestFormatterFor:
    """Test type -> formatter dispatch."""

    @pytest.mark.parametrize(
        "value_type,value,expected",
        [
            (ValueType.INTEGER, 7, "7"),
            (ValueType.FLOAT, 0.5, "0.5"),
            (ValueType.STRING, "abc", "abc"),
            (ValueType.FLAG, True, "true"),
        ],
    )
    def test_dispatch(self, value_type: ValueType, value: object, expected: str) -> None:
        assert formatter_for(value_type)(value) == expected


class TestFormatGenotype:
    """Test genotype text."""

    def test_unphased(self) -> None:
        assert format_genotype(SampleCall((0, 1))) == "0/1"

    def test_phased(self) -> None:
        assert format_genotype(SampleCall((1, 1), phased=True)) == "1|1"

    def test_uncalled(self) -> None:
        assert format_genotype(SampleCall((None, None))) == "./."

    def test_haploid(self) -> None:
        assert format_genotype(SampleCall((None,))) == "."
        assert format_genotype(SampleCall((2,))) == "2"

    def test_no_call_is_empty(self) -> None:
        assert format_genotype(None) == ""
        assert format_genotype(SampleCall(())) == ""


class TestFormatFilters:
    """Test FILTER column text."""

    def test_unset(self) -> None:
        assert format_filters([]) == ""

    def test_pass(self) -> None:
        assert format_filters(["PASS"]) == "PASS"

    def test_multiple_filters_keep_order(self) -> None:
        assert format_filters(["q10", "s50"]) == "q10;s50"
