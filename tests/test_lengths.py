"""Tests for parcel/lengths.py: parsing and completeness."""
import math
import pytest
from parcel.types import EdgeLengths
from parcel.lengths import (
    parse_length, lengths_from_raw, is_complete, safe_length, safe_lengths,
)


class TestParseLength:
    @pytest.mark.parametrize("raw,expected", [
        ("220", 220.0), (" 17.5 ", 17.5), (180, 180.0), (2.5, 2.5), ("-3", -3.0),
    ])
    def test_numbers(self, raw, expected):
        assert parse_length(raw) == expected

    @pytest.mark.parametrize("raw", [None, "", "   ", "abc", "1,5", True, [1], "1_000", b"12", 10**400])
    def test_unusable_becomes_nan(self, raw):
        assert math.isnan(parse_length(raw))


class TestIsComplete:
    def test_all_positive(self, lengths):
        assert is_complete(lengths)

    @pytest.mark.parametrize("bad", [0.0, -1.0, math.nan, math.inf])
    def test_any_bad_side(self, bad):
        assert not is_complete(EdgeLengths(220, 170, bad, 200))

    def test_from_blank_form(self):
        assert not is_complete(lengths_from_raw("", "", "", ""))

    def test_from_filled_form(self):
        lens = lengths_from_raw("220", "170", "180", "200")
        assert lens == EdgeLengths(220.0, 170.0, 180.0, 200.0)
        assert is_complete(lens)


class TestSafeLength:
    def test_keeps_usable(self):
        assert safe_length(42.0) == 42.0

    @pytest.mark.parametrize("bad", [0.0, -5.0, math.nan, math.inf])
    def test_substitutes_default(self, bad):
        assert safe_length(bad) == 100.0

    def test_custom_default(self):
        assert safe_length(0.0, default=7.0) == 7.0

    def test_safe_lengths(self):
        lens = safe_lengths(EdgeLengths(math.nan, 50.0, 0.0, 10.0))
        assert lens == EdgeLengths(100.0, 50.0, 100.0, 10.0)
