"""Tests for the compact transcript time-range codec."""

from __future__ import annotations

import pytest

from journalfm.domain.timeranges import (
    TimeRange,
    decode_range,
    decode_ranges,
    encode_range,
    encode_ranges,
    range_at,
)


class TestEncode:
    def test_single(self) -> None:
        assert encode_range(TimeRange(start=0.0, end=5.5)) == "0.0-5.5"

    def test_shortest_repr(self) -> None:
        assert encode_range(TimeRange(start=0.1, end=1 / 3)) == "0.1-0.3333333333333333"

    def test_many(self) -> None:
        ranges = [TimeRange(start=0.0, end=5.0), TimeRange(start=5.5, end=9.25)]
        assert encode_ranges(ranges) == "0.0-5.0,5.5-9.25"

    def test_empty(self) -> None:
        assert encode_ranges([]) == ""


class TestDecode:
    def test_single(self) -> None:
        assert decode_range("1.5-3") == TimeRange(start=1.5, end=3.0)

    @pytest.mark.parametrize("text", ["", "1.5", "a-b", "1-2-3", "-1.0-2.0"])
    def test_malformed(self, text: str) -> None:
        assert decode_range(text) is None

    def test_lenient_list(self) -> None:
        assert decode_ranges("0-1,bogus,2-3") == [
            TimeRange(start=0.0, end=1.0),
            TimeRange(start=2.0, end=3.0),
        ]

    def test_text_is_not_carried(self) -> None:
        original = [TimeRange(text="hello", start=0.0, end=1.0)]
        decoded = decode_ranges(encode_ranges(original))
        assert decoded[0].text == ""
        assert (decoded[0].start, decoded[0].end) == (0.0, 1.0)

    def test_tiny_bounds_written_without_exponent(self) -> None:
        original = [TimeRange(start=0.00001, end=2.0)]
        encoded = encode_ranges(original)
        assert encoded == "0.00001-2.0"
        assert decode_ranges(encoded) == original

    def test_large_bounds_written_without_exponent(self) -> None:
        assert encode_range(TimeRange(start=0.0, end=1e16)) == "0.0-10000000000000000"

    def test_values_survive(self) -> None:
        original = [TimeRange(start=0.1, end=0.7), TimeRange(start=12.345678, end=99.0)]
        assert decode_ranges(encode_ranges(original)) == original


class TestLookup:
    def test_duration(self) -> None:
        assert TimeRange(start=1.0, end=3.5).duration == 2.5

    def test_range_at(self) -> None:
        ranges = decode_ranges("0-1,1-2")
        assert range_at(ranges, 1.0) == TimeRange(start=1.0, end=2.0)
        assert range_at(ranges, 0.5) == TimeRange(start=0.0, end=1.0)
        assert range_at(ranges, 2.0) is None
