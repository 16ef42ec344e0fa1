"""Compact time-range codec for audio transcript segments.

Ranges are stored inline as ``"start-end"`` pairs joined by commas::

    0.0-5.0,5.5-9.25

The compact form has no slot for segment text, so decoded ranges always
carry an empty ``text``. Decoding is lenient: a malformed segment is
dropped, the others are kept.
"""

from __future__ import annotations

from collections.abc import Iterable
from decimal import Decimal

from pydantic import BaseModel

from journalfm.domain.values import parse_double


class TimeRange(BaseModel):
    """A transcript segment spanning ``[start, end)`` seconds."""

    model_config = {"frozen": True}

    text: str = ""
    start: float
    end: float

    @property
    def duration(self) -> float:
        return self.end - self.start

    def contains(self, seconds: float) -> bool:
        return self.start <= seconds < self.end


def format_bound(seconds: float) -> str:
    """Shortest round-trip digits, never in exponent form.

    ``1e-05`` would add a hyphen to the segment, so it is written as
    ``0.00001``.
    """
    text = repr(seconds)
    if "e" in text or "E" in text:
        text = format(Decimal(text), "f")
    return text


def encode_range(time_range: TimeRange) -> str:
    return f"{format_bound(time_range.start)}-{format_bound(time_range.end)}"


def decode_range(encoded: str) -> TimeRange | None:
    """``"1.5-3.0"`` -> range; anything but two numeric parts gives None."""
    parts = encoded.split("-")
    if len(parts) != 2:
        return None
    start = parse_double(parts[0].strip())
    end = parse_double(parts[1].strip())
    if start is None or end is None:
        return None
    return TimeRange(start=start, end=end)


def encode_ranges(ranges: Iterable[TimeRange]) -> str:
    return ",".join(encode_range(r) for r in ranges)


def decode_ranges(encoded: str) -> list[TimeRange]:
    ranges = []
    for segment in encoded.split(","):
        decoded = decode_range(segment)
        if decoded is not None:
            ranges.append(decoded)
    return ranges


def range_at(ranges: Iterable[TimeRange], seconds: float) -> TimeRange | None:
    """First range containing *seconds*."""
    for time_range in ranges:
        if time_range.contains(seconds):
            return time_range
    return None
