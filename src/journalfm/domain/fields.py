"""Field decoders and encoders shared by the record schemas.

A decoder turns one parsed :class:`FrontmatterField` into the Python value
of a typed record attribute, or ``None`` when the source cannot be read
that way. Decoders never raise. An encoder turns a non-empty attribute
value back into header lines.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from datetime import date, datetime, tzinfo
from enum import StrEnum
from typing import Any, TypeVar

from pydantic import BaseModel

from journalfm.domain.frontmatter import FrontmatterField
from journalfm.domain.render import (
    format_coordinates,
    format_day,
    format_moment,
    format_one_decimal,
    quote_string,
    render_array,
    render_scalar,
)
from journalfm.domain.values import (
    ArrayValue,
    DateTimeValue,
    DoubleValue,
    IntValue,
    StringValue,
    parse_double,
    parse_int,
    unquote,
)

Decoder = Callable[[FrontmatterField], Any]
Encoder = Callable[[str, Any, tzinfo | None], list[str]]

E = TypeVar("E", bound=StrEnum)

_DAY_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


class Coordinates(BaseModel):
    """A latitude/longitude pair stored as ``"lat,lon"``."""

    model_config = {"frozen": True}

    latitude: float
    longitude: float

    def __str__(self) -> str:
        return format_coordinates(self.latitude, self.longitude)


# ---------------------------------------------------------------------------
# Decoders
# ---------------------------------------------------------------------------


def decode_text(field: FrontmatterField) -> str | None:
    """Literal text of a scalar line. Arrays (including ``key:``) are not text."""
    if isinstance(field.value, ArrayValue) or field.raw is None:
        return None
    return field.raw or None


def decode_int(field: FrontmatterField) -> int | None:
    match field.value:
        case IntValue(value=number):
            return number
        case DoubleValue(value=number) if number.is_integer():
            return int(number)
        case StringValue(value=text):
            return parse_int(text.strip())
    return None


def decode_double(field: FrontmatterField) -> float | None:
    match field.value:
        case IntValue(value=number):
            return float(number)
        case DoubleValue(value=number):
            return number
        case StringValue(value=text):
            return parse_double(text.strip())
    return None


def split_inline_list(text: str) -> list[str]:
    """Split ``[a, b]`` (or a bare ``a, b``) into trimmed, unquoted items."""
    cleaned = text.strip().strip("[]")
    items = []
    for part in cleaned.split(","):
        item, _quoted = unquote(part.strip())
        if item:
            items.append(item)
    return items


def decode_list(field: FrontmatterField) -> list[str]:
    """Block arrays and inline ``[a, b]`` strings decode to the same list."""
    if isinstance(field.value, ArrayValue):
        return list(field.value.value)
    if field.raw is None:
        return []
    return split_inline_list(field.raw)


def strip_wikilink(text: str) -> str:
    """``[[Name]]`` -> ``Name``; other text is returned trimmed."""
    text = text.strip()
    if text.startswith("[[") and text.endswith("]]"):
        text = text[2:-2]
    return text.strip()


def decode_wikilink(field: FrontmatterField) -> str | None:
    text = decode_text(field)
    if text is None:
        return None
    return strip_wikilink(text) or None


def decode_wikilink_list(field: FrontmatterField) -> list[str]:
    names = (strip_wikilink(unquote(item)[0]) for item in decode_list(field))
    return [name for name in names if name]


def decode_moment(field: FrontmatterField) -> datetime | None:
    if isinstance(field.value, DateTimeValue):
        return field.value.value
    return None


def decode_day(field: FrontmatterField) -> date | None:
    if isinstance(field.value, DateTimeValue):
        return field.value.value.date()
    text = decode_text(field)
    if text is None or not _DAY_RE.match(text):
        return None
    try:
        return date.fromisoformat(text)
    except ValueError:
        return None


def parse_coordinates(text: str) -> Coordinates | None:
    """``"lat,lon"`` -> :class:`Coordinates`; malformed text gives None."""
    parts = text.split(",")
    if len(parts) != 2:
        return None
    latitude = parse_double(parts[0].strip())
    longitude = parse_double(parts[1].strip())
    if latitude is None or longitude is None:
        return None
    return Coordinates(latitude=latitude, longitude=longitude)


def decode_coordinates(field: FrontmatterField) -> Coordinates | None:
    text = decode_text(field)
    return parse_coordinates(text) if text is not None else None


def choice_decoder(enum_cls: type[E], default: E | None = None) -> Decoder:
    """Decoder for a controlled vocabulary, falling back to *default*."""

    def decode(field: FrontmatterField) -> E | None:
        text = decode_text(field)
        if text is not None:
            try:
                return enum_cls(text.strip())
            except ValueError:
                pass
        return default

    return decode


# ---------------------------------------------------------------------------
# Encoders
# ---------------------------------------------------------------------------


def encode_text(key: str, value: str, tz: tzinfo | None = None) -> list[str]:
    return render_scalar(key, quote_string(value))


def encode_quoted(key: str, value: str, tz: tzinfo | None = None) -> list[str]:
    return render_scalar(key, f'"{value}"')


def encode_int(key: str, value: int, tz: tzinfo | None = None) -> list[str]:
    return render_scalar(key, str(value))


def encode_one_decimal(key: str, value: float, tz: tzinfo | None = None) -> list[str]:
    return render_scalar(key, format_one_decimal(value))


def encode_list(key: str, value: list[str], tz: tzinfo | None = None) -> list[str]:
    return render_array(key, value)


def encode_wikilink(key: str, value: str, tz: tzinfo | None = None) -> list[str]:
    return render_scalar(key, f'"[[{value}]]"')


def encode_wikilink_list(key: str, value: list[str], tz: tzinfo | None = None) -> list[str]:
    return render_array(key, (f'"[[{name}]]"' for name in value))


def encode_moment(key: str, value: datetime, tz: tzinfo | None = None) -> list[str]:
    return render_scalar(key, format_moment(value, tz))


def encode_day(key: str, value: date, tz: tzinfo | None = None) -> list[str]:
    return render_scalar(key, format_day(value))


def encode_coordinates(key: str, value: Coordinates, tz: tzinfo | None = None) -> list[str]:
    return render_scalar(key, format_coordinates(value.latitude, value.longitude))


def encode_choice(key: str, value: StrEnum, tz: tzinfo | None = None) -> list[str]:
    return render_scalar(key, value.value)
