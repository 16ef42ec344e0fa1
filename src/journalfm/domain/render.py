"""Frontmatter serializer: formatting rules for header lines.

All functions here are total: given in-memory values they always produce
text. Each rule is load-bearing for files that people also edit by hand,
so the output shapes are fixed:

- strings with ``:``, ``#`` or a leading ``@`` are double-quoted
- unknown doubles print as integers when whole, else at most two places
- one-decimal fields always print ``X.Y``
- coordinates print ``%.5f,%.5f``
- moments print ISO-8601 with milliseconds and a colon offset
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from datetime import UTC, date, datetime, tzinfo
from enum import StrEnum

from journalfm.domain.frontmatter import EMPTY_INLINE_LIST, FRONTMATTER_DELIMITER
from journalfm.domain.values import (
    ArrayValue,
    BoolValue,
    DateTimeValue,
    DoubleValue,
    IntValue,
    StringValue,
    TypedValue,
    parse_value,
)

_TRAILING_ZEROS_RE = re.compile(r"\.?0+$")


class EmptyPolicy(StrEnum):
    """How a field with no value is written."""

    OMIT = "omit"
    PLACEHOLDER = "placeholder"  # "key:"
    EMPTY_LIST = "empty_list"  # "key: []"


# ---------------------------------------------------------------------------
# Scalars
# ---------------------------------------------------------------------------


def needs_quotes(text: str) -> bool:
    """Whether *text* contains header-significant characters."""
    return ":" in text or "#" in text or text.startswith("@")


def quote_string(text: str, *, strict: bool = False) -> str:
    """Render a string scalar, double-quoting it when required.

    A bare ``[]`` is always quoted: unquoted it reads back as an empty array.

    In *strict* mode the string is also quoted when it would otherwise
    re-parse as another type (``42``, ``true``, a date-time) or is empty,
    so unknown string values keep their type across a round trip.
    """
    if needs_quotes(text) or text == EMPTY_INLINE_LIST:
        return f'"{text}"'
    if strict and (not text or parse_value(text) != StringValue(value=text)):
        return f'"{text}"'
    return text


def format_double(number: float) -> str:
    """Whole numbers print as integers, others with up to two decimals.

    Examples:
        >>> format_double(3.0)
        '3'
        >>> format_double(3.14159)
        '3.14'
        >>> format_double(2.5)
        '2.5'
    """
    if number.is_integer():
        return str(int(number))
    text = _TRAILING_ZEROS_RE.sub("", f"{number:.2f}")
    return text if text not in ("", "-", "-0") else "0"


def format_one_decimal(number: float) -> str:
    """Always exactly one decimal place (``2.0`` stays ``2.0``)."""
    return f"{number:.1f}"


def format_moment(moment: datetime, tz: tzinfo | None = None) -> str:
    """ISO-8601 in *tz* (default: local zone) with milliseconds.

    UTC is written with a ``Z`` suffix, every other zone with a
    colon-separated offset.
    """
    local = moment.astimezone(tz)
    text = local.isoformat(timespec="milliseconds")
    if local.utcoffset() is not None and local.utcoffset().total_seconds() == 0:
        text = text.removesuffix("+00:00") + "Z"
    return text


def format_instant(moment: datetime) -> str:
    """ISO-8601 without fractional seconds, keeping the value's own offset."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=UTC)
    text = moment.isoformat(timespec="seconds")
    if moment.utcoffset().total_seconds() == 0:
        text = text.removesuffix("+00:00") + "Z"
    return text


def format_day(day: date) -> str:
    return day.strftime("%Y-%m-%d")


def format_coordinates(latitude: float, longitude: float) -> str:
    return f"{latitude:.5f},{longitude:.5f}"


# ---------------------------------------------------------------------------
# Lines
# ---------------------------------------------------------------------------


def render_scalar(key: str, text: str) -> list[str]:
    return [f"{key}: {text}"]


def render_empty(key: str, empty: EmptyPolicy) -> list[str]:
    if empty is EmptyPolicy.PLACEHOLDER:
        return [f"{key}:"]
    if empty is EmptyPolicy.EMPTY_LIST:
        return [f"{key}: []"]
    return []


def render_array(key: str, items: Iterable[str], empty: EmptyPolicy = EmptyPolicy.OMIT) -> list[str]:
    """Render a block array (``key:`` followed by ``  - item`` lines)."""
    items = list(items)
    if not items:
        return render_empty(key, empty)
    return [f"{key}:", *(f"  - {item}" for item in items)]


def render_unknown(key: str, value: TypedValue) -> list[str]:
    """Render a field the schema does not model, driven by its value tag."""
    match value:
        case StringValue(value=text):
            return render_scalar(key, quote_string(text, strict=True))
        case IntValue(value=number):
            return render_scalar(key, str(number))
        case DoubleValue(value=number):
            return render_scalar(key, format_double(number))
        case BoolValue(value=flag):
            return render_scalar(key, "true" if flag else "false")
        case ArrayValue(value=items):
            return render_array(key, items, EmptyPolicy.EMPTY_LIST)
        case DateTimeValue(value=moment):
            return render_scalar(key, format_instant(moment))
    msg = f"Unsupported frontmatter value: {value!r}"
    raise TypeError(msg)


def render_document(header_lines: Iterable[str], body: str) -> str:
    """Assemble the full file text.

    Layout: delimiter, header lines, delimiter, blank line, body, trailing
    newline. An empty body leaves just the blank line after the header.
    """
    parts = [FRONTMATTER_DELIMITER, *header_lines, FRONTMATTER_DELIMITER, ""]
    text = "\n".join(parts) + "\n"
    if body:
        text += body + "\n"
    return text
