"""Typed frontmatter values and the single-token value parser.

Every frontmatter scalar or array is represented by exactly one variant of
the closed :data:`TypedValue` union. Variants are frozen pydantic models
discriminated by ``kind``, so equality is structural and values can be
serialized to JSON for the CLI without extra glue.

The parser is a first-match cascade (quotes, int, double, bool, date-time,
string). The order matters: a bare ``42`` is an ``IntValue``, while
``"42"`` stays a ``StringValue`` because quoting bypasses inference.
"""

from __future__ import annotations

import re
from datetime import datetime
from typing import Annotated, Literal

from pydantic import BaseModel, Field

# ---------------------------------------------------------------------------
# Value variants
# ---------------------------------------------------------------------------


class StringValue(BaseModel):
    model_config = {"frozen": True}

    kind: Literal["string"] = "string"
    value: str


class IntValue(BaseModel):
    model_config = {"frozen": True}

    kind: Literal["int"] = "int"
    value: int


class DoubleValue(BaseModel):
    model_config = {"frozen": True}

    kind: Literal["double"] = "double"
    value: float


class BoolValue(BaseModel):
    model_config = {"frozen": True}

    kind: Literal["bool"] = "bool"
    value: bool


class ArrayValue(BaseModel):
    """Ordered list of raw strings. Items are never type-inferred."""

    model_config = {"frozen": True}

    kind: Literal["array"] = "array"
    value: tuple[str, ...] = ()


class DateTimeValue(BaseModel):
    """An instant. The parsed offset is kept so re-serialization is stable."""

    model_config = {"frozen": True}

    kind: Literal["datetime"] = "datetime"
    value: datetime


TypedValue = Annotated[
    StringValue | IntValue | DoubleValue | BoolValue | ArrayValue | DateTimeValue,
    Field(discriminator="kind"),
]

# ---------------------------------------------------------------------------
# Parser
# ---------------------------------------------------------------------------

_INT_RE = re.compile(r"^-?\d+$")
_DOUBLE_RE = re.compile(r"^[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?$")
_DATETIME_RE = re.compile(
    r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}(?:\.\d+)?(?:Z|[+-]\d{2}:?\d{2})$"
)

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


def unquote(token: str) -> tuple[str, bool]:
    """Strip one layer of matching double or single quotes.

    Returns ``(text, was_quoted)``. A lone quote character is not a pair.
    """
    if len(token) >= 2 and token[0] == token[-1] and token[0] in ('"', "'"):
        return token[1:-1], True
    return token, False


def parse_int(text: str) -> int | None:
    """Parse a signed 64-bit integer literal, or return None."""
    if not _INT_RE.match(text):
        return None
    number = int(text)
    if number < _INT64_MIN or number > _INT64_MAX:
        return None
    return number


def parse_double(text: str) -> float | None:
    """Parse a decimal floating-point literal, or return None.

    ``nan`` and ``inf`` spellings are deliberately not numeric.
    """
    if not _DOUBLE_RE.match(text):
        return None
    return float(text)


def parse_datetime(text: str) -> datetime | None:
    """Parse an ISO-8601 date-time that carries an explicit offset."""
    if not _DATETIME_RE.match(text):
        return None
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        return None


def parse_value(token: str) -> TypedValue:
    """Infer the typed value of a single trimmed header token.

    Never fails: anything that is not a number, boolean or date-time is
    returned as a :class:`StringValue` of the unquoted text.

    Examples:
        >>> parse_value("42")
        IntValue(kind='int', value=42)
        >>> parse_value('"42"')
        StringValue(kind='string', value='42')
    """
    text, quoted = unquote(token)
    if quoted:
        return StringValue(value=text)

    integer = parse_int(text)
    if integer is not None:
        return IntValue(value=integer)

    double = parse_double(text)
    if double is not None:
        return DoubleValue(value=double)

    lowered = text.lower()
    if lowered == "true":
        return BoolValue(value=True)
    if lowered == "false":
        return BoolValue(value=False)

    moment = parse_datetime(text)
    if moment is not None:
        return DateTimeValue(value=moment)

    return StringValue(value=text)
