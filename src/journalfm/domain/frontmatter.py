"""Frontmatter block parser.

Splits a record file into header lines and body, then reads the header
with a two-state line machine (idle / accumulating-array)::

    ---
    key: value        -> (key, parse_value("value"))
    list:             -> remembered; following "- item" lines become its array
      - a
      - b
    ---

    body text

Parsing is lenient: lines that are neither ``key: value`` nor ``- item``
are skipped, and a file without a well-formed delimiter pair yields
``None`` rather than an error.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from journalfm.domain.values import ArrayValue, TypedValue, parse_value, unquote

FRONTMATTER_DELIMITER = "---"
_ARRAY_ITEM_PREFIX = "- "
EMPTY_INLINE_LIST = "[]"


@dataclass(frozen=True)
class FrontmatterField:
    """One header key with its inferred value.

    ``raw`` is the unquoted source token for scalar lines and ``None`` for
    arrays. Entity decoders read it when the literal text matters more than
    the inferred type (``phone: 0123`` must not become ``123``).
    """

    key: str
    value: TypedValue
    raw: str | None = None


@dataclass
class FrontmatterDocument:
    """Parsed header fields in file order, plus the body text.

    ``fields`` is insertion ordered. A repeated key overwrites the value
    but keeps the position of its first occurrence.
    """

    fields: dict[str, FrontmatterField] = field(default_factory=dict)
    body: str = ""

    @property
    def order(self) -> list[str]:
        return list(self.fields)

    def get(self, key: str) -> TypedValue | None:
        found = self.fields.get(key)
        return found.value if found is not None else None

    def __contains__(self, key: object) -> bool:
        return key in self.fields

    def __len__(self) -> int:
        return len(self.fields)


def split_frontmatter(content: str) -> tuple[list[str], str] | None:
    """Return ``(header_lines, body)`` or None when no header block exists.

    The first line must be exactly ``---`` and the file must have at least
    three lines. The body is everything after the closing delimiter,
    trimmed of surrounding whitespace.
    """
    lines = content.replace("\r\n", "\n").split("\n")
    if len(lines) < 3 or lines[0] != FRONTMATTER_DELIMITER:
        return None

    end_idx: int | None = None
    for i, line in enumerate(lines[1:], start=1):
        if line == FRONTMATTER_DELIMITER:
            end_idx = i
            break

    if end_idx is None:
        return None

    body = "\n".join(lines[end_idx + 1 :]).strip()
    return lines[1:end_idx], body


def parse_header_lines(lines: list[str]) -> dict[str, FrontmatterField]:
    """Parse header lines into an ordered ``key -> FrontmatterField`` map."""
    fields: dict[str, FrontmatterField] = {}
    array_key: str | None = None
    items: list[str] = []
    accumulating = False

    def flush() -> None:
        if accumulating and array_key is not None:
            fields[array_key] = FrontmatterField(array_key, ArrayValue(value=tuple(items)))

    for line in lines:
        trimmed = line.strip()

        if trimmed.startswith(_ARRAY_ITEM_PREFIX):
            if array_key is not None:
                items.append(trimmed[len(_ARRAY_ITEM_PREFIX) :].strip())
                accumulating = True
            continue

        if ":" not in trimmed:
            continue

        flush()
        items = []
        accumulating = False

        key, _, value_text = trimmed.partition(":")
        key = key.strip()
        value_text = value_text.strip()
        if not key:
            array_key = None
            continue

        if not value_text or value_text == EMPTY_INLINE_LIST:
            # An empty key owns any "- " lines that follow; with none it
            # stays an empty array.
            fields[key] = FrontmatterField(key, ArrayValue())
            array_key = key if not value_text else None
            continue

        array_key = None
        raw, _quoted = unquote(value_text)
        fields[key] = FrontmatterField(key, parse_value(value_text), raw)

    flush()
    return fields


def parse_frontmatter(content: str) -> FrontmatterDocument | None:
    """Parse a full record file.

    Returns None when the text has no frontmatter block; callers decide
    whether that is fatal.
    """
    split = split_frontmatter(content)
    if split is None:
        return None
    header_lines, body = split
    return FrontmatterDocument(fields=parse_header_lines(header_lines), body=body)
