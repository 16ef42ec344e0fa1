"""Schema-table engine shared by every record kind.

Each record class declares an ordered table of :class:`FieldSpec` rows.
The table drives both directions:

- **parse**: every header key is looked up in the table; known keys are
  decoded onto typed attributes, everything else lands in
  ``unknown_fields`` with its inferred :data:`TypedValue`.
- **serialize**: keys are written in ``field_order`` (file order for a
  parsed record), then any known field not yet written in table order,
  then any unknown field added without an order entry.

INVARIANT: a parse/serialize cycle never drops a key. A known key whose
source cannot be decoded is kept verbatim in ``unknown_fields`` until the
application assigns a typed value to it.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import tzinfo
from pathlib import PurePosixPath
from typing import Any, ClassVar, Self

from pydantic import BaseModel, Field

from journalfm.domain.fields import Decoder, Encoder
from journalfm.domain.frontmatter import FrontmatterDocument, parse_frontmatter
from journalfm.domain.paths import entity_directory
from journalfm.domain.render import EmptyPolicy, render_document, render_empty, render_unknown
from journalfm.domain.types import RecordKind
from journalfm.domain.values import ArrayValue, TypedValue

logger = logging.getLogger(__name__)

RECORD_SUFFIX = ".md"


@dataclass(frozen=True)
class FieldSpec:
    """One known frontmatter key and how it maps onto a record attribute."""

    key: str
    attr: str
    decode: Decoder
    encode: Encoder
    empty: EmptyPolicy = EmptyPolicy.OMIT


def is_empty(value: Any) -> bool:
    return value is None or value == "" or value == []


def filename_stem(filename: str) -> str:
    """``People/Ada Lovelace.md`` -> ``Ada Lovelace``."""
    name = PurePosixPath(filename.replace("\\", "/")).name
    return name.removesuffix(RECORD_SUFFIX)


class Record(BaseModel):
    """Base record: typed known fields plus opaque unknown fields.

    Subclasses set ``_kind`` and ``_fields`` and may override
    :meth:`_build` to apply required-field and default rules.
    """

    model_config = {"validate_assignment": True}

    id: str
    body: str = ""
    unknown_fields: dict[str, TypedValue] = Field(default_factory=dict)
    field_order: list[str] = Field(default_factory=list)

    _kind: ClassVar[RecordKind]
    _fields: ClassVar[tuple[FieldSpec, ...]] = ()

    # --- Schema lookup ---

    @classmethod
    def record_kind(cls) -> RecordKind:
        return cls._kind

    @classmethod
    def known_keys(cls) -> list[str]:
        return [spec.key for spec in cls._fields]

    @classmethod
    def field_spec(cls, key: str) -> FieldSpec | None:
        for spec in cls._fields:
            if spec.key == key:
                return spec
        return None

    # --- Parse ---

    @classmethod
    def parse(cls, content: str, filename: str | None = None) -> Self | None:
        """Parse a record file. Returns None when it cannot form a record."""
        document = parse_frontmatter(content)
        if document is None:
            logger.debug("No frontmatter block in %s", filename or "<text>")
            return None
        return cls.from_document(document, filename)

    @classmethod
    def from_document(
        cls,
        document: FrontmatterDocument,
        filename: str | None = None,
    ) -> Self | None:
        """Map a parsed document onto a record of this kind."""
        known: dict[str, Any] = {}
        unknown: dict[str, TypedValue] = {}

        for key, parsed in document.fields.items():
            spec = cls.field_spec(key)
            if spec is None:
                unknown[key] = parsed.value
                continue
            decoded = spec.decode(parsed)
            if decoded is None:
                if parsed.value != ArrayValue():
                    logger.debug(
                        "Keeping undecodable %s field %r verbatim",
                        cls._kind.value,
                        key,
                    )
                    unknown[key] = parsed.value
                continue
            known[spec.attr] = decoded

        stem = filename_stem(filename) if filename else None
        return cls._build(
            stem,
            known,
            unknown_fields=unknown,
            field_order=document.order,
            body=document.body,
        )

    @classmethod
    def _build(cls, stem: str | None, known: dict[str, Any], **state: Any) -> Self | None:
        """Construct the record; named records take their id from the filename."""
        if stem is None:
            logger.debug("No filename for %s record; cannot derive id", cls._kind.value)
            return None
        return cls(id=stem, **known, **state)

    # --- Serialize ---

    def header_lines(self, tz: tzinfo | None = None) -> list[str]:
        lines: list[str] = []
        written: set[str] = set()

        for key in self.field_order:
            if key in written:
                continue
            written.add(key)
            spec = self.field_spec(key)
            if spec is not None:
                lines.extend(self._render_known(spec, tz))
            elif key in self.unknown_fields:
                lines.extend(render_unknown(key, self.unknown_fields[key]))

        for spec in self._fields:
            if spec.key not in written:
                written.add(spec.key)
                lines.extend(self._render_known(spec, tz))

        for key, value in self.unknown_fields.items():
            if key not in written:
                lines.extend(render_unknown(key, value))

        return lines

    def _render_known(self, spec: FieldSpec, tz: tzinfo | None) -> list[str]:
        value = getattr(self, spec.attr)
        if not is_empty(value):
            return spec.encode(spec.key, value, tz)
        if spec.key in self.unknown_fields:
            return render_unknown(spec.key, self.unknown_fields[spec.key])
        return render_empty(spec.key, spec.empty)

    def to_markdown(self, tz: tzinfo | None = None) -> str:
        """Render the full file text for this record."""
        return render_document(self.header_lines(tz), self.body)

    # --- Unknown-field editing ---

    def set_unknown(self, key: str, value: TypedValue) -> None:
        """Add or replace an unmodelled field, keeping its order slot."""
        self.unknown_fields = {**self.unknown_fields, key: value}
        if key not in self.field_order:
            self.field_order = [*self.field_order, key]

    def drop_fields(self, keys: Iterable[str]) -> None:
        """Forget unknown values and order slots for *keys*."""
        doomed = set(keys)
        self.unknown_fields = {k: v for k, v in self.unknown_fields.items() if k not in doomed}
        self.field_order = [k for k in self.field_order if k not in doomed]

    # --- Storage identity ---

    def filename(self, tz: tzinfo | None = None) -> str:
        """Filename stem (no suffix) the record is stored under."""
        return self.id

    def directory(self, tz: tzinfo | None = None) -> str:
        """Vault-relative directory the record is stored in."""
        return entity_directory(self.record_kind())

    def relative_path(self, tz: tzinfo | None = None) -> str:
        """Vault-relative file path, suffix included."""
        return f"{self.directory(tz)}/{self.filename(tz)}{RECORD_SUFFIX}"
