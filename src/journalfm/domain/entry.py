"""Journal entry records.

An entry is identified by its creation minute: the file lives at
``Entries/{year}/{MM-MonthName}/{DD}/{yyyyMMddHHmm}.md``. ``date_created``
is the only required key; everything else is optional and omitted from
the header when empty.
"""

from __future__ import annotations

import logging
from datetime import datetime, tzinfo
from typing import Any, ClassVar, Self

from pydantic import Field

from journalfm.domain.fields import (
    Coordinates,
    decode_coordinates,
    decode_double,
    decode_int,
    decode_list,
    decode_moment,
    decode_text,
    decode_wikilink,
    decode_wikilink_list,
    encode_coordinates,
    encode_int,
    encode_list,
    encode_moment,
    encode_one_decimal,
    encode_quoted,
    encode_text,
    encode_wikilink,
    encode_wikilink_list,
)
from journalfm.domain.paths import entry_directory, entry_filename
from journalfm.domain.schema import FieldSpec, Record
from journalfm.domain.types import RecordKind

logger = logging.getLogger(__name__)

DEFAULT_ENTRY_TAGS: tuple[str, ...] = ("entry", "iPhone")

ENTRY_FIELDS: tuple[FieldSpec, ...] = (
    FieldSpec("date_created", "date_created", decode_moment, encode_moment),
    FieldSpec("tags", "tags", decode_list, encode_list),
    FieldSpec("place", "place", decode_wikilink, encode_wikilink),
    FieldSpec("location", "location", decode_coordinates, encode_coordinates),
    FieldSpec("people", "people", decode_wikilink_list, encode_wikilink_list),
    FieldSpec("temp", "temperature", decode_int, encode_int),
    FieldSpec("cond", "condition", decode_text, encode_text),
    FieldSpec("aqi", "aqi", decode_int, encode_int),
    FieldSpec("humidity", "humidity", decode_int, encode_int),
    FieldSpec("mood_valence", "mood_valence", decode_double, encode_one_decimal),
    FieldSpec("mood_labels", "mood_labels", decode_list, encode_list),
    FieldSpec("mood_associations", "mood_associations", decode_list, encode_list),
    FieldSpec("audio_attachments", "audio_attachments", decode_list, encode_list),
    FieldSpec("recording_device", "recording_device", decode_text, encode_quoted),
    FieldSpec("sample_rate", "sample_rate", decode_int, encode_int),
    FieldSpec("bit_depth", "bit_depth", decode_int, encode_int),
)


def split_at_first_heading(body: str) -> tuple[str, str | None]:
    """Split *body* before its first markdown heading line (``#``... + space).

    Returns ``(user_content, preserved_sections)``; the second part is None
    when the body has no heading.
    """
    lines = body.split("\n")
    for index, line in enumerate(lines):
        stripped = line.strip()
        hashes = len(stripped) - len(stripped.lstrip("#"))
        if hashes and stripped[hashes : hashes + 1] == " ":
            content = "\n".join(lines[:index]).strip()
            preserved = "\n".join(lines[index:])
            return content, preserved or None
    return body, None


class Entry(Record):
    """A journal entry with weather, mood and audio metadata."""

    _kind: ClassVar[RecordKind] = RecordKind.ENTRY
    _fields: ClassVar[tuple[FieldSpec, ...]] = ENTRY_FIELDS

    date_created: datetime
    tags: list[str] = Field(default_factory=list)
    place: str | None = None
    location: Coordinates | None = None
    people: list[str] = Field(default_factory=list)
    temperature: int | None = None
    condition: str | None = None
    aqi: int | None = None
    humidity: int | None = None
    mood_valence: float | None = None
    mood_labels: list[str] = Field(default_factory=list)
    mood_associations: list[str] = Field(default_factory=list)
    audio_attachments: list[str] = Field(default_factory=list)
    recording_device: str | None = None
    sample_rate: int | None = None
    bit_depth: int | None = None

    @classmethod
    def _build(cls, stem: str | None, known: dict[str, Any], **state: Any) -> Self | None:
        created = known.get("date_created")
        if created is None:
            logger.debug("Entry %s has no readable date_created", stem or "<text>")
            return None
        return cls(id=stem or entry_filename(created), **known, **state)

    @classmethod
    def create(
        cls,
        content: str,
        *,
        place: str | None = None,
        tags: list[str] | None = None,
        created: datetime | None = None,
        tz: tzinfo | None = None,
    ) -> Self:
        """Build a new, never-saved entry stamped with *created* (default now)."""
        moment = created or datetime.now().astimezone(tz)
        return cls(
            id=entry_filename(moment, tz),
            date_created=moment,
            tags=list(DEFAULT_ENTRY_TAGS if tags is None else tags),
            place=place,
            body=content.strip(),
        )

    @property
    def user_content(self) -> str:
        return split_at_first_heading(self.body)[0]

    @property
    def preserved_sections(self) -> str | None:
        return split_at_first_heading(self.body)[1]

    def is_valid(self) -> bool:
        return bool(self.body.strip())

    def filename(self, tz: tzinfo | None = None) -> str:
        return entry_filename(self.date_created, tz)

    def directory(self, tz: tzinfo | None = None) -> str:
        return entry_directory(self.date_created, tz)
