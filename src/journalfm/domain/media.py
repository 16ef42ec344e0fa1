"""Media records (movies, TV shows, books, podcasts, albums).

``type`` is required: a file whose type is missing or outside
:class:`MediaType` does not form a record. ``title`` falls back to the
filename stem. Type-specific keys (``season``, ``isbn``, ``rating``...)
are not modelled and round-trip through ``unknown_fields``.
"""

from __future__ import annotations

import logging
from typing import Any, ClassVar, Self

from pydantic import Field

from journalfm.domain.fields import (
    choice_decoder,
    decode_int,
    decode_list,
    decode_text,
    encode_choice,
    encode_int,
    encode_list,
    encode_quoted,
    encode_text,
)
from journalfm.domain.paths import sanitize_name
from journalfm.domain.render import EmptyPolicy
from journalfm.domain.schema import FieldSpec, Record
from journalfm.domain.types import MediaType, RecordKind

logger = logging.getLogger(__name__)

MEDIA_FIELDS: tuple[FieldSpec, ...] = (
    FieldSpec("type", "media_type", choice_decoder(MediaType), encode_choice),
    FieldSpec("title", "title", decode_text, encode_text),
    FieldSpec("creator", "creator", decode_text, encode_text),
    FieldSpec("release_year", "release_year", decode_int, encode_int),
    FieldSpec("genre", "genre", decode_text, encode_text),
    FieldSpec("artwork_url", "artwork_url", decode_text, encode_text),
    # Store ids are numeric strings; always quoted so they stay strings.
    FieldSpec("itunes_id", "itunes_id", decode_text, encode_quoted),
    FieldSpec("itunes_url", "itunes_url", decode_text, encode_text),
    FieldSpec("tags", "tags", decode_list, encode_list),
    FieldSpec("aliases", "aliases", decode_list, encode_list, EmptyPolicy.EMPTY_LIST),
)


class Media(Record):
    _kind: ClassVar[RecordKind] = RecordKind.MEDIA
    _fields: ClassVar[tuple[FieldSpec, ...]] = MEDIA_FIELDS

    title: str
    media_type: MediaType
    creator: str | None = None
    release_year: int | None = None
    genre: str | None = None
    artwork_url: str | None = None
    itunes_id: str | None = None
    itunes_url: str | None = None
    tags: list[str] = Field(default_factory=list)
    aliases: list[str] = Field(default_factory=list)

    @classmethod
    def _build(cls, stem: str | None, known: dict[str, Any], **state: Any) -> Self | None:
        if "media_type" not in known:
            logger.debug("Media %s has no recognised type", stem or "<text>")
            return None
        if stem is None:
            return super()._build(stem, known, **state)
        known.setdefault("title", stem)
        return cls(id=stem, **known, **state)

    @classmethod
    def create(cls, title: str, media_type: MediaType, **fields: Any) -> Self:
        """New media record whose id is the sanitized *title*."""
        return cls(id=sanitize_name(title), title=title, media_type=media_type, **fields)
