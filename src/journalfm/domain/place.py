"""Place records: named locations with a callout category."""

from __future__ import annotations

from typing import Any, ClassVar, Self

from pydantic import Field

from journalfm.domain.fields import (
    Coordinates,
    choice_decoder,
    decode_coordinates,
    decode_list,
    decode_text,
    encode_choice,
    encode_coordinates,
    encode_list,
    encode_text,
)
from journalfm.domain.paths import sanitize_name
from journalfm.domain.render import EmptyPolicy
from journalfm.domain.schema import FieldSpec, Record
from journalfm.domain.types import PlaceCallout, RecordKind

PLACE_FIELDS: tuple[FieldSpec, ...] = (
    FieldSpec("location", "location", decode_coordinates, encode_coordinates),
    FieldSpec("addr", "address", decode_text, encode_text),
    FieldSpec("tags", "tags", decode_list, encode_list, EmptyPolicy.EMPTY_LIST),
    FieldSpec(
        "callout",
        "callout",
        choice_decoder(PlaceCallout, PlaceCallout.PLACE),
        encode_choice,
    ),
    FieldSpec("pin", "pin", decode_text, encode_text),
    FieldSpec("color", "color", decode_text, encode_text),
    FieldSpec("url", "url", decode_text, encode_text),
    FieldSpec("aliases", "aliases", decode_list, encode_list, EmptyPolicy.EMPTY_LIST),
)


class Place(Record):
    _kind: ClassVar[RecordKind] = RecordKind.PLACE
    _fields: ClassVar[tuple[FieldSpec, ...]] = PLACE_FIELDS

    name: str
    location: Coordinates | None = None
    address: str | None = None
    tags: list[str] = Field(default_factory=list)
    callout: PlaceCallout = PlaceCallout.PLACE
    pin: str | None = None
    color: str | None = None
    url: str | None = None
    aliases: list[str] = Field(default_factory=list)

    @classmethod
    def _build(cls, stem: str | None, known: dict[str, Any], **state: Any) -> Self | None:
        if stem is None:
            return super()._build(stem, known, **state)
        return cls(id=stem, name=stem, **known, **state)

    @classmethod
    def create(cls, name: str, **fields: Any) -> Self:
        """New place whose id is the sanitized *name*."""
        return cls(id=sanitize_name(name), name=name, **fields)
