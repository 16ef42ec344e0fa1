"""Person records.

People are stored under ``People/{sanitized name}.md``. Optional contact
fields that the editing template always shows (pronouns, tags, email,
phone, address, birthday) are written as bare ``key:`` placeholders when
empty, so a person edited in a text editor still lists them.

Any unmodelled key holding a plain string is treated as a social media
handle (``instagram: ada``).
"""

from __future__ import annotations

from datetime import date, tzinfo
from typing import Any, ClassVar, Self

from pydantic import BaseModel, Field, ValidationError

from journalfm.domain.fields import (
    choice_decoder,
    decode_day,
    decode_list,
    decode_text,
    encode_choice,
    encode_day,
    encode_list,
    encode_text,
)
from journalfm.domain.frontmatter import FrontmatterField
from journalfm.domain.paths import sanitize_name
from journalfm.domain.render import EmptyPolicy, render_scalar
from journalfm.domain.schema import FieldSpec, Record
from journalfm.domain.types import RecordKind, RelationshipType
from journalfm.domain.values import StringValue, parse_int


class Birthday(BaseModel):
    """Month and day, with the year only when it is known.

    Legacy files store ``MM-DD``; newer ones ``YYYY-MM-DD``. The year is
    what makes an age computable, so its absence is preserved.
    """

    model_config = {"frozen": True}

    year: int | None = Field(default=None, ge=1, le=9999)
    month: int = Field(ge=1, le=12)
    day: int = Field(ge=1, le=31)

    def __str__(self) -> str:
        if self.year is not None:
            return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"
        return f"{self.month:02d}-{self.day:02d}"

    def age_on(self, today: date) -> int | None:
        """Whole years on *today*, or None when the year is unknown."""
        if self.year is None:
            return None
        had_birthday = (today.month, today.day) >= (self.month, self.day)
        return today.year - self.year - (0 if had_birthday else 1)


def parse_birthday(text: str) -> Birthday | None:
    parts = text.strip().split("-")
    numbers = [parse_int(part) for part in parts]
    if any(number is None for number in numbers):
        return None
    try:
        if len(numbers) == 2:
            return Birthday(month=numbers[0], day=numbers[1])
        if len(numbers) == 3:
            return Birthday(year=numbers[0], month=numbers[1], day=numbers[2])
    except ValidationError:
        return None
    return None


def decode_birthday(field: FrontmatterField) -> Birthday | None:
    text = decode_text(field)
    return parse_birthday(text) if text is not None else None


def encode_birthday(key: str, value: Birthday, tz: tzinfo | None = None) -> list[str]:
    return render_scalar(key, str(value))


PERSON_FIELDS: tuple[FieldSpec, ...] = (
    FieldSpec("pronouns", "pronouns", decode_text, encode_text, EmptyPolicy.PLACEHOLDER),
    FieldSpec(
        "relationship",
        "relationship",
        choice_decoder(RelationshipType, RelationshipType.OTHER),
        encode_choice,
    ),
    FieldSpec("tags", "tags", decode_list, encode_list, EmptyPolicy.PLACEHOLDER),
    FieldSpec("email", "email", decode_text, encode_text, EmptyPolicy.PLACEHOLDER),
    FieldSpec("phone", "phone", decode_text, encode_text, EmptyPolicy.PLACEHOLDER),
    FieldSpec("address", "address", decode_text, encode_text, EmptyPolicy.PLACEHOLDER),
    FieldSpec("birthday", "birthday", decode_birthday, encode_birthday, EmptyPolicy.PLACEHOLDER),
    FieldSpec("met_date", "met_date", decode_day, encode_day),
    FieldSpec("color", "color", decode_text, encode_text),
    FieldSpec("photo", "photo", decode_text, encode_text),
    FieldSpec("aliases", "aliases", decode_list, encode_list, EmptyPolicy.EMPTY_LIST),
)


class Person(Record):
    """Someone who appears in the journal."""

    _kind: ClassVar[RecordKind] = RecordKind.PERSON
    _fields: ClassVar[tuple[FieldSpec, ...]] = PERSON_FIELDS

    name: str
    pronouns: str | None = None
    relationship: RelationshipType = RelationshipType.OTHER
    tags: list[str] = Field(default_factory=list)
    email: str | None = None
    phone: str | None = None
    address: str | None = None
    birthday: Birthday | None = None
    met_date: date | None = None
    color: str | None = None
    photo: str | None = None
    aliases: list[str] = Field(default_factory=list)

    @classmethod
    def _build(cls, stem: str | None, known: dict[str, Any], **state: Any) -> Self | None:
        if stem is None:
            return super()._build(stem, known, **state)
        return cls(id=stem, name=stem, **known, **state)

    @classmethod
    def create(cls, name: str, **fields: Any) -> Self:
        """New person whose id is the sanitized *name*."""
        return cls(id=sanitize_name(name), name=name, **fields)

    @property
    def social_media(self) -> dict[str, str]:
        """Unmodelled string fields, read as ``platform -> handle``."""
        return {
            key: value.value
            for key, value in self.unknown_fields.items()
            if isinstance(value, StringValue)
        }

    def set_social_handle(self, platform: str, handle: str) -> None:
        self.set_unknown(platform.lower(), StringValue(value=handle))
