"""Record registry and the codec's public entry points.

- ``parse_record(kind, text, filename)`` -> record or None
- ``serialize_record(record, tz)`` -> file text
- ``derive_path(record, tz)`` -> ``(directory, filename)``
"""

from __future__ import annotations

from datetime import tzinfo

from journalfm.domain.entry import Entry
from journalfm.domain.media import Media
from journalfm.domain.person import Person
from journalfm.domain.place import Place
from journalfm.domain.schema import Record
from journalfm.domain.types import RecordKind

RECORD_REGISTRY: dict[RecordKind, type[Record]] = {
    RecordKind.ENTRY: Entry,
    RecordKind.PERSON: Person,
    RecordKind.PLACE: Place,
    RecordKind.MEDIA: Media,
}


def get_record_model(kind: RecordKind | str) -> type[Record]:
    """Look up the record class for *kind*.

    Raises:
        KeyError: If *kind* is not a known record kind.
    """
    try:
        return RECORD_REGISTRY[RecordKind(kind)]
    except ValueError:
        msg = f"No record model registered for kind={kind!r}"
        raise KeyError(msg) from None


def parse_record(kind: RecordKind | str, content: str, filename: str | None = None) -> Record | None:
    return get_record_model(kind).parse(content, filename)


def serialize_record(record: Record, tz: tzinfo | None = None) -> str:
    return record.to_markdown(tz)


def derive_path(
    record: Record,
    tz: tzinfo | None = None,
    *,
    directories: dict[RecordKind, str] | None = None,
) -> tuple[str, str]:
    """``(directory, filename)`` for *record*; filename has no suffix.

    *directories* overrides the top-level folder per kind (for vaults that
    rename ``Entries`` or ``People``).
    """
    directory = record.directory(tz)
    kind = record.record_kind()
    if directories and kind in directories:
        _head, _, tail = directory.partition("/")
        directory = "/".join(part for part in (directories[kind], tail) if part)
    return directory, record.filename(tz)
