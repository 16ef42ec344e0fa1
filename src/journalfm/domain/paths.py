"""Storage path and filename derivation.

Two identity strategies:

- Entries: filename is the creation timestamp ``yyyyMMddHHmm`` and the
  directory is ``Entries/{year}/{MM-MonthName}/{DD}``, both in the local
  (or configured) time zone. Changing ``date_created`` therefore moves
  the file.
- People, places, media: filename is ``sanitize_name(name)``, which is
  also the record id.

INVARIANT: ``sanitize_name`` is idempotent and its output never contains
``<>:"/\\|?*``.
"""

from __future__ import annotations

import re
from datetime import datetime, tzinfo

from journalfm.domain.types import RecordKind

_RESERVED_CHARS_RE = re.compile(r'[<>:"/\\|?*]')
_WHITESPACE_RE = re.compile(r"\s+")

# Fixed English names; directory layout must not depend on the process locale.
MONTH_NAMES: tuple[str, ...] = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

DEFAULT_DIRECTORIES: dict[RecordKind, str] = {
    RecordKind.ENTRY: "Entries",
    RecordKind.PERSON: "People",
    RecordKind.PLACE: "Places",
    RecordKind.MEDIA: "Media",
}


def sanitize_name(name: str) -> str:
    """Strip filesystem-reserved characters and collapse whitespace.

    Examples:
        >>> sanitize_name('What: A "Movie"?')
        'What A Movie'
        >>> sanitize_name("  Ada   Lovelace ")
        'Ada Lovelace'
    """
    cleaned = _RESERVED_CHARS_RE.sub("", name)
    return _WHITESPACE_RE.sub(" ", cleaned).strip()


def _localize(moment: datetime, tz: tzinfo | None) -> datetime:
    return moment.astimezone(tz)


def entry_filename(created: datetime, tz: tzinfo | None = None) -> str:
    """``yyyyMMddHHmm`` of the creation timestamp, without a suffix."""
    return _localize(created, tz).strftime("%Y%m%d%H%M")


def month_folder(month: int) -> str:
    """``3`` -> ``03-March``."""
    return f"{month:02d}-{MONTH_NAMES[month - 1]}"


def entry_directory(
    created: datetime,
    tz: tzinfo | None = None,
    *,
    root: str = DEFAULT_DIRECTORIES[RecordKind.ENTRY],
) -> str:
    """``Entries/{year}/{MM-MonthName}/{DD}`` for the creation timestamp."""
    local = _localize(created, tz)
    return f"{root}/{local.year}/{month_folder(local.month)}/{local.day:02d}"


def entity_directory(kind: RecordKind) -> str:
    """Top-level vault directory for a record kind."""
    return DEFAULT_DIRECTORIES[kind]
