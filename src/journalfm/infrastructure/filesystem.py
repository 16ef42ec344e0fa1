"""Filesystem storage for vault records.

INVARIANT: Files are truth. A record's location is a pure function of its
content (see :mod:`journalfm.domain.paths`), so a save that changes an
entry's creation minute is a move, never a copy.

There is no locking: two concurrent load/edit/save cycles on the same
file are last-write-wins.
"""

from __future__ import annotations

import logging
import os
import tempfile
from datetime import tzinfo
from pathlib import Path

from journalfm.domain.paths import entity_directory
from journalfm.domain.records import derive_path, get_record_model
from journalfm.domain.schema import RECORD_SUFFIX, Record
from journalfm.domain.types import RecordKind

logger = logging.getLogger(__name__)

# Directories to skip when discovering record files.
_SKIP_DIRS = frozenset({".obsidian", ".git", ".trash", "_attachments"})


class RecordStorageError(Exception):
    """Base error for record file operations."""

    def __init__(self, message: str, path: Path) -> None:
        super().__init__(message)
        self.path = path


class RecordExistsError(RecordStorageError):
    pass


class RecordNotFoundError(RecordStorageError):
    pass


# ---------------------------------------------------------------------------
# Path resolution
# ---------------------------------------------------------------------------


def resolve_record_path(
    vault_root: Path,
    record: Record,
    tz: tzinfo | None = None,
    *,
    directories: dict[RecordKind, str] | None = None,
) -> Path:
    """Absolute path of *record* inside *vault_root*.

    Raises:
        RecordStorageError: If the derived path escapes the vault root.
    """
    directory, stem = derive_path(record, tz, directories=directories)
    result = vault_root / directory / f"{stem}{RECORD_SUFFIX}"

    # Guard against traversal via a crafted id
    if not result.resolve().is_relative_to(vault_root.resolve()):
        msg = f"Path escapes vault root: {result}"
        raise RecordStorageError(msg, result)
    return result


def find_record_files(
    vault_root: Path,
    kind: RecordKind,
    *,
    directories: dict[RecordKind, str] | None = None,
) -> list[Path]:
    """Discover all ``.md`` files under the folder for *kind*."""
    folder = (directories or {}).get(kind) or entity_directory(kind)
    root = vault_root / folder
    if not root.exists():
        return []

    results: list[Path] = []
    for path in root.rglob(f"*{RECORD_SUFFIX}"):
        if not path.is_file():
            continue
        if any(part in _SKIP_DIRS for part in path.relative_to(root).parts):
            continue
        results.append(path)
    return sorted(results)


# ---------------------------------------------------------------------------
# File I/O
# ---------------------------------------------------------------------------


def atomic_write_text(path: Path, text: str) -> None:
    """Write *text* via a sibling temp file and ``os.replace``."""
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as fh:
            fh.write(text)
        os.replace(tmp_name, path)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise


def read_record(path: Path, kind: RecordKind) -> Record | None:
    """Read and parse a record file. Returns None if it is not a valid record.

    Raises:
        RecordNotFoundError: If *path* does not exist.
    """
    if not path.is_file():
        msg = f"Record file not found: {path}"
        raise RecordNotFoundError(msg, path)
    content = path.read_text(encoding="utf-8")
    record = get_record_model(kind).parse(content, path.name)
    if record is None:
        logger.warning("Skipping unreadable %s file %s", kind.value, path)
    return record


def write_record(
    vault_root: Path,
    record: Record,
    tz: tzinfo | None = None,
    *,
    overwrite: bool = False,
    directories: dict[RecordKind, str] | None = None,
) -> Path:
    """Serialize *record* to its derived location.

    Raises:
        RecordExistsError: If the file exists and *overwrite* is False.
    """
    path = resolve_record_path(vault_root, record, tz, directories=directories)
    if path.exists() and not overwrite:
        msg = f"Record file already exists: {path}"
        raise RecordExistsError(msg, path)
    atomic_write_text(path, record.to_markdown(tz))
    logger.debug("Wrote %s record %s", record.record_kind().value, path)
    return path


def relocate_entry(
    vault_root: Path,
    old: Record,
    new: Record,
    tz: tzinfo | None = None,
    *,
    directories: dict[RecordKind, str] | None = None,
) -> Path:
    """Save *new* and remove the file of *old* when its location changed.

    Used when an edit changes ``date_created``: the new path is written
    first, then the old file is deleted, so at most one copy survives.

    Raises:
        RecordNotFoundError: If the old file does not exist.
        RecordExistsError: If another record already occupies the new path.
    """
    old_path = resolve_record_path(vault_root, old, tz, directories=directories)
    if not old_path.is_file():
        msg = f"Record file not found: {old_path}"
        raise RecordNotFoundError(msg, old_path)

    new_path = resolve_record_path(vault_root, new, tz, directories=directories)
    if new_path == old_path:
        return write_record(vault_root, new, tz, overwrite=True, directories=directories)

    write_record(vault_root, new, tz, overwrite=False, directories=directories)
    old_path.unlink()
    logger.debug("Moved record %s -> %s", old_path, new_path)
    return new_path
