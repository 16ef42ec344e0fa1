"""RecordService: inspect, normalize and locate record files."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from journalfm.domain.paths import sanitize_name
from journalfm.domain.records import derive_path
from journalfm.domain.schema import RECORD_SUFFIX, Record
from journalfm.domain.timeranges import decode_ranges
from journalfm.domain.types import RecordKind
from journalfm.infrastructure.filesystem import (
    RecordNotFoundError,
    atomic_write_text,
    find_record_files,
    read_record,
)
from journalfm.services.result import ServiceResult

if TYPE_CHECKING:
    from journalfm.config.settings import JournalSettings

logger = logging.getLogger(__name__)


class RecordService:
    """Record-file operations for the CLI.

    Every method returns a :class:`ServiceResult`; unreadable files and
    unknown kinds are reported as errors, never raised.
    """

    def __init__(self, settings: JournalSettings) -> None:
        self._settings = settings
        self._tz = settings.tz
        self._directories = settings.directories

    # --- Helpers ---

    def _load(self, op: str, kind: RecordKind, path: Path) -> Record | ServiceResult:
        try:
            record = read_record(path, kind)
        except RecordNotFoundError as exc:
            return ServiceResult.failure(op, "NOT_FOUND", str(exc), path=str(path))
        if record is None:
            return ServiceResult.failure(
                op,
                "INVALID_RECORD",
                f"{path.name} is not a readable {kind.value} record",
                path=str(path),
            )
        return record

    def _vault_relative(self, path: Path) -> str:
        resolved = path.resolve()
        root = self._settings.vault_root.resolve()
        if resolved.is_relative_to(root):
            return resolved.relative_to(root).as_posix()
        return str(path)

    # --- Operations ---

    def show(self, kind: RecordKind, path: Path) -> ServiceResult:
        """Parse *path* and return the record's fields."""
        loaded = self._load("show", kind, path)
        if isinstance(loaded, ServiceResult):
            return loaded
        return ServiceResult(
            ok=True,
            op="show",
            data={
                "kind": kind.value,
                "path": self._vault_relative(path),
                "record": loaded.model_dump(mode="json"),
            },
        )

    def format(self, kind: RecordKind, path: Path, *, check: bool = False) -> ServiceResult:
        """Re-serialize *path* in canonical form.

        With *check*, nothing is written and a non-canonical file is an
        error (for pre-commit style use).
        """
        op = "check_format" if check else "format"
        loaded = self._load(op, kind, path)
        if isinstance(loaded, ServiceResult):
            return loaded

        original = path.read_text(encoding="utf-8")
        rendered = loaded.to_markdown(self._tz)
        changed = rendered != original
        data: dict[str, Any] = {"path": self._vault_relative(path), "changed": changed}

        if check:
            if changed:
                return ServiceResult.failure(
                    op, "NOT_CANONICAL", f"{path.name} would be reformatted", **data
                )
            return ServiceResult(ok=True, op=op, data=data)

        if changed:
            atomic_write_text(path, rendered)
            logger.debug("Reformatted %s", path)
        return ServiceResult(ok=True, op=op, data=data)

    def locate(self, kind: RecordKind, path: Path) -> ServiceResult:
        """Compare where *path* lives with where its content says it belongs."""
        loaded = self._load("locate", kind, path)
        if isinstance(loaded, ServiceResult):
            return loaded

        directory, stem = derive_path(loaded, self._tz, directories=self._directories)
        expected = f"{directory}/{stem}{RECORD_SUFFIX}"
        current = self._vault_relative(path)
        return ServiceResult(
            ok=True,
            op="locate",
            data={
                "directory": directory,
                "filename": stem,
                "expected": expected,
                "current": current,
                "in_place": current == expected,
            },
        )

    def list_records(self, kind: RecordKind) -> ServiceResult:
        """Parse every file of *kind* in the vault."""
        warnings: list[str] = []
        items: list[dict[str, Any]] = []
        for path in find_record_files(
            self._settings.vault_root, kind, directories=self._directories
        ):
            record = read_record(path, kind)
            if record is None:
                warnings.append(f"Unreadable {kind.value} file: {self._vault_relative(path)}")
                continue
            items.append({"id": record.id, "path": self._vault_relative(path)})
        return ServiceResult(
            ok=True,
            op="list",
            data={"kind": kind.value, "count": len(items), "items": items},
            warnings=warnings,
        )

    @staticmethod
    def sanitize(name: str) -> ServiceResult:
        sanitized = sanitize_name(name)
        if not sanitized:
            return ServiceResult.failure(
                "sanitize", "EMPTY_NAME", "Name is empty after sanitizing", name=name
            )
        return ServiceResult(ok=True, op="sanitize", data={"name": name, "id": sanitized})

    @staticmethod
    def ranges(encoded: str) -> ServiceResult:
        decoded = decode_ranges(encoded)
        return ServiceResult(
            ok=True,
            op="ranges",
            data={
                "count": len(decoded),
                "ranges": [
                    {"start": r.start, "end": r.end, "duration": r.duration} for r in decoded
                ],
            },
        )
