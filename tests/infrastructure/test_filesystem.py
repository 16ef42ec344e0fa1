"""Tests for record file storage."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

from journalfm.domain.entry import Entry
from journalfm.domain.person import Person
from journalfm.domain.types import RecordKind
from journalfm.infrastructure.filesystem import (
    RecordExistsError,
    RecordNotFoundError,
    RecordStorageError,
    atomic_write_text,
    find_record_files,
    read_record,
    relocate_entry,
    resolve_record_path,
    write_record,
)

PST = timezone(timedelta(hours=-8))


def _entry(hour: int = 10, day: int = 15) -> Entry:
    return Entry.create("Body", created=datetime(2024, 1, day, hour, 0, tzinfo=PST), tz=PST)


class TestPaths:
    def test_resolve_entry(self, tmp_path: Path) -> None:
        path = resolve_record_path(tmp_path, _entry(), PST)
        assert path == tmp_path / "Entries" / "2024" / "01-January" / "15" / "202401151000.md"

    def test_resolve_with_renamed_folder(self, tmp_path: Path) -> None:
        person = Person.create("Ada")
        path = resolve_record_path(tmp_path, person, directories={RecordKind.PERSON: "Contacts"})
        assert path == tmp_path / "Contacts" / "Ada.md"

    def test_traversal_rejected(self, tmp_path: Path) -> None:
        person = Person(id="../../escape", name="x")
        with pytest.raises(RecordStorageError, match="escapes vault root"):
            resolve_record_path(tmp_path, person)


class TestReadWrite:
    def test_write_then_read(self, tmp_path: Path) -> None:
        entry = _entry()
        path = write_record(tmp_path, entry, PST)
        assert path.read_text(encoding="utf-8") == entry.to_markdown(PST)
        loaded = read_record(path, RecordKind.ENTRY)
        assert loaded is not None
        assert loaded.date_created == entry.date_created
        assert loaded.body == "Body"

    def test_write_refuses_overwrite(self, tmp_path: Path) -> None:
        write_record(tmp_path, _entry(), PST)
        with pytest.raises(RecordExistsError):
            write_record(tmp_path, _entry(), PST)

    def test_write_overwrite(self, tmp_path: Path) -> None:
        write_record(tmp_path, _entry(), PST)
        entry = _entry()
        entry.body = "Changed"
        path = write_record(tmp_path, entry, PST, overwrite=True)
        assert path.read_text(encoding="utf-8").endswith("\nChanged\n")

    def test_read_missing(self, tmp_path: Path) -> None:
        with pytest.raises(RecordNotFoundError):
            read_record(tmp_path / "nope.md", RecordKind.PERSON)

    def test_read_unparseable_returns_none(self, tmp_path: Path) -> None:
        path = tmp_path / "People" / "Bad.md"
        path.parent.mkdir()
        path.write_text("no frontmatter", encoding="utf-8")
        assert read_record(path, RecordKind.PERSON) is None

    def test_atomic_write_leaves_no_temp_files(self, tmp_path: Path) -> None:
        target = tmp_path / "a" / "b.md"
        atomic_write_text(target, "hello\n")
        atomic_write_text(target, "again\n")
        assert target.read_text(encoding="utf-8") == "again\n"
        assert [p.name for p in target.parent.iterdir()] == ["b.md"]


class TestRelocate:
    def test_moves_when_date_changes(self, tmp_path: Path) -> None:
        old = _entry(hour=10)
        old_path = write_record(tmp_path, old, PST)
        new = old.model_copy(deep=True)
        new.date_created = datetime(2024, 1, 16, 8, 0, tzinfo=PST)

        new_path = relocate_entry(tmp_path, old, new, PST)

        assert not old_path.exists()
        assert new_path == tmp_path / "Entries" / "2024" / "01-January" / "16" / "202401160800.md"
        assert find_record_files(tmp_path, RecordKind.ENTRY) == [new_path]

    def test_same_location_overwrites(self, tmp_path: Path) -> None:
        old = _entry()
        path = write_record(tmp_path, old, PST)
        new = old.model_copy(deep=True)
        new.body = "Edited"
        assert relocate_entry(tmp_path, old, new, PST) == path
        assert path.read_text(encoding="utf-8").endswith("\nEdited\n")

    def test_missing_old_file(self, tmp_path: Path) -> None:
        with pytest.raises(RecordNotFoundError):
            relocate_entry(tmp_path, _entry(), _entry(hour=11), PST)

    def test_target_occupied(self, tmp_path: Path) -> None:
        old = _entry(hour=10)
        write_record(tmp_path, old, PST)
        write_record(tmp_path, _entry(hour=11), PST)
        with pytest.raises(RecordExistsError):
            relocate_entry(tmp_path, old, _entry(hour=11), PST)
        assert resolve_record_path(tmp_path, old, PST).exists()


class TestFindRecordFiles:
    def test_finds_nested_and_skips_hidden(self, tmp_path: Path) -> None:
        write_record(tmp_path, _entry(day=1), PST)
        write_record(tmp_path, _entry(day=2), PST)
        trash = tmp_path / "Entries" / ".trash" / "old.md"
        trash.parent.mkdir(parents=True)
        trash.write_text("---\n---\n")
        (tmp_path / "Entries" / "notes.txt").write_text("x")

        found = find_record_files(tmp_path, RecordKind.ENTRY)
        assert [p.name for p in found] == ["202401011000.md", "202401021000.md"]

    def test_missing_folder(self, tmp_path: Path) -> None:
        assert find_record_files(tmp_path, RecordKind.MEDIA) == []
