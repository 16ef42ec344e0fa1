"""Tests for configuration section models."""

from __future__ import annotations

from zoneinfo import ZoneInfo

import pytest
from pydantic import ValidationError

from journalfm.config.models import CodecConfig, JournalConfig, VaultConfig
from journalfm.domain.types import RecordKind


class TestVaultConfig:
    def test_defaults(self) -> None:
        cfg = VaultConfig()
        assert cfg.name == "journal"
        assert cfg.directories() == {
            RecordKind.ENTRY: "Entries",
            RecordKind.PERSON: "People",
            RecordKind.PLACE: "Places",
            RecordKind.MEDIA: "Media",
        }

    def test_override(self) -> None:
        cfg = VaultConfig(people_dir="Contacts")
        assert cfg.directories()[RecordKind.PERSON] == "Contacts"

    def test_frozen(self) -> None:
        with pytest.raises(ValidationError):
            VaultConfig().name = "x"  # type: ignore[misc]


class TestCodecConfig:
    def test_defaults(self) -> None:
        cfg = CodecConfig()
        assert cfg.timezone is None
        assert cfg.zone() is None
        assert cfg.default_entry_tags == ["entry", "iPhone"]

    def test_named_zone(self) -> None:
        cfg = CodecConfig(timezone="Europe/Berlin")
        assert cfg.zone() == ZoneInfo("Europe/Berlin")

    def test_unknown_zone_rejected(self) -> None:
        with pytest.raises(ValidationError, match="Unknown time zone"):
            CodecConfig(timezone="Mars/Olympus_Mons")


class TestJournalConfig:
    def test_sections_from_dict(self) -> None:
        cfg = JournalConfig.model_validate({"vault": {"media_dir": "Library"}})
        assert cfg.vault.media_dir == "Library"
        assert cfg.codec == CodecConfig()
