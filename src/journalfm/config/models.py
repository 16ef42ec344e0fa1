"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, journalfm.toml only contains
overrides. A vault that follows the standard layout needs no config file.
"""

from __future__ import annotations

from datetime import tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import BaseModel, Field, field_validator

from journalfm.domain.entry import DEFAULT_ENTRY_TAGS
from journalfm.domain.paths import DEFAULT_DIRECTORIES
from journalfm.domain.types import RecordKind

# --- journalfm.toml sections ---


class VaultConfig(BaseModel):
    """[vault] section: top-level folder names."""

    model_config = {"frozen": True}

    name: str = "journal"
    entries_dir: str = DEFAULT_DIRECTORIES[RecordKind.ENTRY]
    people_dir: str = DEFAULT_DIRECTORIES[RecordKind.PERSON]
    places_dir: str = DEFAULT_DIRECTORIES[RecordKind.PLACE]
    media_dir: str = DEFAULT_DIRECTORIES[RecordKind.MEDIA]

    def directories(self) -> dict[RecordKind, str]:
        return {
            RecordKind.ENTRY: self.entries_dir,
            RecordKind.PERSON: self.people_dir,
            RecordKind.PLACE: self.places_dir,
            RecordKind.MEDIA: self.media_dir,
        }


class CodecConfig(BaseModel):
    """[codec] section.

    ``timezone`` is an IANA name used for entry paths and written
    timestamps; unset means the process-local zone.
    """

    model_config = {"frozen": True}

    timezone: str | None = None
    default_entry_tags: list[str] = Field(default_factory=lambda: list(DEFAULT_ENTRY_TAGS))

    @field_validator("timezone")
    @classmethod
    def _known_zone(cls, value: str | None) -> str | None:
        if value is not None:
            try:
                ZoneInfo(value)
            except (ZoneInfoNotFoundError, ValueError) as exc:
                msg = f"Unknown time zone: {value!r}"
                raise ValueError(msg) from exc
        return value

    def zone(self) -> tzinfo | None:
        return ZoneInfo(self.timezone) if self.timezone else None


class JournalConfig(BaseModel):
    """Root configuration composing all sections."""

    model_config = {"frozen": True}

    vault: VaultConfig = Field(default_factory=VaultConfig)
    codec: CodecConfig = Field(default_factory=CodecConfig)
