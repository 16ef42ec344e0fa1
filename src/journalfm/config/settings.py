"""Unified settings: CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs: CLI flags passed by Click
  2. Env vars: ``JOURNALFM_*`` prefix, ``__`` between section and key
     (``JOURNALFM_CODEC__TIMEZONE=Europe/Berlin``)
  3. TOML file: ``journalfm.toml`` discovered via walk-up
  4. Code defaults: baked into the section models
"""

from __future__ import annotations

import threading
import tomllib
from datetime import tzinfo
from pathlib import Path
from typing import Any

import click
from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from journalfm.config.discovery import find_config
from journalfm.config.models import CodecConfig, VaultConfig
from journalfm.domain.types import RecordKind


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Settings source backed by one parsed ``journalfm.toml``."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path is not None:
            try:
                self._data = tomllib.loads(toml_path.read_text(encoding="utf-8"))
            except tomllib.TOMLDecodeError as exc:
                msg = f"Invalid TOML in {toml_path}: {exc}"
                raise click.ClickException(msg) from exc

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        return self._data.get(field_name), field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        return self._data


# pydantic-settings builds sources from the class, so the path discovered
# by from_cli() reaches settings_customise_sources() through here.
_pending = threading.local()


class JournalSettings(BaseSettings):
    """Settings for the journalfm CLI, stored on the Click context.

    Attributes:
        vault_root: Vault directory (``--vault``, else the directory holding
            ``journalfm.toml``, else CWD).
        config_path: The TOML file in effect, if any.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "JOURNALFM_",
        "env_nested_delimiter": "__",
    }

    vault_root: Path = Field(default_factory=Path.cwd)
    config_path: Path | None = None

    json_output: bool = False
    verbose: bool = False
    log_json: bool = False

    vault: VaultConfig = Field(default_factory=VaultConfig)
    codec: CodecConfig = Field(default_factory=CodecConfig)

    @property
    def tz(self) -> tzinfo | None:
        """Zone for entry paths and written timestamps (None: local)."""
        return self.codec.zone()

    @property
    def directories(self) -> dict[RecordKind, str]:
        return self.vault.directories()

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, getattr(_pending, "toml_path", None)),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        vault_root: Path | None = None,
        **cli_flags: Any,
    ) -> JournalSettings:
        """Build settings for one CLI invocation.

        Raises:
            click.ClickException: If an explicit *config_path* does not
                exist or the TOML cannot be parsed.
        """
        if config_path:
            toml_path: Path | None = Path(config_path)
            if not toml_path.is_file():
                msg = f"Config file not found: {config_path}"
                raise click.ClickException(msg)
        else:
            toml_path = find_config(vault_root)

        if vault_root is None:
            vault_root = toml_path.parent if toml_path else Path.cwd()

        _pending.toml_path = toml_path
        try:
            return cls(vault_root=vault_root, config_path=toml_path, **cli_flags)
        finally:
            _pending.toml_path = None
