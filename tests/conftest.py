"""Shared pytest fixtures for journalfm tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def vault_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Temporary vault with the standard top-level folders.

    A ``journalfm.toml`` pins the codec time zone so CLI output is stable.
    """
    monkeypatch.delenv("JOURNALFM_CONFIG", raising=False)
    for folder in ("Entries", "People", "Places", "Media"):
        (tmp_path / folder).mkdir()
    (tmp_path / "journalfm.toml").write_text(
        '[codec]\ntimezone = "America/Los_Angeles"\n', encoding="utf-8"
    )
    return tmp_path


@pytest.fixture
def _isolated_vault(vault_root: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to the temp vault root so the CLI discovers its config.

    Use via ``@pytest.mark.usefixtures("_isolated_vault")`` on command test
    classes.
    """
    monkeypatch.chdir(vault_root)
