"""Tests for structlog configuration."""

from __future__ import annotations

import json
import logging
from collections.abc import Generator

import pytest
import structlog

from journalfm.config.logging import configure_logging


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore root logger state after each test."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    jfm = logging.getLogger("journalfm")
    jfm_level = jfm.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    jfm.setLevel(jfm_level)


class TestConfigureLogging:
    def test_verbose_enables_debug(self) -> None:
        configure_logging(verbose=True, log_json=False)
        assert logging.getLogger("journalfm").level == logging.DEBUG
        assert logging.getLogger().level == logging.WARNING

    def test_non_verbose_sets_warning(self) -> None:
        configure_logging(verbose=False, log_json=False)
        assert logging.getLogger("journalfm").level == logging.WARNING

    def test_json_mode_output(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        structlog.get_logger("journalfm.test").warning("json test", answer=42)
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["event"] == "json test"
        assert parsed["answer"] == 42
        assert parsed["level"] == "warning"
        assert parsed["logger"] == "journalfm.test"
        assert "timestamp" in parsed

    def test_codec_debug_lines_are_structured(self, capfd: pytest.CaptureFixture[str]) -> None:
        from journalfm.domain.entry import Entry

        configure_logging(verbose=True, log_json=True)
        assert Entry.parse("no header here", "x.md") is None

        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["event"] == "No frontmatter block in x.md"
        assert parsed["level"] == "debug"
        assert parsed["logger"] == "journalfm.domain.schema"

    def test_quiet_by_default(self, capfd: pytest.CaptureFixture[str]) -> None:
        from journalfm.domain.entry import Entry

        configure_logging(verbose=False, log_json=True)
        Entry.parse("no header here", "x.md")
        assert capfd.readouterr().err == ""

    def test_idempotent_calls(self) -> None:
        configure_logging(verbose=True, log_json=False)
        configure_logging(verbose=True, log_json=True)
        assert len(logging.getLogger().handlers) == 1
