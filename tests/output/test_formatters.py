"""Tests for human and JSON result rendering."""

import json

from journalfm.output.console import create_console, get_output
from journalfm.output.formatters import format_result
from journalfm.services.result import ServiceResult


def _ok(op: str = "test", **data: object) -> ServiceResult:
    return ServiceResult(ok=True, op=op, data=dict(data))


class TestFormatResultJSON:
    def test_json_mode_returns_valid_json(self) -> None:
        output = format_result(_ok("sanitize", id="Ada"), json_output=True)
        data = json.loads(output)
        assert data["ok"] is True
        assert data["op"] == "sanitize"
        assert data["data"]["id"] == "Ada"

    def test_json_mode_error(self) -> None:
        result = ServiceResult.failure("show", "NOT_FOUND", "Bad")
        data = json.loads(format_result(result, json_output=True))
        assert data["ok"] is False
        assert data["error"]["code"] == "NOT_FOUND"


class TestFormatResultHuman:
    def test_ok_lines(self) -> None:
        output = format_result(_ok("locate", directory="People", in_place=True))
        assert output.splitlines() == ["OK: locate", "  directory: People", "  in_place: True"]

    def test_nested_values_as_compact_json(self) -> None:
        output = format_result(_ok("list", items=[{"id": "Ada"}]))
        assert '  items: [{"id":"Ada"}]' in output

    def test_markup_is_escaped(self) -> None:
        output = format_result(_ok("show", path="[[Home]] [bold]x[/bold]"))
        assert "[[Home]] [bold]x[/bold]" in output

    def test_error_line(self) -> None:
        result = ServiceResult.failure("show", "NOT_FOUND", "Record file not found")
        assert format_result(result) == "ERROR: show - Record file not found"


class TestConsole:
    def test_renders_to_buffer(self) -> None:
        console = create_console()
        console.print("hello")
        assert get_output(console) == "hello\n"
