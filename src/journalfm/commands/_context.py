"""AppContext: shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``. Provides the record service and centralized result
emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from journalfm.output.formatters import format_result

if TYPE_CHECKING:
    from journalfm.config.settings import JournalSettings
    from journalfm.services.records import RecordService
    from journalfm.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: JournalSettings) -> None:
        self.settings = settings
        self._service: RecordService | None = None

        from journalfm.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def service(self) -> RecordService:
        """The record service (created lazily on first access)."""
        if self._service is None:
            from journalfm.services.records import RecordService

            self._service = RecordService(self.settings)
        return self._service

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success: writes to stdout; warnings go to stderr in human mode.
        * Failure: writes to stderr, exits with code 1.
        """
        json_output = self.settings.json_output
        output = format_result(result, json_output=json_output)
        if result.ok:
            click.echo(output)
            if not json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
