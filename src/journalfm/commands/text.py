"""Commands: sanitize names and decode transcript time ranges."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from journalfm.commands._base import JfmCommand
from journalfm.services.records import RecordService

if TYPE_CHECKING:
    from journalfm.commands._context import AppContext


@click.command(
    cls=JfmCommand,
    examples="""\
  journalfm sanitize 'Star Wars: A New Hope'""",
)
@click.argument("name")
@click.pass_obj
def sanitize(app: AppContext, name: str) -> None:
    """Print the file-safe id for NAME."""
    app.emit(RecordService.sanitize(name))


@click.command(
    cls=JfmCommand,
    examples="""\
  journalfm ranges 0.0-5.0,5.5-9.25""",
)
@click.argument("encoded")
@click.pass_obj
def ranges(app: AppContext, encoded: str) -> None:
    """Decode a compact transcript time-range string."""
    app.emit(RecordService.ranges(encoded))
