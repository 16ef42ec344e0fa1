"""Commands: show, fmt, locate and list record files."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from journalfm.commands._base import KIND_CHOICE, JfmCommand
from journalfm.domain.types import RecordKind

if TYPE_CHECKING:
    from journalfm.commands._context import AppContext

_FILE = click.Path(path_type=Path, dir_okay=False)


@click.command(
    cls=JfmCommand,
    examples="""\
  journalfm show person "People/Ada Lovelace.md"
  journalfm --json show entry Entries/2024/01-January/15/202401151000.md""",
)
@click.argument("kind", type=KIND_CHOICE)
@click.argument("path", type=_FILE)
@click.pass_obj
def show(app: AppContext, kind: str, path: Path) -> None:
    """Parse a record file and print its fields."""
    app.emit(app.service.show(RecordKind(kind), path))


@click.command(
    "fmt",
    cls=JfmCommand,
    examples="""\
  journalfm fmt place Places/Blue\\ Bottle.md
  journalfm fmt --check media Media/Dune.md""",
)
@click.option("--check", is_flag=True, help="Report non-canonical files without writing.")
@click.argument("kind", type=KIND_CHOICE)
@click.argument("path", type=_FILE)
@click.pass_obj
def fmt(app: AppContext, check: bool, kind: str, path: Path) -> None:
    """Rewrite a record file in canonical form."""
    app.emit(app.service.format(RecordKind(kind), path, check=check))


@click.command(
    cls=JfmCommand,
    examples="""\
  journalfm locate entry Entries/2024/01-January/15/202401151000.md""",
)
@click.argument("kind", type=KIND_CHOICE)
@click.argument("path", type=_FILE)
@click.pass_obj
def locate(app: AppContext, kind: str, path: Path) -> None:
    """Show where a record belongs according to its content."""
    app.emit(app.service.locate(RecordKind(kind), path))


@click.command(
    "list",
    cls=JfmCommand,
    examples="""\
  journalfm list person
  journalfm --json list entry""",
)
@click.argument("kind", type=KIND_CHOICE)
@click.pass_obj
def list_cmd(app: AppContext, kind: str) -> None:
    """List every readable record of KIND in the vault."""
    app.emit(app.service.list_records(RecordKind(kind)))
