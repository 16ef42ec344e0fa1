"""Subcommand modules for journalfm.

Provides register_commands() which uses deferred imports to keep
``journalfm --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from journalfm.commands.records import fmt, list_cmd, locate, show
    from journalfm.commands.text import ranges, sanitize

    cli.add_command(show)
    cli.add_command(fmt)
    cli.add_command(locate)
    cli.add_command(list_cmd)
    cli.add_command(sanitize)
    cli.add_command(ranges)
