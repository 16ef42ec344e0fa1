"""Root CLI group: global flags, settings and command registration."""

from __future__ import annotations

from pathlib import Path

import click

from journalfm import __version__
from journalfm.commands import register_commands
from journalfm.commands._context import AppContext
from journalfm.config.settings import JournalSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="journalfm")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Use this config file.")
@click.option(
    "--vault",
    "vault_root",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Vault directory (default: where journalfm.toml is found, else CWD).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
    vault_root: Path | None,
) -> None:
    """Read, normalize and place the markdown records of a journal vault."""
    ctx.obj = AppContext(
        JournalSettings.from_cli(
            config_path=config_path,
            vault_root=vault_root,
            json_output=json_output,
            verbose=verbose,
            log_json=log_json,
        )
    )
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
