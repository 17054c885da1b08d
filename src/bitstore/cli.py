"""Root CLI group for bitstore with global flags and command registration."""

from __future__ import annotations

import click

from bitstore import __version__
from bitstore.commands import register_commands
from bitstore.commands._base import BitstoreGroup
from bitstore.commands._context import AppContext


@click.group(cls=BitstoreGroup, invoke_without_command=True)
@click.version_option(
    version=__version__,
    prog_name="bitstore",
    message="%(prog)s version: %(version)s",
)
@click.option(
    "-c",
    "--config",
    "config_path",
    default=None,
    metavar="PATH",
    help="Location of config file (default: ~/.bitstore).",
)
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging and error tracebacks.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.pass_context
def cli(
    ctx: click.Context,
    config_path: str | None,
    json_output: bool,
    verbose: bool,
    log_json: bool,
) -> None:
    """bitstore: command-line client for the Bitstore storage service."""
    ctx.obj = AppContext(
        config_path=config_path,
        json_output=json_output,
        verbose=verbose,
        log_json=log_json,
    )
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
