"""Root CLI group for rangectl with global flags and command registration."""

from __future__ import annotations

import click

from rangectl import __version__
from rangectl.commands import register_commands
from rangectl.commands._context import AppContext
from rangectl.config.settings import RangeSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="rangectl")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug logs.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.option("-z", "--zone", default=None, help="Zone used when a command gets none.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
    zone: str | None,
) -> None:
    """rangectl — timezone-aware date-time range toolkit."""
    ctx.ensure_object(dict)
    settings = RangeSettings.from_cli(
        config_path=config_path,
        json_output=json_output or None,
        quiet=quiet or None,
        verbose=verbose or None,
        log_json=log_json or None,
        zone=zone,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
