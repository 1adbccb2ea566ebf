"""Root CLI group for fluentlink with global flags and command registration."""

from __future__ import annotations

import click
from pydantic import ValidationError

from fluentlink import __version__
from fluentlink.commands import register_commands
from fluentlink.commands._context import AppContext
from fluentlink.config.settings import FluentSettings
from fluentlink.domain.errors import FluentError


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="fluentlink")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """fluentlink — inspect locale-aware links for a page tree."""
    ctx.ensure_object(dict)
    try:
        settings = FluentSettings.from_cli(
            config_path=config_path,
            json_output=json_output,
            verbose=verbose,
            log_json=log_json,
        )
    except (FluentError, ValidationError) as exc:
        raise click.ClickException(str(exc)) from exc
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
