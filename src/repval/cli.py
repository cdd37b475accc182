"""Root CLI group for repval with global flags and command registration."""

from __future__ import annotations

import click
from pydantic import ValidationError

from repval import __version__
from repval.commands import register_commands
from repval.commands._base import RvGroup
from repval.commands._context import AppContext
from repval.config.settings import RepvalSettings
from repval.domain.kinds import ValueKind


@click.group(
    cls=RvGroup,
    invoke_without_command=True,
    examples="""\
  repval demo
  repval read --kind float --low 5.5 --high 42.8
  repval --element-kind character demo
  REPVAL_ELEMENT__KIND=string repval demo""",
)
@click.version_option(version=__version__, prog_name="repval")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON result on stdout.")
@click.option("-q", "--quiet", is_flag=True, help="Print only the accepted value.")
@click.option("-v", "--verbose", is_flag=True, help="Log every rejected input.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("--no-color", is_flag=True, help="Disable colored prompts.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.option(
    "--element-kind",
    type=click.Choice([k.value for k in ValueKind]),
    default=None,
    help="Bind the element type to this kind (default bounds).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    no_color: bool,
    config_path: str | None,
    element_kind: str | None,
) -> None:
    """repval — repetition type-checking and range-checking input validation."""
    ctx.ensure_object(dict)
    try:
        settings = RepvalSettings.from_cli(
            config_path=config_path,
            element_kind=element_kind,
            json_output=json_output,
            quiet=quiet,
            verbose=verbose,
            log_json=log_json,
            no_color=no_color,
        )
    except ValidationError as exc:
        raise click.ClickException(f"Invalid configuration: {exc}") from exc
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
