"""Root CLI group for airules with global flags and command registration."""

from __future__ import annotations

import click
from pydantic import ValidationError

from airules import __version__
from airules.commands import register_commands
from airules.commands._base import RulesGroup
from airules.commands._context import AppContext
from airules.config.settings import RulesSettings


@click.group(
    cls=RulesGroup,
    default_command="show",
    invoke_without_command=True,
    examples="""\
  airules
  airules ascii
  airules ascii-art/tables.md
  airules list
  airules --root ~/airules claude
  airules init ~/airules""",
)
@click.version_option(version=__version__, prog_name="airules")
@click.option(
    "--root",
    "root",
    default=None,
    type=click.Path(file_okay=False, path_type=str),
    help="Rules directory (default: from airules.toml, else the current directory).",
)
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("--strict", is_flag=True, help="Exit 1 when a rule is not found.")
@click.pass_context
def cli(
    ctx: click.Context,
    root: str | None,
    config_path: str | None,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    strict: bool,
) -> None:
    """airules: quick access to AI assistant rules and guidelines.

    Run with an alias (``ascii``, ``claude``) or a path relative to the
    rules directory to print that rule.
    """
    ctx.ensure_object(dict)
    try:
        settings = RulesSettings.from_cli(
            config_path=config_path,
            root=root,
            json_output=json_output,
            quiet=quiet,
            verbose=verbose,
            log_json=log_json,
            strict=strict,
        )
    except ValidationError as exc:
        msg = f"Invalid configuration: {exc}"
        raise click.ClickException(msg) from exc
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        from airules.services.lookup import LookupService

        ctx.obj.emit(LookupService(ctx.obj.library).usage())


register_commands(cli)
