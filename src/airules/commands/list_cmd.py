"""Command: list every rule document (named list_cmd to avoid shadowing builtins)."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from airules.commands._base import RulesCommand

if TYPE_CHECKING:
    from airules.commands._context import AppContext


@click.command(
    "list",
    cls=RulesCommand,
    examples="""\
  airules list
  airules --root ~/rules list
  airules --json list""",
)
@click.pass_obj
def list_cmd(app: AppContext) -> None:
    """List all available rules, one relative path per line."""
    from airules.services.lookup import LookupService

    app.emit(LookupService(app.library).list_rules())
