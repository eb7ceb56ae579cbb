"""Command: print a rule document by alias or path."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from airules.commands._base import RulesCommand

if TYPE_CHECKING:
    from airules.commands._context import AppContext


@click.command(
    cls=RulesCommand,
    examples="""\
  airules ascii
  airules claude
  airules ascii-art/tables.md
  airules ascii-art/diagrams
  airules show list
  airules --strict show missing-rule""",
)
@click.argument("query", required=False, default="")
@click.pass_obj
def show(app: AppContext, query: str) -> None:
    """Print the rule QUERY names: an alias, a path, or a path without .md.

    The command name is optional: ``airules QUERY`` does the same thing.
    """
    from airules.services.lookup import LookupService

    app.emit(LookupService(app.library).show(query))
