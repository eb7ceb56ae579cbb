"""Command: rules library initialization (named init_cmd to avoid shadowing builtins)."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from airules.commands._base import RulesCommand

if TYPE_CHECKING:
    from airules.commands._context import AppContext

_INIT_EXAMPLES = """\
  airules init
  airules init ~/airules --name team-rules
  airules --root ~/airules init
  airules --json init /tmp/rules"""


@click.command("init", cls=RulesCommand, examples=_INIT_EXAMPLES)
@click.argument("path", required=False, default=None)
@click.option("--name", default=None, help="Library name (default: directory name).")
@click.pass_obj
def init_cmd(app: AppContext, path: str | None, name: str | None) -> None:
    """Create a starter rules library with the standard layout.

    PATH defaults to the rules directory in effect: --root, AIRULES_ROOT,
    the directory of a discovered airules.toml, or the current directory.
    """
    from airules.services.init import InitService

    target = Path(path).expanduser() if path is not None else app.settings.root
    app.emit(InitService.init_library(target, name=name))
