"""Subcommand modules for airules.

Provides register_commands() which uses deferred imports to keep
``airules --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the standalone commands on the root CLI group."""
    from airules.commands.init_cmd import init_cmd
    from airules.commands.list_cmd import list_cmd
    from airules.commands.show import show

    cli.add_command(show)
    cli.add_command(list_cmd)
    cli.add_command(init_cmd)
